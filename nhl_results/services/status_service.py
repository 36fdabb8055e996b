# nhl_results/services/status_service.py
"""
Turns a selected game into the one-line answer shown on the results page.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..dates import get_tz, to_datetime
from ..models import GameStatus
from ..payload import game_state, safe_int, team_abbrevs


REST_DAY = "- REST DAY -"
NO_GAME_YESTERDAY = "- NO GAME YESTERDAY -"
NO_FINAL_YESTERDAY = "No final results for yesterday."


def opponent_code(game: Dict[str, Any], team_code: str) -> Optional[str]:
    """Abbreviation of the team playing against `team_code`."""
    home, away = team_abbrevs(game)
    return home if away == team_code else away


def team_won(game: Dict[str, Any], team_code: str) -> bool:
    """
    True if `team_code` scored more goals than its opponent.

    Missing scores count as 0, and a tie is not a win.
    """
    scores = game.get("scores") or {}
    ours = safe_int(scores.get(team_code))
    theirs = safe_int(scores.get(opponent_code(game, team_code)))
    return ours > theirs


def preview_text(game: Dict[str, Any], tz_name: str) -> str:
    """
    Three lines for an upcoming game:

        Away Name vs Home Name
        2/23/2025
        7:00 PM
    """
    teams = game.get("teams") or {}
    away = (teams.get("away") or {}).get("teamName", "")
    home = (teams.get("home") or {}).get("teamName", "")
    lines = [f"{away} vs {home}"]

    start = game.get("startTime")
    if start:
        dt = to_datetime(start).astimezone(get_tz(tz_name))
        lines.append(f"{dt.month}/{dt.day}/{dt.year}")
        lines.append(dt.strftime("%-I:%M %p"))
    return "\n".join(lines)


def live_text(game: Dict[str, Any]) -> str:
    """Example: "Live - 2nd Period: 05:13"."""
    progress = (game.get("status") or {}).get("progress") or {}
    ordinal = progress.get("currentPeriodOrdinal", "")
    remaining = (progress.get("currentPeriodTimeRemaining") or {}).get("pretty", "")
    return f"Live - {ordinal} Period: {remaining}"


def classify(
    game: Optional[Dict[str, Any]],
    team_code: str,
    no_game_text: str,
    tz_name: str,
) -> GameStatus:
    """
    Map a selected game to a GameStatus.

      FINAL   -> "Yes"/"No", summary button enabled
      PREVIEW -> matchup, date and start time
      LIVE    -> current period and clock
      none    -> `no_game_text`
    """
    if game is None:
        return GameStatus(no_game_text)

    state = game_state(game)
    if state == "FINAL":
        return GameStatus("Yes" if team_won(game, team_code) else "No", show_summary=True)
    if state == "PREVIEW":
        return GameStatus(preview_text(game, tz_name))
    if state == "LIVE":
        return GameStatus(live_text(game))
    return GameStatus(no_game_text)


def classify_yesterday(game: Optional[Dict[str, Any]], team_code: str, tz_name: str) -> GameStatus:
    """
    Yesterday only ever reports finals.

    A game still scheduled or in progress gets a fixed notice instead of its
    clock or start time.
    """
    if game is not None and game_state(game) in ("PREVIEW", "LIVE"):
        return GameStatus(NO_FINAL_YESTERDAY)
    return classify(game, team_code, NO_GAME_YESTERDAY, tz_name)
