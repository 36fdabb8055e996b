# nhl_results/services/games_service.py
"""
Game lookup logic.

Responsibilities:
  - compute the query window around a target day
  - fetch day buckets from the scores API
  - flatten buckets into one game list
  - keep the active team's games and pick the one played on the target day
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Dict, Iterable, List, Optional

from ..dates import canonical_date, date_window
from ..payload import team_abbrevs
from ..scores_client import ScoresClient


_logger = logging.getLogger(__name__)


def flatten_games(buckets: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Concatenate the games of every day bucket, preserving order."""
    out: List[Dict[str, Any]] = []
    for day in buckets or ():
        if not isinstance(day, dict):
            continue
        games = day.get("games")
        if isinstance(games, list):
            out.extend(g for g in games if isinstance(g, dict))
    return out


def games_for_team(games: Iterable[Dict[str, Any]], team_code: str) -> List[Dict[str, Any]]:
    """Keep games where the team is either home or away."""
    return [g for g in games if team_code in team_abbrevs(g)]


def game_date(game: Dict[str, Any], tz_name: str) -> Optional[str]:
    """Canonical date of a game's start time, or None when it can't be parsed."""
    start = game.get("startTime")
    if not start:
        return None
    try:
        return canonical_date(start, tz_name)
    except (TypeError, ValueError):
        return None


def pick_game_for_date(
    team_games: Iterable[Dict[str, Any]],
    target_date: str,
    tz_name: str,
) -> Optional[Dict[str, Any]]:
    """
    Return the first game whose start falls on `target_date`.

    Strict: a game elsewhere in the window never stands in for the target day.
    """
    for g in team_games:
        if game_date(g, tz_name) == target_date:
            return g
    return None


@dataclass
class GamesService:
    """Service responsible for finding a team's game on a given day."""

    client: ScoresClient
    tz_name: str
    days_before: int = 1
    days_after: int = 1

    def find_game(self, team_code: str, target_date: str) -> Optional[Dict[str, Any]]:
        """
        Fetch the window around `target_date` and return the team's game that day.

        Raises:
            FetchError if the scores API call fails.
        """
        start, end = date_window(target_date, self.days_before, self.days_after, self.tz_name)
        _logger.debug("Querying scores %s..%s for %s (target %s)", start, end, team_code, target_date)

        buckets = self.client.fetch_scores(start, end)
        games = flatten_games(buckets)
        team_games = games_for_team(games, team_code)
        _logger.debug("Fetched %d games, %d involving %s", len(games), len(team_games), team_code)

        selected = pick_game_for_date(team_games, target_date, self.tz_name)
        if selected is None:
            _logger.debug("No game for %s on %s", team_code, target_date)
        else:
            _logger.debug("Selected game for %s on %s starting %s", team_code, target_date, selected.get("startTime"))
        return selected
