# nhl_results/services/boxscore_service.py
"""
Box score assembly.

Builds the structured summary rendered by the score template:
  - header (both teams + score, active team flagged)
  - goals grouped by period
  - team stats comparison table
  - optional video recap link
"""

from __future__ import annotations

from typing import Any, Dict, List

from ..models import BoxScore, GoalLine, PeriodGoals, StatRow, TeamLine
from ..payload import game_state, safe_int


# (label, gameStats key, sub-key for nested per-team dicts)
STAT_ROWS = (
    ("Blocked Shots", "blocked", None),
    ("Giveaways", "giveaways", None),
    ("Hits", "hits", None),
    ("Penalty Minutes", "pim", None),
    ("Power Play Goals", "powerPlay", "goals"),
    ("Power Play Opportunities", "powerPlay", "opportunities"),
    ("Shots", "shots", None),
    ("Takeaways", "takeaways", None),
)


def format_goal_time(minute: Any, second: Any) -> str:
    """Zero-padded MM:SS."""
    return f"{safe_int(minute):02d}:{safe_int(second):02d}"


def _period_sort_key(item: tuple[int, str]):
    """Numeric periods first in natural order, then OT/SO as first seen."""
    first_seen, period = item
    if period.isdigit():
        return (0, int(period), first_seen)
    return (1, 0, first_seen)


def group_goals_by_period(goals: List[Dict[str, Any]], team_code: str) -> List[PeriodGoals]:
    """Group goals by their period label."""
    grouped: Dict[str, List[GoalLine]] = {}
    for goal in goals or ():
        if not isinstance(goal, dict):
            continue
        period = str(goal.get("period", ""))
        assists = goal.get("assists") or []
        line = GoalLine(
            scorer=(goal.get("scorer") or {}).get("player", ""),
            time=format_goal_time(goal.get("min"), goal.get("sec")),
            assists=", ".join(a.get("player", "") for a in assists if isinstance(a, dict)),
            selected=goal.get("team") == team_code,
        )
        grouped.setdefault(period, []).append(line)

    order = sorted(enumerate(grouped), key=_period_sort_key)
    return [PeriodGoals(period=p, goals=tuple(grouped[p])) for _, p in order]


def stat_value(game_stats: Dict[str, Any], key: str, abbr: str, sub_key: str | None = None) -> int:
    """Look up one team's stat, 0 when absent."""
    per_team = game_stats.get(key) or {}
    if not isinstance(per_team, dict):
        return 0
    value = per_team.get(abbr)
    if sub_key is not None:
        value = value.get(sub_key) if isinstance(value, dict) else None
    return safe_int(value)


def build_stats(game_stats: Dict[str, Any], home_abbr: str, away_abbr: str) -> List[StatRow]:
    """Stats table rows in fixed display order."""
    game_stats = game_stats if isinstance(game_stats, dict) else {}
    return [
        StatRow(
            label=label,
            home=stat_value(game_stats, key, home_abbr, sub_key),
            away=stat_value(game_stats, key, away_abbr, sub_key),
        )
        for label, key, sub_key in STAT_ROWS
    ]


def _team_line(side: Dict[str, Any], scores: Dict[str, Any], team_code: str) -> TeamLine:
    """Header line for one side of the game."""
    abbr = side.get("abbreviation", "")
    return TeamLine(
        name=side.get("teamName", abbr),
        abbr=abbr,
        score=safe_int(scores.get(abbr)),
        selected=abbr == team_code,
    )


def build_box_score(game: Dict[str, Any], team_code: str) -> BoxScore:
    """Build the BoxScore for a selected game."""
    teams = game.get("teams") or {}
    scores = game.get("scores") or {}
    home = _team_line(teams.get("home") or {}, scores, team_code)
    away = _team_line(teams.get("away") or {}, scores, team_code)

    return BoxScore(
        home=home,
        away=away,
        state=game_state(game),
        periods=tuple(group_goals_by_period(game.get("goals") or [], team_code)),
        stats=tuple(build_stats(game.get("gameStats") or {}, home.abbr, away.abbr)),
        video_recap_link=(game.get("links") or {}).get("videoRecap"),
    )
