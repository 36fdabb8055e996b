# nhl_results/models.py
"""
Domain models for the results pages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence


@dataclass(frozen=True)
class GameStatus:
    """The short status line shown on the today/yesterday page."""
    text: str
    show_summary: bool = False


@dataclass(frozen=True)
class TeamLine:
    """One side of the box-score header."""
    name: str
    abbr: str
    score: int
    selected: bool


@dataclass(frozen=True)
class GoalLine:
    """A single goal within a period."""
    scorer: str
    time: str       # MM:SS within the period
    assists: str    # comma-joined, "" when unassisted
    selected: bool  # scored by the active team


@dataclass(frozen=True)
class PeriodGoals:
    """All goals scored in one period ("1", "2", "3", "OT", ...)."""
    period: str
    goals: Sequence[GoalLine]


@dataclass(frozen=True)
class StatRow:
    """A row of the team stats comparison table."""
    label: str
    home: int
    away: int


@dataclass(frozen=True)
class BoxScore:
    """All data needed to render the score template for one game."""
    home: TeamLine
    away: TeamLine
    state: str
    periods: Sequence[PeriodGoals] = field(default_factory=tuple)
    stats: Sequence[StatRow] = field(default_factory=tuple)
    video_recap_link: Optional[str] = None
