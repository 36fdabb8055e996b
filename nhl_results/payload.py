# nhl_results/payload.py
"""
Small accessors for raw scores API game objects.

Shared by the game selector, the status classifier and the box score builder.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple


def safe_int(v, default: int = 0) -> int:
    """Convert to int, returning default for None or non-numeric values."""
    try:
        return int(v)
    except Exception:
        return default


def team_abbrevs(game: Dict[str, Any]) -> Tuple[Optional[str], Optional[str]]:
    """Return (home, away) abbreviations."""
    teams = game.get("teams") or {}
    home = (teams.get("home") or {}).get("abbreviation")
    away = (teams.get("away") or {}).get("abbreviation")
    return home, away


def game_state(game: Dict[str, Any]) -> str:
    """Uppercase status.state, or "" when absent."""
    state = (game.get("status") or {}).get("state")
    return state.strip().upper() if isinstance(state, str) else ""
