# nhl_results/handlers/results_handler.py
"""
Handler/controller responsible for building template contexts.

Keeps Flask routes simple by concentrating assembly logic here. Every method
returns a context even when the scores API fails; errors become messages.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Dict, Optional

from ..dates import ReferenceDates, canonical_date, parse_date_string
from ..scores_client import FetchError
from ..services.boxscore_service import build_box_score
from ..services.games_service import GamesService
from ..services.status_service import REST_DAY, classify, classify_yesterday
from ..teams import team_display_name


_logger = logging.getLogger(__name__)

TODAY_ERROR = "Error loading game data"
YESTERDAY_ERROR = "Error loading yesterday's data"


def no_recent_games_message(team_code: str) -> str:
    return f"No recent games found for {team_display_name(team_code)}"


def fetch_error_message(team_code: str) -> str:
    return f"Unable to fetch game data for {team_display_name(team_code)}. Please try again later."


@dataclass
class ResultsHandler:
    """Orchestrates date resolution, game lookup and formatting per route."""

    games_service: GamesService
    reference_dates: ReferenceDates

    @property
    def tz_name(self) -> str:
        return self.reference_dates.tz_name

    def build_today(self, team_code: str) -> Dict[str, Any]:
        """Context for the "did they win today" page."""
        target = canonical_date(self.reference_dates.today(), self.tz_name)
        ctx = self._base_context(team_code, target, is_yesterday=False)

        try:
            game = self.games_service.find_game(team_code, target)
        except FetchError as exc:
            _logger.error("Error fetching game data for %s on %s: %s", team_code, target, exc)
            ctx.update(game_status=TODAY_ERROR, show_summary_button=False)
            return ctx

        status = classify(game, team_code, REST_DAY, self.tz_name)
        ctx.update(game_status=status.text, show_summary_button=status.show_summary)
        return ctx

    def build_yesterday(self, team_code: str) -> Dict[str, Any]:
        """Context for the "did they win yesterday" page."""
        target = canonical_date(self.reference_dates.yesterday(), self.tz_name)
        ctx = self._base_context(team_code, target, is_yesterday=True)

        try:
            game = self.games_service.find_game(team_code, target)
        except FetchError as exc:
            _logger.error("Error fetching yesterday's data for %s on %s: %s", team_code, target, exc)
            ctx.update(game_status=YESTERDAY_ERROR, show_summary_button=False)
            return ctx

        status = classify_yesterday(game, team_code, self.tz_name)
        ctx.update(game_status=status.text, show_summary_button=status.show_summary)
        return ctx

    def resolve_score_date(self, raw: Optional[str]) -> str:
        """
        Date for the score page.

        Missing or malformed values fall back to the current canonical date.
        """
        parsed = parse_date_string(raw, self.tz_name)
        if parsed is not None:
            return canonical_date(parsed, self.tz_name)
        return canonical_date(self.reference_dates.now(), self.tz_name)

    def build_score(self, team_code: str, raw_date: Optional[str]) -> Dict[str, Any]:
        """Context for the box score page."""
        target = self.resolve_score_date(raw_date)
        yesterday = canonical_date(self.reference_dates.yesterday(), self.tz_name)
        ctx: Dict[str, Any] = {
            "team": team_code,
            "team_name": team_display_name(team_code),
            "date": target,
            "is_yesterday": target == yesterday,
            "box_score": None,
            "summary": None,
            "video_recap_link": None,
        }

        try:
            game = self.games_service.find_game(team_code, target)
        except FetchError as exc:
            _logger.error("Error fetching game summary for %s on %s: %s", team_code, target, exc)
            ctx["summary"] = fetch_error_message(team_code)
            return ctx

        if game is None:
            ctx["summary"] = no_recent_games_message(team_code)
            return ctx

        box = build_box_score(game, team_code)
        ctx["box_score"] = box
        ctx["video_recap_link"] = box.video_recap_link
        return ctx

    def _base_context(self, team_code: str, target: str, is_yesterday: bool) -> Dict[str, Any]:
        return {
            "team": team_code,
            "team_name": team_display_name(team_code),
            "date": target,
            "is_yesterday": is_yesterday,
        }
