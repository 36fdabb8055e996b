# nhl_results/config.py
"""
Configuration for the NHL results app.

This module centralizes all tunable settings (scores API base URL, reference
timezone, fallback team, HTTP timeout, and the test-mode reference dates).
Values come from the environment; a local .env file is loaded first if present.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os

from dotenv import load_dotenv

from .teams import NHL_TEAMS


load_dotenv()

FALLBACK_TEAM = "TOR"


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, returning default on missing/invalid values."""
    try:
        return int(os.getenv(name, str(default)))
    except Exception:
        return default


def _env_bool(name: str, default: bool = False) -> bool:
    """
    Read a boolean environment variable.

    Only the literal "true" (any case) turns a flag on, matching how the
    USE_TEST_DATES switch has always been documented.
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() == "true"


def _env_str(name: str, default: str = "") -> str:
    """Read a string environment variable, stripped."""
    return (os.getenv(name) or default).strip()


@dataclass(frozen=True)
class AppConfig:
    """
    Immutable app configuration.

    Notes on test mode:
      - use_test_dates switches "today"/"yesterday" to fixed dates.
      - test_today_date / test_yesterday_date are YYYY-MM-DD strings and are
        ignored unless use_test_dates is set.
    """

    # Core settings
    port: int = field(default_factory=lambda: _env_int("PORT", 3000))
    scores_api_base: str = field(
        default_factory=lambda: _env_str("SCORES_API_BASE", "https://nhl-score-api.herokuapp.com")
    )
    tz: str = field(default_factory=lambda: _env_str("SCORES_TZ", "America/New_York"))
    default_team: str = field(default_factory=lambda: _env_str("DEFAULT_TEAM", FALLBACK_TEAM).upper())
    http_timeout_seconds: int = field(default_factory=lambda: _env_int("HTTP_TIMEOUT_SECONDS", 10))
    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO").upper())

    # Test mode
    use_test_dates: bool = field(default_factory=lambda: _env_bool("USE_TEST_DATES"))
    test_today_date: str = field(default_factory=lambda: _env_str("TEST_TODAY_DATE"))
    test_yesterday_date: str = field(default_factory=lambda: _env_str("TEST_YESTERDAY_DATE"))

    def __post_init__(self):
        """
        Normalize values that must match a registry.

        An unknown DEFAULT_TEAM falls back to TOR so requests never query a
        code the scores API doesn't know.
        """
        # dataclass frozen => use object.__setattr__
        code = (self.default_team or "").strip().upper()
        object.__setattr__(self, "default_team", code if code in NHL_TEAMS else FALLBACK_TEAM)
