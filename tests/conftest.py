from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

import pytest
from dateutil import tz

from nhl_results.config import AppConfig
from nhl_results.scores_client import FetchError


EASTERN = tz.gettz("America/New_York")
FIXED_NOW = datetime(2025, 2, 23, 15, 0, tzinfo=EASTERN)


class FakeScoresClient:
    """Stands in for ScoresClient; returns canned buckets or raises."""

    def __init__(self, buckets: Optional[List[Dict[str, Any]]] = None, error: Optional[Exception] = None):
        self.buckets = buckets or []
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def fetch_scores(self, start_date: str, end_date: str) -> List[Dict[str, Any]]:
        self.calls.append((start_date, end_date))
        if self.error is not None:
            raise self.error
        return self.buckets


def make_game(
    *,
    home: str = "TOR",
    away: str = "BOS",
    state: str = "FINAL",
    start: str = "2025-02-24T00:00:00Z",
    scores: Optional[Dict[str, int]] = None,
    **extra: Any,
) -> Dict[str, Any]:
    names = {"TOR": "Maple Leafs", "BOS": "Bruins", "MIN": "Wild", "DAL": "Stars"}
    game: Dict[str, Any] = {
        "startTime": start,
        "status": {"state": state},
        "teams": {
            "home": {"abbreviation": home, "teamName": names.get(home, home)},
            "away": {"abbreviation": away, "teamName": names.get(away, away)},
        },
        "scores": scores if scores is not None else {},
    }
    game.update(extra)
    return game


def bucket(date: str, *games: Dict[str, Any]) -> Dict[str, Any]:
    return {"date": {"raw": date, "pretty": date}, "games": list(games)}


@pytest.fixture()
def live_config() -> AppConfig:
    return AppConfig(
        tz="America/New_York",
        default_team="TOR",
        use_test_dates=False,
        test_today_date="",
        test_yesterday_date="",
    )


@pytest.fixture()
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture()
def make_client(live_config, fixed_clock):
    """Build a Flask test client around a FakeScoresClient."""
    from app import create_app

    def _make(buckets=None, error=None, cfg=None):
        fake = FakeScoresClient(buckets=buckets, error=error)
        flask_app = create_app(cfg or live_config, client=fake, clock=fixed_clock)
        flask_app.config.update(TESTING=True)
        return flask_app.test_client(), fake

    return _make


@pytest.fixture()
def fetch_error() -> FetchError:
    return FetchError("connection refused")
