# nhl_results/scores_client.py
"""
Thin HTTP client wrapper for the nhl-score-api scores endpoint.
"""

from __future__ import annotations

from typing import Any, Dict, List

import requests


class FetchError(Exception):
    """Raised when scores could not be retrieved or decoded."""


class ScoresClient:
    """A minimal client for retrieving day buckets from the scores API."""

    def __init__(self, base_url: str, timeout: int = 10) -> None:
        """Store the base URL and build request headers."""
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._headers = {"User-Agent": "nhl-results/1.0"}

    def get_json(self, path: str, params: Dict[str, str] | None = None) -> Any:
        """
        Execute a GET request to base_url + path and return parsed JSON.

        Raises:
            FetchError on network failures, non-2xx responses or invalid JSON.
        """
        url = f"{self.base_url}{path}"
        try:
            r = requests.get(url, params=params, timeout=self.timeout, headers=self._headers)
            r.raise_for_status()
            return r.json()
        except requests.RequestException as exc:
            raise FetchError(str(exc)) from exc
        except ValueError as exc:
            raise FetchError(f"Invalid JSON from {url}: {exc}") from exc

    def fetch_scores(self, start_date: str, end_date: str) -> List[Dict[str, Any]]:
        """
        Fetch day buckets for an inclusive YYYY-MM-DD window.

        Each bucket looks like {"date": {...}, "games": [...]}. An empty list is
        a valid answer (no games in the window).
        """
        data = self.get_json("/api/scores", params={"startDate": start_date, "endDate": end_date})
        if not isinstance(data, list):
            raise FetchError(f"Unexpected scores payload type: {type(data).__name__}")
        return data
