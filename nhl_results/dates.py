# nhl_results/dates.py
"""
Date helpers.

All day comparisons happen on canonical "YYYY-MM-DD" strings in one reference
timezone (US Eastern by default), so a 7pm Pacific puck drop still belongs to
the Eastern calendar day the league lists it under.

Also home to ReferenceDates, the explicit object that answers "what is today /
yesterday" for a request, honoring test-mode overrides.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
import logging
import re
from typing import Callable, Optional, Tuple, Union

from dateutil import tz as dateutil_tz

from .config import AppConfig


_logger = logging.getLogger(__name__)

DEFAULT_TZ = "America/New_York"

# Test mode "today" when no TEST_TODAY_DATE is configured.
DEFAULT_TEST_TODAY = "2025-02-23"

Instant = Union[datetime, date, str]

DAY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def get_tz(tz_name: str = DEFAULT_TZ):
    """Return a tzinfo for the given IANA name."""
    zone = dateutil_tz.gettz(tz_name)
    if zone is None:
        raise ValueError(f"Unknown timezone: {tz_name}")
    return zone


def to_datetime(value: Instant) -> datetime:
    """
    Coerce an ISO-8601 string or datetime into an aware datetime.

    Naive values are treated as UTC, which is what the scores API emits.
    """
    if isinstance(value, datetime):
        dt = value
    else:
        dt = datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def parse_day(text: Optional[str]) -> Optional[date]:
    """
    Parse a strict YYYY-MM-DD string into a date.

    Compact (20250223) and ISO week (2025-W09-1) forms are rejected.
    """
    if not isinstance(text, str) or not DAY_RE.match(text.strip()):
        return None
    try:
        return datetime.strptime(text.strip(), "%Y-%m-%d").date()
    except ValueError:
        return None


def local_date(instant: Instant, tz_name: str = DEFAULT_TZ) -> date:
    """Return the calendar date of `instant` in the reference timezone."""
    if isinstance(instant, date) and not isinstance(instant, datetime):
        return instant
    day = parse_day(instant) if isinstance(instant, str) else None
    if day is not None:
        # Already a calendar day.
        return day
    return to_datetime(instant).astimezone(get_tz(tz_name)).date()


def canonical_date(instant: Instant, tz_name: str = DEFAULT_TZ) -> str:
    """Format `instant` as YYYY-MM-DD in the reference timezone."""
    return local_date(instant, tz_name).isoformat()


def parse_date_string(text: Optional[str], tz_name: str = DEFAULT_TZ) -> Optional[datetime]:
    """
    Parse a YYYY-MM-DD string as midnight in the reference timezone.

    Returns None for empty or unparsable input. The UTC offset comes from the
    timezone rules for that date, so DST is honored.
    """
    d = parse_day(text)
    if d is None:
        return None
    return datetime(d.year, d.month, d.day, tzinfo=get_tz(tz_name))


def resolve_reference_date(
    kind: str,
    use_test_dates: bool,
    override: Optional[str],
    fallback: datetime,
    now: datetime,
    tz_name: str = DEFAULT_TZ,
) -> datetime:
    """
    Resolve the reference instant for "today" or "yesterday".

    Test mode:
      - override set and valid -> midnight of that date
      - override set but malformed -> warning, `fallback`
      - no override -> `fallback`
    Live mode:
      - today -> now
      - yesterday -> now minus one day
    """
    if use_test_dates:
        if not override:
            return fallback
        parsed = parse_date_string(override, tz_name)
        if parsed is None:
            _logger.warning("Invalid %s date override %r; using %s", kind, override, canonical_date(fallback, tz_name))
            return fallback
        return parsed

    if kind == "yesterday":
        return now - timedelta(days=1)
    return now


def date_window(target: Instant, before: int = 1, after: int = 1, tz_name: str = DEFAULT_TZ) -> Tuple[str, str]:
    """
    Return (start, end) canonical strings spanning `before` days prior to
    `target` through `after` days past it.

    Arithmetic is done on calendar dates so DST changes never shift a day.
    """
    d = local_date(target, tz_name)
    return (d - timedelta(days=before)).isoformat(), (d + timedelta(days=after)).isoformat()


@dataclass(frozen=True)
class ReferenceDates:
    """
    Answers "what is today / yesterday" for a request.

    Built once at startup. In test mode both dates are fixed; in live mode they
    are computed from `clock` on every call so long-running processes roll over
    at midnight.
    """

    tz_name: str
    use_test_dates: bool
    clock: Callable[[], datetime]
    fixed_today: Optional[datetime] = None
    fixed_yesterday: Optional[datetime] = None

    @classmethod
    def from_config(cls, cfg: AppConfig, clock: Optional[Callable[[], datetime]] = None) -> "ReferenceDates":
        """
        Build reference dates from app config.

        Overrides are parsed here, once, so a malformed value produces a single
        warning rather than one per request.
        """
        tz_name = cfg.tz
        clock = clock or (lambda: datetime.now(tz=get_tz(tz_name)))

        if not cfg.use_test_dates:
            return cls(tz_name=tz_name, use_test_dates=False, clock=clock)

        now = clock()
        default_today = parse_date_string(DEFAULT_TEST_TODAY, tz_name)
        today = resolve_reference_date(
            "today", True, cfg.test_today_date, default_today, now, tz_name
        )
        default_yesterday = parse_date_string(
            (local_date(today, tz_name) - timedelta(days=1)).isoformat(), tz_name
        )
        yesterday = resolve_reference_date(
            "yesterday", True, cfg.test_yesterday_date, default_yesterday, now, tz_name
        )
        return cls(
            tz_name=tz_name,
            use_test_dates=True,
            clock=clock,
            fixed_today=today,
            fixed_yesterday=yesterday,
        )

    def now(self) -> datetime:
        """Return the current instant from the configured clock."""
        return self.clock()

    def today(self) -> datetime:
        """Reference instant for "today"."""
        if self.use_test_dates and self.fixed_today is not None:
            return self.fixed_today
        return self.clock()

    def yesterday(self) -> datetime:
        """Reference instant for "yesterday"."""
        if self.use_test_dates and self.fixed_yesterday is not None:
            return self.fixed_yesterday
        return self.clock() - timedelta(days=1)

    def summary(self) -> None:
        """Log the startup banner."""
        _logger.info("Server Configuration:")
        _logger.info("  Test Mode: %s", "Enabled" if self.use_test_dates else "Disabled (Live Mode)")
        _logger.info("  Today Date: %s", canonical_date(self.today(), self.tz_name))
        _logger.info("  Yesterday Date: %s", canonical_date(self.yesterday(), self.tz_name))
