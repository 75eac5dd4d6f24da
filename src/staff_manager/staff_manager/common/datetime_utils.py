from __future__ import annotations

from datetime import date, datetime


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def now_iso() -> str:
    """Current local time as an ISO-8601 timestamp string."""
    return now_local().isoformat(timespec="milliseconds")


def today_iso() -> str:
    return now_local().date().isoformat()


def month_prefix(day: date) -> str:
    """`YYYY-MM` prefix used to match stored `YYYY-MM-DD` strings."""
    return day.strftime("%Y-%m")
