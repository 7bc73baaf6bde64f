from __future__ import annotations

from datetime import date, datetime


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date.

    Full timestamps ("2024-03-01T00:00:00.000Z") are cut down to their
    calendar date; anything else after the date is rejected.
    """
    return datetime.strptime(value.strip().split("T", 1)[0], "%Y-%m-%d").date()


def parse_iso_datetime(value: str) -> datetime:
    value = value.strip()
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now()
