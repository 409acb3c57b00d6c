"""
Calendar helpers for price history and forecast labelling.

Wall-clock time is only consulted to pick the first day of a forecast when
the caller does not supply one.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Optional

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def today_utc() -> date:
    """Current calendar day in UTC."""
    return datetime.now(timezone.utc).date()


def parse_trading_date(value: str) -> date:
    """
    Parse a provider date key such as '2024-05-17'.

    Raises:
        ValueError: If the value is not an ISO calendar date
    """
    return date.fromisoformat(value.strip())


def format_day_label(day: date) -> str:
    """Format a day as a short label, e.g. '7 Oct'."""
    return f"{day.day} {MONTH_ABBREVIATIONS[day.month - 1]}"


def calendar_days(end: date, days: int) -> list[date]:
    """
    Consecutive calendar days ending at ``end``.

    Args:
        end: Last day of the window (inclusive)
        days: Number of days before ``end`` to start from

    Returns:
        ``days + 1`` dates in ascending order
    """
    start = end - timedelta(days=days)
    return [start + timedelta(days=i) for i in range(days + 1)]


def offset_day(start: Optional[date], offset: int) -> date:
    """Day ``offset`` days after ``start`` (today when start is None)."""
    base = start if start is not None else today_utc()
    return base + timedelta(days=offset)
