"""
Date helpers: day truncation, keys, chart labels and timestamps.

Timestamps are milliseconds at UTC midnight of the calendar day so that
output does not depend on the local timezone.
"""

from datetime import date, datetime, timedelta, timezone

from .config import MONTH_ABBR


def to_day(value: datetime | date) -> date:
    """Truncate a datetime (or date) to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def day_key(day: date) -> str:
    """YYYY-MM-DD key for a calendar day."""
    return day.strftime("%Y-%m-%d")


def days_between(earlier: date, later: date) -> int:
    """Whole calendar days from *earlier* to *later*."""
    return (later - earlier).days


def day_timestamp(day: date) -> int:
    """Milliseconds since the epoch at UTC midnight of *day*."""
    midnight = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    return int(midnight.timestamp() * 1000)


def from_timestamp(ts: int) -> date:
    """Inverse of day_timestamp()."""
    return datetime.fromtimestamp(ts / 1000, tz=timezone.utc).date()


def week_start(day: date) -> date:
    """Monday of the ISO week containing *day*."""
    return day - timedelta(days=day.weekday())


def month_start(day: date) -> date:
    return day.replace(day=1)


def year_start(day: date) -> date:
    return day.replace(month=1, day=1)


def format_year(day: date) -> str:
    """Two-digit year, e.g. "24"."""
    return f"{day.year % 100:02d}"


def format_month(day: date) -> str:
    return MONTH_ABBR[day.month - 1]


def format_day(day: date) -> str:
    """e.g. "5 Mar"."""
    return f"{day.day} {format_month(day)}"


def format_month_year(day: date) -> str:
    """e.g. "Mar 24"."""
    return f"{format_month(day)} {format_year(day)}"


def format_week(week_monday: date) -> str:
    """Label for a week bucket: its Monday as a day label."""
    return format_day(week_monday)
