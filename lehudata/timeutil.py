"""Calendar helpers for day, week, month and year boundaries."""

from __future__ import annotations

from datetime import datetime, timedelta

DATE_FORMAT = "%Y-%m-%d"
DATE_FORMAT_ZH_CN = "%m月%d日"
MONTH_FORMAT = "%Y-%m"
YEAR_FORMAT = "%Y"
DATE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT_MMDD_ZH_CN = "%m月%d日"

_TICK = timedelta(microseconds=1)


def start_of_day(date: datetime) -> datetime:
    """Return midnight at the start of the given day."""
    return date.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(date: datetime) -> datetime:
    """Return the last instant of the given day."""
    return start_of_day(date) + timedelta(days=1) - _TICK


def start_of_week(date: datetime) -> datetime:
    """Return midnight on the Monday of the week holding the date."""
    return start_of_day(date) - timedelta(days=date.weekday())


def end_of_week(date: datetime) -> datetime:
    """Return the last instant of the Sunday ending the week."""
    return start_of_week(date) + timedelta(days=7) - _TICK


def start_of_month(date: datetime) -> datetime:
    """Return midnight on the first day of the month."""
    return start_of_day(date).replace(day=1)


def end_of_month(date: datetime) -> datetime:
    """Return the last instant of the month."""
    start = start_of_month(date)
    if start.month == 12:
        following = start.replace(year=start.year + 1, month=1)
    else:
        following = start.replace(month=start.month + 1)
    return following - _TICK


def start_of_year(date: datetime) -> datetime:
    """Return midnight on the first of January."""
    return start_of_day(date).replace(month=1, day=1)


def end_of_year(date: datetime) -> datetime:
    """Return the last instant of the year."""
    start = start_of_year(date)
    return start.replace(year=start.year + 1) - _TICK


def format_time(moment: datetime, pattern: str) -> str:
    """Format a moment with a strftime pattern."""
    return moment.strftime(pattern)


def add_days(date: datetime, days: int) -> datetime:
    """Shift a moment by whole days."""
    return date + timedelta(days=days)


def add_weeks(date: datetime, weeks: int) -> datetime:
    """Shift a moment by whole weeks."""
    return date + timedelta(weeks=weeks)


def now() -> datetime:
    """Return the current local time."""
    return datetime.now()