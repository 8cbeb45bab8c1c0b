"""Statistics periods: their boundaries, labels and parameters."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from lehudata import timeutil
from lehudata.enums.collect import DateType
from lehudata.transfers import RequestTime

STRIKE = "-"

START_TIME_PARAM = "startTime"
END_TIME_PARAM = "endTime"
DATE_PATTERN = timeutil.DATE_FORMAT
DATE_FORMAT_PATTERN = timeutil.DATE_TIME_FORMAT

_PERIOD_BOUNDS = {
    DateType.DAY: (timeutil.start_of_day, timeutil.end_of_day),
    DateType.WEEK: (timeutil.start_of_week, timeutil.end_of_week),
    DateType.MONTH: (timeutil.start_of_month, timeutil.end_of_month),
    DateType.YEAR: (timeutil.start_of_year, timeutil.end_of_year),
}

_UPGRADES = {
    DateType.DAY: DateType.WEEK,
    DateType.WEEK: DateType.MONTH,
    DateType.MONTH: DateType.YEAR,
}

_PARSE_FORMATS = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%Y-%m-%d %H:%M:%S",
    "%Y/%m/%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
)


def create_request_time(date_type: Optional[DateType], date: datetime) -> RequestTime:
    """Return the period of the given type that holds ``date``."""
    try:
        start_of, end_of = _PERIOD_BOUNDS[date_type]
    except KeyError:
        raise ValueError(f"不支持的日期类型: {date_type}") from None
    return RequestTime(
        gather_date=date,
        date_type=date_type,
        start_time=start_of(date),
        end_time=end_of(date),
    )


def create_time_param(
    start_time: datetime, end_time: datetime, period_format: str
) -> dict[str, Any]:
    """Return the formatted start and end of a period as SQL parameters."""
    return {
        START_TIME_PARAM: timeutil.format_time(start_time, period_format),
        END_TIME_PARAM: timeutil.format_time(end_time, period_format),
    }


def upgrade_date_type(date_type: Optional[DateType]) -> Optional[DateType]:
    """Return the next longer period type, or ``None`` after a year."""
    return _UPGRADES.get(date_type)


def create_count_time(
    date_type: Optional[DateType], start_time: datetime, end_time: datetime
) -> str:
    """Return the statistics-time label stored with a row."""
    if date_type is DateType.DAY:
        return timeutil.format_time(start_time, DATE_PATTERN)
    if date_type in (DateType.WEEK, DateType.MONTH, DateType.YEAR):
        return (
            timeutil.format_time(start_time, DATE_PATTERN)
            + STRIKE
            + timeutil.format_time(end_time, DATE_PATTERN)
        )
    return ""


def assembly_count_time(
    date_type: Optional[DateType], start_time: datetime, end_time: datetime
) -> str:
    """Return the statistics-time label; same as :func:`create_count_time`."""
    return create_count_time(date_type, start_time, end_time)


def get_entry_name(
    date_type: Optional[DateType],
    start_time: Optional[datetime],
    end_time: Optional[datetime],
) -> str:
    """Return a short display name for a period."""
    if date_type is None or start_time is None or end_time is None:
        return ""
    if date_type is DateType.DAY:
        return timeutil.format_time(start_time, timeutil.DATE_FORMAT_MMDD_ZH_CN)
    if date_type is DateType.WEEK:
        return (
            timeutil.format_time(start_time, "%m月%d日")
            + "-"
            + timeutil.format_time(end_time, "%d日")
        )
    if date_type is DateType.MONTH:
        return timeutil.format_time(start_time, "%y年%m月")
    if date_type is DateType.YEAR:
        return get_year_string(start_time) + "年"
    return ""


def get_year_string(date: datetime) -> str:
    """Return the year without its first two digits."""
    year = str(date.year)
    return year[2:] if len(year) > 2 else year


def parse_date_str(date_str: str) -> datetime:
    """Parse a date or date-time in one of the accepted layouts."""
    for pattern in _PARSE_FORMATS:
        try:
            return datetime.strptime(date_str, pattern)
        except ValueError:
            continue
    raise ValueError("无法解析日期字符串: " + date_str)


def is_same_day(t1: datetime, t2: datetime) -> bool:
    """Tell whether two moments fall on the same calendar day."""
    return t1.date() == t2.date()


def get_week_range(date: datetime) -> tuple[datetime, datetime]:
    """Return the first and last instant of the week holding ``date``."""
    return timeutil.start_of_week(date), timeutil.end_of_week(date)