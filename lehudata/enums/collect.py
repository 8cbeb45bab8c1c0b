"""Enumerations describing how data is collected and aggregated."""

from __future__ import annotations

from lehudata.enums.coded import CodedEnum


class _SluggedEnum(CodedEnum):
    """A coded enum whose members also carry a short string value."""

    def __new__(cls, code: int, message: str, slug: str):
        member = int.__new__(cls, code)
        member._value_ = code
        member._msg = message
        member._slug = slug
        return member


class CollectType(CodedEnum):
    """Way in which raw data is gathered."""

    SQL = (1, "sql采集")
    HTTP = (2, "http采集")
    REDIS = (3, "redis采集")


class DateType(_SluggedEnum):
    """Length of a statistics period."""

    DAY = (1, "天", "day")
    WEEK = (2, "周", "week")
    MONTH = (3, "月", "month")
    YEAR = (4, "年", "year")

    def slug(self) -> str:
        """Return the string value of the period."""
        return self._slug


class Entity(_SluggedEnum):
    """Source table of collected data."""

    VIDEO_REACT = (1, "用户观看视频反应表", "d_video_react")
    VIDEO = (2, "视频表", "d_video")
    VIDEO_TYPE = (3, "视频类型表", "d_video_type")

    def slug(self) -> str:
        """Return the table name."""
        return self._slug


class FunctionType(_SluggedEnum):
    """Aggregate function used by a computed metric."""

    SUM = (1, "累加", "sum")
    DEDUCTION = (2, "相减", "deduction")
    MULTIPLY = (3, "相乘", "multiply")
    RATIO = (4, "相除", "ratio")
    AVG = (5, "平均数", "avg")

    def slug(self) -> str:
        """Return the function's name."""
        return self._slug


class MetricCollectType(CodedEnum):
    """Whether a metric is gathered directly or computed."""

    BASE = (1, "基础型")
    COMPUTE = (2, "计算型")


class MetricType(CodedEnum):
    """Kind of metric."""

    GATHER = (1, "采集")
    CALCULATE = (2, "计算")


class RuleType(CodedEnum):
    """Purpose of a rule."""

    GATHER = (1, "采集")
    QUERY = (2, "查询")