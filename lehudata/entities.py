"""Records describing collection rules, metrics and storage targets."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Optional, Union

from lehudata.enums.collect import FunctionType, MetricCollectType


def _coerce(enum_cls: type[IntEnum], value: int) -> Union[IntEnum, int]:
    """Turn a known code into its enum member and leave unknown codes as ints."""
    try:
        return enum_cls(value)
    except ValueError:
        return value


@dataclass
class DataSave:
    """Where the results of a rule are stored."""

    id: int = 0
    rule_id: int = 0
    data_source_name: str = ""
    create_table_prefix: str = ""
    status: int = 0
    update_time: Optional[datetime] = None
    create_time: Optional[datetime] = None


@dataclass
class DimensionGather:
    """How dimension data for a rule is gathered."""

    id: int = 0
    rule_id: int = 0
    collect_type: int = 0
    collect_detail: str = ""
    collect_source_name: str = ""
    entity: str = ""
    status: int = 0
    update_time: Optional[datetime] = None
    create_time: Optional[datetime] = None


@dataclass
class Metric:
    """A metric collected or computed by a rule."""

    id: int = 0
    rule_id: int = 0
    metric_name: str = ""
    metric_describe: str = ""
    metric_collect_type: Union[MetricCollectType, int] = 0
    collect_source_name: str = ""
    collect_type: int = 0
    collect_detail: str = ""
    metric_time_format: str = ""
    arguments: str = ""
    function_type: Union[FunctionType, int] = 0
    expression: str = ""
    show_status: int = 0
    code_type: int = 0
    metric_type: int = 0
    sort: int = 0
    status: int = 0
    update_time: Optional[datetime] = None
    create_time: Optional[datetime] = None

    def __post_init__(self) -> None:
        self.metric_collect_type = _coerce(MetricCollectType, self.metric_collect_type)
        self.function_type = _coerce(FunctionType, self.function_type)


@dataclass
class Rule:
    """A collection or query rule."""

    id: int = 0
    rule_describe: str = ""
    rule_name: str = ""
    rule_type: int = 0
    rule_version_id: int = 0
    status: int = 0
    update_time: Optional[datetime] = None
    create_time: Optional[datetime] = None