"""Objects passed between the stages of a collection run."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from lehudata.entities import Metric
from lehudata.enums.collect import CollectType, DateType, RuleType
from lehudata.enums.video_dimension import VideoDimensionType


@dataclass
class DimensionTransfer:
    """The videos and categories a run is about."""

    video_id_list: list[int] = field(default_factory=list)
    video_type_id: int = 0
    parent_video_type_id: int = 0


@dataclass
class RequestTime:
    """The period being gathered."""

    gather_date: Optional[datetime] = None
    date_type: Optional[DateType] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None


@dataclass
class SaveTarget:
    """Where query results are written: 1 database, 2 file, 3 message queue."""

    save_type: int = 0
    config: str = ""


@dataclass
class QueryDataExecuteTransfers:
    """Values needed while a query executes."""

    parent_video_type_id_list: list[int] = field(default_factory=list)
    video_type_id_list: list[int] = field(default_factory=list)
    video_id_list: list[int] = field(default_factory=list)
    metric_list: list[Metric] = field(default_factory=list)
    rule_describe: str = ""
    rule_name: str = ""
    data_save: Optional[SaveTarget] = None
    accumulate_column_name: str = ""


@dataclass
class QueryDataTransfers:
    """A query over collected statistics."""

    rule_id: int = 0
    video_dimension_type: Optional[VideoDimensionType] = None
    video_type_id: int = 0
    date_type: Optional[DateType] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    query_data_execute_transfers: Optional[QueryDataExecuteTransfers] = None


@dataclass
class ParamTransfers:
    """Parameters of one collection step."""

    rule_id: int = 0
    rule_type: Optional[RuleType] = None
    video_dimension_type: Optional[VideoDimensionType] = None
    dimension_transfers: Optional[DimensionTransfer] = None
    request_time: Optional[RequestTime] = None
    collect_type: Optional[CollectType] = None
    query_data_transfers: Optional[QueryDataTransfers] = None
    message_parent_trace_id: int = 0
    message_trace_id: int = 0


@dataclass
class RuleHandleOutput:
    """Outcome of handling a rule."""

    ok: bool
    message: str
    data: Any = None

    @classmethod
    def success(cls, message: str, data: Any = None) -> "RuleHandleOutput":
        """Build a successful outcome."""
        return cls(ok=True, message=message, data=data)

    @classmethod
    def failure(cls, message: str) -> "RuleHandleOutput":
        """Build a failed outcome."""
        return cls(ok=False, message=message)