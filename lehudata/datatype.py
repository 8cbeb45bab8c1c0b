"""Default values, initial rows and numeric checks for metric data."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Iterable, Mapping, MutableMapping, Optional, Sequence

from lehudata.entities import Metric
from lehudata.enums.code_type import CodeType
from lehudata.enums.video_dimension import VideoDimensionType
from lehudata.sqlparams import (
    PARENT_VIDEO_TYPE_ID,
    RULE_ID,
    STATS_TIME,
    VIDEO_ID,
    VIDEO_TYPE_ID,
    video_db_dimension_column,
)
from lehudata.total import TotalParamTransfers

_EPSILON = 1e-10


def get_date_type_default_value(code_type: Optional[CodeType]) -> Any:
    """Return the value a new row holds for a metric of this type."""
    if code_type in (CodeType.DATE, CodeType.TIMESTAMP):
        return datetime.now()
    class_type = code_type.code_class_type() if code_type is not None else ""
    if not class_type:
        raise ValueError("不支持的数据类型")
    default = code_type.db_default_value()
    if class_type in ("int", "int32", "int64"):
        try:
            return int(default)
        except ValueError:
            return 0
    if class_type in ("float32", "float64"):
        try:
            return float(default)
        except ValueError:
            return 0.0
    if class_type == "string":
        return default
    if class_type == "decimal.Decimal":
        return Decimal(0)
    if class_type == "time.Time":
        return datetime.min
    raise ValueError(f"不支持的数据类型: {class_type}")


def _initial_row(
    rule_id: int,
    count_time: str,
    video_id: int,
    video_type_id: int,
    parent_video_type_id: int,
    metric_defaults: Mapping[str, Any],
) -> dict[str, Any]:
    row: dict[str, Any] = {}
    if rule_id:
        row[RULE_ID] = rule_id
    if count_time:
        row[STATS_TIME] = count_time
    if video_id:
        row[VIDEO_ID] = video_id
    if video_type_id:
        row[VIDEO_TYPE_ID] = video_type_id
    if parent_video_type_id:
        row[PARENT_VIDEO_TYPE_ID] = parent_video_type_id
    row.update(metric_defaults)
    return row


def disposal_initial_db_data(
    total_param_transfers: Optional[TotalParamTransfers],
) -> list[dict[str, Any]]:
    """Build the rows, filled with metric defaults, that a step will write."""
    if total_param_transfers is None:
        raise ValueError("参数不能为空")

    metric_defaults: dict[str, Any] = {}
    for metric in total_param_transfers.metric_list:
        try:
            default = get_date_type_default_value(CodeType.from_code(metric.code_type))
        except ValueError as exc:
            raise ValueError(f"获取指标默认值失败: {exc}") from exc
        metric_defaults[metric.metric_name] = default

    transfers = total_param_transfers.param_transfers
    if transfers is None or transfers.dimension_transfers is None:
        raise ValueError("参数不能为空")
    dimension = transfers.dimension_transfers
    rule_id = transfers.rule_id
    count_time = total_param_transfers.assembly_count_time()
    video_type_id = dimension.video_type_id
    parent_id = dimension.parent_video_type_id

    dimension_type = transfers.video_dimension_type
    if dimension_type is VideoDimensionType.VIDEO:
        return [
            _initial_row(rule_id, count_time, video_id, video_type_id, parent_id, metric_defaults)
            for video_id in dimension.video_id_list
        ]
    if dimension_type is VideoDimensionType.VIDEO_TYPE:
        return [_initial_row(rule_id, count_time, 0, video_type_id, parent_id, metric_defaults)]
    if dimension_type is VideoDimensionType.PARENT_VIDEO_TYPE:
        return [_initial_row(rule_id, count_time, 0, 0, parent_id, metric_defaults)]
    return []


def disposal_rel_db_data(
    video_dimension_type: Optional[VideoDimensionType],
    initial_db_data_list: Iterable[MutableMapping[str, Any]],
    db_data_list: Sequence[Mapping[str, Any]],
) -> None:
    """Copy stored values into the initial rows with the same dimension id."""
    if not db_data_list:
        return
    column = video_db_dimension_column(video_dimension_type)
    if not column:
        raise ValueError("无法获取视频维度数据库字段")
    for initial in initial_db_data_list:
        for stored in db_data_list:
            if column in initial and column in stored and initial[column] == stored[column]:
                initial.update((key, value) for key, value in stored.items() if key != column)


def _is_nonzero(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value != 0
    if isinstance(value, float):
        return abs(value) > _EPSILON
    if isinstance(value, Decimal):
        return value != 0
    if isinstance(value, str):
        try:
            return abs(float(value)) > _EPSILON
        except ValueError:
            return False
    return False


def filter_nonzero(
    results: Sequence[Mapping[str, Any]], base_metric_list: Sequence[Metric]
) -> list[Mapping[str, Any]]:
    """Keep the rows in which at least one of the metrics is not zero."""
    if not results or not base_metric_list:
        return []
    names = {metric.metric_name for metric in base_metric_list}
    return [row for row in results if any(_is_nonzero(row.get(name)) for name in names)]


def get_rel_number_type(number_value: Any) -> Any:
    """Return a numeric value unchanged, rejecting anything that is not a number."""
    if isinstance(number_value, bool) or not isinstance(number_value, (int, float, Decimal)):
        raise TypeError(f"不支持的数值类型: {type(number_value).__name__}")
    return number_value


def get_rel_number_class(number_value: Any) -> type:
    """Return the numeric type of a value."""
    if isinstance(number_value, bool):
        raise TypeError(f"不支持的数值类型: {type(number_value).__name__}")
    for number_type in (int, float, Decimal):
        if isinstance(number_value, number_type):
            return number_type
    raise TypeError(f"不支持的数值类型: {type(number_value).__name__}")