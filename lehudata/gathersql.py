"""SQL that rolls base metrics up from the per-video daily table."""

from __future__ import annotations

from typing import Optional

from lehudata.entities import DataSave, Rule
from lehudata.enums.collect import DateType, MetricCollectType
from lehudata.enums.video_dimension import VideoDimensionType
from lehudata.sqlparams import (
    create_dimension_condition,
    create_table_name,
    video_db_dimension_column,
)
from lehudata.total import TotalParamTransfers


def create_gather_sql(
    rule: Optional[Rule],
    data_save: Optional[DataSave],
    total_param_transfers: Optional[TotalParamTransfers],
) -> str:
    """Build the aggregate query for the base metrics, or '' if there are none."""
    if rule is None or data_save is None or total_param_transfers is None:
        raise ValueError("参数不能为空")

    transfers = total_param_transfers.param_transfers
    dimension_type = transfers.video_dimension_type if transfers is not None else None

    names = dict.fromkeys(
        metric.metric_name
        for metric in total_param_transfers.metric_list
        if metric.metric_collect_type == MetricCollectType.BASE
    )
    if not names:
        return ""
    query_columns = ", ".join(f"sum({name}) as {name}" for name in names)

    table_name = create_table_name(
        data_save.create_table_prefix, rule.rule_name, VideoDimensionType.VIDEO, DateType.DAY
    )

    column = video_db_dimension_column(dimension_type)
    if not column:
        raise ValueError("不支持的视频维度类型")
    condition = create_dimension_condition(dimension_type)
    if not condition:
        raise ValueError("无法创建维度条件")

    return (
        f"SELECT {column}, {query_columns} FROM {table_name} "
        f"WHERE stats_time >= :startTime AND stats_time <= :endTime AND {condition} "
        f"GROUP BY {column}"
    )