"""SQL fragments, parameter names and table names for statistics tables."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from lehudata.enums.collect import DateType
from lehudata.enums.video_dimension import VideoDimensionType
from lehudata.transfers import QueryDataTransfers

START_TIME = "startTime"
END_TIME = "endTime"
STATS_TIME = "stats_time"
VIDEO_ID = "video_id"
VIDEO_IDS = "video_ids"
VIDEO_TYPE_ID = "video_type_id"
PARENT_VIDEO_TYPE_ID = "parent_video_type_id"
RULE_ID = "rule_id"

STATS = "stats"
STATS_RANGE = "stats_range"
UNDERLINE = "_"

_DIMENSION_COLUMNS = {
    VideoDimensionType.VIDEO: VIDEO_ID,
    VideoDimensionType.VIDEO_TYPE: VIDEO_TYPE_ID,
    VideoDimensionType.PARENT_VIDEO_TYPE: PARENT_VIDEO_TYPE_ID,
}

_DIMENSION_CONDITIONS = {
    VideoDimensionType.VIDEO: f"{VIDEO_ID} IN (:{VIDEO_IDS})",
    VideoDimensionType.VIDEO_TYPE: f"{VIDEO_TYPE_ID} IN (:{VIDEO_TYPE_ID})",
    VideoDimensionType.PARENT_VIDEO_TYPE: f"{PARENT_VIDEO_TYPE_ID} =:{PARENT_VIDEO_TYPE_ID}",
}

_UPGRADES = {
    VideoDimensionType.VIDEO: VideoDimensionType.VIDEO_TYPE,
    VideoDimensionType.VIDEO_TYPE: VideoDimensionType.PARENT_VIDEO_TYPE,
}

_DOWNGRADES = {
    VideoDimensionType.PARENT_VIDEO_TYPE: VideoDimensionType.VIDEO_TYPE,
    VideoDimensionType.VIDEO_TYPE: VideoDimensionType.VIDEO,
}


def select_dimension_parameter(start_date: datetime, end_date: datetime) -> dict[str, Any]:
    """Return the time-range parameters of a dimension query."""
    return {START_TIME: start_date, END_TIME: end_date}


def video_db_dimension_column(video_dimension_type: Optional[VideoDimensionType]) -> str:
    """Return the column holding the dimension, or an empty string."""
    return _DIMENSION_COLUMNS.get(video_dimension_type, "")


def create_dimension_condition(video_dimension_type: Optional[VideoDimensionType]) -> str:
    """Return the WHERE condition selecting the dimension, or an empty string."""
    return _DIMENSION_CONDITIONS.get(video_dimension_type, "")


def offset(page_size: int, page_num: int) -> int:
    """Return the row offset of a page; pages are numbered from 1."""
    return (max(page_num, 1) - 1) * page_size


def upgrade_video_dimension(
    video_dimension_type: Optional[VideoDimensionType],
) -> Optional[VideoDimensionType]:
    """Return the next coarser dimension, or ``None`` at the top."""
    return _UPGRADES.get(video_dimension_type)


def downgrade_video_dimension(
    video_dimension_type: Optional[VideoDimensionType],
) -> Optional[VideoDimensionType]:
    """Return the next finer dimension, or ``None`` at the bottom."""
    return _DOWNGRADES.get(video_dimension_type)


def get_param_name(query_data_transfers: Optional[QueryDataTransfers]) -> str:
    """Return the parameter name of the finest id list that is filled in."""
    if query_data_transfers is None:
        return ""
    execute = query_data_transfers.query_data_execute_transfers
    if execute is None:
        return ""
    if execute.video_id_list:
        return VIDEO_ID
    if execute.video_type_id_list:
        return VIDEO_TYPE_ID
    if execute.parent_video_type_id_list:
        return PARENT_VIDEO_TYPE_ID
    return ""


def create_table_name(
    table_prefix: str,
    rule_name: str,
    video_dimension_type: Optional[VideoDimensionType],
    date_type: Optional[DateType],
) -> str:
    """Build the name of a statistics table."""
    date_part = STATS if date_type is DateType.DAY else STATS_RANGE
    dimension = video_dimension_type.slug().lower() if video_dimension_type is not None else ""
    return f"{table_prefix}{rule_name}{UNDERLINE}{dimension}{UNDERLINE}{date_part}"


def create_delete_table_data_sql(
    table_name: str, video_dimension_type: Optional[VideoDimensionType]
) -> str:
    """Build the DELETE statement clearing one period of a dimension."""
    sql = (
        f"DELETE FROM {table_name} WHERE stats_time = :stats_time "
        "AND parent_video_type_id = :parent_video_type_id"
    )
    if video_dimension_type is VideoDimensionType.VIDEO_TYPE:
        sql += " AND video_type_id = :video_type_id"
    elif video_dimension_type is VideoDimensionType.VIDEO:
        sql += " AND video_type_id = :video_type_id AND video_id IN (:video_ids)"
    return sql


def create_insert_table_data_sql(
    table_name: str, result_data_list: Sequence[Mapping[str, Any]]
) -> str:
    """Build a named-parameter INSERT from the keys of the first row."""
    if not result_data_list:
        return ""
    columns = list(result_data_list[0])
    placeholders = [f":{column}" for column in columns]
    return (
        f"INSERT INTO {table_name} ({', '.join(columns)}) "
        f"VALUES ({', '.join(placeholders)})"
    )