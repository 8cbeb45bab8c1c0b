"""The full set of parameters of one collection step."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from lehudata.datetimes import assembly_count_time
from lehudata.entities import Metric
from lehudata.sqlparams import (
    PARENT_VIDEO_TYPE_ID,
    RULE_ID,
    STATS_TIME,
    VIDEO_IDS,
    VIDEO_TYPE_ID,
)
from lehudata.transfers import ParamTransfers


@dataclass
class TotalParamTransfers:
    """Metrics, parameters and result rows of a collection step."""

    metric_list: list[Metric] = field(default_factory=list)
    param_transfers: Optional[ParamTransfers] = None
    result_data_list: list[dict[str, Any]] = field(default_factory=list)

    def assembly_params(self) -> dict[str, Any]:
        """Return the named SQL parameters for this step."""
        params: dict[str, Any] = {}
        transfers = self.param_transfers
        if transfers is None or transfers.dimension_transfers is None:
            return params
        dimension = transfers.dimension_transfers
        if dimension.parent_video_type_id > 0:
            params[PARENT_VIDEO_TYPE_ID] = dimension.parent_video_type_id
        if dimension.video_type_id > 0:
            params[VIDEO_TYPE_ID] = dimension.video_type_id
        if dimension.video_id_list:
            params[VIDEO_IDS] = dimension.video_id_list
        if transfers.rule_id > 0:
            params[RULE_ID] = transfers.rule_id
        count_time = self.assembly_count_time()
        if count_time:
            params[STATS_TIME] = count_time
        return params

    def assembly_count_time(self) -> str:
        """Return the statistics-time label, or an empty string without a period."""
        if self.param_transfers is None or self.param_transfers.request_time is None:
            return ""
        request = self.param_transfers.request_time
        if request.start_time is None or request.end_time is None:
            raise ValueError("request time has no start or end")
        return assembly_count_time(request.date_type, request.start_time, request.end_time)