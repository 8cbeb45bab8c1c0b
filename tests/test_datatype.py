from datetime import datetime
from decimal import Decimal

import pytest

from lehudata.datatype import (
    disposal_initial_db_data,
    disposal_rel_db_data,
    filter_nonzero,
    get_date_type_default_value,
    get_rel_number_class,
    get_rel_number_type,
)
from lehudata.datetimes import create_request_time
from lehudata.entities import Metric
from lehudata.enums.code_type import CodeType
from lehudata.enums.collect import DateType
from lehudata.enums.video_dimension import VideoDimensionType
from lehudata.total import TotalParamTransfers
from lehudata.transfers import DimensionTransfer, ParamTransfers


@pytest.mark.parametrize(
    "code_type, expected",
    [
        (CodeType.INTEGER, 0),
        (CodeType.LONG, 0),
        (CodeType.FLOAT, 0.0),
        (CodeType.DOUBLE, 0.0),
        (CodeType.STRING, ""),
        (CodeType.TEXT, ""),
    ],
)
def test_default_values(code_type, expected):
    assert get_date_type_default_value(code_type) == expected


@pytest.mark.parametrize("code_type", [CodeType.DATE, CodeType.TIMESTAMP])
def test_time_default_is_now(code_type):
    before = datetime.now()
    value = get_date_type_default_value(code_type)
    assert before <= value <= datetime.now()


def test_boolean_default_is_unsupported():
    with pytest.raises(ValueError, match="bool"):
        get_date_type_default_value(CodeType.BOOLEAN)


def test_unknown_type_is_unsupported():
    with pytest.raises(ValueError, match="不支持的数据类型"):
        get_date_type_default_value(None)


def _total(dimension_type, metrics=None):
    return TotalParamTransfers(
        metric_list=metrics if metrics is not None else [Metric(metric_name="watch", code_type=1)],
        param_transfers=ParamTransfers(
            rule_id=4,
            video_dimension_type=dimension_type,
            dimension_transfers=DimensionTransfer(
                video_id_list=[11, 12], video_type_id=7, parent_video_type_id=3
            ),
            request_time=create_request_time(DateType.DAY, datetime(2024, 3, 5)),
        ),
    )


def test_initial_rows_per_video():
    total = _total(VideoDimensionType.VIDEO)
    rows = disposal_initial_db_data(total)
    assert [row["video_id"] for row in rows] == [11, 12]
    for row in rows:
        assert row["watch"] == 0
        assert row["video_type_id"] == 7
        assert row["parent_video_type_id"] == 3
        assert row["rule_id"] == 4
        assert row["stats_time"] == total.assembly_count_time()


def test_initial_row_for_video_type():
    rows = disposal_initial_db_data(_total(VideoDimensionType.VIDEO_TYPE))
    assert len(rows) == 1
    assert "video_id" not in rows[0]
    assert rows[0]["video_type_id"] == 7


def test_initial_row_for_parent_type():
    rows = disposal_initial_db_data(_total(VideoDimensionType.PARENT_VIDEO_TYPE))
    assert len(rows) == 1
    assert "video_type_id" not in rows[0]
    assert rows[0]["parent_video_type_id"] == 3


def test_initial_rows_unknown_dimension_is_empty():
    assert disposal_initial_db_data(_total(None)) == []


def test_initial_rows_require_transfers():
    with pytest.raises(ValueError, match="参数不能为空"):
        disposal_initial_db_data(None)


def test_initial_rows_bad_metric_type():
    total = _total(VideoDimensionType.VIDEO, [Metric(metric_name="flag", code_type=5)])
    with pytest.raises(ValueError, match="获取指标默认值失败"):
        disposal_initial_db_data(total)


def test_rel_data_merges_matching_rows():
    initial = [{"video_id": 1, "watch": 0}, {"video_id": 2, "watch": 0}]
    disposal_rel_db_data(VideoDimensionType.VIDEO, initial, [{"video_id": 2, "watch": 5}])
    assert initial == [{"video_id": 1, "watch": 0}, {"video_id": 2, "watch": 5}]


def test_rel_data_empty_db_leaves_rows():
    initial = [{"video_id": 1, "watch": 0}]
    disposal_rel_db_data(None, initial, [])
    assert initial == [{"video_id": 1, "watch": 0}]


def test_rel_data_unknown_dimension_raises():
    with pytest.raises(ValueError, match="无法获取视频维度数据库字段"):
        disposal_rel_db_data(None, [{"video_id": 1}], [{"video_id": 1}])


def test_filter_keeps_nonzero_rows():
    metrics = [Metric(metric_name="watch"), Metric(metric_name="like")]
    rows = [
        {"watch": 0, "like": 0.0},
        {"watch": 3, "like": 0},
        {"watch": "0", "like": "2.5"},
        {"watch": Decimal("0"), "like": None},
        {"watch": Decimal("1.5")},
        {"watch": True},
        {"watch": "abc"},
    ]
    kept = filter_nonzero(rows, metrics)
    assert kept == [rows[1], rows[2], rows[4]]


def test_filter_with_no_metrics_is_empty():
    assert filter_nonzero([{"watch": 1}], []) == []


@pytest.mark.parametrize("value", [5, 2.5, Decimal("1.25")])
def test_rel_number_type_passes_numbers(value):
    assert get_rel_number_type(value) == value
    assert get_rel_number_class(value) is type(value)


@pytest.mark.parametrize("value", ["1", None, True])
def test_rel_number_rejects_non_numbers(value):
    with pytest.raises(TypeError, match="不支持的数值类型"):
        get_rel_number_type(value)
    with pytest.raises(TypeError, match="不支持的数值类型"):
        get_rel_number_class(value)