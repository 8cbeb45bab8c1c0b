from datetime import datetime

import pytest

from lehudata.enums.code_type import CodeType, get_code_type_name


@pytest.mark.parametrize(
    "member, name, column, class_type, db_default, message",
    [
        (CodeType.INTEGER, "INTEGER", "int(64)", "int", "0", "整型数字"),
        (CodeType.LONG, "LONG", "bigint(64)", "int64", "0", "长整类型"),
        (CodeType.FLOAT, "FLOAT", "float", "float32", "0.0", "浮点类型"),
        (CodeType.DOUBLE, "DOUBLE", "double", "float64", "0.0", "双精度类型"),
        (CodeType.BOOLEAN, "BOOLEAN", "bit(1)", "bool", "0", "布尔值"),
        (CodeType.STRING, "STRING", "varchar(256)", "string", "", "字符串"),
        (CodeType.TEXT, "TEXT", "text", "string", "", "字符串"),
        (CodeType.DATE, "DATETIME", "datetime", "time.Time", "CURRENT_TIMESTAMP", "日期类型"),
        (
            CodeType.TIMESTAMP,
            "TIMESTAMP",
            "timestamp",
            "time.Time",
            "CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP",
            "时间戳",
        ),
    ],
)
def test_member_details(member, name, column, class_type, db_default, message):
    assert member.code_type_name() == name
    assert member.column_type() == column
    assert member.code_class_type() == class_type
    assert member.db_default_value() == db_default
    assert member.msg() == message


def test_from_code_round_trip():
    for member in CodeType:
        assert CodeType.from_code(int(member)) is member
        assert get_code_type_name(int(member)) == member.code_type_name()


def test_unknown_code():
    assert CodeType.from_code(0) is None
    assert CodeType.msg_of(99) == ""
    assert get_code_type_name(99) == ""


@pytest.mark.parametrize(
    "member, expected",
    [
        (CodeType.INTEGER, 0),
        (CodeType.LONG, 0),
        (CodeType.STRING, ""),
        (CodeType.TEXT, ""),
    ],
)
def test_default_values(member, expected):
    assert member.default_value() == expected


def test_float_defaults_are_floats():
    for member in (CodeType.FLOAT, CodeType.DOUBLE):
        value = member.default_value()
        assert isinstance(value, float) and value == 0.0


def test_boolean_default_is_false():
    assert CodeType.BOOLEAN.default_value() is False


def test_time_defaults_are_zero_time():
    assert CodeType.DATE.default_value() == datetime.min
    assert CodeType.TIMESTAMP.default_value() == datetime.min


def test_codes_cover_one_to_nine():
    members = [CodeType.from_code(number) for number in range(1, 10)]
    assert members == list(CodeType)
    assert [get_code_type_name(number) for number in range(1, 10)] == [
        "INTEGER",
        "LONG",
        "FLOAT",
        "DOUBLE",
        "BOOLEAN",
        "STRING",
        "TEXT",
        "DATETIME",
        "TIMESTAMP",
    ]