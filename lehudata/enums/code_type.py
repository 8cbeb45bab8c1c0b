"""Data types a metric value can have, with their storage details."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from lehudata.enums.coded import CodedEnum


class CodeType(CodedEnum):
    """Detailed data type of a metric column."""

    def __new__(
        cls,
        code: int,
        message: str,
        type_name: str,
        column: str,
        class_type: str,
        db_default: str,
    ):
        member = int.__new__(cls, code)
        member._value_ = code
        member._msg = message
        member._type_name = type_name
        member._column = column
        member._class_type = class_type
        member._db_default = db_default
        return member

    INTEGER = (1, "整型数字", "INTEGER", "int(64)", "int", "0")
    LONG = (2, "长整类型", "LONG", "bigint(64)", "int64", "0")
    FLOAT = (3, "浮点类型", "FLOAT", "float", "float32", "0.0")
    DOUBLE = (4, "双精度类型", "DOUBLE", "double", "float64", "0.0")
    BOOLEAN = (5, "布尔值", "BOOLEAN", "bit(1)", "bool", "0")
    STRING = (6, "字符串", "STRING", "varchar(256)", "string", "")
    TEXT = (7, "字符串", "TEXT", "text", "string", "")
    DATE = (8, "日期类型", "DATETIME", "datetime", "time.Time", "CURRENT_TIMESTAMP")
    TIMESTAMP = (
        9,
        "时间戳",
        "TIMESTAMP",
        "timestamp",
        "time.Time",
        "CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP",
    )

    def code_type_name(self) -> str:
        """Return the upper-case name of the type."""
        return self._type_name

    def column_type(self) -> str:
        """Return the database column type."""
        return self._column

    def code_class_type(self) -> str:
        """Return the name of the in-memory value type."""
        return self._class_type

    def db_default_value(self) -> str:
        """Return the database default value expression."""
        return self._db_default

    def default_value(self) -> Any:
        """Return the zero value of the type."""
        if self in (CodeType.INTEGER, CodeType.LONG):
            return 0
        if self in (CodeType.FLOAT, CodeType.DOUBLE):
            return 0.0
        if self is CodeType.BOOLEAN:
            return False
        if self in (CodeType.STRING, CodeType.TEXT):
            return ""
        return datetime.min


def get_code_type_name(code: int) -> str:
    """Return the type name for a code, or an empty string if unknown."""
    member = CodeType.from_code(code)
    return member.code_type_name() if member is not None else ""