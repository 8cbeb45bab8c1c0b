"""Integer enumerations that carry a code and a human-readable message."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, TypeVar

_E = TypeVar("_E", bound="CodedEnum")


class CodedEnum(IntEnum):
    """An integer enum whose members are declared as ``(code, message)``."""

    def __new__(cls, code: int, message: str = ""):
        member = int.__new__(cls, code)
        member._value_ = code
        member._msg = message
        return member

    def code(self) -> int:
        """Return the numeric code of the member."""
        return int(self)

    def msg(self) -> str:
        """Return the descriptive message of the member."""
        return self._msg

    @classmethod
    def from_code(cls: type[_E], code: int) -> Optional[_E]:
        """Look a member up by code.

        An unknown code falls back to the member whose code is 0, or to
        ``None`` when the enumeration has no such member.
        """
        try:
            return cls(code)
        except ValueError:
            pass
        try:
            return cls(0)
        except ValueError:
            return None

    @classmethod
    def msg_of(cls, code: int) -> str:
        """Return the message for a code, or an empty string if unknown."""
        member = cls.from_code(code)
        return member.msg() if member is not None else ""


class Status(CodedEnum):
    """Running state of a record."""

    RUN = (1, "正常")
    STOP = (0, "禁用")


class BusinessStatus(CodedEnum):
    """Generic yes/no flag."""

    YES = (1, "是")
    NO = (0, "否")


class DefaultShow(CodedEnum):
    """Whether something is shown by default."""

    SHOW = (1, "显示")
    HIDE = (0, "隐藏")


class ShowStatus(CodedEnum):
    """Whether something is displayed."""

    YES = (1, "是")
    NO = (0, "否")


class Phase(CodedEnum):
    """Whether a metric depends on the statistics period."""

    YES = (1, "是")
    NO = (0, "否")


class TypeLevel(CodedEnum):
    """Whether a metric depends on a dimension."""

    YES = (1, "是")
    NO = (0, "否")