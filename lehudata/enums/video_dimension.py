"""Granularity at which video statistics are kept."""

from __future__ import annotations

from typing import Optional

from lehudata.enums.coded import CodedEnum


class VideoDimensionType(CodedEnum):
    """Video dimension: parent category, category, or the video itself."""

    def __new__(cls, code: int, message: str, slug: str):
        member = int.__new__(cls, code)
        member._value_ = code
        member._msg = message
        member._slug = slug
        return member

    PARENT_VIDEO_TYPE = (1, "父级视频分类", "parent_video_type")
    VIDEO_TYPE = (2, "视频分类", "video_type")
    VIDEO = (3, "视频本身", "video")

    def slug(self) -> str:
        """Return the string value of the dimension."""
        return self._slug

    @classmethod
    def from_slug(cls, slug: str) -> Optional["VideoDimensionType"]:
        """Look a dimension up by its string value, or return ``None``."""
        for member in cls:
            if member._slug == slug:
                return member
        return None