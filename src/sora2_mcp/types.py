# SPDX-License-Identifier: MIT
"""Shared type definitions for tool inputs and results."""

from typing import Literal, TypedDict

VideoModel = Literal["sora-2", "sora-2-pro"]
VideoSize = Literal["1280x720", "1920x1080", "720x1280", "1080x1920"]
VideoSeconds = Literal["4", "8", "12"]
VideoVariant = Literal["video", "thumbnail", "spritesheet"]
SortOrder = Literal["asc", "desc"]


class DownloadResult(TypedDict):
    """Result from downloading a video asset as base64."""

    video_id: str
    variant: VideoVariant
    size_bytes: int
    data_base64: str
    suggested_filename: str
    note: str
