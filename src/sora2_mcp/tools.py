# SPDX-License-Identifier: MIT
"""Tool registry: the closed set of tools, their inputs and their schemas.

Each tool's arguments are a pydantic model. The model's JSON schema is what
gets advertised over MCP, and the same model validates incoming arguments,
so the contract and the check cannot drift apart.
"""

from dataclasses import dataclass
from enum import Enum

from mcp import types
from pydantic import BaseModel, ConfigDict, Field, field_validator

from . import descriptions
from .types import SortOrder, VideoModel, VideoSeconds, VideoSize, VideoVariant


class ToolName(str, Enum):
    CREATE_VIDEO = "create_video"
    GET_VIDEO_STATUS = "get_video_status"
    DOWNLOAD_VIDEO = "download_video"
    LIST_VIDEOS = "list_videos"
    DELETE_VIDEO = "delete_video"
    REMIX_VIDEO = "remix_video"


class ToolInput(BaseModel):
    """Base for tool argument models. Unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class CreateVideoInput(ToolInput):
    prompt: str = Field(
        min_length=1,
        description="Text description of the video to generate. Be specific about shot type, "
        "subject, action, setting, and lighting for best results.",
    )
    model: VideoModel = Field(
        default="sora-2",
        description="'sora-2' is faster for iteration; 'sora-2-pro' is higher quality for production.",
    )
    size: VideoSize = Field(default="1280x720", description="Video resolution (width x height)")
    seconds: VideoSeconds = Field(default="8", description="Video duration in seconds")
    input_reference: str | None = Field(
        default=None,
        description="Optional base64-encoded image (JPEG, PNG, or WebP) used as the first frame. "
        "A data URL is accepted. Must match the target video resolution.",
    )

    @field_validator("input_reference")
    @classmethod
    def _empty_as_absent(cls, v: str | None) -> str | None:
        # Empty string means "no reference", same as omitting the field
        return v or None


class VideoIdInput(ToolInput):
    video_id: str = Field(min_length=1, description="The video job ID returned from create_video or remix_video")


class GetVideoStatusInput(VideoIdInput):
    pass


class DownloadVideoInput(VideoIdInput):
    variant: VideoVariant = Field(
        default="video",
        description="What to download: 'video' (MP4), 'thumbnail' (WebP), or 'spritesheet' (JPEG)",
    )


class ListVideosInput(ToolInput):
    limit: int = Field(default=10, ge=1, le=100, description="Number of videos to return (max 100)")
    after: str | None = Field(default=None, description="Cursor for pagination: the last ID of the previous page")
    order: SortOrder = Field(default="desc", description="Sort order by creation date")


class DeleteVideoInput(VideoIdInput):
    pass


class RemixVideoInput(VideoIdInput):
    prompt: str = Field(
        min_length=1,
        description="Description of the change to apply. Keep it focused on a single, well-defined adjustment.",
    )


@dataclass(frozen=True)
class ToolSpec:
    """A tool's advertised name, description and argument model."""

    name: ToolName
    description: str
    input_model: type[ToolInput]

    def definition(self) -> types.Tool:
        return types.Tool(
            name=self.name.value,
            description=self.description,
            inputSchema=self.input_model.model_json_schema(),
        )


TOOL_SPECS: dict[ToolName, ToolSpec] = {
    spec.name: spec
    for spec in (
        ToolSpec(ToolName.CREATE_VIDEO, descriptions.CREATE_VIDEO, CreateVideoInput),
        ToolSpec(ToolName.GET_VIDEO_STATUS, descriptions.GET_VIDEO_STATUS, GetVideoStatusInput),
        ToolSpec(ToolName.DOWNLOAD_VIDEO, descriptions.DOWNLOAD_VIDEO, DownloadVideoInput),
        ToolSpec(ToolName.LIST_VIDEOS, descriptions.LIST_VIDEOS, ListVideosInput),
        ToolSpec(ToolName.DELETE_VIDEO, descriptions.DELETE_VIDEO, DeleteVideoInput),
        ToolSpec(ToolName.REMIX_VIDEO, descriptions.REMIX_VIDEO, RemixVideoInput),
    )
}


def list_tool_definitions() -> list[types.Tool]:
    """Return the MCP tool catalog in registry order."""
    return [spec.definition() for spec in TOOL_SPECS.values()]


def resolve_tool(name: str) -> ToolName | None:
    """Map a requested tool name to its identifier, or None if unknown."""
    try:
        return ToolName(name)
    except ValueError:
        return None
