# SPDX-License-Identifier: MIT
"""Tool dispatch: one upstream call per tool invocation.

Handlers take validated argument models and return JSON-serializable
results. :func:`call_tool` is the single failure boundary that turns
everything into MCP results or MCP errors.
"""

import json
from collections.abc import Awaitable, Callable
from typing import Any
from urllib.parse import quote

from mcp import types
from mcp.shared.exceptions import McpError
from pydantic import ValidationError

from .client import BinaryPayload, FilePart, JsonPayload, RemotePayload, VideoAPIClient
from .config import logger
from .errors import InvalidArgumentError, MissingCredentialError, UnexpectedPayloadError, UpstreamError
from .media import encode_base64, load_reference_image, suffix_for_variant
from .tools import (
    TOOL_SPECS,
    CreateVideoInput,
    DeleteVideoInput,
    DownloadVideoInput,
    GetVideoStatusInput,
    ListVideosInput,
    RemixVideoInput,
    ToolInput,
    ToolName,
    resolve_tool,
)
from .types import DownloadResult


def _video_path(video_id: str, *parts: str) -> str:
    return "/".join(["/videos", quote(video_id, safe=""), *parts])


def _expect_json(payload: RemotePayload) -> Any:
    if isinstance(payload, JsonPayload):
        return payload.value
    raise UnexpectedPayloadError(f"Expected JSON from the video API but got {payload.content_type}")


def _expect_binary(payload: RemotePayload) -> BinaryPayload:
    if isinstance(payload, BinaryPayload):
        return payload
    raise UnexpectedPayloadError("Expected media content from the video API but got JSON")


# ==================== HANDLERS ====================


async def create_video(client: VideoAPIClient, args: CreateVideoInput) -> Any:
    fields: dict[str, str | FilePart] = {
        "prompt": args.prompt,
        "model": args.model,
        "size": args.size,
        "seconds": args.seconds,
    }
    if args.input_reference:
        image = await load_reference_image(args.input_reference, args.size)
        fields["input_reference"] = FilePart(image.filename, image.content, image.mime_type)

    payload = await client.request_multipart("/videos", fields)
    job = payload.value
    logger.info("Started job %s (%s)", job.get("id"), job.get("status"))
    return job


async def get_video_status(client: VideoAPIClient, args: GetVideoStatusInput) -> Any:
    video = _expect_json(await client.request(_video_path(args.video_id)))
    logger.info("Video %s status: %s (progress %s)", args.video_id, video.get("status"), video.get("progress"))
    return video


async def download_video(client: VideoAPIClient, args: DownloadVideoInput) -> DownloadResult:
    params = None if args.variant == "video" else {"variant": args.variant}
    payload = _expect_binary(await client.request(_video_path(args.video_id, "content"), params=params))

    suffix = suffix_for_variant(args.variant)
    data_base64 = await encode_base64(payload.content)
    logger.info("Downloaded %s for video %s (%d bytes)", args.variant, args.video_id, len(payload.content))
    return {
        "video_id": args.video_id,
        "variant": args.variant,
        "size_bytes": len(payload.content),
        "data_base64": data_base64,
        "suggested_filename": f"{args.video_id}.{suffix}",
        "note": f"Save this base64 data to a file to use it. "
        f"Use the .{suffix} extension for the '{args.variant}' variant.",
    }


async def list_videos(client: VideoAPIClient, args: ListVideosInput) -> Any:
    # Only fields the caller actually passed become query parameters
    params: dict[str, str | int] = {}
    for field in ("limit", "after", "order"):
        value = getattr(args, field)
        if field in args.model_fields_set and value is not None:
            params[field] = value

    page = _expect_json(await client.request("/videos", params=params))
    logger.info("Listed %d videos", len(page.get("data") or []))
    return page


async def delete_video(client: VideoAPIClient, args: DeleteVideoInput) -> Any:
    resp = _expect_json(await client.request(_video_path(args.video_id), "DELETE"))
    logger.info("Deleted %s", args.video_id)
    return resp


async def remix_video(client: VideoAPIClient, args: RemixVideoInput) -> Any:
    payload = await client.request(_video_path(args.video_id, "remix"), "POST", json={"prompt": args.prompt})
    video = _expect_json(payload)
    logger.info("Started remix %s (from %s)", video.get("id"), args.video_id)
    return video


Handler = Callable[[VideoAPIClient, Any], Awaitable[Any]]

HANDLERS: dict[ToolName, Handler] = {
    ToolName.CREATE_VIDEO: create_video,
    ToolName.GET_VIDEO_STATUS: get_video_status,
    ToolName.DOWNLOAD_VIDEO: download_video,
    ToolName.LIST_VIDEOS: list_videos,
    ToolName.DELETE_VIDEO: delete_video,
    ToolName.REMIX_VIDEO: remix_video,
}


# ==================== DISPATCH BOUNDARY ====================


def _error(code: int, message: str) -> McpError:
    return McpError(types.ErrorData(code=code, message=message))


def _validation_message(name: str, err: ValidationError) -> str:
    problems = "; ".join(
        f"{'.'.join(str(p) for p in e['loc']) or 'arguments'}: {e['msg']}" for e in err.errors()
    )
    return f"Invalid arguments for {name}: {problems}"


async def call_tool(client: VideoAPIClient, name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
    """Run one tool invocation and shape the result.

    Args:
        client: Upstream API client
        name: Requested tool name
        arguments: Raw argument mapping from the MCP request

    Returns:
        A single text content block with the pretty-printed JSON result

    Raises:
        McpError: METHOD_NOT_FOUND for unknown tools, INVALID_PARAMS for bad
            arguments, INVALID_REQUEST when no credential is configured, and
            INTERNAL_ERROR for upstream or unexpected failures
    """
    tool = resolve_tool(name)
    if tool is None:
        raise _error(types.METHOD_NOT_FOUND, f"Unknown tool: {name}")

    try:
        args: ToolInput = TOOL_SPECS[tool].input_model.model_validate(arguments or {})
        result = await HANDLERS[tool](client, args)
        text = json.dumps(result, indent=2, ensure_ascii=False)
    except McpError:
        raise
    except ValidationError as e:
        raise _error(types.INVALID_PARAMS, _validation_message(name, e)) from e
    except InvalidArgumentError as e:
        raise _error(types.INVALID_PARAMS, str(e)) from e
    except MissingCredentialError as e:
        raise _error(types.INVALID_REQUEST, str(e)) from e
    except UpstreamError as e:
        logger.error("%s failed: %s", name, e)
        raise _error(types.INTERNAL_ERROR, str(e)) from e
    except Exception as e:
        logger.exception("%s failed", name)
        raise _error(types.INTERNAL_ERROR, f"Tool execution failed: {e}") from e

    return [types.TextContent(type="text", text=text)]
