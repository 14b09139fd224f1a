# SPDX-License-Identifier: MIT
"""Helpers for media payloads: reference images in, video assets out."""

import base64
import binascii
import io
from dataclasses import dataclass

import anyio
from PIL import Image, UnidentifiedImageError

from .config import logger
from .errors import InvalidArgumentError
from .types import VideoVariant

# Pillow format name -> (MIME type, file extension) accepted as input_reference
_REFERENCE_FORMATS: dict[str, tuple[str, str]] = {
    "JPEG": ("image/jpeg", "jpg"),
    "PNG": ("image/png", "png"),
    "WEBP": ("image/webp", "webp"),
}


@dataclass(frozen=True)
class ReferenceImage:
    """A decoded, format-checked reference image ready for upload."""

    filename: str
    content: bytes
    mime_type: str
    width: int
    height: int


def suffix_for_variant(variant: VideoVariant) -> str:
    return {"video": "mp4", "thumbnail": "webp", "spritesheet": "jpg"}[variant]


def strip_data_url(value: str) -> str:
    """Return the base64 part of a ``data:<mime>;base64,`` URL, or the value unchanged."""
    if value.startswith("data:") and "," in value:
        return value.split(",", 1)[1]
    return value


def decode_base64(value: str) -> bytes:
    """Strictly decode base64 text, accepting a data URL prefix.

    Raises:
        InvalidArgumentError: If the text is not valid base64
    """
    try:
        return base64.b64decode(strip_data_url(value).strip(), validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidArgumentError(f"input_reference is not valid base64: {e}") from e


def _inspect_reference(data: bytes) -> ReferenceImage:
    try:
        with Image.open(io.BytesIO(data)) as img:
            fmt = img.format or ""
            width, height = img.size
    except UnidentifiedImageError as e:
        raise InvalidArgumentError("input_reference is not a recognizable image. Use JPEG, PNG, or WEBP") from e

    if fmt not in _REFERENCE_FORMATS:
        raise InvalidArgumentError(f"Unsupported input_reference format: {fmt}. Use: JPEG, PNG, or WEBP")

    mime_type, ext = _REFERENCE_FORMATS[fmt]
    return ReferenceImage(
        filename=f"input_reference.{ext}",
        content=data,
        mime_type=mime_type,
        width=width,
        height=height,
    )


async def load_reference_image(value: str, target_size: str) -> ReferenceImage:
    """Decode a base64 reference image and check its format.

    Sora expects the reference to match the target video size. A mismatch
    is only logged; the upstream API has the final say.

    Args:
        value: Base64 image data, optionally as a data URL
        target_size: Requested video size, e.g. "1280x720"

    Returns:
        ReferenceImage with detected MIME type and dimensions

    Raises:
        InvalidArgumentError: If the data is not base64 or not a JPEG/PNG/WEBP image
    """
    data = await anyio.to_thread.run_sync(decode_base64, value)
    image = await anyio.to_thread.run_sync(_inspect_reference, data)

    if f"{image.width}x{image.height}" != target_size:
        logger.warning(
            "Reference image is %dx%d but target size is %s; the API may reject it",
            image.width,
            image.height,
            target_size,
        )
    return image


async def encode_base64(data: bytes) -> str:
    return await anyio.to_thread.run_sync(lambda: base64.b64encode(data).decode("ascii"))
