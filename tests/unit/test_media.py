# SPDX-License-Identifier: MIT
"""Unit tests for media helpers."""

import base64
import logging

import pytest

from sora2_mcp.errors import InvalidArgumentError
from sora2_mcp.media import decode_base64, encode_base64, load_reference_image, strip_data_url, suffix_for_variant


@pytest.mark.unit
class TestSuffixForVariant:
    """Test file extension mapping for video variants."""

    def test_video_variant(self):
        """Test that the video variant maps to mp4."""
        assert suffix_for_variant("video") == "mp4"

    def test_thumbnail_variant(self):
        """Test that the thumbnail variant maps to webp."""
        assert suffix_for_variant("thumbnail") == "webp"

    def test_spritesheet_variant(self):
        """Test that the spritesheet variant maps to jpg."""
        assert suffix_for_variant("spritesheet") == "jpg"


@pytest.mark.unit
class TestBase64:
    """Test base64 helpers and data URL handling."""

    def test_strip_data_url(self):
        """Test that the data URL header is removed."""
        assert strip_data_url("data:image/png;base64,QUJD") == "QUJD"

    def test_plain_base64_unchanged(self):
        """Test that plain base64 passes through untouched."""
        assert strip_data_url("QUJD") == "QUJD"

    def test_decode_accepts_data_url(self):
        """Test that decoding works on a full data URL."""
        assert decode_base64("data:image/png;base64,QUJD") == b"ABC"

    def test_decode_rejects_garbage(self):
        """Test that non-base64 text raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="not valid base64"):
            decode_base64("not base64!!")

    async def test_encode_decodes_back_to_same_bytes(self):
        """Test that encoded output decodes to the exact input bytes."""
        data = bytes(range(256)) * 3

        encoded = await encode_base64(data)

        assert base64.b64decode(encoded) == data


@pytest.mark.unit
class TestLoadReferenceImage:
    """Test decoding and format detection of reference images."""

    async def test_png_detected(self, make_image):
        """Test that a PNG is recognized with its dimensions."""
        encoded = base64.b64encode(make_image((1280, 720), "PNG")).decode()

        image = await load_reference_image(encoded, "1280x720")

        assert image.mime_type == "image/png"
        assert image.filename == "input_reference.png"
        assert (image.width, image.height) == (1280, 720)

    @pytest.mark.parametrize(("fmt", "mime", "ext"), [("JPEG", "image/jpeg", "jpg"), ("WEBP", "image/webp", "webp")])
    async def test_jpeg_and_webp_detected(self, make_image, fmt, mime, ext):
        """Test that JPEG and WEBP get the right MIME type and extension."""
        encoded = base64.b64encode(make_image((720, 1280), fmt)).decode()

        image = await load_reference_image(encoded, "720x1280")

        assert image.mime_type == mime
        assert image.filename == f"input_reference.{ext}"

    async def test_invalid_base64_rejected(self):
        """Test that malformed base64 raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="not valid base64"):
            await load_reference_image("%%%", "1280x720")

    async def test_unsupported_format_rejected(self, make_image):
        """Test that GIF images are rejected."""
        encoded = base64.b64encode(make_image((64, 64), "GIF")).decode()

        with pytest.raises(InvalidArgumentError, match="Unsupported input_reference format: GIF"):
            await load_reference_image(encoded, "1280x720")

    async def test_non_image_rejected(self):
        """Test that bytes that are not an image are rejected."""
        encoded = base64.b64encode(b"definitely not an image").decode()

        with pytest.raises(InvalidArgumentError, match="not a recognizable image"):
            await load_reference_image(encoded, "1280x720")

    async def test_size_mismatch_logs_warning(self, make_image, caplog):
        """Test that a size mismatch warns but still returns the image."""
        encoded = base64.b64encode(make_image((200, 100), "PNG")).decode()

        with caplog.at_level(logging.WARNING, logger="sora2_mcp"):
            image = await load_reference_image(encoded, "1280x720")

        assert image.content
        assert "200x100" in caplog.text
        assert "1280x720" in caplog.text
