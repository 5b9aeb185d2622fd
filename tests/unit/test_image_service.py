"""
Unit tests for upload checks.

Tests extension / content-type filtering and Pillow-based type detection.
"""

import pytest

from ingredient_parser.services.errors import (
    InvalidImageError,
    MissingImageError,
    UnsupportedImageTypeError,
)
from ingredient_parser.services.image_service import (
    UNSUPPORTED_FORMAT_MESSAGE,
    check_upload_type,
    detect_media_type,
)
from tests.fixtures.mocks import make_image_bytes, make_png_header

MAX_BYTES = 1024 * 1024


class TestCheckUploadType:
    @pytest.mark.parametrize(
        "filename,content_type",
        [
            ("label.jpg", "image/jpeg"),
            ("label.JPEG", "image/jpeg"),
            ("label.png", "image/png"),
            ("label.webp", "image/webp"),
            ("label.jpg", None),
            ("label.jpg", "image/jpg"),
        ],
    )
    def test_allowed(self, filename, content_type):
        check_upload_type(filename, content_type)

    @pytest.mark.parametrize(
        "filename,content_type",
        [
            ("test.txt", "text/plain"),
            ("label.gif", "image/gif"),
            ("label", "image/jpeg"),
            (None, "image/jpeg"),
            ("label.jpg", "text/plain"),
        ],
    )
    def test_rejected(self, filename, content_type):
        with pytest.raises(UnsupportedImageTypeError) as exc_info:
            check_upload_type(filename, content_type)

        assert str(exc_info.value) == UNSUPPORTED_FORMAT_MESSAGE


class TestDetectMediaType:
    @pytest.mark.parametrize(
        "image_format,media_type",
        [("JPEG", "image/jpeg"), ("PNG", "image/png"), ("WEBP", "image/webp")],
    )
    def test_supported_formats(self, image_format, media_type):
        data = make_image_bytes(image_format)

        assert detect_media_type(data, MAX_BYTES) == media_type

    def test_declared_type_is_ignored(self):
        # A PNG uploaded as label.jpg is still sent upstream as PNG
        assert detect_media_type(make_image_bytes("PNG"), MAX_BYTES) == "image/png"

    def test_empty(self):
        with pytest.raises(MissingImageError):
            detect_media_type(b"", MAX_BYTES)

    def test_too_large(self):
        data = make_image_bytes("PNG")

        with pytest.raises(InvalidImageError, match="upload limit"):
            detect_media_type(data, len(data) - 1)

    def test_not_an_image(self):
        with pytest.raises(InvalidImageError, match="not a valid image"):
            detect_media_type(b"\x01\x02\x03", MAX_BYTES)

    def test_oversized_dimensions(self):
        # 60-odd bytes declaring a 100000x100000 image
        data = make_png_header(100000, 100000)

        with pytest.raises(InvalidImageError, match="not a valid image"):
            detect_media_type(data, MAX_BYTES)

    def test_other_image_format(self):
        with pytest.raises(UnsupportedImageTypeError):
            detect_media_type(make_image_bytes("GIF"), MAX_BYTES)
