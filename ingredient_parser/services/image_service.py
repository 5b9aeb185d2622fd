"""Upload checks for ingredient-label images."""

import io
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from ingredient_parser.services.errors import (
    InvalidImageError,
    MissingImageError,
    UnsupportedImageTypeError,
)

UNSUPPORTED_FORMAT_MESSAGE = "Only .jpg, .jpeg, .png, and .webp formats are supported"

ALLOWED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp"}
ALLOWED_CONTENT_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/webp"}

# Pillow format name -> media type sent to Gemini
PIL_FORMAT_MEDIA_TYPES = {
    "JPEG": "image/jpeg",
    "PNG": "image/png",
    "WEBP": "image/webp",
}


def check_upload_type(filename: Optional[str], content_type: Optional[str]) -> None:
    """
    Reject uploads whose name or declared type is not jpg/jpeg/png/webp.

    Raises:
        UnsupportedImageTypeError: Extension or content type not allowed
    """
    extension = Path(filename or "").suffix.lower()
    if extension not in ALLOWED_EXTENSIONS:
        raise UnsupportedImageTypeError(UNSUPPORTED_FORMAT_MESSAGE)
    if content_type and content_type.lower() not in ALLOWED_CONTENT_TYPES:
        raise UnsupportedImageTypeError(UNSUPPORTED_FORMAT_MESSAGE)


def detect_media_type(data: bytes, max_bytes: int) -> str:
    """
    Decode the upload header with Pillow and return its media type.

    The declared content type is not trusted; the type sent upstream is
    the one Pillow actually recognises.

    Args:
        data: Uploaded bytes
        max_bytes: Upload size limit

    Returns:
        "image/jpeg", "image/png" or "image/webp"

    Raises:
        MissingImageError: Upload is empty
        InvalidImageError: Too large or not decodable
        UnsupportedImageTypeError: Decodes, but is another format (e.g. GIF)
    """
    if not data:
        raise MissingImageError("Image file is required")
    if len(data) > max_bytes:
        raise InvalidImageError(
            f"Image exceeds the upload limit of {max_bytes} bytes"
        )

    try:
        with Image.open(io.BytesIO(data)) as img:
            image_format = img.format
            img.verify()
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        SyntaxError,
        ValueError,
    ) as e:
        raise InvalidImageError("Uploaded file is not a valid image") from e

    media_type = PIL_FORMAT_MEDIA_TYPES.get(image_format or "")
    if media_type is None:
        raise UnsupportedImageTypeError(UNSUPPORTED_FORMAT_MESSAGE)
    return media_type
