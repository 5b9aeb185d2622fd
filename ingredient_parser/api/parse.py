"""API endpoint for ingredient-label parsing."""

import logging
from functools import lru_cache
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from ingredient_parser.config import settings
from ingredient_parser.services.errors import ParseError
from ingredient_parser.services.gemini_client import GeminiClient
from ingredient_parser.services.image_service import (
    check_upload_type,
    detect_media_type,
)
from ingredient_parser.services.parse_service import ParseService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/parse", tags=["parse"])

INTERNAL_ERROR_MESSAGE = "Internal Server Error"
IMAGE_NOT_A_FILE_MESSAGE = '"image" must be a file'


@lru_cache
def get_gemini_client() -> GeminiClient:
    return GeminiClient(
        api_key=settings.google_api_key,
        model=settings.gemini_model,
        base_url=settings.gemini_api_base,
        timeout=settings.gemini_timeout,
        connect_timeout=settings.gemini_connect_timeout,
    )


def get_parse_service(
    client: GeminiClient = Depends(get_gemini_client),
) -> ParseService:
    return ParseService(client)


def _to_http_exception(error: ParseError) -> HTTPException:
    """4xx errors keep their message, 5xx errors are logged and hidden."""
    if error.user_facing:
        return HTTPException(status_code=error.status_code, detail=str(error))

    logger.error("Label parse failed (%s): %s", type(error).__name__, error)
    return HTTPException(status_code=error.status_code, detail=INTERNAL_ERROR_MESSAGE)


@router.post("")
async def parse_label(
    image: Optional[UploadFile] = File(None),
    parse_service: ParseService = Depends(get_parse_service),
):
    """
    Parse an ingredient-label image and list the harmful ingredients on it.

    Returns: {"success": true, "data": {"harmful_ingredients": [...]}}
    """
    if image is None or not image.filename:
        raise HTTPException(status_code=400, detail=IMAGE_NOT_A_FILE_MESSAGE)

    try:
        check_upload_type(image.filename, image.content_type)
        contents = await image.read(settings.max_upload_bytes + 1)
        media_type = detect_media_type(contents, settings.max_upload_bytes)
        result = await parse_service.process_image(contents, mime_type=media_type)
    except ParseError as e:
        raise _to_http_exception(e)

    return {"success": True, "data": result.model_dump()}
