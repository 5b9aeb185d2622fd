"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from ingredient_parser.api.parse import get_gemini_client
from ingredient_parser.config import settings
from ingredient_parser.services.gemini_client import GeminiClient

router = APIRouter(prefix="/health", tags=["health"])


def check_dependencies(client: GeminiClient) -> dict[str, str]:
    """
    Report dependency status without calling the model API.

    A missing API key only fails requests at call time, so it degrades
    the service instead of taking it down.
    """
    return {"gemini": "UP" if client.is_configured else "MISSING_CREDENTIALS"}


@router.get("")
async def health_check(client: GeminiClient = Depends(get_gemini_client)):
    dependencies = check_dependencies(client)
    overall = "UP" if all(s == "UP" for s in dependencies.values()) else "DEGRADED"
    return {
        "status": overall,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.deployment_id,
        "dependencies": dependencies,
    }
