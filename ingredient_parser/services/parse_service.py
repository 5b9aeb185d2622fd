"""
Ingredient-label parsing: drives the model call, classification and retry.

One invocation makes at most two model calls:
1. INITIAL_PROMPT
2. RETRY_PROMPT, only when the first reply broke the format contract

Domain errors reported by the model end the invocation immediately, as do
configuration and upstream failures. A second format violation is final.
"""

import asyncio
import logging

from ingredient_parser.services.ai_schemas import (
    DomainError,
    FormatError,
    ParseResult,
    Success,
)
from ingredient_parser.services.errors import (
    ContractViolationError,
    IngredientLabelError,
    MissingImageError,
    UnsupportedImageTypeError,
)
from ingredient_parser.services.gemini_client import GeminiClient
from ingredient_parser.services.prompts import ATTEMPT_PROMPTS
from ingredient_parser.services.response_normalizer import classify

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = len(ATTEMPT_PROMPTS)

SUPPORTED_MIME_TYPES = ("image/jpeg", "image/png", "image/webp")


class ParseService:
    """Turns a label image into the list of harmful ingredients on it."""

    def __init__(self, client: GeminiClient):
        self.client = client

    async def process_image(
        self, image: bytes, mime_type: str = "image/jpeg"
    ) -> ParseResult:
        """
        Find the harmful ingredients on an ingredient-label image.

        Args:
            image: Validated image bytes
            mime_type: Media type of the image

        Returns:
            ParseResult with the harmful ingredients as the model listed them

        Raises:
            MissingImageError: No image bytes
            UnsupportedImageTypeError: mime_type is not jpeg, png or webp
            IngredientLabelError: Model reported a problem with the label (400)
            ContractViolationError: Model broke the format on both attempts
            ConfigurationError: API key missing (from the client)
            UpstreamError: Model API failure (from the client, never retried)
        """
        if not image:
            raise MissingImageError("Image file is required")
        if mime_type not in SUPPORTED_MIME_TYPES:
            raise UnsupportedImageTypeError(f"Unsupported image type: {mime_type}")

        last_reason = ""
        for attempt, prompt in enumerate(ATTEMPT_PROMPTS, start=1):
            try:
                reply = await self.client.send(image, prompt, mime_type=mime_type)
            except asyncio.CancelledError:
                if attempt > 1:
                    logger.warning(
                        "Label parse cancelled during retry attempt %d/%d",
                        attempt,
                        MAX_ATTEMPTS,
                    )
                raise

            outcome = classify(reply)

            if isinstance(outcome, Success):
                logger.info(
                    "Label parsed on attempt %d/%d: %d harmful ingredient(s)",
                    attempt,
                    MAX_ATTEMPTS,
                    len(outcome.harmful_ingredients),
                )
                return ParseResult(harmful_ingredients=list(outcome.harmful_ingredients))

            if isinstance(outcome, DomainError):
                logger.info(
                    "Model rejected label on attempt %d/%d: %s",
                    attempt,
                    MAX_ATTEMPTS,
                    outcome.message,
                )
                raise IngredientLabelError(outcome.message)

            if isinstance(outcome, FormatError):
                logger.warning(
                    "Model reply broke the format contract (attempt %d/%d): %s",
                    attempt,
                    MAX_ATTEMPTS,
                    outcome.reason,
                )
                last_reason = outcome.reason
                continue

            raise TypeError(f"Unhandled outcome: {outcome!r}")

        raise ContractViolationError(
            f"Model did not comply with the response contract after retry: {last_reason}"
        )
