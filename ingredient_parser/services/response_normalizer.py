"""
Classify raw Gemini replies against the label-parsing format contract.

classify() never raises: every reply ends up as Success, FormatError or
DomainError.
"""

import json
import re

from pydantic import ValidationError

from ingredient_parser.services.ai_schemas import (
    DomainError,
    FormatError,
    ParsedOutcome,
    ParseReplySchema,
    Success,
)

UNKNOWN_ERROR_MESSAGE = "Unknown error"

# ```json ... ``` or ``` ... ``` around the whole reply
_CODE_FENCE_RE = re.compile(r"^```[\w+-]*[ \t]*\n?(.*?)\n?```$", re.DOTALL)


def strip_code_fence(text: str) -> str:
    """Strip surrounding whitespace and a markdown code fence wrapping the text."""
    text = text.strip()
    match = _CODE_FENCE_RE.match(text)
    if match:
        text = match.group(1).strip()
    return text


def classify(raw_text: str) -> ParsedOutcome:
    """
    Classify one model reply.

    Args:
        raw_text: Text of the first candidate part returned by the model

    Returns:
        Success with the harmful ingredients exactly as the model listed them,
        DomainError with the model's message when it reports status "error",
        FormatError when the reply is not the expected JSON object
    """
    if not isinstance(raw_text, str):
        return FormatError(f"reply is {type(raw_text).__name__}, not text")

    cleaned = strip_code_fence(raw_text)
    if not cleaned:
        return FormatError("empty reply")

    try:
        parsed = json.loads(cleaned)
    except (ValueError, RecursionError) as e:
        return FormatError(f"invalid JSON: {e}")

    if not isinstance(parsed, dict):
        return FormatError(f"expected a JSON object, got {type(parsed).__name__}")

    try:
        reply = ParseReplySchema.model_validate(parsed)
    except ValidationError as e:
        return FormatError(f"schema mismatch: {e.errors()[0]['msg']}")

    if reply.status == "error":
        message = reply.message
        if not isinstance(message, str) or not message:
            message = UNKNOWN_ERROR_MESSAGE
        return DomainError(message)

    return Success(tuple(reply.harmful_ingredients))
