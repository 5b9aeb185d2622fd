"""
Pydantic models and outcome types for Gemini label-parsing replies.

ParseReplySchema validates the JSON object the prompts ask for. The
classified result of one reply is a ParsedOutcome: exactly one of
Success, FormatError or DomainError.
"""

from dataclasses import dataclass, field
from typing import Any, Literal, Union

from pydantic import BaseModel, field_validator


# --- Reply contract (INITIAL_PROMPT / RETRY_PROMPT) ---


class ParseReplySchema(BaseModel):
    status: Literal["success", "error"]
    message: Any = None
    harmful_ingredients: list[Any] = []

    @field_validator("harmful_ingredients", mode="before")
    @classmethod
    def _coerce_non_list(cls, value: Any) -> Any:
        # Anything but an array counts as "nothing found"
        if not isinstance(value, list):
            return []
        return value


# --- Classified outcome of one attempt ---


@dataclass(frozen=True)
class Success:
    harmful_ingredients: tuple = ()


@dataclass(frozen=True)
class FormatError:
    """Reply broke the format contract. `reason` is for logs only."""

    reason: str = field(default="", compare=False)


@dataclass(frozen=True)
class DomainError:
    message: str


ParsedOutcome = Union[Success, FormatError, DomainError]


# --- Public result returned to the HTTP layer ---


class ParseResult(BaseModel):
    harmful_ingredients: list[Any]
