"""
Gemini REST client for sending a label image plus prompt and reading back text.

One POST per call, no retries: retrying is the caller's decision and only
ever happens for format violations, never for transport failures.
"""

import base64
import logging
from typing import Optional

import httpx

from ingredient_parser.services.errors import (
    ConfigurationError,
    UpstreamError,
    UpstreamTimeoutError,
)

logger = logging.getLogger(__name__)

# Upstream bodies are logged, truncated to this many characters
_MAX_LOGGED_BODY = 1200


class GeminiClient:
    """Thin async wrapper around the generateContent endpoint."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 60,
        connect_timeout: float = 10,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = httpx.Timeout(timeout=timeout, connect=connect_timeout)
        # Only set by tests (httpx.MockTransport)
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def send(
        self, image: bytes, prompt: str, mime_type: str = "image/jpeg"
    ) -> str:
        """
        Send one image + prompt and return the model's reply text.

        Args:
            image: Raw image bytes (not consumed, safe to send again)
            prompt: One of the prompt constants
            mime_type: Image media type

        Returns:
            Text of the first part of the first candidate

        Raises:
            ConfigurationError: No API key configured
            UpstreamTimeoutError: Request timed out
            UpstreamError: Transport failure, non-2xx status or malformed envelope
        """
        if not self.api_key:
            raise ConfigurationError("GOOGLE_API_KEY is not set")
        if not image:
            raise ValueError("Image bytes are required")

        request_body = {
            "contents": [
                {
                    "parts": [
                        {"text": prompt},
                        {
                            "inline_data": {
                                "mime_type": mime_type,
                                "data": base64.standard_b64encode(image).decode(
                                    "ascii"
                                ),
                            }
                        },
                    ]
                }
            ],
            "generationConfig": {"temperature": 0},
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self.endpoint,
                    headers={"x-goog-api-key": self.api_key},
                    json=request_body,
                )
        except httpx.TimeoutException as e:
            logger.error("Gemini request timed out: %s", e)
            raise UpstreamTimeoutError("Gemini request timed out") from e
        except httpx.HTTPError as e:
            logger.error("Gemini request failed: %s", e)
            raise UpstreamError("Gemini request failed") from e

        if not response.is_success:
            body = response.text
            logger.error(
                "Gemini API error %d: %s",
                response.status_code,
                body[:_MAX_LOGGED_BODY],
            )
            raise UpstreamError(
                f"Gemini API error: {response.status_code} {response.reason_phrase}",
                upstream_status=response.status_code,
                body=body,
            )

        return self._extract_text(response)

    def _extract_text(self, response: httpx.Response) -> str:
        """Pull candidates[0].content.parts[0].text out of the response envelope."""
        try:
            payload = response.json()
            text = payload["candidates"][0]["content"]["parts"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error(
                "Malformed Gemini response envelope: %s",
                response.text[:_MAX_LOGGED_BODY],
            )
            raise UpstreamError(
                "Malformed Gemini response envelope",
                upstream_status=response.status_code,
                body=response.text,
            ) from e

        if not isinstance(text, str):
            raise UpstreamError(
                "Malformed Gemini response envelope",
                upstream_status=response.status_code,
                body=response.text,
            )
        return text
