"""
Mock Gemini clients for testing label parsing.

These mocks provide deterministic replies for testing without API calls.
"""

import base64
import io
import json
import struct
import zlib
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

import httpx
from PIL import Image


def make_reply(
    status: str = "success",
    message: str = "",
    harmful_ingredients: Optional[List[str]] = None,
) -> str:
    """Build a reply in the exact format the prompts ask for."""
    return json.dumps(
        {
            "status": status,
            "message": message,
            "harmful_ingredients": harmful_ingredients or [],
        }
    )


def make_envelope(text: str) -> Dict[str, Any]:
    """Wrap reply text in a generateContent response envelope."""
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def make_image_bytes(image_format: str = "PNG", size: tuple = (8, 8)) -> bytes:
    """Render a tiny solid image in the given Pillow format."""
    buffer = io.BytesIO()
    Image.new("RGB", size, (255, 255, 255)).save(buffer, format=image_format)
    return buffer.getvalue()


def make_png_header(width: int, height: int) -> bytes:
    """A PNG signature plus a lone IHDR chunk declaring the given size."""
    ihdr = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    chunk = b"IHDR" + ihdr
    return (
        b"\x89PNG\r\n\x1a\n"
        + struct.pack(">I", len(ihdr))
        + chunk
        + struct.pack(">I", zlib.crc32(chunk) & 0xFFFFFFFF)
    )


class MockGeminiClient:
    """
    Mock GeminiClient for testing the parse flow.

    Replies are consumed in order, one per send() call. An Exception in the
    list is raised instead of returned.
    """

    def __init__(self, replies: Optional[List[Union[str, BaseException]]] = None):
        self.api_key = "test-api-key"
        self.model = "gemini-test"

        # Track calls for assertions
        self.calls: List[Dict] = []

        self._replies: List[Union[str, BaseException]] = list(replies or [])

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def queue_reply(self, reply: Union[str, BaseException]):
        """Append a reply (or error) for the next unanswered call."""
        self._replies.append(reply)

    async def send(
        self, image: bytes, prompt: str, mime_type: str = "image/jpeg"
    ) -> str:
        """Mock model call."""
        self.calls.append(
            {
                "timestamp": datetime.utcnow().isoformat(),
                "image": image,
                "prompt": prompt,
                "mime_type": mime_type,
            }
        )

        if not self._replies:
            raise AssertionError("MockGeminiClient.send called more times than scripted")

        reply = self._replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        return reply

    @property
    def prompts(self) -> List[str]:
        return [call["prompt"] for call in self.calls]


class RecordingTransport(httpx.MockTransport):
    """httpx.MockTransport that remembers every request it served."""

    def __init__(self, responses: List[Union[httpx.Response, Exception]]):
        self.requests: List[httpx.Request] = []
        self._responses = list(responses)
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def request_json(self, index: int = 0) -> Dict[str, Any]:
        return json.loads(self.requests[index].content)

    def sent_image(self, index: int = 0) -> bytes:
        parts = self.request_json(index)["contents"][0]["parts"]
        return base64.b64decode(parts[1]["inline_data"]["data"])
