"""Test fixtures for the ingredient label parser."""

from tests.fixtures.mocks import (
    MockGeminiClient,
    RecordingTransport,
    make_envelope,
    make_image_bytes,
    make_png_header,
    make_reply,
)

__all__ = [
    "MockGeminiClient",
    "RecordingTransport",
    "make_envelope",
    "make_image_bytes",
    "make_png_header",
    "make_reply",
]
