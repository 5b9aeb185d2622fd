"""
Test configuration and fixtures for the ingredient label parser.

- Mock Gemini client injected through FastAPI dependency overrides
- TestClient for the HTTP layer
- Small generated images for upload tests
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from ingredient_parser.api.parse import get_gemini_client
from ingredient_parser.main import app
from tests.fixtures.mocks import MockGeminiClient, make_image_bytes


# =============================================================================
# Model Client Fixtures
# =============================================================================


@pytest.fixture
def mock_gemini_client() -> MockGeminiClient:
    """Unscripted mock client; queue replies per test."""
    return MockGeminiClient()


# =============================================================================
# Image Fixtures
# =============================================================================


@pytest.fixture
def png_bytes() -> bytes:
    return make_image_bytes("PNG")


@pytest.fixture
def jpeg_bytes() -> bytes:
    return make_image_bytes("JPEG")


# =============================================================================
# TestClient Fixtures
# =============================================================================


@pytest.fixture
def client(mock_gemini_client: MockGeminiClient) -> Generator[TestClient, None, None]:
    """
    TestClient with the Gemini client dependency overridden.

    The same mock backs /parse and /health.
    """
    app.dependency_overrides[get_gemini_client] = lambda: mock_gemini_client

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
