from __future__ import annotations

from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from httpops.engine import HttpClientEngine
from tests.helpers import BASE_URI, RecordingEngine


@pytest.fixture
def mock_engine() -> HttpClientEngine:
    """Create a mock HttpClientEngine for testing."""
    return Mock(
        spec=HttpClientEngine,
        execute_http_request=AsyncMock(),
        aclose=AsyncMock(),
        cookie_store=httpx.Cookies(),
    )


@pytest.fixture
def mock_client(mock_engine: HttpClientEngine) -> Mock:
    """Create a mock service client exposing ``mock_engine``."""
    return Mock(base_uri=httpx.URL(BASE_URI), engine=mock_engine)


@pytest.fixture
def recording_engine() -> RecordingEngine:
    """Create an engine answering ``200`` without body."""
    return RecordingEngine()


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing callbacks.

    Returns:
        A Mock object that can be used as a callback function.
    """
    return Mock()
