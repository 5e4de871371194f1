r"""HTTP client engines performing the HTTP exchanges of operations."""

from __future__ import annotations

__all__ = [
    "HttpClientEngine",
    "HttpRequest",
    "HttpRequestCustomizer",
    "HttpResponse",
    "HttpResponseBody",
    "HttpResponseHandler",
    "HttpxClientEngine",
    "HttpxResponse",
    "HttpxResponseBody",
    "create_default_engine",
]

from typing import TYPE_CHECKING

from httpops.engine.base import (
    HttpClientEngine,
    HttpRequest,
    HttpRequestCustomizer,
    HttpResponse,
    HttpResponseBody,
    HttpResponseHandler,
)
from httpops.engine.httpx_engine import HttpxClientEngine, HttpxResponse, HttpxResponseBody

if TYPE_CHECKING:
    from httpops.core.config import EngineConfig


def create_default_engine(config: EngineConfig | None = None) -> HttpClientEngine:
    """Create the default HTTP client engine.

    Args:
        config: Optional engine configuration.

    Returns:
        A new ``HttpxClientEngine`` owning its ``httpx.AsyncClient``.
    """
    return HttpxClientEngine(config=config)
