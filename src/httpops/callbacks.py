r"""Callback types for observing the HTTP exchanges of an engine.

The engine lifecycle provides three hooks:
- on_request: Called before the request is sent
- on_response: Called when the response is received, before it is handled
- on_failure: Called when the HTTP exchange fails

Example:
    ```pycon
    >>> from httpops.callbacks import ResponseInfo
    >>> from httpops.core import EngineConfig
    >>> from httpops.engine import HttpxClientEngine
    >>> def log_response(info: ResponseInfo) -> None:
    ...     print(f"{info.method} {info.url} -> {info.status_code}")
    ...
    >>> engine = HttpxClientEngine(config=EngineConfig(on_response=log_response))  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "FailureInfo",
    "RequestInfo",
    "ResponseInfo",
    "invoke_on_failure",
    "invoke_on_request",
    "invoke_on_response",
]

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class RequestInfo:
    """Information passed to on_request callback.

    Attributes:
        url: The URL being requested.
        method: The HTTP method (e.g., "GET", "POST").
    """

    url: str
    method: str


@dataclass
class ResponseInfo:
    """Information passed to on_response callback.

    Attributes:
        url: The URL that was requested.
        method: The HTTP method (e.g., "GET", "POST").
        status_code: The HTTP status code of the response.
        total_time: Time spent on the exchange (seconds).
    """

    url: str
    method: str
    status_code: int
    total_time: float


@dataclass
class FailureInfo:
    """Information passed to on_failure callback.

    Attributes:
        url: The URL that was requested.
        method: The HTTP method (e.g., "GET", "POST").
        error: The exception that caused the failure.
        total_time: Time spent on the exchange (seconds).
    """

    url: str
    method: str
    error: Exception
    total_time: float


def invoke_on_request(
    on_request: Callable[[RequestInfo], None] | None, *, url: str, method: str
) -> None:
    """Invoke on_request callback if provided."""
    if on_request is not None:
        on_request(RequestInfo(url=url, method=method))


def invoke_on_response(
    on_response: Callable[[ResponseInfo], None] | None,
    *,
    url: str,
    method: str,
    status_code: int,
    start_time: float,
) -> None:
    """Invoke on_response callback if provided.

    Args:
        on_response: Optional callback to invoke when a response is received.
        url: The URL that was requested.
        method: The HTTP method (e.g., "GET", "POST").
        status_code: The HTTP status code of the response.
        start_time: The timestamp when the request was sent.
    """
    if on_response is not None:
        on_response(
            ResponseInfo(
                url=url,
                method=method,
                status_code=status_code,
                total_time=time.time() - start_time,
            )
        )


def invoke_on_failure(
    on_failure: Callable[[FailureInfo], None] | None,
    *,
    url: str,
    method: str,
    error: Exception,
    start_time: float,
) -> None:
    """Invoke on_failure callback if provided."""
    if on_failure is not None:
        on_failure(
            FailureInfo(url=url, method=method, error=error, total_time=time.time() - start_time)
        )
