r"""Configuration defaults and dataclass for HTTP client engines.

This module provides configuration constants and a dataclass-based
configuration object for the ``HttpxClientEngine``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_CHARSET",
    "DEFAULT_FOLLOW_REDIRECTS",
    "DEFAULT_TIMEOUT",
    "EngineConfig",
]

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from httpops.core.validation import validate_timeout

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx

    from httpops.callbacks import FailureInfo, RequestInfo, ResponseInfo


# Default timeout in seconds for HTTP requests
DEFAULT_TIMEOUT = 10.0

# Charset used to decode text bodies that do not declare one
DEFAULT_CHARSET = "utf-8"

DEFAULT_FOLLOW_REDIRECTS = False


@dataclass
class EngineConfig:
    """Configuration of an HTTP client engine.

    Args:
        timeout: Maximum seconds to wait for server responses. Must be > 0.
            Only used when the engine creates its own ``httpx.AsyncClient``.
        follow_redirects: Whether the engine follows redirect responses.
        headers: Default headers sent with every request.
        on_request: Optional callback called before each request is sent.
        on_response: Optional callback called when a response is received,
            before it is handled.
        on_failure: Optional callback called when the HTTP exchange fails.

    Example:
        ```pycon
        >>> from httpops.core.config import EngineConfig
        >>> config = EngineConfig()
        >>> config.timeout
        10.0
        >>> merged = config.merge(timeout=30.0)
        >>> merged.timeout
        30.0
        >>> config.timeout
        10.0

        ```
    """

    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT
    follow_redirects: bool = DEFAULT_FOLLOW_REDIRECTS
    headers: dict[str, str] = field(default_factory=dict)
    on_request: Callable[[RequestInfo], None] | None = None
    on_response: Callable[[ResponseInfo], None] | None = None
    on_failure: Callable[[FailureInfo], None] | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_timeout(self.timeout)

    def merge(self, **overrides: Any) -> EngineConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new EngineConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def client_kwargs(self) -> dict[str, Any]:
        """Return the keyword arguments used to create an
        ``httpx.AsyncClient``.

        Example:
            ```pycon
            >>> from httpops.core.config import EngineConfig
            >>> EngineConfig(headers={"User-Agent": "demo"}).client_kwargs()
            {'timeout': 10.0, 'follow_redirects': False, 'headers': {'User-Agent': 'demo'}}

            ```
        """
        return {
            "timeout": self.timeout,
            "follow_redirects": self.follow_redirects,
            "headers": dict(self.headers),
        }
