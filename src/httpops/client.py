r"""Base client of an HTTP service.

This module provides the ``HttpServiceClient`` class, which binds an
HTTP client engine to the base URI of a service and executes the
service operations.
"""

from __future__ import annotations

__all__ = ["HttpServiceClient"]

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from httpops.core.validation import validate_base_uri

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

    import httpx

    from httpops.engine.base import HttpClientEngine
    from httpops.op.status_independent import StatusIndependentOperation

logger: logging.Logger = logging.getLogger(__name__)

P = TypeVar("P")
R = TypeVar("R")


class HttpServiceClient:
    r"""Client of an HTTP service.

    The client does not hold any per-call state. Operations resolve
    their request URIs against the client base URI and perform their HTTP
    exchanges through the client engine.

    Args:
        engine: The HTTP client engine used to perform HTTP exchanges.
            The client closes it in ``aclose``.
        base_uri: The absolute base URI of the service.

    Raises:
        ValueError: If ``base_uri`` is not absolute.

    Example:
        ```pycon
        >>> import asyncio
        >>> from httpops import HttpServiceClient
        >>> from httpops.engine import create_default_engine
        >>> async def main():  # doctest: +SKIP
        ...     async with HttpServiceClient(
        ...         create_default_engine(), "https://api.example.com/v1/"
        ...     ) as client:
        ...         return await client.execute(GetPublicIp(), None)
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(self, engine: HttpClientEngine, base_uri: str | httpx.URL) -> None:
        if engine is None:
            msg = "engine is required"
            raise ValueError(msg)
        self._engine = engine
        self._base_uri = validate_base_uri(base_uri)

    def __repr__(self) -> str:
        return f"{type(self).__qualname__}(base_uri={self._base_uri!s})"

    @property
    def base_uri(self) -> httpx.URL:
        """The absolute base URI of the service."""
        return self._base_uri

    @property
    def engine(self) -> HttpClientEngine:
        """The HTTP client engine."""
        return self._engine

    @property
    def cookie_store(self) -> httpx.Cookies:
        """The cookies shared by the HTTP exchanges of this client."""
        return self._engine.cookie_store

    async def execute(self, operation: StatusIndependentOperation[P, Any, R], params: P) -> R:
        """Execute a status independent operation.

        Args:
            operation: The operation to execute.
            params: The operation parameters.

        Returns:
            The operation result.

        Raises:
            HttpClientError: If the operation fails.
        """
        return await operation.execute(params, self)

    async def aclose(self) -> None:
        """Close the client engine."""
        logger.debug(f"Closing {self!r}")
        await self._engine.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()
