r"""Client of an HTTP service keeping a client status.

Stated services require some client side state between calls: a
session token, the anti-forgery token of the last page, the negotiated
service version... The status is created on demand by a status
initialization operation and passed to every status dependent
operation executed by the client.
"""

from __future__ import annotations

__all__ = ["StatedHttpServiceClient"]

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from httpops.client import HttpServiceClient
from httpops.op.status_dependent import StatusDependentOperation

if TYPE_CHECKING:
    import httpx

    from httpops.engine.base import HttpClientEngine
    from httpops.op.status_independent import StatusIndependentOperation

logger: logging.Logger = logging.getLogger(__name__)

P = TypeVar("P")
S = TypeVar("S")
R = TypeVar("R")


class StatedHttpServiceClient(HttpServiceClient, Generic[S]):
    r"""Client of an HTTP service keeping a status of type ``S``.

    Args:
        engine: The HTTP client engine used to perform HTTP exchanges.
        base_uri: The absolute base URI of the service.
        status_init_operation: Status independent operation, called with
            ``None`` parameters, returning a new client status.

    Raises:
        ValueError: If ``base_uri`` is not absolute or
            ``status_init_operation`` is missing.

    Example:
        ```pycon
        >>> from unittest.mock import Mock
        >>> from httpops import StatedHttpServiceClient
        >>> client = StatedHttpServiceClient(Mock(), "https://example.org/", Mock())
        >>> client.status is None
        True
        >>> client.set_status({"token": "abc"})
        >>> client.status
        {'token': 'abc'}
        >>> client.reset_status()
        >>> client.status is None
        True

        ```
    """

    def __init__(
        self,
        engine: HttpClientEngine,
        base_uri: str | httpx.URL,
        status_init_operation: StatusIndependentOperation[None, Any, S],
    ) -> None:
        super().__init__(engine, base_uri)
        if status_init_operation is None:
            msg = "status_init_operation is required"
            raise ValueError(msg)
        self._status_init_operation = status_init_operation
        self._status: S | None = None
        self._status_lock = asyncio.Lock()

    @property
    def status_init_operation(self) -> StatusIndependentOperation[None, Any, S]:
        return self._status_init_operation

    @property
    def status(self) -> S | None:
        """The current client status, ``None`` if not initialized."""
        return self._status

    def set_status(self, status: S | None) -> None:
        self._status = status

    def reset_status(self) -> None:
        """Discard the current client status.

        The next status dependent operation initializes a new one.
        """
        self.set_status(None)

    async def initialize_status(self) -> S:
        """Create a new client status, replacing the current one.

        Returns:
            The new client status.

        Raises:
            HttpClientError: If the status initialization operation fails.
                The current status is kept in that case.
        """
        logger.debug("Initializing client status...")
        status = await self._status_init_operation.execute(None, self)
        self._status = status
        logger.debug("Client status initialized.")
        return status

    async def ensure_initialized(self) -> S:
        """Return the client status, initializing it if required.

        Concurrent calls initialize the status only once.

        Returns:
            The client status.
        """
        async with self._status_lock:
            if self._status is None:
                return await self.initialize_status()
            return self._status

    async def execute(self, operation: Any, params: Any) -> Any:
        """Execute an operation.

        Status dependent operations receive the client status,
        initializing it first if required. Other operations are executed
        as by ``HttpServiceClient``.

        Args:
            operation: The operation to execute.
            params: The operation parameters.

        Returns:
            The operation result.

        Raises:
            HttpClientError: If the status initialization or the
                operation fails.
        """
        if isinstance(operation, StatusDependentOperation):
            return await self._execute_with_status(operation, params)
        return await super().execute(operation, params)

    async def _execute_with_status(
        self, operation: StatusDependentOperation[P, Any, Any, R], params: P
    ) -> R:
        status = await self.ensure_initialized()
        return await operation.execute(params, status, self)
