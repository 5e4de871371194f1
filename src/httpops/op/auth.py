r"""Building blocks for services requiring authentication.

An authenticable service keeps an ``AuthenticableClientStatus``
telling whether the client is authenticated. An
``AuthenticationOperation`` authenticates the client using some
credentials, and operations marked with ``AuthenticatedOperation`` are
only executed once the client is authenticated.
"""

from __future__ import annotations

__all__ = [
    "AuthenticableClientStatus",
    "AuthenticatedOperation",
    "AuthenticationAutoRenewalPolicy",
    "AuthenticationOperation",
    "RenewOnceAutoRenewalPolicy",
]

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

from httpops.op.status_dependent import StatusDependentOperation

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger: logging.Logger = logging.getLogger(__name__)

C = TypeVar("C")
S = TypeVar("S")
E = TypeVar("E")
R = TypeVar("R")


class AuthenticableClientStatus(ABC):
    """Client status of a service requiring authentication."""

    @abstractmethod
    def is_authenticated(self) -> bool:
        """Return ``True`` if the client is authenticated."""


class AuthenticatedOperation:
    r"""Marker for status dependent operations that require an
    authenticated client.

    Example:
        ```pycon
        >>> from httpops.op import AuthenticatedOperation, StatusDependentOperation
        >>> class ListDocuments(AuthenticatedOperation, StatusDependentOperation):
        ...     pass
        ...

        ```
    """


class AuthenticationAutoRenewalPolicy(ABC):
    r"""Policy deciding how to recover from an expired authentication."""

    @abstractmethod
    async def apply(
        self,
        authenticate: Callable[[], Awaitable[S]],
        execute: Callable[[S], Awaitable[R]],
    ) -> R:
        """Recover the execution of an operation that failed with an
        ``AuthenticationExpiredError``.

        Args:
            authenticate: Coroutine function authenticating the client
                again with the stored credentials. Returns the client
                status.
            execute: Coroutine function executing the operation again
                with the given status.

        Returns:
            The operation result.

        Raises:
            HttpClientError: If the authentication can not be renewed or
                the operation fails again.
        """


class RenewOnceAutoRenewalPolicy(AuthenticationAutoRenewalPolicy):
    r"""Re-authenticate once and retry the operation once.

    Example:
        ```pycon
        >>> import asyncio
        >>> from httpops.op import RenewOnceAutoRenewalPolicy
        >>> async def authenticate():
        ...     return "status"
        ...
        >>> async def execute(status):
        ...     return f"executed with {status}"
        ...
        >>> asyncio.run(RenewOnceAutoRenewalPolicy().apply(authenticate, execute))
        'executed with status'

        ```
    """

    async def apply(
        self,
        authenticate: Callable[[], Awaitable[S]],
        execute: Callable[[S], Awaitable[R]],
    ) -> R:
        logger.debug("Authentication expired, renewing it...")
        status = await authenticate()
        return await execute(status)


class AuthenticationOperation(StatusDependentOperation[C, S, E, None], Generic[C, S, E]):
    r"""Status dependent operation authenticating the client with
    credentials of type ``C``.

    The operation receives the credentials as parameters and updates the
    client status. It raises ``CredentialsInvalidError`` when the
    service rejects the credentials.
    """

    @property
    def auto_renewal_policy(self) -> AuthenticationAutoRenewalPolicy | None:
        """The policy applied when an authenticated operation fails
        because the authentication expired, or ``None`` to not renew
        it."""
        return None
