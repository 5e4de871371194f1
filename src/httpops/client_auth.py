r"""Client of an HTTP service requiring authentication."""

from __future__ import annotations

__all__ = ["AuthenticableHttpServiceClient"]

import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from httpops.client_stated import StatedHttpServiceClient
from httpops.exceptions import (
    AuthenticationExpiredError,
    CredentialsInvalidError,
    CredentialsNotStoredError,
)
from httpops.op.auth import AuthenticableClientStatus, AuthenticatedOperation

if TYPE_CHECKING:
    import httpx

    from httpops.engine.base import HttpClientEngine
    from httpops.op.auth import AuthenticationOperation
    from httpops.op.status_dependent import StatusDependentOperation
    from httpops.op.status_independent import StatusIndependentOperation

logger: logging.Logger = logging.getLogger(__name__)

S = TypeVar("S", bound=AuthenticableClientStatus)
C = TypeVar("C")
P = TypeVar("P")
R = TypeVar("R")


class AuthenticableHttpServiceClient(StatedHttpServiceClient[S], Generic[S, C]):
    r"""Client of an HTTP service requiring authentication with
    credentials of type ``C``.

    Operations marked with ``AuthenticatedOperation`` are executed once
    the client is authenticated, using the stored credentials if
    required. When such an operation fails with an
    ``AuthenticationExpiredError`` and the authentication auto renewal is
    enabled, the auto renewal policy of the authentication operation is
    applied.

    Args:
        engine: The HTTP client engine used to perform HTTP exchanges.
        base_uri: The absolute base URI of the service.
        status_init_operation: Status independent operation returning a
            new client status.
        authentication_operation: Operation authenticating the client.
        credentials_storing_enabled: Whether credentials are stored after
            a successful authentication.
        authentication_auto_renewal_enabled: Whether expired
            authentications are renewed automatically.

    Raises:
        ValueError: If ``base_uri`` is not absolute or an operation is
            missing.
    """

    def __init__(
        self,
        engine: HttpClientEngine,
        base_uri: str | httpx.URL,
        status_init_operation: StatusIndependentOperation[None, Any, S],
        authentication_operation: AuthenticationOperation[C, S, Any],
        *,
        credentials_storing_enabled: bool = False,
        authentication_auto_renewal_enabled: bool = False,
    ) -> None:
        super().__init__(engine, base_uri, status_init_operation)
        if authentication_operation is None:
            msg = "authentication_operation is required"
            raise ValueError(msg)
        self._authentication_operation = authentication_operation
        self._credentials_storing_enabled = credentials_storing_enabled
        self._authentication_auto_renewal_enabled = authentication_auto_renewal_enabled
        self._stored_credentials: C | None = None

    @property
    def authentication_operation(self) -> AuthenticationOperation[C, S, Any]:
        return self._authentication_operation

    @property
    def credentials_storing_enabled(self) -> bool:
        """Whether credentials are stored after a successful
        authentication.

        Disabling it discards the stored credentials.
        """
        return self._credentials_storing_enabled

    @credentials_storing_enabled.setter
    def credentials_storing_enabled(self, enabled: bool) -> None:
        self._credentials_storing_enabled = enabled
        if not enabled:
            self._stored_credentials = None

    @property
    def authentication_auto_renewal_enabled(self) -> bool:
        """Whether expired authentications are renewed automatically."""
        return self._authentication_auto_renewal_enabled

    @authentication_auto_renewal_enabled.setter
    def authentication_auto_renewal_enabled(self, enabled: bool) -> None:
        self._authentication_auto_renewal_enabled = enabled

    @property
    def has_stored_credentials(self) -> bool:
        return self._stored_credentials is not None

    async def authenticate(self, credentials: C | None = None) -> S:
        """Authenticate the client.

        Args:
            credentials: The credentials to authenticate with. If
                ``None``, the stored credentials are used.

        Returns:
            The client status after the authentication.

        Raises:
            CredentialsNotStoredError: If no credentials are given and
                none are stored.
            CredentialsInvalidError: If the service rejects the
                credentials. Rejected stored credentials are discarded.
            HttpClientError: If the authentication fails for another
                reason.
        """
        if credentials is None:
            return await self._authenticate_with_stored_credentials()
        logger.debug("Authenticating...")
        status = await self._execute_authentication(credentials)
        if self._credentials_storing_enabled:
            logger.debug("Storing credentials...")
            self._stored_credentials = credentials
        logger.debug("Authenticated.")
        return status

    async def _authenticate_with_stored_credentials(self) -> S:
        credentials = self._stored_credentials
        if credentials is None:
            msg = "No stored credentials. Call authenticate(credentials) first."
            raise CredentialsNotStoredError(msg)
        logger.debug("Authenticating with stored credentials...")
        try:
            status = await self._execute_authentication(credentials)
        except CredentialsInvalidError:
            logger.debug("Invalid credentials discarded.")
            self._stored_credentials = None
            raise
        logger.debug("Authenticated.")
        return status

    async def _execute_authentication(self, credentials: C) -> S:
        await self._execute_with_status(self._authentication_operation, credentials)
        return self.status

    async def ensure_authenticated(self) -> S:
        """Return the client status, initializing it and authenticating
        with the stored credentials if required.

        Returns:
            The authenticated client status.

        Raises:
            CredentialsNotStoredError: If the client is not authenticated
                and no credentials are stored.
            HttpClientError: If the status initialization or the
                authentication fails.
        """
        status = await self.ensure_initialized()
        if status.is_authenticated():
            return status
        return await self.authenticate()

    async def execute(self, operation: Any, params: Any) -> Any:
        if isinstance(operation, AuthenticatedOperation):
            return await self._execute_authenticated(operation, params)
        return await super().execute(operation, params)

    async def _execute_authenticated(
        self, operation: StatusDependentOperation[P, S, Any, R], params: P
    ) -> R:
        await self.ensure_authenticated()
        try:
            return await self._execute_with_status(operation, params)
        except AuthenticationExpiredError:
            policy = self._authentication_operation.auto_renewal_policy
            if policy is None or not self._authentication_auto_renewal_enabled:
                raise
            return await policy.apply(
                self.authenticate,
                lambda status: operation.execute(params, status, self),
            )
