r"""Operations depending on a client status shared across calls."""

from __future__ import annotations

__all__ = ["StatusDependentOperation"]

import functools
import logging
from abc import abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

from httpops.exceptions import HttpResponseStatusError
from httpops.op.base import BaseHttpServiceOperation
from httpops.op.handler import OperationResponseHandler

if TYPE_CHECKING:
    import httpx

    from httpops.engine.base import HttpRequest, HttpResponse, HttpResponseBody
    from httpops.op.base import ServiceClient

logger: logging.Logger = logging.getLogger(__name__)

P = TypeVar("P")
S = TypeVar("S")
E = TypeVar("E")
R = TypeVar("R")


class StatusDependentOperation(BaseHttpServiceOperation[R], Generic[P, S, E, R]):
    r"""Operation reading or updating a client status object.

    ``S`` is the type of the status object (session, authentication,
    service state...). The same status instance is passed to every step
    of the call; the operation may mutate it while preparing the request
    or handling the response. Serializing concurrent calls sharing a
    status is up to the caller.

    Subclasses implement ``get_request_uri``, ``get_request_method``,
    ``prepare_request``, ``parse_response`` and ``process_response``.
    """

    async def execute(self, params: P, status: S, client: ServiceClient) -> R:
        """Execute the operation.

        Args:
            params: The call parameters.
            status: The client status.
            client: The client executing the operation.

        Returns:
            The operation result.

        Raises:
            HttpClientError: If the operation fails. Errors raised while
                preparing the request or handling the response are
                propagated unchanged.
        """
        uri = self.resolve_request_uri(self.get_request_uri(params, status), client)
        method = self.get_request_method()
        handler = self.create_response_handler(params, status)
        logger.debug(f"Executing {type(self).__name__}: {method} {uri}")
        await client.engine.execute_http_request(
            uri,
            method,
            functools.partial(self.prepare_request, params, status),
            handler,
        )
        return handler.get_result()

    @abstractmethod
    def get_request_uri(self, params: P, status: S) -> str | httpx.URL:
        """Return the request URI, usually relative to the client base
        URI."""

    @abstractmethod
    def get_request_method(self) -> str:
        """Return the HTTP method of the operation."""

    @abstractmethod
    def prepare_request(self, params: P, status: S, request: HttpRequest) -> None:
        """Populate the request headers, query parameters and body."""

    def create_response_handler(self, params: P, status: S) -> OperationResponseHandler[R]:
        return OperationResponseHandler(functools.partial(self.handle_response, params, status))

    def handle_response(self, params: P, status: S, response: HttpResponse) -> R:
        """Turn the received response into the operation result.

        Same state machine as ``StatusIndependentOperation.handle_response``
        with the status passed to parsing and processing.
        """
        try:
            self.process_response_status(response)
        except HttpResponseStatusError as exc:
            return self._handle_status_error(response, exc)
        body = response.body
        entity = None if body is None else self.parse_response(params, status, response, body)
        return self.process_response(params, status, entity, response)

    @abstractmethod
    def parse_response(
        self, params: P, status: S, response: HttpResponse, body: HttpResponseBody
    ) -> E:
        """Parse the response body.

        Raises:
            HttpResponseHandlingError: If the body cannot be parsed.
        """

    @abstractmethod
    def process_response(
        self, params: P, status: S, entity: E | None, response: HttpResponse
    ) -> R:
        """Build the operation result from the parsed entity."""
