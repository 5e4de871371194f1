r"""Operations that do not depend on any client status."""

from __future__ import annotations

__all__ = ["StatusIndependentOperation"]

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
E = TypeVar("E")
R = TypeVar("R")


class StatusIndependentOperation(BaseHttpServiceOperation[R], Generic[P, E, R]):
    r"""Operation whose request and response depend only on its
    parameters.

    ``P`` is the type of the call parameters, ``E`` the type of the
    entity parsed from the response body and ``R`` the type of the
    operation result.

    Subclasses implement ``get_request_uri``, ``get_request_method``,
    ``prepare_request``, ``parse_response`` and ``process_response``.

    Example:
        ```pycon
        >>> from httpops.body import TextBodyParser
        >>> from httpops.op import StatusIndependentOperation
        >>> class GetPublicIp(StatusIndependentOperation[None, str, str]):
        ...     def get_request_uri(self, params):
        ...         return "/"
        ...     def get_request_method(self):
        ...         return "GET"
        ...     def prepare_request(self, params, request):
        ...         request.set_header("Accept", "text/plain")
        ...     def parse_response(self, params, response, body):
        ...         return body.parse(TextBodyParser())
        ...     def process_response(self, params, entity, response):
        ...         return entity.strip()
        ...

        ```
    """

    async def execute(self, params: P, client: ServiceClient) -> R:
        """Execute the operation.

        Args:
            params: The call parameters.
            client: The client executing the operation.

        Returns:
            The operation result.

        Raises:
            HttpClientError: If the operation fails. Errors raised while
                preparing the request or handling the response are
                propagated unchanged.
        """
        uri = self.resolve_request_uri(self.get_request_uri(params), client)
        method = self.get_request_method()
        handler = self.create_response_handler(params)
        logger.debug(f"Executing {type(self).__name__}: {method} {uri}")
        await client.engine.execute_http_request(
            uri,
            method,
            functools.partial(self.prepare_request, params),
            handler,
        )
        return handler.get_result()

    @abstractmethod
    def get_request_uri(self, params: P) -> str | httpx.URL:
        """Return the request URI, usually relative to the client base
        URI."""

    @abstractmethod
    def get_request_method(self) -> str:
        """Return the HTTP method of the operation."""

    @abstractmethod
    def prepare_request(self, params: P, request: HttpRequest) -> None:
        """Populate the request headers, query parameters and body."""

    def create_response_handler(self, params: P) -> OperationResponseHandler[R]:
        return OperationResponseHandler(functools.partial(self.handle_response, params))

    def handle_response(self, params: P, response: HttpResponse) -> R:
        """Turn the received response into the operation result.

        The response status is validated first. A rejected status
        discards the body and skips parsing and processing; its outcome is
        decided by ``process_response_status_exception``.

        Args:
            params: The call parameters.
            response: The received response.

        Returns:
            The operation result.
        """
        try:
            self.process_response_status(response)
        except HttpResponseStatusError as exc:
            return self._handle_status_error(response, exc)
        body = response.body
        entity = None if body is None else self.parse_response(params, response, body)
        return self.process_response(params, entity, response)

    @abstractmethod
    def parse_response(self, params: P, response: HttpResponse, body: HttpResponseBody) -> E:
        """Parse the response body.

        Raises:
            HttpResponseHandlingError: If the body cannot be parsed.
        """

    @abstractmethod
    def process_response(self, params: P, entity: E | None, response: HttpResponse) -> R:
        """Build the operation result from the parsed entity, which is
        ``None`` when the response has no body."""
