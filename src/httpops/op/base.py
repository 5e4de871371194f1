r"""Logic shared by all HTTP service operations."""

from __future__ import annotations

__all__ = ["BaseHttpServiceOperation", "ServiceClient"]

import logging
from abc import ABC
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

import httpx

from httpops.exceptions import AuthenticationRequiredError, HttpResponseStatusError

if TYPE_CHECKING:
    from httpops.engine.base import HttpClientEngine, HttpResponse

logger: logging.Logger = logging.getLogger(__name__)

R = TypeVar("R")


class ServiceClient(Protocol):
    """What operations need from the client executing them."""

    @property
    def base_uri(self) -> httpx.URL: ...

    @property
    def engine(self) -> HttpClientEngine: ...


class BaseHttpServiceOperation(ABC, Generic[R]):
    r"""Base class of HTTP service operations producing results of type
    ``R``.

    Operations hold no per-call state: a single instance can execute any
    number of calls, concurrently or not.
    """

    def resolve_request_uri(self, request_uri: str | httpx.URL, client: ServiceClient) -> httpx.URL:
        """Resolve the operation request URI against the client base URI.

        Args:
            request_uri: The operation request URI, relative or absolute.
            client: The client executing the operation.

        Returns:
            The absolute request URI.

        Example:
            ```pycon
            >>> from unittest.mock import Mock
            >>> import httpx
            >>> from httpops.op import BaseHttpServiceOperation
            >>> client = Mock(base_uri=httpx.URL("http://example.org/base/path/"))
            >>> BaseHttpServiceOperation().resolve_request_uri("op/path?q=test", client)
            URL('http://example.org/base/path/op/path?q=test')
            >>> BaseHttpServiceOperation().resolve_request_uri("/op/path", client)
            URL('http://example.org/op/path')

            ```
        """
        return client.base_uri.join(request_uri)

    def process_response_status(self, response: HttpResponse) -> None:
        """Validate the response status.

        Only successful (2xx) status codes are accepted by default.

        Args:
            response: The received response.

        Raises:
            HttpResponseStatusError: If the status code is not accepted.
        """
        if not httpx.codes.is_success(response.status_code):
            raise HttpResponseStatusError(response.status_code, response.reason_phrase)

    def process_response_status_exception(
        self, response: HttpResponse, exception: HttpResponseStatusError
    ) -> R:
        """Turn a rejected response status into the operation outcome.

        By default ``401 Unauthorized`` becomes an
        ``AuthenticationRequiredError`` and any other status error is
        raised as is. Subclasses may return a recovered result instead.

        Args:
            response: The received response. Its body has been discarded.
            exception: The status error raised by
                ``process_response_status``.

        Returns:
            A recovered operation result.

        Raises:
            HttpClientError: The error the operation fails with.
        """
        if exception.status_code == httpx.codes.UNAUTHORIZED:
            msg = "Authentication required"
            raise AuthenticationRequiredError(msg, cause=exception) from exception
        raise exception

    def _handle_status_error(self, response: HttpResponse, exception: HttpResponseStatusError) -> R:
        logger.debug(
            f"{type(self).__name__} rejected response status "
            f"{exception.status_code} {exception.reason_phrase}"
        )
        body = response.body
        if body is not None:
            body.discard()
        return self.process_response_status_exception(response, exception)