r"""Contracts between operations and the HTTP client engine.

An engine performs the actual HTTP exchange. Operations only see the
``HttpRequest`` they populate from the request customizer and the
``HttpResponse`` passed to their response handler.
"""

from __future__ import annotations

__all__ = [
    "HttpClientEngine",
    "HttpRequest",
    "HttpRequestCustomizer",
    "HttpResponse",
    "HttpResponseBody",
    "HttpResponseHandler",
]

import io
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import IO, TYPE_CHECKING, TypeVar

import httpx

from httpops.body.parser import create_reader
from httpops.core.config import DEFAULT_CHARSET

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

    from httpops.body.parser import HttpResponseBodyParser
    from httpops.content_type import ContentType

E = TypeVar("E")

BodyProducer = Callable[[IO[bytes]], None]


class HttpRequest:
    r"""Outgoing HTTP request populated by an operation before it is sent.

    Args:
        uri: The absolute request URI.
        method: The HTTP method.

    Example:
        ```pycon
        >>> from httpops.content_type import ContentType
        >>> from httpops.engine import HttpRequest
        >>> request = HttpRequest("https://api.example.com/items", "POST")
        >>> request.set_header("Accept", "application/json")
        >>> request.add_query_param("page", "2")
        >>> request.set_body(ContentType.of("text/plain", "utf-8"), "hello")
        >>> request.url
        URL('https://api.example.com/items?page=2')
        >>> request.headers["content-type"]
        'text/plain; charset=utf-8'
        >>> request.body
        b'hello'

        ```
    """

    def __init__(self, uri: str | httpx.URL, method: str) -> None:
        self._uri = httpx.URL(uri)
        self._method = method.upper()
        self._headers = httpx.Headers()
        self._query_params: list[tuple[str, str]] = []
        self._replaced_params: set[str] = set()
        self._content_type: ContentType | None = None
        self._body: bytes | None = None

    @property
    def uri(self) -> httpx.URL:
        return self._uri

    @property
    def method(self) -> str:
        return self._method

    @property
    def headers(self) -> httpx.Headers:
        return self._headers

    @property
    def query_params(self) -> httpx.QueryParams:
        return httpx.QueryParams(self._query_params)

    @property
    def url(self) -> httpx.URL:
        r"""The URL to send: the request URI with the added query parameters.

        Query parameters already present in the URI are kept, except those
        replaced with ``set_query_param``.
        """
        if not self._query_params:
            return self._uri
        params = [
            (key, val)
            for key, val in self._uri.params.multi_items()
            if key not in self._replaced_params
        ]
        return self._uri.copy_with(params=[*params, *self._query_params])

    @property
    def content_type(self) -> ContentType | None:
        return self._content_type

    @property
    def body(self) -> bytes | None:
        return self._body

    def set_header(self, name: str, value: str) -> None:
        """Set a header, replacing any previous value."""
        self._headers[name] = value

    def add_header(self, name: str, value: str) -> None:
        """Add a header value, keeping any previous value."""
        self._headers = httpx.Headers([*self._headers.multi_items(), (name, value)])

    def remove_header(self, name: str) -> None:
        self._headers.pop(name, None)

    def set_query_param(self, name: str, value: str) -> None:
        """Set a query parameter, replacing any previous value, including
        values already present in the request URI."""
        self._query_params = [(key, val) for key, val in self._query_params if key != name]
        self._replaced_params.add(name)
        self._query_params.append((name, value))

    def add_query_param(self, name: str, value: str) -> None:
        """Add a query parameter value, keeping any previous value."""
        self._query_params.append((name, value))

    def set_body(self, content_type: ContentType, body: str | bytes | BodyProducer) -> None:
        r"""Set the request body and its ``Content-Type`` header.

        Args:
            content_type: The content type of the body.
            body: The body, as text (encoded with the content type charset
                or UTF-8), raw bytes, or a producer writing the body to a
                binary stream.
        """
        if isinstance(body, str):
            data = body.encode(content_type.charset or DEFAULT_CHARSET)
        elif isinstance(body, bytes):
            data = body
        else:
            buffer = io.BytesIO()
            body(buffer)
            data = buffer.getvalue()
        self._content_type = content_type
        self._body = data
        self._headers["Content-Type"] = content_type.header

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self._method} {self._uri})"


class HttpResponseBody(ABC):
    r"""Body of an HTTP response.

    The content stream can be obtained only once: the body must be either
    parsed or discarded, never both.
    """

    @property
    @abstractmethod
    def content_type(self) -> ContentType | None:
        """The declared content type, or ``None`` if the response declares
        none."""

    @property
    @abstractmethod
    def content_length(self) -> int | None:
        """The declared content length, or ``None`` if unknown."""

    @abstractmethod
    def get_content(self) -> IO[bytes]:
        """Return the binary content stream.

        Raises:
            HttpResponseHandlingError: If the content was already
                consumed.
        """

    def content_reader(self) -> io.TextIOWrapper:
        """Return a text reader over the content, decoded with the declared
        charset or UTF-8."""
        return create_reader(self.content_type, self.get_content())

    def parse(self, parser: HttpResponseBodyParser[E]) -> E:
        """Parse the content with a body parser.

        Args:
            parser: The parser to use.

        Returns:
            The parsed entity.
        """
        with self.get_content() as content:
            return parser.parse(self.content_type, content, self.content_length)

    def discard(self) -> None:
        """Release the content without decoding it."""
        self.get_content().close()


class HttpResponse(ABC):
    """HTTP response received by an engine."""

    @property
    @abstractmethod
    def status_code(self) -> int:
        """The status code of the response."""

    @property
    @abstractmethod
    def reason_phrase(self) -> str:
        """The reason phrase of the response status line."""

    @property
    @abstractmethod
    def headers(self) -> httpx.Headers:
        """The response headers."""

    @property
    @abstractmethod
    def body(self) -> HttpResponseBody | None:
        """The response body, or ``None`` if the response has none."""


class HttpResponseHandler(ABC):
    """Handler invoked by the engine with the received response."""

    @abstractmethod
    def handle(self, response: HttpResponse) -> None:
        """Handle the response."""


HttpRequestCustomizer = Callable[[HttpRequest], None]


class HttpClientEngine(ABC):
    r"""Transport used by HTTP service clients to perform HTTP exchanges.

    Engines can be used as async context managers; leaving the context
    closes the engine.
    """

    @property
    @abstractmethod
    def cookie_store(self) -> httpx.Cookies:
        """The cookies shared by the requests of this engine."""

    @abstractmethod
    async def execute_http_request(
        self,
        uri: httpx.URL,
        method: str,
        request_customizer: HttpRequestCustomizer,
        response_handler: HttpResponseHandler,
    ) -> None:
        """Perform an HTTP exchange.

        The request customizer is invoked before the request is sent and
        the response handler once the response is received. Exceptions
        raised by either of them are propagated unchanged.

        Args:
            uri: The absolute request URI.
            method: The HTTP method.
            request_customizer: Callback populating the request.
            response_handler: Handler of the received response.

        Raises:
            HttpTransportError: If the HTTP exchange fails.
        """

    @abstractmethod
    async def aclose(self) -> None:
        """Release the resources of the engine."""

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()
