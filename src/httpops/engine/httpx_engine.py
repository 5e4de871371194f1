r"""HTTP client engine backed by ``httpx.AsyncClient``."""

from __future__ import annotations

__all__ = ["HttpxClientEngine", "HttpxResponse", "HttpxResponseBody"]

import io
import logging
import time
from typing import IO, TYPE_CHECKING

import httpx

from httpops.callbacks import invoke_on_failure, invoke_on_request, invoke_on_response
from httpops.content_type import ContentType
from httpops.core.config import EngineConfig
from httpops.engine.base import (
    HttpClientEngine,
    HttpRequest,
    HttpResponse,
    HttpResponseBody,
)
from httpops.exceptions import HttpResponseHandlingError, HttpTransportError

if TYPE_CHECKING:
    from httpops.engine.base import HttpRequestCustomizer, HttpResponseHandler

logger: logging.Logger = logging.getLogger(__name__)


class HttpxResponseBody(HttpResponseBody):
    """Body of an ``httpx.Response`` whose content has been read."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response
        self._consumed = False

    @property
    def content_type(self) -> ContentType | None:
        header = self._response.headers.get("Content-Type")
        if header is None:
            return None
        try:
            return ContentType.parse(header)
        except ValueError as exc:
            msg = f"Invalid content type on HTTP response: {header}"
            raise HttpResponseHandlingError(msg, cause=exc) from exc

    @property
    def content_length(self) -> int | None:
        header = self._response.headers.get("Content-Length")
        if header is None or not header.isdigit():
            return None
        return int(header)

    def get_content(self) -> IO[bytes]:
        if self._consumed:
            msg = "HTTP response body content already consumed"
            raise HttpResponseHandlingError(msg)
        self._consumed = True
        return io.BytesIO(self._response.content)


class HttpxResponse(HttpResponse):
    """Adapter of an ``httpx.Response`` to the engine response contract.

    Args:
        response: The httpx response. Its content must have been read.
    """

    def __init__(self, response: httpx.Response) -> None:
        self._response = response
        self._body = HttpxResponseBody(response) if response.content else None

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def reason_phrase(self) -> str:
        return self._response.reason_phrase

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    @property
    def body(self) -> HttpResponseBody | None:
        return self._body


class HttpxClientEngine(HttpClientEngine):
    r"""HTTP client engine sending requests with an ``httpx.AsyncClient``.

    Args:
        client: Optional ``httpx.AsyncClient`` to use. Its lifecycle is
            managed by the caller. If ``None``, the engine creates its own
            client from ``config`` and closes it on ``aclose``.
        config: Optional engine configuration. If ``None``, a default
            ``EngineConfig`` is used.

    Example:
        ```pycon
        >>> import asyncio
        >>> from httpops import HttpServiceClient
        >>> from httpops.engine import HttpxClientEngine
        >>> async def main():  # doctest: +SKIP
        ...     async with HttpServiceClient(HttpxClientEngine(), "https://api.ipify.org/") as client:
        ...         return await client.execute(GetPublicIp(), None)
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(
        self, client: httpx.AsyncClient | None = None, *, config: EngineConfig | None = None
    ) -> None:
        self._config = config if config is not None else EngineConfig()
        self._owns_client = client is None
        self._client = (
            client if client is not None else httpx.AsyncClient(**self._config.client_kwargs())
        )

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def cookie_store(self) -> httpx.Cookies:
        return self._client.cookies

    async def execute_http_request(
        self,
        uri: httpx.URL,
        method: str,
        request_customizer: HttpRequestCustomizer,
        response_handler: HttpResponseHandler,
    ) -> None:
        request = HttpRequest(uri, method)
        request_customizer(request)
        httpx_request = self._client.build_request(
            request.method,
            request.url,
            headers=request.headers,
            content=request.body,
        )
        url = str(httpx_request.url)
        invoke_on_request(self._config.on_request, url=url, method=request.method)
        start_time = time.time()
        logger.debug(f"Sending {request.method} request to {url}")
        try:
            response = await self._client.send(httpx_request)
        except httpx.HTTPError as exc:
            logger.debug(f"{request.method} request to {url} failed: {exc}")
            error = HttpTransportError(f"{request.method} request to {url} failed: {exc}", cause=exc)
            invoke_on_failure(
                self._config.on_failure,
                url=url,
                method=request.method,
                error=error,
                start_time=start_time,
            )
            raise error from exc
        try:
            logger.debug(
                f"{request.method} request to {url} responded with status {response.status_code}"
            )
            invoke_on_response(
                self._config.on_response,
                url=url,
                method=request.method,
                status_code=response.status_code,
                start_time=start_time,
            )
            response_handler.handle(HttpxResponse(response))
        finally:
            await response.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
