r"""Shared test helpers for operation, engine and client tests.

This module contains in-memory implementations of the engine contract
and sample operations used across multiple test files.
"""

from __future__ import annotations

__all__ = [
    "BASE_URI",
    "RecordingEngine",
    "RenewingAuthenticationOperation",
    "SampleAuthenticationOperation",
    "SampleOperation",
    "SampleStatus",
    "SampleStatusInitOperation",
    "SampleStatusOperation",
    "StubResponse",
    "StubResponseBody",
    "create_httpx_engine",
]

import io
from typing import IO, TYPE_CHECKING, Any

import httpx

from httpops.body import TextBodyParser
from httpops.content_type import ContentType
from httpops.engine import (
    HttpClientEngine,
    HttpRequest,
    HttpResponse,
    HttpResponseBody,
    HttpxClientEngine,
)
from httpops.exceptions import CredentialsInvalidError, HttpResponseHandlingError
from httpops.op import (
    AuthenticableClientStatus,
    AuthenticationAutoRenewalPolicy,
    AuthenticationOperation,
    RenewOnceAutoRenewalPolicy,
    StatusDependentOperation,
    StatusIndependentOperation,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from httpops.core.config import EngineConfig
    from httpops.engine import HttpRequestCustomizer, HttpResponseHandler

BASE_URI = "http://example.org/base/path/"


class StubResponseBody(HttpResponseBody):
    """In-memory response body recording how its content is consumed."""

    def __init__(self, content: bytes, content_type: str | None = None) -> None:
        self._content = content
        self._content_type = content_type
        self.consumed = 0
        self.stream: io.BytesIO | None = None

    @property
    def content_type(self) -> ContentType | None:
        if self._content_type is None:
            return None
        return ContentType.parse(self._content_type)

    @property
    def content_length(self) -> int | None:
        return len(self._content)

    def get_content(self) -> IO[bytes]:
        if self.consumed:
            msg = "HTTP response body content already consumed"
            raise HttpResponseHandlingError(msg)
        self.consumed += 1
        self.stream = io.BytesIO(self._content)
        return self.stream

    @property
    def closed(self) -> bool:
        return self.stream is not None and self.stream.closed


class StubResponse(HttpResponse):
    """In-memory response."""

    def __init__(
        self,
        status_code: int = 200,
        body: HttpResponseBody | None = None,
        reason_phrase: str = "",
        headers: dict[str, str] | None = None,
    ) -> None:
        self._status_code = status_code
        self._body = body
        self._reason_phrase = reason_phrase
        self._headers = httpx.Headers(headers or {})

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def reason_phrase(self) -> str:
        return self._reason_phrase

    @property
    def headers(self) -> httpx.Headers:
        return self._headers

    @property
    def body(self) -> HttpResponseBody | None:
        return self._body


class RecordingEngine(HttpClientEngine):
    """Engine answering every request with the responses of a factory.

    Each executed request is recorded in ``requests``.
    """

    def __init__(
        self,
        responses: Callable[[HttpRequest], HttpResponse] | HttpResponse | None = None,
        error: Exception | None = None,
    ) -> None:
        self._responses = responses if responses is not None else StubResponse()
        self._error = error
        self._cookies = httpx.Cookies()
        self.requests: list[HttpRequest] = []
        self.closed = False

    @property
    def cookie_store(self) -> httpx.Cookies:
        return self._cookies

    async def execute_http_request(
        self,
        uri: httpx.URL,
        method: str,
        request_customizer: HttpRequestCustomizer,
        response_handler: HttpResponseHandler,
    ) -> None:
        request = HttpRequest(uri, method)
        request_customizer(request)
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        if isinstance(self._responses, HttpResponse):
            response = self._responses
        else:
            response = self._responses(request)
        response_handler.handle(response)

    async def aclose(self) -> None:
        self.closed = True


def create_httpx_engine(
    handler: Callable[[httpx.Request], httpx.Response], config: EngineConfig | None = None
) -> HttpxClientEngine:
    """Create an engine whose client answers with ``httpx.MockTransport``."""
    return HttpxClientEngine(httpx.AsyncClient(transport=httpx.MockTransport(handler)), config=config)


class SampleOperation(StatusIndependentOperation[str, str, str]):
    """GET ``items/{params}`` returning the upper cased text body."""

    def get_request_uri(self, params: str) -> str:
        return f"items/{params}"

    def get_request_method(self) -> str:
        return "GET"

    def prepare_request(self, params: str, request: HttpRequest) -> None:
        request.set_header("Accept", "text/plain")

    def parse_response(self, params: str, response: HttpResponse, body: HttpResponseBody) -> str:
        return body.parse(TextBodyParser())

    def process_response(self, params: str, entity: str | None, response: HttpResponse) -> str:
        return "<empty>" if entity is None else entity.upper()


class SampleStatus(AuthenticableClientStatus):
    """Client status holding a session token."""

    def __init__(self, session: str) -> None:
        self.session = session
        self.token: str | None = None

    def is_authenticated(self) -> bool:
        return self.token is not None


class SampleStatusInitOperation(StatusIndependentOperation[None, str, SampleStatus]):
    """GET ``session`` returning a new status from the text body."""

    def get_request_uri(self, params: None) -> str:
        return "session"

    def get_request_method(self) -> str:
        return "GET"

    def prepare_request(self, params: None, request: HttpRequest) -> None:
        pass

    def parse_response(self, params: None, response: HttpResponse, body: HttpResponseBody) -> str:
        return body.parse(TextBodyParser())

    def process_response(
        self, params: None, entity: str | None, response: HttpResponse
    ) -> SampleStatus:
        return SampleStatus(entity or "")


class SampleStatusOperation(StatusDependentOperation[str, SampleStatus, str, str]):
    """GET ``items/{params}`` sending the status session and token."""

    def get_request_uri(self, params: str, status: SampleStatus) -> str:
        return f"items/{params}"

    def get_request_method(self) -> str:
        return "GET"

    def prepare_request(self, params: str, status: SampleStatus, request: HttpRequest) -> None:
        request.set_header("X-Session", status.session)
        if status.token is not None:
            request.set_header("Authorization", f"Bearer {status.token}")

    def parse_response(
        self, params: str, status: SampleStatus, response: HttpResponse, body: HttpResponseBody
    ) -> str:
        return body.parse(TextBodyParser())

    def process_response(
        self, params: str, status: SampleStatus, entity: str | None, response: HttpResponse
    ) -> str:
        return entity or ""


class SampleAuthenticationOperation(AuthenticationOperation[str, SampleStatus, str]):
    """POST ``login`` with the credentials, storing the returned token."""

    def get_request_uri(self, params: str, status: SampleStatus) -> str:
        return "login"

    def get_request_method(self) -> str:
        return "POST"

    def prepare_request(self, params: str, status: SampleStatus, request: HttpRequest) -> None:
        request.set_header("X-Session", status.session)
        request.set_body(ContentType.of("text/plain", "utf-8"), params)

    def process_response_status_exception(self, response: HttpResponse, exception: Any) -> None:
        if exception.status_code == httpx.codes.FORBIDDEN:
            msg = "Invalid credentials"
            raise CredentialsInvalidError(msg, cause=exception) from exception
        return super().process_response_status_exception(response, exception)

    def parse_response(
        self, params: str, status: SampleStatus, response: HttpResponse, body: HttpResponseBody
    ) -> str:
        return body.parse(TextBodyParser())

    def process_response(
        self, params: str, status: SampleStatus, entity: str | None, response: HttpResponse
    ) -> None:
        status.token = entity


class RenewingAuthenticationOperation(SampleAuthenticationOperation):
    """Authentication operation renewing expired authentications once."""

    @property
    def auto_renewal_policy(self) -> AuthenticationAutoRenewalPolicy:
        return RenewOnceAutoRenewalPolicy()
