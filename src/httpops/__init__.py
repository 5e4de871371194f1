r"""httpops - Foundation for typed asynchronous HTTP API clients.

This package separates the mechanics of an HTTP service operation
(building the request URI, attaching the request body, dispatching the
request and interpreting the response) from the transport, which is
supplied by a pluggable HTTP client engine. An ``httpx`` based engine is
provided.

Key Features:
    - Operations with a fixed response handling pipeline: status
      validation, body parsing and result processing
    - Status dependent operations sharing a client status (session,
      authentication...)
    - Clients with lazy status initialization and authentication
      with stored credentials and automatic renewal
    - Content type values and media type constants
    - Response body parsers for text, JSON, XML and form bodies, and a
      parser delegating on the body content type
    - Typed errors for every failure surfaced to callers

Example:
    ```pycon
    >>> from httpops import ContentType
    >>> ContentType.parse("text/html; charset=UTF-8")
    ContentType('text/html; charset=utf-8')

    ```
"""

from __future__ import annotations

__all__ = [
    "AuthenticableHttpServiceClient",
    "AuthenticationExpiredError",
    "AuthenticationRequiredError",
    "ContentType",
    "CredentialsInvalidError",
    "CredentialsNotStoredError",
    "HttpClientError",
    "HttpRequestBodyGenerationError",
    "HttpResponseBodyParsingError",
    "HttpResponseHandlingError",
    "HttpResponseStatusError",
    "HttpServiceClient",
    "HttpTransportError",
    "StatedHttpServiceClient",
    "UnsupportedContentTypeError",
    "__version__",
]

from importlib.metadata import PackageNotFoundError, version

from httpops.client import HttpServiceClient
from httpops.client_auth import AuthenticableHttpServiceClient
from httpops.client_stated import StatedHttpServiceClient
from httpops.content_type import ContentType
from httpops.exceptions import (
    AuthenticationExpiredError,
    AuthenticationRequiredError,
    CredentialsInvalidError,
    CredentialsNotStoredError,
    HttpClientError,
    HttpRequestBodyGenerationError,
    HttpResponseBodyParsingError,
    HttpResponseHandlingError,
    HttpResponseStatusError,
    HttpTransportError,
    UnsupportedContentTypeError,
)

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
