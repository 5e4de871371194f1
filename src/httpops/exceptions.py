r"""Exception hierarchy for HTTP service operations.

Every error surfaced to callers is an ``HttpClientError``. The more
specific subclasses let callers react to a rejected status code, an
unsupported response content type or a malformed response body without
inspecting messages.
"""

from __future__ import annotations

__all__ = [
    "AuthenticationExpiredError",
    "AuthenticationRequiredError",
    "CredentialsInvalidError",
    "CredentialsNotStoredError",
    "HttpClientError",
    "HttpRequestBodyGenerationError",
    "HttpResponseBodyParsingError",
    "HttpResponseHandlingError",
    "HttpResponseStatusError",
    "HttpTransportError",
    "UnsupportedContentTypeError",
]


class HttpClientError(Exception):
    """Base class of all the errors raised by HTTP service clients.

    Args:
        message: A descriptive error message.
        cause: Optional exception that caused this error.

    Example:
        ```pycon
        >>> from httpops.exceptions import HttpClientError
        >>> raise HttpClientError("Something went wrong")
        Traceback (most recent call last):
            ...
        httpops.exceptions.HttpClientError: Something went wrong

        ```
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        if cause is not None:
            self.__cause__ = cause


class HttpTransportError(HttpClientError):
    """Raised by an engine when the HTTP exchange itself fails (connection
    refused, timeout, protocol error...)."""


class HttpRequestBodyGenerationError(HttpClientError):
    """Raised when the body of an HTTP request cannot be produced."""


class HttpResponseStatusError(HttpClientError):
    """Raised when the response status code is not accepted by the
    operation.

    Args:
        status_code: The HTTP status code of the response.
        reason_phrase: The reason phrase of the response status line.
        message: Optional error message. A default one is built from
            the status code and reason phrase if not provided.

    Example:
        ```pycon
        >>> from httpops.exceptions import HttpResponseStatusError
        >>> error = HttpResponseStatusError(404, "Not Found")
        >>> error.status_code
        404
        >>> error.reason_phrase
        'Not Found'
        >>> str(error)
        'Unexpected HTTP response status: 404 Not Found'

        ```
    """

    def __init__(
        self, status_code: int, reason_phrase: str | None = None, message: str | None = None
    ) -> None:
        if message is None:
            message = f"Unexpected HTTP response status: {status_code} {reason_phrase or ''}".rstrip()
        super().__init__(message)
        self.status_code = status_code
        self.reason_phrase = reason_phrase


class HttpResponseHandlingError(HttpClientError):
    """Raised when an HTTP response cannot be turned into an operation
    result."""


class HttpResponseBodyParsingError(HttpResponseHandlingError):
    """Raised when the body of an HTTP response cannot be decoded."""


class UnsupportedContentTypeError(HttpResponseBodyParsingError):
    """Raised when no parser supports the content type of an HTTP response
    body."""


class AuthenticationRequiredError(HttpClientError):
    """Raised when the service requires authentication to perform the
    operation."""


class AuthenticationExpiredError(AuthenticationRequiredError):
    """Raised when a previous authentication is no longer valid."""


class CredentialsInvalidError(HttpClientError):
    """Raised when the service rejects the supplied credentials."""


class CredentialsNotStoredError(HttpClientError):
    """Raised when authenticating without credentials and none are
    stored."""
