r"""Contracts for HTTP response body parsers."""

from __future__ import annotations

__all__ = [
    "BaseMediaTypeBodyParser",
    "HttpResponseBodyMediaTypeParser",
    "HttpResponseBodyParser",
    "create_reader",
]

import io
from abc import ABC, abstractmethod
from typing import IO, TYPE_CHECKING, Generic, TypeVar

from httpops.core.config import DEFAULT_CHARSET
from httpops.exceptions import HttpResponseBodyParsingError, UnsupportedContentTypeError

if TYPE_CHECKING:
    from httpops.content_type import ContentType

E = TypeVar("E")


def create_reader(content_type: ContentType | None, content: IO[bytes]) -> io.TextIOWrapper:
    """Create a text reader over a binary response body stream.

    The charset of the content type is used when present, UTF-8
    otherwise.

    Args:
        content_type: The content type of the body, if known.
        content: The binary body stream.

    Returns:
        A text stream decoding ``content``.

    Raises:
        HttpResponseBodyParsingError: If the charset is not supported.

    Example:
        ```pycon
        >>> import io
        >>> from httpops.body.parser import create_reader
        >>> create_reader(None, io.BytesIO("café".encode())).read()
        'café'

        ```
    """
    charset = DEFAULT_CHARSET
    if content_type is not None and content_type.charset is not None:
        charset = content_type.charset
    try:
        return io.TextIOWrapper(content, encoding=charset, newline="")
    except LookupError as exc:
        msg = f"Unsupported charset on HTTP response body: {charset}"
        raise HttpResponseBodyParsingError(msg, cause=exc) from exc


class HttpResponseBodyParser(ABC, Generic[E]):
    """Parser of HTTP response bodies into entities of type ``E``."""

    @abstractmethod
    def parse(self, content_type: ContentType | None, content: IO[bytes], length: int | None) -> E:
        """Parse a response body.

        Args:
            content_type: The content type declared by the response, or
                ``None`` if the response declares none.
            content: The binary body stream.
            length: The declared content length, or ``None`` if unknown.

        Returns:
            The parsed entity.

        Raises:
            HttpResponseBodyParsingError: If the body cannot be parsed.
        """


class HttpResponseBodyMediaTypeParser(HttpResponseBodyParser[E]):
    """Body parser that declares the media types it supports."""

    @property
    @abstractmethod
    def default_content_type(self) -> ContentType:
        """The content type assumed when the response declares none."""

    @abstractmethod
    def supports_media_type(self, media_type: str) -> bool:
        """Return whether this parser can parse bodies of the media type."""


class BaseMediaTypeBodyParser(HttpResponseBodyMediaTypeParser[E]):
    r"""Base implementation of media type aware body parsers.

    ``parse`` substitutes ``default_content_type`` for a missing content
    type, rejects unsupported media types and delegates the actual
    decoding to ``parse_supported_content``.
    """

    def parse(self, content_type: ContentType | None, content: IO[bytes], length: int | None) -> E:
        if content_type is None:
            content_type = self.default_content_type
        if not self.supports_media_type(content_type.media_type):
            msg = f"Unsupported content type on HTTP response body: {content_type}"
            raise UnsupportedContentTypeError(msg)
        return self.parse_supported_content(content_type, content, length)

    @abstractmethod
    def parse_supported_content(
        self, content_type: ContentType, content: IO[bytes], length: int | None
    ) -> E:
        """Parse a response body of a supported content type.

        Args:
            content_type: The effective content type of the body.
            content: The binary body stream.
            length: The declared content length, or ``None`` if unknown.

        Returns:
            The parsed entity.

        Raises:
            HttpResponseBodyParsingError: If the body cannot be parsed.
        """
