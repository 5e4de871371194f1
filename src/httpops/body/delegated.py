r"""Body parser dispatching to the first delegate supporting the media
type."""

from __future__ import annotations

__all__ = ["DelegatedBodyParser"]

import logging
from typing import IO, TYPE_CHECKING, TypeVar

from httpops.body.parser import HttpResponseBodyMediaTypeParser
from httpops.exceptions import UnsupportedContentTypeError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from httpops.content_type import ContentType

logger: logging.Logger = logging.getLogger(__name__)

E = TypeVar("E")


class DelegatedBodyParser(HttpResponseBodyMediaTypeParser[E]):
    r"""Union of several media type aware body parsers.

    The delegates are tried in registration order: the first one
    supporting the media type of the body parses it. The delegate list is
    copied at construction and never changes afterwards.

    Args:
        default_content_type: The content type assumed when the response
            declares none.
        parsers: The delegate parsers, in priority order.

    Raises:
        ValueError: If one of the delegates is ``None``.

    Example:
        ```pycon
        >>> import io
        >>> from httpops.body import DelegatedBodyParser, JsonBodyParser, TextBodyParser
        >>> from httpops.content_type import ContentType
        >>> parser = DelegatedBodyParser(
        ...     ContentType.of("application/json"), [JsonBodyParser(), TextBodyParser()]
        ... )
        >>> parser.parse(None, io.BytesIO(b'{"ip": "127.0.0.1"}'), None)
        {'ip': '127.0.0.1'}
        >>> parser.parse(ContentType.of("text/plain", "utf-8"), io.BytesIO(b"127.0.0.1"), None)
        '127.0.0.1'

        ```
    """

    def __init__(
        self,
        default_content_type: ContentType,
        parsers: Iterable[HttpResponseBodyMediaTypeParser[E]],
    ) -> None:
        self._default_content_type = default_content_type
        self._parsers = tuple(parsers)
        if any(parser is None for parser in self._parsers):
            msg = "Body parser delegates cannot be None"
            raise ValueError(msg)

    @property
    def default_content_type(self) -> ContentType:
        return self._default_content_type

    @property
    def parsers(self) -> tuple[HttpResponseBodyMediaTypeParser[E], ...]:
        return self._parsers

    def supports_media_type(self, media_type: str) -> bool:
        return any(parser.supports_media_type(media_type) for parser in self._parsers)

    def get_parser(self, content_type: ContentType) -> HttpResponseBodyMediaTypeParser[E]:
        """Return the first delegate supporting the content type.

        Args:
            content_type: The content type of the body.

        Returns:
            The selected delegate.

        Raises:
            UnsupportedContentTypeError: If no delegate supports the
                content type.
        """
        for parser in self._parsers:
            if parser.supports_media_type(content_type.media_type):
                return parser
        msg = f"Unsupported content type: {content_type}"
        raise UnsupportedContentTypeError(msg)

    def parse(self, content_type: ContentType | None, content: IO[bytes], length: int | None) -> E:
        if content_type is None:
            content_type = self._default_content_type
        parser = self.get_parser(content_type)
        logger.debug(f"Parsing {content_type} response body with {type(parser).__name__}")
        return parser.parse(content_type, content, length)
