r"""Parser of ``text/*`` response bodies."""

from __future__ import annotations

__all__ = ["TextBodyParser"]

from typing import IO

from httpops.body.parser import BaseMediaTypeBodyParser, create_reader
from httpops.content_type import ContentType
from httpops.core.config import DEFAULT_CHARSET
from httpops.exceptions import HttpResponseBodyParsingError
from httpops.media_types import Text, is_text


class TextBodyParser(BaseMediaTypeBodyParser[str]):
    """Parse ``text/*`` bodies into strings.

    Args:
        default_content_type: The content type assumed when the response
            declares none. Defaults to ``text/plain; charset=utf-8``.

    Example:
        ```pycon
        >>> import io
        >>> from httpops.body import TextBodyParser
        >>> TextBodyParser().parse(None, io.BytesIO(b"203.0.113.7"), 11)
        '203.0.113.7'

        ```
    """

    def __init__(self, default_content_type: ContentType | None = None) -> None:
        self._default_content_type = (
            default_content_type
            if default_content_type is not None
            else ContentType.of(Text.PLAIN, DEFAULT_CHARSET)
        )

    @property
    def default_content_type(self) -> ContentType:
        return self._default_content_type

    def supports_media_type(self, media_type: str) -> bool:
        return is_text(media_type)

    def parse_supported_content(
        self, content_type: ContentType, content: IO[bytes], length: int | None
    ) -> str:
        try:
            return create_reader(content_type, content).read()
        except UnicodeDecodeError as exc:
            msg = f"Invalid {content_type.charset or DEFAULT_CHARSET} text on HTTP response body"
            raise HttpResponseBodyParsingError(msg, cause=exc) from exc
