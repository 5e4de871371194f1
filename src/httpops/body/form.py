r"""``application/x-www-form-urlencoded`` body parser and producer."""

from __future__ import annotations

__all__ = ["DEFAULT_FORM_CONTENT_TYPE", "FormBodyParser", "produce_form"]

from collections.abc import Mapping
from typing import IO, TYPE_CHECKING
from urllib.parse import parse_qsl, urlencode

from httpops.body.parser import BaseMediaTypeBodyParser, create_reader
from httpops.content_type import ContentType
from httpops.core.config import DEFAULT_CHARSET
from httpops.exceptions import HttpResponseBodyParsingError
from httpops.media_types import Application

if TYPE_CHECKING:
    from collections.abc import Iterable

    from httpops.engine.base import HttpRequest

DEFAULT_FORM_CONTENT_TYPE = ContentType.of(Application.X_WWW_FORM_URLENCODED, DEFAULT_CHARSET)

FormFields = list[tuple[str, str]]


class FormBodyParser(BaseMediaTypeBodyParser[FormFields]):
    r"""Parse URL encoded form bodies into ordered ``(name, value)`` pairs.

    Blank values are kept, and repeated names produce one pair each.

    Example:
        ```pycon
        >>> import io
        >>> from httpops.body import FormBodyParser
        >>> FormBodyParser().parse(None, io.BytesIO(b"a=1&b=&a=caf%C3%A9"), None)
        [('a', '1'), ('b', ''), ('a', 'café')]

        ```
    """

    def __init__(self, default_content_type: ContentType | None = None) -> None:
        self._default_content_type = (
            default_content_type if default_content_type is not None else DEFAULT_FORM_CONTENT_TYPE
        )

    @property
    def default_content_type(self) -> ContentType:
        return self._default_content_type

    def supports_media_type(self, media_type: str) -> bool:
        return media_type == Application.X_WWW_FORM_URLENCODED

    def parse_supported_content(
        self, content_type: ContentType, content: IO[bytes], length: int | None
    ) -> FormFields:
        charset = content_type.charset or DEFAULT_CHARSET
        try:
            text = create_reader(content_type, content).read()
            return parse_qsl(text, keep_blank_values=True, strict_parsing=bool(text), encoding=charset)
        except ValueError as exc:
            msg = f"Invalid URL encoded form on HTTP response body: {exc}"
            raise HttpResponseBodyParsingError(msg, cause=exc) from exc


def produce_form(
    fields: Mapping[str, str] | Iterable[tuple[str, str]],
    request: HttpRequest,
    content_type: ContentType = DEFAULT_FORM_CONTENT_TYPE,
) -> None:
    """Set URL encoded form fields as request body.

    Args:
        fields: The form fields, as a mapping or ordered pairs.
        request: The request to populate.
        content_type: The content type of the body.
    """
    pairs = list(fields.items()) if isinstance(fields, Mapping) else list(fields)
    request.set_body(
        content_type, urlencode(pairs, encoding=content_type.charset or DEFAULT_CHARSET)
    )
