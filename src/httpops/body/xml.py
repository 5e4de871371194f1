r"""XML response body parser and request body producer."""

from __future__ import annotations

__all__ = ["DEFAULT_XML_CONTENT_TYPE", "XmlBodyParser", "is_xml", "produce_xml"]

import xml.etree.ElementTree as ET
from typing import IO, TYPE_CHECKING

from httpops.body.parser import BaseMediaTypeBodyParser, create_reader
from httpops.content_type import ContentType
from httpops.core.config import DEFAULT_CHARSET
from httpops.exceptions import HttpResponseBodyParsingError
from httpops.media_types import Application, Text, subtype_suffix

if TYPE_CHECKING:
    from httpops.engine.base import HttpRequest

DEFAULT_XML_CONTENT_TYPE = ContentType.of(Application.XML, DEFAULT_CHARSET)


def is_xml(media_type: str) -> bool:
    """Return whether the media type is XML (``application/xml``,
    ``text/xml`` or a ``+xml`` structured syntax suffix)."""
    return media_type in (Application.XML, Text.XML) or subtype_suffix(media_type) == "xml"


class XmlBodyParser(BaseMediaTypeBodyParser[ET.Element]):
    r"""Parse XML bodies into ``xml.etree.ElementTree`` elements.

    The charset of the content type, when present, overrides the encoding
    declared by the document.

    Args:
        default_content_type: The content type assumed when the response
            declares none. Defaults to ``application/xml; charset=utf-8``.

    Example:
        ```pycon
        >>> import io
        >>> from httpops.body import XmlBodyParser
        >>> root = XmlBodyParser().parse(None, io.BytesIO(b"<ip>203.0.113.7</ip>"), None)
        >>> root.tag, root.text
        ('ip', '203.0.113.7')

        ```
    """

    def __init__(self, default_content_type: ContentType | None = None) -> None:
        self._default_content_type = (
            default_content_type if default_content_type is not None else DEFAULT_XML_CONTENT_TYPE
        )

    @property
    def default_content_type(self) -> ContentType:
        return self._default_content_type

    def supports_media_type(self, media_type: str) -> bool:
        return is_xml(media_type)

    def parse_supported_content(
        self, content_type: ContentType, content: IO[bytes], length: int | None
    ) -> ET.Element:
        try:
            if content_type.charset is None:
                return ET.parse(content).getroot()
            parser = ET.XMLParser()
            parser.feed(create_reader(content_type, content).read())
            return parser.close()
        except (ET.ParseError, LookupError, ValueError) as exc:
            msg = f"Invalid XML on HTTP response body: {exc}"
            raise HttpResponseBodyParsingError(msg, cause=exc) from exc


def produce_xml(
    element: ET.Element, request: HttpRequest, content_type: ContentType = DEFAULT_XML_CONTENT_TYPE
) -> None:
    """Set an XML element as request body, with an XML declaration in the
    content type charset."""
    charset = content_type.charset or DEFAULT_CHARSET
    request.set_body(
        content_type,
        lambda output: ET.ElementTree(element).write(
            output, encoding=charset, xml_declaration=True
        ),
    )
