from __future__ import annotations

import io

import pytest

from httpops.body import TextBodyParser
from httpops.content_type import ContentType
from httpops.exceptions import HttpResponseBodyParsingError, UnsupportedContentTypeError

####################################
#     Tests for TextBodyParser     #
####################################


def test_text_parser_default_content_type() -> None:
    assert TextBodyParser().default_content_type.header == "text/plain; charset=utf-8"


def test_text_parser_custom_default_content_type() -> None:
    content_type = ContentType.of("text/csv", "iso-8859-1")
    parser = TextBodyParser(content_type)
    assert parser.default_content_type is content_type
    assert parser.parse(None, io.BytesIO("é;1".encode("latin-1")), None) == "é;1"


@pytest.mark.parametrize("media_type", ["text/plain", "text/html", "text/csv"])
def test_text_parser_supports_text(media_type: str) -> None:
    assert TextBodyParser().supports_media_type(media_type)


def test_text_parser_does_not_support_json() -> None:
    assert not TextBodyParser().supports_media_type("application/json")


def test_text_parser_charset() -> None:
    content_type = ContentType.of("text/plain", "utf-16")
    assert TextBodyParser().parse(content_type, io.BytesIO("héllo".encode("utf-16")), None) == "héllo"


def test_text_parser_empty() -> None:
    assert TextBodyParser().parse(None, io.BytesIO(b""), 0) == ""


def test_text_parser_invalid_encoding() -> None:
    with pytest.raises(HttpResponseBodyParsingError, match=r"Invalid utf-8 text"):
        TextBodyParser().parse(None, io.BytesIO(b"\xff\xfe\xfa"), None)


def test_text_parser_unsupported() -> None:
    with pytest.raises(UnsupportedContentTypeError):
        TextBodyParser().parse(ContentType.of("application/json"), io.BytesIO(b"{}"), None)
