from __future__ import annotations

import io

import pytest
from coola.equality import objects_are_equal

from httpops.body import FormBodyParser, produce_form
from httpops.content_type import ContentType
from httpops.engine import HttpRequest
from httpops.exceptions import HttpResponseBodyParsingError, UnsupportedContentTypeError

####################################
#     Tests for FormBodyParser     #
####################################


def test_form_parser_default_content_type() -> None:
    assert (
        FormBodyParser().default_content_type.header
        == "application/x-www-form-urlencoded; charset=utf-8"
    )


def test_form_parser_fields() -> None:
    assert objects_are_equal(
        FormBodyParser().parse(None, io.BytesIO(b"a=1&b=&a=two+words&c=caf%C3%A9"), None),
        [("a", "1"), ("b", ""), ("a", "two words"), ("c", "café")],
    )


def test_form_parser_charset() -> None:
    content_type = ContentType.of("application/x-www-form-urlencoded", "iso-8859-1")
    assert FormBodyParser().parse(content_type, io.BytesIO(b"name=caf%E9"), None) == [
        ("name", "café")
    ]


def test_form_parser_empty() -> None:
    assert FormBodyParser().parse(None, io.BytesIO(b""), 0) == []


def test_form_parser_invalid() -> None:
    with pytest.raises(HttpResponseBodyParsingError, match=r"Invalid URL encoded form"):
        FormBodyParser().parse(None, io.BytesIO(b"novalue"), None)


def test_form_parser_unsupported() -> None:
    with pytest.raises(UnsupportedContentTypeError):
        FormBodyParser().parse(ContentType.of("application/json"), io.BytesIO(b"{}"), None)


##################################
#     Tests for produce_form     #
##################################


def test_produce_form_mapping() -> None:
    request = HttpRequest("https://example.org/", "POST")
    produce_form({"user": "jane doe", "lang": "fr"}, request)
    assert request.body == b"user=jane+doe&lang=fr"
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded; charset=utf-8"


def test_produce_form_pairs() -> None:
    request = HttpRequest("https://example.org/", "POST")
    produce_form([("tag", "a"), ("tag", "b")], request)
    assert request.body == b"tag=a&tag=b"
