r"""Parsers and producers of HTTP message bodies."""

from __future__ import annotations

__all__ = [
    "BaseMediaTypeBodyParser",
    "DelegatedBodyParser",
    "FormBodyParser",
    "HttpResponseBodyMediaTypeParser",
    "HttpResponseBodyParser",
    "JsonBodyParser",
    "TextBodyParser",
    "XmlBodyParser",
    "create_reader",
    "produce_form",
    "produce_json",
    "produce_xml",
]

from httpops.body.delegated import DelegatedBodyParser
from httpops.body.form import FormBodyParser, produce_form
from httpops.body.json import JsonBodyParser, produce_json
from httpops.body.parser import (
    BaseMediaTypeBodyParser,
    HttpResponseBodyMediaTypeParser,
    HttpResponseBodyParser,
    create_reader,
)
from httpops.body.text import TextBodyParser
from httpops.body.xml import XmlBodyParser, produce_xml
