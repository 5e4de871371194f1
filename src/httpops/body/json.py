r"""JSON response body parser and request body producer.

Plain JSON documents are decoded with the standard ``json`` module. When
an entity type is configured, the decoded document is validated into it
with ``pydantic``.

Example:
    ```pycon
    >>> import io
    >>> from pydantic import BaseModel
    >>> from httpops.body import JsonBodyParser
    >>> class PublicIp(BaseModel):
    ...     ip: str
    ...
    >>> JsonBodyParser(PublicIp).parse(None, io.BytesIO(b'{"ip": "203.0.113.7"}'), None)
    PublicIp(ip='203.0.113.7')

    ```
"""

from __future__ import annotations

__all__ = ["DEFAULT_JSON_CONTENT_TYPE", "JsonBodyParser", "is_json", "produce_json"]

import json
from typing import IO, TYPE_CHECKING, Any, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from httpops.body.parser import BaseMediaTypeBodyParser, create_reader
from httpops.content_type import ContentType
from httpops.core.config import DEFAULT_CHARSET
from httpops.exceptions import HttpRequestBodyGenerationError, HttpResponseBodyParsingError
from httpops.media_types import Application, subtype_suffix

if TYPE_CHECKING:
    from httpops.engine.base import HttpRequest

E = TypeVar("E")

DEFAULT_JSON_CONTENT_TYPE = ContentType.of(Application.JSON, DEFAULT_CHARSET)


def is_json(media_type: str) -> bool:
    """Return whether the media type is JSON (``application/json`` or a
    ``+json`` structured syntax suffix).

    Example:
        ```pycon
        >>> from httpops.body.json import is_json
        >>> is_json("application/problem+json")
        True
        >>> is_json("application/json-seq")
        False

        ```
    """
    return media_type == Application.JSON or subtype_suffix(media_type) == "json"


class JsonBodyParser(BaseMediaTypeBodyParser[E]):
    r"""Parse JSON bodies.

    Args:
        entity_type: Optional type the decoded document is validated into
            with ``pydantic``. If ``None``, the decoded document is
            returned as is.
        default_content_type: The content type assumed when the response
            declares none. Defaults to ``application/json; charset=utf-8``.
        **json_kwargs: Additional keyword arguments passed to
            ``json.load`` (e.g. ``object_hook``, ``parse_float``).
    """

    def __init__(
        self,
        entity_type: type[E] | None = None,
        default_content_type: ContentType | None = None,
        **json_kwargs: Any,
    ) -> None:
        self._entity_type = entity_type
        self._adapter = TypeAdapter(entity_type) if entity_type is not None else None
        self._default_content_type = (
            default_content_type if default_content_type is not None else DEFAULT_JSON_CONTENT_TYPE
        )
        self._json_kwargs = json_kwargs

    @property
    def default_content_type(self) -> ContentType:
        return self._default_content_type

    @property
    def entity_type(self) -> type[E] | None:
        return self._entity_type

    def supports_media_type(self, media_type: str) -> bool:
        return is_json(media_type)

    def parse_supported_content(
        self, content_type: ContentType, content: IO[bytes], length: int | None
    ) -> E:
        try:
            document = json.load(create_reader(content_type, content), **self._json_kwargs)
        except ValueError as exc:
            msg = f"Invalid JSON on HTTP response body: {exc}"
            raise HttpResponseBodyParsingError(msg, cause=exc) from exc
        if self._adapter is None:
            return document
        try:
            return self._adapter.validate_python(document)
        except ValidationError as exc:
            msg = f"HTTP response body does not match {self._entity_type}: {exc}"
            raise HttpResponseBodyParsingError(msg, cause=exc) from exc


def produce_json(
    entity: Any, request: HttpRequest, content_type: ContentType = DEFAULT_JSON_CONTENT_TYPE
) -> None:
    """Set the JSON representation of an entity as request body.

    Pydantic models, dataclasses and the other types supported by
    ``pydantic_core.to_jsonable_python`` are converted before encoding.

    Args:
        entity: The entity to send.
        request: The request to populate.
        content_type: The content type of the body.

    Raises:
        HttpRequestBodyGenerationError: If the entity cannot be encoded.
    """
    try:
        document = json.dumps(to_jsonable_python(entity))
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        msg = f"Error producing JSON HTTP request body: {exc}"
        raise HttpRequestBodyGenerationError(msg, cause=exc) from exc
    request.set_body(content_type, document)
