r"""Content type model: a media type plus its ``charset`` or ``boundary``
parameter.

Example:
    ```pycon
    >>> from httpops.content_type import ContentType
    >>> content_type = ContentType.of("text/plain", "UTF-8")
    >>> content_type.header
    'text/plain; charset=utf-8'
    >>> ContentType.parse("text/plain; charset=ISO-8859-1") == content_type
    True
    >>> ContentType.multipart("multipart/form-data", "xyz").boundary
    'xyz'

    ```
"""

from __future__ import annotations

__all__ = ["BOUNDARY_PARAM", "CHARSET_PARAM", "ContentType"]

import codecs
from types import MappingProxyType
from typing import TYPE_CHECKING

from httpops.media_types import (
    is_audio,
    is_font,
    is_image,
    is_multipart,
    is_text,
    is_video,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

PARAMETER_SEPARATOR = ";"
PARAMETER_VALUE_SEPARATOR = "="
CHARSET_PARAM = "charset"
BOUNDARY_PARAM = "boundary"

_CHARSET_PREFIX = CHARSET_PARAM + PARAMETER_VALUE_SEPARATOR
_BOUNDARY_PREFIX = BOUNDARY_PARAM + PARAMETER_VALUE_SEPARATOR


def _accepts_charset(media_type: str) -> bool:
    return not (
        is_audio(media_type)
        or is_font(media_type)
        or is_image(media_type)
        or is_multipart(media_type)
        or is_video(media_type)
    )


def _normalize_charset(charset: str) -> str:
    try:
        codecs.lookup(charset)
    except LookupError as exc:
        msg = f"Unknown charset: {charset!r}"
        raise ValueError(msg) from exc
    return charset.lower()


class ContentType:
    r"""Immutable content type of an HTTP message body.

    Instances are normally built with the ``of``, ``multipart`` and
    ``parse`` factories, which enforce that a ``charset`` is only used with
    media types that carry text and a ``boundary`` only with multipart
    media types.

    Two content types are equal when their media types are equal,
    regardless of their parameters.

    Args:
        media_type: The media type (e.g. ``"application/json"``), stored
            in lower case.
        parameters: Optional parameters. Only ``charset`` and ``boundary``
            are supported, and at most one of them.

    Raises:
        ValueError: If the media type is empty or the parameters break
            the charset/boundary constraints.
    """

    __slots__ = ("_media_type", "_parameters")

    def __init__(self, media_type: str, parameters: Mapping[str, str] | None = None) -> None:
        if not media_type:
            msg = "media_type is required"
            raise ValueError(msg)
        self._media_type = media_type.lower()
        self._parameters: dict[str, str] = {}
        for name, value in (parameters or {}).items():
            self._parameters[name.lower()] = value
        self._check_parameters()

    @classmethod
    def of(cls, media_type: str, charset: str | None = None) -> ContentType:
        r"""Create a content type without a boundary.

        Args:
            media_type: The media type.
            charset: The charset of the content. Required for ``text/*``
                media types, forbidden for binary families (audio, font,
                image, video) and multipart media types.

        Returns:
            The new content type.

        Raises:
            ValueError: If the charset presence does not match the media
                type family.

        Example:
            ```pycon
            >>> from httpops.content_type import ContentType
            >>> ContentType.of("application/json").header
            'application/json'
            >>> ContentType.of("application/json", "utf-8").header
            'application/json; charset=utf-8'

            ```
        """
        media_type = media_type.lower()
        if charset is None:
            if is_text(media_type) or is_multipart(media_type):
                msg = f"A charset is required for media type {media_type}"
                raise ValueError(msg)
            return cls(media_type)
        if not _accepts_charset(media_type):
            msg = f"Media type {media_type} does not accept a charset"
            raise ValueError(msg)
        return cls(media_type, {CHARSET_PARAM: _normalize_charset(charset)})

    @classmethod
    def multipart(cls, media_type: str, boundary: str) -> ContentType:
        """Create a multipart content type.

        Args:
            media_type: The multipart media type.
            boundary: The multipart boundary.

        Returns:
            The new content type.

        Raises:
            ValueError: If the media type is not multipart or the boundary
                is empty.
        """
        media_type = media_type.lower()
        if not is_multipart(media_type):
            msg = f"Media type {media_type} is not multipart"
            raise ValueError(msg)
        if not boundary:
            msg = "boundary is required"
            raise ValueError(msg)
        return cls(media_type, {BOUNDARY_PARAM: boundary})

    @classmethod
    def parse(cls, header: str, strict: bool = False) -> ContentType:
        r"""Parse the value of a ``Content-Type`` header.

        Only the first parameter is considered, and only if it is a
        ``charset`` or a ``boundary``. In lenient mode (the default) any
        other parameter makes the whole header value the media type; in
        strict mode it is rejected.

        Args:
            header: The header value.
            strict: Whether unrecognized parameters raise an error.

        Returns:
            The parsed content type.

        Raises:
            ValueError: If the header is empty, or ``strict`` is set and
                the header has an unrecognized parameter.

        Example:
            ```pycon
            >>> from httpops.content_type import ContentType
            >>> ContentType.parse("Text/HTML; Charset=UTF-8").header
            'text/html; charset=utf-8'
            >>> ContentType.parse("text/html; level=1").media_type
            'text/html; level=1'

            ```
        """
        value = header.strip()
        if not value:
            msg = "Content type header is empty"
            raise ValueError(msg)
        media_type, separator, parameter = value.partition(PARAMETER_SEPARATOR)
        if not separator:
            return cls(value.lower())
        media_type = media_type.strip().lower()
        parameter = parameter.strip()
        if parameter.lower().startswith(_CHARSET_PREFIX):
            charset = _parameter_value(parameter[len(_CHARSET_PREFIX) :]).lower()
            return cls(media_type, {CHARSET_PARAM: charset})
        if parameter.lower().startswith(_BOUNDARY_PREFIX):
            boundary = _parameter_value(parameter[len(_BOUNDARY_PREFIX) :])
            return cls(media_type, {BOUNDARY_PARAM: boundary})
        if strict:
            msg = f"Unsupported content type parameter: {parameter}"
            raise ValueError(msg)
        return cls(value)

    @property
    def media_type(self) -> str:
        return self._media_type

    @property
    def charset(self) -> str | None:
        return self._parameters.get(CHARSET_PARAM)

    @property
    def boundary(self) -> str | None:
        return self._parameters.get(BOUNDARY_PARAM)

    @property
    def parameters(self) -> Mapping[str, str]:
        return MappingProxyType(self._parameters)

    @property
    def header(self) -> str:
        """The ``Content-Type`` header value of this content type."""
        parts = [self._media_type]
        parts.extend(
            f"{name}{PARAMETER_VALUE_SEPARATOR}{value}" for name, value in self._parameters.items()
        )
        return f"{PARAMETER_SEPARATOR} ".join(parts)

    def get_parameter(self, name: str) -> str | None:
        return self._parameters.get(name.lower())

    def is_multipart(self) -> bool:
        return is_multipart(self._media_type)

    def is_text(self) -> bool:
        return is_text(self._media_type)

    def with_parameter(self, name: str, value: str | None) -> ContentType:
        """Return a copy of this content type with the parameter set.

        Args:
            name: The parameter name (case insensitive).
            value: The parameter value. ``None`` removes the parameter.

        Returns:
            The new content type.

        Raises:
            ValueError: If the resulting parameters break the
                charset/boundary constraints.
        """
        if value is None:
            return self.without_parameter(name)
        if name.lower() == CHARSET_PARAM:
            value = _normalize_charset(value)
        return ContentType(self._media_type, {**self._parameters, name.lower(): value})

    def without_parameter(self, name: str) -> ContentType:
        """Return a copy of this content type without the parameter."""
        parameters = {key: value for key, value in self._parameters.items() if key != name.lower()}
        return ContentType(self._media_type, parameters)

    def _check_parameters(self) -> None:
        unsupported = set(self._parameters) - {CHARSET_PARAM, BOUNDARY_PARAM}
        if unsupported:
            msg = f"Unsupported content type parameters: {sorted(unsupported)}"
            raise ValueError(msg)
        if CHARSET_PARAM in self._parameters and BOUNDARY_PARAM in self._parameters:
            msg = "A content type cannot have both charset and boundary"
            raise ValueError(msg)
        if CHARSET_PARAM in self._parameters and not _accepts_charset(self._media_type):
            msg = f"Media type {self._media_type} does not accept a charset"
            raise ValueError(msg)
        if BOUNDARY_PARAM in self._parameters and not is_multipart(self._media_type):
            msg = f"Media type {self._media_type} does not accept a boundary"
            raise ValueError(msg)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContentType):
            return NotImplemented
        return self._media_type == other._media_type

    def __hash__(self) -> int:
        return hash(self._media_type)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.header!r})"

    def __str__(self) -> str:
        return self.header


def _parameter_value(raw: str) -> str:
    value = raw.split(PARAMETER_SEPARATOR, 1)[0].strip()
    if len(value) >= 2 and value[0] == value[-1] == '"':
        value = value[1:-1]
    return value
