r"""Media type families and well-known media type constants.

The family predicates classify a media type (``type/subtype``) by its
top-level type. They are pure prefix checks, so a media type belongs to
exactly one family.

Example:
    ```pycon
    >>> from httpops.media_types import Application, is_application, is_text
    >>> is_application(Application.JSON)
    True
    >>> is_text(Application.JSON)
    False

    ```
"""

from __future__ import annotations

__all__ = [
    "KNOWN_MEDIA_TYPES",
    "Application",
    "Audio",
    "Font",
    "Image",
    "Multipart",
    "Text",
    "Video",
    "is_application",
    "is_audio",
    "is_font",
    "is_image",
    "is_message",
    "is_model",
    "is_multipart",
    "is_text",
    "is_video",
    "subtype_suffix",
]


def is_application(media_type: str) -> bool:
    """Return whether the media type belongs to the ``application``
    family."""
    return media_type.startswith("application/")


def is_audio(media_type: str) -> bool:
    """Return whether the media type belongs to the ``audio`` family."""
    return media_type.startswith("audio/")


def is_font(media_type: str) -> bool:
    """Return whether the media type belongs to the ``font`` family."""
    return media_type.startswith("font/")


def is_image(media_type: str) -> bool:
    """Return whether the media type belongs to the ``image`` family."""
    return media_type.startswith("image/")


def is_message(media_type: str) -> bool:
    """Return whether the media type belongs to the ``message``
    family."""
    return media_type.startswith("message/")


def is_model(media_type: str) -> bool:
    """Return whether the media type belongs to the ``model`` family."""
    return media_type.startswith("model/")


def is_multipart(media_type: str) -> bool:
    """Return whether the media type belongs to the ``multipart``
    family."""
    return media_type.startswith("multipart/")


def is_text(media_type: str) -> bool:
    """Return whether the media type belongs to the ``text`` family."""
    return media_type.startswith("text/")


def is_video(media_type: str) -> bool:
    """Return whether the media type belongs to the ``video`` family."""
    return media_type.startswith("video/")


def subtype_suffix(media_type: str) -> str | None:
    """Return the structured syntax suffix of a media type, if any.

    Args:
        media_type: The media type (e.g. ``"application/geo+json"``).

    Returns:
        The suffix without the ``+`` sign (e.g. ``"json"``), or ``None``
            if the subtype has no suffix.

    Example:
        ```pycon
        >>> from httpops.media_types import subtype_suffix
        >>> subtype_suffix("application/geo+json")
        'json'
        >>> subtype_suffix("application/json") is None
        True

        ```
    """
    _, _, subtype = media_type.partition("/")
    if "+" not in subtype:
        return None
    return subtype.rsplit("+", 1)[1]


class Application:
    """Well-known ``application/*`` media types."""

    ATOM_XML = "application/atom+xml"
    CALENDAR_JSON = "application/calendar+json"
    CALENDAR_XML = "application/calendar+xml"
    GEO_JSON = "application/geo+json"
    GZIP = "application/gzip"
    JAVASCRIPT = "application/javascript"
    JSON = "application/json"
    JSON_PATCH = "application/json-patch+json"
    JSON_SEQ = "application/json-seq"
    LD_JSON = "application/ld+json"
    MERGE_PATCH_JSON = "application/merge-patch+json"
    OCTET_STREAM = "application/octet-stream"
    PDF = "application/pdf"
    PROBLEM_JSON = "application/problem+json"
    PROBLEM_XML = "application/problem+xml"
    RTF = "application/rtf"
    SOAP_XML = "application/soap+xml"
    SQL = "application/sql"
    WASM = "application/wasm"
    X_WWW_FORM_URLENCODED = "application/x-www-form-urlencoded"
    XHTML = "application/xhtml+xml"
    XML = "application/xml"
    XML_DTD = "application/xml-dtd"
    ZIP = "application/zip"


class Audio:
    """Well-known ``audio/*`` media types."""

    MP4 = "audio/mp4"
    MPEG = "audio/mpeg"
    MPEG4 = "audio/mpeg4-generic"
    OGG = "audio/ogg"
    WEBM = "audio/webm"


class Font:
    """Well-known ``font/*`` media types."""

    COLLECTION = "font/collection"
    OTF = "font/otf"
    SFNT = "font/sfnt"
    TTF = "font/ttf"
    WOFF = "font/woff"
    WOFF2 = "font/woff2"


class Image:
    """Well-known ``image/*`` media types."""

    APNG = "image/apng"
    AVIF = "image/avif"
    GIF = "image/gif"
    JPEG = "image/jpeg"
    PNG = "image/png"
    SVG_XML = "image/svg+xml"
    TIFF = "image/tiff"
    WEBP = "image/webp"


class Multipart:
    """Well-known ``multipart/*`` media types."""

    ENCRYPTED = "multipart/encrypted"
    FORM_DATA = "multipart/form-data"
    MIXED = "multipart/mixed"
    MULTILINGUAL = "multipart/multilingual"
    RELATED = "multipart/related"
    SIGNED = "multipart/signed"


class Text:
    """Well-known ``text/*`` media types."""

    CALENDAR = "text/calendar"
    CSS = "text/css"
    CSV = "text/csv"
    EVENT_STREAM = "text/event-stream"
    HTML = "text/html"
    JAVASCRIPT = "text/javascript"
    MARKDOWN = "text/markdown"
    PLAIN = "text/plain"
    RTF = "text/rtf"
    TAB_SEPARATED_VALUES = "text/tab-separated-values"
    VCARD = "text/vcard"
    VTT = "text/vtt"
    XML = "text/xml"


class Video:
    """Well-known ``video/*`` media types."""

    H264 = "video/h264"
    H265 = "video/h265"
    JPEG_2000 = "video/jpeg2000"
    MP4 = "video/mp4"
    MPEG = "video/mpeg"
    OGG = "video/ogg"
    WEBM = "video/webm"


KNOWN_MEDIA_TYPES: tuple[str, ...] = (
    Application.ATOM_XML,
    Application.CALENDAR_JSON,
    Application.CALENDAR_XML,
    Application.GEO_JSON,
    Application.GZIP,
    Application.JAVASCRIPT,
    Application.JSON,
    Application.JSON_PATCH,
    Application.JSON_SEQ,
    Application.LD_JSON,
    Application.MERGE_PATCH_JSON,
    Application.OCTET_STREAM,
    Application.PDF,
    Application.PROBLEM_JSON,
    Application.PROBLEM_XML,
    Application.RTF,
    Application.SOAP_XML,
    Application.SQL,
    Application.WASM,
    Application.X_WWW_FORM_URLENCODED,
    Application.XHTML,
    Application.XML,
    Application.XML_DTD,
    Application.ZIP,
    Audio.MP4,
    Audio.MPEG,
    Audio.MPEG4,
    Audio.OGG,
    Audio.WEBM,
    Font.COLLECTION,
    Font.OTF,
    Font.SFNT,
    Font.TTF,
    Font.WOFF,
    Font.WOFF2,
    Image.APNG,
    Image.AVIF,
    Image.GIF,
    Image.JPEG,
    Image.PNG,
    Image.SVG_XML,
    Image.TIFF,
    Image.WEBP,
    Multipart.ENCRYPTED,
    Multipart.FORM_DATA,
    Multipart.MIXED,
    Multipart.MULTILINGUAL,
    Multipart.RELATED,
    Multipart.SIGNED,
    Text.CALENDAR,
    Text.CSS,
    Text.CSV,
    Text.EVENT_STREAM,
    Text.HTML,
    Text.JAVASCRIPT,
    Text.MARKDOWN,
    Text.PLAIN,
    Text.RTF,
    Text.TAB_SEPARATED_VALUES,
    Text.VCARD,
    Text.VTT,
    Text.XML,
    Video.H264,
    Video.H265,
    Video.JPEG_2000,
    Video.MP4,
    Video.MPEG,
    Video.OGG,
    Video.WEBM,
)
