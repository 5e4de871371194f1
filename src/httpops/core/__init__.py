r"""Configuration and validation shared by engines and clients."""

from __future__ import annotations

__all__ = [
    "DEFAULT_CHARSET",
    "DEFAULT_FOLLOW_REDIRECTS",
    "DEFAULT_TIMEOUT",
    "EngineConfig",
    "validate_base_uri",
    "validate_timeout",
]

from httpops.core.config import (
    DEFAULT_CHARSET,
    DEFAULT_FOLLOW_REDIRECTS,
    DEFAULT_TIMEOUT,
    EngineConfig,
)
from httpops.core.validation import validate_base_uri, validate_timeout
