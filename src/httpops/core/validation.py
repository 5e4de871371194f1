r"""Parameter validation utilities."""

from __future__ import annotations

__all__ = ["validate_base_uri", "validate_timeout"]

import httpx


def validate_timeout(timeout: float | httpx.Timeout) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for server responses.
            Must be > 0 if provided as a numeric value.

    Raises:
        ValueError: If timeout is a numeric value <= 0.

    Example:
        ```pycon
        >>> from httpops.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if isinstance(timeout, (int, float)) and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_base_uri(base_uri: str | httpx.URL) -> httpx.URL:
    """Validate and normalize the base URI of an HTTP service.

    Args:
        base_uri: The base URI. Must be absolute.

    Returns:
        The base URI as an ``httpx.URL``.

    Raises:
        ValueError: If the base URI is not absolute.

    Example:
        ```pycon
        >>> from httpops.core.validation import validate_base_uri
        >>> validate_base_uri("https://api.example.com/v1/")
        URL('https://api.example.com/v1/')

        ```
    """
    url = httpx.URL(base_uri)
    if url.is_relative_url:
        msg = f"base_uri must be absolute, got {base_uri!s}"
        raise ValueError(msg)
    return url
