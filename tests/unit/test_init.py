r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import httpops
from httpops import HttpClientError


def test_package_version_is_string() -> None:
    """Test that __version__ is a string."""
    assert isinstance(httpops.__version__, str)


def test_package_version_format() -> None:
    """Test that __version__ follows semantic versioning."""
    assert "." in httpops.__version__


def test_all_exports_defined() -> None:
    """Test that all items in __all__ are defined in the module."""
    for name in httpops.__all__:
        assert hasattr(httpops, name), f"{name} is in __all__ but not defined in module"


def test_exported_errors_are_client_errors() -> None:
    for name in httpops.__all__:
        value = getattr(httpops, name)
        if isinstance(value, type) and issubclass(value, Exception):
            assert issubclass(value, HttpClientError)
