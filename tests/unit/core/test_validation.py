from __future__ import annotations

import httpx
import pytest

from httpops.core import validate_base_uri, validate_timeout

#######################################
#     Tests for validate_timeout     #
#######################################


@pytest.mark.parametrize("timeout", [0.1, 1.0, 10.0, 30.0, 100])
def test_validate_timeout_accepts_valid_values(timeout: float) -> None:
    """Test that validate_timeout accepts valid timeout values."""
    validate_timeout(timeout)


def test_validate_timeout_accepts_httpx_timeout() -> None:
    validate_timeout(httpx.Timeout(5.0, connect=1.0))


def test_validate_timeout_rejects_zero() -> None:
    """Test that validate_timeout rejects zero timeout."""
    with pytest.raises(ValueError, match=r"timeout must be > 0, got 0"):
        validate_timeout(0)


def test_validate_timeout_rejects_negative() -> None:
    """Test that validate_timeout rejects negative timeout."""
    with pytest.raises(ValueError, match=r"timeout must be > 0, got -1.0"):
        validate_timeout(-1.0)


#######################################
#     Tests for validate_base_uri     #
#######################################


@pytest.mark.parametrize(
    "base_uri",
    ["https://api.example.com/v1/", "http://localhost:8080", httpx.URL("https://example.org/")],
)
def test_validate_base_uri_accepts_absolute(base_uri: str | httpx.URL) -> None:
    assert validate_base_uri(base_uri) == httpx.URL(base_uri)


@pytest.mark.parametrize("base_uri", ["/v1/", "v1", "", "//example.org/v1/"])
def test_validate_base_uri_rejects_relative(base_uri: str) -> None:
    with pytest.raises(ValueError, match=r"base_uri must be absolute"):
        validate_base_uri(base_uri)
