r"""Unit tests for EngineConfig dataclass.

This file contains tests for the EngineConfig dataclass in
core/config.py.
"""

from __future__ import annotations

from unittest.mock import Mock

import pytest
from coola.equality import objects_are_equal

from httpops.core import (
    DEFAULT_CHARSET,
    DEFAULT_FOLLOW_REDIRECTS,
    DEFAULT_TIMEOUT,
    EngineConfig,
)

##################################
#     Tests for EngineConfig     #
##################################


def test_engine_config_defaults() -> None:
    """Test that EngineConfig uses correct default values."""
    config = EngineConfig()

    assert config.timeout == DEFAULT_TIMEOUT
    assert config.follow_redirects == DEFAULT_FOLLOW_REDIRECTS
    assert config.headers == {}
    assert config.on_request is None
    assert config.on_response is None
    assert config.on_failure is None


def test_default_constants() -> None:
    assert DEFAULT_TIMEOUT == 10.0
    assert DEFAULT_CHARSET == "utf-8"
    assert DEFAULT_FOLLOW_REDIRECTS is False


@pytest.mark.parametrize("timeout", [0.5, 30.0, 120])
def test_engine_config_timeout(timeout: float) -> None:
    assert EngineConfig(timeout=timeout).timeout == timeout


@pytest.mark.parametrize("timeout", [0, -1.0])
def test_engine_config_invalid_timeout(timeout: float) -> None:
    """Test that EngineConfig validates the timeout."""
    with pytest.raises(ValueError, match=r"timeout must be > 0"):
        EngineConfig(timeout=timeout)


def test_engine_config_headers_not_shared() -> None:
    first = EngineConfig()
    first.headers["X-Api"] = "1"
    assert EngineConfig().headers == {}


def test_engine_config_merge() -> None:
    on_request = Mock()
    config = EngineConfig(timeout=5.0, headers={"X-Api": "1"})

    merged = config.merge(timeout=20.0, on_request=on_request, follow_redirects=None)

    assert merged is not config
    assert merged.timeout == 20.0
    assert merged.on_request is on_request
    assert merged.follow_redirects == DEFAULT_FOLLOW_REDIRECTS
    assert objects_are_equal(merged.headers, {"X-Api": "1"})
    assert config.timeout == 5.0
    assert config.on_request is None


def test_engine_config_merge_validates() -> None:
    with pytest.raises(ValueError, match=r"timeout must be > 0"):
        EngineConfig().merge(timeout=-5.0)


def test_engine_config_client_kwargs() -> None:
    config = EngineConfig(timeout=3.0, follow_redirects=True, headers={"User-Agent": "test"})
    kwargs = config.client_kwargs()
    assert objects_are_equal(
        kwargs, {"timeout": 3.0, "follow_redirects": True, "headers": {"User-Agent": "test"}}
    )
    kwargs["headers"]["User-Agent"] = "changed"
    assert config.headers == {"User-Agent": "test"}
