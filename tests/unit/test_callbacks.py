r"""Unit tests for callback functionality."""

from __future__ import annotations

from unittest.mock import Mock, patch

from httpops.callbacks import (
    FailureInfo,
    RequestInfo,
    ResponseInfo,
    invoke_on_failure,
    invoke_on_request,
    invoke_on_response,
)
from httpops.exceptions import HttpTransportError

TEST_URL = "https://api.example.com/data"


#######################################
#     Tests for invoke_on_request     #
#######################################


def test_invoke_on_request(mock_callback: Mock) -> None:
    invoke_on_request(mock_callback, url=TEST_URL, method="GET")
    mock_callback.assert_called_once_with(RequestInfo(url=TEST_URL, method="GET"))


def test_invoke_on_request_none() -> None:
    invoke_on_request(None, url=TEST_URL, method="GET")


########################################
#     Tests for invoke_on_response     #
########################################


def test_invoke_on_response(mock_callback: Mock) -> None:
    with patch("time.time", return_value=12.5):
        invoke_on_response(
            mock_callback, url=TEST_URL, method="POST", status_code=201, start_time=10.0
        )
    mock_callback.assert_called_once_with(
        ResponseInfo(url=TEST_URL, method="POST", status_code=201, total_time=2.5)
    )


def test_invoke_on_response_none() -> None:
    invoke_on_response(None, url=TEST_URL, method="POST", status_code=201, start_time=10.0)


#######################################
#     Tests for invoke_on_failure     #
#######################################


def test_invoke_on_failure(mock_callback: Mock) -> None:
    error = HttpTransportError("Connection refused")
    with patch("time.time", return_value=11.0):
        invoke_on_failure(mock_callback, url=TEST_URL, method="GET", error=error, start_time=10.0)
    mock_callback.assert_called_once_with(
        FailureInfo(url=TEST_URL, method="GET", error=error, total_time=1.0)
    )


def test_invoke_on_failure_none() -> None:
    invoke_on_failure(
        None, url=TEST_URL, method="GET", error=HttpTransportError("boom"), start_time=0.0
    )
