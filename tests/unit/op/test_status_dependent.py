from __future__ import annotations

from unittest.mock import Mock, patch

import httpx
import pytest

from httpops.exceptions import HttpResponseStatusError
from tests.helpers import (
    BASE_URI,
    RecordingEngine,
    SampleStatus,
    SampleStatusOperation,
    StubResponse,
    StubResponseBody,
)

##############################################
#     Tests for StatusDependentOperation     #
##############################################


@pytest.mark.asyncio
async def test_status_dependent_execute() -> None:
    status = SampleStatus("s-1")
    status.token = "t-1"
    engine = RecordingEngine(StubResponse(200, StubResponseBody(b"item")))
    client = Mock(base_uri=httpx.URL(BASE_URI), engine=engine)
    assert await SampleStatusOperation().execute("9", status, client) == "item"
    request = engine.requests[0]
    assert request.uri == httpx.URL("http://example.org/base/path/items/9")
    assert request.headers["X-Session"] == "s-1"
    assert request.headers["Authorization"] == "Bearer t-1"


@pytest.mark.asyncio
async def test_status_dependent_passes_status_to_every_step() -> None:
    operation = SampleStatusOperation()
    status = SampleStatus("s-1")
    response = StubResponse(200, StubResponseBody(b"item"))
    client = Mock(base_uri=httpx.URL(BASE_URI), engine=RecordingEngine(response))
    with (
        patch.object(operation, "get_request_uri", wraps=operation.get_request_uri) as uri,
        patch.object(operation, "parse_response", return_value="parsed") as parse,
        patch.object(operation, "process_response", return_value="result") as process,
    ):
        assert await operation.execute("9", status, client) == "result"
    uri.assert_called_once_with("9", status)
    assert parse.call_args.args[:3] == ("9", status, response)
    process.assert_called_once_with("9", status, "parsed", response)


@pytest.mark.asyncio
async def test_status_dependent_rejected_status() -> None:
    operation = SampleStatusOperation()
    body = StubResponseBody(b"gone")
    client = Mock(base_uri=httpx.URL(BASE_URI), engine=RecordingEngine(StubResponse(410, body)))
    with (
        patch.object(operation, "process_response") as process,
        pytest.raises(HttpResponseStatusError),
    ):
        await operation.execute("9", SampleStatus("s-1"), client)
    assert body.closed
    process.assert_not_called()


@pytest.mark.asyncio
async def test_status_dependent_without_body() -> None:
    client = Mock(base_uri=httpx.URL(BASE_URI), engine=RecordingEngine(StubResponse(204)))
    assert await SampleStatusOperation().execute("9", SampleStatus("s-1"), client) == ""
