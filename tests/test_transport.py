from __future__ import annotations

import asyncio
from typing import Any

import aiohttp
import pytest

from pywmata._transport import HttpTransport, parse_document
from pywmata.config import WmataConfig
from pywmata.exceptions import WmataNetworkError, WmataParseError

URL = "https://api.wmata.com/Rail.svc/Lines?api_key=secret"


class _FakeResponse:
    def __init__(self, status: int, body: bytes) -> None:
        self.status = status
        self._body = body

    async def read(self) -> bytes:
        return self._body

    async def __aenter__(self) -> _FakeResponse:
        return self

    async def __aexit__(self, *_exc: Any) -> None:
        return None


class _FakeSession:
    def __init__(self, response: _FakeResponse | None = None, error: BaseException | None = None) -> None:
        self._response = response
        self._error = error
        self.requests: list[tuple[str, dict[str, str]]] = []

    def get(self, url: str, *, headers: dict[str, str]) -> _FakeResponse:
        self.requests.append((url, headers))
        if self._error is not None:
            raise self._error
        assert self._response is not None
        return self._response


def _transport(session: _FakeSession) -> HttpTransport:
    return HttpTransport(WmataConfig(api_key="secret"), session)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_successful_fetch_returns_document() -> None:
    session = _FakeSession(_FakeResponse(200, b'<LinesResp xmlns="http://www.wmata.com"><Lines/></LinesResp>'))

    doc = await _transport(session).get_document(URL)

    assert doc is not None
    assert doc.getroot().tag == "{http://www.wmata.com}LinesResp"
    url, headers = session.requests[0]
    assert url == URL
    assert headers["user-agent"] == "pywmata"


@pytest.mark.asyncio
async def test_connection_reset_raises_network_error() -> None:
    cause = aiohttp.ClientOSError(104, "Connection reset by peer")
    session = _FakeSession(error=cause)

    with pytest.raises(WmataNetworkError) as exc_info:
        await _transport(session).get_document(URL)

    assert exc_info.value.__cause__ is cause
    assert exc_info.value.status_code is None
    assert "secret" not in str(exc_info.value)
    assert "secret" not in exc_info.value.url


@pytest.mark.asyncio
async def test_timeout_raises_network_error() -> None:
    session = _FakeSession(error=asyncio.TimeoutError())
    with pytest.raises(WmataNetworkError):
        await _transport(session).get_document(URL)


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [401, 404, 500, 503])
async def test_non_2xx_raises_network_error(status: int) -> None:
    session = _FakeSession(_FakeResponse(status, b"<Error>nope</Error>"))

    with pytest.raises(WmataNetworkError) as exc_info:
        await _transport(session).get_document(URL)

    assert exc_info.value.status_code == status


@pytest.mark.asyncio
async def test_malformed_body_raises_parse_error() -> None:
    session = _FakeSession(_FakeResponse(200, b"<LinesResp><Lines></LinesResp>"))
    with pytest.raises(WmataParseError):
        await _transport(session).get_document(URL)


@pytest.mark.asyncio
async def test_empty_body_yields_no_document() -> None:
    session = _FakeSession(_FakeResponse(200, b"  \n"))
    assert await _transport(session).get_document(URL) is None


def test_parse_document_non_xml() -> None:
    with pytest.raises(WmataParseError):
        parse_document(b'{"Lines": []}')
