from __future__ import annotations

import logging

import httpx
import pytest

from cryptoapi.core.config import Settings
from cryptoapi.core.errors import ApiError, DecodeError, RequestError, TransportError
from cryptoapi.utils.http_client import SharedHTTPClient, build_async_client, fetch_json

URL = "https://api.example.test/v1/items"


@pytest.mark.asyncio
async def test_fetch_json_returns_body_unchanged(api_mock, http_client) -> None:
    payload = {"items": [{"id": 1, "tags": ["a", "b"]}], "next": None}
    route = api_mock.get(URL).mock(return_value=httpx.Response(200, json=payload))

    result = await fetch_json(URL, "fetching items", client=http_client)

    assert result == payload
    assert route.call_count == 1
    assert route.calls.last.request.method == "GET"


@pytest.mark.asyncio
async def test_fetch_json_accepts_any_2xx(api_mock, http_client) -> None:
    api_mock.get(URL).mock(return_value=httpx.Response(203, json=[1, 2, 3]))

    assert await fetch_json(URL, "fetching items", client=http_client) == [1, 2, 3]


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [400, 404, 429, 500, 503])
async def test_fetch_json_raises_request_error_with_status(api_mock, http_client, status) -> None:
    api_mock.get(URL).mock(return_value=httpx.Response(status, json={"error": "nope"}))

    with pytest.raises(RequestError) as excinfo:
        await fetch_json(URL, "fetching items", client=http_client)

    assert excinfo.value.status == status
    assert excinfo.value.url == URL
    assert excinfo.value.operation == "fetching items"


@pytest.mark.asyncio
async def test_fetch_json_makes_a_single_attempt(api_mock, http_client) -> None:
    route = api_mock.get(URL).mock(return_value=httpx.Response(429))

    with pytest.raises(RequestError):
        await fetch_json(URL, "fetching items", client=http_client)

    assert route.call_count == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "exc",
    [httpx.ConnectError, httpx.ConnectTimeout, httpx.ReadTimeout, httpx.RemoteProtocolError],
)
async def test_fetch_json_wraps_network_failures(api_mock, http_client, exc) -> None:
    api_mock.get(URL).mock(side_effect=exc)

    with pytest.raises(TransportError) as excinfo:
        await fetch_json(URL, "fetching items", client=http_client)

    assert isinstance(excinfo.value.cause, exc)
    assert excinfo.value.__cause__ is excinfo.value.cause


@pytest.mark.asyncio
async def test_fetch_json_raises_decode_error_on_malformed_body(api_mock, http_client) -> None:
    api_mock.get(URL).mock(return_value=httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(DecodeError):
        await fetch_json(URL, "fetching items", client=http_client)


@pytest.mark.asyncio
async def test_errors_share_a_base_class(api_mock, http_client) -> None:
    api_mock.get(URL).mock(return_value=httpx.Response(502))

    with pytest.raises(ApiError):
        await fetch_json(URL, "fetching items", client=http_client)


@pytest.mark.asyncio
async def test_failure_is_logged_with_operation_name(api_mock, http_client, caplog) -> None:
    api_mock.get(URL).mock(return_value=httpx.Response(404))

    with caplog.at_level(logging.ERROR, logger="HTTPGateway"):
        with pytest.raises(RequestError):
            await fetch_json(URL, "fetching pair info", client=http_client)

    assert len(caplog.records) == 1
    message = caplog.records[0].getMessage()
    assert "fetching pair info" in message
    assert "404" in message


@pytest.mark.asyncio
async def test_success_is_not_logged_as_error(api_mock, http_client, caplog) -> None:
    api_mock.get(URL).mock(return_value=httpx.Response(200, json={}))

    with caplog.at_level(logging.ERROR, logger="HTTPGateway"):
        await fetch_json(URL, "fetching items", client=http_client)

    assert caplog.records == []


@pytest.mark.asyncio
async def test_shared_client_is_reused_and_recreated_after_close(api_mock) -> None:
    api_mock.get(URL).mock(return_value=httpx.Response(200, json={"ok": True}))

    first = SharedHTTPClient.get_client()
    assert SharedHTTPClient.get_client() is first
    assert await fetch_json(URL, "fetching items") == {"ok": True}

    await SharedHTTPClient.close()
    assert first.is_closed

    second = SharedHTTPClient.get_client()
    assert second is not first
    await SharedHTTPClient.close()


@pytest.mark.asyncio
async def test_build_async_client_uses_settings() -> None:
    client = build_async_client(Settings(HTTP_TIMEOUT=5.0, HTTP_FOLLOW_REDIRECTS=False))
    try:
        assert client.timeout.read == 5.0
        assert client.follow_redirects is False
    finally:
        await client.aclose()


@pytest.mark.asyncio
async def test_build_async_client_without_timeout() -> None:
    client = build_async_client(Settings(HTTP_TIMEOUT=None))
    try:
        assert client.timeout.connect is None
        assert client.timeout.read is None
    finally:
        await client.aclose()


@pytest.mark.asyncio
async def test_redirect_loop_surfaces_as_transport_error(api_mock, caplog) -> None:
    api_mock.get(URL).mock(
        side_effect=lambda request: httpx.Response(302, headers={"Location": URL})
    )
    client = build_async_client(Settings(HTTP_FOLLOW_REDIRECTS=True))

    try:
        with caplog.at_level(logging.ERROR, logger="HTTPGateway"):
            with pytest.raises(TransportError) as excinfo:
                await fetch_json(URL, "fetching items", client=client)
    finally:
        await client.aclose()

    assert isinstance(excinfo.value.cause, httpx.TooManyRedirects)
    assert len(caplog.records) == 1
    assert "fetching items" in caplog.records[0].getMessage()


@pytest.mark.asyncio
async def test_corrupt_content_encoding_surfaces_as_decode_error(api_mock, http_client, caplog) -> None:
    api_mock.get(URL).mock(
        side_effect=lambda request: httpx.Response(
            200,
            headers={"Content-Encoding": "gzip"},
            stream=httpx.ByteStream(b"not gzip"),
        )
    )

    with caplog.at_level(logging.ERROR, logger="HTTPGateway"):
        with pytest.raises(DecodeError) as excinfo:
            await fetch_json(URL, "fetching items", client=http_client)

    assert isinstance(excinfo.value.cause, httpx.DecodingError)
    assert excinfo.value.operation == "fetching items"
    assert len(caplog.records) == 1
