# tests/test_fetch_provider.py
from __future__ import annotations

import asyncio
import json

import httpx
import pytest
import respx
from httpx import Response

from adapters.http_client import FetchProvider, build_async_client
from adapters.naming_services import DasService
from conftest import INDEXER_URL, UNREGISTERED_RESPONSE, make_reverse_response, make_search_response
from core.config import AppSettings
from core.errors import ProviderError


def _rpc(result):
    return {"jsonrpc": "2.0", "id": 1, "result": result}


def test_build_async_client_uses_settings():
    settings = AppSettings(http_timeout_seconds=3.5, user_agent="tests/1.0")

    client = build_async_client(settings, extra_headers={"X-Trace": "1"})
    try:
        assert client.timeout.read == 3.5
        assert client.headers["User-Agent"] == "tests/1.0"
        assert client.headers["Accept"] == "application/json"
        assert client.headers["X-Trace"] == "1"
    finally:
        asyncio.run(client.aclose())


@respx.mock
def test_request_posts_json_rpc_envelope_and_returns_result():
    route = respx.post(INDEXER_URL).mock(return_value=Response(200, json=_rpc({"data": {"ok": True}})))
    provider = FetchProvider(INDEXER_URL)

    result = asyncio.run(provider.request("das_searchAccount", ["alice.bit"]))

    assert result == {"data": {"ok": True}}
    assert route.call_count == 1
    body = json.loads(route.calls.last.request.content)
    assert body["jsonrpc"] == "2.0"
    assert body["method"] == "das_searchAccount"
    assert body["params"] == ["alice.bit"]
    assert isinstance(body["id"], int)


@respx.mock
def test_request_ids_increase():
    route = respx.post(INDEXER_URL).mock(return_value=Response(200, json=_rpc(None)))
    provider = FetchProvider(INDEXER_URL)

    async def scenario():
        await provider.request("m", [])
        await provider.request("m", [])

    asyncio.run(scenario())

    ids = [json.loads(call.request.content)["id"] for call in route.calls]
    assert ids == [1, 2]


@respx.mock
def test_rpc_error_raises_provider_error():
    respx.post(INDEXER_URL).mock(
        return_value=Response(
            200,
            json={"jsonrpc": "2.0", "id": 1, "error": {"code": -32601, "message": "method not found"}},
        )
    )
    provider = FetchProvider(INDEXER_URL)

    with pytest.raises(ProviderError) as info:
        asyncio.run(provider.request("das_unknown", []))

    assert info.value.code == -32601
    assert info.value.method == "das_unknown"
    assert "method not found" in str(info.value)


@respx.mock
def test_http_errors_propagate():
    respx.post(INDEXER_URL).mock(return_value=Response(502))
    provider = FetchProvider(INDEXER_URL)

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(provider.request("das_searchAccount", ["alice.bit"]))


@respx.mock
def test_body_without_envelope_is_returned_as_is():
    respx.post(INDEXER_URL).mock(return_value=Response(200, json={"data": None}))
    provider = FetchProvider(INDEXER_URL)

    assert asyncio.run(provider.request("das_searchAccount", ["x.bit"])) == {"data": None}


def _dispatch(request: httpx.Request) -> Response:
    body = json.loads(request.content)
    if body["method"] == "das_searchAccount":
        if body["params"] == ["alice.bit"]:
            records = [
                {"key": "address.eth", "label": "", "value": "0xabc", "ttl": "300"},
                {"key": "profile.email", "label": "", "value": "a@example.com", "ttl": "60"},
            ]
            return Response(200, json=_rpc(make_search_response(records=records)))
        return Response(200, json=_rpc(UNREGISTERED_RESPONSE))
    if body["method"] == "das_getAddressAccount":
        return Response(200, json=_rpc(make_reverse_response(["alice.bit"])))
    return Response(404)


@respx.mock
def test_das_service_over_http():
    respx.post(INDEXER_URL).mock(side_effect=_dispatch)
    service = DasService(url=INDEXER_URL)

    async def scenario():
        return (
            await service.addr("alice.bit", "ETH"),
            await service.record("alice.bit", "profile.email"),
            await service.is_registered("ghost.bit"),
            await service.reverse("0xabc", "ETH"),
        )

    address, email, ghost, reverse = asyncio.run(scenario())

    assert address == "0xabc"
    assert email == "a@example.com"
    assert ghost is False
    assert reverse == "alice.bit"
