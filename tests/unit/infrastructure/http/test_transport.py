import logging

import pytest
import httpx

from sportmonks_sdk.domain.errors import SportMonksError
from sportmonks_sdk.infrastructure.http.transport import HttpxTransport


def recording_transport(requests, response=None):
    def handler(request):
        requests.append(request)
        return response or httpx.Response(200, json={"data": []})
    return httpx.MockTransport(handler)


@pytest.mark.asyncio
async def test_token_is_attached_to_every_request():
    requests = []
    transport = HttpxTransport("secret", transport=recording_transport(requests))

    await transport.get("/football/leagues", {"page": 2})
    await transport.get("/football/teams", {})

    assert [r.url.params["api_token"] for r in requests] == ["secret", "secret"]
    assert requests[0].url.params["page"] == "2"
    assert str(requests[0].url).startswith("https://api.sportmonks.com/v3/football/leagues")
    await transport.aclose()


@pytest.mark.asyncio
async def test_set_api_token_replaces_token():
    requests = []
    transport = HttpxTransport("old", transport=recording_transport(requests))

    transport.set_api_token("new")
    await transport.get("/football/leagues", {})

    assert requests[0].url.params.get_list("api_token") == ["new"]


def test_set_timeout_updates_client():
    transport = HttpxTransport("token", timeout=30.0)
    transport.set_timeout(5.0)
    assert transport.client.timeout == httpx.Timeout(5.0)


@pytest.mark.asyncio
async def test_error_status_raises_http_status_error():
    transport = HttpxTransport("token", transport=recording_transport([], httpx.Response(404, json={})))

    with pytest.raises(httpx.HTTPStatusError):
        await transport.get("/football/teams/1", {})


@pytest.mark.asyncio
async def test_invalid_json_raises_sportmonks_error():
    transport = HttpxTransport("token", transport=recording_transport([], httpx.Response(200, text="not json")))

    with pytest.raises(SportMonksError, match="Invalid JSON"):
        await transport.get("/football/teams/1", {})


@pytest.mark.asyncio
async def test_logged_urls_never_contain_token(caplog):
    transport = HttpxTransport("top-secret", transport=recording_transport([], httpx.Response(500, json={})))

    with caplog.at_level(logging.DEBUG, logger="sportmonks_sdk.infrastructure.http.transport"):
        with pytest.raises(httpx.HTTPStatusError):
            await transport.get("/football/teams", {"include": "country"})

    assert "API error: status=500" in caplog.text
    assert "top-secret" not in caplog.text
