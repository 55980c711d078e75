import pytest

from sportmonks_sdk import ClientOptions, RateLimiter, RetryPolicy, SportMonksClient, SportMonksError
from sportmonks_sdk.core.resources import FixturesResource, TeamsResource
from sportmonks_sdk.infrastructure.config.settings import set_config_for_testing
from sportmonks_sdk.infrastructure.http.transport import HttpxTransport


def test_requires_api_token():
    with pytest.raises(ValueError, match="API token not provided"):
        SportMonksClient("")


def test_resources_share_one_executor(make_client):
    client, _ = make_client()
    assert isinstance(client.teams, TeamsResource)
    assert isinstance(client.fixtures, FixturesResource)
    assert client.teams.endpoint.executor is client.fixtures.endpoint.executor is client.executor
    assert client.schedules.endpoint.base_path == "/football/schedules"


def test_default_client_builds_httpx_transport():
    client = SportMonksClient("token", ClientOptions(timeout=5.0, retry=RetryPolicy(max_retries=2)))
    assert isinstance(client.transport, HttpxTransport)
    assert client.transport.base_url == "https://api.sportmonks.com/v3"
    assert client.executor.policy.max_retries == 2
    assert client.executor.rate_limiter is None


def test_shared_rate_limiter_is_opt_in():
    limiter = RateLimiter(max_requests=10, time_window=1)
    client = SportMonksClient("token", ClientOptions(rate_limiter=limiter))
    assert client.executor.rate_limiter is limiter


@pytest.mark.asyncio
async def test_set_api_token_applies_to_next_request(make_client):
    client, api = make_client((200, {"data": []}))

    client.set_api_token("rotated")
    await client.leagues.all().get()

    assert api.last_params["api_token"] == "rotated"


@pytest.mark.asyncio
async def test_arbitrary_endpoint(make_client):
    client, api = make_client((200, {"data": [{"id": 462, "name": "United Kingdom"}]}))

    response = await client.endpoint("/core/countries").query().select(["name"]).get()

    assert response.data[0]["id"] == 462
    assert api.requests[0].url.path == "/v3/core/countries"


@pytest.mark.asyncio
async def test_async_context_manager_closes_transport(make_client):
    client, _ = make_client()
    async with client as entered:
        assert entered is client
    assert client.transport.client.is_closed


def test_from_config(mocker):
    mocker.patch("sportmonks_sdk.infrastructure.config.settings.load_configuration")
    set_config_for_testing({
        "sportmonks.api_token": "configured",
        "sportmonks.retry.max_retries": 4,
        "sportmonks.include_separator": ",",
    })

    client = SportMonksClient.from_config(timeout=3.0)

    assert client.executor.policy.max_retries == 4
    assert client.options.include_separator == ","
    assert client.options.timeout == 3.0


@pytest.mark.asyncio
async def test_server_error_message_does_not_expose_token(make_client):
    client, _ = make_client((500, None))

    with pytest.raises(SportMonksError) as exc_info:
        await client.teams.all().get()

    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "Request failed with status code 500"
    assert "test-token" not in str(exc_info.value)


@pytest.mark.asyncio
async def test_non_object_body_raises_sportmonks_error(make_client):
    client, _ = make_client((200, ["not", "an", "envelope"]))

    with pytest.raises(SportMonksError, match="expected a JSON object"):
        await client.teams.all().get()
