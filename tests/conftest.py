import pytest
import httpx
from typer.testing import CliRunner
from unittest.mock import AsyncMock

from sportmonks_sdk.core.client import ClientOptions, SportMonksClient
from sportmonks_sdk.domain.models.policy import RetryPolicy
from sportmonks_sdk.infrastructure.config.settings import clear_test_config
from sportmonks_sdk.infrastructure.http.transport import HttpxTransport

BASE_URL = "https://api.sportmonks.com/v3"
TEST_TOKEN = "test-token"


class ScriptedApi:
    """httpx MockTransport handler replaying scripted responses in order.

    Each script item is ``(status, json_body)``, an exception instance to
    raise, or a callable taking the request. The last item repeats once the
    script is exhausted. Every request is recorded.
    """

    def __init__(self, *script):
        self.script = list(script) or [(200, {"data": []})]
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self.script.pop(0) if len(self.script) > 1 else self.script[0]
        if isinstance(item, Exception):
            raise item
        if callable(item):
            return item(request)
        status, body = item
        if isinstance(body, (dict, list)):
            return httpx.Response(status, json=body)
        return httpx.Response(status, text=body or "")

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_params(self):
        return dict(self.requests[-1].url.params)


@pytest.fixture
def fake_sleep():
    """Stands in for asyncio.sleep so retries never wait."""
    return AsyncMock()


@pytest.fixture
def make_client(fake_sleep):
    """Factory building a SportMonksClient on top of a ScriptedApi."""

    def _make(*script, retry: RetryPolicy = None, **options):
        api = ScriptedApi(*script)
        transport = HttpxTransport(TEST_TOKEN, base_url=BASE_URL, transport=httpx.MockTransport(api))
        client_options = ClientOptions(retry=retry or RetryPolicy(), **options)
        client = SportMonksClient(TEST_TOKEN, options=client_options, transport=transport, sleep=fake_sleep)
        return client, api

    return _make


@pytest.fixture(scope="session")
def runner():
    """Provides a Typer CliRunner instance."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keeps tests independent of the developer's environment and config overrides."""
    for name in ("SPORTMONKS_API_TOKEN", "SPORTMONKS_BASE_URL", "SPORTMONKS_TIMEOUT",
                 "SPORTMONKS_RETRY_MAX_RETRIES", "SPORTMONKS_RATE_LIMIT_ENABLED"):
        monkeypatch.delenv(name, raising=False)
    yield
    clear_test_config()
