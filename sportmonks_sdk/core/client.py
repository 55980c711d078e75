"""SportMonks client: the composition root of the library.

Wires one HTTP transport and one RetryExecutor (built from one RetryPolicy)
into an Endpoint per resource:

    async with SportMonksClient(api_token) as client:
        page = await client.teams.search("Manchester").include(["country"]).get()
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Optional

from sportmonks_sdk.core.endpoint import Endpoint
from sportmonks_sdk.core.parameter_encoder import DEFAULT_INCLUDE_SEPARATOR
from sportmonks_sdk.core.resources import (
    CoachesResource,
    FixturesResource,
    LeaguesResource,
    LivescoresResource,
    PlayersResource,
    RefereesResource,
    SchedulesResource,
    StandingsResource,
    TeamsResource,
    TransfersResource,
    VenuesResource,
)
from sportmonks_sdk.domain.interfaces.transport import HttpTransport
from sportmonks_sdk.domain.models.policy import RetryPolicy
from sportmonks_sdk.infrastructure.http.transport import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_S, HttpxTransport
from sportmonks_sdk.infrastructure.resilience.api_retry import EventHook, RetryExecutor, SleepFunc
from sportmonks_sdk.infrastructure.resilience.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


@dataclass
class ClientOptions:
    """Construction-time configuration of a SportMonksClient."""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT_S
    include_separator: str = DEFAULT_INCLUDE_SEPARATOR
    retry: RetryPolicy = field(default_factory=RetryPolicy)
    # Shared between every request of this client when set; off by default
    rate_limiter: Optional[RateLimiter] = None
    on_event: Optional[EventHook] = None


class SportMonksClient:
    """Async client for the SportMonks Football v3 API."""

    def __init__(
        self,
        api_token: str,
        options: Optional[ClientOptions] = None,
        transport: Optional[HttpTransport] = None,
        sleep: SleepFunc = asyncio.sleep,
    ):
        """Initializes the client and its resources.

        Args:
            api_token: SportMonks API token.
            options: Client configuration; defaults are used when omitted.
            transport: Optional pre-built transport (tests, custom stacks).
            sleep: Awaitable used for retry waits.

        Raises:
            ValueError: If no API token is given.
        """
        if not api_token:
            raise ValueError("SportMonks API token not provided. Set SPORTMONKS_API_TOKEN or pass api_token.")

        self.options = options or ClientOptions()
        self.transport = transport or HttpxTransport(
            api_token=api_token,
            base_url=self.options.base_url,
            timeout=self.options.timeout,
        )
        self.executor = RetryExecutor(
            transport=self.transport,
            policy=self.options.retry,
            rate_limiter=self.options.rate_limiter,
            sleep=sleep,
            on_event=self.options.on_event,
        )

        self.leagues = LeaguesResource(self._endpoint("/football/leagues"))
        self.teams = TeamsResource(self._endpoint("/football/teams"))
        self.players = PlayersResource(self._endpoint("/football/players"))
        self.standings = StandingsResource(self._endpoint("/football/standings"))
        self.livescores = LivescoresResource(self._endpoint("/football/livescores"))
        self.coaches = CoachesResource(self._endpoint("/football/coaches"))
        self.referees = RefereesResource(self._endpoint("/football/referees"))
        self.transfers = TransfersResource(self._endpoint("/football/transfers"))
        self.venues = VenuesResource(self._endpoint("/football/venues"))
        self.fixtures = FixturesResource(self._endpoint("/football/fixtures"))
        self.schedules = SchedulesResource(self._endpoint("/football/schedules"))
        logger.info(f"SportMonksClient initialized (include separator '{self.options.include_separator}')")

    def _endpoint(self, base_path: str) -> Endpoint:
        return Endpoint(self.executor, base_path, self.options.include_separator)

    def endpoint(self, base_path: str) -> Endpoint:
        """Returns an Endpoint for an arbitrary path (e.g. '/core/countries')."""
        return self._endpoint(base_path)

    @classmethod
    def from_config(cls, **overrides) -> "SportMonksClient":
        """Builds a client from .env / YAML / environment configuration."""
        from sportmonks_sdk.infrastructure.config.settings import (
            get_api_token, get_client_options, load_configuration
        )

        load_configuration()
        options = get_client_options()
        for key, value in overrides.items():
            setattr(options, key, value)
        return cls(api_token=get_api_token(), options=options)

    def set_api_token(self, api_token: str) -> None:
        self.transport.set_api_token(api_token)

    def set_timeout(self, timeout: float) -> None:
        self.transport.set_timeout(timeout)

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def __aenter__(self) -> "SportMonksClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
