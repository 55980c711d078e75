"""httpx-based implementation of the HttpTransport interface.

Holds one ``httpx.AsyncClient`` per SportMonks client. The API token is a
default query parameter, so it is attached to every request, and request /
response event hooks play the part of interceptors for logging.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from sportmonks_sdk.domain.errors import SportMonksError
from sportmonks_sdk.domain.interfaces.transport import HttpTransport

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.sportmonks.com/v3"
DEFAULT_TIMEOUT_S = 30.0
API_TOKEN_PARAM = "api_token"


async def _log_request(request: httpx.Request) -> None:
    # Never log the token itself
    logger.debug(f"GET {request.url.copy_remove_param(API_TOKEN_PARAM)}")


async def _log_response(response: httpx.Response) -> None:
    request = response.request
    if response.is_error:
        logger.warning(
            f"API error: status={response.status_code} "
            f"url={request.url.copy_remove_param(API_TOKEN_PARAM)}"
        )
    else:
        logger.debug(f"API response: status={response.status_code} path={request.url.path}")


class HttpxTransport(HttpTransport):
    """Async GET transport backed by httpx."""

    def __init__(
        self,
        api_token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_S,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initializes the transport.

        Args:
            api_token: SportMonks API token sent as the ``api_token`` query parameter.
            base_url: API root, e.g. https://api.sportmonks.com/v3.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (e.g. ``httpx.MockTransport`` in tests).
        """
        self.base_url = base_url
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            params={API_TOKEN_PARAM: api_token},
            event_hooks={"request": [_log_request], "response": [_log_response]},
            transport=transport,
        )
        logger.info(f"HttpxTransport initialized: base_url={base_url}, timeout={timeout}s")

    @property
    def client(self) -> httpx.AsyncClient:
        """The underlying httpx client (shared by every resource)."""
        return self._client

    async def get(self, path: str, params: Mapping[str, Union[str, int]]) -> Dict[str, Any]:
        response = await self._client.get(path, params=dict(params))
        response.raise_for_status()
        try:
            return response.json()
        except ValueError as e:
            raise SportMonksError(
                "Invalid JSON response from API",
                status_code=response.status_code,
            ) from e

    def set_api_token(self, api_token: str) -> None:
        self._client.params = self._client.params.set(API_TOKEN_PARAM, api_token)

    def set_timeout(self, timeout: float) -> None:
        self._client.timeout = httpx.Timeout(timeout)

    async def aclose(self) -> None:
        await self._client.aclose()
