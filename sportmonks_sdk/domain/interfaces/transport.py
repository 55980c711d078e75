"""Interface for the HTTP transport used by the retry executor.

Implementations perform exactly one GET per call. Failures are reported with
the transport library's exceptions; the resilience layer decides whether to
retry and how to normalize them.
"""

import abc
from typing import Any, Dict, Mapping, Union


class HttpTransport(abc.ABC):
    """Abstract Base Class for a single-shot asynchronous GET."""

    @abc.abstractmethod
    async def get(self, path: str, params: Mapping[str, Union[str, int]]) -> Dict[str, Any]:
        """Performs one GET request and returns the decoded JSON body.

        Args:
            path: Path relative to the configured base URL.
            params: Encoded query parameters (the API token is added by the transport).

        Returns:
            The decoded JSON object.

        Raises:
            httpx.HTTPStatusError: For non-2xx responses.
            httpx.TransportError: When no response was received.
        """
        pass

    @abc.abstractmethod
    def set_api_token(self, api_token: str) -> None:
        """Replaces the token attached to every request."""
        pass

    @abc.abstractmethod
    def set_timeout(self, timeout: float) -> None:
        """Replaces the request timeout in seconds."""
        pass

    @abc.abstractmethod
    async def aclose(self) -> None:
        """Releases the underlying connection pool."""
        pass
