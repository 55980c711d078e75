"""Service for executing API calls with automatic retries.

Implements exponential backoff for handling transient errors like
rate limits (429), temporary server issues (5xx) and dropped connections.
Failures that are not retried, and the last failure once the retry budget
is spent, are normalized into a SportMonksError and propagated.
"""

import logging
import asyncio
import time
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Union

import httpx

from sportmonks_sdk.domain.errors import SportMonksError
from sportmonks_sdk.domain.events.api_events import (
    DomainEvent, ApiCallInitiated, ApiCallSucceeded, ApiCallFailed, RetryScheduled
)
from sportmonks_sdk.domain.interfaces.transport import HttpTransport
from sportmonks_sdk.domain.models.policy import RetryPolicy
from sportmonks_sdk.infrastructure.resilience.error_normalizer import (
    normalize_error, rate_limit_reset_hint, response_body
)
from sportmonks_sdk.infrastructure.resilience.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

RETRYABLE_EXCEPTIONS = (httpx.HTTPStatusError, httpx.TransportError)

EventHook = Callable[[DomainEvent], None]
SleepFunc = Callable[[float], Awaitable[None]]


class RetryExecutor:
    """Executes single GET requests with bounded retries and backoff."""

    def __init__(
        self,
        transport: HttpTransport,
        policy: Optional[RetryPolicy] = None,
        rate_limiter: Optional[RateLimiter] = None,
        sleep: SleepFunc = asyncio.sleep,
        on_event: Optional[EventHook] = None,
    ):
        """Initializes the RetryExecutor.

        Args:
            transport: The HTTP transport performing one GET per attempt.
            policy: Retry configuration (defaults to no retries).
            rate_limiter: Optional limiter shared with other executors.
            sleep: Awaitable used for every backoff wait (injectable clock).
            on_event: Optional callback receiving domain events.
        """
        self.transport = transport
        self.policy = policy or RetryPolicy()
        self.rate_limiter = rate_limiter
        self._sleep = sleep
        self._on_event = on_event

        logger.info(
            f"RetryExecutor initialized: max_retries={self.policy.max_retries}, "
            f"base_delay={self.policy.base_delay}s, max_delay={self.policy.max_delay}s, "
            f"retry_statuses={list(self.policy.retry_status_codes)}, "
            f"rate_limiter={'shared' if rate_limiter else 'none'}"
        )

    def _dispatch(self, event: DomainEvent) -> None:
        logger.debug(f"EVENT: {event}")
        if self._on_event:
            self._on_event(event)

    def should_retry(self, error: Exception, attempts_made: int) -> bool:
        """Decides whether a failed attempt may be retried.

        Args:
            error: The exception raised by the transport.
            attempts_made: Number of attempts already performed (1-based).
        """
        if attempts_made > self.policy.max_retries:
            return False
        if isinstance(error, httpx.TransportError):
            # No response at all: always worth another attempt
            return True
        if not isinstance(error, httpx.HTTPStatusError):
            return False
        status = error.response.status_code
        if status == 429:
            return self.policy.retry_on_rate_limit
        return status in self.policy.retry_status_codes

    async def execute(self, path: str, params: Mapping[str, Union[str, int]]) -> Dict[str, Any]:
        """Performs a GET with retries.

        Args:
            path: Full resource path below the base URL.
            params: Encoded query parameters.

        Returns:
            The decoded JSON body of the first successful attempt.

        Raises:
            SportMonksError: For non-retriable failures or once retries are exhausted.
        """
        attempt = 0
        backoff_index = 0

        while True:
            attempt += 1
            if self.rate_limiter is not None:
                await self.rate_limiter.wait_for_permission()

            self._dispatch(ApiCallInitiated(path=path, attempt_number=attempt))
            start_time = time.perf_counter()
            try:
                body = await self.transport.get(path, params)
            except RETRYABLE_EXCEPTIONS as e:
                if not self.should_retry(e, attempt):
                    raise self._fail(e, path, attempt) from e

                status = e.response.status_code if isinstance(e, httpx.HTTPStatusError) else None
                reset_in = rate_limit_reset_hint(response_body(e.response)) if status == 429 else None
                if reset_in is not None:
                    # Honour the server's reset hint; backoff growth is not consumed
                    delay = float(reset_in)
                    reason = "rate_limit"
                else:
                    delay = self.policy.backoff_delay(backoff_index)
                    backoff_index += 1
                    reason = "transport" if status is None else f"status:{status}"

                logger.warning(
                    f"Retryable error calling {path} on attempt {attempt}/{self.policy.max_retries + 1}: "
                    f"{type(e).__name__} ({reason}). Waiting {delay:.2f}s..."
                )
                self._dispatch(RetryScheduled(
                    path=path, attempt_number=attempt, delay_seconds=delay,
                    reason=reason, status_code=status,
                ))
                await self._sleep(delay)
                continue
            except Exception as e:
                logger.error(f"Non-retryable error calling {path} on attempt {attempt}: {e}")
                normalized = self._fail(e, path, attempt)
                if normalized is e:
                    raise
                raise normalized from e

            latency_ms = (time.perf_counter() - start_time) * 1000
            self._dispatch(ApiCallSucceeded(path=path, attempt_number=attempt, latency_ms=latency_ms))
            return body

    def _fail(self, error: Exception, path: str, attempts: int) -> SportMonksError:
        normalized = normalize_error(error, path)
        if attempts > 1:
            logger.error(f"Giving up on {path} after {attempts} attempts. Last error: {normalized.message}")
        self._dispatch(ApiCallFailed(
            path=path, attempts=attempts, error_type=type(error).__name__,
            error_message=normalized.message, status_code=normalized.status_code,
        ))
        return normalized
