"""Retry configuration shared by every request issued through a client."""

from dataclasses import dataclass, field
from typing import Tuple

from .common import DEFAULT_RETRY_STATUS_CODES


@dataclass(frozen=True)
class RetryPolicy:
    """Immutable retry/backoff configuration.

    Attributes:
        max_retries: Retries after the first attempt (total attempts = max_retries + 1).
        base_delay: Delay in seconds before the first computed backoff.
        max_delay: Upper bound in seconds for any computed backoff.
        retry_on_rate_limit: Whether HTTP 429 responses are retried.
        retry_status_codes: Other HTTP statuses considered transient.
    """
    max_retries: int = 0
    base_delay: float = 1.0
    max_delay: float = 30.0
    retry_on_rate_limit: bool = True
    retry_status_codes: Tuple[int, ...] = field(default=DEFAULT_RETRY_STATUS_CODES)

    def __post_init__(self):
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")
        if self.base_delay < 0 or self.max_delay < 0:
            raise ValueError("Retry delays must be non-negative")
        # Accept any iterable of codes but store an immutable tuple
        object.__setattr__(self, "retry_status_codes", tuple(self.retry_status_codes))

    def backoff_delay(self, backoff_index: int) -> float:
        """Computes ``min(base_delay * 2 ** backoff_index, max_delay)``."""
        return min(self.base_delay * (2 ** backoff_index), self.max_delay)
