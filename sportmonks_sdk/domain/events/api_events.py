"""Domain Events related to API calls and resilience.

Emitted by the retry executor when a call starts, succeeds, is retried or
fails definitively.
"""

from dataclasses import dataclass, field
import time
from typing import Optional


@dataclass
class DomainEvent:
    """Base class for domain events."""
    pass


@dataclass
class ApiCallInitiated(DomainEvent):
    """Event triggered when an HTTP attempt is about to be made."""
    path: str
    attempt_number: int
    timestamp: float = field(default_factory=time.time)


@dataclass
class ApiCallSucceeded(DomainEvent):
    """Event triggered when an API call succeeds."""
    path: str
    attempt_number: int
    latency_ms: float
    timestamp: float = field(default_factory=time.time)


@dataclass
class RetryScheduled(DomainEvent):
    """Event triggered when a retry is scheduled for a failed API call."""
    path: str
    attempt_number: int
    delay_seconds: float
    reason: str  # 'transport', 'rate_limit' or 'status:<code>'
    status_code: Optional[int] = None
    timestamp: float = field(default_factory=time.time)


@dataclass
class ApiCallFailed(DomainEvent):
    """Event triggered when an API call fails definitively (after retries)."""
    path: str
    attempts: int
    error_type: str
    error_message: str
    status_code: Optional[int] = None
    timestamp: float = field(default_factory=time.time)
