"""Async Python client for the SportMonks Football API v3."""

from sportmonks_sdk.core.client import ClientOptions, SportMonksClient
from sportmonks_sdk.core.query_builder import QueryBuilder
from sportmonks_sdk.domain.errors import ErrorKind, SportMonksError, ValidationError
from sportmonks_sdk.domain.models.policy import RetryPolicy
from sportmonks_sdk.domain.models.response import (
    PaginatedResponse, PaginationInfo, RateLimitInfo, SingleResponse
)
from sportmonks_sdk.infrastructure.resilience.rate_limiter import RateLimiter
from sportmonks_sdk.utils.polling import Poller, create_livescores_poller, create_transfers_poller
from sportmonks_sdk.utils.validators import (
    format_date,
    get_days_ago,
    get_days_from_now,
    get_today,
    validate_ids,
    validate_pagination,
)

__version__ = "1.0.0"

__all__ = [
    "ClientOptions",
    "ErrorKind",
    "PaginatedResponse",
    "PaginationInfo",
    "Poller",
    "QueryBuilder",
    "RateLimitInfo",
    "RateLimiter",
    "RetryPolicy",
    "SingleResponse",
    "SportMonksClient",
    "SportMonksError",
    "ValidationError",
    "create_livescores_poller",
    "create_transfers_poller",
    "format_date",
    "get_days_ago",
    "get_days_from_now",
    "get_today",
    "validate_ids",
    "validate_pagination",
]
