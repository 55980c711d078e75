"""Response envelope models.

Every SportMonks response wraps the entity data together with optional
pagination, rate-limit, subscription and timezone metadata. The envelope is
decoded into one of two explicit shapes, chosen by the presence of the
``pagination`` key:

    SingleResponse     -> {"data": {...}} or an unpaginated {"data": [...]}
    PaginatedResponse  -> {"data": [...], "pagination": {...}}
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from sportmonks_sdk.domain.errors import SportMonksError


@dataclass(frozen=True)
class PaginationInfo:
    """Pagination block of a collection response."""
    count: int = 0
    per_page: int = 0
    current_page: int = 1
    next_page: Optional[str] = None
    has_more: bool = False

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "PaginationInfo":
        return cls(
            count=int(raw.get("count") or 0),
            per_page=int(raw.get("per_page") or 0),
            current_page=int(raw.get("current_page") or 1),
            next_page=raw.get("next_page"),
            has_more=bool(raw.get("has_more", False)),
        )


@dataclass(frozen=True)
class RateLimitInfo:
    """Rate-limit block reported by the API in the response body."""
    remaining: Optional[int] = None
    resets_in_seconds: Optional[int] = None
    requested_entity: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "RateLimitInfo":
        return cls(
            remaining=raw.get("remaining"),
            resets_in_seconds=raw.get("resets_in_seconds"),
            requested_entity=raw.get("requested_entity"),
        )


@dataclass(frozen=True)
class SingleResponse:
    """Envelope for a single entity (or an unpaginated payload)."""
    data: Any
    rate_limit: Optional[RateLimitInfo] = None
    subscription: Optional[Any] = None
    timezone: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def is_paginated(self) -> bool:
        return False


@dataclass(frozen=True)
class PaginatedResponse:
    """Envelope for a page of a collection."""
    data: List[Any]
    pagination: PaginationInfo
    rate_limit: Optional[RateLimitInfo] = None
    subscription: Optional[Any] = None
    timezone: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def is_paginated(self) -> bool:
        return True

    @property
    def has_more(self) -> bool:
        return self.pagination.has_more


ResponseEnvelope = Union[SingleResponse, PaginatedResponse]


def decode_envelope(body: Mapping[str, Any]) -> ResponseEnvelope:
    """Decodes a JSON body into a SingleResponse or PaginatedResponse.

    Args:
        body: The parsed JSON object returned by the API.

    Returns:
        PaginatedResponse when a ``pagination`` block is present, otherwise
        SingleResponse.

    Raises:
        SportMonksError: If the body is not a JSON object.
    """
    if not isinstance(body, Mapping):
        raise SportMonksError(f"Unexpected response body: expected a JSON object, got {type(body).__name__}")

    rate_limit_raw = body.get("rate_limit")
    rate_limit = RateLimitInfo.from_dict(rate_limit_raw) if isinstance(rate_limit_raw, Mapping) else None
    common = dict(
        rate_limit=rate_limit,
        subscription=body.get("subscription"),
        timezone=body.get("timezone"),
        raw=dict(body),
    )

    pagination_raw = body.get("pagination")
    if isinstance(pagination_raw, Mapping):
        data = body.get("data") or []
        if not isinstance(data, list):
            data = [data]
        return PaginatedResponse(data=data, pagination=PaginationInfo.from_dict(pagination_raw), **common)

    return SingleResponse(data=body.get("data"), **common)
