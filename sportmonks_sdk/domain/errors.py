"""Error taxonomy for the SportMonks client.

Every failure at the HTTP boundary surfaces as a single ``SportMonksError``
whose ``kind`` is set where the failure is normalized, or else derived from
the HTTP status code. Input problems detected before a request is attempted
raise ``ValidationError``.
"""

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Classification of a SportMonksError."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    RATE_LIMITED = "rate_limited"
    TRANSIENT_SERVER = "transient_server"
    TRANSPORT = "transport"
    UNCLASSIFIED = "unclassified"

    @classmethod
    def from_status(cls, status_code: Optional[int]) -> "ErrorKind":
        """Maps an HTTP status onto a kind. A missing status is unclassified."""
        if status_code is None:
            return cls.UNCLASSIFIED
        if status_code == 404:
            return cls.NOT_FOUND
        if status_code == 403:
            return cls.FORBIDDEN
        if status_code == 429:
            return cls.RATE_LIMITED
        if 500 <= status_code < 600:
            return cls.TRANSIENT_SERVER
        return cls.UNCLASSIFIED


class SportMonksError(Exception):
    """Normalized error raised for any failed API call.

    Attributes:
        message: Human readable message.
        status_code: HTTP status code, None when no response was received.
        api_message: The ``message`` field of the upstream error body, if any.
        errors: Field-level error map from the upstream body, kept verbatim.
        kind: Explicit classification; falls back to the status code when omitted.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        api_message: Optional[str] = None,
        errors: Optional[Any] = None,
        kind: Optional[ErrorKind] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.api_message = api_message
        self.errors = errors
        self._kind = kind
        super().__init__(message)

    @property
    def kind(self) -> ErrorKind:
        if self._kind is not None:
            return self._kind
        return ErrorKind.from_status(self.status_code)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, status_code={self.status_code!r})"


class ValidationError(SportMonksError, ValueError):
    """Raised synchronously for malformed input (ids, dates, search terms, paging)."""

    def __init__(self, message: str):
        super().__init__(message, kind=ErrorKind.VALIDATION)
