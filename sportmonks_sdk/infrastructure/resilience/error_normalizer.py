"""Converts failures raised by the transport into SportMonksError.

The upstream error body looks like::

    {"message": "...", "errors": {...}, "rate_limit": {"resets_in_seconds": 42, ...}}

Every field is optional; non-JSON bodies are treated as empty.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from sportmonks_sdk.domain.errors import ErrorKind, SportMonksError

logger = logging.getLogger(__name__)

FORBIDDEN_MESSAGE = "Access forbidden. Check your API key and subscription level."
RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please wait before making more requests."


def response_body(response: Optional[httpx.Response]) -> Dict[str, Any]:
    """Returns the JSON object of an error response, or {} if there is none."""
    if response is None:
        return {}
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def rate_limit_reset_hint(body: Dict[str, Any]) -> Optional[float]:
    """Extracts ``rate_limit.resets_in_seconds`` from an error body."""
    rate_limit = body.get("rate_limit")
    if not isinstance(rate_limit, dict):
        return None
    reset_in = rate_limit.get("resets_in_seconds")
    if isinstance(reset_in, bool) or not isinstance(reset_in, (int, float)) or reset_in <= 0:
        return None
    return reset_in


def format_seconds(seconds: float) -> str:
    """Renders 42.0 as "42" and 1.5 as "1.5", never in exponent notation."""
    if float(seconds).is_integer():
        return str(int(seconds))
    return str(seconds)


def normalize_error(error: BaseException, path: str) -> SportMonksError:
    """Maps any failure from a request onto one SportMonksError.

    Args:
        error: The exception raised by the transport or executor.
        path: The request path, used in the default 404 message.

    Returns:
        A SportMonksError carrying status code, upstream message and field errors.
    """
    if isinstance(error, SportMonksError):
        return error

    if isinstance(error, httpx.HTTPStatusError):
        status = error.response.status_code
        body = response_body(error.response)
        api_message = body.get("message") if isinstance(body.get("message"), str) else None

        if status == 404:
            message = api_message or f"Resource not found: {path}"
        elif status == 403:
            message = api_message or FORBIDDEN_MESSAGE
        elif status == 429:
            reset_in = rate_limit_reset_hint(body)
            message = (
                f"Rate limit exceeded. Resets in {format_seconds(reset_in)} seconds."
                if reset_in is not None
                else RATE_LIMIT_MESSAGE
            )
        else:
            # str(error) carries the request URL, which includes the api_token
            message = api_message or f"Request failed with status code {status}"

        return SportMonksError(message, status_code=status, api_message=api_message, errors=body.get("errors"))

    if isinstance(error, httpx.HTTPError):
        # No HTTP response at all (connect error, timeout, reset ...)
        message = str(error) or type(error).__name__
        return SportMonksError(message, kind=ErrorKind.TRANSPORT)

    logger.debug(f"Normalizing unexpected {type(error).__name__} for {path}")
    return SportMonksError(str(error) or "Unknown error occurred", kind=ErrorKind.UNCLASSIFIED)
