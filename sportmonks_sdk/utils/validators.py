"""Input validation and date helpers.

All validators raise ``ValidationError`` synchronously, before any request is
attempted, so malformed ids, dates, search terms or paging values never reach
the network.
"""

import re
from datetime import date, datetime, timedelta
from typing import Any, List, Optional, Sequence, Union
from urllib.parse import quote

from sportmonks_sdk.domain.errors import ValidationError

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
DATE_FORMAT = "%Y-%m-%d"
MAX_RANGE_DAYS = 365
MAX_PER_PAGE = 100
MIN_SEARCH_LENGTH = 3

# Accepted textual formats for format_date(), tried in order
_LOOSE_DATE_FORMATS = ("%Y-%m-%d", "%B %d, %Y", "%b %d, %Y", "%d %B %Y", "%Y/%m/%d")


def validate_date_format(value: str) -> str:
    """Checks a YYYY-MM-DD string that names a real calendar date."""
    if not isinstance(value, str) or not DATE_PATTERN.match(value):
        raise ValidationError(f"Invalid date format: {value}. Expected YYYY-MM-DD")
    try:
        datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        raise ValidationError(f"Invalid date: {value}") from None
    return value


def validate_date_range(start: str, end: str) -> None:
    """Checks two YYYY-MM-DD dates are ordered and at most one year apart."""
    validate_date_format(start)
    validate_date_format(end)
    start_date = datetime.strptime(start, DATE_FORMAT).date()
    end_date = datetime.strptime(end, DATE_FORMAT).date()
    if start_date > end_date:
        raise ValidationError(
            f"Invalid date range: start date ({start}) is after end date ({end})"
        )
    if (end_date - start_date).days > MAX_RANGE_DAYS:
        raise ValidationError("Date range cannot exceed 1 year")


def format_date(value: Union[date, datetime, str]) -> str:
    """Formats a date, datetime or parseable date string as YYYY-MM-DD.

    Raises:
        ValidationError: If the value cannot be interpreted as a date.
    """
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        text = value.strip()
        for fmt in _LOOSE_DATE_FORMATS:
            try:
                return datetime.strptime(text, fmt).date().isoformat()
            except ValueError:
                continue
        try:
            return datetime.fromisoformat(text).date().isoformat()
        except ValueError:
            pass
    raise ValidationError("Invalid date provided")


def get_today() -> str:
    return date.today().isoformat()


def get_days_from_now(days: int) -> str:
    return (date.today() + timedelta(days=days)).isoformat()


def get_days_ago(days: int) -> str:
    return (date.today() - timedelta(days=days)).isoformat()


def validate_id(value: Any, name: str = "ID") -> int:
    """Returns the id as a positive int.

    Accepts ints and digit strings; rejects booleans, zero, negatives and
    anything non-numeric.
    """
    parsed: Optional[int] = None
    if isinstance(value, bool):
        parsed = None
    elif isinstance(value, int):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        # isdigit() alone also accepts superscripts and other non-ASCII digits
        if text.isascii() and text.isdigit():
            parsed = int(text)
    if parsed is None or parsed <= 0:
        raise ValidationError(f"Invalid {name}: {value}. Must be a positive number")
    return parsed


def validate_ids(values: Sequence[Any], name: str = "IDs") -> List[int]:
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence) or not values:
        raise ValidationError(f"{name} must be a non-empty list")
    result = []
    for index, value in enumerate(values):
        try:
            result.append(validate_id(value))
        except ValidationError:
            raise ValidationError(f"Invalid {name}[{index}]: {value}") from None
    return result


def validate_search_query(query: Any, min_length: int = MIN_SEARCH_LENGTH) -> str:
    """Returns the trimmed search term, enforcing a minimum length."""
    if not isinstance(query, str):
        raise ValidationError("Search query must be a string")
    trimmed = query.strip()
    if len(trimmed) < min_length:
        raise ValidationError(f"Search query must be at least {min_length} characters long")
    return trimmed


def validate_page(page: Any) -> int:
    if isinstance(page, bool) or not isinstance(page, int) or page < 1:
        raise ValidationError("Page must be a positive integer")
    return page


def validate_per_page(per_page: Any) -> int:
    if isinstance(per_page, bool) or not isinstance(per_page, int) or not 1 <= per_page <= MAX_PER_PAGE:
        raise ValidationError(f"Per page must be an integer between 1 and {MAX_PER_PAGE}")
    return per_page


def validate_pagination(page: Optional[int] = None, per_page: Optional[int] = None) -> None:
    if page is not None:
        validate_page(page)
    if per_page is not None:
        validate_per_page(per_page)


def sanitize_url_param(value: str) -> str:
    """Trims and percent-encodes a value for use as a path segment."""
    # RFC 2396 unreserved marks stay literal
    return quote(value.strip(), safe="!~*'()")
