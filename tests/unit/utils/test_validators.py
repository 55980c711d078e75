from datetime import date, datetime

import pytest

from sportmonks_sdk.domain.errors import ErrorKind, ValidationError
from sportmonks_sdk.utils.validators import (
    format_date,
    get_days_ago,
    get_days_from_now,
    get_today,
    sanitize_url_param,
    validate_date_format,
    validate_date_range,
    validate_id,
    validate_ids,
    validate_pagination,
    validate_search_query,
)


def test_valid_date_passes_through():
    assert validate_date_format("2024-02-29") == "2024-02-29"


@pytest.mark.parametrize("value, message", [
    ("2024-2-1", "Invalid date format"),
    ("01/02/2024", "Invalid date format"),
    ("2023-02-29", "Invalid date: 2023-02-29"),
    ("2024-13-01", "Invalid date: 2024-13-01"),
])
def test_invalid_dates(value, message):
    with pytest.raises(ValidationError, match=message):
        validate_date_format(value)


def test_date_range_rules():
    validate_date_range("2024-01-01", "2024-12-31")
    with pytest.raises(ValidationError, match="is after end date"):
        validate_date_range("2024-05-02", "2024-05-01")
    with pytest.raises(ValidationError, match="cannot exceed 1 year"):
        validate_date_range("2024-01-01", "2025-01-02")


@pytest.mark.parametrize("value, expected", [
    (date(2024, 3, 1), "2024-03-01"),
    (datetime(2024, 3, 1, 18, 30), "2024-03-01"),
    ("March 1, 2024", "2024-03-01"),
    ("2024/03/01", "2024-03-01"),
    ("2024-03-01T18:30:00", "2024-03-01"),
])
def test_format_date(value, expected):
    assert format_date(value) == expected


def test_format_date_rejects_garbage():
    with pytest.raises(ValidationError, match="Invalid date provided"):
        format_date("not a date")


def test_relative_dates_are_iso_strings():
    assert get_days_ago(1) < get_today() < get_days_from_now(1)


@pytest.mark.parametrize("value, expected", [(1, 1), ("42", 42), (" 7 ", 7)])
def test_validate_id_accepts_positive_numbers(value, expected):
    assert validate_id(value) == expected


@pytest.mark.parametrize("value", [0, -1, "abc", "1.5", "\u00b2", "\u0663", True, None])
def test_validate_id_rejects(value):
    with pytest.raises(ValidationError, match="Must be a positive number") as exc_info:
        validate_id(value, "Team ID")
    assert exc_info.value.kind is ErrorKind.VALIDATION
    assert isinstance(exc_info.value, ValueError)


def test_validate_ids():
    assert validate_ids([1, "2"]) == [1, 2]
    with pytest.raises(ValidationError, match="must be a non-empty list"):
        validate_ids([])
    with pytest.raises(ValidationError, match=r"Invalid IDs\[1\]"):
        validate_ids([1, 0])


def test_search_query_is_trimmed():
    assert validate_search_query("  Arsenal  ") == "Arsenal"
    with pytest.raises(ValidationError, match="at least 3 characters"):
        validate_search_query(" ab ")
    with pytest.raises(ValidationError, match="must be a string"):
        validate_search_query(123)


def test_validate_pagination():
    validate_pagination(1, 100)
    with pytest.raises(ValidationError, match="Page must be a positive integer"):
        validate_pagination(page=0)
    with pytest.raises(ValidationError, match="between 1 and 100"):
        validate_pagination(per_page=150)


def test_sanitize_url_param():
    assert sanitize_url_param(" São Paulo/FC ") == "S%C3%A3o%20Paulo%2FFC"
    assert sanitize_url_param("it's (ok)!") == "it's%20(ok)!"


def test_helpers_are_exported_from_package():
    import sportmonks_sdk

    assert sportmonks_sdk.get_today is get_today
    assert sportmonks_sdk.validate_ids is validate_ids
    assert sportmonks_sdk.validate_pagination is validate_pagination
