"""Defines common Value Objects used across the client.

These objects represent simple values like relationship paths, filter keys
and encoded query parameters, ensuring consistency and type safety.
"""

from typing import NewType, Dict, Mapping, Sequence, Union

# === Core Value Objects ===

# Using NewType for semantic clarity, although they are plain values at runtime.
IncludePath = NewType("IncludePath", str)        # e.g. 'league' or 'league.country'
FieldName = NewType("FieldName", str)            # Entity field, e.g. 'name'
FilterKey = NewType("FilterKey", str)            # e.g. 'eventTypes'

# === Query Context ===

FilterScalar = Union[str, int, float, bool]
FilterValue = Union[FilterScalar, Sequence[FilterScalar]]

# Encoded, URL-ready parameters (strings except page/per_page)
QueryParameters = Dict[str, Union[str, int]]

# with_includes() configuration. A value is either
#   True                          -> plain include
#   ['name', 'iso2']              -> field-scoped include
#   {'fields': [...] | True, 'nested': {...}}
IncludeConfig = Mapping[str, Union[bool, Sequence[str], Mapping[str, object]]]

# Default status codes considered transient by the executor
DEFAULT_RETRY_STATUS_CODES = (502, 503, 504)
