"""Encodes QueryOptions into SportMonks query-parameter syntax.

    include  -> lineups;events:player_name,minute;league.country:name
    filters  -> eventTypes:14,15,16;status:FT
    select   -> name,short_code
    sort     -> -starting_at
    page, per_page -> ints, only when explicitly set

Encoding is pure: the same options always produce the same output.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from sportmonks_sdk.domain.models.common import FilterValue, IncludeConfig, QueryParameters
from sportmonks_sdk.domain.models.query import QueryOptions

DEFAULT_INCLUDE_SEPARATOR = ";"
FILTER_SEPARATOR = ";"
VALUE_SEPARATOR = ","


def format_scalar(value: Any) -> str:
    """Stringifies a filter value ('true'/'false' for booleans)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_filter_value(value: FilterValue) -> str:
    if isinstance(value, (list, tuple)):
        return VALUE_SEPARATOR.join(format_scalar(item) for item in value)
    return format_scalar(value)


def render_include(path: str, fields: Sequence[str]) -> str:
    if not fields:
        return path
    return f"{path}:{VALUE_SEPARATOR.join(fields)}"


def flatten_include_config(config: IncludeConfig, prefix: str = "") -> List[Tuple[str, List[str]]]:
    """Flattens a with_includes() mapping into (dotted path, fields) pairs.

    Nested relations produce their own dotted entries after their parent, e.g.
    ``{'league': {'nested': {'country': ['name']}}}`` yields
    ``[('league', []), ('league.country', ['name'])]``.
    """
    entries: List[Tuple[str, List[str]]] = []
    for relation, spec in config.items():
        path = f"{prefix}.{relation}" if prefix else relation
        if spec is False or spec is None:
            continue
        if spec is True:
            entries.append((path, []))
        elif isinstance(spec, Mapping):
            fields = spec.get("fields", True)
            entries.append((path, [] if fields is True or not fields else list(fields)))
            nested = spec.get("nested")
            if nested:
                entries.extend(flatten_include_config(nested, path))
        elif isinstance(spec, str):
            entries.append((path, [spec]))
        else:
            entries.append((path, list(spec)))
    return entries


def build_includes(config: IncludeConfig, separator: str = DEFAULT_INCLUDE_SEPARATOR) -> str:
    """Builds a raw include string from a with_includes()-style mapping."""
    return separator.join(render_include(path, fields) for path, fields in flatten_include_config(config))


def build_filters(filters: Mapping[str, FilterValue]) -> str:
    """Builds a raw filters string: ``key:v1,v2;key2:v``."""
    return FILTER_SEPARATOR.join(f"{key}:{format_filter_value(value)}" for key, value in filters.items())


def _join_includes(includes: Iterable[Tuple[str, Sequence[str]]], separator: str) -> str:
    return separator.join(render_include(path, fields) for path, fields in includes)


def encode_parameters(
    options: QueryOptions,
    include_separator: str = DEFAULT_INCLUDE_SEPARATOR,
) -> QueryParameters:
    """Maps QueryOptions onto a flat parameter dict ready for URL encoding.

    Args:
        options: The accumulated query options.
        include_separator: Separator placed between include entries.

    Returns:
        Dict with only the parameters that were set, in the order
        include, select, filters, sort, page, per_page.
    """
    params: Dict[str, Any] = {}
    if options.includes:
        params["include"] = _join_includes(options.includes.items(), include_separator)
    if options.selected_fields:
        params["select"] = VALUE_SEPARATOR.join(options.selected_fields)
    if options.filters:
        params["filters"] = build_filters(options.filters)
    if options.sort is not None:
        params["sort"] = options.sort.render()
    if options.page is not None:
        params["page"] = int(options.page)
    if options.per_page is not None:
        params["per_page"] = int(options.per_page)
    return params


def parse_include_argument(value: str) -> Tuple[str, Optional[List[str]]]:
    """Splits a 'path:f1,f2' CLI argument into path and field list."""
    path, _, fields = value.partition(":")
    return path.strip(), [f.strip() for f in fields.split(VALUE_SEPARATOR) if f.strip()] or None
