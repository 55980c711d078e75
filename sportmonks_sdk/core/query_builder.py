"""Fluent query builder shared by every resource.

Example:
    teams = await (
        client.teams.by_season(19735)
        .include(["country", "venue"])
        .include_fields("players", ["name", "jersey_number"])
        .filter("eventTypes", [14, 15])
        .order_by("name")
        .per_page(50)
        .get_all()
    )

A builder owns its QueryOptions and is meant for one logical request chain.
Do not await the same builder from several tasks at once.
"""

import logging
from typing import TYPE_CHECKING, Any, List, Mapping, Sequence, Union

from sportmonks_sdk.core.parameter_encoder import encode_parameters, flatten_include_config
from sportmonks_sdk.domain.models.common import FilterValue, IncludeConfig, QueryParameters
from sportmonks_sdk.domain.models.query import QueryOptions, SortSpec
from sportmonks_sdk.domain.models.response import PaginatedResponse, ResponseEnvelope, decode_envelope
from sportmonks_sdk.domain.errors import ValidationError
from sportmonks_sdk.utils.validators import validate_page, validate_per_page

if TYPE_CHECKING:
    from sportmonks_sdk.core.endpoint import Endpoint

logger = logging.getLogger(__name__)

SORT_DIRECTIONS = ("asc", "desc")


class QueryBuilder:
    """Accumulates query options across chained calls and executes them."""

    def __init__(self, endpoint: "Endpoint", suffix: str = ""):
        self.endpoint = endpoint
        self.suffix = suffix
        self._options = QueryOptions()

    @property
    def options(self) -> QueryOptions:
        return self._options

    @property
    def path(self) -> str:
        return self.endpoint.url_for(self.suffix)

    # --- Includes ---

    def include(self, relations: Union[str, Sequence[str]]) -> "QueryBuilder":
        """Adds relationship includes.

        Args:
            relations: A list of relation paths, or a single string which is
                kept verbatim (so raw ``lineups:player_name;events:minute``
                syntax is passed through untouched).
        """
        if isinstance(relations, str):
            self._options.add_include(relations)
        else:
            for relation in relations:
                self._options.add_include(relation)
        return self

    def include_fields(self, relation: str, fields: Sequence[str]) -> "QueryBuilder":
        """Adds a field-scoped include, rendered as ``relation:f1,f2``."""
        self._options.add_include(relation, list(fields))
        return self

    def with_includes(self, config: IncludeConfig) -> "QueryBuilder":
        """Adds several includes at once.

        Each value is ``True`` (plain include), a list of fields, or a dict with
        ``fields`` (list or True) and ``nested`` (same shape, rendered as dotted
        paths). ``False`` entries are skipped.
        """
        for path, fields in flatten_include_config(config):
            self._options.add_include(path, fields)
        return self

    # --- Field selection ---

    def select(self, fields: Union[str, Sequence[str]]) -> "QueryBuilder":
        if isinstance(fields, str):
            fields = [fields]
        for name in fields:
            self._options.add_selected_field(name)
        return self

    # --- Filters ---

    def filter(self, key: str, value: FilterValue) -> "QueryBuilder":
        """Sets one filter; a later call with the same key replaces the value."""
        if isinstance(value, (list, tuple)):
            value = tuple(value)
        self._options.set_filter(key, value)
        return self

    def filters(self, mapping: Mapping[str, FilterValue]) -> "QueryBuilder":
        for key, value in mapping.items():
            self.filter(key, value)
        return self

    # --- Sorting & pagination ---

    def order_by(self, field: str, direction: str = "asc") -> "QueryBuilder":
        direction = direction.lower()
        if direction not in SORT_DIRECTIONS:
            raise ValidationError(f"Invalid sort direction: {direction}. Expected 'asc' or 'desc'")
        self._options.sort = SortSpec(field=field, direction=direction)
        return self

    def page(self, page: int) -> "QueryBuilder":
        self._options.page = validate_page(page)
        return self

    def per_page(self, per_page: int) -> "QueryBuilder":
        self._options.per_page = validate_per_page(per_page)
        return self

    def limit(self, count: int) -> "QueryBuilder":
        """Alias of per_page(); the API has no separate limit parameter."""
        return self.per_page(count)

    # --- Execution ---

    def build_params(self) -> QueryParameters:
        return encode_parameters(self._options, self.endpoint.include_separator)

    async def get(self) -> ResponseEnvelope:
        """Executes the query and decodes the envelope.

        Raises:
            SportMonksError: Whatever the executor raises; nothing is recovered here.
        """
        params = self.build_params()
        body = await self.endpoint.request(self.suffix, params)
        return decode_envelope(body)

    async def get_all(self) -> List[Any]:
        """Fetches every page, starting at the current page (default 1).

        Stops when ``has_more`` is false, a page is empty, or the response is
        not paginated. The first failure propagates immediately.
        """
        items: List[Any] = []
        page = self._options.page or 1
        while True:
            self._options.page = page
            response = await self.get()
            if not isinstance(response, PaginatedResponse):
                data = response.data
                if isinstance(data, list):
                    items.extend(data)
                elif data is not None:
                    items.append(data)
                break
            if not response.data:
                break
            items.extend(response.data)
            if not response.has_more:
                break
            page += 1
        logger.debug(f"get_all collected {len(items)} items from {self.path} over {page} page(s)")
        return items

    def __repr__(self) -> str:
        return f"QueryBuilder(path={self.path!r}, params={self.build_params()!r})"
