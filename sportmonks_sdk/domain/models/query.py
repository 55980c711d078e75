"""Query state accumulated by a QueryBuilder.

``QueryOptions`` is owned by exactly one builder per request chain and is
never shared between tasks.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .common import FilterValue, IncludePath, FieldName, FilterKey


@dataclass(frozen=True)
class SortSpec:
    """Sort field plus direction ('asc' or 'desc')."""
    field: str
    direction: str = "asc"

    def render(self) -> str:
        # A leading '-' is the API convention for descending order
        if self.direction == "desc" and not self.field.startswith("-"):
            return f"-{self.field}"
        return self.field


@dataclass
class QueryOptions:
    """Mutable accumulator of include/select/filter/sort/pagination options.

    Include paths and selected fields keep first-insertion order and are
    deduplicated on insert. Dicts preserve insertion order, so ``includes``
    maps each path to its (ordered, deduplicated) field subset.
    """
    includes: Dict[IncludePath, List[FieldName]] = field(default_factory=dict)
    selected_fields: List[FieldName] = field(default_factory=list)
    filters: Dict[FilterKey, FilterValue] = field(default_factory=dict)
    sort: Optional[SortSpec] = None
    page: Optional[int] = None
    per_page: Optional[int] = None

    def add_include(self, path: str, fields: Optional[List[str]] = None) -> None:
        """Adds an include path, merging new field names into an existing entry."""
        entry = self.includes.setdefault(IncludePath(path), [])
        for name in fields or []:
            if name not in entry:
                entry.append(FieldName(name))

    def add_selected_field(self, name: str) -> None:
        if name not in self.selected_fields:
            self.selected_fields.append(FieldName(name))

    def set_filter(self, key: str, value: FilterValue) -> None:
        # Last write wins for a key
        self.filters[FilterKey(key)] = value
