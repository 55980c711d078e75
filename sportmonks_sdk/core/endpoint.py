"""An Endpoint binds one resource base path to a shared executor.

Resources hold an Endpoint (composition) and use ``query()`` to hand out
QueryBuilders for their paths.
"""

import logging
from typing import Any, Dict, Mapping, Union

from sportmonks_sdk.core.parameter_encoder import DEFAULT_INCLUDE_SEPARATOR
from sportmonks_sdk.core.query_builder import QueryBuilder
from sportmonks_sdk.infrastructure.resilience.api_retry import RetryExecutor

logger = logging.getLogger(__name__)


class Endpoint:
    """Base path + include separator + the executor that performs requests."""

    def __init__(
        self,
        executor: RetryExecutor,
        base_path: str,
        include_separator: str = DEFAULT_INCLUDE_SEPARATOR,
    ):
        self.executor = executor
        self.base_path = base_path
        self.include_separator = include_separator

    def url_for(self, suffix: str = "") -> str:
        return f"{self.base_path}{suffix}"

    async def request(self, suffix: str, params: Mapping[str, Union[str, int]]) -> Dict[str, Any]:
        """Delegates one GET for ``base_path + suffix`` to the executor."""
        return await self.executor.execute(self.url_for(suffix), params)

    def query(self, suffix: str = "") -> QueryBuilder:
        """Creates a fresh, single-use QueryBuilder for ``base_path + suffix``."""
        return QueryBuilder(self, suffix)

    def __repr__(self) -> str:
        return f"Endpoint(base_path={self.base_path!r}, include_separator={self.include_separator!r})"
