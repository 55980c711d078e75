"""Interface for presenting API results to the user.

Defines the contract for displaying responses, errors and informational
messages, allowing different UI implementations (e.g., console, tests).
"""

import abc
from typing import Any, List, Optional

from sportmonks_sdk.domain.models.response import ResponseEnvelope


class UserInterface(abc.ABC):
    """Abstract Base Class for user-facing output."""

    @abc.abstractmethod
    def display_response(self, response: ResponseEnvelope, as_json: bool = False, **kwargs: Any) -> None:
        """Displays one decoded response envelope.

        Args:
            response: The SingleResponse or PaginatedResponse to render.
            as_json: Render the raw JSON body instead of a table.
            **kwargs: Additional arguments for formatting (e.g., title).
        """
        pass

    @abc.abstractmethod
    def display_items(self, items: List[Any], as_json: bool = False, title: Optional[str] = None) -> None:
        """Displays a list of entities collected across pages."""
        pass

    @abc.abstractmethod
    def display_error(self, error_message: str, **kwargs: Any) -> None:
        pass

    @abc.abstractmethod
    def display_info(self, info_message: str, **kwargs: Any) -> None:
        pass
