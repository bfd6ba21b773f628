"""Interface for interacting with the user (output only).

Defines the contract for displaying information, errors, warnings and
route listings, allowing different UI implementations (e.g., console,
JSON output).
"""

import abc
from typing import Any, Iterable, List

from routectl.domain.models.resources import Route


class UserInterface(abc.ABC):
    """Abstract Base Class for user interaction."""

    @abc.abstractmethod
    def display_error(self, error_message: str, **kwargs: Any) -> None:
        """Displays an error message to the user."""
        pass

    @abc.abstractmethod
    def display_warning(self, warning_message: str, **kwargs: Any) -> None:
        """Displays a warning message to the user."""
        pass

    @abc.abstractmethod
    def display_info(self, info_message: str, **kwargs: Any) -> None:
        """Displays an informational message to the user."""
        pass

    @abc.abstractmethod
    def display_routes(self, routes: List[Route], **kwargs: Any) -> None:
        """Displays a list of routes, e.g. as a table.

        Args:
            routes: The enriched routes to display.
            **kwargs: Additional arguments (e.g., title).
        """
        pass

    def display_warnings(self, warnings: Iterable[str]) -> None:
        """Displays every warning in order."""
        for warning in warnings:
            self.display_warning(warning)
