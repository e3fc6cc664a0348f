"""Base classes for output writers.

Writers receive each built query from the CLI and decide how and when to
emit it. Separates control flow from output logic for better testability.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from SearchDSL.core.query import Query


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_query(self, name: str, query: Query) -> None:
        """Write one built query.

        Args:
            name: Definition name from the config.
            query: Query rebuilt from the definition.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., flush accumulated results).

        Args:
            action: The CLI command name (e.g., 'render').
        """

