"""Command implementations for the SearchDSL CLI.

Encapsulates what each command does with the configured query definitions,
separated from CLI parameter handling and output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass

from SearchDSL import factory
from SearchDSL.config import AppConfig, QueryDefinition
from SearchDSL.core.query import Query
from SearchDSL.renderers import OutputWriter
from SearchDSL.utils.log import log


def build_definition(definition: QueryDefinition) -> Query:
    """Rebuild the query of one definition, tagging it with the definition name."""
    return factory.from_dict(definition.body, source=definition.name)


@dataclass(slots=True)
class RenderCommand:
    """Build every configured query and hand it to the output writer."""

    config: AppConfig
    output_writer: OutputWriter

    def execute(self) -> int:
        """Render all queries.

        Returns:
            Number of queries written.
        """
        total = len(self.config.queries)
        if not total:
            log.warning("No queries configured")
        for idx, definition in enumerate(self.config.queries, start=1):
            log.debug("Building query %d/%d name=%s", idx, total, definition.name)
            self.output_writer.write_query(definition.name, build_definition(definition))
        return total


@dataclass(slots=True)
class ValidateCommand:
    """Validate every configured query and log the findings."""

    config: AppConfig

    def execute(self) -> list[str]:
        """Validate all queries.

        Returns:
            Names of the invalid queries, in config order.
        """
        invalid: list[str] = []
        for definition in self.config.queries:
            result = factory.validate(build_definition(definition))
            if result.valid:
                log.info("%s: ok", definition.name)
                continue
            invalid.append(definition.name)
            for error in result.errors:
                log.warning("%s: %s", definition.name, error)
        log.info("Validated %d queries, %d invalid", len(self.config.queries), len(invalid))
        return invalid
