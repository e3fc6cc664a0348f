"""Query definitions: named wire bodies rebuilt by the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from SearchDSL.config.common import expect_list, expect_mapping, expect_str, get_required_value
from SearchDSL.core.freeze import deep_freeze
from SearchDSL.queries.registry import supported_query_kinds


@dataclass(frozen=True, slots=True)
class QueryDefinition:
    """One ``queries`` entry.

    Attributes:
        name: Unique entry name, stored as the provenance of the built query.
        body: Frozen query body.
    """

    name: str
    body: Mapping[str, Any]


def load_queries(raw: Mapping[str, Any]) -> tuple[QueryDefinition, ...]:
    """Load query definitions from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Definitions in config order; empty when ``queries`` is absent.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If an entry misses ``name`` or ``query``.
    """
    entries = raw.get("queries")
    if entries is None:
        return ()
    definitions: list[QueryDefinition] = []
    for idx, entry in enumerate(expect_list(entries, "queries")):
        key = f"queries[{idx}]"
        item = expect_mapping(entry, key)
        name = expect_str(get_required_value(item, "name", f"{key}.name"), f"{key}.name")
        body = expect_mapping(get_required_value(item, "query", f"{key}.query"), f"{key}.query")
        definitions.append(QueryDefinition(name=name, body=deep_freeze(body)))
    return tuple(definitions)


def check_queries(definitions: tuple[QueryDefinition, ...]) -> None:
    """Validate query definition constraints.

    Raises:
        ValueError: If names are empty or repeated, or a body kind is unknown.
    """
    seen: set[str] = set()
    kinds = set(supported_query_kinds())
    for definition in definitions:
        name = definition.name.strip()
        if not name:
            raise ValueError("queries[].name must not be empty")
        if name in seen:
            raise ValueError(f"Duplicate query name: {name}")
        seen.add(name)
        if len(definition.body) != 1:
            raise ValueError(f"queries.{name}.query must have exactly one top-level key")
        kind = next(iter(definition.body))
        if kind not in kinds:
            raise ValueError(f"queries.{name}.query has unsupported kind: {kind}")
