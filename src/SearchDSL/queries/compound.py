"""Compound queries that wrap other queries.

Sub-queries are embedded by value: the section stores ``sub.to_dict()``
taken at call time, never the sub-query instance. Later changes to anything
derived from the sub-query cannot reach an already-built compound.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from SearchDSL.core.freeze import thaw
from SearchDSL.core.query import Query, snapshot
from SearchDSL.core.types import record_operation
from SearchDSL.errors import RangeValidationError

_CLAUSE_KEYS = ("must", "should", "filter", "must_not")


def check_ratio(value: float, label: str) -> float:
    """Validate a ratio in ``[0, 1]``.

    Args:
        value: Ratio to check.
        label: Parameter name used in the error message.

    Returns:
        The unchanged value.

    Raises:
        RangeValidationError: If value is outside ``[0, 1]``.
    """
    if not 0 <= value <= 1:
        raise RangeValidationError(f"{label} must be between 0 and 1, got {value}")
    return value


def _clause_list(value: Any) -> list[Any]:
    """Return a clause slot as a list; a single clause object counts as one."""
    if value is None:
        return []
    if isinstance(value, Mapping):
        return [value]
    return list(value)


def _flatten(queries: Iterable[Query | Sequence[Query]]) -> tuple[Query, ...]:
    """Accept ``q1, q2`` as well as ``[q1, q2]`` (one level deep)."""
    flat: list[Query] = []
    for item in queries:
        if isinstance(item, Query):
            flat.append(item)
        else:
            flat.extend(item)
    return tuple(flat)


class BoolQuery(Query):
    """Boolean combination of clauses.

    Each clause slot (``must``, ``should``, ``filter``, ``must_not``) is a list
    that only grows; adding clauses appends snapshots of the given queries.
    """

    kind = "bool"
    factory_name = "bool_"
    code_methods = frozenset({"must", "should", "filter", "must_not", "minimum_should_match", "boost"})

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__({self.kind: {}}, origin=record_operation(self.factory_name, ()))

    def _add_clauses(self, key: str, queries: tuple[Query | Sequence[Query], ...]) -> BoolQuery:
        flat = _flatten(queries)
        section = self._section()
        section[key] = _clause_list(section.get(key)) + [snapshot(query) for query in flat]
        return self._derive(key, flat, section)

    def must(self, *queries: Query | Sequence[Query]) -> BoolQuery:
        return self._add_clauses("must", queries)

    def should(self, *queries: Query | Sequence[Query]) -> BoolQuery:
        return self._add_clauses("should", queries)

    def filter(self, *queries: Query | Sequence[Query]) -> BoolQuery:  # noqa: A003 - wire name
        return self._add_clauses("filter", queries)

    def must_not(self, *queries: Query | Sequence[Query]) -> BoolQuery:
        return self._add_clauses("must_not", queries)

    def minimum_should_match(self, value: int | str) -> BoolQuery:
        return self._set("minimum_should_match", value)

    def boost(self, value: float) -> BoolQuery:
        return self._set("boost", value)

    def get_clauses(self, key: str) -> list[dict[str, Any]]:
        """Return plain copies of the clause bodies in one slot."""
        section = self._body.get(self.kind) or {}
        return [_plain(clause) for clause in _clause_list(section.get(key))]

    def get_clause_counts(self) -> dict[str, int]:
        """Return the number of clauses per slot (``must_not`` keyed as ``must_not``)."""
        section = self._section()
        return {key: len(_clause_list(section.get(key))) for key in _CLAUSE_KEYS}

    def is_empty(self) -> bool:
        """Return True when no slot holds a clause."""
        return not any(self.get_clause_counts().values())

    def get_boost(self) -> float | None:
        return self._section().get("boost")


class BoostingQuery(Query):
    """Demote documents matching ``negative`` among those matching ``positive``."""

    kind = "boosting"
    factory_name = "boosting"
    code_methods = frozenset({"positive", "negative", "negative_boost"})

    __slots__ = ()

    def __init__(self, positive: Query, negative: Query, negative_boost: float = 0.2) -> None:
        check_ratio(negative_boost, "negative_boost")
        super().__init__(
            {
                self.kind: {
                    "positive": snapshot(positive),
                    "negative": snapshot(negative),
                    "negative_boost": negative_boost,
                }
            },
            origin=record_operation(self.factory_name, (positive, negative, negative_boost)),
        )

    def positive(self, query: Query) -> BoostingQuery:
        section = self._section()
        section["positive"] = snapshot(query)
        return self._derive("positive", (query,), section)

    def negative(self, query: Query) -> BoostingQuery:
        section = self._section()
        section["negative"] = snapshot(query)
        return self._derive("negative", (query,), section)

    def negative_boost(self, value: float) -> BoostingQuery:
        check_ratio(value, "negative_boost")
        return self._set("negative_boost", value)

    def get_positive(self) -> dict[str, Any] | None:
        return _plain(self._section().get("positive"))

    def get_negative(self) -> dict[str, Any] | None:
        return _plain(self._section().get("negative"))

    def get_negative_boost(self) -> float:
        return self._section().get("negative_boost")


class ConstantScoreQuery(Query):
    """Wrap a filter and give every match the same score.

    A boost of ``1.0`` is the engine default and is left out of the body.
    """

    kind = "constant_score"
    factory_name = "constant_score"
    code_methods = frozenset({"filter", "boost"})

    __slots__ = ()

    def __init__(self, filter: Query, boost: float = 1.0) -> None:  # noqa: A002
        section: dict[str, Any] = {"filter": snapshot(filter)}
        if boost != 1.0:
            section["boost"] = boost
        super().__init__({self.kind: section}, origin=record_operation(self.factory_name, (filter, boost)))

    def filter(self, query: Query) -> ConstantScoreQuery:  # noqa: A003
        section = self._section()
        section["filter"] = snapshot(query)
        return self._derive("filter", (query,), section)

    def boost(self, value: float) -> ConstantScoreQuery:
        section = self._section()
        if value == 1.0:
            section.pop("boost", None)
        else:
            section["boost"] = value
        return self._derive("boost", (value,), section)

    def get_filter(self) -> dict[str, Any] | None:
        return _plain(self._section().get("filter"))

    def get_boost(self) -> float | None:
        return self._section().get("boost")


class DisMaxQuery(Query):
    """Score by the best matching sub-query plus ``tie_breaker`` times the rest."""

    kind = "dis_max"
    factory_name = "dis_max"
    code_methods = frozenset({"queries", "query", "add_queries", "tie_breaker", "boost"})

    __slots__ = ()

    def __init__(self, queries: Sequence[Query] = ()) -> None:
        queries = tuple(queries)
        super().__init__(
            {self.kind: {"queries": [snapshot(query) for query in queries]}},
            origin=record_operation(self.factory_name, (list(queries),) if queries else ()),
        )

    def queries(self, queries: Sequence[Query]) -> DisMaxQuery:
        """Replace all sub-queries."""
        queries = tuple(queries)
        section = self._section()
        section["queries"] = [snapshot(query) for query in queries]
        return self._derive("queries", (list(queries),), section)

    def query(self, query: Query) -> DisMaxQuery:
        return self.add_queries(query)

    def add_queries(self, *queries: Query) -> DisMaxQuery:
        section = self._section()
        section["queries"] = list(section.get("queries") or ()) + [snapshot(query) for query in queries]
        return self._derive("add_queries", queries, section)

    def tie_breaker(self, value: float) -> DisMaxQuery:
        check_ratio(value, "tie_breaker")
        return self._set("tie_breaker", value)

    def boost(self, value: float) -> DisMaxQuery:
        return self._set("boost", value)

    def get_queries(self) -> list[dict[str, Any]]:
        return [_plain(query) for query in self._section().get("queries") or ()]

    def get_query_count(self) -> int:
        return len(self._section().get("queries") or ())

    def get_tie_breaker(self) -> float | None:
        return self._section().get("tie_breaker")

    def get_boost(self) -> float | None:
        return self._section().get("boost")

    def is_empty(self) -> bool:
        return self.get_query_count() == 0


class FunctionScoreQuery(Query):
    """Modify the scores of a query with scoring functions."""

    kind = "function_score"
    factory_name = "function_score"
    code_methods = frozenset(
        {
            "query",
            "boost",
            "add_function",
            "functions",
            "max_boost",
            "score_mode",
            "boost_mode",
            "min_score",
            "random_score",
            "field_value_factor",
            "script_score",
        }
    )

    __slots__ = ()

    def __init__(self, query: Query | None = None) -> None:
        section = {"query": snapshot(query)} if query is not None else {}
        args = (query,) if query is not None else ()
        super().__init__({self.kind: section}, origin=record_operation(self.factory_name, args))

    def query(self, query: Query) -> FunctionScoreQuery:
        section = self._section()
        section["query"] = snapshot(query)
        return self._derive("query", (query,), section)

    def boost(self, value: float) -> FunctionScoreQuery:
        return self._set("boost", value)

    def add_function(self, function: Mapping[str, Any]) -> FunctionScoreQuery:
        section = self._section()
        section["functions"] = list(section.get("functions") or ()) + [dict(function)]
        return self._derive("add_function", (function,), section)

    def functions(self, functions: Sequence[Mapping[str, Any]]) -> FunctionScoreQuery:
        return self._set("functions", [dict(function) for function in functions])

    def max_boost(self, value: float) -> FunctionScoreQuery:
        return self._set("max_boost", value)

    def score_mode(self, mode: str) -> FunctionScoreQuery:
        return self._set("score_mode", mode)

    def boost_mode(self, mode: str) -> FunctionScoreQuery:
        return self._set("boost_mode", mode)

    def min_score(self, value: float) -> FunctionScoreQuery:
        return self._set("min_score", value)

    def random_score(self, seed: int | str | None = None, field: str | None = None) -> FunctionScoreQuery:
        config: dict[str, Any] = {}
        if seed is not None:
            config["seed"] = seed
        if field is not None:
            config["field"] = field
        section = self._section()
        section["random_score"] = config
        return self._derive("random_score", _trim_none((seed, field)), section)

    def field_value_factor(
        self,
        field: str,
        factor: float | None = None,
        modifier: str | None = None,
        missing: float | None = None,
    ) -> FunctionScoreQuery:
        config: dict[str, Any] = {"field": field}
        if factor is not None:
            config["factor"] = factor
        if modifier is not None:
            config["modifier"] = modifier
        if missing is not None:
            config["missing"] = missing
        section = self._section()
        section["field_value_factor"] = config
        return self._derive("field_value_factor", _trim_none((field, factor, modifier, missing)), section)

    def script_score(self, script: Mapping[str, Any]) -> FunctionScoreQuery:
        section = self._section()
        section["script_score"] = {"script": dict(script)}
        return self._derive("script_score", (script,), section)

    def get_query(self) -> dict[str, Any] | None:
        return _plain(self._section().get("query"))

    def get_functions(self) -> list[dict[str, Any]] | None:
        functions = self._section().get("functions")
        return [_plain(function) for function in functions] if functions is not None else None

    def get_boost(self) -> float | None:
        return self._section().get("boost")


def _trim_none(args: tuple[Any, ...]) -> tuple[Any, ...]:
    """Drop trailing ``None`` arguments so replayed calls stay short."""
    end = len(args)
    while end and args[end - 1] is None:
        end -= 1
    return args[:end]


def _plain(value: Any) -> Any:
    return thaw(value) if value is not None else None
