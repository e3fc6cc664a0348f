"""Term-level queries: exact values, ranges and patterns on one field."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from SearchDSL.core.query import Query
from SearchDSL.core.types import record_operation
from SearchDSL.queries.field import FieldQuery

_BOUND_KEYS = ("gte", "gt", "lte", "lt")


class TermQuery(FieldQuery):
    """Exact value match: ``{"term": {field: value}}``."""

    kind = "term"
    factory_name = "term"
    code_methods = frozenset({"boost", "case_insensitive"})

    __slots__ = ()

    def boost(self, value: float) -> TermQuery:
        return self._with_option("boost", value)

    def case_insensitive(self, value: bool = True) -> TermQuery:
        return self._with_option("case_insensitive", value)

    def get_value(self) -> Any:
        return self._base_value()

    def is_case_insensitive(self) -> bool:
        return bool(self._get_option("case_insensitive", False))


class TermsQuery(Query):
    """Match any of several exact values.

    The body is ``{"terms": {field: [values], "boost": n}}``; ``boost`` is a
    sibling of the field key. `lookup` replaces the value list with a terms
    lookup object.
    """

    kind = "terms"
    factory_name = "terms"
    code_methods = frozenset({"boost", "add_terms", "lookup"})

    __slots__ = ()

    def __init__(self, field: str, values: Sequence[Any]) -> None:
        super().__init__(
            {self.kind: {field: list(values)}},
            origin=record_operation(self.factory_name, (field, list(values))),
        )

    def get_field(self) -> str:
        return next((key for key in self._section() if key != "boost"), "")

    def boost(self, value: float) -> TermsQuery:
        return self._set("boost", value)

    def add_terms(self, *terms: Any) -> TermsQuery:
        """Append values; a previous lookup is replaced by the plain list."""
        section = self._section()
        field = self.get_field()
        section[field] = self.get_terms() + list(terms)
        return self._derive("add_terms", terms, section)

    def lookup(self, index: str, id: str, path: str) -> TermsQuery:  # noqa: A002 - wire name
        section = self._section()
        section[self.get_field()] = {"index": index, "id": id, "path": path}
        return self._derive("lookup", (index, id, path), section)

    def get_terms(self) -> list[Any]:
        entry = self._section().get(self.get_field())
        if isinstance(entry, (list, tuple)):
            return list(entry)
        return []

    def get_boost(self) -> float | None:
        return self._section().get("boost")

    def is_lookup(self) -> bool:
        return isinstance(self._section().get(self.get_field()), Mapping)

    def get_lookup(self) -> dict[str, Any] | None:
        entry = self._section().get(self.get_field())
        if isinstance(entry, Mapping):
            return dict(entry)
        return None


class TermsSetQuery(FieldQuery):
    """Match documents containing a minimum number of the given terms."""

    kind = "terms_set"
    factory_name = "terms_set"
    value_key = "terms"
    code_methods = frozenset(
        {"terms", "add_terms", "minimum_should_match_field", "minimum_should_match_script", "boost"}
    )

    __slots__ = ()

    def __init__(self, field: str, terms: Sequence[Any]) -> None:
        Query.__init__(
            self,
            {self.kind: {field: {"terms": list(terms)}}},
            origin=record_operation(self.factory_name, (field, list(terms))),
        )

    def terms(self, terms: Sequence[Any]) -> TermsSetQuery:
        return self._with_option("terms", list(terms))

    def add_terms(self, *terms: Any) -> TermsSetQuery:
        options = self._options()
        options["terms"] = list(options.get("terms") or ()) + list(terms)
        return self._derive("add_terms", terms, {self.get_field(): options})

    def minimum_should_match_field(self, field: str) -> TermsSetQuery:
        return self._with_option("minimum_should_match_field", field)

    def minimum_should_match_script(self, script: Mapping[str, Any]) -> TermsSetQuery:
        return self._with_option("minimum_should_match_script", dict(script))

    def boost(self, value: float) -> TermsSetQuery:
        return self._with_option("boost", value)

    def get_terms(self) -> list[Any]:
        return list(self._base_value() or ())

    def get_minimum_should_match_field(self) -> str | None:
        return self._get_option("minimum_should_match_field")

    def get_minimum_should_match_script(self) -> dict[str, Any] | None:
        script = self._get_option("minimum_should_match_script")
        return dict(script) if script is not None else None


class RangeQuery(Query):
    """Bounded match on one field: ``{"range": {field: {gte, gt, lte, lt}}}``.

    Bounds are independent keys. Setting ``gte`` does not clear ``gt``; the
    engine decides what contradictory bounds mean.
    """

    kind = "range"
    factory_name = "range"
    code_methods = frozenset({"gte", "gt", "lte", "lt", "between", "boost", "format", "time_zone", "relation"})

    __slots__ = ()

    def __init__(self, field: str) -> None:
        super().__init__({self.kind: {field: {}}}, origin=record_operation(self.factory_name, (field,)))

    def get_field(self) -> str:
        return next(iter(self._section()), "")

    def _spec(self) -> dict[str, Any]:
        spec = self._section().get(self.get_field())
        return dict(spec) if isinstance(spec, Mapping) else {}

    def _with(self, method: str, args: tuple[Any, ...], **values: Any) -> RangeQuery:
        spec = self._spec()
        spec.update(values)
        return self._derive(method, args, {self.get_field(): spec})

    def gte(self, value: Any) -> RangeQuery:
        return self._with("gte", (value,), gte=value)

    def gt(self, value: Any) -> RangeQuery:
        return self._with("gt", (value,), gt=value)

    def lte(self, value: Any) -> RangeQuery:
        return self._with("lte", (value,), lte=value)

    def lt(self, value: Any) -> RangeQuery:
        return self._with("lt", (value,), lt=value)

    def between(self, min: Any, max: Any, inclusive: bool = True) -> RangeQuery:  # noqa: A002
        """Set both bounds at once.

        Args:
            min: Lower bound.
            max: Upper bound.
            inclusive: Set ``gte``/``lte`` when True, ``gt``/``lt`` otherwise.
                The other pair is left as it is.
        """
        args = (min, max, inclusive)
        if inclusive:
            return self._with("between", args, gte=min, lte=max)
        return self._with("between", args, gt=min, lt=max)

    def boost(self, value: float) -> RangeQuery:
        return self._with("boost", (value,), boost=value)

    def format(self, value: str) -> RangeQuery:  # noqa: A003 - wire name
        return self._with("format", (value,), format=value)

    def time_zone(self, value: str) -> RangeQuery:
        return self._with("time_zone", (value,), time_zone=value)

    def relation(self, value: str) -> RangeQuery:
        return self._with("relation", (value,), relation=value)

    def get_bounds(self) -> dict[str, Any]:
        """Return the bounds that are set, keyed by ``gte``/``gt``/``lte``/``lt``."""
        spec = self._spec()
        return {key: spec[key] for key in _BOUND_KEYS if key in spec}

    def has_bounds(self) -> bool:
        return bool(self.get_bounds())

    def get_boost(self) -> float | None:
        return self._spec().get("boost")

    def describe(self) -> str:
        """Return a human-readable description such as ``age >= 18 AND age <= 65``."""
        field = self.get_field()
        symbols = {"gte": ">=", "gt": ">", "lte": "<=", "lt": "<"}
        parts = [f"{field} {symbols[key]} {value}" for key, value in self.get_bounds().items()]
        return " AND ".join(parts) or f"{field} (no bounds)"


class ExistsQuery(Query):
    """Match documents with a non-null value: ``{"exists": {"field": f}}``."""

    kind = "exists"
    factory_name = "exists"
    code_methods = frozenset({"boost"})

    __slots__ = ()

    def __init__(self, field: str) -> None:
        super().__init__({self.kind: {"field": field}}, origin=record_operation(self.factory_name, (field,)))

    def boost(self, value: float) -> ExistsQuery:
        return self._set("boost", value)

    def get_field(self) -> str:
        return self._section().get("field", "")

    def get_boost(self) -> float | None:
        return self._section().get("boost")


class IdsQuery(Query):
    """Match documents by id: ``{"ids": {"values": [...]}}``."""

    kind = "ids"
    factory_name = "ids"
    code_methods = frozenset({"boost", "add_ids", "remove_ids"})

    __slots__ = ()

    def __init__(self, ids: str | Sequence[str]) -> None:
        values = [ids] if isinstance(ids, str) else list(ids)
        super().__init__({self.kind: {"values": values}}, origin=record_operation(self.factory_name, (values,)))

    def boost(self, value: float) -> IdsQuery:
        return self._set("boost", value)

    def add_ids(self, *ids: str) -> IdsQuery:
        section = self._section()
        section["values"] = self.get_ids() + list(ids)
        return self._derive("add_ids", ids, section)

    def remove_ids(self, *ids: str) -> IdsQuery:
        section = self._section()
        section["values"] = [value for value in self.get_ids() if value not in ids]
        return self._derive("remove_ids", ids, section)

    def get_ids(self) -> list[str]:
        return list(self._section().get("values") or ())

    def get_boost(self) -> float | None:
        return self._section().get("boost")

    def has_id(self, id: str) -> bool:  # noqa: A002
        return id in self.get_ids()

    def get_id_count(self) -> int:
        return len(self.get_ids())


class _PatternQuery(FieldQuery):
    """Shared options of prefix/wildcard/regexp queries."""

    __slots__ = ()

    def boost(self, value: float):
        return self._with_option("boost", value)

    def case_insensitive(self, value: bool = True):
        return self._with_option("case_insensitive", value)

    def rewrite(self, value: str):
        return self._with_option("rewrite", value)

    def is_case_insensitive(self) -> bool:
        return bool(self._get_option("case_insensitive", False))

    def get_rewrite(self) -> str | None:
        return self._get_option("rewrite")


class PrefixQuery(_PatternQuery):
    kind = "prefix"
    factory_name = "prefix"
    code_methods = frozenset({"boost", "case_insensitive", "rewrite"})

    __slots__ = ()

    def get_prefix(self) -> str:
        return self._base_value()


class WildcardQuery(_PatternQuery):
    kind = "wildcard"
    factory_name = "wildcard"
    code_methods = frozenset({"boost", "case_insensitive", "rewrite"})

    __slots__ = ()

    def get_pattern(self) -> str:
        return self._base_value()


class RegexpQuery(_PatternQuery):
    kind = "regexp"
    factory_name = "regexp"
    code_methods = frozenset({"boost", "flags", "case_insensitive", "max_determinized_states", "rewrite"})

    __slots__ = ()

    def flags(self, value: str) -> RegexpQuery:
        return self._with_option("flags", value)

    def max_determinized_states(self, value: int) -> RegexpQuery:
        return self._with_option("max_determinized_states", value)

    def get_pattern(self) -> str:
        return self._base_value()

    def get_flags(self) -> str | None:
        return self._get_option("flags")

    def get_max_determinized_states(self) -> int | None:
        return self._get_option("max_determinized_states")


class FuzzyQuery(FieldQuery):
    """Match terms within an edit distance of the given value."""

    kind = "fuzzy"
    factory_name = "fuzzy"
    code_methods = frozenset({"fuzziness", "max_expansions", "prefix_length", "transpositions", "rewrite", "boost"})

    __slots__ = ()

    def fuzziness(self, value: str | int) -> FuzzyQuery:
        return self._with_option("fuzziness", value)

    def max_expansions(self, value: int) -> FuzzyQuery:
        return self._with_option("max_expansions", value)

    def prefix_length(self, value: int) -> FuzzyQuery:
        return self._with_option("prefix_length", value)

    def transpositions(self, value: bool = True) -> FuzzyQuery:
        return self._with_option("transpositions", value)

    def rewrite(self, value: str) -> FuzzyQuery:
        return self._with_option("rewrite", value)

    def boost(self, value: float) -> FuzzyQuery:
        return self._with_option("boost", value)

    def get_value(self) -> Any:
        return self._base_value()

    def get_fuzziness(self) -> str | int | None:
        return self._get_option("fuzziness")

    def get_max_expansions(self) -> int | None:
        return self._get_option("max_expansions")

    def get_prefix_length(self) -> int | None:
        return self._get_option("prefix_length")

    def get_transpositions(self) -> bool | None:
        return self._get_option("transpositions")
