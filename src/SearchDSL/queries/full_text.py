"""Full-text queries: analyzed text matched against one or more fields."""

from __future__ import annotations

from typing import Sequence

from SearchDSL.core.query import Query
from SearchDSL.core.types import record_operation
from SearchDSL.queries.field import FieldQuery


def _as_fields(fields: str | Sequence[str]) -> list[str]:
    return [fields] if isinstance(fields, str) else list(fields)


class MatchQuery(FieldQuery):
    """Analyzed match: ``{"match": {field: text}}``."""

    kind = "match"
    factory_name = "match"
    value_key = "query"
    code_methods = frozenset(
        {
            "operator",
            "minimum_should_match",
            "fuzziness",
            "prefix_length",
            "max_expansions",
            "boost",
            "analyzer",
            "auto_generate_synonyms_phrase_query",
        }
    )

    __slots__ = ()

    def operator(self, value: str) -> MatchQuery:
        return self._with_option("operator", value)

    def minimum_should_match(self, value: int | str) -> MatchQuery:
        return self._with_option("minimum_should_match", value)

    def fuzziness(self, value: str | int) -> MatchQuery:
        return self._with_option("fuzziness", value)

    def prefix_length(self, value: int) -> MatchQuery:
        return self._with_option("prefix_length", value)

    def max_expansions(self, value: int) -> MatchQuery:
        return self._with_option("max_expansions", value)

    def boost(self, value: float) -> MatchQuery:
        return self._with_option("boost", value)

    def analyzer(self, value: str) -> MatchQuery:
        return self._with_option("analyzer", value)

    def auto_generate_synonyms_phrase_query(self, value: bool = True) -> MatchQuery:
        return self._with_option("auto_generate_synonyms_phrase_query", value)

    def get_query_text(self) -> str:
        return self._base_value()

    def get_operator(self) -> str | None:
        return self._get_option("operator")

    def get_fuzziness(self) -> str | int | None:
        return self._get_option("fuzziness")


class MatchPhraseQuery(FieldQuery):
    kind = "match_phrase"
    factory_name = "match_phrase"
    value_key = "query"
    code_methods = frozenset({"boost", "slop", "analyzer", "zero_terms_query"})

    __slots__ = ()

    def boost(self, value: float) -> MatchPhraseQuery:
        return self._with_option("boost", value)

    def slop(self, value: int) -> MatchPhraseQuery:
        return self._with_option("slop", value)

    def analyzer(self, value: str) -> MatchPhraseQuery:
        return self._with_option("analyzer", value)

    def zero_terms_query(self, value: str) -> MatchPhraseQuery:
        return self._with_option("zero_terms_query", value)

    def get_phrase(self) -> str:
        return self._base_value()

    def get_slop(self) -> int | None:
        return self._get_option("slop")

    def get_analyzer(self) -> str | None:
        return self._get_option("analyzer")

    def get_zero_terms_query(self) -> str | None:
        return self._get_option("zero_terms_query")


class MatchPhrasePrefixQuery(FieldQuery):
    kind = "match_phrase_prefix"
    factory_name = "match_phrase_prefix"
    value_key = "query"
    code_methods = frozenset({"analyzer", "max_expansions", "slop", "zero_terms_query", "boost"})

    __slots__ = ()

    def analyzer(self, value: str) -> MatchPhrasePrefixQuery:
        return self._with_option("analyzer", value)

    def max_expansions(self, value: int) -> MatchPhrasePrefixQuery:
        return self._with_option("max_expansions", value)

    def slop(self, value: int) -> MatchPhrasePrefixQuery:
        return self._with_option("slop", value)

    def zero_terms_query(self, value: str) -> MatchPhrasePrefixQuery:
        return self._with_option("zero_terms_query", value)

    def boost(self, value: float) -> MatchPhrasePrefixQuery:
        return self._with_option("boost", value)

    def get_query(self) -> str:
        return self._base_value()

    def get_analyzer(self) -> str | None:
        return self._get_option("analyzer")

    def get_max_expansions(self) -> int | None:
        return self._get_option("max_expansions")

    def get_slop(self) -> int | None:
        return self._get_option("slop")


class MultiMatchQuery(Query):
    """Match one text against several fields."""

    kind = "multi_match"
    factory_name = "multi_match"
    code_methods = frozenset(
        {
            "type",
            "operator",
            "minimum_should_match",
            "fuzziness",
            "boost",
            "analyzer",
            "tie_breaker",
            "slop",
            "zero_terms_query",
            "prefix_length",
            "max_expansions",
            "add_fields",
        }
    )

    __slots__ = ()

    def __init__(self, query: str, fields: str | Sequence[str]) -> None:
        field_list = _as_fields(fields)
        super().__init__(
            {self.kind: {"query": query, "fields": field_list}},
            origin=record_operation(self.factory_name, (query, field_list)),
        )

    def type(self, value: str) -> MultiMatchQuery:  # noqa: A003 - wire name
        return self._set("type", value)

    def operator(self, value: str) -> MultiMatchQuery:
        return self._set("operator", value)

    def minimum_should_match(self, value: int | str) -> MultiMatchQuery:
        return self._set("minimum_should_match", value)

    def fuzziness(self, value: str | int) -> MultiMatchQuery:
        return self._set("fuzziness", value)

    def boost(self, value: float) -> MultiMatchQuery:
        return self._set("boost", value)

    def analyzer(self, value: str) -> MultiMatchQuery:
        return self._set("analyzer", value)

    def tie_breaker(self, value: float) -> MultiMatchQuery:
        return self._set("tie_breaker", value)

    def slop(self, value: int) -> MultiMatchQuery:
        return self._set("slop", value)

    def zero_terms_query(self, value: str) -> MultiMatchQuery:
        return self._set("zero_terms_query", value)

    def prefix_length(self, value: int) -> MultiMatchQuery:
        return self._set("prefix_length", value)

    def max_expansions(self, value: int) -> MultiMatchQuery:
        return self._set("max_expansions", value)

    def add_fields(self, *fields: str) -> MultiMatchQuery:
        section = self._section()
        section["fields"] = self.get_fields() + list(fields)
        return self._derive("add_fields", fields, section)

    def get_query(self) -> str:
        return self._section().get("query", "")

    def get_fields(self) -> list[str]:
        return list(self._section().get("fields") or ())

    def get_type(self) -> str | None:
        return self._section().get("type")

    def get_operator(self) -> str | None:
        return self._section().get("operator")

    def get_boost(self) -> float | None:
        return self._section().get("boost")

    def get_fuzziness(self) -> str | int | None:
        return self._section().get("fuzziness")

    def get_minimum_should_match(self) -> int | str | None:
        return self._section().get("minimum_should_match")


class QueryStringQuery(Query):
    """Lucene query syntax: ``{"query_string": {"query": "a AND b"}}``."""

    kind = "query_string"
    factory_name = "query_string"
    code_methods = frozenset(
        {
            "query",
            "default_field",
            "fields",
            "default_operator",
            "analyzer",
            "quote_analyzer",
            "allow_leading_wildcard",
            "fuzziness",
            "phrase_slop",
            "boost",
            "minimum_should_match",
            "lenient",
            "analyze_wildcard",
            "tie_breaker",
        }
    )

    __slots__ = ()

    def __init__(self, query: str) -> None:
        super().__init__({self.kind: {"query": query}}, origin=record_operation(self.factory_name, (query,)))

    def query(self, value: str) -> QueryStringQuery:
        return self._set("query", value)

    def default_field(self, field: str) -> QueryStringQuery:
        return self._set("default_field", field)

    def fields(self, fields: Sequence[str]) -> QueryStringQuery:
        return self._set("fields", list(fields))

    def default_operator(self, value: str) -> QueryStringQuery:
        return self._set("default_operator", value)

    def analyzer(self, value: str) -> QueryStringQuery:
        return self._set("analyzer", value)

    def quote_analyzer(self, value: str) -> QueryStringQuery:
        return self._set("quote_analyzer", value)

    def allow_leading_wildcard(self, value: bool = True) -> QueryStringQuery:
        return self._set("allow_leading_wildcard", value)

    def fuzziness(self, value: str | int) -> QueryStringQuery:
        return self._set("fuzziness", value)

    def phrase_slop(self, value: int) -> QueryStringQuery:
        return self._set("phrase_slop", value)

    def boost(self, value: float) -> QueryStringQuery:
        return self._set("boost", value)

    def minimum_should_match(self, value: int | str) -> QueryStringQuery:
        return self._set("minimum_should_match", value)

    def lenient(self, value: bool = True) -> QueryStringQuery:
        return self._set("lenient", value)

    def analyze_wildcard(self, value: bool = True) -> QueryStringQuery:
        return self._set("analyze_wildcard", value)

    def tie_breaker(self, value: float) -> QueryStringQuery:
        return self._set("tie_breaker", value)

    def get_query(self) -> str:
        return self._section().get("query", "")

    def get_default_field(self) -> str | None:
        return self._section().get("default_field")

    def get_fields(self) -> list[str] | None:
        fields = self._section().get("fields")
        return list(fields) if fields is not None else None

    def get_boost(self) -> float | None:
        return self._section().get("boost")


class SimpleQueryStringQuery(Query):
    """Forgiving query syntax that never raises on malformed input."""

    kind = "simple_query_string"
    factory_name = "simple_query_string"
    code_methods = frozenset(
        {
            "query",
            "fields",
            "default_operator",
            "analyzer",
            "flags",
            "fuzzy_max_expansions",
            "fuzzy_prefix_length",
            "fuzzy_transpositions",
            "lenient",
            "minimum_should_match",
            "quote_field_suffix",
            "analyze_wildcard",
            "auto_generate_synonyms_phrase_query",
            "boost",
        }
    )

    __slots__ = ()

    def __init__(self, query: str) -> None:
        super().__init__({self.kind: {"query": query}}, origin=record_operation(self.factory_name, (query,)))

    def query(self, value: str) -> SimpleQueryStringQuery:
        return self._set("query", value)

    def fields(self, fields: Sequence[str]) -> SimpleQueryStringQuery:
        return self._set("fields", list(fields))

    def default_operator(self, value: str) -> SimpleQueryStringQuery:
        return self._set("default_operator", value)

    def analyzer(self, value: str) -> SimpleQueryStringQuery:
        return self._set("analyzer", value)

    def flags(self, value: str) -> SimpleQueryStringQuery:
        return self._set("flags", value)

    def fuzzy_max_expansions(self, value: int) -> SimpleQueryStringQuery:
        return self._set("fuzzy_max_expansions", value)

    def fuzzy_prefix_length(self, value: int) -> SimpleQueryStringQuery:
        return self._set("fuzzy_prefix_length", value)

    def fuzzy_transpositions(self, value: bool = True) -> SimpleQueryStringQuery:
        return self._set("fuzzy_transpositions", value)

    def lenient(self, value: bool = True) -> SimpleQueryStringQuery:
        return self._set("lenient", value)

    def minimum_should_match(self, value: int | str) -> SimpleQueryStringQuery:
        return self._set("minimum_should_match", value)

    def quote_field_suffix(self, value: str) -> SimpleQueryStringQuery:
        return self._set("quote_field_suffix", value)

    def analyze_wildcard(self, value: bool = True) -> SimpleQueryStringQuery:
        return self._set("analyze_wildcard", value)

    def auto_generate_synonyms_phrase_query(self, value: bool = True) -> SimpleQueryStringQuery:
        return self._set("auto_generate_synonyms_phrase_query", value)

    def boost(self, value: float) -> SimpleQueryStringQuery:
        return self._set("boost", value)

    def get_query(self) -> str:
        return self._section().get("query", "")

    def get_fields(self) -> list[str] | None:
        fields = self._section().get("fields")
        return list(fields) if fields is not None else None

    def get_boost(self) -> float | None:
        return self._section().get("boost")
