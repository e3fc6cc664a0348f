"""Query factory, exported as ``Q``.

Usage:
    >>> from SearchDSL import Q
    >>> query = Q.bool_().must(Q.term("status", "active")).filter(Q.range("age").gte(18))
    >>> query.to_dict()["bool"]["filter"]
    [{'range': {'age': {'gte': 18}}}]

Names that clash with Python builtins or keywords get a trailing underscore
(`bool_`, `and_`, `or_`, `not_`). `filter` and `range` keep their wire names,
so this module must not call the builtins of the same name.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from SearchDSL.core.freeze import to_json
from SearchDSL.core.query import Query
from SearchDSL.core.types import QueryMetadata, record_operation
from SearchDSL.queries.compound import BoolQuery, BoostingQuery, ConstantScoreQuery, DisMaxQuery, FunctionScoreQuery
from SearchDSL.queries.full_text import (
    MatchPhrasePrefixQuery,
    MatchPhraseQuery,
    MatchQuery,
    MultiMatchQuery,
    QueryStringQuery,
    SimpleQueryStringQuery,
)
from SearchDSL.queries.registry import build_query
from SearchDSL.queries.specialized import LikeDocument, MatchAllQuery, MoreLikeThisQuery, NestedQuery, ScriptScoreQuery
from SearchDSL.queries.term_level import (
    ExistsQuery,
    FuzzyQuery,
    IdsQuery,
    PrefixQuery,
    RangeQuery,
    RegexpQuery,
    TermQuery,
    TermsQuery,
    TermsSetQuery,
    WildcardQuery,
)
from SearchDSL.utils.log import log

QueryArg = Query | Sequence[Query]


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of `validate`.

    Attributes:
        valid: True when no structural warning was found.
        errors: Human-readable findings, in check order.
    """

    valid: bool
    errors: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return self.valid


# Term-level


def term(field: str, value: Any) -> TermQuery:
    return TermQuery(field, value)


def terms(field: str, values: Sequence[Any]) -> TermsQuery:
    return TermsQuery(field, values)


def terms_set(field: str, terms: Sequence[Any]) -> TermsSetQuery:
    return TermsSetQuery(field, terms)


def range(field: str) -> RangeQuery:  # noqa: A001 - wire name
    return RangeQuery(field)


def exists(field: str) -> ExistsQuery:
    return ExistsQuery(field)


def ids(ids: str | Sequence[str]) -> IdsQuery:
    return IdsQuery(ids)


def prefix(field: str, value: str) -> PrefixQuery:
    return PrefixQuery(field, value)


def wildcard(field: str, pattern: str) -> WildcardQuery:
    return WildcardQuery(field, pattern)


def regexp(field: str, pattern: str) -> RegexpQuery:
    return RegexpQuery(field, pattern)


def fuzzy(field: str, value: Any) -> FuzzyQuery:
    return FuzzyQuery(field, value)


# Full-text


def match(field: str, query: str) -> MatchQuery:
    return MatchQuery(field, query)


def match_phrase(field: str, phrase: str) -> MatchPhraseQuery:
    return MatchPhraseQuery(field, phrase)


def match_phrase_prefix(field: str, query: str) -> MatchPhrasePrefixQuery:
    return MatchPhrasePrefixQuery(field, query)


def multi_match(query: str, fields: str | Sequence[str]) -> MultiMatchQuery:
    return MultiMatchQuery(query, fields)


def query_string(query: str) -> QueryStringQuery:
    return QueryStringQuery(query)


def simple_query_string(query: str) -> SimpleQueryStringQuery:
    return SimpleQueryStringQuery(query)


# Compound


def bool_() -> BoolQuery:
    return BoolQuery()


def boosting(positive: Query, negative: Query, negative_boost: float = 0.2) -> BoostingQuery:
    return BoostingQuery(positive, negative, negative_boost)


def constant_score(filter: Query, boost: float = 1.0) -> ConstantScoreQuery:  # noqa: A002
    return ConstantScoreQuery(filter, boost)


def dis_max(queries: Sequence[Query] = ()) -> DisMaxQuery:
    return DisMaxQuery(queries)


def function_score(query: Query | None = None) -> FunctionScoreQuery:
    return FunctionScoreQuery(query)


# Specialized


def match_all() -> MatchAllQuery:
    return MatchAllQuery()


def nested(path: str, query: Query) -> NestedQuery:
    return NestedQuery(path, query)


def more_like_this(fields: str | Sequence[str], like: LikeDocument | Sequence[LikeDocument]) -> MoreLikeThisQuery:
    return MoreLikeThisQuery(fields, like)


def script_score(query: Query, script: Mapping[str, Any]) -> ScriptScoreQuery:
    return ScriptScoreQuery(query, script)


# Combinators


def and_(*queries: QueryArg) -> BoolQuery:
    """Require every query: ``bool.must``."""
    return BoolQuery().must(*queries)


def or_(*queries: QueryArg) -> BoolQuery:
    """Require at least one query: ``bool.should``."""
    return BoolQuery().should(*queries)


def not_(*queries: QueryArg) -> BoolQuery:
    """Exclude every query: ``bool.must_not``."""
    return BoolQuery().must_not(*queries)


def filter(*queries: QueryArg) -> BoolQuery:  # noqa: A001 - wire name
    """Non-scoring match of every query: ``bool.filter``."""
    return BoolQuery().filter(*queries)


def must(*queries: QueryArg) -> BoolQuery:
    return BoolQuery().must(*queries)


def should(*queries: QueryArg) -> BoolQuery:
    return BoolQuery().should(*queries)


# Utilities


def is_empty(query: Query) -> bool:
    """Return True for a bool query without clauses; False for any other kind."""
    if query.kind == BoolQuery.kind:
        return BoolQuery.from_body(query.frozen_body).is_empty()
    return False


def equals(left: Query, right: Query) -> bool:
    return left.equals(right)


def validate(query: Query) -> ValidationResult:
    """Check a query for known structural warnings.

    Never raises. Findings are returned rather than thrown:

    - ``Bool query has no clauses`` for a bool query with every slot empty.
    - ``Range query has no bounds set`` for a range query without
      ``gte``/``gt``/``lte``/``lt``.
    - ``Query serialization failed: ...`` when the body cannot be serialized.

    Args:
        query: Query to inspect.

    Returns:
        ValidationResult: ``valid`` is True when ``errors`` is empty.
    """
    errors: list[str] = []
    try:
        body = json.loads(query.to_json())
        if not isinstance(body, dict) or not body:
            errors.append("Query does not produce valid JSON object")
        match query.kind:
            case BoolQuery.kind:
                if BoolQuery.from_body(query.frozen_body).is_empty():
                    errors.append("Bool query has no clauses")
            case RangeQuery.kind:
                if not RangeQuery.from_body(query.frozen_body).has_bounds():
                    errors.append("Range query has no bounds set")
    except Exception as e:  # noqa: BLE001 - report instead of raising
        errors.append(f"Query serialization failed: {e}")

    for error in errors:
        log.debug("Validation finding for %s: %s", query.id, error)
    return ValidationResult(valid=not errors, errors=tuple(errors))


def to_envelope(query: Query) -> dict[str, Any]:
    """Return ``{type, body, metadata}`` for persistence or debugging."""
    return {
        "type": type(query).__name__,
        "body": query.to_dict(),
        "metadata": query.metadata.to_dict(),
    }


def serialize(query: Query, indent: int | None = 2) -> str:
    """Return the envelope of ``query`` as JSON text."""
    return to_json(to_envelope(query), indent=indent)


def from_dict(body: Mapping[str, Any], source: str | None = None) -> Query:
    """Rebuild a variant instance from a wire body.

    Args:
        body: Query body such as ``{"match": {"title": "python"}}``.
        source: Optional provenance stored in the metadata.

    Returns:
        Query: New instance whose generated code starts with ``Q.from_dict``.

    Raises:
        UnknownQueryKindError: If the body kind is not registered.
    """
    origin = record_operation("from_dict", (body,))
    return build_query(body, QueryMetadata(source=source, origin=origin))


def load(envelope: Mapping[str, Any] | str) -> Query:
    """Rebuild a query, including its metadata, from `to_envelope`/`serialize` output.

    Raises:
        UnknownQueryKindError: If the body kind is not registered.
        ValueError: If the envelope has no ``body``.
    """
    raw = json.loads(envelope) if isinstance(envelope, str) else envelope
    if "body" not in raw:
        raise ValueError("Envelope is missing 'body'")
    metadata = raw.get("metadata")
    resolved = QueryMetadata.from_dict(metadata) if metadata else None
    return build_query(raw["body"], resolved)


def debug(query: Query) -> None:
    """Log type, id, body, generated code and metadata at DEBUG level."""
    log.debug("=== Query Debug ===")
    log.debug("Type: %s", type(query).__name__)
    log.debug("ID: %s", query.id)
    log.debug("JSON: %s", query.to_json(indent=2))
    log.debug("Code: %s", query.to_code())
    log.debug("Metadata: %s", query.metadata.to_dict())
    log.debug("===================")
