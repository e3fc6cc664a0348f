"""Query registry: map body kinds to variant classes."""

from __future__ import annotations

from typing import Any, Mapping

from SearchDSL.core.query import Query
from SearchDSL.core.types import QueryMetadata
from SearchDSL.errors import UnknownQueryKindError
from SearchDSL.utils.log import log


def build_query(
    body: Mapping[str, Any],
    metadata: QueryMetadata | Mapping[str, Any] | None = None,
) -> Query:
    """Build a variant instance from a wire body.

    The variant is chosen by the single top-level key of ``body``; the body
    itself is taken as-is, without replaying any builder call.

    Args:
        body: Query body such as ``{"term": {"status": "active"}}``.
        metadata: Metadata for the new instance, or a mapping of overrides.

    Returns:
        Query: Instance of the registered variant.

    Raises:
        UnknownQueryKindError: If ``body`` is not a single-key mapping or its
            key is not registered.
    """
    kind = query_kind(body)
    variant = _query_classes().get(kind)
    if variant is None:
        raise UnknownQueryKindError(f"Unsupported query kind: {kind}")
    log.debug("Rebuilding %s query from body", kind)
    return variant.from_body(body, metadata)


def query_kind(body: Any) -> str:
    """Return the top-level key of a query body.

    Raises:
        UnknownQueryKindError: If ``body`` is not a mapping with exactly one key.
    """
    if not isinstance(body, Mapping) or len(body) != 1:
        raise UnknownQueryKindError(f"Query body must be a mapping with one top-level key, got: {body!r}")
    kind = next(iter(body))
    if not isinstance(kind, str):
        raise UnknownQueryKindError(f"Query kind must be a string, got: {kind!r}")
    return kind


def supported_query_kinds() -> tuple[str, ...]:
    """Return all body kinds the registry can rebuild.

    Returns:
        tuple[str, ...]: Kinds in registry order.
    """
    return tuple(_query_classes().keys())


def _query_classes() -> dict[str, type[Query]]:
    """Return kind -> variant class registry."""
    from SearchDSL.queries.compound import (
        BoolQuery,
        BoostingQuery,
        ConstantScoreQuery,
        DisMaxQuery,
        FunctionScoreQuery,
    )
    from SearchDSL.queries.full_text import (
        MatchPhrasePrefixQuery,
        MatchPhraseQuery,
        MatchQuery,
        MultiMatchQuery,
        QueryStringQuery,
        SimpleQueryStringQuery,
    )
    from SearchDSL.queries.specialized import MatchAllQuery, MoreLikeThisQuery, NestedQuery, ScriptScoreQuery
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

    variants: tuple[type[Query], ...] = (
        TermQuery,
        TermsQuery,
        TermsSetQuery,
        RangeQuery,
        ExistsQuery,
        IdsQuery,
        PrefixQuery,
        WildcardQuery,
        RegexpQuery,
        FuzzyQuery,
        MatchQuery,
        MatchPhraseQuery,
        MatchPhrasePrefixQuery,
        MultiMatchQuery,
        QueryStringQuery,
        SimpleQueryStringQuery,
        BoolQuery,
        BoostingQuery,
        ConstantScoreQuery,
        DisMaxQuery,
        FunctionScoreQuery,
        MatchAllQuery,
        NestedQuery,
        MoreLikeThisQuery,
        ScriptScoreQuery,
    )
    return {variant.kind: variant for variant in variants}
