"""Query variants grouped by family."""

from __future__ import annotations

__all__ = [
    "BoolQuery",
    "BoostingQuery",
    "ConstantScoreQuery",
    "DisMaxQuery",
    "ExistsQuery",
    "FieldQuery",
    "FunctionScoreQuery",
    "FuzzyQuery",
    "IdsQuery",
    "MatchAllQuery",
    "MatchPhrasePrefixQuery",
    "MatchPhraseQuery",
    "MatchQuery",
    "MoreLikeThisQuery",
    "MultiMatchQuery",
    "NestedQuery",
    "PrefixQuery",
    "QueryStringQuery",
    "RangeQuery",
    "RegexpQuery",
    "ScriptScoreQuery",
    "SimpleQueryStringQuery",
    "TermQuery",
    "TermsQuery",
    "TermsSetQuery",
    "WildcardQuery",
    "build_query",
    "supported_query_kinds",
]

from SearchDSL.queries.compound import BoolQuery, BoostingQuery, ConstantScoreQuery, DisMaxQuery, FunctionScoreQuery
from SearchDSL.queries.field import FieldQuery
from SearchDSL.queries.full_text import (
    MatchPhrasePrefixQuery,
    MatchPhraseQuery,
    MatchQuery,
    MultiMatchQuery,
    QueryStringQuery,
    SimpleQueryStringQuery,
)
from SearchDSL.queries.registry import build_query, supported_query_kinds
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
