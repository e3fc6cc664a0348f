"""SearchDSL: immutable builders for search-engine query bodies.

Every builder call returns a new frozen instance; ``to_dict()`` gives the
wire document and ``to_code()`` the builder calls that produced it.
"""

from __future__ import annotations

__all__ = [
    "BoolQuery",
    "BoostingQuery",
    "ConstantScoreQuery",
    "DisMaxQuery",
    "ExistsQuery",
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
    "Operation",
    "PrefixQuery",
    "Q",
    "Query",
    "QueryMetadata",
    "QueryStringQuery",
    "RangeQuery",
    "RangeValidationError",
    "RegexpQuery",
    "ScriptScoreQuery",
    "SearchDSLError",
    "SimpleQueryStringQuery",
    "TermQuery",
    "TermsQuery",
    "TermsSetQuery",
    "UnknownQueryKindError",
    "ValidationResult",
    "WildcardQuery",
]

from SearchDSL import factory as Q
from SearchDSL.core import Operation, Query, QueryMetadata
from SearchDSL.errors import RangeValidationError, SearchDSLError, UnknownQueryKindError
from SearchDSL.factory import ValidationResult
from SearchDSL.queries import (
    BoolQuery,
    BoostingQuery,
    ConstantScoreQuery,
    DisMaxQuery,
    ExistsQuery,
    FunctionScoreQuery,
    FuzzyQuery,
    IdsQuery,
    MatchAllQuery,
    MatchPhrasePrefixQuery,
    MatchPhraseQuery,
    MatchQuery,
    MoreLikeThisQuery,
    MultiMatchQuery,
    NestedQuery,
    PrefixQuery,
    QueryStringQuery,
    RangeQuery,
    RegexpQuery,
    ScriptScoreQuery,
    SimpleQueryStringQuery,
    TermQuery,
    TermsQuery,
    TermsSetQuery,
    WildcardQuery,
)
