"""Match-all, joining and specialized queries."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from SearchDSL.core.freeze import thaw
from SearchDSL.core.query import Query, snapshot
from SearchDSL.core.types import record_operation

LikeDocument = str | Mapping[str, Any]


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


class MatchAllQuery(Query):
    kind = "match_all"
    factory_name = "match_all"
    code_methods = frozenset({"boost"})

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__({self.kind: {}}, origin=record_operation(self.factory_name, ()))

    def boost(self, value: float) -> MatchAllQuery:
        return self._set("boost", value)

    def get_boost(self) -> float | None:
        return self._section().get("boost")

    def is_empty(self) -> bool:
        """Return True when no option is set on the query."""
        return not self._section()


class NestedQuery(Query):
    """Run a query against nested objects under ``path``."""

    kind = "nested"
    factory_name = "nested"
    code_methods = frozenset({"path", "query", "score_mode", "boost", "ignore_unmapped", "inner_hits"})

    __slots__ = ()

    def __init__(self, path: str, query: Query) -> None:
        super().__init__(
            {self.kind: {"path": path, "query": snapshot(query)}},
            origin=record_operation(self.factory_name, (path, query)),
        )

    def path(self, path: str) -> NestedQuery:
        return self._set("path", path)

    def query(self, query: Query) -> NestedQuery:
        section = self._section()
        section["query"] = snapshot(query)
        return self._derive("query", (query,), section)

    def score_mode(self, mode: str) -> NestedQuery:
        return self._set("score_mode", mode)

    def boost(self, value: float) -> NestedQuery:
        return self._set("boost", value)

    def ignore_unmapped(self, value: bool = True) -> NestedQuery:
        return self._set("ignore_unmapped", value)

    def inner_hits(self, config: Mapping[str, Any] | None = None) -> NestedQuery:
        """Request inner hits; an empty mapping asks for the engine defaults."""
        return self._set("inner_hits", dict(config or {}))

    def get_path(self) -> str:
        return self._section().get("path", "")

    def get_query(self) -> dict[str, Any] | None:
        query = self._section().get("query")
        return thaw(query) if query is not None else None

    def get_score_mode(self) -> str | None:
        return self._section().get("score_mode")

    def get_boost(self) -> float | None:
        return self._section().get("boost")

    def get_ignore_unmapped(self) -> bool | None:
        return self._section().get("ignore_unmapped")

    def get_inner_hits(self) -> dict[str, Any] | None:
        inner_hits = self._section().get("inner_hits")
        return thaw(inner_hits) if inner_hits is not None else None


class MoreLikeThisQuery(Query):
    """Find documents similar to the given texts or documents.

    ``like`` and ``unlike`` entries are either free text or document
    references such as ``{"_index": "books", "_id": "1"}`` or ``{"doc": {...}}``.
    """

    kind = "more_like_this"
    factory_name = "more_like_this"
    code_methods = frozenset(
        {
            "fields",
            "like",
            "unlike",
            "max_query_terms",
            "min_term_freq",
            "min_doc_freq",
            "max_doc_freq",
            "min_word_length",
            "max_word_length",
            "stop_words",
            "analyzer",
            "minimum_should_match",
            "boost_terms",
            "include",
            "boost",
        }
    )

    __slots__ = ()

    def __init__(self, fields: str | Sequence[str], like: LikeDocument | Sequence[LikeDocument]) -> None:
        field_list = _as_list(fields)
        like_list = _as_list(like)
        super().__init__(
            {self.kind: {"fields": field_list, "like": like_list}},
            origin=record_operation(self.factory_name, (field_list, like_list)),
        )

    def fields(self, fields: str | Sequence[str]) -> MoreLikeThisQuery:
        return self._set("fields", _as_list(fields))

    def like(self, like: LikeDocument | Sequence[LikeDocument]) -> MoreLikeThisQuery:
        return self._set("like", _as_list(like))

    def unlike(self, unlike: LikeDocument | Sequence[LikeDocument]) -> MoreLikeThisQuery:
        return self._set("unlike", _as_list(unlike))

    def max_query_terms(self, value: int) -> MoreLikeThisQuery:
        return self._set("max_query_terms", value)

    def min_term_freq(self, value: int) -> MoreLikeThisQuery:
        return self._set("min_term_freq", value)

    def min_doc_freq(self, value: int) -> MoreLikeThisQuery:
        return self._set("min_doc_freq", value)

    def max_doc_freq(self, value: int) -> MoreLikeThisQuery:
        return self._set("max_doc_freq", value)

    def min_word_length(self, value: int) -> MoreLikeThisQuery:
        return self._set("min_word_length", value)

    def max_word_length(self, value: int) -> MoreLikeThisQuery:
        return self._set("max_word_length", value)

    def stop_words(self, words: Sequence[str]) -> MoreLikeThisQuery:
        return self._set("stop_words", list(words))

    def analyzer(self, value: str) -> MoreLikeThisQuery:
        return self._set("analyzer", value)

    def minimum_should_match(self, value: int | str) -> MoreLikeThisQuery:
        return self._set("minimum_should_match", value)

    def boost_terms(self, value: float) -> MoreLikeThisQuery:
        return self._set("boost_terms", value)

    def include(self, value: bool = True) -> MoreLikeThisQuery:
        return self._set("include", value)

    def boost(self, value: float) -> MoreLikeThisQuery:
        return self._set("boost", value)

    def get_fields(self) -> list[str] | None:
        fields = self._section().get("fields")
        return list(fields) if fields is not None else None

    def get_like(self) -> list[Any] | None:
        like = self._section().get("like")
        return thaw(like) if like is not None else None

    def get_unlike(self) -> list[Any] | None:
        unlike = self._section().get("unlike")
        return thaw(unlike) if unlike is not None else None

    def get_boost(self) -> float | None:
        return self._section().get("boost")


class ScriptScoreQuery(Query):
    """Score the documents of a query with a script.

    The script is an object with ``source`` or ``id`` plus optional ``params``
    and ``lang``; `source`, `script_id`, `params` and `lang` update a single
    key of it.
    """

    kind = "script_score"
    factory_name = "script_score"
    code_methods = frozenset({"query", "script", "source", "script_id", "params", "lang", "min_score", "boost"})

    __slots__ = ()

    def __init__(self, query: Query, script: Mapping[str, Any]) -> None:
        super().__init__(
            {self.kind: {"query": snapshot(query), "script": dict(script)}},
            origin=record_operation(self.factory_name, (query, dict(script))),
        )

    def _with_script(self, method: str, key: str, value: Any) -> ScriptScoreQuery:
        section = self._section()
        script = dict(section.get("script") or {})
        script[key] = value
        section["script"] = script
        return self._derive(method, (value,), section)

    def query(self, query: Query) -> ScriptScoreQuery:
        section = self._section()
        section["query"] = snapshot(query)
        return self._derive("query", (query,), section)

    def script(self, script: Mapping[str, Any]) -> ScriptScoreQuery:
        return self._set("script", dict(script))

    def source(self, source: str) -> ScriptScoreQuery:
        return self._with_script("source", "source", source)

    def script_id(self, script_id: str) -> ScriptScoreQuery:
        return self._with_script("script_id", "id", script_id)

    def params(self, params: Mapping[str, Any]) -> ScriptScoreQuery:
        return self._with_script("params", "params", dict(params))

    def lang(self, lang: str) -> ScriptScoreQuery:
        return self._with_script("lang", "lang", lang)

    def min_score(self, value: float) -> ScriptScoreQuery:
        return self._set("min_score", value)

    def boost(self, value: float) -> ScriptScoreQuery:
        return self._set("boost", value)

    def get_query(self) -> dict[str, Any] | None:
        query = self._section().get("query")
        return thaw(query) if query is not None else None

    def get_script(self) -> dict[str, Any]:
        return thaw(self._section().get("script") or {})

    def get_min_score(self) -> float | None:
        return self._section().get("min_score")

    def get_boost(self) -> float | None:
        return self._section().get("boost")
