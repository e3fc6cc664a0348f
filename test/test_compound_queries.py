"""Tests for compound and specialized query variants."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SearchDSL import Q, RangeValidationError


class TestBoolQuery(unittest.TestCase):
    def test_clauses_accept_lists_and_varargs(self) -> None:
        a = Q.term("a", 1)
        b = Q.term("b", 2)
        query = Q.bool_().must([a, b]).must_not(Q.exists("deleted_at")).should(a, b).minimum_should_match(1)
        self.assertEqual(query.get_clause_counts(), {"must": 2, "should": 2, "filter": 0, "must_not": 1})
        self.assertEqual(query.to_dict()["bool"]["minimum_should_match"], 1)
        self.assertFalse(query.is_empty())

    def test_clauses_append(self) -> None:
        query = Q.bool_().filter(Q.term("a", 1)).filter(Q.term("b", 2))
        self.assertEqual(query.get_clauses("filter"), [{"term": {"a": 1}}, {"term": {"b": 2}}])

    def test_single_clause_object_is_treated_as_one_clause(self) -> None:
        loaded = Q.from_dict({"bool": {"must": {"term": {"a": 1}}}})
        self.assertEqual(loaded.get_clause_counts()["must"], 1)
        self.assertEqual(loaded.get_clauses("must"), [{"term": {"a": 1}}])
        self.assertFalse(Q.is_empty(loaded))

        extended = loaded.must(Q.term("b", 2))
        self.assertEqual(extended.get_clauses("must"), [{"term": {"a": 1}}, {"term": {"b": 2}}])
        self.assertEqual(extended.to_dict(), {"bool": {"must": [{"term": {"a": 1}}, {"term": {"b": 2}}]}})

    def test_boost(self) -> None:
        self.assertEqual(Q.bool_().boost(1.2).get_boost(), 1.2)


class TestBoostingQuery(unittest.TestCase):
    def test_default_negative_boost(self) -> None:
        positive = Q.match("title", "apple")
        negative = Q.term("category", "fruit")
        query = Q.boosting(positive, negative)
        self.assertEqual(
            query.to_dict(),
            {
                "boosting": {
                    "positive": {"match": {"title": "apple"}},
                    "negative": {"term": {"category": "fruit"}},
                    "negative_boost": 0.2,
                }
            },
        )

    def test_negative_boost_bounds(self) -> None:
        query = Q.boosting(Q.match_all(), Q.term("a", 1))
        self.assertEqual(query.negative_boost(0).get_negative_boost(), 0)
        self.assertEqual(query.negative_boost(1).get_negative_boost(), 1)
        with self.assertRaises(RangeValidationError):
            query.negative_boost(-0.1)
        with self.assertRaises(RangeValidationError):
            query.negative_boost(1.01)
        self.assertEqual(query.get_negative_boost(), 0.2)

    def test_replace_positive(self) -> None:
        query = Q.boosting(Q.match_all(), Q.term("a", 1)).positive(Q.term("b", 2))
        self.assertEqual(query.get_positive(), {"term": {"b": 2}})
        self.assertEqual(query.get_negative(), {"term": {"a": 1}})


class TestConstantScoreQuery(unittest.TestCase):
    def test_default_boost_is_omitted(self) -> None:
        query = Q.constant_score(Q.term("status", "active"))
        self.assertEqual(query.to_dict(), {"constant_score": {"filter": {"term": {"status": "active"}}}})
        self.assertIsNone(query.get_boost())

    def test_boost_set_and_reset(self) -> None:
        query = Q.constant_score(Q.term("status", "active"), 1.5)
        self.assertEqual(query.get_boost(), 1.5)
        self.assertNotIn("boost", query.boost(1.0).to_dict()["constant_score"])


class TestDisMaxQuery(unittest.TestCase):
    def test_queries_and_tie_breaker(self) -> None:
        query = Q.dis_max([Q.term("title", "quick"), Q.term("body", "quick")]).tie_breaker(0.7)
        self.assertEqual(
            query.to_dict(),
            {
                "dis_max": {
                    "queries": [{"term": {"title": "quick"}}, {"term": {"body": "quick"}}],
                    "tie_breaker": 0.7,
                }
            },
        )

    def test_tie_breaker_out_of_range(self) -> None:
        with self.assertRaises(RangeValidationError):
            Q.dis_max().tie_breaker(1.5)

    def test_add_replace_and_empty(self) -> None:
        empty = Q.dis_max()
        self.assertTrue(empty.is_empty())
        grown = empty.query(Q.term("a", 1)).add_queries(Q.term("b", 2), Q.term("c", 3))
        self.assertEqual(grown.get_query_count(), 3)
        replaced = grown.queries([Q.term("d", 4)])
        self.assertEqual(replaced.get_queries(), [{"term": {"d": 4}}])
        self.assertTrue(empty.is_empty())


class TestFunctionScoreQuery(unittest.TestCase):
    def test_field_value_factor(self) -> None:
        query = (
            Q.function_score(Q.match("title", "python"))
            .field_value_factor("likes", factor=1.2, modifier="log1p")
            .boost_mode("multiply")
            .max_boost(10)
        )
        self.assertEqual(
            query.to_dict(),
            {
                "function_score": {
                    "query": {"match": {"title": "python"}},
                    "field_value_factor": {"field": "likes", "factor": 1.2, "modifier": "log1p"},
                    "boost_mode": "multiply",
                    "max_boost": 10,
                }
            },
        )

    def test_functions_and_random_score(self) -> None:
        query = (
            Q.function_score()
            .add_function({"filter": {"term": {"tag": "a"}}, "weight": 2})
            .add_function({"weight": 1})
            .random_score(seed=10, field="_seq_no")
            .score_mode("sum")
        )
        self.assertEqual(len(query.get_functions()), 2)
        self.assertEqual(query.to_dict()["function_score"]["random_score"], {"seed": 10, "field": "_seq_no"})
        self.assertIsNone(query.get_query())

    def test_script_score(self) -> None:
        query = Q.function_score(Q.match_all()).script_score({"source": "_score * 2"})
        self.assertEqual(query.to_dict()["function_score"]["script_score"], {"script": {"source": "_score * 2"}})


class TestSpecializedQueries(unittest.TestCase):
    def test_match_all(self) -> None:
        self.assertEqual(Q.match_all().to_dict(), {"match_all": {}})
        self.assertEqual(Q.match_all().boost(1.2).to_dict(), {"match_all": {"boost": 1.2}})

    def test_nested(self) -> None:
        query = (
            Q.nested("comments", Q.match("comments.text", "great"))
            .score_mode("avg")
            .ignore_unmapped()
            .inner_hits()
        )
        self.assertEqual(
            query.to_dict(),
            {
                "nested": {
                    "path": "comments",
                    "query": {"match": {"comments.text": "great"}},
                    "score_mode": "avg",
                    "ignore_unmapped": True,
                    "inner_hits": {},
                }
            },
        )
        self.assertEqual(query.get_path(), "comments")

    def test_more_like_this(self) -> None:
        query = (
            Q.more_like_this(["title", "body"], [{"_index": "books", "_id": "1"}, "some free text"])
            .min_term_freq(1)
            .max_query_terms(12)
            .stop_words(["the", "a"])
        )
        body = query.to_dict()["more_like_this"]
        self.assertEqual(body["fields"], ["title", "body"])
        self.assertEqual(body["like"], [{"_index": "books", "_id": "1"}, "some free text"])
        self.assertEqual(body["stop_words"], ["the", "a"])
        self.assertEqual(query.get_fields(), ["title", "body"])

    def test_more_like_this_single_values(self) -> None:
        query = Q.more_like_this("title", "text").unlike("other")
        self.assertEqual(
            query.to_dict(),
            {"more_like_this": {"fields": ["title"], "like": ["text"], "unlike": ["other"]}},
        )

    def test_script_score(self) -> None:
        query = (
            Q.script_score(Q.match_all(), {"source": "doc['likes'].value"})
            .params({"factor": 2})
            .lang("painless")
            .min_score(1)
        )
        self.assertEqual(
            query.get_script(),
            {"source": "doc['likes'].value", "params": {"factor": 2}, "lang": "painless"},
        )
        self.assertEqual(query.get_min_score(), 1)
        self.assertEqual(query.script_id("stored").get_script()["id"], "stored")


if __name__ == "__main__":
    unittest.main()
