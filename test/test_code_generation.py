"""Tests for builder source generation."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SearchDSL import Q
from SearchDSL.renderers import render_code


class TestToCode(unittest.TestCase):
    def test_constructor_only(self) -> None:
        self.assertEqual(Q.term("status", "active").to_code(), "Q.term('status', 'active')")
        self.assertEqual(Q.bool_().to_code(), "Q.bool_()")
        self.assertEqual(Q.match_all().to_code(), "Q.match_all()")

    def test_chained_calls(self) -> None:
        self.assertEqual(
            Q.range("age").gte(18).lte(65).to_code(),
            "(\n    Q.range('age')\n    .gte(18)\n    .lte(65)\n)",
        )

    def test_query_arguments_render_as_from_dict(self) -> None:
        query = Q.bool_().must(Q.term("a", 1)).minimum_should_match(1)
        self.assertEqual(
            query.to_code(),
            "(\n    Q.bool_()\n    .must(Q.from_dict({'term': {'a': 1}}))\n    .minimum_should_match(1)\n)",
        )

    def test_query_lists_render_as_lists(self) -> None:
        query = Q.dis_max([Q.term("a", 1), Q.term("b", 2)])
        self.assertEqual(
            query.to_code(),
            "Q.dis_max([Q.from_dict({'term': {'a': 1}}), Q.from_dict({'term': {'b': 2}})])",
        )

    def test_loaded_query_starts_with_from_dict(self) -> None:
        query = Q.from_dict({"exists": {"field": "email"}}).boost(1.5)
        self.assertEqual(
            query.to_code(),
            "(\n    Q.from_dict({'exists': {'field': 'email'}})\n    .boost(1.5)\n)",
        )

    def test_trailing_none_arguments_are_dropped(self) -> None:
        query = Q.function_score().field_value_factor("likes", factor=2)
        self.assertEqual(
            query.to_code(),
            "(\n    Q.function_score()\n    .field_value_factor('likes', 2)\n)",
        )

    def test_render_code_assigns_variable(self) -> None:
        self.assertEqual(render_code("has-email", Q.exists("email")), "has_email = Q.exists('email')")
        self.assertEqual(render_code("1st", Q.match_all()), "q_1st = Q.match_all()")


if __name__ == "__main__":
    unittest.main()
