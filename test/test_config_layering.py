"""Tests for layered config parsing and validation."""

import sys
import tempfile
import unittest
from copy import deepcopy
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SearchDSL.config import load_config, merge_config_dicts, parse_config_dict


def _base_raw_config() -> dict:
    return {
        "log": {"level": "info", "to_file": False, "dir": "log"},
        "output": {"format": "json", "indent": 2, "sort_keys": False},
        "queries": [
            {"name": "adults", "query": {"range": {"age": {"gte": 18}}}},
            {"name": "active", "query": {"term": {"status": "active"}}},
        ],
    }


class TestConfigLayering(unittest.TestCase):
    def test_parse_success_nested_access(self) -> None:
        cfg = parse_config_dict(_base_raw_config())
        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertEqual(cfg.output.format, "json")
        self.assertEqual(cfg.output.indent, 2)
        self.assertEqual([q.name for q in cfg.queries], ["adults", "active"])
        self.assertEqual(cfg.queries[1].body["term"]["status"], "active")

    def test_query_bodies_are_frozen_copies(self) -> None:
        raw = _base_raw_config()
        cfg = parse_config_dict(raw)
        raw["queries"][0]["query"]["range"]["age"]["gte"] = 99
        self.assertEqual(cfg.queries[0].body["range"]["age"]["gte"], 18)
        with self.assertRaises(TypeError):
            cfg.queries[0].body["range"] = {}

    def test_output_unknown_format_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["output"]["format"] = "xml"
        with self.assertRaisesRegex(ValueError, "output\\.format"):
            parse_config_dict(raw)

    def test_output_indent_type_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["output"]["indent"] = "2"
        with self.assertRaisesRegex(TypeError, "output\\.indent"):
            parse_config_dict(raw)

    def test_output_indent_may_be_null(self) -> None:
        raw = _base_raw_config()
        raw["output"]["indent"] = None
        self.assertIsNone(parse_config_dict(raw).output.indent)

    def test_log_level_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["log"]["level"] = "verbose"
        with self.assertRaisesRegex(ValueError, "log\\.level"):
            parse_config_dict(raw)

    def test_missing_section(self) -> None:
        raw = _base_raw_config()
        del raw["output"]
        with self.assertRaisesRegex(ValueError, "output"):
            parse_config_dict(raw)

    def test_query_missing_body(self) -> None:
        raw = _base_raw_config()
        raw["queries"][0] = {"name": "broken"}
        with self.assertRaisesRegex(ValueError, "queries\\[0\\]\\.query"):
            parse_config_dict(raw)

    def test_query_body_type_error(self) -> None:
        raw = _base_raw_config()
        raw["queries"][1]["query"] = "status:active"
        with self.assertRaisesRegex(TypeError, "queries\\[1\\]\\.query"):
            parse_config_dict(raw)

    def test_duplicate_query_names(self) -> None:
        raw = deepcopy(_base_raw_config())
        raw["queries"][1]["name"] = "adults"
        with self.assertRaisesRegex(ValueError, "Duplicate query name"):
            parse_config_dict(raw)

    def test_unsupported_query_kind(self) -> None:
        raw = deepcopy(_base_raw_config())
        raw["queries"][0]["query"] = {"geo_distance": {"distance": "10km"}}
        with self.assertRaisesRegex(ValueError, "unsupported kind"):
            parse_config_dict(raw)

    def test_queries_may_be_absent(self) -> None:
        raw = _base_raw_config()
        del raw["queries"]
        self.assertEqual(parse_config_dict(raw).queries, ())


class TestConfigFiles(unittest.TestCase):
    def test_builtin_defaults(self) -> None:
        cfg = load_config(None)
        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertFalse(cfg.runtime.to_file)
        self.assertEqual(cfg.output.format, "json")
        self.assertEqual(cfg.queries, ())

    def test_override_file_is_merged_over_defaults(self) -> None:
        tmp_dir = Path(tempfile.mkdtemp())
        path = tmp_dir / "override.yml"
        path.write_text(
            "output:\n  format: code\nqueries:\n  - name: everything\n    query: {match_all: {}}\n",
            encoding="utf-8",
        )
        cfg = load_config(path)
        self.assertEqual(cfg.output.format, "code")
        self.assertEqual(cfg.output.indent, 2)
        self.assertEqual(cfg.queries[0].name, "everything")

    def test_custom_defaults_text(self) -> None:
        defaults = "log: {level: DEBUG, to_file: false, dir: out}\noutput: {format: envelope, indent: null, sort_keys: true}\n"
        cfg = load_config(None, defaults_text=defaults)
        self.assertEqual(cfg.runtime.dir, "out")
        self.assertTrue(cfg.output.sort_keys)
        self.assertIsNone(cfg.output.indent)

    def test_root_must_be_mapping(self) -> None:
        tmp_dir = Path(tempfile.mkdtemp())
        path = tmp_dir / "list.yml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with self.assertRaisesRegex(ValueError, "Config root"):
            load_config(path)

    def test_merge_replaces_lists(self) -> None:
        merged = merge_config_dicts(
            {"output": {"format": "json", "indent": 2}, "queries": [{"name": "a"}]},
            {"output": {"indent": 4}, "queries": [{"name": "b"}]},
        )
        self.assertEqual(merged["output"], {"format": "json", "indent": 4})
        self.assertEqual(merged["queries"], [{"name": "b"}])


if __name__ == "__main__":
    unittest.main()
