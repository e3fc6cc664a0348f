"""End-to-end tests for the click command group."""

import json
import sys
import tempfile
import unittest
from pathlib import Path

from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SearchDSL.cli.ui import cli
from SearchDSL.utils.log import configure_logging

_QUIET_LOG = "log:\n  level: WARNING\n  to_file: false\n  dir: log\n"


def _write_config(text: str) -> Path:
    path = Path(tempfile.mkdtemp()) / "config.yml"
    path.write_text(_QUIET_LOG + text, encoding="utf-8")
    return path


class TestCli(unittest.TestCase):
    def tearDown(self) -> None:
        configure_logging(level="WARNING", log_to_file=False)

    def test_render_json(self) -> None:
        path = _write_config("queries:\n  - name: adults\n    query: {range: {age: {gte: 18}}}\n")
        result = CliRunner().invoke(cli, ["--config", str(path), "render"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(result.output), {"range": {"age": {"gte": 18}}})

    def test_render_one_line_per_query(self) -> None:
        path = _write_config(
            "output: {indent: null}\n"
            "queries:\n"
            "  - name: a\n    query: {term: {status: active}}\n"
            "  - name: b\n    query: {exists: {field: email}}\n"
        )
        result = CliRunner().invoke(cli, ["--config", str(path), "render"])
        self.assertEqual(result.exit_code, 0, result.output)
        lines = result.output.strip().splitlines()
        self.assertEqual([json.loads(line) for line in lines], [
            {"term": {"status": "active"}},
            {"exists": {"field": "email"}},
        ])

    def test_render_envelope(self) -> None:
        path = _write_config(
            "output: {format: envelope}\nqueries:\n  - name: adults\n    query: {range: {age: {gte: 18}}}\n"
        )
        result = CliRunner().invoke(cli, ["--config", str(path), "render"])
        self.assertEqual(result.exit_code, 0, result.output)
        envelopes = json.loads(result.output)
        self.assertEqual(envelopes[0]["type"], "RangeQuery")
        self.assertEqual(envelopes[0]["metadata"]["source"], "adults")

    def test_code_command(self) -> None:
        path = _write_config("queries:\n  - name: adults\n    query: {range: {age: {gte: 18}}}\n")
        result = CliRunner().invoke(cli, ["--config", str(path), "code"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("adults = Q.from_dict({'range': {'age': {'gte': 18}}})", result.output)

    def test_validate_passes(self) -> None:
        path = _write_config("queries:\n  - name: adults\n    query: {range: {age: {gte: 18}}}\n")
        result = CliRunner().invoke(cli, ["--config", str(path), "validate"])
        self.assertEqual(result.exit_code, 0, result.output)

    def test_validate_fails_on_empty_bool(self) -> None:
        path = _write_config(
            "queries:\n  - name: ok\n    query: {match_all: {}}\n  - name: empty\n    query: {bool: {}}\n"
        )
        result = CliRunner().invoke(cli, ["--config", str(path), "validate"])
        self.assertNotEqual(result.exit_code, 0)
        self.assertIn("empty: Bool query has no clauses", result.output)

    def test_invalid_config_is_bad_parameter(self) -> None:
        path = _write_config("output: {format: xml}\n")
        result = CliRunner().invoke(cli, ["--config", str(path), "render"])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("output.format", result.output)


class TestLogFile(unittest.TestCase):
    def test_log_file_is_created_per_action(self) -> None:
        log_dir = Path(tempfile.mkdtemp())
        log_path = configure_logging(level="DEBUG", action="render", log_to_file=True, log_dir=str(log_dir))
        try:
            self.assertIsNotNone(log_path)
            assert log_path is not None
            self.assertTrue(log_path.exists())
            self.assertEqual(log_path.parent, log_dir / "render")
        finally:
            configure_logging(level="WARNING", log_to_file=False)


if __name__ == "__main__":
    unittest.main()
