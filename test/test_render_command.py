"""Tests for RenderCommand and ValidateCommand without the click layer."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SearchDSL.cli.commands import RenderCommand, ValidateCommand
from SearchDSL.config import parse_config_dict
from SearchDSL.queries import RangeQuery, TermQuery


class _RecordingOutputWriter:
    def __init__(self) -> None:
        self.written = []

    def write_query(self, name, query) -> None:
        self.written.append((name, query))

    def finalize(self, action: str) -> None:
        del action


def _config(queries: list[dict]):
    return parse_config_dict(
        {
            "log": {"level": "INFO", "to_file": False, "dir": "log"},
            "output": {"format": "json", "indent": None, "sort_keys": False},
            "queries": queries,
        }
    )


class TestRenderCommand(unittest.TestCase):
    def test_queries_are_built_in_config_order(self) -> None:
        writer = _RecordingOutputWriter()
        config = _config(
            [
                {"name": "active", "query": {"term": {"status": "active"}}},
                {"name": "adults", "query": {"range": {"age": {"gte": 18}}}},
            ]
        )
        count = RenderCommand(config=config, output_writer=writer).execute()

        self.assertEqual(count, 2)
        self.assertEqual([name for name, _ in writer.written], ["active", "adults"])
        self.assertIsInstance(writer.written[0][1], TermQuery)
        self.assertIsInstance(writer.written[1][1], RangeQuery)
        self.assertEqual(writer.written[1][1].metadata.source, "adults")

    def test_no_queries_logs_warning(self) -> None:
        writer = _RecordingOutputWriter()
        with self.assertLogs("SearchDSL", level="WARNING"):
            count = RenderCommand(config=_config([]), output_writer=writer).execute()
        self.assertEqual(count, 0)
        self.assertEqual(writer.written, [])


class TestValidateCommand(unittest.TestCase):
    def test_invalid_names_are_returned(self) -> None:
        config = _config(
            [
                {"name": "no_bounds", "query": {"range": {"age": {}}}},
                {"name": "fine", "query": {"match_all": {}}},
                {"name": "empty", "query": {"bool": {}}},
            ]
        )
        self.assertEqual(ValidateCommand(config=config).execute(), ["no_bounds", "empty"])


if __name__ == "__main__":
    unittest.main()
