from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from SearchDSL.config.output import OutputConfig, check_output, load_output
from SearchDSL.config.queries import QueryDefinition, check_queries, load_queries
from SearchDSL.config.runtime import RuntimeConfig, check_runtime, load_runtime

DEFAULT_CONFIG_TEXT = """\
log:
  level: INFO
  to_file: false
  dir: log
output:
  format: json
  indent: 2
  sort_keys: false
queries: []
"""


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    output: OutputConfig
    queries: tuple[QueryDefinition, ...]


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    output = load_output(raw)
    queries = load_queries(raw)

    check_runtime(runtime)
    check_output(output)
    check_queries(queries)

    return AppConfig(runtime=runtime, output=output, queries=queries)


def load_config(path: Path | None, defaults_text: str | None = None) -> AppConfig:
    """Load a YAML config file merged over defaults.

    Args:
        path: Override file; None uses the defaults alone.
        defaults_text: YAML defaults; the built-in `DEFAULT_CONFIG_TEXT` when None.

    Returns:
        Parsed application configuration.
    """
    base = parse_yaml(DEFAULT_CONFIG_TEXT if defaults_text is None else defaults_text)
    if path is None:
        return parse_config_dict(base)
    override = parse_yaml(Path(path).read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(base, override))


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings; lists in ``override`` replace lists in ``base``."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
