from __future__ import annotations

"""Public configuration API for the SearchDSL command line."""

from SearchDSL.config.app import (
    DEFAULT_CONFIG_TEXT,
    AppConfig,
    load_config,
    merge_config_dicts,
    parse_config_dict,
    parse_yaml,
)
from SearchDSL.config.output import OutputConfig
from SearchDSL.config.queries import QueryDefinition
from SearchDSL.config.runtime import RuntimeConfig

__all__ = [
    "RuntimeConfig",
    "OutputConfig",
    "QueryDefinition",
    "AppConfig",
    "DEFAULT_CONFIG_TEXT",
    "load_config",
    "parse_config_dict",
    "parse_yaml",
    "merge_config_dicts",
]
