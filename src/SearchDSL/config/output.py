"""Output domain configuration for rendering built queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from SearchDSL.config.common import (
    expect_bool,
    expect_optional_int,
    expect_str,
    get_required_value,
    get_section,
)

_ALLOWED_FORMATS = {"json", "code", "envelope"}


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output configuration.

    Attributes:
        format: One of ``json`` (wire body), ``code`` (builder source) or
            ``envelope`` (body plus metadata).
        indent: JSON indent; ``None`` writes one line per query.
        sort_keys: Sort mapping keys in JSON output.
    """

    format: str
    indent: int | None
    sort_keys: bool


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load output domain config from raw mapping.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = get_section(raw, "output", required=True)
    return OutputConfig(
        format=expect_str(get_required_value(section, "format", "output.format"), "output.format").lower(),
        indent=expect_optional_int(get_required_value(section, "indent", "output.indent"), "output.indent"),
        sort_keys=expect_bool(get_required_value(section, "sort_keys", "output.sort_keys"), "output.sort_keys"),
    )


def check_output(config: OutputConfig) -> None:
    """Validate output domain constraints.

    Raises:
        ValueError: If values violate output constraints.
    """
    if config.format not in _ALLOWED_FORMATS:
        raise ValueError(f"output.format must be one of {sorted(_ALLOWED_FORMATS)}")
    if config.indent is not None and config.indent < 0:
        raise ValueError("output.indent must be >= 0")
