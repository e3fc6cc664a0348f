"""Output renderers for command results.

Provides the OutputWriter abstraction and writers for the configured
``output.format`` (json, code, envelope), plus a factory function to
instantiate a writer from configuration.
"""

from __future__ import annotations

from SearchDSL.config import OutputConfig
from SearchDSL.renderers.base import OutputWriter
from SearchDSL.renderers.code import CodeOutputWriter, render_code
from SearchDSL.renderers.json import EnvelopeOutputWriter, JsonOutputWriter, render_json


def create_output_writer(config: OutputConfig, *, format_override: str | None = None) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Output configuration.
        format_override: Format forced by the command, replacing ``config.format``.

    Returns:
        OutputWriter instance for the resolved format.

    Raises:
        ValueError: If the format is unknown.
    """
    output_format = format_override or config.format
    if output_format == "json":
        return JsonOutputWriter(indent=config.indent, sort_keys=config.sort_keys)
    if output_format == "code":
        return CodeOutputWriter()
    if output_format == "envelope":
        return EnvelopeOutputWriter(indent=config.indent, sort_keys=config.sort_keys)
    raise ValueError(f"Unsupported output format: {output_format}")


__all__ = [
    "OutputWriter",
    "JsonOutputWriter",
    "EnvelopeOutputWriter",
    "CodeOutputWriter",
    "render_json",
    "render_code",
    "create_output_writer",
]
