"""JSON output renderers for wire bodies and metadata envelopes."""

from __future__ import annotations

from typing import Any

import click

from SearchDSL import factory
from SearchDSL.core.freeze import to_json
from SearchDSL.core.query import Query
from SearchDSL.renderers.base import OutputWriter
from SearchDSL.utils.log import log


def render_json(query: Query, *, indent: int | None = 2, sort_keys: bool = False) -> str:
    """Render the wire body of ``query`` as JSON text."""
    return to_json(query.frozen_body, indent=indent, sort_keys=sort_keys)


class JsonOutputWriter(OutputWriter):
    """Echo one JSON body per query to stdout.

    With ``indent=None`` each body takes one line, which suits piping into
    line-oriented tools.
    """

    def __init__(self, indent: int | None = 2, sort_keys: bool = False) -> None:
        self.indent = indent
        self.sort_keys = sort_keys

    def write_query(self, name: str, query: Query) -> None:
        log.debug("Rendering %s as json", name)
        click.echo(render_json(query, indent=self.indent, sort_keys=self.sort_keys))

    def finalize(self, action: str) -> None:
        """No-op for streamed output."""


class EnvelopeOutputWriter(OutputWriter):
    """Accumulate envelopes and echo them as one JSON array on finalize."""

    def __init__(self, indent: int | None = 2, sort_keys: bool = False) -> None:
        self.indent = indent
        self.sort_keys = sort_keys
        self.envelopes: list[dict[str, Any]] = []

    def write_query(self, name: str, query: Query) -> None:
        self.envelopes.append(factory.to_envelope(query))

    def finalize(self, action: str) -> None:
        click.echo(to_json(self.envelopes, indent=self.indent, sort_keys=self.sort_keys))
        log.debug("%s wrote %d envelopes", action, len(self.envelopes))
