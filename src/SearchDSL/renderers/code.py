"""Builder source output."""

from __future__ import annotations

import click

from SearchDSL.core.query import Query
from SearchDSL.renderers.base import OutputWriter


def render_code(name: str, query: Query) -> str:
    """Render ``query`` as an assignment to a variable named after ``name``.

    Args:
        name: Definition name; characters that are not valid in an
            identifier become underscores.
        query: Query to render.

    Returns:
        Python source such as ``adults = Q.range('age').gte(18)``.
    """
    variable = "".join(ch if ch.isalnum() or ch == "_" else "_" for ch in name) or "query"
    if variable[0].isdigit():
        variable = f"q_{variable}"
    return f"{variable} = {query.to_code()}"


class CodeOutputWriter(OutputWriter):
    """Echo builder source for each query, separated by blank lines."""

    def __init__(self) -> None:
        self.count = 0

    def write_query(self, name: str, query: Query) -> None:
        if self.count:
            click.echo("")
        click.echo(render_code(name, query))
        self.count += 1

    def finalize(self, action: str) -> None:
        """No-op for streamed output."""
