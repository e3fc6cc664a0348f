"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
import yaml

from SearchDSL.cli.runner import CommandRunner
from SearchDSL.config import load_config


@click.group(help="SearchDSL: build search query bodies from YAML definitions.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help="Path to YAML config file, merged over the built-in defaults.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """CLI entry group.

    Args:
        ctx: Click context.
        config_path: Path to YAML config file.
    """
    try:
        ctx.obj = load_config(config_path)
    except (TypeError, ValueError, yaml.YAMLError) as e:
        raise click.BadParameter(str(e), param_hint="--config") from e


@cli.command("render")
@click.pass_context
def render_cmd(ctx: click.Context) -> None:
    """Print each configured query in the configured output format."""
    runner = CommandRunner(ctx.obj)
    runner.run_render(action=ctx.command.name)


@cli.command("code")
@click.pass_context
def code_cmd(ctx: click.Context) -> None:
    """Print builder source for each configured query."""
    runner = CommandRunner(ctx.obj)
    runner.run_render(action=ctx.command.name, format_override="code")


@cli.command("validate")
@click.pass_context
def validate_cmd(ctx: click.Context) -> None:
    """Validate configured queries; exit non-zero when any is invalid.

    Raises:
        click.Abort: When a query is invalid.
    """
    runner = CommandRunner(ctx.obj)
    runner.run_validate(action=ctx.command.name)
