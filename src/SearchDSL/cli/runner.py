"""Command runner for coordinating CLI execution.

Manages logging configuration, component creation and error handling for
command execution.
"""

from __future__ import annotations

import click

from SearchDSL.cli.commands import RenderCommand, ValidateCommand
from SearchDSL.config import AppConfig
from SearchDSL.renderers import create_output_writer
from SearchDSL.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution.

    Every public ``run_*`` method configures logging first and converts any
    failure into ``click.Abort`` after logging it.
    """

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def _configure_logging(self, action: str) -> None:
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )

    def run_render(self, action: str, format_override: str | None = None) -> None:
        """Render configured queries in the configured (or forced) format.

        Args:
            action: The CLI command name (e.g., 'render').
            format_override: Output format forced by the command.

        Raises:
            click.Abort: When rendering fails.
        """
        self._configure_logging(action)
        try:
            output_writer = create_output_writer(self.config.output, format_override=format_override)
            command = RenderCommand(config=self.config, output_writer=output_writer)
            count = command.execute()
            output_writer.finalize(action)
            log.info("Rendered %d queries", count)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Render failed: %s", e)
            raise click.Abort from e

    def run_validate(self, action: str) -> None:
        """Validate configured queries.

        Args:
            action: The CLI command name (e.g., 'validate').

        Raises:
            click.Abort: When any query is invalid or validation fails.
        """
        self._configure_logging(action)
        try:
            invalid = ValidateCommand(config=self.config).execute()
            if invalid:
                raise ValueError(f"invalid queries: {', '.join(invalid)}")
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Validate failed: %s", e)
            raise click.Abort from e
