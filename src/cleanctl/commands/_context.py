"""AppContext — the object every subcommand receives via ``@click.pass_obj``.

It owns the invocation's settings, configures logging once, builds the
:class:`Project` on demand, and turns a ServiceResult into output and an
exit status.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from cleanctl.config.logging import configure_logging
from cleanctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from cleanctl.config.settings import CleanSettings
    from cleanctl.infrastructure.project import Project
    from cleanctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AppContext:
    """Per-invocation state shared by the command tree.

    Nothing here touches the configuration record's target directory until
    a command asks for :attr:`project`, so ``init`` and ``set`` work before
    any project exists.
    """

    def __init__(self, settings: CleanSettings) -> None:
        self.settings = settings
        self._project: Project | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        logger.debug(
            "Config record %s, base directory %s",
            settings.config_path,
            settings.base_dir or "(unset)",
        )

    @property
    def project(self) -> Project:
        if self._project is None:
            from cleanctl.infrastructure.project import Project

            self._project = Project(self.settings)
        return self._project

    @property
    def output(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and set the exit status.

        Successful results go to stdout (nothing at all when the formatted
        text is empty, e.g. a quiet run that wrote no unit); warnings go to
        stderr unless they are already part of the JSON payload. Failed
        results go to stderr and exit with status 1, after whatever steps
        did succeed.
        """
        output = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(1)

        if output:
            click.echo(output)
        if not self.settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
