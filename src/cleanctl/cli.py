"""Root CLI group: global flags, settings, and command registration."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from cleanctl import __version__
from cleanctl.commands import register_commands
from cleanctl.commands._context import AppContext
from cleanctl.config.settings import CleanSettings

_EPILOG = """\
The project folder is read from ~/.clean/cleanrc (written by 'cleanctl init'
and 'cleanctl set folder'). CLEANCTL_CONFIG or --config point at another
record; -C uses a folder for this run only."""


@click.group(invoke_without_command=True, epilog=_EPILOG)
@click.version_option(version=__version__, prog_name="cleanctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the units that were written.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and test-unit paths.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Override the config record path.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(file_okay=False),
    default=None,
    help="Project folder for this run, instead of the one in the record.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    directory: str | None,
) -> None:
    """cleanctl — Clean Architecture boilerplate generator for Go projects."""
    overrides: dict[str, Any] = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
    }
    if directory is not None:
        overrides["base_dir"] = str(Path(directory).resolve())

    ctx.obj = AppContext(CleanSettings.from_cli(config_path=config_path, **overrides))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
