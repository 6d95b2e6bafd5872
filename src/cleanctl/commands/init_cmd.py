"""Command: project initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from cleanctl.commands._base import CleanCommand

if TYPE_CHECKING:
    from cleanctl.commands._context import AppContext

_INIT_EXAMPLES = """\
  cd ~/go/src/github.com/jo/shop && cleanctl init
  cleanctl init ~/go/src/shop
  cleanctl -c ./cleanrc init ."""


@click.command("init", cls=CleanCommand, examples=_INIT_EXAMPLES)
@click.argument("path", required=False, default=".")
@click.pass_obj
def init_cmd(app: AppContext, path: str) -> None:
    """Generate the project folders in PATH and make it the working project."""
    from cleanctl.services.init import InitService

    app.emit(InitService.init_project(Path(path), config_path=app.settings.config_path))
