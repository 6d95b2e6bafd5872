"""Command: repoint the configuration record (named set_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from cleanctl.commands._base import CleanCommand

if TYPE_CHECKING:
    from cleanctl.commands._context import AppContext

_SET_EXAMPLES = """\
  cleanctl set folder
  cleanctl set folder ~/go/src/shop"""


@click.command("set", cls=CleanCommand, examples=_SET_EXAMPLES)
@click.argument("target", type=click.Choice(["folder"], case_sensitive=False))
@click.argument("path", required=False, default=".")
@click.pass_obj
def set_cmd(app: AppContext, target: str, path: str) -> None:
    """Set the working project folder used by 'cleanctl add'.

    TARGET must be 'folder'; PATH defaults to the current directory.
    """
    from cleanctl.services.init import InitService

    app.emit(InitService.set_folder(Path(path), config_path=app.settings.config_path))
