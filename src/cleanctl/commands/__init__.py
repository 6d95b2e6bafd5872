"""Subcommand modules for cleanctl.

Provides register_commands() which uses deferred imports to keep
``cleanctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``add`` group and the standalone commands on the root group."""
    from cleanctl.commands.add import add
    from cleanctl.commands.init_cmd import init_cmd
    from cleanctl.commands.set_cmd import set_cmd

    cli.add_command(add)
    cli.add_command(init_cmd)
    cli.add_command(set_cmd)
