"""Add group: declare interactors and attach use-cases to them."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cleanctl.commands._base import CleanGroup, connective_argument

if TYPE_CHECKING:
    from cleanctl.commands._context import AppContext

_ADD_EXAMPLES = """\
  cleanctl add interactor Order
  cleanctl add usecase AddItem to Order
  cleanctl --json add usecase RemoveItem TO Order.go"""


@click.group("add", cls=CleanGroup, examples=_ADD_EXAMPLES)
def add() -> None:
    """Add interactors and use-cases to the project."""


@add.command(
    "interactor",
    examples="  cleanctl add interactor Order\n  cleanctl add interactor OrderHandler.go",
)
@click.argument("name")
@click.pass_obj
def interactor(app: AppContext, name: str) -> None:
    """Generate the controller, presenter, view, interactor and validator units for NAME."""
    from cleanctl.services.scaffold import ScaffoldService

    app.emit(ScaffoldService(app.project).declare_interactor(name))


@add.command(
    "usecase",
    examples="  cleanctl add usecase AddItem to Order\n  cleanctl add usecase addItem To Order.go",
)
@click.argument("name")
@connective_argument("to")
@click.argument("owner", metavar="INTERACTOR")
@click.pass_obj
def usecase(app: AppContext, name: str, owner: str) -> None:
    """Attach usecase NAME to INTERACTOR across all of its units and models."""
    from cleanctl.services.scaffold import ScaffoldService

    app.emit(ScaffoldService(app.project).attach_usecase(name, owner))
