"""Click building blocks shared by the cleanctl commands.

- ``CleanCommand`` / ``CleanGroup`` take an ``examples`` string and grow an
  eager ``--examples`` flag that prints it and exits, so ``--help`` stays
  short.
- :func:`connective_argument` declares the fixed filler word of
  ``add usecase NAME to INTERACTOR``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

if TYPE_CHECKING:
    from collections.abc import Callable


class _ExamplesMixin:
    """Adds the ``--examples`` flag to a Command or Group."""

    examples: str | None

    def _install_examples(self, examples: str | None) -> None:
        self.examples = examples
        if not examples:
            return
        params: list[click.Parameter] = self.params  # type: ignore[attr-defined]
        params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=_print_examples,
                help="Show usage examples.",
            )
        )


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value:
        return
    examples = getattr(ctx.command, "examples", None) or ""
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(examples)
    ctx.exit(0)


class CleanCommand(_ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._install_examples(examples)


class CleanGroup(_ExamplesMixin, click.Group):
    """Group whose subcommands are CleanCommands unless told otherwise."""

    command_class = CleanCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._install_examples(examples)


def connective_argument(word: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Positional argument that only accepts *word* (any case).

    The value is not passed to the command function.
    """
    return click.argument(
        f"_{word}",
        metavar=word,
        type=click.Choice([word], case_sensitive=False),
        expose_value=False,
    )
