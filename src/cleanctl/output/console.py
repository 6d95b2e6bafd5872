"""Rich Console factory and the step-status theme.

Consoles render into a StringIO buffer so every renderer returns a plain
string. Rich drops color codes on its own when stdout is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

from cleanctl.services.result import StepStatus

DEFAULT_WIDTH = 120

# One style per step status; unchanged and skipped steps recede.
_STATUS_STYLES: dict[StepStatus, str] = {
    StepStatus.CREATED: "green",
    StepStatus.EXTENDED: "cyan",
    StepStatus.UNCHANGED: "dim",
    StepStatus.SKIPPED: "yellow",
    StepStatus.FAILED: "bold red",
}

CLEAN_THEME = Theme(
    {
        "clean.ok": "bold green",
        "clean.error": "bold red",
        "clean.warning": "bold yellow",
        "clean.op": "bold cyan",
        "clean.key": "dim",
        "clean.path": "dim",
        **{f"clean.status.{status}": style for status, style in _STATUS_STYLES.items()},
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Console writing to a fresh StringIO buffer with :data:`CLEAN_THEME`."""
    return Console(
        file=StringIO(),
        theme=CLEAN_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    """Theme style for a step status, or ``""`` for anything unknown."""
    try:
        return f"clean.status.{StepStatus(status)}"
    except ValueError:
        return ""
