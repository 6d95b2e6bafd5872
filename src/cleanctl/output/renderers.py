"""Human-readable rendering of ServiceResults.

Scaffold operations (``declare_interactor``, ``attach_usecase``) print a
headline, the owner/use-case fields and one table row per generation step.
Everything else (``init_project``, ``set_folder``) prints its data as
indented ``key: value`` lines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from cleanctl.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from rich.console import Console

    from cleanctl.services.result import ServiceResult

# Step statuses that mean a unit file was written.
WRITTEN_STATUSES = frozenset({"created", "extended"})

_SCAFFOLD_FIELDS = ("owner", "usecase")
_PATH_COLUMNS = frozenset({"Unit", "Test unit"})


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* as text; styled only when the console is a terminal."""
    console = create_console()
    if result.ok:
        _RENDERERS.get(result.op, _render_fields)(result, console, verbose)
    else:
        _render_failure(result, console, verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One written unit per line for scaffold ops, a bare status otherwise."""
    if not result.ok:
        reason = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {reason}"

    steps = result.data.get("steps")
    if not isinstance(steps, list):
        return f"OK: {result.op}"
    return "\n".join(str(s["path"]) for s in steps if _was_written(s))


def _was_written(step: dict[str, Any]) -> bool:
    return step.get("status") in WRITTEN_STATUSES and bool(step.get("path"))


def _headline(console: Console, label: Text, op: str, reason: str = "") -> None:
    parts = [label, Text(f"  {op}", style="clean.op")]
    if reason:
        parts.append(Text(f" — {reason}"))
    console.print(Text.assemble(*parts))


def _print_pairs(console: Console, pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        if isinstance(value, list):
            value = ", ".join(map(str, value)) or "-"
        console.print(
            Text.assemble(
                Text(f"  {key}: ", style="clean.key"),
                Text(str(value), style="clean.path" if key.endswith("path") else ""),
            )
        )


def _step_row(step: dict[str, Any], verbose: bool) -> list[Any]:
    status = str(step.get("status", ""))
    note = step.get("message") or ""
    if step.get("code"):
        note = f"{step['code']}: {note}"

    row: list[Any] = [
        str(step.get("kind", "")),
        Text(status, style=style_for_status(status)),
        str(step.get("path", "")),
    ]
    if verbose:
        row.append(str(step.get("companion") or ""))
    row.append(note)
    return row


def _print_steps(console: Console, steps: list[dict[str, Any]], verbose: bool) -> None:
    if not steps:
        return
    columns = ["Kind", "Status", "Unit", *(["Test unit"] if verbose else []), "Note"]
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    for name in columns:
        table.add_column(name, style="clean.path" if name in _PATH_COLUMNS else None)
    for step in steps:
        table.add_row(*_step_row(step, verbose))
    console.print()
    console.print(table)


def _render_fields(result: ServiceResult, console: Console, verbose: bool) -> None:
    _headline(console, Text("OK", style="clean.ok"), result.op)
    _print_pairs(console, result.data.items())


def _render_scaffold(result: ServiceResult, console: Console, verbose: bool) -> None:
    _headline(console, Text("OK", style="clean.ok"), result.op)
    _print_pairs(console, ((k, result.data[k]) for k in _SCAFFOLD_FIELDS if k in result.data))
    _print_steps(console, result.data.get("steps", []), verbose)


def _render_failure(result: ServiceResult, console: Console, verbose: bool) -> None:
    error = result.error
    _headline(
        console,
        Text("ERROR", style="clean.error"),
        result.op,
        error.message if error else "Unknown error",
    )
    if error and error.code:
        _print_pairs(console, [("code", error.code)])

    steps = result.data.get("steps", [])
    _print_steps(console, steps, verbose)
    # Step rows already carry per-unit detail.
    if verbose and error and error.detail and not steps:
        _print_pairs(console, error.detail.items())


_RENDERERS: dict[str, Callable[[ServiceResult, Console, bool], None]] = {
    "declare_interactor": _render_scaffold,
    "attach_usecase": _render_scaffold,
}
