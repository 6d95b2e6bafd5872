"""Structural locator — finds declaration bodies by textual markers only.

There is no Go parser here. An interface body is found by its literal
opener line; a struct's extent is found by brace counting from its
opener. The brace counter skips comments and string/rune literals so that
delimiters inside them do not unbalance the count.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cleanctl.domain.errors import StructureNotFound

if TYPE_CHECKING:
    from collections.abc import Iterator


def interface_opener(name: str) -> str:
    return f"type {name} interface {{\n"


def record_opener(name: str) -> str:
    return f"type {name} struct {{\n"


def struct_declaration(name: str) -> str:
    """Declaration marker used to detect an existing model struct."""
    return f"type {name} struct {{"


def locate_interface_body(text: str, name: str) -> tuple[int, int]:
    """Return ``(prefix_end, suffix_start)`` for the interface *name*.

    Both offsets point right after the opener line, i.e. before anything
    already in the body. The first occurrence wins; uniqueness is not
    checked.

    Raises:
        StructureNotFound: the opener does not occur in *text*.
    """
    opener = interface_opener(name)
    start = text.find(opener)
    if start == -1:
        msg = f"Interface {name} not found"
        raise StructureNotFound(msg)
    end = start + len(opener)
    return end, end


def locate_record_method_region(text: str, name: str) -> int:
    """Return the offset just past the closing brace of struct *name*.

    Counts ``{`` and ``}`` from the first struct opener until depth returns
    to zero, so nested blocks never end the scan early.

    Raises:
        StructureNotFound: the opener is missing or the braces never balance.
    """
    start = text.find(record_opener(name))
    if start == -1:
        msg = f"Implementation {name} not found"
        raise StructureNotFound(msg)

    depth = 0
    for index, char in _code_chars(text, start):
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index + 1
    msg = f"Closing brace of {name} not found"
    raise StructureNotFound(msg)


def _code_chars(text: str, start: int) -> Iterator[tuple[int, str]]:
    """Yield ``(index, char)`` for characters outside comments and literals."""
    i = start
    n = len(text)
    while i < n:
        char = text[i]
        nxt = text[i + 1] if i + 1 < n else ""
        if char == "/" and nxt == "/":
            newline = text.find("\n", i)
            i = n if newline == -1 else newline
            continue
        if char == "/" and nxt == "*":
            close = text.find("*/", i + 2)
            i = n if close == -1 else close + 2
            continue
        if char == "`":
            close = text.find("`", i + 1)
            i = n if close == -1 else close + 1
            continue
        if char in ('"', "'"):
            i = _skip_quoted(text, i, char)
            continue
        yield i, char
        i += 1


def _skip_quoted(text: str, start: int, quote: str) -> int:
    """Index just past an interpreted string or rune literal.

    Literals cannot span lines, so an unterminated one ends at the newline.
    """
    i = start + 1
    n = len(text)
    while i < n:
        char = text[i]
        if char == "\\":
            i += 2
            continue
        if char == quote:
            return i + 1
        if char == "\n":
            return i
        i += 1
    return n
