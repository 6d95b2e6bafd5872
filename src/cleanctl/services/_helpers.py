"""Shared service-layer helper functions."""

from __future__ import annotations

from typing import Any

from cleanctl.domain.names import capitalize, decapitalize, receiver_name


def append_block(text: str, block: str) -> str:
    """Append *block* to *text* after one blank line, ending with a newline.

    Existing bytes are never touched; only a separator is added.

    Examples:
        >>> append_block("", "type A struct {\\n}")
        'type A struct {\\n}\\n'
        >>> append_block("package x\\n", "type A struct {\\n}")
        'package x\\n\\ntype A struct {\\n}\\n'
        >>> append_block("package x", "type A struct {\\n}")
        'package x\\n\\ntype A struct {\\n}\\n'
    """
    if not text:
        return f"{block}\n"
    separator = "\n" if text.endswith("\n") else "\n\n"
    return f"{text}{separator}{block}\n"


def owner_values(owner: str) -> dict[str, Any]:
    """Template values naming the owner's interface, struct and receiver."""
    return {
        "interface": capitalize(owner),
        "struct": decapitalize(owner),
        "receiver": receiver_name(owner),
    }
