"""Name transforms shared by every generated unit.

Generated Go code uses the capitalized owner for the exported interface,
the decapitalized owner for the implementing struct, and the first
character of the latter as the method receiver.
"""

from __future__ import annotations

import re

UNIT_EXTENSION = ".go"

# A letter first: capitalize and decapitalize must yield two distinct Go names.
_IDENTIFIER = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")


def capitalize(text: str) -> str:
    """Upper-case the first character only.

    Examples:
        >>> capitalize("addItem")
        'AddItem'
        >>> capitalize("")
        ''
    """
    return text[:1].upper() + text[1:]


def decapitalize(text: str) -> str:
    """Lower-case the first character only.

    Examples:
        >>> decapitalize("OrderHandler")
        'orderHandler'
    """
    return text[:1].lower() + text[1:]


def receiver_name(owner: str) -> str:
    """Receiver variable for methods on the owner's struct."""
    return decapitalize(owner)[:1]


def dir_label(rel_path: str) -> str:
    """Last non-empty segment of a relative path.

    Examples:
        >>> dir_label("ifadapter/view/viewmodel/")
        'viewmodel'
    """
    segments = [s for s in rel_path.split("/") if s]
    return segments[-1] if segments else ""


def strip_unit_extension(name: str) -> str:
    """Drop a trailing ``.go`` so ``Order.go`` and ``Order`` name the same owner."""
    if name.endswith(UNIT_EXTENSION):
        return name[: -len(UNIT_EXTENSION)]
    return name


def validate_identifier(name: str) -> str:
    """Return *name* unchanged if it is identifier-shaped, else raise ValueError."""
    if not _IDENTIFIER.match(name):
        msg = f"Not a valid identifier: {name!r}"
        raise ValueError(msg)
    return name
