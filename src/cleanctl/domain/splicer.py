"""Splicer and idempotency guard.

A splice inserts a fragment at one offset and leaves every other byte of
the unit untouched: no re-indentation, no deduplication. The guard is a
literal test for the signature token of a use-case that must not be
preceded by an identifier character, checked before any splice so that
re-attaching a use-case is a no-op while ``Item`` is still told apart
from ``AddItem``.
"""

from __future__ import annotations

import re

from cleanctl.domain.layers import LayerKind, layer_spec
from cleanctl.domain.locator import locate_interface_body, locate_record_method_region
from cleanctl.domain.names import capitalize, decapitalize


def splice(text: str, offset: int, fragment: str) -> str:
    """Return ``text[:offset] + fragment + text[offset:]``."""
    if not 0 <= offset <= len(text):
        msg = f"Splice offset {offset} outside text of length {len(text)}"
        raise ValueError(msg)
    return text[:offset] + fragment + text[offset:]


def already_has(text: str, token: str) -> bool:
    """Whether *token* occurs in *text* at the start of an identifier.

    Examples:
        >>> already_has("AddItem(rqm)", "Item(")
        False
        >>> already_has("\\tItem(rqm)", "Item(")
        True
    """
    return re.search(rf"(?<![A-Za-z0-9_]){re.escape(token)}", text) is not None


def signature_token(kind: LayerKind, use_case: str) -> str:
    """Token identifying *use_case*'s method in a *kind* unit.

    Examples:
        >>> signature_token(LayerKind.VALIDATOR, "addItem")
        'ValidateAddItem('
    """
    return f"{layer_spec(kind).token_prefix}{capitalize(use_case)}("


def extend_unit(text: str, owner: str, signatures: str, methods: str) -> str:
    """Add method *signatures* to the owner's interface and *methods* after its struct.

    Signatures go first in the interface body. Methods go right after the
    struct's closing brace, as siblings of the declaration. Both offsets
    are computed on the text as it stands at each step.
    """
    prefix_end, _ = locate_interface_body(text, capitalize(owner))
    text = splice(text, prefix_end, signatures)
    region = locate_record_method_region(text, decapitalize(owner))
    return splice(text, region, methods)
