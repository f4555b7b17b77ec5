"""Dynamic workspace naming.

A dynamic workspace is named ``{prefix}{index:05d}``, e.g. ``:00003``.  The
fixed width keeps lexicographic order equal to numeric order for indices
``0..99999``, which is what lets the rest of the package sort by name.
"""

from __future__ import annotations

DEFAULT_PREFIX = ":"

INDEX_WIDTH = 5


def is_dynamic(prefix: str, name: str) -> bool:
    """Whether ``name`` belongs to the dynamic group marked by ``prefix``."""
    return name.startswith(prefix)


def make_name(prefix: str, index: int) -> str:
    """Encode ``index`` as a dynamic workspace name under ``prefix``."""
    if index < 0:
        msg = f"Workspace index must be non-negative, got {index}"
        raise ValueError(msg)
    return f"{prefix}{index:0{INDEX_WIDTH}d}"


def parse_index(prefix: str, name: str) -> int | None:
    """Decode the index of a dynamic workspace name.

    Returns ``None`` when ``name`` lacks the prefix or the remainder is not an
    unsigned decimal integer.  A single leading ``+`` is accepted, as in
    unsigned integer parsing.  Width is not checked: ``:7`` decodes to 7.
    """
    if not is_dynamic(prefix, name):
        return None
    rest = name[len(prefix) :]
    digits = rest[1:] if rest.startswith("+") else rest
    # str.isdigit() also accepts non-ASCII digits that int() rejects.
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    return int(digits)
