"""Shared enumerations."""

from __future__ import annotations

from enum import StrEnum


class Position(StrEnum):
    """Relative locator used by both ``new`` and ``find``.

    For ``new`` it is relative to the dynamic workspaces on the monitor; for
    ``find`` it is relative to every workspace on the monitor.
    """

    START = "start"
    END = "end"
    NEXT = "next"
    PREVIOUS = "previous"
