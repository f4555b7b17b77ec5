"""Monitor resolution: a named monitor, or the focused one."""

from __future__ import annotations

from hyprdyn.gateway.base import CompositorGateway
from hyprdyn.models.hyprland import Monitor


class MonitorNotFoundError(LookupError):
    """The requested monitor does not exist (or no monitor is focused)."""

    def __init__(self, name: str | None = None) -> None:
        if name is not None:
            super().__init__(f"Monitor '{name}' not found")
        else:
            super().__init__("No focused monitor reported by the compositor")


def resolve_monitor(gateway: CompositorGateway, name: str | None = None) -> Monitor:
    """Return the monitor called ``name`` (exact match), or the focused one if ``None``.

    Raises ``MonitorNotFoundError`` if nothing matches.
    """
    monitors = gateway.list_monitors()
    if name is None:
        match = next((m for m in monitors if m.focused), None)
    else:
        match = next((m for m in monitors if m.name == name), None)
    if match is None:
        raise MonitorNotFoundError(name)
    return match
