"""Workspace locator -- resolves a position against every workspace on a monitor.

Unlike the planner, the locator is not limited to dynamic workspaces, and
``next`` / ``previous`` wrap around.
"""

from __future__ import annotations

from hyprdyn.models.enums import Position
from hyprdyn.models.hyprland import Workspace


class ActiveWorkspaceNotFoundError(LookupError):
    """The monitor's active workspace is missing from the fetched snapshot."""

    def __init__(self, workspace_id: int) -> None:
        super().__init__(f"Active workspace {workspace_id} not found among the monitor's workspaces")


class EmptyWorkspaceSetError(ValueError):
    """The monitor has no workspaces to resolve a position against."""

    def __init__(self) -> None:
        super().__init__("Monitor has no workspaces")


def locate(workspaces: list[Workspace], position: Position, active_id: int) -> Workspace:
    """Return the workspace at ``position``.  ``workspaces`` must be sorted by name."""
    count = len(workspaces)
    if count == 0:
        raise EmptyWorkspaceSetError

    if position is Position.START:
        return workspaces[0]
    if position is Position.END:
        return workspaces[-1]

    active_index = next((i for i, w in enumerate(workspaces) if w.id == active_id), None)
    if active_index is None:
        raise ActiveWorkspaceNotFoundError(active_id)

    step = 1 if position is Position.NEXT else -1
    return workspaces[(active_index + step) % count]


def format_address(workspace: Workspace) -> str:
    """Render a workspace as a ``hyprctl dispatch`` argument."""
    return f"name:{workspace.name}"
