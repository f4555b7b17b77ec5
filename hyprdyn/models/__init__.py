"""Data models for compositor snapshots."""

from hyprdyn.models.enums import Position
from hyprdyn.models.hyprland import Monitor, Workspace, WorkspaceRef

__all__ = [
    "Monitor",
    "Position",
    "Workspace",
    "WorkspaceRef",
]
