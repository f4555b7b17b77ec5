"""Snapshots of compositor state as reported by ``hyprctl -j``.

These are read-only views fetched fresh for every invocation.  Hyprland owns
the data; field aliases follow its JSON keys.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class WorkspaceRef(BaseModel):
    """The ``{id, name}`` pair Hyprland embeds in monitor records."""

    id: int
    name: str


class Workspace(BaseModel):
    """One entry of ``j/workspaces``."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    monitor: str = ""
    monitor_id: int | None = Field(default=None, alias="monitorID")
    windows: int = 0


class Monitor(BaseModel):
    """One entry of ``j/monitors``."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    focused: bool = False
    active_workspace: WorkspaceRef = Field(alias="activeWorkspace")
