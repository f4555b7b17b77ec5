"""Compositor gateway interface.

Everything hyprdyn knows about the outside world goes through these four
calls.  Each is a blocking round trip; mutations are assumed to be applied
before the call returns, so callers never re-read between steps.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from hyprdyn.models.hyprland import Monitor, Workspace


class IpcError(RuntimeError):
    """A compositor request failed (transport, protocol, or rejected dispatch)."""


@runtime_checkable
class CompositorGateway(Protocol):
    """Synchronous protocol for querying and mutating compositor workspaces."""

    def list_monitors(self) -> list[Monitor]:
        """Snapshot of all monitors.  Raises ``IpcError`` on failure."""
        ...

    def list_workspaces(self) -> list[Workspace]:
        """Snapshot of all workspaces on all monitors.  Raises ``IpcError`` on failure."""
        ...

    def rename_workspace(self, workspace_id: int, name: str) -> None:
        """Rename the workspace with the given id.  Raises ``IpcError`` on failure."""
        ...

    def switch_or_create(self, name: str) -> None:
        """Switch to the named workspace, creating it if absent."""
        ...
