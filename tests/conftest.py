"""Shared fixtures: an in-memory compositor standing in for Hyprland.

``FakeCompositor`` implements the ``CompositorGateway`` protocol on plain
lists and records every mutating call, so tests can assert both the end
state and the exact dispatch sequence.
"""

from __future__ import annotations

import pytest

from hyprdyn.gateway.base import IpcError
from hyprdyn.models.hyprland import Monitor, Workspace, WorkspaceRef
from hyprdyn.settings import _get_settings_cached


class FakeCompositor:
    def __init__(self) -> None:
        self.monitors: list[Monitor] = []
        self.workspaces: list[Workspace] = []
        self.calls: list[tuple] = []
        self.fail_after: int | None = None
        """Number of mutating calls to accept before raising ``IpcError``."""
        self._next_id = 1

    # -- Setup helpers ---------------------------------------------------------

    def add_monitor(self, name: str, *, focused: bool = False) -> Monitor:
        monitor = Monitor(
            id=len(self.monitors),
            name=name,
            focused=focused,
            active_workspace=WorkspaceRef(id=-1, name=""),
        )
        self.monitors.append(monitor)
        return monitor

    def add_workspace(self, name: str, monitor: str, *, active: bool = False) -> Workspace:
        mon = self._monitor(monitor)
        workspace = Workspace(id=self._next_id, name=name, monitor=mon.name, monitor_id=mon.id)
        self._next_id += 1
        self.workspaces.append(workspace)
        if active:
            mon.active_workspace = WorkspaceRef(id=workspace.id, name=workspace.name)
        return workspace

    def names_on(self, monitor: str) -> list[str]:
        mon = self._monitor(monitor)
        return sorted(w.name for w in self.workspaces if w.monitor_id == mon.id)

    def _monitor(self, name: str) -> Monitor:
        return next(m for m in self.monitors if m.name == name)

    def _mutate(self, call: tuple) -> None:
        if self.fail_after is not None and len(self.calls) >= self.fail_after:
            msg = f"Dispatch '{call[0]}' rejected: simulated failure"
            raise IpcError(msg)
        self.calls.append(call)

    # -- CompositorGateway -----------------------------------------------------

    def list_monitors(self) -> list[Monitor]:
        return [m.model_copy(deep=True) for m in self.monitors]

    def list_workspaces(self) -> list[Workspace]:
        return [w.model_copy() for w in self.workspaces]

    def rename_workspace(self, workspace_id: int, name: str) -> None:
        self._mutate(("rename", workspace_id, name))
        workspace = next(w for w in self.workspaces if w.id == workspace_id)
        workspace.name = name
        for mon in self.monitors:
            if mon.active_workspace.id == workspace_id:
                mon.active_workspace = WorkspaceRef(id=workspace_id, name=name)

    def switch_or_create(self, name: str) -> None:
        self._mutate(("switch", name))
        # Hyprland creates missing workspaces on the focused monitor.
        focused = next(m for m in self.monitors if m.focused)
        existing = next((w for w in self.workspaces if w.name == name), None)
        if existing is None:
            existing = self.add_workspace(name, focused.name)
        focused.active_workspace = WorkspaceRef(id=existing.id, name=existing.name)


@pytest.fixture
def compositor() -> FakeCompositor:
    """Two monitors; DP-1 is focused.  Workspaces are added per test."""
    fake = FakeCompositor()
    fake.add_monitor("DP-1", focused=True)
    fake.add_monitor("HDMI-A-1")
    return fake


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from the developer's real Hyprland session."""
    for key in ("HYPRLAND_INSTANCE_SIGNATURE", "XDG_RUNTIME_DIR", "HYPRDYN_SOCKET_PATH", "HYPRDYN_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    _get_settings_cached.cache_clear()
    yield
    _get_settings_cached.cache_clear()
