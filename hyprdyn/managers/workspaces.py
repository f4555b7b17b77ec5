"""Per-monitor workspace listings, sorted by name.

Name order is the only ordering hyprdyn uses.  For dynamic workspaces it
coincides with index order thanks to zero padding (see ``hyprdyn.naming``).
"""

from __future__ import annotations

from hyprdyn.gateway.base import CompositorGateway
from hyprdyn.models.hyprland import Monitor, Workspace
from hyprdyn.naming import is_dynamic


def _by_name(workspaces: list[Workspace]) -> list[Workspace]:
    return sorted(workspaces, key=lambda w: w.name)


def monitor_workspaces(gateway: CompositorGateway, monitor: Monitor) -> list[Workspace]:
    """All workspaces on ``monitor``, sorted ascending by name."""
    return _by_name([w for w in gateway.list_workspaces() if w.monitor_id == monitor.id])


def dynamic_workspaces(gateway: CompositorGateway, monitor: Monitor, prefix: str) -> list[Workspace]:
    """Workspaces on ``monitor`` whose name starts with ``prefix``, sorted ascending by name."""
    return _by_name([
        w for w in gateway.list_workspaces() if w.monitor_id == monitor.id and is_dynamic(prefix, w.name)
    ])
