from hyprdyn.gateway.base import CompositorGateway, IpcError
from hyprdyn.gateway.hyprland import HyprlandSocket

__all__ = ["CompositorGateway", "HyprlandSocket", "IpcError"]
