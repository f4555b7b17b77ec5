"""Hyprland request-socket client.

Hyprland listens on ``.socket.sock`` inside its instance directory::

    $XDG_RUNTIME_DIR/hypr/$HYPRLAND_INSTANCE_SIGNATURE/.socket.sock

Releases before 0.40 used ``/tmp/hypr/...`` instead; both are probed.

Every request opens a fresh connection, writes ``{flags}/{command}`` and
reads the reply until the compositor closes the socket.  This is the same
exchange ``hyprctl`` performs, so ``j/workspaces`` here is
``hyprctl -j workspaces`` there.
"""

from __future__ import annotations

import json
import socket
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from hyprdyn.gateway.base import IpcError
from hyprdyn.models.hyprland import Monitor, Workspace
from hyprdyn.settings import HyprdynSettings

SOCKET_NAME = ".socket.sock"
LEGACY_RUNTIME_DIR = Path("/tmp")  # noqa: S108

_RECV_CHUNK = 8192


def discover_socket_path(instance_signature: str | None, runtime_dir: str | None) -> Path:
    """Locate the request socket of the running Hyprland instance.

    Raises ``IpcError`` when no instance signature is available, which means
    the process was not started from inside a Hyprland session.
    """
    if not instance_signature:
        msg = "HYPRLAND_INSTANCE_SIGNATURE is not set; is Hyprland running?"
        raise IpcError(msg)

    candidates = []
    if runtime_dir:
        candidates.append(Path(runtime_dir) / "hypr" / instance_signature / SOCKET_NAME)
    candidates.append(LEGACY_RUNTIME_DIR / "hypr" / instance_signature / SOCKET_NAME)

    for path in candidates:
        if path.exists():
            return path
    # Nothing on disk yet; report the preferred location in the connect error.
    return candidates[0]


class HyprlandSocket:
    """``CompositorGateway`` backed by Hyprland's request socket.

    Construction does no I/O; the socket path is resolved on first request so
    ``--help`` works outside a Hyprland session.
    """

    def __init__(
        self,
        socket_path: str | Path | None = None,
        *,
        instance_signature: str | None = None,
        runtime_dir: str | None = None,
        timeout: float = 5.0,
    ) -> None:
        self._socket_path = Path(socket_path) if socket_path else None
        self._instance_signature = instance_signature
        self._runtime_dir = runtime_dir
        self._timeout = timeout

    @classmethod
    def from_settings(cls, settings: HyprdynSettings) -> HyprlandSocket:
        return cls(
            settings.socket_path,
            instance_signature=settings.instance_signature,
            runtime_dir=settings.runtime_dir,
            timeout=settings.ipc_timeout,
        )

    @property
    def socket_path(self) -> Path:
        if self._socket_path is None:
            self._socket_path = discover_socket_path(self._instance_signature, self._runtime_dir)
        return self._socket_path

    # -- Queries ---------------------------------------------------------------

    def list_monitors(self) -> list[Monitor]:
        return self._query("monitors", Monitor)

    def list_workspaces(self) -> list[Workspace]:
        return self._query("workspaces", Workspace)

    # -- Dispatches ------------------------------------------------------------

    def rename_workspace(self, workspace_id: int, name: str) -> None:
        self._dispatch(f"renameworkspace {workspace_id} {name}")

    def switch_or_create(self, name: str) -> None:
        self._dispatch(f"workspace name:{name}")

    # -- Transport -------------------------------------------------------------

    def _query(self, command: str, model: type[Monitor] | type[Workspace]) -> list:
        raw = self.request(command, flags="j")
        try:
            items = json.loads(raw)
        except json.JSONDecodeError as exc:
            msg = f"Malformed JSON in reply to '{command}': {exc}"
            raise IpcError(msg) from None
        if not isinstance(items, list):
            msg = f"Expected a JSON array in reply to '{command}', got {type(items).__name__}"
            raise IpcError(msg)
        try:
            return [model.model_validate(item) for item in items]
        except ValidationError as exc:
            msg = f"Unexpected record shape in reply to '{command}': {exc}"
            raise IpcError(msg) from None

    def _dispatch(self, command: str) -> None:
        reply = self.request(f"dispatch {command}").strip()
        if reply != "ok":
            msg = f"Dispatch '{command}' rejected: {reply or '<empty reply>'}"
            raise IpcError(msg)

    def request(self, command: str, *, flags: str = "") -> str:
        """Send one raw request and return the decoded reply."""
        payload = f"{flags}/{command}"
        path = self.socket_path
        logger.debug("IPC -> {} ({})", payload, path)
        try:
            with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
                sock.settimeout(self._timeout)
                sock.connect(str(path))
                sock.sendall(payload.encode("utf-8"))
                chunks = []
                while chunk := sock.recv(_RECV_CHUNK):
                    chunks.append(chunk)
        except OSError as exc:
            # socket.timeout is an OSError subclass.
            msg = f"Hyprland request '{payload}' failed on {path}: {exc}"
            raise IpcError(msg) from exc
        reply = b"".join(chunks).decode("utf-8", errors="replace")
        logger.debug("IPC <- {} bytes", len(reply))
        return reply
