from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import click

from hyprdyn.execution.locator import ActiveWorkspaceNotFoundError, EmptyWorkspaceSetError, format_address, locate
from hyprdyn.execution.planner import apply_plan, plan_insertion, resolve_target_index
from hyprdyn.gateway import CompositorGateway, HyprlandSocket, IpcError
from hyprdyn.log import setup_logging
from hyprdyn.managers.monitors import MonitorNotFoundError, resolve_monitor
from hyprdyn.managers.workspaces import dynamic_workspaces, monitor_workspaces
from hyprdyn.models.enums import Position
from hyprdyn.naming import DEFAULT_PREFIX
from hyprdyn.settings import get_settings

POSITION = click.Choice([p.value for p in Position], case_sensitive=False)


class Invocation:
    """Per-process state shared by the subcommands."""

    def __init__(self, gateway: CompositorGateway, monitor_name: str | None, prefix: str) -> None:
        self.gateway = gateway
        self.monitor_name = monitor_name
        self.prefix = prefix


class _MonitorGroup(click.Group):
    """Group whose optional MONITOR argument never swallows a subcommand name.

    Plain click would bind ``new`` in ``hyprdyn new end`` to MONITOR.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        head = self._first_positional(args)
        if head is not None and args[head] in self.commands:
            args = [*args[:head], "", *args[head:]]
        return super().parse_args(ctx, args)

    def _first_positional(self, args: list[str]) -> int | None:
        takes_value = {
            opt
            for param in self.params
            if isinstance(param, click.Option) and not param.is_flag and not param.count
            for opt in param.opts
        }
        i = 0
        while i < len(args):
            token = args[i]
            if token == "--":
                return i + 1 if i + 1 < len(args) else None
            if token in takes_value:
                i += 2
                continue
            if token.startswith("-") and token != "-":
                i += 1
                continue
            return i
        return None


@contextmanager
def _fatal_errors() -> Iterator[None]:
    """Turn domain failures into a one-line error and exit status 1."""
    try:
        yield
    except (MonitorNotFoundError, ActiveWorkspaceNotFoundError, EmptyWorkspaceSetError, IpcError) as exc:
        raise click.ClickException(str(exc)) from exc


@click.group(cls=_MonitorGroup)
@click.version_option(package_name="hyprdyn")
@click.argument("monitor", required=False)
@click.option(
    "-p",
    "--prefix",
    default=DEFAULT_PREFIX,
    show_default=True,
    help="Prefix for this dynamic workspace group. Used to name the workspaces.",
)
@click.pass_context
def main(ctx: click.Context, monitor: str | None, prefix: str) -> None:
    """hyprdyn - ordered dynamic workspaces for Hyprland.

    MONITOR is the monitor whose workspaces are controlled; the focused one
    is used when omitted.
    """
    settings = get_settings()
    setup_logging(settings.log_level)

    # A gateway passed as ``obj`` (tests) replaces the real socket.
    gateway = ctx.obj if ctx.obj is not None else HyprlandSocket.from_settings(settings)
    ctx.obj = Invocation(gateway, monitor or None, prefix)


@main.command()
@click.argument("position", type=POSITION)
@click.pass_obj
def new(inv: Invocation, position: str) -> None:
    """Create a new workspace at POSITION, shifting later ones up by one."""
    with _fatal_errors():
        monitor = resolve_monitor(inv.gateway, inv.monitor_name)
        workspaces = dynamic_workspaces(inv.gateway, monitor, inv.prefix)
        index = resolve_target_index(Position(position), workspaces, monitor.active_workspace.name, inv.prefix)
        apply_plan(inv.gateway, plan_insertion(workspaces, index, inv.prefix))


@main.command()
@click.argument("position", type=POSITION)
@click.pass_obj
def find(inv: Invocation, position: str) -> None:
    """Print the address of the workspace at POSITION, for ``hyprctl dispatch``."""
    with _fatal_errors():
        monitor = resolve_monitor(inv.gateway, inv.monitor_name)
        workspaces = monitor_workspaces(inv.gateway, monitor)
        workspace = locate(workspaces, Position(position), monitor.active_workspace.id)
    click.echo(format_address(workspace))


if __name__ == "__main__":
    main()
