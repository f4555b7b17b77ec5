"""Insertion planner -- makes room for a new dynamic workspace.

Dynamic workspaces on a monitor are kept dense: their indices are exactly
``0..n-1``.  Inserting at index ``pos`` renames every workspace at sorted
position ``i >= pos`` to index ``i + 1`` and then switches to (creating)
``{prefix}{pos:05d}``.

Planning is pure; ``apply_plan`` performs the mutations in plan order.
There is no compositor transaction: if a dispatch fails mid-plan, the renames
already issued stay applied and the error propagates.  Re-running ``new``
after fixing the cause re-densifies the group.
"""

from __future__ import annotations

from loguru import logger
from pydantic import BaseModel, Field

from hyprdyn.gateway.base import CompositorGateway, IpcError
from hyprdyn.models.enums import Position
from hyprdyn.models.hyprland import Workspace
from hyprdyn.naming import make_name, parse_index


class RenameStep(BaseModel):
    workspace_id: int
    old_name: str
    new_name: str


class InsertionPlan(BaseModel):
    """Ordered mutations for one ``new`` invocation."""

    index: int
    renames: list[RenameStep] = Field(default_factory=list)
    create_name: str


def resolve_target_index(
    position: Position,
    workspaces: list[Workspace],
    active_name: str,
    prefix: str,
) -> int:
    """Index the new workspace will occupy among ``workspaces`` (sorted, dynamic only).

    ``next`` / ``previous`` are relative to the active workspace when it is
    itself dynamic; otherwise they fall back to the end / the start.

    The active index is normally decoded from its name.  When out-of-band
    renames left gaps and the decoded index lies past the end of the group,
    the active workspace's sorted position is used instead, so the new
    workspace still lands right after (``next``) or right before
    (``previous``) it.
    """
    count = len(workspaces)
    active_index = parse_index(prefix, active_name)

    if active_index is not None and active_index >= count:
        sorted_index = next((i for i, w in enumerate(workspaces) if w.name == active_name), None)
        logger.warning(
            "Active workspace {} decodes past the end of {} dynamic workspaces; using sorted position {}",
            active_name,
            count,
            sorted_index,
        )
        active_index = sorted_index

    if position is Position.START:
        return 0
    if position is Position.END:
        return count
    if position is Position.NEXT:
        return active_index + 1 if active_index is not None else count
    return active_index if active_index is not None else 0


def plan_insertion(workspaces: list[Workspace], index: int, prefix: str) -> InsertionPlan:
    """Build the rename-then-create plan for inserting at ``index``.

    ``workspaces`` must be sorted by name.  Workspaces already carrying their
    target name are left out of the rename list.
    """
    renames = []
    for i, workspace in enumerate(workspaces):
        new_name = make_name(prefix, i if i < index else i + 1)
        if new_name != workspace.name:
            renames.append(RenameStep(workspace_id=workspace.id, old_name=workspace.name, new_name=new_name))
    return InsertionPlan(index=index, renames=renames, create_name=make_name(prefix, index))


def apply_plan(gateway: CompositorGateway, plan: InsertionPlan) -> None:
    """Issue the plan's renames in order, then create the new workspace.

    Stops at the first failing dispatch; earlier renames are not rolled back.
    """
    applied = 0
    try:
        for step in plan.renames:
            logger.debug("Rename workspace {}: {} -> {}", step.workspace_id, step.old_name, step.new_name)
            gateway.rename_workspace(step.workspace_id, step.new_name)
            applied += 1
        logger.debug("Switch to new workspace {}", plan.create_name)
        gateway.switch_or_create(plan.create_name)
    except IpcError:
        logger.error(
            "Insertion of {} aborted after {} of {} renames; dynamic workspaces may need a re-run",
            plan.create_name,
            applied,
            len(plan.renames),
        )
        raise
    logger.info("Created {} ({} workspaces shifted)", plan.create_name, len(plan.renames))
