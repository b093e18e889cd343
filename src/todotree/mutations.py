"""Structural moves on an outline forest.

Every relocation funnels into :func:`move_node`, which detaches a subtree
and inserts it under a new container in one step. Pointer-driven drops are
first normalized by :func:`resolve_drop` into the same container/index form.

Invalid requests (unknown ids, moving a node into itself or its own subtree)
leave the forest untouched: the very same list object is returned, so callers
can test ``result is forest`` to detect a no-op.
"""

from __future__ import annotations

import logging
from typing import Sequence

from todotree.schemas import ROOT, DropPosition, DropRequest, MoveRequest, NodeKind, TodoNode
from todotree.tree_utils import ancestor_ids, locate

logger = logging.getLogger(__name__)


def move_node(
    forest: list[TodoNode],
    source_id: str,
    container_id: str | None,
    index: int,
) -> list[TodoNode]:
    """Move ``source_id`` with its subtree into ``container_id`` at ``index``.

    Args:
        forest: The current root nodes. Never modified.
        source_id: Id of the node to relocate.
        container_id: Id of the new parent, or ``ROOT`` for the root sequence.
        index: Target position among the container's children, counted after
            the source has been removed. Clamped into range.

    Returns:
        A new forest with the node relocated, or ``forest`` itself when the
        move is not allowed.
    """
    location = locate(forest, source_id)
    if location is None:
        logger.debug("Move noop: source %s not found", source_id)
        return forest

    if container_id is not ROOT:
        if container_id == source_id:
            logger.debug("Move noop: %s cannot contain itself", source_id)
            return forest
        if locate(forest, container_id) is None:
            logger.debug("Move noop: container %s not found", container_id)
            return forest
        if source_id in ancestor_ids(forest, container_id):
            logger.debug(
                "Move noop: container %s lies inside the subtree of %s", container_id, source_id
            )
            return forest

    subtree = location.node
    remaining = _detach(forest, source_id)

    if container_id is ROOT:
        moved = list(_insert_at(remaining, index, subtree))
    else:
        moved = list(_insert_into(remaining, container_id, index, subtree))

    logger.debug("Moved %s into %s at %d", source_id, container_id or "root", index)
    return moved


def resolve_drop(forest: list[TodoNode], request: DropRequest) -> MoveRequest | None:
    """Translate a drop next to a target node into a container/index move.

    ``before`` places the dragged node directly ahead of the target and
    ``after`` directly behind it, except that a category dropped after a
    task becomes that task's first child. A drop without a target appends to
    the root sequence.

    Returns:
        The equivalent :class:`MoveRequest`, or None when the drop cannot be
        resolved (unknown ids, or the target is the dragged node).
    """
    if request.source_id == request.target_id:
        return None

    source = locate(forest, request.source_id)
    if source is None:
        return None

    if request.target_id is None:
        root_count = len(forest) - (1 if source.parent is None else 0)
        return MoveRequest(source_id=request.source_id, container_id=ROOT, index=root_count)

    target = locate(forest, request.target_id)
    if target is None:
        return None

    if request.position is DropPosition.AFTER and _nests_after(source.node, target.node):
        return MoveRequest(source_id=request.source_id, container_id=target.node.id, index=0)

    container_id = target.parent.id if target.parent is not None else ROOT
    source_container = source.parent.id if source.parent is not None else ROOT

    # Indices are measured once the dragged node has left the sibling list.
    index = target.index
    if source_container == container_id and source.index < target.index:
        index -= 1
    if request.position is DropPosition.AFTER:
        index += 1

    return MoveRequest(source_id=request.source_id, container_id=container_id, index=index)


def apply_request(forest: list[TodoNode], request: MoveRequest | DropRequest) -> list[TodoNode]:
    """Apply either request shape through the single move primitive."""
    if isinstance(request, DropRequest):
        resolved = resolve_drop(forest, request)
        if resolved is None:
            logger.debug("Drop noop: cannot resolve %s", request)
            return forest
        request = resolved
    return move_node(forest, request.source_id, request.container_id, request.index)


def _nests_after(dragged: TodoNode, target: TodoNode) -> bool:
    return dragged.kind is NodeKind.CATEGORY and target.kind is NodeKind.TASK


def _detach(nodes: Sequence[TodoNode], node_id: str) -> Sequence[TodoNode]:
    # Returns ``nodes`` itself when node_id is not below it.
    for position, node in enumerate(nodes):
        if node.id == node_id:
            return (*nodes[:position], *nodes[position + 1 :])
        pruned = _detach(node.children, node_id)
        if pruned is not node.children:
            replaced = node.model_copy(update={"children": tuple(pruned)})
            return (*nodes[:position], replaced, *nodes[position + 1 :])
    return nodes


def _insert_into(
    nodes: Sequence[TodoNode], container_id: str, index: int, subtree: TodoNode
) -> Sequence[TodoNode]:
    for position, node in enumerate(nodes):
        if node.id == container_id:
            children = _insert_at(node.children, index, subtree)
        else:
            children = _insert_into(node.children, container_id, index, subtree)
            if children is node.children:
                continue
        replaced = node.model_copy(update={"children": tuple(children)})
        return (*nodes[:position], replaced, *nodes[position + 1 :])
    return nodes


def _insert_at(nodes: Sequence[TodoNode], index: int, subtree: TodoNode) -> tuple[TodoNode, ...]:
    index = max(0, min(index, len(nodes)))
    return (*nodes[:index], subtree, *nodes[index:])
