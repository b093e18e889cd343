"""Read-only queries over an outline forest."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from todotree.schemas import NodeKind, TodoNode

# Nested (name, kind, children) tuples; equal for structurally equal forests.
Signature = tuple[tuple[str, NodeKind, "Signature"], ...]


@dataclass(frozen=True)
class NodeLocation:
    """Where a node sits in the forest.

    ``parent`` is None for root nodes; ``index`` is the position among the
    parent's children (or among the roots).
    """

    node: TodoNode
    parent: TodoNode | None
    index: int


def iter_with_depth(forest: Iterable[TodoNode], depth: int = 0) -> Iterator[tuple[TodoNode, int]]:
    """Yield ``(node, depth)`` pairs in display (pre-order) order."""
    for node in forest:
        yield node, depth
        yield from iter_with_depth(node.children, depth + 1)


def locate(forest: Sequence[TodoNode], node_id: str) -> NodeLocation | None:
    """Find ``node_id`` and return its location, or None when absent."""

    def _search(nodes: Sequence[TodoNode], parent: TodoNode | None) -> NodeLocation | None:
        for index, node in enumerate(nodes):
            if node.id == node_id:
                return NodeLocation(node=node, parent=parent, index=index)
            found = _search(node.children, node)
            if found is not None:
                return found
        return None

    return _search(forest, None)


def find_node(forest: Sequence[TodoNode], node_id: str) -> TodoNode | None:
    """Return the node with ``node_id`` or None."""
    location = locate(forest, node_id)
    return location.node if location else None


def parent_ids(forest: Iterable[TodoNode]) -> dict[str, str | None]:
    """Map every node id to its parent's id (None for roots)."""
    parents: dict[str, str | None] = {}

    def _walk(nodes: Iterable[TodoNode], parent_id: str | None) -> None:
        for node in nodes:
            parents[node.id] = parent_id
            _walk(node.children, node.id)

    _walk(forest, None)
    return parents


def ancestor_ids(forest: Iterable[TodoNode], node_id: str) -> list[str]:
    """Ids on the chain from ``node_id``'s parent up to its root."""
    parents = parent_ids(forest)
    chain: list[str] = []
    current = parents.get(node_id)
    while current is not None:
        chain.append(current)
        current = parents.get(current)
    return chain


def count_nodes(forest: Iterable[TodoNode]) -> int:
    return sum(1 for _ in iter_with_depth(forest))


def outline_signature(forest: Iterable[TodoNode]) -> Signature:
    """Structural fingerprint of the forest that ignores node ids."""
    return tuple((node.name, node.kind, outline_signature(node.children)) for node in forest)
