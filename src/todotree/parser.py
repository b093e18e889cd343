"""Parse indented text into an outline forest."""

from __future__ import annotations

from dataclasses import dataclass, field

from todotree.config import TODOTREE_TAB_SIZE
from todotree.schemas import NodeKind, TodoNode

_ID_PREFIX = "item-"


@dataclass
class _Draft:
    """Mutable node used while the stack is still open."""

    id: str
    name: str
    kind: NodeKind
    children: list["_Draft"] = field(default_factory=list)

    def freeze(self) -> TodoNode:
        return TodoNode(
            id=self.id,
            name=self.name,
            kind=self.kind,
            children=tuple(child.freeze() for child in self.children),
        )


def parse_outline(text: str, *, tab_size: int = TODOTREE_TAB_SIZE) -> list[TodoNode]:
    """Build an ordered forest from indented text.

    Each non-blank line becomes a node whose depth follows from how far it is
    indented relative to the open scopes above it. Lines directly under the
    virtual root become categories, everything nested deeper becomes a task.
    Ids are assigned in reading order (``item-0``, ``item-1``, ...).

    Args:
        text: The outline text. Lines are separated by ``\\n``; trailing
            whitespace and ``\\r`` are ignored.
        tab_size: Column width used for tabs in the leading whitespace.

    Returns:
        The root nodes in document order. Never raises; empty or
        whitespace-only input yields an empty list.
    """
    roots: list[_Draft] = []
    # (children list to append to, indentation level); the first entry is
    # the virtual root and is never popped.
    stack: list[tuple[list[_Draft], int]] = [(roots, -1)]
    next_id = 0

    for raw_line in text.split("\n"):
        line = raw_line.rstrip()
        if not line:
            continue

        name = line.strip()
        level = measure_indent(line, tab_size=tab_size)

        while len(stack) > 1 and stack[-1][1] >= level:
            stack.pop()

        siblings = stack[-1][0]
        kind = NodeKind.CATEGORY if len(stack) == 1 else NodeKind.TASK
        draft = _Draft(id=f"{_ID_PREFIX}{next_id}", name=name, kind=kind)
        next_id += 1

        siblings.append(draft)
        stack.append((draft.children, level))

    return [draft.freeze() for draft in roots]


def measure_indent(line: str, *, tab_size: int = TODOTREE_TAB_SIZE) -> int:
    """Return the column width of the leading whitespace of ``line``."""
    stripped = line.lstrip()
    indent = line[: len(line) - len(stripped)]
    return len(indent.expandtabs(tab_size))
