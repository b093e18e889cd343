"""Move request models issued by renderers."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class DropPosition(str, Enum):
    """Where a dragged node lands relative to the hovered node."""

    BEFORE = "before"
    AFTER = "after"


class MoveRequest(BaseModel):
    """Relocate ``source_id`` into ``container_id`` at ``index``.

    Attributes:
        source_id: Id of the node being moved.
        container_id: Id of the new parent, or None for the root sequence.
        index: Position among the destination's children once the source has
            been detached. Out-of-range values are clamped.
    """

    model_config = ConfigDict(frozen=True)

    source_id: str
    container_id: str | None = None
    index: int = 0


class DropRequest(BaseModel):
    """Pointer-driven move: drop ``source_id`` next to ``target_id``.

    Attributes:
        source_id: Id of the dragged node.
        target_id: Id of the hovered node, or None when dropped below the list.
        position: Which half of the target the pointer was over.
    """

    model_config = ConfigDict(frozen=True)

    source_id: str
    target_id: str | None = None
    position: DropPosition = DropPosition.AFTER
