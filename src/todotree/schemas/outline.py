"""Outline tree models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class NodeKind(str, Enum):
    """Kind tag assigned to a node when it is parsed."""

    CATEGORY = "category"
    TASK = "task"


class TodoNode(BaseModel):
    """A node of the outline forest.

    Nodes are immutable; structural edits build new nodes and share the
    untouched subtrees. ``kind`` records the depth the node was parsed at and
    is carried unchanged through moves.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = Field(..., min_length=1)
    kind: NodeKind
    children: tuple["TodoNode", ...] = ()


# Destination container meaning "the root sequence of the forest".
ROOT = None
