"""Pydantic models for the outline API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from server.server_config import MAX_OUTLINE_CHARS
from todotree.schemas import DropPosition, TodoNode


class OutlineTextRequest(BaseModel):
    """Request carrying the outline text the client is currently showing.

    Attributes
    ----------
    text : str
        Indented outline text. Node ids in follow-up requests refer to the
        ids assigned when this text is parsed.

    """

    text: str = Field(..., max_length=MAX_OUTLINE_CHARS, description="Indented outline text")


class MoveOutlineRequest(OutlineTextRequest):
    """Request model for the /api/outline/move endpoint.

    Attributes
    ----------
    source_id : str
        Id of the node to move.
    container_id : str | None
        Id of the new parent; None moves the node to the root level.
    index : int
        Position among the container's children after removal of the source.

    """

    source_id: str = Field(..., description="Node to move")
    container_id: str | None = Field(default=None, description="New parent id, null for root")
    index: int = Field(default=0, description="Target index, clamped into range")


class DropOutlineRequest(OutlineTextRequest):
    """Request model for the /api/outline/drop endpoint.

    Attributes
    ----------
    source_id : str
        Id of the dragged node.
    target_id : str | None
        Id of the node the pointer is over; None drops at the end of the list.
    position : DropPosition
        ``before`` or ``after`` the target.

    """

    source_id: str = Field(..., description="Dragged node")
    target_id: str | None = Field(default=None, description="Hovered node, null for the list end")
    position: DropPosition = Field(default=DropPosition.AFTER, description="Drop position")


class OutlineResponse(BaseModel):
    """Parsed outline returned by the engine endpoints.

    Attributes
    ----------
    text : str
        Canonical text for ``nodes``.
    nodes : list[TodoNode]
        Root nodes with their subtrees.
    count : int
        Total number of nodes.
    changed : bool | None
        For move and drop requests, whether the outline changed.

    """

    text: str = Field(..., description="Canonical outline text")
    nodes: list[TodoNode] = Field(default_factory=list, description="Outline forest")
    count: int = Field(..., description="Total number of nodes")
    changed: bool | None = Field(default=None, description="Whether a move took effect")


class SaveOutlineRequest(OutlineTextRequest):
    """Request model for storing a user's outline."""


class UserOutlineResponse(BaseModel):
    """Stored outline of a user.

    Attributes
    ----------
    user_id : str
        Opaque user identifier.
    text : str
        The stored outline text.

    """

    user_id: str = Field(..., description="User identifier")
    text: str = Field(..., description="Stored outline text")


class ErrorResponse(BaseModel):
    """Error response model.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.

    """

    error: str = Field(..., description="Error message")
