"""Outline engine endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from server.models import DropOutlineRequest, MoveOutlineRequest, OutlineResponse, OutlineTextRequest
from todotree.mutations import apply_request
from todotree.parser import parse_outline
from todotree.schemas import DropRequest, MoveRequest, TodoNode
from todotree.serializer import serialize_outline
from todotree.tree_utils import count_nodes
from todotree.utils.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/outline", tags=["outline"])


@router.post("/parse")
async def parse_endpoint(request: OutlineTextRequest) -> OutlineResponse:
    """Parse outline text and return its forest and canonical form.

    **Parameters**

    - **request** (`OutlineTextRequest`): the outline text

    **Returns**

    - **OutlineResponse**: canonical text, nodes and node count
    """
    forest = parse_outline(request.text)
    return _outline_response(forest)


@router.post("/move")
async def move_endpoint(request: MoveOutlineRequest) -> OutlineResponse:
    """Move a node into a container at an index.

    **Parameters**

    - **request** (`MoveOutlineRequest`): outline text plus source, container and index

    **Returns**

    - **OutlineResponse**: the outline after the move; ``changed`` is false when
      the move was rejected (unknown ids or a move into the node's own subtree)
    """
    forest = parse_outline(request.text)
    move = MoveRequest(source_id=request.source_id, container_id=request.container_id, index=request.index)
    moved = apply_request(forest, move)
    changed = moved is not forest
    logger.info("Move request", extra={"source_id": request.source_id, "changed": changed})
    return _outline_response(moved, changed=changed)


@router.post("/drop")
async def drop_endpoint(request: DropOutlineRequest) -> OutlineResponse:
    """Drop a node before or after another node.

    **Parameters**

    - **request** (`DropOutlineRequest`): outline text plus dragged node, target and position

    **Returns**

    - **OutlineResponse**: the outline after the drop, with ``changed`` set
    """
    forest = parse_outline(request.text)
    drop = DropRequest(source_id=request.source_id, target_id=request.target_id, position=request.position)
    moved = apply_request(forest, drop)
    changed = moved is not forest
    logger.info(
        "Drop request",
        extra={"source_id": request.source_id, "target_id": request.target_id, "changed": changed},
    )
    return _outline_response(moved, changed=changed)


def _outline_response(forest: list[TodoNode], *, changed: bool | None = None) -> OutlineResponse:
    return OutlineResponse(
        text=serialize_outline(forest),
        nodes=forest,
        count=count_nodes(forest),
        changed=changed,
    )
