"""Per-user outline storage endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from server.models import ErrorResponse, SaveOutlineRequest, UserOutlineResponse
from todotree.exceptions import DocumentNotFoundError, StoreError
from todotree.serializer import canonicalize
from todotree.store import OutlineStore, store_from_config, validate_user_id
from todotree.utils.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])

COMMON_STORE_RESPONSES: dict[int | str, dict] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Invalid user id"},
    status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse, "description": "Record store failure"},
}


def get_store() -> OutlineStore:
    """Store dependency; overridden in tests."""
    return store_from_config()


@router.get(
    "/{user_id}/outline",
    responses={
        **COMMON_STORE_RESPONSES,
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Nothing saved yet"},
    },
    response_model=None,
)
async def load_outline(user_id: str, store: OutlineStore = Depends(get_store)) -> UserOutlineResponse | JSONResponse:
    """Return the outline saved for ``user_id``.

    **Path Parameters**
    - **user_id** (`str`): opaque user identifier

    **Returns**
    - **UserOutlineResponse**: the stored text, or an error response
    """
    try:
        validate_user_id(user_id)
        text = await store.load(user_id)
    except ValueError as exc:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))
    except DocumentNotFoundError as exc:
        return _error(status.HTTP_404_NOT_FOUND, str(exc))
    except StoreError as exc:
        logger.error("Loading outline failed", extra={"user_id": user_id, "error": str(exc)})
        return _error(status.HTTP_502_BAD_GATEWAY, "Error loading from database. Please try again.")
    return UserOutlineResponse(user_id=user_id, text=text)


@router.put("/{user_id}/outline", responses=COMMON_STORE_RESPONSES, response_model=None)
async def save_outline(
    user_id: str,
    request: SaveOutlineRequest,
    store: OutlineStore = Depends(get_store),
) -> UserOutlineResponse | JSONResponse:
    """Store the canonical form of the given outline for ``user_id``.

    **Path Parameters**
    - **user_id** (`str`): opaque user identifier

    **Returns**
    - **UserOutlineResponse**: the text as stored, or an error response
    """
    text = canonicalize(request.text)
    try:
        validate_user_id(user_id)
        await store.save(user_id, text)
    except ValueError as exc:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))
    except StoreError as exc:
        logger.error("Saving outline failed", extra={"user_id": user_id, "error": str(exc)})
        return _error(status.HTTP_502_BAD_GATEWAY, "Error saving to database. Please try again.")
    logger.info("Saved outline", extra={"user_id": user_id, "chars": len(text)})
    return UserOutlineResponse(user_id=user_id, text=text)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())
