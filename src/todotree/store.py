"""User-scoped storage of the canonical outline text."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Protocol

import httpx

from todotree.config import (
    DOCUMENT_KEY,
    TODOTREE_STORE_AUTH,
    TODOTREE_STORE_PATH,
    TODOTREE_STORE_URL,
)
from todotree.exceptions import DocumentNotFoundError, OutlineFileError, StoreError
from todotree.files import read_outline_file, write_outline_file
from todotree.http_utils import request_with_retries

logger = logging.getLogger(__name__)

_USER_ID_RE = re.compile(r"^[A-Za-z0-9_-]{1,128}$")

NOT_FOUND_MESSAGE = "No saved mission log found."


class OutlineStore(Protocol):
    """Loads and saves one outline text blob per user."""

    async def load(self, user_id: str) -> str: ...

    async def save(self, user_id: str, text: str) -> None: ...


def validate_user_id(user_id: str) -> str:
    """Return ``user_id`` if it is safe to use as a record key.

    Raises:
        ValueError: If the id is empty or contains characters other than
            letters, digits, ``_`` and ``-``.
    """
    if not _USER_ID_RE.match(user_id or ""):
        raise ValueError(f"Invalid user id: {user_id!r}")
    return user_id


class LocalOutlineStore:
    """Stores outlines as text files under ``base_path/users/<id>/``."""

    def __init__(self, base_path: Path = TODOTREE_STORE_PATH) -> None:
        self.base_path = base_path

    def record_path(self, user_id: str) -> Path:
        return self.base_path / "users" / validate_user_id(user_id) / f"{DOCUMENT_KEY}.txt"

    async def load(self, user_id: str) -> str:
        path = self.record_path(user_id)
        if not path.is_file():
            raise DocumentNotFoundError(NOT_FOUND_MESSAGE)
        try:
            return await read_outline_file(path)
        except OutlineFileError as exc:
            raise StoreError(str(exc)) from exc

    async def save(self, user_id: str, text: str) -> None:
        path = self.record_path(user_id)
        try:
            await write_outline_file(path, text)
        except OutlineFileError as exc:
            raise StoreError(str(exc)) from exc
        logger.debug("Saved outline for %s to %s", user_id, path)


class RemoteOutlineStore:
    """Stores outlines in a JSON REST record store.

    Records live at ``{base_url}/users/<id>/missionLog.json``; a ``null``
    body means nothing has been saved yet.
    """

    def __init__(
        self,
        base_url: str,
        *,
        auth_token: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.auth_token = auth_token
        self._client = client

    def record_url(self, user_id: str) -> str:
        return f"{self.base_url}/users/{validate_user_id(user_id)}/{DOCUMENT_KEY}.json"

    def _params(self) -> dict[str, str] | None:
        return {"auth": self.auth_token} if self.auth_token else None

    async def load(self, user_id: str) -> str:
        payload = await request_with_retries(
            "GET", self.record_url(user_id), client=self._client, params=self._params()
        )
        if payload is None:
            raise DocumentNotFoundError(NOT_FOUND_MESSAGE)
        if not isinstance(payload, str):
            raise StoreError(f"Unexpected record type for {user_id}: {type(payload).__name__}")
        return payload

    async def save(self, user_id: str, text: str) -> None:
        await request_with_retries(
            "PUT", self.record_url(user_id), client=self._client, params=self._params(), json=text
        )
        logger.debug("Saved outline for %s to %s", user_id, self.base_url)


def store_from_config() -> OutlineStore:
    """Pick the remote store when a URL is configured, else the local one."""
    if TODOTREE_STORE_URL:
        return RemoteOutlineStore(TODOTREE_STORE_URL, auth_token=TODOTREE_STORE_AUTH)
    return LocalOutlineStore(TODOTREE_STORE_PATH)
