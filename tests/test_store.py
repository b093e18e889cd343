"""Tests for the user record stores."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from todotree import store as store_module
from todotree.exceptions import DocumentNotFoundError, StoreError
from todotree.store import (
    LocalOutlineStore,
    RemoteOutlineStore,
    store_from_config,
    validate_user_id,
)


def _json_response(payload: object) -> MagicMock:
    response = MagicMock()
    response.status_code = 200
    response.raise_for_status = MagicMock()
    response.json = MagicMock(return_value=payload)
    return response


class TestValidateUserId:
    """Tests for validate_user_id function."""

    @pytest.mark.parametrize("user_id", ["abc", "uid_123", "Xy-9"])
    def test_accepts_plain_ids(self, user_id: str) -> None:
        assert validate_user_id(user_id) == user_id

    @pytest.mark.parametrize("user_id", ["", "..", "a/b", "a.b", "a b", "x" * 129])
    def test_rejects_unsafe_ids(self, user_id: str) -> None:
        with pytest.raises(ValueError, match="Invalid user id"):
            validate_user_id(user_id)


class TestLocalOutlineStore:
    """Tests for LocalOutlineStore."""

    @pytest.mark.asyncio
    async def test_save_then_load(self, tmp_path: Path) -> None:
        store = LocalOutlineStore(tmp_path)

        await store.save("user1", "A\n    a1\n")

        assert await store.load("user1") == "A\n    a1\n"
        assert (tmp_path / "users" / "user1" / "missionLog.txt").is_file()

    @pytest.mark.asyncio
    async def test_users_are_isolated(self, tmp_path: Path) -> None:
        store = LocalOutlineStore(tmp_path)
        await store.save("alice", "A\n")

        with pytest.raises(DocumentNotFoundError, match="No saved mission log found"):
            await store.load("bob")

    @pytest.mark.asyncio
    async def test_invalid_user_id(self, tmp_path: Path) -> None:
        store = LocalOutlineStore(tmp_path)

        with pytest.raises(ValueError):
            await store.save("../escape", "A\n")

    @pytest.mark.asyncio
    async def test_write_failure_is_store_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "users"
        blocker.write_text("not a directory")
        store = LocalOutlineStore(tmp_path)

        with pytest.raises(StoreError):
            await store.save("user1", "A\n")


class TestRemoteOutlineStore:
    """Tests for RemoteOutlineStore."""

    def test_record_url(self) -> None:
        store = RemoteOutlineStore("https://db.example.com/")

        assert store.record_url("user1") == "https://db.example.com/users/user1/missionLog.json"

    @pytest.mark.asyncio
    async def test_load_returns_text(self) -> None:
        client = AsyncMock()
        client.request = AsyncMock(return_value=_json_response("A\n    a1\n"))
        store = RemoteOutlineStore("https://db.example.com", auth_token="secret", client=client)

        text = await store.load("user1")

        assert text == "A\n    a1\n"
        client.request.assert_awaited_once_with(
            "GET",
            "https://db.example.com/users/user1/missionLog.json",
            params={"auth": "secret"},
            json=None,
        )

    @pytest.mark.asyncio
    async def test_load_null_is_not_found(self) -> None:
        client = AsyncMock()
        client.request = AsyncMock(return_value=_json_response(None))
        store = RemoteOutlineStore("https://db.example.com", client=client)

        with pytest.raises(DocumentNotFoundError):
            await store.load("user1")

    @pytest.mark.asyncio
    async def test_load_rejects_non_text_record(self) -> None:
        client = AsyncMock()
        client.request = AsyncMock(return_value=_json_response({"nested": "object"}))
        store = RemoteOutlineStore("https://db.example.com", client=client)

        with pytest.raises(StoreError, match="Unexpected record type"):
            await store.load("user1")

    @pytest.mark.asyncio
    async def test_save_puts_json_string(self) -> None:
        client = AsyncMock()
        client.request = AsyncMock(return_value=_json_response("A\n"))
        store = RemoteOutlineStore("https://db.example.com", client=client)

        await store.save("user1", "A\n")

        client.request.assert_awaited_once_with(
            "PUT",
            "https://db.example.com/users/user1/missionLog.json",
            params=None,
            json="A\n",
        )


class TestStoreFromConfig:
    """Tests for store_from_config function."""

    def test_local_by_default(self, tmp_path: Path) -> None:
        with patch.object(store_module, "TODOTREE_STORE_URL", None), patch.object(
            store_module, "TODOTREE_STORE_PATH", tmp_path
        ):
            store = store_from_config()

        assert isinstance(store, LocalOutlineStore)
        assert store.base_path == tmp_path

    def test_remote_when_url_configured(self) -> None:
        with patch.object(store_module, "TODOTREE_STORE_URL", "https://db.example.com"), patch.object(
            store_module, "TODOTREE_STORE_AUTH", "token"
        ):
            store = store_from_config()

        assert isinstance(store, RemoteOutlineStore)
        assert store.auth_token == "token"
