"""HTTP utilities for talking to the record store with retry logic."""

from __future__ import annotations

import asyncio
from typing import Any, Final

import httpx

from todotree.config import (
    TODOTREE_STORE_BACKOFF_S,
    TODOTREE_STORE_MAX_RETRIES,
    TODOTREE_STORE_TIMEOUT_S,
    TODOTREE_USER_AGENT,
)
from todotree.exceptions import StoreError

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


def build_client() -> httpx.AsyncClient:
    """Create an AsyncClient configured for the record store."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(TODOTREE_STORE_TIMEOUT_S),
        headers={"User-Agent": TODOTREE_USER_AGENT},
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    )


async def request_with_retries(
    method: str,
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    params: dict[str, str] | None = None,
    json: Any = None,
) -> Any:
    """Send a JSON request, retrying transient failures.

    Args:
        method: HTTP method ("GET" or "PUT").
        url: The URL to call.
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.
        params: Optional query parameters.
        json: Optional JSON body.

    Returns:
        The decoded JSON body of the response.

    Raises:
        StoreError: If the request fails after all retries, returns a
            non-retryable error status, or the body is not valid JSON.
    """
    last_exc: Exception | None = None

    async def do_request(http_client: httpx.AsyncClient) -> Any:
        nonlocal last_exc

        for attempt in range(TODOTREE_STORE_MAX_RETRIES + 1):
            try:
                response = await http_client.request(method, url, params=params, json=json)

                if response.status_code in RETRY_STATUS_CODES:
                    last_exc = StoreError(f"HTTP {response.status_code} from {url}")
                else:
                    response.raise_for_status()
                    return response.json()
            except httpx.HTTPStatusError as exc:
                raise StoreError(f"HTTP {exc.response.status_code} from {url}") from exc
            except httpx.RequestError as exc:
                last_exc = exc
            except ValueError as exc:
                raise StoreError(f"Invalid JSON from {url}") from exc

            if attempt < TODOTREE_STORE_MAX_RETRIES:
                backoff = TODOTREE_STORE_BACKOFF_S * (2**attempt)
                await asyncio.sleep(backoff)

        raise StoreError(f"Failed to reach {url}: {last_exc}")

    if client is not None:
        return await do_request(client)

    async with build_client() as new_client:
        return await do_request(new_client)
