"""FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI

from server.routers import outline, users

app = FastAPI(title="todotree", description="Indented outline engine and per-user storage.")
app.include_router(outline.router)
app.include_router(users.router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness check."""
    return {"status": "ok"}
