"""FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI

from server.routers.ingest import router as ingest_router
from server.routers.render import router as render_router

app = FastAPI(title="mdguide", description="Parse, index, and re-render Markdown guides.")
app.include_router(render_router)
app.include_router(ingest_router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}
