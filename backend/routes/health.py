"""Health and readiness check routes."""

from fastapi import APIRouter, Request

router = APIRouter()

SERVICE_NAME = "game-catalog-proxy"


@router.get("/ready")
async def ready(request: Request) -> dict:
    """Lightweight readiness check — no external calls."""
    return {"status": "ok", "service": SERVICE_NAME, "commit": request.app.state.settings.git_sha}


@router.get("/health")
async def health(request: Request) -> dict:
    """Liveness plus cache stats. Does not call RAWG."""
    cache = request.app.state.catalog.cache
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "commit": request.app.state.settings.git_sha,
        "cache_entries": len(cache),
        "cache_ttl_seconds": cache.ttl_seconds,
    }
