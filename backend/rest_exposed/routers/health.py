"""Health and readiness endpoints."""
from __future__ import annotations

from datetime import datetime, timezone
from fastapi import APIRouter, Request

from ..services.hooks import INIT

router = APIRouter(tags=["health"])


@router.get("/healthz")
async def healthz(request: Request) -> dict:
    """Liveness probe; reports whether init has fired."""
    hooks = getattr(request.app.state, "hooks", None)
    return {
        "status": "ok",
        "initialized": bool(hooks and hooks.did_action(INIT)),
        "time": datetime.now(timezone.utc).isoformat(),
    }
