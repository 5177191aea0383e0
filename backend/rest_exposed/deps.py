"""FastAPI dependencies (access to the bootstrapped plugin on app state)."""
from __future__ import annotations

from fastapi import HTTPException, Request

from .plugin import RestApiExposed


def get_plugin(request: Request) -> RestApiExposed:
    """Return the plugin instance created during application startup.

    Requests served before the lifespan finished bootstrapping get a 503.
    """
    plugin = getattr(request.app.state, "plugin", None)
    if plugin is None:
        raise HTTPException(status_code=503, detail="Exposure not initialized")
    return plugin
