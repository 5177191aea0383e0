"""Read-only view of the resolved REST exposure.

Reports what the resolver configured; it does not serve content collections.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..deps import get_plugin
from ..exceptions import NotFoundError
from ..models import ContentTypeExposure, ExposureReport, PreferencesResponse
from ..plugin import RestApiExposed

router = APIRouter(prefix="/exposure", tags=["exposure"])  # mounted under /api


def _lookup(plugin: RestApiExposed, slug: str) -> ContentTypeExposure:
    ct = plugin.registry.get(slug)
    if ct is None:
        raise NotFoundError(f"Content type '{slug}' is not registered")
    return ContentTypeExposure.from_content_type(ct, plugin.enabled_post_types)


@router.get("", response_model=ExposureReport)
async def list_exposure(plugin: RestApiExposed = Depends(get_plugin)) -> ExposureReport:
    """Every registered content type with its REST attributes."""
    prefs = plugin.enabled_post_types
    return ExposureReport(
        active=plugin.is_active,
        types=[ContentTypeExposure.from_content_type(ct, prefs) for ct in plugin.registry],
    )


@router.get("/preferences", response_model=PreferencesResponse)
async def get_preferences(plugin: RestApiExposed = Depends(get_plugin)) -> PreferencesResponse:
    prefs = plugin.enabled_post_types
    return PreferencesResponse(
        preferences=dict(prefs),
        enabled=prefs.enabled(),
        disabled=prefs.disabled(),
    )


@router.get("/{slug}", response_model=ContentTypeExposure)
async def get_exposure(slug: str, plugin: RestApiExposed = Depends(get_plugin)) -> ContentTypeExposure:
    try:
        return _lookup(plugin, slug)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
