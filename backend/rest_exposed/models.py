"""Pydantic models for API responses."""
from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .registry import ContentType
from .services.preferences import PreferenceSet, PreferenceState


class ContentTypeExposure(BaseModel):
    """REST visibility of one registered content type."""

    slug: str
    label: str = ""
    builtin: bool = False
    showInRest: bool
    restBase: str = Field("", description="Path segment of the REST collection")
    restControllerClass: str = ""
    configured: bool = Field(False, description="Slug is named in the stored preferences")
    state: Optional[PreferenceState] = None

    @classmethod
    def from_content_type(cls, ct: ContentType, prefs: PreferenceSet) -> "ContentTypeExposure":
        return cls(
            slug=ct.slug,
            label=ct.label,
            builtin=ct.builtin,
            showInRest=ct.show_in_rest,
            restBase=ct.rest_base,
            restControllerClass=ct.rest_controller_class,
            configured=ct.slug in prefs,
            state=prefs.get(ct.slug),
        )


class ExposureReport(BaseModel):
    """Exposure state of every registered content type."""

    active: bool
    types: List[ContentTypeExposure]


class PreferencesResponse(BaseModel):
    """Stored preferences as loaded at startup."""

    preferences: Dict[str, PreferenceState]
    enabled: List[str]
    disabled: List[str]
