"""Exposure resolver: applies a PreferenceSet to the content type registry."""
from __future__ import annotations

import logging
from typing import Optional

from ..registry import STANDARD_CONTROLLER, RestVisibilityLookup
from .hooks import REST_BASE_FILTER, HookRegistry
from .preferences import PreferenceSet, PreferenceState

logger = logging.getLogger(__name__)

# Built-in types whose REST base is the plural of their slug
RESERVED_REST_BASES = {
    "post": "posts",
    "page": "pages",
}


def default_rest_base(slug: str) -> str:
    return RESERVED_REST_BASES.get(slug, slug)


class ExposureResolver:
    """Sets show_in_rest, rest_base and rest_controller_class per configured slug.

    Only slugs named in the PreferenceSet are touched. Disabling hides the
    collection but keeps its routing metadata; slugs missing from the
    registry are skipped.
    """

    def __init__(self, hooks: HookRegistry, controller_class: str = STANDARD_CONTROLLER) -> None:
        self.hooks = hooks
        self.controller_class = controller_class

    def rest_base(self, slug: str) -> str:
        return self.hooks.apply_filters(REST_BASE_FILTER, default_rest_base(slug), slug)

    def apply(self, prefs: PreferenceSet, registry: RestVisibilityLookup) -> int:
        """Apply every preference; returns how many registry entries were updated."""
        applied = 0
        for slug, state in prefs.items():
            entry = registry.get(slug)
            if entry is None:
                logger.debug("Skipping %s: not registered", slug)
                continue
            if state is PreferenceState.ENABLED:
                entry.show_in_rest = True
                entry.rest_base = self.rest_base(slug)
                entry.rest_controller_class = self.controller_class
                logger.debug("Exposed %s at /%s", slug, entry.rest_base)
            else:
                entry.show_in_rest = False
                logger.debug("Hid %s", slug)
            applied += 1
        logger.info("Applied REST exposure to %d of %d configured types", applied, len(prefs))
        return applied


def apply_preferences(
    prefs: PreferenceSet,
    registry: RestVisibilityLookup,
    hooks: HookRegistry,
    controller_class: Optional[str] = None,
) -> int:
    """Convenience wrapper around ExposureResolver.apply."""
    resolver = ExposureResolver(hooks, controller_class or STANDARD_CONTROLLER)
    return resolver.apply(prefs, registry)
