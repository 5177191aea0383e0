"""Plugin bootstrap: load preferences, schedule exposure on init."""
from __future__ import annotations

import logging
from typing import Optional

from .config import Settings
from .registry import (
    STANDARD_CONTROLLER,
    ContentTypeRegistry,
    register_builtin_types,
    register_custom_types,
)
from .services.exposure import ExposureResolver
from .services.hooks import INIT, HookRegistry
from .services.options import OptionStore
from .services.preferences import DEFAULT_NAMESPACE, PreferenceLoader, PreferenceSet

logger = logging.getLogger(__name__)

DEFAULT_INIT_PRIORITY = 30


class RestApiExposed:
    """Wires the preference loader and exposure resolver into the host hooks.

    Preferences are read once, here. The resolver is only scheduled when
    something was configured; otherwise the registry is never touched.
    """

    plugin_name = "REST API Exposed"
    version = "1.0.0"

    def __init__(
        self,
        store: OptionStore,
        hooks: HookRegistry,
        registry: ContentTypeRegistry,
        *,
        namespace: str = DEFAULT_NAMESPACE,
        init_priority: int = DEFAULT_INIT_PRIORITY,
        controller_class: Optional[str] = None,
    ) -> None:
        self.hooks = hooks
        self.registry = registry
        self.resolver = ExposureResolver(hooks, controller_class or STANDARD_CONTROLLER)
        self.enabled_post_types: PreferenceSet = PreferenceLoader(store, namespace).load()
        self.is_active = len(self.enabled_post_types) > 0
        if self.is_active:
            hooks.add_action(INIT, self.expose_api_endpoints, init_priority)
            logger.info("Scheduled REST exposure on %s at priority %d", INIT, init_priority)
        else:
            logger.info("No content type preferences configured; exposure not scheduled")

    def expose_api_endpoints(self) -> None:
        if not self.enabled_post_types:
            return
        self.resolver.apply(self.enabled_post_types, self.registry)


def bootstrap(
    settings: Settings,
    store: OptionStore,
    *,
    registry: Optional[ContentTypeRegistry] = None,
    hooks: Optional[HookRegistry] = None,
    custom_types=(),
) -> RestApiExposed:
    """Build the host registry and plugin, then fire init.

    Host types register at priority 0 so they exist before the resolver runs
    at INIT_PRIORITY.
    """
    registry = registry if registry is not None else ContentTypeRegistry()
    hooks = hooks if hooks is not None else HookRegistry()
    extra = list(settings.CUSTOM_TYPES) + list(custom_types)

    def register_host_types() -> None:
        register_builtin_types(registry)
        register_custom_types(registry, extra)

    hooks.add_action(INIT, register_host_types, 0)
    plugin = RestApiExposed(
        store,
        hooks,
        registry,
        namespace=settings.OPTION_NAMESPACE,
        init_priority=settings.INIT_PRIORITY,
        controller_class=settings.REST_CONTROLLER_CLASS,
    )
    hooks.do_action(INIT)
    return plugin
