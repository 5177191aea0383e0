"""Priority-ordered action and filter hooks.

Actions fire callbacks for a named lifecycle event; filters thread a value
through callbacks and return the result. Callbacks run in ascending
priority, ties in registration order.
"""
from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10

# Lifecycle event on which types are registered and exposure is applied
INIT = "init"
# Filter receiving (rest_base, slug) and returning the final rest base
REST_BASE_FILTER = "rest_api_exposed_rest_base"


@dataclass(order=True)
class Hook:
    priority: int
    seq: int
    callback: Callable[..., Any] = field(compare=False)


class HookRegistry:
    """Explicit list of (event, priority, callback) registrations."""

    def __init__(self) -> None:
        self._actions: Dict[str, List[Hook]] = {}
        self._filters: Dict[str, List[Hook]] = {}
        self._seq = itertools.count()
        self._fired: Dict[str, int] = {}

    def add_action(self, event: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY) -> None:
        self._add(self._actions, event, callback, priority)

    def add_filter(self, name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY) -> None:
        self._add(self._filters, name, callback, priority)

    def remove_filter(self, name: str, callback: Callable[..., Any]) -> bool:
        hooks = self._filters.get(name, [])
        kept = [h for h in hooks if h.callback != callback]
        self._filters[name] = kept
        return len(kept) != len(hooks)

    def has_action(self, event: str) -> bool:
        return bool(self._actions.get(event))

    def actions(self, event: str) -> List[Hook]:
        return sorted(self._actions.get(event, []))

    def do_action(self, event: str, *args: Any) -> None:
        """Run every callback registered for `event`."""
        hooks = self.actions(event)
        logger.debug("Firing %s (%d callbacks)", event, len(hooks))
        for hook in hooks:
            hook.callback(*args)
        self._fired[event] = self._fired.get(event, 0) + 1

    def did_action(self, event: str) -> int:
        """How many times `event` has fired."""
        return self._fired.get(event, 0)

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        for hook in sorted(self._filters.get(name, [])):
            value = hook.callback(value, *args)
        return value

    def _add(self, table: Dict[str, List[Hook]], name: str, callback: Callable[..., Any], priority: int) -> None:
        table.setdefault(name, []).append(Hook(priority, next(self._seq), callback))
