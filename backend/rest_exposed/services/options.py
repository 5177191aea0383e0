"""Key/value option stores consumed by the preference loader."""
from __future__ import annotations

from typing import Any, Dict, Optional, Protocol

from ..config import Settings
from ..exceptions import ConfigurationError


class OptionStore(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...


class InMemoryOptionStore:
    """Dict-backed option store for local development and tests."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None) -> None:
        self._values: Dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def update_option(self, key: str, value: Any) -> None:
        self._values[key] = value

    def delete_option(self, key: str) -> None:
        self._values.pop(key, None)


def build_option_store(settings: Settings) -> OptionStore:
    """Return the option store selected by OPTIONS_BACKEND."""
    backend = settings.OPTIONS_BACKEND
    if backend == "memory":
        return InMemoryOptionStore()
    if backend == "firestore":
        from .firestore import FirestoreOptionStore

        return FirestoreOptionStore(collection=settings.OPTIONS_COLLECTION)
    raise ConfigurationError(f"Unknown OPTIONS_BACKEND: {backend!r}")
