"""Preference loader: stored per-type toggles -> PreferenceSet."""
from __future__ import annotations

import enum
import logging
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List

from .options import OptionStore

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "rest_api_exposed_post_types"

_LEADING_INT = re.compile(r"^\s*[+-]?\d+")


class PreferenceState(str, enum.Enum):
    ENABLED = "enabled"
    DISABLED = "disabled"


@dataclass(frozen=True)
class TypePreference:
    slug: str
    state: PreferenceState


class PreferenceSet(Mapping):
    """Read-only mapping of content type slug -> PreferenceState."""

    def __init__(self, items: Iterable[TypePreference] = ()) -> None:
        self._states: Dict[str, PreferenceState] = {p.slug: p.state for p in items}

    @classmethod
    def from_states(cls, states: Mapping) -> "PreferenceSet":
        return cls(TypePreference(slug, PreferenceState(state)) for slug, state in states.items())

    def __getitem__(self, slug: str) -> PreferenceState:
        return self._states[slug]

    def __iter__(self) -> Iterator[str]:
        return iter(self._states)

    def __len__(self) -> int:
        return len(self._states)

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v.value}" for k, v in self._states.items())
        return f"PreferenceSet({inner})"

    def preferences(self) -> List[TypePreference]:
        return [TypePreference(slug, state) for slug, state in self._states.items()]

    def enabled(self) -> List[str]:
        return [slug for slug, state in self._states.items() if state is PreferenceState.ENABLED]

    def disabled(self) -> List[str]:
        return [slug for slug, state in self._states.items() if state is PreferenceState.DISABLED]


def absint(value: Any) -> int:
    """Absolute integer value of a loosely typed stored option.

    Numeric strings use their leading integer ("3abc" -> 3); anything that
    does not look like a number is 0.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return abs(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        return abs(int(value))
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8", "replace")
    if isinstance(value, str):
        m = _LEADING_INT.match(value)
        return abs(int(m.group(0))) if m else 0
    if isinstance(value, (list, tuple, dict, set)):
        return 1 if value else 0
    return 0


def _slug_list(raw: Any) -> List[str]:
    """Slugs from a stored list or mapping; any other shape holds none."""
    if isinstance(raw, Mapping):
        raw = raw.values()
    elif not isinstance(raw, (list, tuple)):
        return []
    return [str(slug) for slug in raw]


class PreferenceLoader:
    """Reads the configured slug list and each slug's enable flag."""

    def __init__(self, store: OptionStore, namespace: str = DEFAULT_NAMESPACE) -> None:
        self.store = store
        self.namespace = namespace

    def flag_key(self, slug: str) -> str:
        return f"{self.namespace}_{slug}"

    def load(self) -> PreferenceSet:
        """Return the stored preferences, or an empty set if none were saved.

        A slug whose flag is missing reads as disabled, the same as an
        explicit zero.
        """
        stored = self.store.get(self.namespace, False)
        if not stored:
            logger.info("No stored content type preferences under %s", self.namespace)
            return PreferenceSet()

        prefs = []
        for slug in _slug_list(stored):
            flag = self.store.get(self.flag_key(slug), 0)
            state = PreferenceState.ENABLED if absint(flag) != 0 else PreferenceState.DISABLED
            prefs.append(TypePreference(slug, state))
        result = PreferenceSet(prefs)
        logger.info(
            "Loaded %d content type preferences (%d enabled)",
            len(result), len(result.enabled()),
        )
        return result
