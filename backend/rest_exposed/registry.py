"""Content type registry owned by the host.

The exposure core only ever touches the three REST attributes described by
`RestVisibility`; everything else on a `ContentType` belongs to the host.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterator, Optional, Protocol


class RestVisibility(Protocol):
    """The REST attributes the exposure resolver is allowed to write."""

    show_in_rest: bool
    rest_base: str
    rest_controller_class: str


class RestVisibilityLookup(Protocol):
    """Slug lookup the exposure resolver needs from a host registry."""

    def get(self, slug: str) -> Optional[RestVisibility]: ...


@dataclass
class ContentType:
    slug: str
    label: str = ""
    public: bool = True
    builtin: bool = False
    show_in_rest: bool = False
    rest_base: str = ""
    rest_controller_class: str = ""

    def rest_fields(self) -> Dict[str, object]:
        return {
            "show_in_rest": self.show_in_rest,
            "rest_base": self.rest_base,
            "rest_controller_class": self.rest_controller_class,
        }


class ContentTypeRegistry:
    """In-memory registry of content types keyed by slug."""

    def __init__(self) -> None:
        self._types: Dict[str, ContentType] = {}

    def register(self, content_type: ContentType) -> ContentType:
        if content_type.slug in self._types:
            raise ValueError(f"Content type '{content_type.slug}' already registered")
        self._types[content_type.slug] = content_type
        return content_type

    def unregister(self, slug: str) -> Optional[ContentType]:
        return self._types.pop(slug, None)

    def get(self, slug: str) -> Optional[ContentType]:
        return self._types.get(slug)

    def __contains__(self, slug: object) -> bool:
        return slug in self._types

    def __iter__(self) -> Iterator[ContentType]:
        return iter(tuple(self._types.values()))

    def __len__(self) -> int:
        return len(self._types)

    def snapshot(self) -> Dict[str, Dict[str, object]]:
        """Copy of every entry's REST attributes, keyed by slug."""
        return {slug: ct.rest_fields() for slug, ct in self._types.items()}


STANDARD_CONTROLLER = "WP_REST_Posts_Controller"

BUILTIN_TYPES = (
    ContentType("post", "Posts", builtin=True, show_in_rest=True,
                rest_base="posts", rest_controller_class=STANDARD_CONTROLLER),
    ContentType("page", "Pages", builtin=True, show_in_rest=True,
                rest_base="pages", rest_controller_class=STANDARD_CONTROLLER),
    ContentType("attachment", "Media", builtin=True, show_in_rest=True,
                rest_base="media", rest_controller_class="WP_REST_Attachments_Controller"),
    ContentType("revision", "Revisions", public=False, builtin=True),
    ContentType("nav_menu_item", "Navigation Menu Items", public=False, builtin=True),
)


def register_builtin_types(registry: ContentTypeRegistry) -> None:
    """Register fresh copies of the built-in types not already present."""
    for proto in BUILTIN_TYPES:
        if proto.slug not in registry:
            registry.register(replace(proto))


def register_custom_types(registry: ContentTypeRegistry, slugs) -> None:
    """Register plain custom types, hidden from REST until exposed."""
    for slug in slugs:
        if slug not in registry:
            registry.register(ContentType(slug, label=slug.replace("_", " ").title()))
