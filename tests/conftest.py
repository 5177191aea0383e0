import pytest

from rest_exposed.config import Settings
from rest_exposed.registry import ContentType, ContentTypeRegistry, register_builtin_types
from rest_exposed.services.hooks import HookRegistry
from rest_exposed.services.options import InMemoryOptionStore


@pytest.fixture
def hooks():
    return HookRegistry()


@pytest.fixture
def store():
    return InMemoryOptionStore()


@pytest.fixture
def registry():
    reg = ContentTypeRegistry()
    register_builtin_types(reg)
    reg.register(ContentType(
        "custom_type",
        "Custom",
        show_in_rest=False,
        rest_base="legacy_base",
        rest_controller_class="Legacy_Controller",
    ))
    return reg


@pytest.fixture
def settings(monkeypatch):
    for name in ("OPTIONS_BACKEND", "OPTION_NAMESPACE", "INIT_PRIORITY", "REST_CONTROLLER_CLASS", "CUSTOM_TYPES"):
        monkeypatch.delenv(name, raising=False)
    return Settings()
