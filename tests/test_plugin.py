import copy

from helpers import seed
from rest_exposed.plugin import DEFAULT_INIT_PRIORITY, RestApiExposed, bootstrap
from rest_exposed.registry import ContentType, ContentTypeRegistry
from rest_exposed.services.hooks import INIT, HookRegistry
from rest_exposed.services.preferences import PreferenceState


def test_empty_preferences_skip_registration(store, hooks, registry):
    before = copy.deepcopy(registry.snapshot())

    plugin = RestApiExposed(store, hooks, registry)
    hooks.do_action(INIT)

    assert plugin.is_active is False
    assert not hooks.has_action(INIT)
    assert registry.snapshot() == before


def test_resolver_scheduled_at_init_priority(store, hooks, registry):
    seed(store, custom_type=1)

    plugin = RestApiExposed(store, hooks, registry)

    assert plugin.is_active is True
    [hook] = hooks.actions(INIT)
    assert hook.priority == DEFAULT_INIT_PRIORITY
    assert hook.callback == plugin.expose_api_endpoints
    # nothing changes until init fires
    assert registry.get("custom_type").show_in_rest is False

    hooks.do_action(INIT)

    assert registry.get("custom_type").show_in_rest is True


def test_types_registered_on_init_are_exposed(store):
    seed(store, late_type=1)
    hooks = HookRegistry()
    registry = ContentTypeRegistry()
    plugin = RestApiExposed(store, hooks, registry)
    # a third-party registration later in init, still ahead of the resolver
    hooks.add_action(INIT, lambda: registry.register(ContentType("late_type")), 20)

    hooks.do_action(INIT)

    assert plugin.enabled_post_types["late_type"] is PreferenceState.ENABLED
    assert registry.get("late_type").show_in_rest is True
    assert registry.get("late_type").rest_base == "late_type"


def test_preferences_loaded_once_at_construction(store, hooks, registry):
    seed(store, custom_type=1)
    plugin = RestApiExposed(store, hooks, registry)
    store.update_option("rest_api_exposed_post_types_custom_type", 0)

    hooks.do_action(INIT)

    assert plugin.enabled_post_types["custom_type"] is PreferenceState.ENABLED
    assert registry.get("custom_type").show_in_rest is True


def test_bootstrap_registers_builtins_and_applies(store, settings):
    seed(store, post=0, book=1, missing=1)

    plugin = bootstrap(settings, store, custom_types=["book"])

    assert {"post", "page", "attachment", "book"} <= {ct.slug for ct in plugin.registry}
    assert plugin.registry.get("post").show_in_rest is False
    assert plugin.registry.get("post").rest_base == "posts"
    book = plugin.registry.get("book")
    assert (book.show_in_rest, book.rest_base) == (True, "book")
    assert "missing" not in plugin.registry
    assert plugin.hooks.did_action(INIT) == 1


def test_bootstrap_without_preferences_keeps_host_defaults(store, settings):
    plugin = bootstrap(settings, store, custom_types=["book"])

    assert plugin.is_active is False
    assert plugin.registry.get("post").show_in_rest is True
    assert plugin.registry.get("book").show_in_rest is False


def test_bootstrap_reads_settings(store, monkeypatch):
    from rest_exposed.config import Settings

    monkeypatch.setenv("OPTION_NAMESPACE", "alt_ns")
    monkeypatch.setenv("INIT_PRIORITY", "99")
    monkeypatch.setenv("REST_CONTROLLER_CLASS", "Alt_Controller")
    monkeypatch.setenv("CUSTOM_TYPES", "book, movie")
    store.update_option("alt_ns", ["movie"])
    store.update_option("alt_ns_movie", 1)

    plugin = bootstrap(Settings(), store)

    assert [h.priority for h in plugin.hooks.actions(INIT)] == [0, 99]
    movie = plugin.registry.get("movie")
    assert movie.rest_controller_class == "Alt_Controller"
    assert plugin.registry.get("book").show_in_rest is False


def test_malformed_slug_list_is_not_scheduled(store, hooks, registry):
    store.update_option("rest_api_exposed_post_types", True)
    before = copy.deepcopy(registry.snapshot())

    plugin = RestApiExposed(store, hooks, registry)
    hooks.do_action(INIT)

    assert plugin.is_active is False
    assert registry.snapshot() == before
