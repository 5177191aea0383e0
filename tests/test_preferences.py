import pytest

from helpers import NS, seed
from rest_exposed.services.preferences import (
    PreferenceLoader,
    PreferenceSet,
    PreferenceState,
    TypePreference,
    absint,
)


def test_no_stored_slug_list_gives_empty_set(store):
    prefs = PreferenceLoader(store).load()
    assert len(prefs) == 0
    assert not prefs


@pytest.mark.parametrize("stored", [False, None, [], ""])
def test_falsy_slug_list_gives_empty_set(store, stored):
    store.update_option(NS, stored)
    assert len(PreferenceLoader(store).load()) == 0


def test_flags_map_to_states(store):
    seed(store, post=1, page=0, book="1", movie=None)

    prefs = PreferenceLoader(store).load()

    assert dict(prefs) == {
        "post": PreferenceState.ENABLED,
        "page": PreferenceState.DISABLED,
        "book": PreferenceState.ENABLED,
        # never-set flag reads as disabled
        "movie": PreferenceState.DISABLED,
    }
    assert prefs.enabled() == ["post", "book"]
    assert prefs.disabled() == ["page", "movie"]


def test_negative_and_non_numeric_flags(store):
    seed(store, neg=-2, junk="yes", lead="3abc", off="0")

    prefs = PreferenceLoader(store).load()

    assert prefs["neg"] is PreferenceState.ENABLED
    assert prefs["junk"] is PreferenceState.DISABLED
    assert prefs["lead"] is PreferenceState.ENABLED
    assert prefs["off"] is PreferenceState.DISABLED


def test_custom_namespace():
    from rest_exposed.services.options import InMemoryOptionStore

    store = InMemoryOptionStore({"my_ns": ["book"], "my_ns_book": 1})
    prefs = PreferenceLoader(store, namespace="my_ns").load()
    assert prefs["book"] is PreferenceState.ENABLED


@pytest.mark.parametrize("stored", [True, 1, 5, 2.5, "post"])
def test_slug_list_of_wrong_shape_gives_empty_set(store, stored):
    store.update_option(NS, stored)
    store.update_option(f"{NS}_post", 1)

    assert len(PreferenceLoader(store).load()) == 0


def test_non_finite_flag_reads_as_disabled(store):
    seed(store, post=float("inf"), page=float("nan"), book=1)

    prefs = PreferenceLoader(store).load()

    assert prefs.disabled() == ["post", "page"]
    assert prefs.enabled() == ["book"]


def test_mapping_slug_list_uses_values(store):
    store.update_option(NS, {0: "post", 1: "book"})
    store.update_option(f"{NS}_book", 1)

    prefs = PreferenceLoader(store).load()

    assert list(prefs) == ["post", "book"]


def test_preference_set_is_read_only():
    prefs = PreferenceSet([TypePreference("post", PreferenceState.ENABLED)])
    with pytest.raises(TypeError):
        prefs["post"] = PreferenceState.DISABLED  # type: ignore[index]


def test_from_states_accepts_strings():
    prefs = PreferenceSet.from_states({"post": "enabled", "page": PreferenceState.DISABLED})
    assert prefs.preferences() == [
        TypePreference("post", PreferenceState.ENABLED),
        TypePreference("page", PreferenceState.DISABLED),
    ]


@pytest.mark.parametrize(
    "value, expected",
    [(None, 0), (True, 1), (False, 0), (7, 7), (-7, 7), (2.9, 2), ("12", 12), (" -4x", 4), ("abc", 0), ([1], 1), ({}, 0),
     (float("inf"), 0), (float("-inf"), 0), (float("nan"), 0)],
)
def test_absint(value, expected):
    assert absint(value) == expected
