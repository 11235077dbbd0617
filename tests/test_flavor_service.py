"""
Unit tests for the in-memory flavor store.
"""
from __future__ import annotations

import logging
import threading

import pytest

from flavor_store_api.app.core.errors import FlavorNotFoundError
from flavor_store_api.app.services.flavor_service import Flavor, FlavorStore, parse_flavor_id


def _as_dicts(store):
    return [f.model_dump() for f in store.list_flavors()]


def test_new_store_is_seeded(store):
    assert _as_dicts(store) == [
        {"id": 1, "flavor": "strawberry"},
        {"id": 2, "flavor": "mint chocolate"},
    ]


def test_create_appends_with_next_id(store):
    created = store.create_flavor("vanilla")
    assert created.model_dump() == {"id": 3, "flavor": "vanilla"}
    assert len(store) == 3
    assert store.list_flavors()[-1].id == 3


def test_create_on_empty_store_starts_at_one():
    store = FlavorStore(initial=[])
    assert store.create_flavor("vanilla").id == 1


def test_create_accepts_missing_flavor(store):
    created = store.create_flavor()
    assert created.flavor is None
    assert store.get_flavor(created.id).flavor is None


def test_update_mutates_in_place(store):
    updated = store.update_flavor(1, "banana")
    assert updated.model_dump() == {"id": 1, "flavor": "banana"}
    assert _as_dicts(store)[0] == {"id": 1, "flavor": "banana"}
    assert len(store) == 2


def test_update_missing_id_raises_and_leaves_store_unchanged(store):
    before = _as_dicts(store)
    with pytest.raises(FlavorNotFoundError) as excinfo:
        store.update_flavor(999, "banana")
    assert excinfo.value.flavor_id == 999
    assert excinfo.value.message == "Flavor not found"
    assert _as_dicts(store) == before


def test_delete_removes_only_that_record(store):
    deleted = store.delete_flavor(2)
    assert deleted.model_dump() == {"id": 2, "flavor": "mint chocolate"}
    assert _as_dicts(store) == [{"id": 1, "flavor": "strawberry"}]
    with pytest.raises(FlavorNotFoundError):
        store.delete_flavor(2)


def test_none_id_never_matches(store):
    with pytest.raises(FlavorNotFoundError):
        store.get_flavor(None)


def test_deleted_highest_id_is_not_reissued(store):
    assert store.create_flavor("vanilla").id == 3
    store.delete_flavor(3)
    assert store.create_flavor("pistachio").id == 4
    store.delete_flavor(2)
    store.delete_flavor(4)
    assert store.create_flavor("lemon").id == 5


def test_ids_stay_unique_across_mixed_operations(store):
    issued = []
    for i in range(20):
        issued.append(store.create_flavor(f"flavor {i}").id)
        if i % 3 == 0:
            store.delete_flavor(issued[-1])
    assert len(issued) == len(set(issued))
    ids = [f.id for f in store.list_flavors()]
    assert len(ids) == len(set(ids))


def test_concurrent_creates_get_distinct_ids():
    store = FlavorStore(initial=[])
    results = []

    def worker():
        for _ in range(50):
            results.append(store.create_flavor("x").id)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(results) == list(range(1, 401))
    assert len(store) == 400


def test_initial_records_are_copied_and_checked():
    seed = [Flavor(id=5, flavor="rum raisin")]
    store = FlavorStore(initial=seed)
    store.update_flavor(5, "cookie dough")
    assert seed[0].flavor == "rum raisin"
    assert store.create_flavor("x").id == 6

    with pytest.raises(ValueError):
        FlavorStore(initial=[Flavor(id=1), Flavor(id=1)])


def test_not_found_is_logged(store, caplog):
    with caplog.at_level(logging.WARNING, logger="flavor_store_api.app.services.flavor_service"):
        with pytest.raises(FlavorNotFoundError):
            store.delete_flavor(42)
    assert "Flavor 42 not found" in caplog.text


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1", 1),
        ("42abc", 42),
        (" 7", 7),
        ("-3", -3),
        ("abc", None),
        ("", None),
        ("1.5", 1),
        ("١", None),
        ("4٢", 4),
    ],
)
def test_parse_flavor_id(raw, expected):
    assert parse_flavor_id(raw) == expected
