import pytest

from config_store import ConfigStore, StaleCursorError


def _store() -> ConfigStore:
    store = ConfigStore()
    store.set("time/N", 1024)
    store.set("time/dt", 0.1)
    store.set("space/N", 256)
    return store


def test_empty_store_begin_equals_end() -> None:
    store = ConfigStore()
    assert store.begin() == store.end()
    assert store.begin().at_end


def test_forward_traversal_in_key_order() -> None:
    store = _store()
    cursor = store.begin()
    seen = []
    while cursor != store.end():
        seen.append(cursor.entry.as_tuple())
        cursor.next()
    assert seen == [("space/N", "256"), ("time/N", "1024"), ("time/dt", "0.1")]


def test_backward_traversal_from_end() -> None:
    store = _store()
    cursor = store.end()
    seen = []
    while cursor != store.begin():
        seen.append(cursor.previous().entry.full_key)
    assert seen == ["time/dt", "time/N", "space/N"]


def test_stepping_past_either_end_raises_index_error() -> None:
    store = _store()
    with pytest.raises(IndexError):
        store.end().entry
    with pytest.raises(IndexError):
        store.end().next()
    with pytest.raises(IndexError):
        store.begin().previous()


def test_copy_is_independent() -> None:
    store = _store()
    first = store.begin()
    second = first.copy()
    assert first == second
    second.next()
    assert first != second
    assert first.entry.full_key == "space/N"
    assert second.entry.full_key == "time/N"


def test_cursors_from_different_stores_are_not_equal() -> None:
    assert _store().begin() != _store().begin()


def test_insert_invalidates_cursor() -> None:
    store = _store()
    cursor = store.begin()
    store.set("alpha/x", 1)
    with pytest.raises(StaleCursorError):
        cursor.entry
    with pytest.raises(StaleCursorError):
        cursor.next()


def test_delete_invalidates_cursor() -> None:
    store = _store()
    cursor = store.begin()
    store.delete("time/N")
    with pytest.raises(StaleCursorError):
        cursor.previous()


def test_overwrite_keeps_cursor_valid() -> None:
    store = _store()
    cursor = store.begin()
    store.set("space/N", 512)
    assert cursor.entry.value == "512"


def test_structural_change_during_iteration_raises() -> None:
    store = _store()
    with pytest.raises(StaleCursorError, match="changed size during iteration"):
        for entry in store:
            store.set(entry.full_key + "_copy", entry.value)
