"""Unit tests for the priority store and list reconciliation."""

import json
import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from vademecum.errors import StorageError
from vademecum.priority import (
    DEFAULT_VADE_PRIORITY,
    STORAGE_KEY,
    ChangeSignal,
    MemoryStorage,
    PriorityStore,
    reconcile,
)

CPP = DEFAULT_VADE_PRIORITY[0]
CC = DEFAULT_VADE_PRIORITY[7]
CP = DEFAULT_VADE_PRIORITY[2]


class BrokenStorage:
    """Storage whose every operation fails."""

    def get_item(self, key):
        raise StorageError("storage unavailable")

    def set_item(self, key, value):
        raise StorageError("quota exceeded")

    def remove_item(self, key):
        raise StorageError("storage unavailable")


@pytest.fixture
def signal():
    return ChangeSignal("test-priority-changed")


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage, signal):
    return PriorityStore(storage, signal=signal)


def assert_permutation(order):
    assert len(order) == len(DEFAULT_VADE_PRIORITY)
    assert sorted(order) == sorted(DEFAULT_VADE_PRIORITY)


class TestDefaults:
    """Tests for the canonical ordering."""

    def test_canonical_order(self):
        assert DEFAULT_VADE_PRIORITY[0].startswith("Código de Processo Penal")
        assert DEFAULT_VADE_PRIORITY[7].startswith("Código Civil")
        assert DEFAULT_VADE_PRIORITY[-1].startswith("Código Tributário Nacional")
        assert len(DEFAULT_VADE_PRIORITY) == 9

    def test_titles_are_unique(self):
        assert len(set(DEFAULT_VADE_PRIORITY)) == len(DEFAULT_VADE_PRIORITY)

    def test_storage_key(self):
        assert STORAGE_KEY == "pantheon:vadePriority"


class TestReconcile:
    """Tests for turning arbitrary input into a valid ordering."""

    def test_custom_order_is_kept_and_completed(self):
        result = reconcile([CP, CPP])
        assert result[:2] == [CP, CPP]
        assert result[2:] == [t for t in DEFAULT_VADE_PRIORITY if t not in (CP, CPP)]

    def test_duplicates_keep_first_position(self):
        result = reconcile([CP, CPP, CP])
        assert result[:2] == [CP, CPP]
        assert_permutation(result)

    def test_unknown_titles_and_non_strings_dropped(self):
        result = reconcile([42, "Código Inexistente", None, CC, {"a": 1}])
        assert result[0] == CC
        assert_permutation(result)

    @pytest.mark.parametrize("value", [
        [],
        ["Código Inexistente"],
        [1, 2, 3],
        None,
        "Constituição Federal",
        {"order": [CP]},
        42,
    ])
    def test_unusable_input_gives_canonical(self, value):
        assert reconcile(value) == list(DEFAULT_VADE_PRIORITY)

    def test_full_permutation_is_unchanged(self):
        reversed_order = list(reversed(DEFAULT_VADE_PRIORITY))
        assert reconcile(reversed_order) == reversed_order

    def test_idempotent(self):
        once = reconcile([CP, "x", CPP, CP])
        assert reconcile(once) == once

    def test_tuple_input(self):
        assert reconcile((CP,))[0] == CP

    def test_returns_new_list(self):
        result = reconcile(DEFAULT_VADE_PRIORITY)
        result.append("x")
        assert len(DEFAULT_VADE_PRIORITY) == 9

    def test_custom_canonical(self):
        assert reconcile(["b", "z"], canonical=["a", "b", "c"]) == ["b", "a", "c"]


class TestPriorityStore:
    """Tests for loading, saving and broadcasting."""

    def test_empty_storage_loads_canonical(self, store):
        assert store.load() == list(DEFAULT_VADE_PRIORITY)

    def test_save_then_load(self, store):
        custom = [CP] + [t for t in DEFAULT_VADE_PRIORITY if t != CP]
        store.save(custom)
        assert store.load() == custom

    def test_save_persists_reconciled_json(self, store, storage):
        saved = store.save([CP, CP, "x"])
        raw = storage.get_item(STORAGE_KEY)
        assert json.loads(raw) == saved
        assert saved[0] == CP
        assert_permutation(saved)
        # Accents are stored as-is
        assert "Código Penal - Decreto-Lei" in raw

    def test_save_broadcasts_after_write(self, store, signal):
        seen = []
        signal.subscribe(lambda: seen.append(store.load()))

        saved = store.save([CC])

        assert seen == [saved]

    def test_reset_restores_canonical(self, store, signal):
        store.save([CP])
        calls = []
        store.subscribe(lambda: calls.append(1))

        assert store.reset() == list(DEFAULT_VADE_PRIORITY)
        assert store.load() == list(DEFAULT_VADE_PRIORITY)
        assert calls == [1]

    @pytest.mark.parametrize("raw", [
        "{not json",
        "[" * 100000,
        '"Constituição Federal"',
        '{"order": []}',
        "42",
        "[]",
        "",
    ])
    def test_bad_stored_value_loads_canonical(self, signal, raw):
        store = PriorityStore(MemoryStorage({STORAGE_KEY: raw}), signal=signal)
        assert store.load() == list(DEFAULT_VADE_PRIORITY)

    def test_partial_stored_value_is_completed(self, signal):
        storage = MemoryStorage({STORAGE_KEY: json.dumps([CP, "Código Revogado"])})
        order = PriorityStore(storage, signal=signal).load()
        assert order[0] == CP
        assert_permutation(order)

    def test_load_does_not_write_back(self, signal):
        storage = MemoryStorage({STORAGE_KEY: json.dumps([CP])})
        PriorityStore(storage, signal=signal).load()
        assert storage.get_item(STORAGE_KEY) == json.dumps([CP])

    def test_unreadable_storage_loads_canonical(self, signal):
        store = PriorityStore(BrokenStorage(), signal=signal)
        assert store.load() == list(DEFAULT_VADE_PRIORITY)

    def test_failed_write_does_not_broadcast(self, signal):
        store = PriorityStore(BrokenStorage(), signal=signal)
        calls = []
        store.subscribe(lambda: calls.append(1))

        result = store.save([CP])

        assert result[0] == CP
        assert calls == []

    def test_commit_reports_write_status(self, store, signal):
        calls = []
        signal.subscribe(lambda: calls.append(1))

        assert store.commit([CP]) is True
        assert store.load()[0] == CP
        assert calls == [1]

    def test_commit_reports_failed_write(self, signal):
        store = PriorityStore(BrokenStorage(), signal=signal)
        calls = []
        store.subscribe(lambda: calls.append(1))

        assert store.commit([CP]) is False
        assert calls == []

    def test_unsubscribe(self, store):
        calls = []
        listener = lambda: calls.append(1)  # noqa: E731
        store.subscribe(listener)
        store.unsubscribe(listener)
        store.save([CP])
        assert calls == []

    def test_size(self, store):
        assert store.size == 9


class TestChangeSignal:
    """Tests for the payload-less broadcast."""

    def test_emit_calls_each_listener_once(self):
        signal = ChangeSignal("s")
        calls = []
        listener = lambda: calls.append("a")  # noqa: E731
        signal.subscribe(listener)
        signal.subscribe(listener)
        signal.subscribe(lambda: calls.append("b"))

        assert signal.emit() == 2
        assert calls == ["a", "b"]

    def test_listener_may_unsubscribe_during_emit(self):
        signal = ChangeSignal("s")
        calls = []

        def once():
            calls.append(1)
            signal.unsubscribe(once)

        signal.subscribe(once)
        signal.emit()
        signal.emit()
        assert calls == [1]
        assert signal.listener_count == 0
