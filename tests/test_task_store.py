# tests/test_task_store.py

from __future__ import annotations

import json
import random

import pytest

from todo_keeper.storage.persistence import TaskPersistence
from todo_keeper.tasks.task_models import TaskFilter
from todo_keeper.tasks.task_store import TaskStore, generate_id

from .fakes import Clock, FailingPersistence, FakeKeyValueStore


def _texts(tasks) -> list[str]:
    return [t.text for t in tasks]


def test_add_prepends_and_grows_by_one(store: TaskStore) -> None:
    for i, text in enumerate(["a", "b", "c"], start=1):
        task = store.add(text)
        assert task is not None
        assert len(store) == i
        assert next(iter(store)).id == task.id

    assert _texts(store) == ["c", "b", "a"]


def test_add_trims_and_sets_defaults(store: TaskStore) -> None:
    task = store.add("  buy milk  ")
    assert task is not None
    assert task.text == "buy milk"
    assert task.completed is False
    assert task.created_at > 0
    assert store.get(task.id) is task


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_add_blank_is_noop(store: TaskStore, kv: FakeKeyValueStore, text: str) -> None:
    assert store.add(text) is None
    assert len(store) == 0
    assert kv.writes == 0
    assert store.query("", TaskFilter.ALL).total == 0


def test_ids_are_unique(store: TaskStore) -> None:
    ids = {store.add(f"task {i}").id for i in range(200)}
    assert len(ids) == 200


def test_generate_id_is_time_prefix_plus_suffix() -> None:
    a = generate_id(0, random.Random(1))
    b = generate_id(36**3, random.Random(1))
    assert a.startswith("0") and len(a) == 6
    assert b.startswith("1000") and len(b) == 9


def test_id_collision_is_regenerated(kv: FakeKeyValueStore) -> None:
    ids = iter(["dup", "dup", "fresh"])
    s = TaskStore(TaskPersistence(kv), clock=Clock(), id_factory=lambda ts: next(ids))
    first = s.add("one")
    second = s.add("two")
    assert (first.id, second.id) == ("dup", "fresh")


def test_toggle_twice_restores(store: TaskStore) -> None:
    task = store.add("x")
    store.toggle(task.id)
    assert store.get(task.id).completed is True
    store.toggle(task.id)
    assert store.get(task.id).completed is False


def test_toggle_unknown_is_noop(store: TaskStore, kv: FakeKeyValueStore) -> None:
    store.add("x")
    writes = kv.writes
    assert store.toggle("missing") is None
    assert kv.writes == writes


def test_edit_rules(store: TaskStore) -> None:
    task = store.add("old")
    assert store.edit(task.id, "") is None
    assert store.get(task.id).text == "old"
    assert store.edit(task.id, "   ") is None
    assert store.get(task.id).text == "old"

    store.edit(task.id, "  new ")
    assert store.get(task.id).text == "new"
    assert store.edit("missing", "whatever") is None


def test_edit_keeps_position_and_identity(store: TaskStore) -> None:
    a = store.add("a")
    store.add("b")
    store.edit(a.id, "a2")
    assert _texts(store) == ["b", "a2"]
    assert store.get(a.id).created_at == a.created_at


def test_delete_twice_is_safe(store: TaskStore) -> None:
    task = store.add("x")
    store.add("y")
    assert store.delete(task.id) is True
    assert store.delete(task.id) is False
    assert _texts(store) == ["y"]
    assert task.id not in store


def test_set_all_completed(store: TaskStore) -> None:
    store.add("a")
    b = store.add("b")
    store.toggle(b.id)
    assert store.set_all_completed() == 1
    assert all(t.completed for t in store)
    assert store.set_all_completed() == 0


def test_clear_completed_and_clear_all(store: TaskStore) -> None:
    a = store.add("a")
    store.add("b")
    c = store.add("c")
    store.toggle(a.id)
    store.toggle(c.id)

    assert store.clear_completed() == 2
    assert _texts(store) == ["b"]
    assert store.clear_all() == 1
    assert len(store) == 0
    assert list(store.query()) == []


def test_query_search_and_filter(store: TaskStore) -> None:
    milk = store.add("Buy MILK")
    store.add("walk dog")
    store.add("milkshake")
    store.toggle(milk.id)

    assert _texts(store.query("milk", TaskFilter.ACTIVE)) == ["milkshake"]
    assert _texts(store.query("MiLk", TaskFilter.COMPLETED)) == ["Buy MILK"]
    assert _texts(store.query("", TaskFilter.ALL)) == ["milkshake", "walk dog", "Buy MILK"]
    assert _texts(store.query("  dog ", "all")) == ["walk dog"]
    assert store.query("nothing", TaskFilter.ALL).total == 0


def test_query_is_restartable_and_does_not_write(store: TaskStore, kv: FakeKeyValueStore) -> None:
    store.add("a")
    store.add("b")
    writes = kv.writes
    proj = store.query("", "active")
    assert _texts(proj) == _texts(proj) == ["b", "a"]
    assert len(proj) == 2
    assert kv.writes == writes


def test_unknown_filter_means_all(store: TaskStore) -> None:
    store.add("a")
    assert store.query("", "bogus").filter is TaskFilter.ALL
    assert store.query("", "bogus").total == 1


def test_mutations_persist_full_collection(store: TaskStore, kv: FakeKeyValueStore) -> None:
    a = store.add("a")
    store.add("b")
    store.toggle(a.id)

    saved = json.loads(kv.data["todos"])
    assert [e["text"] for e in saved] == ["b", "a"]
    assert saved[1] == {"id": a.id, "text": "a", "completed": True, "timestamp": a.created_at}


def test_store_rehydrates_from_persistence(kv: FakeKeyValueStore) -> None:
    first = TaskStore(TaskPersistence(kv), clock=Clock())
    a = first.add("a")
    first.add("b")
    first.toggle(a.id)

    second = TaskStore(TaskPersistence(kv))
    assert [(t.text, t.completed) for t in second] == [("b", False), ("a", True)]
    c = second.add("c")
    assert _texts(second) == ["c", "b", "a"]
    assert second.get(c.id) is c


def test_save_failure_keeps_memory_state() -> None:
    s = TaskStore(FailingPersistence())
    task = s.add("still here")
    assert task is not None
    assert _texts(s) == ["still here"]


def test_scenario_buy_milk_walk_dog(store: TaskStore) -> None:
    milk = store.add("buy milk")
    store.add("walk dog")
    assert _texts(store) == ["walk dog", "buy milk"]

    store.toggle(milk.id)
    assert _texts(store.query("", TaskFilter.COMPLETED)) == ["buy milk"]

    store.clear_completed()
    assert _texts(store) == ["walk dog"]
