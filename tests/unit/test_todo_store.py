"""
Unit tests for the in-memory todo store
"""
import asyncio
import itertools

import pytest

from src.todos import Empty, InvalidArgument, NotFound, TodoStore, seed_store
from src.todos.schemas import SAMPLE_TODOS

pytestmark = pytest.mark.asyncio


class TestCreate:
    async def test_create_assigns_id_and_defaults(self, store):
        todo = await store.create("Buy milk", "")
        assert todo.id
        assert todo.text == "Buy milk"
        assert todo.task == ""
        assert todo.done is False

    async def test_create_ids_are_distinct(self, store):
        todos = [await store.create(f"todo {i}") for i in range(50)]
        assert len({t.id for t in todos}) == 50

    async def test_concurrent_creates_never_collide(self, store):
        todos = await asyncio.gather(*(store.create(f"todo {i}") for i in range(200)))
        assert len({t.id for t in todos}) == 200
        listed = await store.list()
        assert [t.text for t in listed] == [f"todo {i}" for i in range(200)]

    async def test_empty_text_rejected(self, store):
        with pytest.raises(InvalidArgument):
            await store.create("", "x")
        assert await store.list() == []

    async def test_non_string_task_rejected(self, store):
        with pytest.raises(InvalidArgument):
            await store.create("text", 5)
        assert await store.count() == 0

    async def test_duplicate_ids_from_factory_are_redrawn(self):
        ids = iter(["dup", "dup", "other"])
        store = TodoStore(id_factory=lambda: next(ids))
        first = await store.create("one")
        second = await store.create("two")
        assert first.id == "dup"
        assert second.id == "other"

    async def test_factory_that_never_yields_fresh_id_fails(self):
        store = TodoStore(id_factory=lambda: "same")
        await store.create("one")
        with pytest.raises(RuntimeError):
            await store.create("two")
        assert await store.count() == 1

    async def test_counter_factory(self):
        counter = itertools.count(1)
        store = TodoStore(id_factory=lambda: f"id{next(counter):04d}")
        todo = await store.create("one")
        assert todo.id == "id0001"


class TestRead:
    async def test_get_returns_created_record(self, store):
        created = await store.create("Walk dog", "chores")
        fetched = await store.get(created.id)
        assert fetched == created

    async def test_get_unknown_raises(self, store):
        with pytest.raises(NotFound):
            await store.get("missing")

    async def test_last_on_empty_store(self, store):
        with pytest.raises(Empty):
            await store.last()

    async def test_last_is_most_recent_create(self, store):
        created = [await store.create(f"todo {i}") for i in range(5)]
        assert await store.last() == created[-1]

    async def test_last_ignores_update_order(self, store):
        first = await store.create("first")
        second = await store.create("second")
        await store.update(first.id, True)
        assert (await store.last()).id == second.id

    async def test_list_preserves_creation_order(self, store):
        created = [await store.create(f"todo {i}") for i in range(3)]
        assert await store.list() == created

    async def test_returned_records_are_copies(self, store):
        created = await store.create("immutable")
        created.done = True
        created.text = "changed"
        listed = await store.list()
        listed[0].done = True
        stored = await store.get(created.id)
        assert stored.text == "immutable"
        assert stored.done is False


class TestUpdate:
    async def test_update_sets_done_and_keeps_other_fields(self, store):
        created = await store.create("Pay rent", "bills")
        updated = await store.update(created.id, True)
        assert updated.done is True
        fetched = await store.get(created.id)
        assert fetched == updated
        assert (fetched.id, fetched.text, fetched.task) == (created.id, created.text, created.task)

    async def test_update_can_clear_done(self, store):
        created = await store.create("Pay rent")
        await store.update(created.id, True)
        assert (await store.update(created.id, False)).done is False

    async def test_update_missing_leaves_store_unchanged(self, store):
        await store.create("one")
        before = await store.list()
        with pytest.raises(NotFound):
            await store.update("nonexistent", True)
        assert await store.list() == before

    async def test_update_requires_bool(self, store):
        created = await store.create("one")
        with pytest.raises(InvalidArgument):
            await store.update(created.id, "yes")


async def test_buy_milk_scenario(store):
    created = await store.create("Buy milk", "")
    assert created.done is False
    updated = await store.update(created.id, True)
    assert updated.model_dump() == {"id": created.id, "text": "Buy milk", "task": "", "done": True}
    assert await store.list() == [updated]


async def test_seed_store_loads_samples(store):
    seeded = await seed_store(store)
    assert [t.text for t in seeded] == [text for text, _ in SAMPLE_TODOS]
    assert len({t.id for t in seeded}) == len(SAMPLE_TODOS)
    assert await store.count() == len(SAMPLE_TODOS)
