from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Callable, Dict, List, Optional

from .errors import Empty, InvalidArgument, NotFound
from .schemas import SAMPLE_TODOS, Todo

logger = logging.getLogger(__name__)

# Re-draws allowed when the id factory hands back an id already in use.
MAX_ID_ATTEMPTS = 8


def _uuid_id() -> str:
    return uuid.uuid4().hex


class TodoStore:
    """In-memory, insertion-ordered store of todo records.

    Every operation runs under a single ``asyncio.Lock`` so callers never see a
    half-applied create or update. Records handed out are copies; the only way
    to change a stored record is ``update``.
    """

    def __init__(self, id_factory: Optional[Callable[[], str]] = None) -> None:
        self._lock = asyncio.Lock()
        self._todos: List[Todo] = []
        self._index: Dict[str, Todo] = {}
        self._id_factory = id_factory or _uuid_id

    async def create(self, text: str, task: str = "") -> Todo:
        if not isinstance(text, str) or not text:
            raise InvalidArgument("text must be a non-empty string")
        if not isinstance(task, str):
            raise InvalidArgument("task must be a string")
        async with self._lock:
            todo = Todo(id=self._next_id(), text=text, task=task, done=False)
            self._todos.append(todo)
            self._index[todo.id] = todo
            logger.debug(f"Stored todo {todo.id} ({len(self._todos)} total)")
            return todo.model_copy()

    async def get(self, todo_id: str) -> Todo:
        async with self._lock:
            todo = self._index.get(todo_id)
            if todo is None:
                raise NotFound(f"todo '{todo_id}' does not exist")
            return todo.model_copy()

    async def last(self) -> Todo:
        async with self._lock:
            if not self._todos:
                raise Empty("no todos have been created")
            return self._todos[-1].model_copy()

    async def list(self) -> List[Todo]:
        async with self._lock:
            return [todo.model_copy() for todo in self._todos]

    async def update(self, todo_id: str, done: bool) -> Todo:
        if not isinstance(done, bool):
            raise InvalidArgument("done must be a boolean")
        async with self._lock:
            todo = self._index.get(todo_id)
            if todo is None:
                raise NotFound(f"todo '{todo_id}' does not exist")
            todo.done = done
            return todo.model_copy()

    async def count(self) -> int:
        async with self._lock:
            return len(self._todos)

    def _next_id(self) -> str:
        # Caller holds the lock.
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = self._id_factory()
            if candidate and candidate not in self._index:
                return candidate
            logger.warning(f"Id factory returned unusable id {candidate!r}, drawing again")
        raise RuntimeError(f"could not generate a unique todo id after {MAX_ID_ATTEMPTS} attempts")


async def seed_store(store: TodoStore) -> List[Todo]:
    """Load the sample todos so a fresh service has something to show."""
    seeded = [await store.create(text, task) for text, task in SAMPLE_TODOS]
    logger.info(f"Seeded {len(seeded)} sample todos")
    return seeded
