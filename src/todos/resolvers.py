from __future__ import annotations

import logging
from typing import Any, List, Optional

from .errors import Empty, InvalidArgument, NotFound
from .schemas import Todo
from .store import TodoStore

logger = logging.getLogger(__name__)


class TodoResolvers:
    """Named query and mutation operations over a ``TodoStore``.

    Arguments arrive from outside the process, so they are checked and coerced
    here before the store sees them. Lookups that miss are answered with
    ``None`` (no result) on purpose; failed mutations raise.
    """

    def __init__(self, store: TodoStore) -> None:
        self.store = store

    async def todo(self, id: Optional[str] = None) -> Optional[Todo]:
        if id is None:
            return None
        try:
            return await self.store.get(_require_str("id", id))
        except NotFound:
            logger.debug(f"todo({id}): no result")
            return None

    async def last_todo(self) -> Optional[Todo]:
        try:
            return await self.store.last()
        except Empty:
            logger.debug("lastTodo: store is empty")
            return None

    async def todo_list(self) -> List[Todo]:
        return await self.store.list()

    async def create_todo(self, text: Any = None, task: Any = None) -> Todo:
        if text is None:
            raise InvalidArgument("text is required")
        text = _require_str("text", text)
        task = "" if task is None else _require_str("task", task)
        todo = await self.store.create(text, task)
        logger.info(f"Created todo {todo.id}")
        return todo

    async def update_todo(self, id: Any = None, done: Any = None) -> Todo:
        if id is None:
            raise InvalidArgument("id is required")
        id = _require_str("id", id)
        if done is None:
            done = False
        elif not isinstance(done, bool):
            raise InvalidArgument("done must be a boolean")
        todo = await self.store.update(id, done)
        logger.info(f"Updated todo {todo.id} done={todo.done}")
        return todo


def _require_str(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidArgument(f"{name} must be a string")
    return value
