"""
Todo GraphQL package.

An in-memory, concurrency-safe todo store with a GraphQL surface on top.
``TodoStore`` owns the records, ``TodoResolvers`` maps the named operations
(``todo``, ``lastTodo``, ``todoList``, ``createTodo``, ``updateTodo``) onto it,
and ``build_schema``/``build_router`` expose them over HTTP.
"""

from .errors import Empty, InvalidArgument, NotFound, TodoError  # noqa: F401
from .resolvers import TodoResolvers  # noqa: F401
from .router import build_router  # noqa: F401
from .graphql_schema import build_schema  # noqa: F401
from .schemas import Todo  # noqa: F401
from .store import TodoStore, seed_store  # noqa: F401
