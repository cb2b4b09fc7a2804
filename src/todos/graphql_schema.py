from __future__ import annotations

from typing import Any, Optional

from graphql import (
    GraphQLArgument,
    GraphQLBoolean,
    GraphQLError,
    GraphQLField,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLResolveInfo,
    GraphQLSchema,
    GraphQLString,
)

from .errors import TodoError
from .resolvers import TodoResolvers
from .schemas import Todo


todo_type = GraphQLObjectType(
    name="Todo",
    fields={
        "id": GraphQLField(GraphQLString),
        "text": GraphQLField(GraphQLString),
        "done": GraphQLField(GraphQLBoolean),
        "task": GraphQLField(GraphQLString),
    },
)


def _to_payload(todo: Optional[Todo]) -> Optional[dict]:
    return None if todo is None else todo.model_dump()


def _as_graphql_error(exc: TodoError) -> GraphQLError:
    return GraphQLError(exc.message, original_error=exc, extensions={"code": exc.code})


def build_schema(resolvers: TodoResolvers) -> GraphQLSchema:
    """Wire the todo operations into a schema bound to ``resolvers``."""

    async def resolve_todo(_root: Any, _info: GraphQLResolveInfo, id: Optional[str] = None):
        try:
            return _to_payload(await resolvers.todo(id))
        except TodoError as exc:
            raise _as_graphql_error(exc) from exc

    async def resolve_last_todo(_root: Any, _info: GraphQLResolveInfo):
        return _to_payload(await resolvers.last_todo())

    async def resolve_todo_list(_root: Any, _info: GraphQLResolveInfo):
        return [_to_payload(todo) for todo in await resolvers.todo_list()]

    async def resolve_create_todo(_root: Any, _info: GraphQLResolveInfo, text: str, task: Optional[str] = None):
        try:
            return _to_payload(await resolvers.create_todo(text=text, task=task))
        except TodoError as exc:
            raise _as_graphql_error(exc) from exc

    async def resolve_update_todo(_root: Any, _info: GraphQLResolveInfo, id: str, done: Optional[bool] = None):
        try:
            return _to_payload(await resolvers.update_todo(id=id, done=done))
        except TodoError as exc:
            raise _as_graphql_error(exc) from exc

    root_query = GraphQLObjectType(
        name="RootQuery",
        fields={
            "todo": GraphQLField(
                todo_type,
                description="Get single todo",
                args={"id": GraphQLArgument(GraphQLString)},
                resolve=resolve_todo,
            ),
            "lastTodo": GraphQLField(
                todo_type,
                description="Last todo added",
                resolve=resolve_last_todo,
            ),
            "todoList": GraphQLField(
                GraphQLList(todo_type),
                description="List of todos",
                resolve=resolve_todo_list,
            ),
        },
    )

    root_mutation = GraphQLObjectType(
        name="RootMutation",
        fields={
            "createTodo": GraphQLField(
                todo_type,
                description="Create a new todo",
                args={
                    "text": GraphQLArgument(GraphQLNonNull(GraphQLString)),
                    "task": GraphQLArgument(GraphQLString),
                },
                resolve=resolve_create_todo,
            ),
            "updateTodo": GraphQLField(
                todo_type,
                description="Update existing todo, mark it done or not done",
                args={
                    "id": GraphQLArgument(GraphQLNonNull(GraphQLString)),
                    "done": GraphQLArgument(GraphQLBoolean),
                },
                resolve=resolve_update_todo,
            ),
        },
    )

    return GraphQLSchema(query=root_query, mutation=root_mutation)
