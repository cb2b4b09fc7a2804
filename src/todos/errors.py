from __future__ import annotations


class TodoError(Exception):
    """Base class for recoverable todo store errors."""

    code = "TODO_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgument(TodoError):
    code = "INVALID_ARGUMENT"


class NotFound(TodoError):
    code = "NOT_FOUND"


class Empty(TodoError):
    code = "EMPTY"
