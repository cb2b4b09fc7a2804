from __future__ import annotations

from pydantic import BaseModel, Field


class Todo(BaseModel):
    id: str
    text: str = Field(..., min_length=1)
    task: str = ""
    done: bool = False


SAMPLE_TODOS = [
    ("A todo not to forget", ""),
    ("This is the most important", ""),
    ("Please do this or else", ""),
]
