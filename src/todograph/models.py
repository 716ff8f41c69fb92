"""Domain models for todos and their dependency edges.

A todo is a named task with a completion flag. A dependency edge is a
directed ``(from, to)`` pair of todo ids; it has no identity of its own and
nothing checks that either end refers to an existing todo.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Todo(BaseModel):
    """A todo item."""

    id: int
    name: str
    done: bool = False

    @classmethod
    def from_row(cls, row: Any) -> Todo:
        """Build a Todo from a ``todos`` row (id, name, done)."""
        return cls(id=row[0], name=row[1], done=bool(row[2]))


class Dep(BaseModel):
    """A directed dependency edge between two todo ids.

    The source id is exposed as ``from`` on the wire; ``from`` is a Python
    keyword, so the attribute is ``from_``.
    """

    model_config = ConfigDict(populate_by_name=True)

    from_: int = Field(alias="from")
    to: int

    @classmethod
    def from_row(cls, row: Any) -> Dep:
        """Build a Dep from an (id_from, id_to) row."""
        return cls(from_=row[0], to=row[1])


class GetAll(BaseModel):
    """Every todo and every dependency edge, read as one snapshot."""

    todos: list[Todo] = Field(default_factory=list)
    deps: list[Dep] = Field(default_factory=list)
