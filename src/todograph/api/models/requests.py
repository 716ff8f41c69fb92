"""API request body models with Pydantic validation."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, field_validator

from todograph.database.validation import MAX_ID, MIN_ID

TodoId = Annotated[StrictInt, Field(ge=MIN_ID, le=MAX_ID)]


def _non_blank(v: str) -> str:
    if not v or not v.strip():
        raise ValueError("name must not be empty or whitespace")
    return v


class CreateTodoRequest(BaseModel):
    """Request model for creating a todo."""

    model_config = ConfigDict(extra="forbid")

    name: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is not empty or whitespace."""
        return _non_blank(v)


class ModifyTodoRequest(BaseModel):
    """Request model for modifying a todo. Both fields are required."""

    model_config = ConfigDict(extra="forbid")

    id: TodoId
    name: str
    done: StrictBool

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is not empty or whitespace."""
        return _non_blank(v)


class DepRequest(BaseModel):
    """Request model naming a dependency edge by its (from, to) pair."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    from_: TodoId = Field(alias="from")
    to: TodoId
