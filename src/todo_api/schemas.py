from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Schema for creating a new Todo item.

    Only ``title`` is read; any other field (including ``completed``) is
    ignored since new todos always start incomplete.
    """

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={"example": {"title": "Buy milk"}},
    )

    title: StrictStr = Field(..., description="Todo text")


# PUBLIC_INTERFACE
class TodoUpdate(BaseModel):
    """
    Schema for updating an existing Todo item.
    All fields are optional; only provided fields will be updated.
    """

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={"example": {"title": "Buy oat milk", "completed": True}},
    )

    title: Optional[StrictStr] = Field(default=None, description="New todo text")
    completed: Optional[StrictBool] = Field(default=None, description="New completion status")

    @field_validator("title", "completed", mode="before")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        """
        Omitting a field leaves it unchanged; sending an explicit null is an error.
        """
        if v is None:
            raise ValueError("must not be null")
        return v


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Schema returned by the API for a Todo item.
    """

    model_config = ConfigDict(
        json_schema_extra={"example": {"id": 1, "title": "Buy milk", "completed": False}}
    )

    id: int = Field(..., description="Unique identifier of the todo item")
    title: str = Field(..., description="Todo text")
    completed: bool = Field(..., description="Completion status flag")


# PUBLIC_INTERFACE
class ErrorOut(BaseModel):
    """
    Error body returned for 4xx/5xx responses.
    """

    model_config = ConfigDict(json_schema_extra={"example": {"error": "Todo not found"}})

    error: str = Field(..., description="Human readable error message")
