"""Pydantic models for the Task Service API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, model_validator


class TaskInput(BaseModel):
    """Request body for creating or replacing a task.

    Keys match field names case-insensitively, and a JSON ``null`` body
    decodes like ``{}``. Missing fields decode to empty strings. An ``id``
    key, or any other unknown key, is ignored: the store owns id assignment.
    """

    model_config = ConfigDict(extra="ignore")

    title: StrictStr = Field(default="", description="The task title")
    description: StrictStr = Field(default="", description="Free-form task details")
    status: StrictStr = Field(
        default="",
        description='Task status, conventionally "pending" or "completed"',
    )

    @model_validator(mode="before")
    @classmethod
    def _fold_keys(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            # Later keys win when two spellings of a field are sent.
            return {str(key).lower(): value for key, value in data.items()}
        return data


class Task(BaseModel):
    """A task item held by the store."""

    id: int = Field(..., description="Store-assigned identifier, never reused")
    title: str = Field(default="", description="The task title")
    description: str = Field(default="", description="Free-form task details")
    status: str = Field(default="", description="Task status")


class HealthResponse(BaseModel):
    """Response from the health check endpoint."""

    status: str = "healthy"
    service: str
    version: str = "1.0.0"
