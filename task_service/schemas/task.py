from pydantic import BaseModel, Field, StrictBool
from datetime import datetime

from ..models import Priority


class TaskBase(BaseModel):
    """Fields every full task write must carry.

    Strings must be real, non-empty JSON strings and `completed` a real
    JSON boolean; "true" or 1 are rejected.
    """
    title: str = Field(min_length=1, strict=True)
    description: str = Field(min_length=1, strict=True)
    completed: StrictBool


class TaskCreate(TaskBase):
    """Schema for creating new tasks."""
    priority: Priority = Priority.LOW


class TaskUpdate(TaskBase):
    """Schema for replacing an existing task. Priority is kept as is."""
    pass


class Task(BaseModel):
    """Complete task schema with all fields."""
    id: int
    title: str
    description: str
    completed: bool
    priority: Priority
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class Message(BaseModel):
    """Plain `{"message": ...}` body used for confirmations and errors."""
    message: str
