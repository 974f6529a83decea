from sqlmodel import SQLModel, Field
from datetime import datetime, timezone
import enum


class Priority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Task(SQLModel):
    """In-memory task record held by the TaskStore."""

    id: int = Field(gt=0)
    title: str
    description: str
    completed: bool = Field(default=False)
    priority: Priority = Field(default=Priority.LOW)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
