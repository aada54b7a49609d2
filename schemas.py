from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


def to_utc(value: datetime) -> datetime:
    """Aware UTC datetime. Naive values are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class TaskBase(BaseModel):
    title: str
    description: Optional[str] = None
    due_date: datetime
    completed: bool = False

    @field_validator("due_date")
    @classmethod
    def _due_date_utc(cls, value: datetime) -> datetime:
        return to_utc(value)


class TaskCreate(TaskBase):
    """Request body for POST and PUT. A client-sent ``id`` is dropped."""


class Task(TaskBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
