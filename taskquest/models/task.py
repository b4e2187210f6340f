"""Task models"""
from enum import Enum
from datetime import datetime, date
from typing import Optional
from uuid import uuid4
from pydantic import BaseModel, ConfigDict, Field, field_validator

from taskquest.utils.datetime_helpers import now_utc


class TaskCategory(str, Enum):
    """Task categories"""
    WORK = "work"
    PERSONAL = "personal"
    HEALTH = "health"
    BONUS = "bonus"


class TaskPriority(str, Enum):
    """Task priority, which also decides the XP reward"""
    NORMAL = "normal"
    IMPORTANT = "important"
    URGENT = "urgent"


def new_task_id() -> str:
    return f"task-{uuid4().hex[:12]}"


class Task(BaseModel):
    """A single to-do item. Only `completed` changes after creation."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_task_id)
    title: str
    description: str = ""
    category: TaskCategory = TaskCategory.PERSONAL
    priority: TaskPriority = TaskPriority.NORMAL
    completed: bool = False
    created_at: datetime = Field(default_factory=now_utc)
    due_date: Optional[date] = None
    xp_reward: int = Field(gt=0)

    @field_validator('title')
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Strip whitespace and reject blank titles"""
        v = v.strip()
        if not v:
            raise ValueError("Task title cannot be empty")
        return v

    def mark_completed(self) -> "Task":
        """Return a completed copy of this task"""
        return self.model_copy(update={"completed": True})
