"""Achievement and completion result models for gamification"""
from typing import Optional
from pydantic import BaseModel, Field

from taskquest.models.task import Task


class AchievementDefinition(BaseModel):
    """Achievement catalog entry"""
    id: str
    title: str
    description: str
    icon: str


class CompletionResult(BaseModel):
    """Everything the presentation layer needs after a task is completed"""
    task: Task
    xp_awarded: int
    total_xp: int
    old_level: int
    new_level: int
    leveled_up: bool
    streak: int
    new_achievements: list[str] = Field(default_factory=list)
    message: str
    level_up_message: Optional[str] = None


class DashboardStats(BaseModel):
    """Summary numbers shown on the stats dashboard"""
    level: int
    xp: int
    progress_percent: float
    xp_to_next_level: int
    streak: int
    completed_today: int
    tasks_completed: int
    achievements_unlocked: int
    total_achievements: int
