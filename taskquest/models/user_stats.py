"""User statistics model"""
from datetime import date
from typing import Optional
from pydantic import BaseModel, Field, computed_field

from taskquest.gamification.xp_system import level_from_xp


class UserStats(BaseModel):
    """
    Accumulated progress for the single local user.

    Only XP is ground truth for progression; `level` is always derived from it,
    so a stored snapshot can never disagree with its own XP.
    """
    xp: int = Field(default=0, ge=0)
    streak: int = Field(default=0, ge=0)
    last_completion_date: Optional[date] = None
    achievements: set[str] = Field(default_factory=set)
    tasks_completed: int = Field(default=0, ge=0)
    voice_tasks_created: int = Field(default=0, ge=0)

    @computed_field
    @property
    def level(self) -> int:
        return level_from_xp(self.xp)
