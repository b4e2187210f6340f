"""
Daily Bonus Tasks

One system-generated task per calendar day, drawn from a fixed set of small
wellbeing habits with their own XP reward.
"""

from typing import Optional
from datetime import date
import logging
import random

from taskquest.gamification.encouragement import RandomSource
from taskquest.models.task import Task, TaskCategory, TaskPriority
from taskquest.utils.datetime_helpers import now_utc, today_local

logger = logging.getLogger(__name__)

BONUS_TASKS = (
    {"title": "Take a 10-minute walk", "description": "Get some fresh air and movement", "xp": 25},
    {"title": "Drink 8 glasses of water", "description": "Stay hydrated throughout the day", "xp": 20},
    {"title": "Meditate for 5 minutes", "description": "Practice mindfulness", "xp": 30},
    {"title": "Call a friend or family member", "description": "Connect with someone you care about", "xp": 35},
    {"title": "Organize your workspace", "description": "Clean and tidy your work area", "xp": 25},
)

_default_rng = random.Random()


def bonus_task_id(day: date) -> str:
    return f"bonus-{day.isoformat()}"


def generate_bonus_task(
    today: Optional[date] = None,
    rng: Optional[RandomSource] = None
) -> Task:
    """
    Create the bonus task for a given day

    Args:
        today: Day the bonus belongs to (defaults to today in TIMEZONE)
        rng: Random source used to pick the template

    Returns:
        Uncompleted bonus Task
    """
    if today is None:
        today = today_local()

    template = (rng or _default_rng).choice(BONUS_TASKS)
    task = Task(
        id=bonus_task_id(today),
        title=f"🎯 {template['title']}",
        description=template["description"],
        category=TaskCategory.BONUS,
        priority=TaskPriority.NORMAL,
        created_at=now_utc(),
        xp_reward=template["xp"],
    )

    logger.info(f"Generated bonus task for {today}: {template['title']} (+{template['xp']} XP)")
    return task
