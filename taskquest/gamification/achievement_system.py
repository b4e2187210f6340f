"""
Achievement System

A closed catalog of seven one-time badges. Each has a criteria entry that is
checked independently of the others:
- Milestones (first task, 100 tasks, levels 5 and 10)
- Consistency (7-day streak, 10 tasks in one day)
- Exploration (10 voice-dictated tasks)

Evaluation never mutates the stats; the caller unions the result into the
stored achievement set.
"""

from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Set
from datetime import date
import logging

from taskquest.models.achievement import AchievementDefinition
from taskquest.models.task import Task
from taskquest.utils.datetime_helpers import to_local_date, today_local

if TYPE_CHECKING:
    from taskquest.models.user_stats import UserStats

logger = logging.getLogger(__name__)


ACHIEVEMENT_DEFINITIONS: Dict[str, AchievementDefinition] = {
    "first_task": AchievementDefinition(
        id="first_task",
        title="Getting Started",
        description="Complete your first task",
        icon="⭐",
    ),
    "task_slayer": AchievementDefinition(
        id="task_slayer",
        title="Task Slayer",
        description="Complete 10 tasks in a single day",
        icon="⚡",
    ),
    "voice_master": AchievementDefinition(
        id="voice_master",
        title="Voice Master",
        description="Create 10 tasks using voice input",
        icon="🎙️",
    ),
    "streak_warrior": AchievementDefinition(
        id="streak_warrior",
        title="Streak Warrior",
        description="Maintain a 7-day streak",
        icon="🔥",
    ),
    "level_5": AchievementDefinition(
        id="level_5",
        title="Rising Star",
        description="Reach level 5",
        icon="🏆",
    ),
    "level_10": AchievementDefinition(
        id="level_10",
        title="Productivity Master",
        description="Reach level 10",
        icon="👑",
    ),
    "century_club": AchievementDefinition(
        id="century_club",
        title="Century Club",
        description="Complete 100 tasks",
        icon="🎯",
    ),
}

ACHIEVEMENT_CRITERIA: Dict[str, Dict[str, Any]] = {
    "first_task": {"type": "completion_count", "count": 1},
    "task_slayer": {"type": "daily_completions", "count": 10},
    "voice_master": {"type": "voice_count", "count": 10},
    "streak_warrior": {"type": "streak", "days": 7},
    "level_5": {"type": "level", "level": 5},
    "level_10": {"type": "level", "level": 10},
    "century_club": {"type": "completion_count", "count": 100},
}


def count_completed_today(tasks: Iterable[Task], today: Optional[date] = None) -> int:
    """
    Count completed tasks that were created today

    The day is keyed off the task's creation timestamp, not its completion:
    a task created yesterday and completed today does not count.
    """
    if today is None:
        today = today_local()
    return sum(
        1 for task in tasks
        if task.completed and to_local_date(task.created_at) == today
    )


def evaluate_achievements(
    stats: "UserStats",
    tasks: Iterable[Task],
    today: Optional[date] = None
) -> Set[str]:
    """
    Find achievements whose condition now holds and that are not yet unlocked

    Args:
        stats: Current user statistics snapshot (not modified)
        tasks: Full task collection
        today: Calendar day for the daily rule (defaults to today in TIMEZONE)

    Returns:
        Set of newly unlocked achievement identifiers
    """
    tasks = list(tasks)
    newly_unlocked = set()
    completed_today = None

    for achievement_id, criteria in ACHIEVEMENT_CRITERIA.items():
        # Skip if already unlocked
        if achievement_id in stats.achievements:
            continue

        criteria_type = criteria["type"]
        is_unlocked = False

        if criteria_type == "completion_count":
            is_unlocked = stats.tasks_completed >= criteria["count"]

        elif criteria_type == "daily_completions":
            if completed_today is None:
                completed_today = count_completed_today(tasks, today)
            is_unlocked = completed_today >= criteria["count"]

        elif criteria_type == "voice_count":
            is_unlocked = stats.voice_tasks_created >= criteria["count"]

        elif criteria_type == "streak":
            is_unlocked = stats.streak >= criteria["days"]

        elif criteria_type == "level":
            is_unlocked = stats.level >= criteria["level"]

        if is_unlocked:
            newly_unlocked.add(achievement_id)

    if newly_unlocked:
        logger.debug(f"Newly unlocked achievements: {sorted(newly_unlocked)}")

    return newly_unlocked


def get_achievement_progress(stats: "UserStats") -> Dict[str, Any]:
    """
    Summarize unlocked and locked achievements

    Returns:
        {
            'unlocked': [AchievementDefinition, ...] (catalog order),
            'locked': [AchievementDefinition, ...],
            'total_unlocked': int,
            'total_achievements': int,
            'completion_percent': float
        }
    """
    unlocked: List[AchievementDefinition] = []
    locked: List[AchievementDefinition] = []

    # Identifiers outside the catalog are ignored
    for achievement_id, definition in ACHIEVEMENT_DEFINITIONS.items():
        if achievement_id in stats.achievements:
            unlocked.append(definition)
        else:
            locked.append(definition)

    total = len(ACHIEVEMENT_DEFINITIONS)

    return {
        "unlocked": unlocked,
        "locked": locked,
        "total_unlocked": len(unlocked),
        "total_achievements": total,
        "completion_percent": len(unlocked) / total * 100,
    }
