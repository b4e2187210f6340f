"""
Gamification engine for TaskQuest

Pure, synchronous functions over a user statistics snapshot:
- XP and leveling curve
- Daily streak continuation
- Achievement detection
- Encouragement messages and daily bonus tasks
"""

from taskquest.gamification.xp_system import (
    level_from_xp,
    xp_threshold_for_level,
    calculate_level_progress,
    get_xp_for_priority,
)
from taskquest.gamification.streak_system import update_streak, format_streak_display
from taskquest.gamification.achievement_system import (
    ACHIEVEMENT_DEFINITIONS,
    evaluate_achievements,
    get_achievement_progress,
    count_completed_today,
)
from taskquest.gamification.encouragement import pick_encouragement_message, format_level_up_message
from taskquest.gamification.bonus_tasks import generate_bonus_task

__all__ = [
    "level_from_xp",
    "xp_threshold_for_level",
    "calculate_level_progress",
    "get_xp_for_priority",
    "update_streak",
    "format_streak_display",
    "ACHIEVEMENT_DEFINITIONS",
    "evaluate_achievements",
    "get_achievement_progress",
    "count_completed_today",
    "pick_encouragement_message",
    "format_level_up_message",
    "generate_bonus_task",
]
