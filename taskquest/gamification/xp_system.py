"""
XP and Leveling System

Level curve:
- level = floor(sqrt(xp / 100)) + 1
- Level L is left once XP reaches L * L * 100, so level 1 spans 0-99 XP,
  level 2 spans 100-399, level 3 spans 400-899, and so on

XP Award Rules:
- Normal task: 15 XP
- Important task: 20 XP
- Urgent task: 30 XP
- Voice-dictated task: 20 XP
- Daily bonus task: fixed per bonus template
"""

from typing import Dict, Union
import logging
import math

logger = logging.getLogger(__name__)

PRIORITY_XP = {
    "normal": 15,
    "important": 20,
    "urgent": 30,
}

VOICE_TASK_XP = 20


def level_from_xp(xp: int) -> int:
    """
    Calculate level from total XP

    Integer square root keeps exact boundaries (400 XP is level 3, not 2.999...).
    Negative XP is a caller error and is not handled here.
    """
    return math.isqrt(xp // 100) + 1


def xp_threshold_for_level(level: int) -> int:
    """
    XP boundary between `level` and `level + 1`

    xp_threshold_for_level(0) == 0, so level 1 progress starts at zero.
    """
    return level * level * 100


def calculate_level_progress(xp: int) -> Dict[str, Union[int, float]]:
    """
    Calculate level and progress-bar values from total XP

    Returns:
        {
            'current_level': int,
            'xp_in_current_level': int,
            'xp_to_next_level': int,
            'total_xp_for_next_level': int,
            'progress_percent': float (0-100)
        }
    """
    level = level_from_xp(xp)
    floor_xp = xp_threshold_for_level(level - 1)
    next_xp = xp_threshold_for_level(level)

    xp_in_level = xp - floor_xp
    progress = xp_in_level / (next_xp - floor_xp) * 100

    return {
        "current_level": level,
        "xp_in_current_level": xp_in_level,
        "xp_to_next_level": next_xp - xp,
        "total_xp_for_next_level": next_xp,
        "progress_percent": progress,
    }


def get_xp_for_priority(priority: str) -> int:
    """
    XP reward for a manually created task

    Args:
        priority: TaskPriority or its string value

    Returns:
        XP amount (defaults to the normal reward for unknown values)
    """
    key = getattr(priority, "value", priority)
    amount = PRIORITY_XP.get(key)
    if amount is None:
        logger.warning(f"Unknown priority '{priority}', using normal XP")
        amount = PRIORITY_XP["normal"]
    return amount
