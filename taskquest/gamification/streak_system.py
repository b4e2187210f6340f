"""
Daily Streak Tracking

A streak counts consecutive calendar days with at least one completed task.

Logic:
- First completion ever: streak starts at 1
- Last completion yesterday: streak continues (+1)
- Last completion already today: unchanged (one increment per day)
- Anything older: streak resets to 1
"""

from typing import Optional
from datetime import date, timedelta
import logging

from taskquest.utils.datetime_helpers import today_local

logger = logging.getLogger(__name__)

STREAK_MILESTONES = (7, 14, 30, 100)


def update_streak(
    previous_streak: int,
    last_completion_date: Optional[date],
    today: Optional[date] = None
) -> int:
    """
    Streak value to record for a completion happening today

    Args:
        previous_streak: Streak stored before this completion
        last_completion_date: Calendar date of the previous completion, if any
        today: Calendar date of this completion (defaults to today in TIMEZONE)

    Returns:
        New streak length in days
    """
    if today is None:
        today = today_local()

    if last_completion_date is None:
        new_streak = 1
    elif last_completion_date == today:
        new_streak = previous_streak
    elif last_completion_date == today - timedelta(days=1):
        new_streak = previous_streak + 1
    else:
        new_streak = 1
        if previous_streak > 1:
            logger.debug(
                f"Streak broken: was {previous_streak}, "
                f"last completion {last_completion_date}, today {today}"
            )

    logger.debug(f"Streak {previous_streak} -> {new_streak}")
    return new_streak


def is_streak_milestone(previous_streak: int, new_streak: int) -> bool:
    """True when the streak just reached one of STREAK_MILESTONES"""
    return new_streak != previous_streak and new_streak in STREAK_MILESTONES


def format_streak_display(streak: int) -> str:
    """
    Format streak for display

    Args:
        streak: Current streak in days

    Returns:
        One-line string
    """
    if streak <= 0:
        return "No streak yet. Complete a task to start one! 💪"

    day_word = "day" if streak == 1 else "days"
    line = f"🔥 {streak} {day_word} streak"
    if streak in STREAK_MILESTONES:
        line += f" 🏆 {streak}-day milestone!"
    return line
