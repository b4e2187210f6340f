"""
TaskService - Task and Completion Business Logic

Owns the read-modify-write cycle around the gamification engine:
reads tasks and stats from the store, asks the engine for the new values,
commits the merged snapshot.
"""

import logging
import threading
from datetime import date, datetime
from typing import List, Optional

from taskquest.exceptions import (
    TaskAlreadyCompletedError,
    TaskNotFoundError,
    ValidationError,
)
from taskquest.gamification import (
    calculate_level_progress,
    count_completed_today,
    evaluate_achievements,
    format_level_up_message,
    generate_bonus_task,
    get_xp_for_priority,
    pick_encouragement_message,
    update_streak,
    ACHIEVEMENT_DEFINITIONS,
)
from taskquest.gamification.encouragement import RandomSource
from taskquest.gamification.streak_system import is_streak_milestone
from taskquest.gamification.xp_system import VOICE_TASK_XP
from taskquest.models.achievement import CompletionResult, DashboardStats
from taskquest.models.task import Task, TaskCategory, TaskPriority
from taskquest.models.user_stats import UserStats
from taskquest.store.task_store import TaskStore
from taskquest.utils.datetime_helpers import now_utc, to_local_date, today_local

logger = logging.getLogger(__name__)


class TaskService:
    """
    Service for task management and gamification.

    Responsibilities:
    - Creating tasks (manual and voice-dictated)
    - Completing tasks and awarding XP, streaks and achievements
    - Deleting and listing tasks
    - Generating the daily bonus task
    - Dashboard numbers
    """

    def __init__(self, store: TaskStore, rng: Optional[RandomSource] = None):
        """
        Initialize TaskService.

        Args:
            store: Task repository
            rng: Random source for messages and bonus tasks (optional)
        """
        self.store = store
        self.rng = rng
        self._lock = threading.Lock()
        logger.debug("TaskService initialized")

    def add_task(
        self,
        title: str,
        description: str = "",
        category: TaskCategory = TaskCategory.PERSONAL,
        priority: TaskPriority = TaskPriority.NORMAL,
        due_date: Optional[date] = None,
    ) -> Task:
        """
        Create a task; its XP reward follows from the priority.

        Raises:
            ValidationError: If the title is blank
        """
        if not title or not title.strip():
            raise ValidationError("Task title cannot be empty", field="title", value=title)

        task = Task(
            title=title,
            description=description.strip(),
            category=category,
            priority=priority,
            due_date=due_date,
            xp_reward=get_xp_for_priority(priority),
        )

        with self._lock:
            tasks = self.store.load_tasks()
            tasks.append(task)
            self.store.save_tasks(tasks)

        logger.info(f"Added task {task.id}: '{task.title}' (+{task.xp_reward} XP)")
        return task

    def create_voice_task(self, transcript: str) -> Task:
        """
        Create a task from a finished dictation transcript.

        Voice tasks earn bonus XP and count toward the voice_master achievement.

        Raises:
            ValidationError: If the transcript is blank
        """
        if not transcript or not transcript.strip():
            raise ValidationError("Transcript is empty", field="transcript", value=transcript)

        task = Task(
            title=transcript,
            description="Created with voice input",
            category=TaskCategory.PERSONAL,
            priority=TaskPriority.NORMAL,
            xp_reward=VOICE_TASK_XP,
        )

        with self._lock:
            tasks = self.store.load_tasks()
            tasks.append(task)

            stats = self.store.load_stats()
            stats = stats.model_copy(update={"voice_tasks_created": stats.voice_tasks_created + 1})
            self.store.commit(tasks=tasks, stats=stats)

        logger.info(
            f"Added voice task {task.id}: '{task.title}' "
            f"(voice tasks: {stats.voice_tasks_created})"
        )
        return task

    def complete_task(self, task_id: str, now: Optional[datetime] = None) -> CompletionResult:
        """
        Complete a task and apply XP, streak and achievement updates.

        Args:
            task_id: ID of a user task or of today's bonus task
            now: Completion instant (defaults to the current time)

        Returns:
            CompletionResult with the awarded XP, level change, streak,
            new achievements and celebration messages

        Raises:
            TaskNotFoundError: If no task has this ID
            TaskAlreadyCompletedError: If the task was completed before
        """
        today = to_local_date(now) if now else today_local()

        with self._lock:
            tasks = self.store.load_tasks()
            bonus, bonus_date = self.store.load_bonus()

            index = next((i for i, t in enumerate(tasks) if t.id == task_id), None)
            if index is not None:
                task = tasks[index]
            elif bonus is not None and bonus.id == task_id:
                task = bonus
            else:
                raise TaskNotFoundError(task_id, operation="complete_task")

            if task.completed:
                raise TaskAlreadyCompletedError(task_id, operation="complete_task")

            completed = task.mark_completed()
            if index is not None:
                tasks[index] = completed
            else:
                bonus = completed

            stats = self.store.load_stats()
            old_level = stats.level
            new_streak = update_streak(stats.streak, stats.last_completion_date, today)

            updated = stats.model_copy(update={
                "xp": stats.xp + completed.xp_reward,
                "streak": new_streak,
                "last_completion_date": today,
                "tasks_completed": stats.tasks_completed + 1,
            })

            all_tasks = ([bonus] if bonus is not None else []) + tasks
            new_achievements = evaluate_achievements(updated, all_tasks, today)
            updated = updated.model_copy(update={"achievements": updated.achievements | new_achievements})

            if index is None:
                self.store.commit(tasks=tasks, stats=updated, bonus=bonus, bonus_date=bonus_date or today)
            else:
                self.store.commit(tasks=tasks, stats=updated)

        leveled_up = updated.level > old_level
        message = pick_encouragement_message(self.rng)
        if is_streak_milestone(stats.streak, new_streak):
            message += f"\n🏆 {new_streak}-day streak!"

        logger.info(
            f"Completed task {task_id} (+{completed.xp_reward} XP). "
            f"Total: {updated.xp} XP, Level: {updated.level}, Streak: {new_streak}"
        )
        if leveled_up:
            logger.info(f"Leveled up from {old_level} to {updated.level}!")
        for achievement_id in sorted(new_achievements):
            logger.info(f"Unlocked achievement: {achievement_id}")

        return CompletionResult(
            task=completed,
            xp_awarded=completed.xp_reward,
            total_xp=updated.xp,
            old_level=old_level,
            new_level=updated.level,
            leveled_up=leveled_up,
            streak=new_streak,
            new_achievements=sorted(new_achievements),
            message=message,
            level_up_message=format_level_up_message(updated.level) if leveled_up else None,
        )

    def delete_task(self, task_id: str) -> None:
        """
        Delete a user task. The daily bonus task cannot be deleted.

        Raises:
            TaskNotFoundError: If no user task has this ID
        """
        with self._lock:
            tasks = self.store.load_tasks()
            remaining = [t for t in tasks if t.id != task_id]
            if len(remaining) == len(tasks):
                raise TaskNotFoundError(task_id, operation="delete_task")
            self.store.save_tasks(remaining)

        logger.info(f"Deleted task {task_id}")

    def ensure_daily_bonus(self, today: Optional[date] = None) -> Task:
        """
        Return today's bonus task, generating a new one on the first call of a day.
        """
        if today is None:
            today = today_local()

        with self._lock:
            bonus, bonus_date = self.store.load_bonus()
            if bonus is None or bonus_date != today:
                bonus = generate_bonus_task(today, self.rng)
                self.store.save_bonus(bonus, today)

        return bonus

    def list_tasks(self, include_completed: bool = True) -> List[Task]:
        """Bonus task first, then user tasks in creation order"""
        tasks = self.store.load_tasks()
        bonus, _ = self.store.load_bonus()
        all_tasks = ([bonus] if bonus is not None else []) + tasks
        if not include_completed:
            all_tasks = [t for t in all_tasks if not t.completed]
        return all_tasks

    def get_stats(self) -> UserStats:
        return self.store.load_stats()

    def get_dashboard(self, today: Optional[date] = None) -> DashboardStats:
        """Numbers for the stats dashboard"""
        stats = self.store.load_stats()
        progress = calculate_level_progress(stats.xp)

        return DashboardStats(
            level=stats.level,
            xp=stats.xp,
            progress_percent=progress["progress_percent"],
            xp_to_next_level=progress["xp_to_next_level"],
            streak=stats.streak,
            completed_today=count_completed_today(self.list_tasks(), today),
            tasks_completed=stats.tasks_completed,
            achievements_unlocked=len(stats.achievements & set(ACHIEVEMENT_DEFINITIONS)),
            total_achievements=len(ACHIEVEMENT_DEFINITIONS),
        )
