"""
Typed access to tasks, user stats and the daily bonus task on top of a
key-value store.
"""

import logging
from datetime import date
from typing import Optional, Tuple

from pydantic import ValidationError as PydanticValidationError

from taskquest.exceptions import StorageError
from taskquest.models.task import Task
from taskquest.models.user_stats import UserStats
from taskquest.store.kv_store import InMemoryStore
from taskquest.utils.datetime_helpers import today_local

logger = logging.getLogger(__name__)

TASKS_KEY = "tasks"
USER_STATS_KEY = "user_stats"
DAILY_BONUS_KEY = "daily_bonus"
LAST_BONUS_DATE_KEY = "last_bonus_date"


class TaskStore:
    """Repository for the single local user's data"""

    def __init__(self, kv: InMemoryStore):
        self.kv = kv

    def load_tasks(self) -> list[Task]:
        raw = self.kv.get(TASKS_KEY, [])
        try:
            return [Task.model_validate(item) for item in raw]
        except PydanticValidationError as e:
            raise StorageError("Stored task list is malformed", operation="load_tasks", cause=e)

    def save_tasks(self, tasks: list[Task]) -> None:
        self.commit(tasks=tasks)

    def load_stats(self) -> UserStats:
        raw = self.kv.get(USER_STATS_KEY)
        if raw is None:
            return UserStats()
        try:
            return UserStats.model_validate(raw)
        except PydanticValidationError as e:
            raise StorageError("Stored user stats are malformed", operation="load_stats", cause=e)

    def save_stats(self, stats: UserStats) -> None:
        self.commit(stats=stats)

    def load_bonus(self) -> Tuple[Optional[Task], Optional[date]]:
        """Return (bonus task, day it was generated for)"""
        raw_task = self.kv.get(DAILY_BONUS_KEY)
        raw_date = self.kv.get(LAST_BONUS_DATE_KEY)
        try:
            task = Task.model_validate(raw_task) if raw_task else None
            bonus_date = date.fromisoformat(raw_date) if raw_date else None
        except (PydanticValidationError, ValueError, TypeError) as e:
            raise StorageError("Stored daily bonus is malformed", operation="load_bonus", cause=e)
        return task, bonus_date

    def save_bonus(self, task: Task, bonus_date: date) -> None:
        self.commit(bonus=task, bonus_date=bonus_date)

    def commit(
        self,
        tasks: Optional[list[Task]] = None,
        stats: Optional[UserStats] = None,
        bonus: Optional[Task] = None,
        bonus_date: Optional[date] = None,
    ) -> None:
        """
        Write any combination of tasks, stats and bonus task as one update

        Either everything given is stored or, when the write fails, nothing is.
        """
        values = {}
        if tasks is not None:
            values[TASKS_KEY] = [task.model_dump(mode="json") for task in tasks]
        if stats is not None:
            data = stats.model_dump(mode="json")
            data.pop("level", None)
            data["achievements"] = sorted(stats.achievements)
            values[USER_STATS_KEY] = data
        if bonus is not None:
            values[DAILY_BONUS_KEY] = bonus.model_dump(mode="json")
            values[LAST_BONUS_DATE_KEY] = (bonus_date or today_local()).isoformat()
        if values:
            self.kv.set_many(values)
