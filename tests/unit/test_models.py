"""Unit tests for Pydantic models"""
import pytest
from datetime import date
from pydantic import ValidationError

from taskquest.models.task import Task, TaskCategory, TaskPriority
from taskquest.models.user_stats import UserStats


def test_user_stats_defaults():
    """Test a new user starts zeroed at level 1"""
    stats = UserStats()

    assert stats.xp == 0
    assert stats.level == 1
    assert stats.streak == 0
    assert stats.last_completion_date is None
    assert stats.achievements == set()
    assert stats.tasks_completed == 0
    assert stats.voice_tasks_created == 0


def test_user_stats_level_derived_from_xp():
    """Test level always follows XP, including after copies"""
    stats = UserStats(xp=450)
    assert stats.level == 3

    updated = stats.model_copy(update={"xp": 900})
    assert updated.level == 4


def test_user_stats_ignores_stored_level():
    """Test a stale stored level is recomputed on load"""
    stats = UserStats.model_validate({"xp": 100, "level": 9})
    assert stats.level == 2


def test_user_stats_rejects_negative_counters():
    with pytest.raises(ValidationError):
        UserStats(xp=-1)


def test_user_stats_json_dump_includes_level():
    data = UserStats(xp=400, last_completion_date=date(2024, 1, 15)).model_dump(mode="json")

    assert data["level"] == 3
    assert data["last_completion_date"] == "2024-01-15"


def test_task_creation_defaults():
    """Test creating a Task fills id, timestamp and defaults"""
    task = Task(title="  Buy milk  ", xp_reward=15)

    assert task.id.startswith("task-")
    assert task.title == "Buy milk"
    assert task.category == TaskCategory.PERSONAL
    assert task.priority == TaskPriority.NORMAL
    assert task.completed is False
    assert task.created_at.tzinfo is not None
    assert task.due_date is None


def test_task_ids_unique():
    assert Task(title="a", xp_reward=15).id != Task(title="b", xp_reward=15).id


def test_task_blank_title_rejected():
    with pytest.raises(ValidationError):
        Task(title="   ", xp_reward=15)


def test_task_xp_reward_must_be_positive():
    with pytest.raises(ValidationError):
        Task(title="Nothing", xp_reward=0)


def test_mark_completed_returns_copy(make_task):
    """Test completing returns a new task and leaves the original open"""
    task = make_task()

    done = task.mark_completed()

    assert done.completed is True
    assert task.completed is False
    assert done.id == task.id


def test_task_is_immutable(make_task):
    """Test fields can't be reassigned; completion goes through mark_completed"""
    task = make_task()

    with pytest.raises(ValidationError):
        task.title = "Changed"
    with pytest.raises(ValidationError):
        task.completed = True

    assert task.completed is False
