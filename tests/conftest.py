"""Global test fixtures and utilities for taskquest tests"""
import random
import pytest
from datetime import datetime, date, timedelta, timezone

from taskquest import config
from taskquest.models.task import Task, TaskCategory, TaskPriority
from taskquest.models.user_stats import UserStats
from taskquest.services.task_service import TaskService
from taskquest.store import InMemoryStore, TaskStore


@pytest.fixture(autouse=True)
def utc_calendar(monkeypatch):
    """Run every test on a UTC calendar regardless of the environment"""
    monkeypatch.setattr(config, "TIMEZONE", "UTC")


# ============================================================================
# Date Fixtures
# ============================================================================

@pytest.fixture
def today():
    """Fixed calendar day used as 'today'"""
    return date(2024, 1, 15)


@pytest.fixture
def yesterday(today):
    return today - timedelta(days=1)


@pytest.fixture
def now(today):
    """Noon UTC on the fixed day"""
    return datetime(today.year, today.month, today.day, 12, 0, tzinfo=timezone.utc)


# ============================================================================
# Model Factories
# ============================================================================

@pytest.fixture
def make_task(now):
    """Factory for tasks created at the fixed 'now' unless told otherwise"""
    def _make_task(**overrides):
        data = {
            "title": "Write report",
            "category": TaskCategory.WORK,
            "priority": TaskPriority.NORMAL,
            "created_at": now,
            "xp_reward": 15,
        }
        data.update(overrides)
        return Task(**data)
    return _make_task


@pytest.fixture
def empty_stats():
    return UserStats()


# ============================================================================
# Store & Service Fixtures
# ============================================================================

@pytest.fixture
def kv_store():
    return InMemoryStore()


@pytest.fixture
def task_store(kv_store):
    return TaskStore(kv_store)


@pytest.fixture
def seeded_rng():
    return random.Random(42)


@pytest.fixture
def task_service(task_store, seeded_rng):
    return TaskService(task_store, rng=seeded_rng)
