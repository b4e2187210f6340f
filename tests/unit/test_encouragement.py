"""Unit tests for encouragement messages and daily bonus tasks"""
import random
from unittest.mock import Mock

from taskquest.gamification.encouragement import (
    ENCOURAGEMENT_MESSAGES,
    pick_encouragement_message,
    format_level_up_message,
)
from taskquest.gamification.bonus_tasks import BONUS_TASKS, generate_bonus_task
from taskquest.models.task import TaskCategory, TaskPriority


def test_message_always_from_fixed_set():
    """Test every pick is a non-empty member of the message set"""
    for _ in range(100):
        message = pick_encouragement_message()
        assert message in ENCOURAGEMENT_MESSAGES
        assert message


def test_message_selection_not_degenerate():
    """Test repeated picks eventually differ"""
    rng = random.Random(7)
    picks = {pick_encouragement_message(rng) for _ in range(200)}
    assert len(picks) > 1


def test_message_uses_injected_source():
    """Test a stub random source decides the message"""
    rng = Mock()
    rng.choice.side_effect = lambda seq: seq[3]

    assert pick_encouragement_message(rng) == ENCOURAGEMENT_MESSAGES[3]
    rng.choice.assert_called_once_with(ENCOURAGEMENT_MESSAGES)


def test_seeded_sources_repeat():
    """Test the same seed yields the same sequence"""
    first = [pick_encouragement_message(random.Random(1)) for _ in range(5)]
    second = [pick_encouragement_message(random.Random(1)) for _ in range(5)]
    assert first == second


def test_format_level_up_message():
    assert format_level_up_message(3) == "🎉 LEVEL UP! You're now level 3!"


# ============================================================================
# Bonus Task Tests
# ============================================================================

def test_generate_bonus_task(today):
    """Test bonus task shape and id"""
    rng = Mock()
    rng.choice.side_effect = lambda seq: seq[2]

    task = generate_bonus_task(today, rng)

    assert task.id == "bonus-2024-01-15"
    assert task.title == "🎯 Meditate for 5 minutes"
    assert task.description == "Practice mindfulness"
    assert task.category == TaskCategory.BONUS
    assert task.priority == TaskPriority.NORMAL
    assert task.xp_reward == 30
    assert task.completed is False


def test_generate_bonus_task_from_templates(today):
    """Test generated tasks always come from the template list"""
    titles = {f"🎯 {t['title']}" for t in BONUS_TASKS}
    rng = random.Random(3)
    for _ in range(20):
        assert generate_bonus_task(today, rng).title in titles
