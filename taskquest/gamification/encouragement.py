"""
Celebration messages shown after a task is completed.

The random source is injectable: anything with a `choice(seq)` method works,
so tests can pass a seeded `random.Random` or a stub.
"""

import random
from typing import Optional, Protocol, Sequence


class RandomSource(Protocol):
    def choice(self, seq: Sequence[str]) -> str:
        ...


ENCOURAGEMENT_MESSAGES = (
    "Boom! Another one down! 💥",
    "You're unstoppable! 🚀",
    "Task crushed! Keep going! ⚡",
    "Productivity level: LEGENDARY! 🏆",
    "You're on fire! 🔥",
    "Mission accomplished! 🎯",
    "Level up your life! ⭐",
    "Crushing it! 💪",
    "Task master in action! 🎮",
    "Victory achieved! 🎉",
)

_default_rng = random.Random()


def pick_encouragement_message(rng: Optional[RandomSource] = None) -> str:
    """Pick one message uniformly at random (repeats allowed)"""
    return (rng or _default_rng).choice(ENCOURAGEMENT_MESSAGES)


def format_level_up_message(level: int) -> str:
    return f"🎉 LEVEL UP! You're now level {level}!"
