"""Domain models for daily statistics."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DailyTotal:
    """Total calories logged on a day."""

    day: date
    calories: int


@dataclass(frozen=True)
class DailySummary:
    """Intake against the goal for a single day.

    ``deficit`` is ``goal - total`` and goes negative once the goal is
    exceeded; ``remaining`` is the same figure clamped at zero.
    """

    day: date
    total: int
    goal: int
    deficit: int
    remaining: int
    percent_of_goal: int
    goal_reached: bool
