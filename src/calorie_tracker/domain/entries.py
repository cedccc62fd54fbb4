"""Domain models for logged food entries."""

from dataclasses import dataclass
from datetime import date
from typing import Literal, get_args
from uuid import UUID

MealCategory = Literal["Breakfast", "Lunch", "Dinner", "Snack"]

MEAL_CATEGORIES: tuple[str, ...] = get_args(MealCategory)
QUICK_ENTRY_MEAL: MealCategory = "Snack"


@dataclass(frozen=True)
class Entry:
    """A single logged food item attributed to a calendar day."""

    id: UUID
    name: str
    calories: int
    meal: str
    day: date
