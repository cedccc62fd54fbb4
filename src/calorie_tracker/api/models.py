"""Pydantic models for API request payloads."""

from pydantic import BaseModel


class EntryCreate(BaseModel):
    """Payload for logging a food entry."""

    name: str
    calories: float
    meal: str


class QuickEntryCreate(BaseModel):
    """Payload for a quick calorie entry."""

    amount: float = 100


class GoalUpdate(BaseModel):
    """Payload for setting the daily goal."""

    goal: float


class ThemeUpdate(BaseModel):
    """Payload for setting the UI theme."""

    theme: str


class BmrRequest(BaseModel):
    """Biometric input for a BMR/TDEE calculation."""

    age: float
    sex: str
    weight: float
    height: float
    activity: float = 1.2
