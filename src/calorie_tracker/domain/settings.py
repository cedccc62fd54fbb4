"""Domain models for tracker settings."""

from dataclasses import dataclass
from typing import Literal, get_args

Theme = Literal["light", "dark"]
Sex = Literal["male", "female"]

THEMES: tuple[str, ...] = get_args(Theme)
SEXES: tuple[str, ...] = get_args(Sex)

DEFAULT_GOAL_CALORIES = 2000
DEFAULT_THEME: Theme = "light"


@dataclass(frozen=True)
class BmrInputs:
    """Biometric inputs used for the last BMR calculation."""

    age: int
    sex: str
    weight_kg: float
    height_cm: float
    activity: float


@dataclass
class TrackerSettings:
    """Mutable settings record.

    ``goal`` stays ``None`` until the user (or a TDEE calculation) sets one;
    ``daily_goal`` falls back to the default in that case.
    """

    goal: int | None = None
    theme: str = DEFAULT_THEME
    bmr: float | None = None
    tdee: float | None = None
    bmr_inputs: BmrInputs | None = None

    @property
    def daily_goal(self) -> int:
        """Return the effective daily calorie goal."""
        if self.goal is None:
            return DEFAULT_GOAL_CALORIES
        return self.goal

    @property
    def is_goal_set(self) -> bool:
        """Return True when a goal has been stored explicitly."""
        return self.goal is not None
