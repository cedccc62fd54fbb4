"""Energy expenditure calculations (Mifflin-St Jeor)."""

from dataclasses import dataclass

from calorie_tracker.domain.errors import ValidationError
from calorie_tracker.domain.settings import SEXES, BmrInputs
from calorie_tracker.services.validation import (
    require_choice,
    require_positive_number,
)

MALE_OFFSET = 5
FEMALE_OFFSET = -161


@dataclass(frozen=True)
class EnergyEstimate:
    """Computed BMR and TDEE in kcal/day."""

    bmr: float
    tdee: float


def compute_bmr(age: float, sex: str, weight_kg: float, height_cm: float) -> float:
    """Return basal metabolic rate; any sex other than male uses the female offset."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if sex == "male":
        return base + MALE_OFFSET
    return base + FEMALE_OFFSET


def compute_tdee(bmr: float, activity_multiplier: float) -> float:
    """Return total daily energy expenditure."""
    return bmr * activity_multiplier


def validate_bmr_inputs(  # noqa: PLR0913
    age: object,
    sex: object,
    weight: object,
    height: object,
    activity: object,
) -> BmrInputs:
    """Validate raw biometric input and return a snapshot."""
    age_value = require_positive_number(age, "Age")
    if not age_value.is_integer():
        raise ValidationError("Age must be a whole number")
    normalized_sex = sex.strip().lower() if isinstance(sex, str) else sex
    return BmrInputs(
        age=int(age_value),
        sex=require_choice(normalized_sex, SEXES, "Sex"),
        weight_kg=require_positive_number(weight, "Weight"),
        height_cm=require_positive_number(height, "Height"),
        activity=require_positive_number(activity, "Activity multiplier"),
    )


def estimate_energy(inputs: BmrInputs) -> EnergyEstimate:
    """Compute BMR and TDEE for a validated snapshot."""
    bmr = compute_bmr(inputs.age, inputs.sex, inputs.weight_kg, inputs.height_cm)
    return EnergyEstimate(bmr=bmr, tdee=compute_tdee(bmr, inputs.activity))
