"""Text codec for the persisted entry list and settings record."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from calorie_tracker.domain.entries import Entry, MealCategory
from calorie_tracker.domain.errors import StorageReadError
from calorie_tracker.domain.settings import BmrInputs, Sex, Theme, TrackerSettings


class EntryRecord(BaseModel):
    """Persisted entry payload."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    name: str = Field(min_length=1)
    calories: int = Field(gt=0)
    meal: MealCategory
    day: date = Field(alias="date")


class BmrInputsRecord(BaseModel):
    """Persisted BMR input snapshot."""

    age: int = Field(gt=0)
    sex: Sex
    weight: float = Field(gt=0, allow_inf_nan=False)
    height: float = Field(gt=0, allow_inf_nan=False)
    activity: float = Field(gt=0, allow_inf_nan=False)


class SettingsRecord(BaseModel):
    """Persisted settings payload."""

    model_config = ConfigDict(populate_by_name=True)

    goal: int | None = Field(default=None, gt=0)
    theme: Theme = "light"
    bmr: float | None = Field(default=None, allow_inf_nan=False)
    tdee: float | None = Field(default=None, allow_inf_nan=False)
    bmr_inputs: BmrInputsRecord | None = Field(default=None, alias="bmrInputs")


_ENTRIES_ADAPTER = TypeAdapter(list[EntryRecord])


def encode_entries(entries: list[Entry]) -> str:
    """Serialize entries to JSON text."""
    records = [
        EntryRecord(
            id=entry.id,
            name=entry.name,
            calories=entry.calories,
            meal=entry.meal,
            day=entry.day,
        )
        for entry in entries
    ]
    return _ENTRIES_ADAPTER.dump_json(records, by_alias=True).decode("utf-8")


def decode_entries(text: str) -> list[Entry]:
    """Parse JSON text into entries, raising StorageReadError when malformed."""
    try:
        records = _ENTRIES_ADAPTER.validate_json(text)
    except PydanticValidationError as exc:
        raise StorageReadError("Persisted entries are malformed") from exc
    return [
        Entry(
            id=record.id,
            name=record.name,
            calories=record.calories,
            meal=record.meal,
            day=record.day,
        )
        for record in records
    ]


def encode_settings(settings: TrackerSettings) -> str:
    """Serialize settings to JSON text, omitting unset fields."""
    inputs = settings.bmr_inputs
    record = SettingsRecord(
        goal=settings.goal,
        theme=settings.theme,
        bmr=settings.bmr,
        tdee=settings.tdee,
        bmr_inputs=(
            BmrInputsRecord(
                age=inputs.age,
                sex=inputs.sex,
                weight=inputs.weight_kg,
                height=inputs.height_cm,
                activity=inputs.activity,
            )
            if inputs
            else None
        ),
    )
    return record.model_dump_json(by_alias=True, exclude_none=True)


def decode_settings(text: str) -> TrackerSettings:
    """Parse JSON text into settings, raising StorageReadError when malformed."""
    try:
        record = SettingsRecord.model_validate_json(text)
    except PydanticValidationError as exc:
        raise StorageReadError("Persisted settings are malformed") from exc
    inputs = record.bmr_inputs
    return TrackerSettings(
        goal=record.goal,
        theme=record.theme,
        bmr=record.bmr,
        tdee=record.tdee,
        bmr_inputs=(
            BmrInputs(
                age=inputs.age,
                sex=inputs.sex,
                weight_kg=inputs.weight,
                height_cm=inputs.height,
                activity=inputs.activity,
            )
            if inputs
            else None
        ),
    )
