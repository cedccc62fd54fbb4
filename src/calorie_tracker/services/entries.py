"""Entry store: owns logged entries and tracker settings."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timedelta
from typing import Protocol, TypeVar
from uuid import UUID, uuid4
from zoneinfo import ZoneInfo

from calorie_tracker.domain.entries import MEAL_CATEGORIES, QUICK_ENTRY_MEAL, Entry
from calorie_tracker.domain.errors import (
    NotFoundError,
    StorageReadError,
    ValidationError,
)
from calorie_tracker.domain.settings import (
    DEFAULT_THEME,
    THEMES,
    BmrInputs,
    TrackerSettings,
)
from calorie_tracker.domain.stats import DailySummary, DailyTotal
from calorie_tracker.services.codec import (
    decode_entries,
    decode_settings,
    encode_entries,
    encode_settings,
)
from calorie_tracker.services.validation import (
    require_choice,
    require_positive_number,
    require_text,
    round_half_up,
)

_logger = logging.getLogger(__name__)

ENTRIES_KEY = "cal_entries_v1"
SETTINGS_KEY = "cal_settings_v1"
PERCENT_CAP = 100

T = TypeVar("T")


class KeyValueStore(Protocol):
    """Persistent text store keyed by name."""

    def get(self, key: str) -> str | None:
        """Return the stored text, if present."""

    def set(self, key: str, value: str) -> None:
        """Store text under a key."""

    def remove(self, key: str) -> None:
        """Delete a key if present."""


def today_in_timezone(timezone_name: str | None) -> Callable[[], date]:
    """Return a clock for the current date in a timezone (local time if None)."""
    if timezone_name is None:
        return date.today
    tz = ZoneInfo(timezone_name)
    return lambda: datetime.now(tz=tz).date()


@dataclass
class EntryStore:
    """Sole owner and writer of the entry list and settings record.

    Every mutation is written through to ``storage`` before it returns.
    """

    storage: KeyValueStore
    today: Callable[[], date] = date.today
    entries_key: str = ENTRIES_KEY
    settings_key: str = SETTINGS_KEY
    id_factory: Callable[[], UUID] = uuid4
    _entries: list[Entry] = field(default_factory=list, init=False)
    _settings: TrackerSettings = field(default_factory=TrackerSettings, init=False)

    @property
    def settings(self) -> TrackerSettings:
        """Return a copy of the current settings."""
        return replace(self._settings)

    def load(self) -> None:
        """Read both records from storage, falling back to defaults."""
        self._entries = self._read(self.entries_key, decode_entries, list)
        self._settings = self._read(
            self.settings_key, decode_settings, TrackerSettings
        )
        _logger.info(
            "Loaded tracker state: entries=%s goal=%s",
            len(self._entries),
            self._settings.daily_goal,
        )

    def add_entry(self, name: object, calories: object, meal: object) -> Entry:
        """Validate and log a food entry for today."""
        clean_name = require_text(name, "Food name")
        amount = round_half_up(require_positive_number(calories, "Calories"))
        if amount <= 0:
            raise ValidationError("Calories must be at least 1 kcal")
        category = require_choice(meal, MEAL_CATEGORIES, "Meal")
        entry = Entry(
            id=self.id_factory(),
            name=clean_name,
            calories=amount,
            meal=category,
            day=self.today(),
        )
        self._entries.append(entry)
        self._save_entries()
        _logger.info("Entry added: id=%s calories=%s", entry.id, entry.calories)
        return entry

    def add_quick_entry(self, amount: object) -> Entry:
        """Log a snack entry named after its calorie amount."""
        calories = round_half_up(require_positive_number(amount, "Amount"))
        return self.add_entry(f"{calories} kcal quick", calories, QUICK_ENTRY_MEAL)

    def get_entry(self, entry_id: UUID) -> Entry:
        """Return an entry by id."""
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        raise NotFoundError(f"Entry {entry_id} not found")

    def delete_entry(self, entry_id: UUID) -> None:
        """Remove an entry; unknown ids are ignored."""
        remaining = [entry for entry in self._entries if entry.id != entry_id]
        if len(remaining) != len(self._entries):
            _logger.info("Entry deleted: id=%s", entry_id)
        self._entries = remaining
        self._save_entries()

    def all_entries(self) -> list[Entry]:
        """Return every entry in insertion order."""
        return list(self._entries)

    def entries_for_date(self, day: date) -> list[Entry]:
        """Return entries attributed to a day, in insertion order."""
        return [entry for entry in self._entries if entry.day == day]

    def todays_entries(self) -> list[Entry]:
        """Return entries attributed to today."""
        return self.entries_for_date(self.today())

    def total_for_date(self, day: date) -> int:
        """Return total calories for a day."""
        return sum(entry.calories for entry in self.entries_for_date(day))

    def summary(self, day: date | None = None) -> DailySummary:
        """Return intake against the goal for a day (today by default)."""
        resolved_day = self.today() if day is None else day
        goal = self._settings.daily_goal
        total = self.total_for_date(resolved_day)
        deficit = goal - total
        percent = min(PERCENT_CAP, round_half_up(total / goal * 100))
        return DailySummary(
            day=resolved_day,
            total=total,
            goal=goal,
            deficit=deficit,
            remaining=max(deficit, 0),
            percent_of_goal=percent,
            goal_reached=percent >= PERCENT_CAP,
        )

    def last_n_days_totals(self, n: int = 7) -> list[DailyTotal]:
        """Return totals for the last n days, oldest first, ending today."""
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise ValidationError("Number of days must be a positive integer")
        end = self.today()
        totals: dict[date, int] = {}
        for entry in self._entries:
            totals[entry.day] = totals.get(entry.day, 0) + entry.calories
        days = [end - timedelta(days=offset) for offset in range(n - 1, -1, -1)]
        return [DailyTotal(day=day, calories=totals.get(day, 0)) for day in days]

    def clear_day(self, day: date | None = None) -> None:
        """Remove every entry for a day (today by default)."""
        resolved_day = self.today() if day is None else day
        self._entries = [
            entry for entry in self._entries if entry.day != resolved_day
        ]
        self._save_entries()
        _logger.info("Cleared entries for %s", resolved_day.isoformat())

    def clear_all(self) -> None:
        """Drop all entries and settings, removing both persisted records."""
        self._entries = []
        self._settings = TrackerSettings()
        self.storage.remove(self.entries_key)
        self.storage.remove(self.settings_key)
        _logger.info("Reset all tracker data")

    def set_goal(self, value: object) -> int:
        """Store a daily calorie goal and return the rounded value."""
        goal = _require_goal(value, "Goal")
        self._commit_settings(replace(self._settings, goal=goal))
        return goal

    def set_bmr_result(self, bmr: float, tdee: float, inputs: BmrInputs) -> None:
        """Store a BMR/TDEE result; the TDEE becomes the goal when none is set."""
        bmr_value = require_positive_number(bmr, "BMR")
        tdee_value = require_positive_number(tdee, "TDEE")
        goal = self._settings.goal
        if goal is None:
            goal = _require_goal(tdee_value, "TDEE")
        self._commit_settings(
            replace(
                self._settings,
                goal=goal,
                bmr=bmr_value,
                tdee=tdee_value,
                bmr_inputs=inputs,
            )
        )

    def clear_bmr_result(self) -> None:
        """Forget the stored BMR/TDEE and their inputs."""
        self._commit_settings(
            replace(self._settings, bmr=None, tdee=None, bmr_inputs=None)
        )

    def set_theme(self, mode: object) -> None:
        """Store the UI theme."""
        theme = require_choice(mode, THEMES, "Theme")
        self._commit_settings(replace(self._settings, theme=theme))

    def toggle_theme(self) -> str:
        """Switch between light and dark and return the new theme."""
        mode = DEFAULT_THEME if self._settings.theme == "dark" else "dark"
        self.set_theme(mode)
        return mode

    def _read(
        self, key: str, decode: Callable[[str], T], default: Callable[[], T]
    ) -> T:
        try:
            raw = self.storage.get(key)
            if raw is None:
                return default()
            return decode(raw)
        except StorageReadError:
            _logger.warning("Discarding malformed persisted data: key=%s", key)
            return default()

    def _save_entries(self) -> None:
        self.storage.set(self.entries_key, encode_entries(self._entries))

    def _commit_settings(self, updated: TrackerSettings) -> None:
        self.storage.set(self.settings_key, encode_settings(updated))
        self._settings = updated


def _require_goal(value: object, field_name: str) -> int:
    goal = round_half_up(require_positive_number(value, field_name))
    if goal <= 0:
        raise ValidationError(f"{field_name} must round to at least 1 kcal")
    return goal
