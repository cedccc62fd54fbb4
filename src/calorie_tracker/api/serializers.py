"""Response payload builders."""

from calorie_tracker.domain.entries import Entry
from calorie_tracker.domain.settings import TrackerSettings
from calorie_tracker.domain.stats import DailySummary, DailyTotal


def entry_payload(entry: Entry) -> dict[str, object]:
    """Return the JSON payload for an entry."""
    return {
        "id": str(entry.id),
        "name": entry.name,
        "calories": entry.calories,
        "meal": entry.meal,
        "date": entry.day.isoformat(),
    }


def summary_payload(summary: DailySummary) -> dict[str, object]:
    """Return the JSON payload for a daily summary."""
    return {
        "date": summary.day.isoformat(),
        "total": summary.total,
        "goal": summary.goal,
        "deficit": summary.deficit,
        "remaining": summary.remaining,
        "percent_of_goal": summary.percent_of_goal,
        "goal_reached": summary.goal_reached,
    }


def history_payload(totals: list[DailyTotal]) -> list[dict[str, object]]:
    """Return the JSON payload for per-day totals."""
    return [{"date": item.day.isoformat(), "total": item.calories} for item in totals]


def settings_payload(settings: TrackerSettings) -> dict[str, object]:
    """Return the JSON payload for tracker settings."""
    inputs = settings.bmr_inputs
    return {
        "goal": settings.daily_goal,
        "goal_set": settings.is_goal_set,
        "theme": settings.theme,
        "bmr": settings.bmr,
        "tdee": settings.tdee,
        "bmr_inputs": (
            {
                "age": inputs.age,
                "sex": inputs.sex,
                "weight": inputs.weight_kg,
                "height": inputs.height_cm,
                "activity": inputs.activity,
            }
            if inputs
            else None
        ),
    }
