"""CSV export of logged entries."""

from collections.abc import Iterable
from datetime import date

from calorie_tracker.domain.entries import Entry

CSV_HEADER = ("id", "date", "name", "meal", "calories")


def export_csv(entries: Iterable[Entry]) -> str:
    """Render entries as CSV text, one row per entry in the given order."""
    rows = [",".join(CSV_HEADER)]
    for entry in entries:
        rows.append(
            ",".join(
                [
                    str(entry.id),
                    entry.day.isoformat(),
                    _quote(entry.name),
                    entry.meal,
                    str(entry.calories),
                ]
            )
        )
    return "\n".join(rows)


def export_filename(day: date) -> str:
    """Return the download file name for an export made on ``day``."""
    return f"calorie-data-{day.isoformat()}.csv"


def _quote(value: str) -> str:
    escaped = value.replace('"', '""')
    return f'"{escaped}"'
