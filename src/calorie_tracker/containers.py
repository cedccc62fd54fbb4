"""Dependency container wiring for the application."""

from dataclasses import dataclass

from calorie_tracker.adapters.file_store import FileKeyValueStore
from calorie_tracker.config import Settings
from calorie_tracker.services.entries import EntryStore, today_in_timezone


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    entry_store: EntryStore


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container with a loaded entry store."""
    resolved_settings = settings or Settings()
    entry_store = EntryStore(
        storage=FileKeyValueStore(resolved_settings.data_dir),
        today=today_in_timezone(resolved_settings.timezone),
        entries_key=resolved_settings.entries_key,
        settings_key=resolved_settings.settings_key,
    )
    entry_store.load()
    return AppContainer(settings=resolved_settings, entry_store=entry_store)
