"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

import pytest

from calorie_tracker.config import Settings
from calorie_tracker.containers import AppContainer
from calorie_tracker.services.entries import EntryStore, KeyValueStore

TODAY = date(2024, 3, 15)


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """In-memory key-value store for tests."""

    values: dict[str, str] = field(default_factory=dict)
    writes: list[str] = field(default_factory=list)

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value
        self.writes.append(key)

    def remove(self, key: str) -> None:
        self.values.pop(key, None)


@dataclass
class FixedClock:
    """Clock returning a settable date."""

    current: date = TODAY

    def __call__(self) -> date:
        return self.current


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(data_dir=tmp_path / "data", timezone=None)


@pytest.fixture
def storage() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def entry_store(storage: InMemoryKeyValueStore, clock: FixedClock) -> EntryStore:
    store = EntryStore(storage=storage, today=clock)
    store.load()
    return store


@pytest.fixture
def container(settings: Settings, entry_store: EntryStore) -> AppContainer:
    return AppContainer(settings=settings, entry_store=entry_store)
