"""File-backed key-value store."""

import re
from dataclasses import dataclass
from pathlib import Path

from calorie_tracker.domain.errors import StorageReadError
from calorie_tracker.services.entries import KeyValueStore

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


@dataclass
class FileKeyValueStore(KeyValueStore):
    """Stores each key as a UTF-8 JSON file under a data directory."""

    root: Path

    def get(self, key: str) -> str | None:
        """Return the file contents for a key, if the file exists."""
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise StorageReadError(f"Stored data for {key} is not UTF-8") from exc

    def set(self, key: str, value: str) -> None:
        """Write a key, replacing any previous contents atomically."""
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_suffix(".tmp")
        tmp_path.write_text(value, encoding="utf-8")
        tmp_path.replace(path)

    def remove(self, key: str) -> None:
        """Delete the file for a key if present."""
        self._path(key).unlink(missing_ok=True)

    def _path(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key) or key in {".", ".."}:
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.root / f"{key}.json"
