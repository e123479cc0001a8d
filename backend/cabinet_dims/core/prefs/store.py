"""Key/value store persisted as a single JSON file.

Stands in for the browser's localStorage when the forms run against this
backend. Values are JSON scalars keyed by string; writes rewrite the file.

Usage:
    store = JsonKeyValueStore("~/.cabinet_dims/preferences.json")
    store.set("cc.units", "mm")
    store.get("cc.units")   # -> "mm"
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional


# ── Exceptions ────────────────────────────────────────────────────────────────

class CorruptStoreError(ValueError):
    """Raised when the store file exists but is not a JSON object."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Invalid preference store at '{path}': {reason}")


# ── JsonKeyValueStore ─────────────────────────────────────────────────────────

class JsonKeyValueStore:
    """String-keyed store backed by one JSON file.

    A missing file reads as an empty store; the file and its parent folder
    are created on first write.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self._read().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> bool:
        """Remove key. Returns False if it was not present."""
        data = self._read()
        if key not in data:
            return False
        del data[key]
        self._write(data)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────────

    def _read(self) -> dict:
        if not self._path.is_file():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise CorruptStoreError(str(self._path), f"not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise CorruptStoreError(str(self._path), "top-level value must be an object")
        return data

    def _write(self, data: dict) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(data, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
