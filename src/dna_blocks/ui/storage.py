"""Durable key/value storage for user preferences.

Mirrors the browser ``localStorage`` surface the site uses: string keys,
string values. ``JsonPreferenceStore`` keeps everything in one JSON file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol


logger = logging.getLogger(__name__)


class PreferenceStore(Protocol):
    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryPreferenceStore:
    """In-process store, used in tests and when no durable path exists."""

    def __init__(self, items: dict[str, str] | None = None) -> None:
        self.items: dict[str, str] = dict(items or {})
        self.writes: list[tuple[str, str]] = []

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.writes.append((key, value))
        self.items[key] = value


class JsonPreferenceStore:
    """Preferences persisted as a flat JSON object on disk."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable preferences file %s: %s", self.path, exc)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Ignoring preferences file %s: not a JSON object", self.path)
            return {}
        return {str(k): v for k, v in raw.items() if isinstance(v, str)}

    def get_item(self, key: str) -> str | None:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(items, indent=2, sort_keys=True), encoding="utf-8")
        tmp.replace(self.path)
