"""Key-value persistence backends for the team store.

Each key holds one JSON-compatible value (a list of record dicts in
practice). The store reads everything once at start-up and writes a
whole collection back on every change.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Protocol

from team_store import config
from team_store.exceptions import StorageError

logger = logging.getLogger(__name__)

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


class KeyValueRepository(Protocol):
    def get(self, key: str) -> Any | None: ...

    def put(self, key: str, value: Any) -> None: ...

    def delete(self, key: str) -> None: ...

    def keys(self) -> list[str]: ...


class InMemoryRepository:
    """Dict-backed repository for tests and throwaway sessions.

    Values are deep-copied through JSON so callers cannot alias stored
    state, and unserializable values fail the same way they would on disk.
    """

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def get(self, key: str) -> Any | None:
        raw = self._data.get(key)
        return json.loads(raw) if raw is not None else None

    def put(self, key: str, value: Any) -> None:
        try:
            self._data[key] = json.dumps(value)
        except (TypeError, ValueError) as exc:
            raise StorageError(f"Cannot serialize value for {key!r}: {exc}") from exc

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data)


class JsonFileRepository:
    """One ``<key>.json`` file per key under *data_dir* (default ``TEAM_DATA_DIR``)."""

    def __init__(self, data_dir: Path | str | None = None) -> None:
        self._dir = Path(data_dir if data_dir is not None else config.DATA_DIR).expanduser()
        self._dir.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def _sanitize(key: str) -> str:
        cleaned = _UNSAFE_KEY_CHARS.sub("_", key).strip(".")
        if not cleaned:
            raise StorageError(f"Invalid repository key: {key!r}")
        return cleaned

    def _path(self, key: str) -> Path:
        return self._dir / f"{self._sanitize(key)}.json"

    def get(self, key: str) -> Any | None:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise StorageError(f"Cannot read {path}: {exc}") from exc

    def put(self, key: str, value: Any) -> None:
        path = self._path(key)
        tmp = path.with_suffix(".json.tmp")
        try:
            tmp.write_text(json.dumps(value, indent=2), encoding="utf-8")
            tmp.replace(path)
        except (OSError, TypeError, ValueError) as exc:
            raise StorageError(f"Cannot write {path}: {exc}") from exc
        logger.debug("Wrote %s", path)

    def delete(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()
            logger.debug("Deleted %s", path)

    def keys(self) -> list[str]:
        return sorted(p.stem for p in self._dir.glob("*.json"))
