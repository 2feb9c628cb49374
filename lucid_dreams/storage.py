"""Key-value stores.

The persistence layer only needs get/set by string key. Values are the
loosely typed mappings produced by the models' encode() methods, so any
JSON-compatible value must round-trip.

Two stores ship here:

    MemoryStore     process-local dict, for tests and throwaway sessions
    JsonFileStore   every key in one JSON object in one file:

        {base}/defaults.json
          {"Model": {"dreams": [...], "favoriteCreature": 1}}
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


class StoreError(RuntimeError):
    """The backing store exists but cannot be read."""


class KeyValueStore(Protocol):
    def get(self, key: str) -> Any | None: ...

    def set(self, key: str, value: Any) -> None: ...


@runtime_checkable
class RemovableStore(KeyValueStore, Protocol):
    def remove(self, key: str) -> None: ...


class MemoryStore:
    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def get(self, key: str) -> Any | None:
        return copy.deepcopy(self._values.get(key))

    def set(self, key: str, value: Any) -> None:
        self._values[key] = copy.deepcopy(value)

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._values


class JsonFileStore:
    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    # Internal file helpers
    # ------------------------------------------------------------------

    def _read_all(self) -> dict[str, Any]:
        if not self._path.is_file():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StoreError(f"{self._path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise StoreError(
                f"{self._path} must hold a JSON object, got {type(data).__name__}"
            )
        return data

    def _write_all(self, data: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
            tmp.replace(self._path)
        except Exception:
            tmp.unlink(missing_ok=True)
            raise

    # ------------------------------------------------------------------
    # Store interface
    # ------------------------------------------------------------------

    def get(self, key: str) -> Any | None:
        return self._read_all().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)
        logger.debug(f"Wrote key {key!r} to {self._path}")

    def remove(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)
            logger.debug(f"Removed key {key!r} from {self._path}")

    def __contains__(self, key: str) -> bool:
        return key in self._read_all()
