"""
Persistent string -> string slot storage (the browser localStorage equivalent).

FileLocalStorage keeps every slot in one JSON object file so values survive
process restarts; MemoryLocalStorage is the non-persistent variant.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Dict, List, Optional, Protocol

from shared.config.settings import StorageSettings
from shared.exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)


class StorageBackend(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...

    def clear(self) -> None: ...

    def keys(self) -> List[str]: ...


class MemoryLocalStorage:
    """In-memory slot storage"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._slots: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._slots.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._slots[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._slots.pop(key, None)

    def clear(self) -> None:
        self._slots.clear()

    def keys(self) -> List[str]:
        return list(self._slots.keys())


class FileLocalStorage:
    """
    JSON file backed slot storage.

    The file holds a single JSON object mapping slot keys to their raw text.
    A missing file is an empty storage. A file that cannot be decoded is
    also read as empty; the next write replaces it.
    """

    def __init__(self, path: str):
        self.path = path

    def _read_slots(self, for_write: bool = False) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as fp:
                data = json.load(fp)
        except (ValueError, UnicodeDecodeError) as e:
            self._warn_unreadable(f"is not valid JSON ({e})", for_write)
            return {}
        except OSError as e:
            raise StorageUnavailableError(str(e), path=self.path, operation="read") from e

        if not isinstance(data, dict):
            self._warn_unreadable("does not hold an object", for_write)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _warn_unreadable(self, reason: str, for_write: bool) -> None:
        if for_write:
            logger.warning(f"Local storage file {self.path} {reason}; overwriting it discards its other slots")
        else:
            logger.warning(f"Local storage file {self.path} {reason}, treating as empty")

    def _write_slots(self, slots: Dict[str, str]) -> None:
        try:
            os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as fp:
                json.dump(slots, fp, ensure_ascii=False, indent=2)
        except OSError as e:
            raise StorageUnavailableError(str(e), path=self.path, operation="write") from e

    def get_item(self, key: str) -> Optional[str]:
        return self._read_slots().get(key)

    def set_item(self, key: str, value: str) -> None:
        slots = self._read_slots(for_write=True)
        slots[key] = str(value)
        self._write_slots(slots)

    def remove_item(self, key: str) -> None:
        slots = self._read_slots(for_write=True)
        if key in slots:
            del slots[key]
            self._write_slots(slots)

    def clear(self) -> None:
        self._write_slots({})

    def keys(self) -> List[str]:
        return list(self._read_slots().keys())


def create_local_storage(storage_settings: StorageSettings) -> StorageBackend:
    """Build the backend selected by LOCAL_STORAGE_BACKEND."""
    if storage_settings.local_storage_backend == "memory":
        logger.info("Using in-memory local storage")
        return MemoryLocalStorage()

    path = storage_settings.local_storage_path
    logger.info(f"Using file local storage at {path}")
    return FileLocalStorage(path)
