"""
Cart/storage.py

Key/value stand-in for browser local storage. Keys and values are strings.
Backends may raise on read or write; callers treat storage as best effort.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Union

from GREENCROSS.core import config

logger = logging.getLogger(__name__)

CART_STORAGE_KEY = "cart"
AGE_VERIFIED_KEY = "greencross_isOfAge"


class MemoryStorage:
    """In-process storage; contents vanish with the object."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStorage:
    """
    All keys kept in one JSON object on disk.
    A missing or corrupt file reads as empty; write errors propagate.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError):
            logger.debug("Unreadable storage file %s, treating as empty", self.path)
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _dump(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def get_item(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._dump(data)

    def remove_item(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._dump(data)


def default_storage() -> JsonFileStorage:
    """File-backed storage at CART_STORAGE_PATH, shared by cart and age gate."""
    return JsonFileStorage(config.CART_STORAGE_PATH)
