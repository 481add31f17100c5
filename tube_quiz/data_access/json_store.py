"""JSON file-based implementation of the key-value store."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Optional

from tube_quiz.config import settings
from tube_quiz.infra import log_utils
from .store import KeyValueStore


class JsonStore(KeyValueStore):
    """Key-value store that keeps one JSON file per key on disk."""

    def __init__(self, root: Optional[Path] = None):
        self._root = root

    @property
    def root(self) -> Path:
        return self._root if self._root is not None else settings.data_path

    def _path(self, key: str) -> Path:
        return self.root / f"{key}.json"

    def load(self, key: str, fallback: Any) -> Any:
        path = self._path(key)
        if not path.exists():
            return copy.deepcopy(fallback)
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            log_utils.log_message(f"Unreadable store entry '{key}' at {path}: {e}", "WARN", source="store")
            return copy.deepcopy(fallback)

    def save(self, key: str, value: Any) -> None:
        path = self._path(key)
        try:
            payload = json.dumps(value, indent=2, sort_keys=True)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(payload, encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            log_utils.log_message(f"Failed to save store entry '{key}' to {path}: {e}", "ERROR", source="store")
