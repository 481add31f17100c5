"""In-process key-value store, used for tests and dry runs."""

from __future__ import annotations

import copy
import json
from typing import Any, Dict

from tube_quiz.infra import log_utils
from .store import KeyValueStore


class MemoryStore(KeyValueStore):
    """Keeps serialised strings in a dict, the same way a browser's storage would."""

    def __init__(self, raw: Dict[str, str] | None = None):
        self.raw: Dict[str, str] = dict(raw or {})

    def load(self, key: str, fallback: Any) -> Any:
        text = self.raw.get(key)
        if not text:
            return copy.deepcopy(fallback)
        try:
            return json.loads(text)
        except ValueError as e:
            log_utils.log_message(f"Unreadable store entry '{key}': {e}", "WARN", source="store")
            return copy.deepcopy(fallback)

    def save(self, key: str, value: Any) -> None:
        try:
            self.raw[key] = json.dumps(value)
        except (TypeError, ValueError) as e:
            log_utils.log_message(f"Failed to save store entry '{key}': {e}", "ERROR", source="store")
