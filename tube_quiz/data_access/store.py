from abc import ABC, abstractmethod
from typing import Any


class KeyValueStore(ABC):
    """
    Abstract Base Class for the local key-value store.

    Defines the contract the feed and profile logic rely on, so any
    backend (JSON files, in-memory map) can be injected. Implementations
    fail soft: reads fall back, writes never raise.
    """

    @abstractmethod
    def load(self, key: str, fallback: Any) -> Any:
        """
        Returns the stored value for `key`.

        Args:
            key: Logical record name, e.g. "user" or "posts".
            fallback: Value returned when the key is absent or unreadable.

        Returns:
            The deserialised value, or a copy of `fallback`.
        """
        pass

    @abstractmethod
    def save(self, key: str, value: Any) -> None:
        """Serialises and writes `value`. Write failures are logged, not raised."""
        pass
