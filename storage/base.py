"""Abstract repository interfaces for the storage layer."""

from abc import ABC, abstractmethod
from typing import Any

from models import Settings


class KeyValueStore(ABC):
    """Abstract interface for an opaque key/value store.

    Values are anything ``json.dumps`` accepts.
    """

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Load the value stored under a key.

        Args:
            key: The key to look up.
            default: Returned when the key is not stored.

        Returns:
            The decoded value, or ``default``.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store a value, replacing any previous one.

        Args:
            key: The key to write.
            value: A JSON-serializable value.
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a key. Missing keys are ignored."""
        pass


class SettingsRepository(ABC):
    """Abstract interface for settings storage."""

    @abstractmethod
    def load(self) -> Settings:
        """Load settings, filling unset fields with defaults."""
        pass

    @abstractmethod
    def save(self, settings: Settings) -> None:
        """Save the complete settings object."""
        pass
