"""Record store port interface"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class IRecordStore(ABC):
    """
    Port interface for whole-document persistence

    Records are JSON-compatible documents addressed by key ("cities",
    "goods", "player"). save() replaces the document entirely and completes
    before any later load() of the same key can observe it.
    """

    @abstractmethod
    def load(self, key: str) -> Optional[Dict[str, Any]]:
        """
        Load a document.

        Args:
            key: Record key

        Returns:
            The stored document, or None if the key was never saved

        Raises:
            PersistenceError: If the underlying read fails
        """
        pass

    @abstractmethod
    def save(self, key: str, document: Dict[str, Any]) -> None:
        """
        Overwrite a document.

        Raises:
            PersistenceError: If the underlying write fails
        """
        pass
