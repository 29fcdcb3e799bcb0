from abc import ABC, abstractmethod

from ...domain.shared.catalog import Catalog
from ...domain.shared.player import Player


class IPlayerRepository(ABC):
    """Port interface for the player record"""

    @abstractmethod
    def load(self) -> Player:
        """
        Load the player.

        Raises:
            RecordNotFoundError: If no player has been saved yet
            PersistenceError: If the store cannot be read
        """
        pass

    @abstractmethod
    def save(self, player: Player) -> None:
        """Persist the whole player document"""
        pass


class ICatalogRepository(ABC):
    """Port interface for read-only reference data"""

    @abstractmethod
    def load_catalog(self) -> Catalog:
        """
        Load goods and cities.

        Raises:
            RecordNotFoundError: If a reference record is missing
        """
        pass
