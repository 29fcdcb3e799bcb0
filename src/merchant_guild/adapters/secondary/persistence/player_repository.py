import logging

from ....domain.shared.exceptions import PersistenceError, RecordNotFoundError
from ....domain.shared.player import Player
from ....ports.outbound.record_store import IRecordStore
from ....ports.outbound.repositories import IPlayerRepository
from .mappers import PlayerMapper

logger = logging.getLogger(__name__)

PLAYER_KEY = "player"


class PlayerRepository(IPlayerRepository):
    """Player repository over the whole-document record store"""

    def __init__(self, store: IRecordStore):
        self._store = store

    def load(self) -> Player:
        document = self._store.load(PLAYER_KEY)
        if document is None:
            raise RecordNotFoundError("Player record not found; reset the game first")
        try:
            return PlayerMapper.from_document(document)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise PersistenceError(f"Player record is corrupted: {e}") from e

    def save(self, player: Player) -> None:
        self._store.save(PLAYER_KEY, PlayerMapper.to_document(player))
        logger.debug(f"Persisted player {player.name} (gold={player.gold})")
