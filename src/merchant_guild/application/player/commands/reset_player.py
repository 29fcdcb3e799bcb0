import logging
from dataclasses import dataclass
from typing import Tuple

from ....pymediatr import Request, RequestHandler
from ....domain.economy.simulation import SimulationState
from ....domain.shared.merchant import Merchant
from ....domain.shared.player import Player
from ....ports.outbound.repositories import IPlayerRepository

logger = logging.getLogger(__name__)

DEFAULT_PLAYER_NAME = "Guildmaster"
STARTING_GOLD = 1000
STARTING_CITY = "oakhaven"

# (name, capacity) in hiring order
STARTING_MERCHANTS: Tuple[Tuple[str, int], ...] = (
    ("Aldric", 50),
    ("Brenna", 70),
    ("Corvin", 90),
)


def build_default_player(good_ids) -> Player:
    """Fresh player: starting gold, unhired idle merchants with empty holds"""
    good_ids = tuple(good_ids)
    merchants = [
        Merchant(
            name=name,
            capacity=capacity,
            current_location=STARTING_CITY,
            inventory={good_id: 0 for good_id in good_ids},
        )
        for name, capacity in STARTING_MERCHANTS
    ]
    return Player(name=DEFAULT_PLAYER_NAME, gold=STARTING_GOLD, merchants=merchants)


@dataclass(frozen=True)
class ResetResult:
    player: Player
    message: str


@dataclass(frozen=True)
class ResetPlayerCommand(Request[ResetResult]):
    """Command to restore the default player document"""
    pass


class ResetPlayerHandler(RequestHandler[ResetPlayerCommand, ResetResult]):
    """Overwrites the player record regardless of its current content"""

    def __init__(self, player_repository: IPlayerRepository, state: SimulationState):
        self._player_repo = player_repository
        self._state = state

    async def handle(self, request: ResetPlayerCommand) -> ResetResult:
        player = build_default_player(good.id for good in self._state.catalog.goods)
        self._player_repo.save(player)
        logger.info("Player reset to the default document")
        return ResetResult(player=player, message="The guild starts anew")
