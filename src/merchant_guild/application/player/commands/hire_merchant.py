import logging
from dataclasses import dataclass

from ....pymediatr import Request, RequestHandler
from ....domain.shared.merchant import Merchant
from ....domain.shared.player import Player
from ....ports.outbound.repositories import IPlayerRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HireResult:
    player: Player
    merchant: Merchant
    message: str


@dataclass(frozen=True)
class HireMerchantCommand(Request[HireResult]):
    """Command to hire the first merchant of the roster not yet hired"""
    pass


class HireMerchantHandler(RequestHandler[HireMerchantCommand, HireResult]):
    """Handler for hiring merchants in roster order"""

    def __init__(self, player_repository: IPlayerRepository):
        self._player_repo = player_repository

    async def handle(self, request: HireMerchantCommand) -> HireResult:
        player = self._player_repo.load()
        merchant = player.hire_next_merchant()
        self._player_repo.save(player)

        message = f"{merchant.name} joined the guild (capacity {merchant.capacity})"
        logger.info(message)
        return HireResult(player=player, merchant=merchant, message=message)
