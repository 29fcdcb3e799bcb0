"""Execute trade command"""
import logging
from dataclasses import dataclass

from ....pymediatr import Request, RequestHandler
from ....domain.economy.simulation import SimulationState
from ....domain.shared.exceptions import GoodNotFoundError, InvalidRequestError, MerchantNotFreeError
from ....domain.shared.player import Player
from ....ports.outbound.repositories import IPlayerRepository

logger = logging.getLogger(__name__)

BUY = "buy"
SELL = "sell"
VALID_ACTIONS = (BUY, SELL)


@dataclass(frozen=True)
class TradeResult:
    """Updated player plus the executed transaction"""
    player: Player
    action: str
    merchant_name: str
    good_id: str
    quantity: int
    price_per_unit: int
    total_price: int
    message: str


@dataclass(frozen=True)
class ExecuteTradeCommand(Request[TradeResult]):
    """Command to buy from or sell to the market of the merchant's city"""
    merchant_name: str
    action: str
    good_id: str
    quantity: int

    def validate(self) -> None:
        if self.action not in VALID_ACTIONS:
            raise InvalidRequestError(f"Unknown trade action '{self.action}', expected buy or sell")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity <= 0:
            raise InvalidRequestError(f"Quantity must be a positive integer, got {self.quantity!r}")
        if not self.good_id:
            raise InvalidRequestError("good_id cannot be empty")


class ExecuteTradeHandler(RequestHandler[ExecuteTradeCommand, TradeResult]):
    """
    Handler for ExecuteTradeCommand

    Every precondition is checked before gold or cargo change, so a rejected
    trade leaves the player untouched. The player record is saved once, after
    both sides of the transaction have been applied.
    """

    def __init__(self, player_repository: IPlayerRepository, state: SimulationState):
        self._player_repo = player_repository
        self._state = state

    async def handle(self, request: ExecuteTradeCommand) -> TradeResult:
        player = self._player_repo.load()
        merchant = player.get_hired_merchant(request.merchant_name)
        if not merchant.is_free():
            raise MerchantNotFreeError(
                f"{merchant.name} is on the road to {merchant.destination} and cannot trade"
            )

        market = self._state.snapshot.market_for(merchant.current_location)
        if market is None:
            raise GoodNotFoundError(f"{merchant.current_location} has no market")

        if request.action == BUY:
            offer = market.sell_offer(request.good_id)
            price = offer.price
            total = price * request.quantity
            player.ensure_can_afford(total)
            merchant.ensure_can_load(request.good_id, request.quantity)

            player.spend_gold(total)
            merchant.load(request.good_id, request.quantity)
            message = (
                f"{merchant.name} bought {request.quantity} {offer.name} "
                f"in {merchant.current_location} for {total} gold"
            )
        else:
            order = market.buy_order(request.good_id)
            price = order.price
            total = price * request.quantity
            merchant.ensure_can_unload(request.good_id, request.quantity)

            merchant.unload(request.good_id, request.quantity)
            player.add_gold(total)
            message = (
                f"{merchant.name} sold {request.quantity} {order.name} "
                f"in {merchant.current_location} for {total} gold"
            )

        self._player_repo.save(player)
        logger.info(message)

        return TradeResult(
            player=player,
            action=request.action,
            merchant_name=merchant.name,
            good_id=request.good_id,
            quantity=request.quantity,
            price_per_unit=price,
            total_price=total,
            message=message,
        )
