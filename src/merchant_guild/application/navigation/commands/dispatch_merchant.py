"""Dispatch merchant command"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

from ....pymediatr import Request, RequestHandler
from ....domain.economy.simulation import SimulationState
from ....domain.shared.exceptions import InvalidRequestError, MerchantNotFreeError
from ....domain.shared.player import Player
from ....ports.outbound.clock import Clock, system_clock
from ....ports.outbound.repositories import IPlayerRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DispatchResult:
    player: Player
    merchant_name: str
    origin: str
    destination: str
    arrival_time: datetime
    risk: float
    message: str


@dataclass(frozen=True)
class DispatchMerchantCommand(Request[DispatchResult]):
    """Command to send a merchant along a direct route"""
    merchant_name: str
    target_city_id: str

    def validate(self) -> None:
        if not self.merchant_name:
            raise InvalidRequestError("merchant_name cannot be empty")
        if not self.target_city_id:
            raise InvalidRequestError("target_city_id cannot be empty")


class DispatchMerchantHandler(RequestHandler[DispatchMerchantCommand, DispatchResult]):
    """Starts a journey; route distance is the travel time in seconds"""

    def __init__(
        self,
        player_repository: IPlayerRepository,
        state: SimulationState,
        clock: Clock = system_clock
    ):
        self._player_repo = player_repository
        self._state = state
        self._clock = clock

    async def handle(self, request: DispatchMerchantCommand) -> DispatchResult:
        player = self._player_repo.load()
        merchant = player.get_hired_merchant(request.merchant_name)
        if not merchant.is_free():
            raise MerchantNotFreeError(
                f"{merchant.name} is already on the road to {merchant.destination}"
            )
        origin = merchant.current_location

        connection = self._state.catalog.route_between(origin, request.target_city_id)
        arrival_time = self._clock() + timedelta(seconds=connection.distance)
        merchant.start_journey(request.target_city_id, arrival_time)

        self._player_repo.save(player)

        message = (
            f"{merchant.name} set out from {origin} to {request.target_city_id}, "
            f"arriving in {connection.distance:g} seconds"
        )
        logger.info(message)
        return DispatchResult(
            player=player,
            merchant_name=merchant.name,
            origin=origin,
            destination=request.target_city_id,
            arrival_time=arrival_time,
            risk=connection.risk,
            message=message,
        )
