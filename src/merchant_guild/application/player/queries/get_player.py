import logging
from dataclasses import dataclass
from typing import Tuple

from ....pymediatr import Request, RequestHandler
from ....domain.economy.simulation import GlobalNews, SimulationState
from ....domain.shared.player import Player
from ....domain.travel.resolver import ArrivalReport, TravelResolver
from ....ports.outbound.clock import Clock, system_clock
from ....ports.outbound.repositories import IPlayerRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerView:
    """Player state as seen by a reader, with the narrative of this read"""
    player: Player
    arrivals: Tuple[ArrivalReport, ...]
    news: GlobalNews

    @property
    def events(self) -> Tuple[str, ...]:
        return tuple(report.message for report in self.arrivals)


@dataclass(frozen=True)
class GetPlayerQuery(Request[PlayerView]):
    """Query the player, completing every journey due by now"""
    pass


class GetPlayerHandler(RequestHandler[GetPlayerQuery, PlayerView]):
    """
    Reading the player advances travel.

    Journeys are resolved lazily here rather than by a timer: arrivals become
    visible on the first read after they are due, and the player record is
    saved once if at least one merchant arrived.
    """

    def __init__(
        self,
        player_repository: IPlayerRepository,
        state: SimulationState,
        resolver: TravelResolver,
        clock: Clock = system_clock
    ):
        self._player_repo = player_repository
        self._state = state
        self._resolver = resolver
        self._clock = clock

    async def handle(self, request: GetPlayerQuery) -> PlayerView:
        player = self._player_repo.load()
        arrivals = self._resolver.resolve(player, self._state.catalog, self._clock())

        if arrivals:
            self._player_repo.save(player)
            logger.debug(f"{len(arrivals)} merchant(s) arrived")

        return PlayerView(player=player, arrivals=tuple(arrivals), news=self._state.news)
