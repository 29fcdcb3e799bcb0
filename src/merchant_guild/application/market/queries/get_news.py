from dataclasses import dataclass
from typing import Optional

from ....pymediatr import Request, RequestHandler
from ....domain.economy.events import MarketEvent
from ....domain.economy.simulation import GlobalNews, SimulationState
from ....ports.outbound.clock import Clock, system_clock


@dataclass(frozen=True)
class NewsView:
    news: GlobalNews
    active_event: Optional[MarketEvent]
    seconds_until_change: float


@dataclass(frozen=True)
class GetNewsQuery(Request[NewsView]):
    """Query the current headline and active event"""
    pass


class GetNewsHandler(RequestHandler[GetNewsQuery, NewsView]):

    def __init__(self, state: SimulationState, clock: Clock = system_clock):
        self._state = state
        self._clock = clock

    async def handle(self, request: GetNewsQuery) -> NewsView:
        return NewsView(
            news=self._state.news,
            active_event=self._state.active_event,
            seconds_until_change=self._state.remaining(self._clock()).total_seconds(),
        )
