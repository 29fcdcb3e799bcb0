from dataclasses import dataclass
from typing import List, Optional

from ....pymediatr import Request, RequestHandler
from ....domain.economy.simulation import SimulationState
from ....domain.shared.catalog import City
from ....domain.shared.market import CityMarket


@dataclass(frozen=True)
class CityView:
    """Reference city joined with its current market (None for unknown economies)"""
    city: City
    market: Optional[CityMarket]


@dataclass(frozen=True)
class ListCitiesQuery(Request[List[CityView]]):
    """Query to list every city with its current market"""
    pass


class ListCitiesHandler(RequestHandler[ListCitiesQuery, List[CityView]]):

    def __init__(self, state: SimulationState):
        self._state = state

    async def handle(self, request: ListCitiesQuery) -> List[CityView]:
        snapshot = self._state.snapshot
        return [
            CityView(city=city, market=snapshot.market_for(city.id))
            for city in self._state.catalog.cities
        ]
