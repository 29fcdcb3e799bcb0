from dataclasses import dataclass

from ....pymediatr import Request, RequestHandler
from ....domain.economy.simulation import SimulationState
from ....domain.shared.exceptions import InvalidRequestError
from ....domain.shared.market import CityMarket, MarketSnapshot


@dataclass(frozen=True)
class GetCityMarketQuery(Request[CityMarket]):
    """Query the current market of one city"""
    city_id: str

    def validate(self) -> None:
        if not self.city_id:
            raise InvalidRequestError("city_id cannot be empty")


class GetCityMarketHandler(RequestHandler[GetCityMarketQuery, CityMarket]):
    """Returns an empty market for cities whose economy is not recognized"""

    def __init__(self, state: SimulationState):
        self._state = state

    async def handle(self, request: GetCityMarketQuery) -> CityMarket:
        city = self._state.catalog.get_city(request.city_id)
        snapshot: MarketSnapshot = self._state.snapshot
        return snapshot.market_for(city.id) or CityMarket(city_id=city.id)
