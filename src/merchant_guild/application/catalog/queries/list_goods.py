from dataclasses import dataclass
from typing import List

from ....pymediatr import Request, RequestHandler
from ....domain.economy.simulation import SimulationState
from ....domain.shared.catalog import Good


@dataclass(frozen=True)
class ListGoodsQuery(Request[List[Good]]):
    """Query to list the reference goods"""
    pass


class ListGoodsHandler(RequestHandler[ListGoodsQuery, List[Good]]):

    def __init__(self, state: SimulationState):
        self._state = state

    async def handle(self, request: ListGoodsQuery) -> List[Good]:
        return list(self._state.catalog.goods)
