"""
Gateway between the simulation core and any outer shell (daemon, CLI).

Every operation returns an OperationResult. Domain exceptions, persistence
failures included, are turned into a structured error and never escape.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ....pymediatr import Mediator, Request
from ....application.catalog.queries import ListCitiesQuery, ListGoodsQuery
from ....application.market.queries import GetCityMarketQuery, GetNewsQuery
from ....application.navigation.commands import DispatchMerchantCommand
from ....application.player.commands import HireMerchantCommand, ResetPlayerCommand
from ....application.player.queries import GetPlayerQuery
from ....application.trading.commands import ExecuteTradeCommand
from ....domain.shared.exceptions import DomainException
from .serializers import (
    city_to_dict,
    event_to_dict,
    good_to_dict,
    market_to_dict,
    merchant_to_dict,
    news_to_dict,
    player_to_dict,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperationError:
    kind: str
    message: str


@dataclass(frozen=True)
class OperationResult:
    """Success payload with a confirmation message, or a structured error"""
    ok: bool
    data: Any = None
    message: str = ""
    error: Optional[OperationError] = None

    @classmethod
    def success(cls, data: Any, message: str = "") -> "OperationResult":
        return cls(ok=True, data=data, message=message)

    @classmethod
    def failure(cls, kind: str, message: str) -> "OperationResult":
        return cls(ok=False, message=message, error=OperationError(kind=kind, message=message))

    def to_dict(self) -> Dict[str, Any]:
        result = {"ok": self.ok, "data": self.data, "message": self.message, "error": None}
        if self.error is not None:
            result["error"] = {"kind": self.error.kind, "message": self.error.message}
        return result


class GuildGateway:
    """Exposes the core operations one-to-one with structured results"""

    def __init__(self, mediator: Mediator):
        self._mediator = mediator

    async def _send(self, request: Request):
        return await self._mediator.send_async(request)

    async def get_cities(self) -> OperationResult:
        try:
            views = await self._send(ListCitiesQuery())
        except DomainException as e:
            return OperationResult.failure(e.kind, str(e))
        return OperationResult.success([city_to_dict(v.city, v.market) for v in views])

    async def get_goods(self) -> OperationResult:
        try:
            goods = await self._send(ListGoodsQuery())
        except DomainException as e:
            return OperationResult.failure(e.kind, str(e))
        return OperationResult.success([good_to_dict(g) for g in goods])

    async def get_player(self) -> OperationResult:
        try:
            view = await self._send(GetPlayerQuery())
        except DomainException as e:
            return OperationResult.failure(e.kind, str(e))
        data = player_to_dict(view.player)
        data["events"] = list(view.events)
        data["news"] = news_to_dict(view.news)
        return OperationResult.success(data)

    async def hire(self) -> OperationResult:
        try:
            result = await self._send(HireMerchantCommand())
        except DomainException as e:
            return OperationResult.failure(e.kind, str(e))
        data = {"player": player_to_dict(result.player), "merchant": merchant_to_dict(result.merchant)}
        return OperationResult.success(data, result.message)

    async def dispatch(self, merchant_name: str, target_city_id: str) -> OperationResult:
        try:
            result = await self._send(DispatchMerchantCommand(
                merchant_name=merchant_name,
                target_city_id=target_city_id,
            ))
        except DomainException as e:
            return OperationResult.failure(e.kind, str(e))
        data = {
            "player": player_to_dict(result.player),
            "arrivalTime": result.arrival_time.isoformat(),
        }
        return OperationResult.success(data, result.message)

    async def trade(self, action: str, good_id: str, quantity: int, merchant_name: str) -> OperationResult:
        try:
            result = await self._send(ExecuteTradeCommand(
                merchant_name=merchant_name,
                action=action,
                good_id=good_id,
                quantity=quantity,
            ))
        except DomainException as e:
            return OperationResult.failure(e.kind, str(e))
        data = {
            "player": player_to_dict(result.player),
            "pricePerUnit": result.price_per_unit,
            "totalPrice": result.total_price,
        }
        return OperationResult.success(data, result.message)

    async def reset(self) -> OperationResult:
        try:
            result = await self._send(ResetPlayerCommand())
        except DomainException as e:
            return OperationResult.failure(e.kind, str(e))
        return OperationResult.success(player_to_dict(result.player), result.message)

    async def get_news(self) -> OperationResult:
        try:
            view = await self._send(GetNewsQuery())
        except DomainException as e:
            return OperationResult.failure(e.kind, str(e))
        data = {
            "news": news_to_dict(view.news),
            "activeEvent": event_to_dict(view.active_event),
            "secondsUntilChange": view.seconds_until_change,
        }
        return OperationResult.success(data)

    async def get_market(self, city_id: str) -> OperationResult:
        try:
            market = await self._send(GetCityMarketQuery(city_id=city_id))
        except DomainException as e:
            return OperationResult.failure(e.kind, str(e))
        return OperationResult.success(market_to_dict(market))
