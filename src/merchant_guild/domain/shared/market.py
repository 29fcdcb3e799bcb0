"""Market domain value objects"""
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .exceptions import GoodNotFoundError


@dataclass(frozen=True)
class SellOffer:
    """
    A good the city sells to merchants.

    price is what the merchant PAYS per unit.
    """
    good_id: str
    name: str
    price: int
    stock: int


@dataclass(frozen=True)
class BuyOrder:
    """
    A good the city buys from merchants.

    price is what the merchant RECEIVES per unit.
    """
    good_id: str
    name: str
    price: int
    demand: int


@dataclass(frozen=True)
class CityMarket:
    """Priced selling and buying lists of one city for one refresh"""
    city_id: str
    selling: Tuple[SellOffer, ...] = ()
    buying: Tuple[BuyOrder, ...] = ()

    def sell_offer(self, good_id: str) -> SellOffer:
        for offer in self.selling:
            if offer.good_id == good_id:
                return offer
        raise GoodNotFoundError(f"{self.city_id} does not sell '{good_id}'")

    def buy_order(self, good_id: str) -> BuyOrder:
        for order in self.buying:
            if order.good_id == good_id:
                return order
        raise GoodNotFoundError(f"{self.city_id} does not buy '{good_id}'")


@dataclass(frozen=True)
class MarketSnapshot:
    """
    Market state of every city at one point in time.

    Replaced wholesale on each refresh; cities without a recognized economy
    have no entry.
    """
    markets: Dict[str, CityMarket] = field(default_factory=dict)
    event_id: Optional[str] = None

    def market_for(self, city_id: str) -> Optional[CityMarket]:
        return self.markets.get(city_id)
