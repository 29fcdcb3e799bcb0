import logging
import math
import random
from typing import Dict, Optional

from ..shared.catalog import Catalog, City, Good
from ..shared.market import BuyOrder, CityMarket, MarketSnapshot, SellOffer
from .events import MarketEvent
from .rules import ECONOMY_RULES, EconomyProfile, profile_for

logger = logging.getLogger(__name__)


class MarketGenerator:
    """
    Domain service deriving every city's priced market lists

    Business rules:
    - A city sells what its economy produces at a discount (x0.8) and buys
      what it demands at a markup (x1.5), so a round trip always has friction
    - The active event multiplies the price of its goods in its target city
    - Every price gets independent noise drawn from [0.9, 1.1]
    - price = floor(base_price * role * event * noise), never below zero
    - Cities with an unknown economy type get no market at all
    """

    SELL_MULTIPLIER = 0.8
    BUY_MULTIPLIER = 1.5
    NOISE_RANGE = (0.9, 1.1)
    STOCK_RANGE = (20, 69)
    DEMAND_RANGE = (5, 24)

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        rules: Optional[Dict[str, EconomyProfile]] = None
    ):
        self._rng = rng or random.Random()
        self._rules = rules if rules is not None else ECONOMY_RULES

    def price_for(
        self,
        city_id: str,
        good: Good,
        role_multiplier: float,
        active_event: Optional[MarketEvent]
    ) -> int:
        multiplier = role_multiplier
        if active_event is not None and active_event.affects(city_id, good.id):
            multiplier *= active_event.multiplier
        noise = self._rng.uniform(*self.NOISE_RANGE)
        return max(0, math.floor(good.base_price * multiplier * noise))

    def market_for_city(
        self,
        city: City,
        goods: Dict[str, Good],
        active_event: Optional[MarketEvent]
    ) -> Optional[CityMarket]:
        """Priced market of one city, None if its economy type is unrecognized"""
        profile = profile_for(city.economy_type, self._rules)
        if profile is None:
            return None

        selling = []
        for good_id in profile.produces:
            good = goods.get(good_id)
            if good is None:
                continue
            selling.append(SellOffer(
                good_id=good.id,
                name=good.name,
                price=self.price_for(city.id, good, self.SELL_MULTIPLIER, active_event),
                stock=self._rng.randint(*self.STOCK_RANGE),
            ))

        buying = []
        for good_id in profile.demands:
            good = goods.get(good_id)
            if good is None:
                continue
            buying.append(BuyOrder(
                good_id=good.id,
                name=good.name,
                price=self.price_for(city.id, good, self.BUY_MULTIPLIER, active_event),
                demand=self._rng.randint(*self.DEMAND_RANGE),
            ))

        return CityMarket(city_id=city.id, selling=tuple(selling), buying=tuple(buying))

    def refresh(self, catalog: Catalog, active_event: Optional[MarketEvent]) -> MarketSnapshot:
        """
        Recompute the markets of every city.

        Args:
            catalog: Reference goods and cities
            active_event: Event distorting prices, None when markets are calm

        Returns:
            A new snapshot; the previous one is never modified
        """
        goods = catalog.goods_by_id()
        markets = {}
        for city in catalog.cities:
            market = self.market_for_city(city, goods, active_event)
            if market is None:
                logger.debug(f"No market for {city.id}: unknown economy '{city.economy_type}'")
                continue
            markets[city.id] = market

        return MarketSnapshot(
            markets=markets,
            event_id=active_event.id if active_event else None
        )
