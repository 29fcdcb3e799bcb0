import logging
import random
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from ..shared.catalog import Catalog
from ..shared.merchant import Merchant
from ..shared.player import Player

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArrivalReport:
    """Outcome of one completed journey"""
    merchant: str
    origin: str
    destination: str
    ambushed: bool
    good_lost: Optional[str]
    units_lost: int
    message: str


class TravelResolver:
    """
    Domain service completing journeys whose arrival time has passed

    Business rules:
    - Runs on demand when player state is read; merchants already idle are
      never processed again
    - The risk of the route origin -> destination decides an ambush; routes
      missing from the catalog fall back to DEFAULT_RISK
    - An ambush takes half (rounded up) of one randomly chosen carried good
    """

    DEFAULT_RISK = 0.2

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def route_risk(self, catalog: Catalog, origin: str, destination: str) -> float:
        city = catalog.find_city(origin)
        connection = city.connection_to(destination) if city else None
        if connection is None:
            return self.DEFAULT_RISK
        return connection.risk

    def resolve_arrival(self, merchant: Merchant, catalog: Catalog) -> ArrivalReport:
        origin = merchant.current_location
        destination = merchant.destination
        risk = self.route_risk(catalog, origin, destination)

        good_lost = None
        units_lost = 0
        ambushed = self._rng.random() < risk
        if ambushed:
            carried = merchant.carried_goods()
            if carried:
                good_lost = self._rng.choice(carried)
                units_lost = merchant.lose_half_of(good_lost)
                message = (
                    f"Bandits ambushed {merchant.name} on the road to {destination} "
                    f"and made off with {units_lost} {good_lost}."
                )
            else:
                message = (
                    f"Bandits ambushed {merchant.name} on the road to {destination}, "
                    f"but found nothing worth stealing."
                )
        else:
            message = f"{merchant.name} arrived safely in {destination}."

        merchant.arrive()
        logger.info(message)
        return ArrivalReport(
            merchant=merchant.name,
            origin=origin,
            destination=destination,
            ambushed=ambushed,
            good_lost=good_lost,
            units_lost=units_lost,
            message=message,
        )

    def resolve(self, player: Player, catalog: Catalog, now: datetime) -> List[ArrivalReport]:
        """
        Complete every journey due by now, in roster order.

        Returns:
            One report per merchant that arrived; empty if nobody did
        """
        return [
            self.resolve_arrival(merchant, catalog)
            for merchant in player.merchants
            if merchant.has_arrived_by(now)
        ]
