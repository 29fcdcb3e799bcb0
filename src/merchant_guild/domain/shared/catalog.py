"""Reference catalog value objects: goods, cities and the routes between them"""
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .exceptions import CityNotFoundError, GoodNotFoundError, RouteNotFoundError


@dataclass(frozen=True)
class Good:
    """Tradeable good with its reference price"""
    id: str
    name: str
    base_price: float

    def __post_init__(self):
        if not self.id:
            raise ValueError("good id cannot be empty")
        if self.base_price <= 0:
            raise ValueError(f"base price of {self.id} must be positive")


@dataclass(frozen=True)
class Connection:
    """Direct route from a city to a neighbour"""
    target_id: str
    distance: float     # travel time in seconds
    risk: float         # ambush probability on arrival

    def __post_init__(self):
        if self.distance <= 0:
            raise ValueError("route distance must be positive")
        if not 0.0 <= self.risk <= 1.0:
            raise ValueError(f"route risk must be within [0, 1], got {self.risk}")


@dataclass(frozen=True)
class City:
    """City with an economy profile and ordered outgoing connections"""
    id: str
    name: str
    economy_type: str
    connections: Tuple[Connection, ...] = ()

    def connection_to(self, target_id: str) -> Optional[Connection]:
        """First connection leading to target_id, or None"""
        for connection in self.connections:
            if connection.target_id == target_id:
                return connection
        return None

    def __repr__(self) -> str:
        return f"City({self.id}, {self.economy_type})"


@dataclass(frozen=True)
class Catalog:
    """
    Immutable reference data loaded once at startup.

    Goods and cities keep the order they were declared in.
    """
    goods: Tuple[Good, ...]
    cities: Tuple[City, ...]

    def goods_by_id(self) -> Dict[str, Good]:
        return {good.id: good for good in self.goods}

    def find_good(self, good_id: str) -> Optional[Good]:
        return self.goods_by_id().get(good_id)

    def find_city(self, city_id: str) -> Optional[City]:
        for city in self.cities:
            if city.id == city_id:
                return city
        return None

    def get_good(self, good_id: str) -> Good:
        good = self.find_good(good_id)
        if good is None:
            raise GoodNotFoundError(f"Good '{good_id}' does not exist")
        return good

    def get_city(self, city_id: str) -> City:
        city = self.find_city(city_id)
        if city is None:
            raise CityNotFoundError(f"City '{city_id}' does not exist")
        return city

    def route_between(self, origin_id: str, target_id: str) -> Connection:
        """
        Resolve the direct connection origin -> target.

        Raises:
            CityNotFoundError: If the origin is unknown
            RouteNotFoundError: If the origin has no connection to target
        """
        connection = self.get_city(origin_id).connection_to(target_id)
        if connection is None:
            raise RouteNotFoundError(f"No route from '{origin_id}' to '{target_id}'")
        return connection
