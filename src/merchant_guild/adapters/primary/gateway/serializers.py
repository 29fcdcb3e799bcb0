"""JSON-friendly views of domain objects returned across the shell boundary"""
from typing import Any, Dict, Optional

from ....domain.economy.events import MarketEvent
from ....domain.economy.simulation import GlobalNews
from ....domain.shared.catalog import City, Good
from ....domain.shared.market import CityMarket
from ....domain.shared.merchant import Merchant
from ....domain.shared.player import Player


def merchant_to_dict(merchant: Merchant) -> Dict[str, Any]:
    return {
        "name": merchant.name,
        "hired": merchant.hired,
        "free": merchant.free,
        "capacity": merchant.capacity,
        "currentLocation": merchant.current_location,
        "status": merchant.status,
        "destination": merchant.destination,
        "arrivalTime": merchant.arrival_time.isoformat() if merchant.arrival_time else None,
        "inventory": merchant.inventory,
    }


def player_to_dict(player: Player) -> Dict[str, Any]:
    return {
        "name": player.name,
        "gold": player.gold,
        "inventory": player.inventory,
        "merchants": [merchant_to_dict(m) for m in player.merchants],
    }


def good_to_dict(good: Good) -> Dict[str, Any]:
    return {"id": good.id, "name": good.name, "basePrice": good.base_price}


def market_to_dict(market: Optional[CityMarket]) -> Optional[Dict[str, Any]]:
    if market is None:
        return None
    return {
        "selling": [
            {"id": o.good_id, "name": o.name, "price": o.price, "stock": o.stock}
            for o in market.selling
        ],
        "buying": [
            {"id": o.good_id, "name": o.name, "price": o.price, "demand": o.demand}
            for o in market.buying
        ],
    }


def city_to_dict(city: City, market: Optional[CityMarket]) -> Dict[str, Any]:
    return {
        "id": city.id,
        "name": city.name,
        "economyType": city.economy_type,
        "connections": [
            {"targetId": c.target_id, "distance": c.distance, "risk": c.risk}
            for c in city.connections
        ],
        "market": market_to_dict(market),
    }


def news_to_dict(news: GlobalNews) -> Dict[str, Any]:
    return {"id": news.id, "text": news.text}


def event_to_dict(event: Optional[MarketEvent]) -> Optional[Dict[str, Any]]:
    if event is None:
        return None
    return {
        "id": event.id,
        "title": event.title,
        "message": event.message,
        "targetCity": event.target_city,
        "affectedGoods": sorted(event.affected_goods),
        "multiplier": event.multiplier,
    }
