from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ....domain.shared.catalog import City, Connection, Good
from ....domain.shared.merchant import Merchant
from ....domain.shared.player import Player


def _parse_datetime(value) -> Optional[datetime]:
    """Parse an ISO timestamp, or epoch milliseconds, into an aware UTC datetime"""
    if value is None:
        return None

    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, (int, float)):
        dt = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    else:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _format_datetime(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


class MerchantMapper:
    """Map between merchant sub-documents and Merchant entities"""

    @staticmethod
    def from_document(doc: Dict[str, Any]) -> Merchant:
        return Merchant(
            name=doc["name"],
            capacity=int(doc["capacity"]),
            current_location=doc["currentLocation"],
            hired=bool(doc.get("hired", False)),
            free=bool(doc.get("free", True)),
            status=doc.get("status", Merchant.IDLE),
            destination=doc.get("destination"),
            arrival_time=_parse_datetime(doc.get("arrivalTime")),
            inventory={good_id: int(qty) for good_id, qty in (doc.get("inventory") or {}).items()},
        )

    @staticmethod
    def to_document(merchant: Merchant) -> Dict[str, Any]:
        return {
            "name": merchant.name,
            "hired": merchant.hired,
            "free": merchant.free,
            "capacity": merchant.capacity,
            "currentLocation": merchant.current_location,
            "status": merchant.status,
            "destination": merchant.destination,
            "arrivalTime": _format_datetime(merchant.arrival_time),
            "inventory": merchant.inventory,
        }


class PlayerMapper:
    """
    Map between the player record and the Player entity.

    The aggregate inventory is written for readers of the raw document but
    ignored on load; it is always recomputed from the merchants.
    """

    @staticmethod
    def from_document(doc: Dict[str, Any]) -> Player:
        return Player(
            name=doc["name"],
            gold=int(doc["gold"]),
            merchants=[MerchantMapper.from_document(m) for m in doc.get("merchants", [])],
        )

    @staticmethod
    def to_document(player: Player) -> Dict[str, Any]:
        return {
            "name": player.name,
            "gold": player.gold,
            "inventory": player.inventory,
            "merchants": [MerchantMapper.to_document(m) for m in player.merchants],
        }


class CatalogMapper:
    """Map reference records to goods and cities"""

    @staticmethod
    def goods_from_document(doc: Dict[str, Any]) -> List[Good]:
        return [
            Good(id=item["id"], name=item["name"], base_price=item["basePrice"])
            for item in doc["goods"]
        ]

    @staticmethod
    def cities_from_document(doc: Dict[str, Any]) -> List[City]:
        cities = []
        for item in doc["cities"]:
            connections = tuple(
                Connection(
                    target_id=conn["targetId"],
                    distance=float(conn["distance"]),
                    risk=float(conn["risk"]),
                )
                for conn in item.get("connections", [])
            )
            cities.append(City(
                id=item["id"],
                name=item.get("name", item["id"].title()),
                economy_type=item["economyType"],
                connections=connections,
            ))
        return cities

