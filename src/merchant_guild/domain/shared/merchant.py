import math
from datetime import datetime
from typing import Dict, Optional

from .exceptions import (
    CapacityExceededError,
    InsufficientStockError,
    MerchantNotFreeError,
)


class InvalidMerchantDataError(ValueError):
    """Raised when merchant data violates the entity invariants"""
    pass


class Merchant:
    """
    Merchant entity - a caravan master carrying cargo between cities

    Invariants:
    - name must be unique within the player's roster and non-empty
    - capacity must be positive
    - sum of inventory quantities never exceeds capacity
    - no inventory quantity is negative
    - status == TRAVELING iff destination and arrival_time are set and free is False
    - status == IDLE iff destination and arrival_time are None and free is True

    Travel state machine:
    - IDLE -> start_journey() -> TRAVELING
    - TRAVELING -> arrive() -> IDLE (at destination)
    """

    IDLE = "idle"
    TRAVELING = "traveling"

    VALID_STATUSES = {IDLE, TRAVELING}

    def __init__(
        self,
        name: str,
        capacity: int,
        current_location: str,
        hired: bool = False,
        free: bool = True,
        status: str = IDLE,
        destination: Optional[str] = None,
        arrival_time: Optional[datetime] = None,
        inventory: Optional[Dict[str, int]] = None
    ):
        inventory = dict(inventory or {})
        self._validate_initialization(
            name, capacity, current_location, free, status,
            destination, arrival_time, inventory
        )

        self._name = name.strip()
        self._capacity = capacity
        self._current_location = current_location
        self._hired = hired
        self._free = free
        self._status = status
        self._destination = destination
        self._arrival_time = arrival_time
        self._inventory = inventory

    def _validate_initialization(
        self,
        name: str,
        capacity: int,
        current_location: str,
        free: bool,
        status: str,
        destination: Optional[str],
        arrival_time: Optional[datetime],
        inventory: Dict[str, int]
    ) -> None:
        if not name or not name.strip():
            raise InvalidMerchantDataError("merchant name cannot be empty")

        if capacity <= 0:
            raise InvalidMerchantDataError("capacity must be positive")

        if not current_location:
            raise InvalidMerchantDataError("current_location cannot be empty")

        if status not in self.VALID_STATUSES:
            raise InvalidMerchantDataError(
                f"status must be one of {self.VALID_STATUSES}, got: {status}"
            )

        if any(quantity < 0 for quantity in inventory.values()):
            raise InvalidMerchantDataError("inventory quantities cannot be negative")

        if sum(inventory.values()) > capacity:
            raise InvalidMerchantDataError(
                f"cargo {sum(inventory.values())} exceeds capacity {capacity}"
            )

        traveling = destination is not None and arrival_time is not None and not free
        idle = destination is None and arrival_time is None and free
        if status == self.TRAVELING and not traveling:
            raise InvalidMerchantDataError(
                "traveling merchant needs a destination, an arrival time and free=False"
            )
        if status == self.IDLE and not idle:
            raise InvalidMerchantDataError(
                "idle merchant cannot have a destination or arrival time and must be free"
            )

    # Properties

    @property
    def name(self) -> str:
        return self._name

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def current_location(self) -> str:
        """City the merchant is in, or departed from while traveling"""
        return self._current_location

    @property
    def hired(self) -> bool:
        return self._hired

    @property
    def free(self) -> bool:
        return self._free

    @property
    def status(self) -> str:
        return self._status

    @property
    def destination(self) -> Optional[str]:
        return self._destination

    @property
    def arrival_time(self) -> Optional[datetime]:
        return self._arrival_time

    @property
    def inventory(self) -> Dict[str, int]:
        return self._inventory.copy()

    # Roster

    def hire(self) -> None:
        self._hired = True

    # Travel

    def start_journey(self, destination: str, arrival_time: datetime) -> None:
        """
        Leave the current city for destination

        Transitions: IDLE -> TRAVELING. current_location keeps the origin
        until arrival so the route can be resolved afterwards.

        Raises:
            MerchantNotFreeError: If the merchant is already on the road
        """
        if not self.is_free():
            raise MerchantNotFreeError(
                f"{self._name} is traveling to {self._destination}"
            )
        self._status = self.TRAVELING
        self._free = False
        self._destination = destination
        self._arrival_time = arrival_time

    def has_arrived_by(self, now: datetime) -> bool:
        return self.is_traveling() and self._arrival_time <= now

    def arrive(self) -> None:
        """
        Complete the journey

        Transitions: TRAVELING -> IDLE, current_location becomes destination

        Raises:
            MerchantNotFreeError: If the merchant is not traveling
        """
        if not self.is_traveling():
            raise MerchantNotFreeError(f"{self._name} is not traveling")
        self._current_location = self._destination
        self._status = self.IDLE
        self._free = True
        self._destination = None
        self._arrival_time = None

    # Cargo Management

    def cargo_units(self) -> int:
        return sum(self._inventory.values())

    def quantity_of(self, good_id: str) -> int:
        return self._inventory.get(good_id, 0)

    def has_cargo_space(self, units: int = 1) -> bool:
        return self.cargo_units() + units <= self._capacity

    def available_cargo_space(self) -> int:
        return self._capacity - self.cargo_units()

    def carried_goods(self) -> list:
        """Good ids with a positive quantity, in inventory order"""
        return [good_id for good_id, quantity in self._inventory.items() if quantity > 0]

    def ensure_can_load(self, good_id: str, units: int) -> None:
        if not self.has_cargo_space(units):
            raise CapacityExceededError(
                f"{self._name} carries {self.cargo_units()}/{self._capacity}, "
                f"cannot load {units} {good_id}"
            )

    def ensure_can_unload(self, good_id: str, units: int) -> None:
        held = self.quantity_of(good_id)
        if held < units:
            raise InsufficientStockError(
                f"{self._name} carries {held} {good_id}, cannot sell {units}"
            )

    def load(self, good_id: str, units: int) -> None:
        if units < 0:
            raise ValueError("units cannot be negative")
        self.ensure_can_load(good_id, units)
        self._inventory[good_id] = self.quantity_of(good_id) + units

    def unload(self, good_id: str, units: int) -> None:
        if units < 0:
            raise ValueError("units cannot be negative")
        self.ensure_can_unload(good_id, units)
        self._inventory[good_id] = self.quantity_of(good_id) - units

    def lose_half_of(self, good_id: str) -> int:
        """
        Drop half (rounded up) of a carried good.

        Returns:
            Units lost
        """
        held = self.quantity_of(good_id)
        lost = min(held, math.ceil(held * 0.5))
        self._inventory[good_id] = max(0, held - lost)
        return lost

    # State Queries

    def is_free(self) -> bool:
        return self._free and self._status == self.IDLE

    def is_traveling(self) -> bool:
        return self._status == self.TRAVELING

    def __repr__(self) -> str:
        return (
            f"Merchant(name={self._name}, "
            f"location={self._current_location}, "
            f"status={self._status}, "
            f"cargo={self.cargo_units()}/{self._capacity})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Merchant):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)
