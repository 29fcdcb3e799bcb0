from typing import Dict, List, Optional

from .exceptions import (
    AllMerchantsHiredError,
    InsufficientFundsError,
    MerchantNotFoundError,
)
from .merchant import Merchant


class Player:
    """
    Player entity - the guildmaster owning the gold and the merchant roster

    Invariants:
    - gold cannot be negative
    - merchant names are unique
    - inventory is never stored, it is aggregated from merchants on access
    """

    def __init__(self, name: str, gold: int, merchants: Optional[List[Merchant]] = None):
        if not name or not name.strip():
            raise ValueError("player name cannot be empty")
        if gold < 0:
            raise ValueError("gold cannot be negative")

        merchants = list(merchants or [])
        names = [merchant.name for merchant in merchants]
        if len(names) != len(set(names)):
            raise ValueError("merchant names must be unique")

        self._name = name.strip()
        self._gold = gold
        self._merchants = merchants

    @property
    def name(self) -> str:
        return self._name

    @property
    def gold(self) -> int:
        """Current gold balance"""
        return self._gold

    @property
    def merchants(self) -> List[Merchant]:
        return list(self._merchants)

    @property
    def inventory(self) -> Dict[str, int]:
        """Cargo of every merchant summed per good"""
        totals: Dict[str, int] = {}
        for merchant in self._merchants:
            for good_id, quantity in merchant.inventory.items():
                totals[good_id] = totals.get(good_id, 0) + quantity
        return totals

    def find_merchant(self, name: str) -> Optional[Merchant]:
        for merchant in self._merchants:
            if merchant.name == name:
                return merchant
        return None

    def get_hired_merchant(self, name: str) -> Merchant:
        """
        Look up a merchant on the payroll

        Raises:
            MerchantNotFoundError: If no hired merchant has that name
        """
        merchant = self.find_merchant(name)
        if merchant is None or not merchant.hired:
            raise MerchantNotFoundError(f"No hired merchant named '{name}'")
        return merchant

    def hire_next_merchant(self) -> Merchant:
        """
        Hire the first merchant, in roster order, not yet hired

        Raises:
            AllMerchantsHiredError: If every merchant is already hired
        """
        for merchant in self._merchants:
            if not merchant.hired:
                merchant.hire()
                return merchant
        raise AllMerchantsHiredError("Every merchant of the guild is already hired")

    def add_gold(self, amount: int) -> None:
        """
        Add gold to the player's balance

        Raises:
            ValueError: If amount is negative
        """
        if amount < 0:
            raise ValueError("amount cannot be negative")
        self._gold += amount

    def ensure_can_afford(self, amount: int) -> None:
        if self._gold < amount:
            raise InsufficientFundsError(
                f"Insufficient gold: need {amount}, have {self._gold}"
            )

    def spend_gold(self, amount: int) -> None:
        """
        Spend gold from the player's balance

        Raises:
            ValueError: If amount is negative
            InsufficientFundsError: If the player doesn't have enough gold
        """
        if amount < 0:
            raise ValueError("amount cannot be negative")
        self.ensure_can_afford(amount)
        self._gold -= amount

    def __repr__(self) -> str:
        return f"Player(name={self._name}, gold={self._gold}, merchants={len(self._merchants)})"
