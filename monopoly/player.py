"""
Player state and management.
"""

import logging
from typing import Protocol, Set

from monopoly.exceptions import InsufficientFunds, ValidationError

logger = logging.getLogger(__name__)


class PlayerView(Protocol):
    """The slice of a player that a tile needs when it is landed on."""

    name: str

    def has_property(self, property_name: str) -> bool:
        ...

    def purchase_property(self, property_name: str, price: int) -> None:
        ...


class PlayerState:
    """Represents the cash and deeds held by a player."""

    def __init__(self, name: str, cash: int = 1500):
        if cash < 0:
            raise ValidationError(f"Starting cash cannot be negative: {cash}")
        self.name = name
        self.cash = cash
        self.properties: Set[str] = set()

    def has_property(self, property_name: str) -> bool:
        """Check whether the player holds the deed for a property."""
        return property_name in self.properties

    def purchase_property(self, property_name: str, price: int) -> None:
        """
        Buy a property from the bank.

        Raises:
            InsufficientFunds: if the player cannot cover the price.
        """
        self.pay(price)
        self.properties.add(property_name)
        logger.info(f"{self.name} purchased {property_name} for ${price} (balance ${self.cash})")

    def pay(self, amount: int) -> None:
        """Deduct cash, refusing to go below zero."""
        if amount < 0:
            raise ValidationError(f"Payment cannot be negative: {amount}")
        if self.cash < amount:
            raise InsufficientFunds(self.name, amount, self.cash)
        self.cash -= amount

    def receive(self, amount: int) -> None:
        if amount < 0:
            raise ValidationError(f"Amount received cannot be negative: {amount}")
        self.cash += amount

    def release_property(self, property_name: str) -> None:
        self.properties.discard(property_name)

    def __repr__(self) -> str:
        return (
            f"PlayerState(name='{self.name}', cash={self.cash}, "
            f"properties={sorted(self.properties)})"
        )
