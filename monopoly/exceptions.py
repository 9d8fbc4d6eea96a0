"""
Custom exception hierarchy for the Monopoly tile engine.

Provides typed errors that can be handled consistently by tiles,
player inventories and the turn controller.
"""


class MonopolyError(Exception):
    """Base exception for all game-related errors."""


class ValidationError(MonopolyError):
    """Input validation failed."""


class InvalidActionError(MonopolyError):
    """Action is not legal in the current state."""


class InsufficientFunds(MonopolyError):
    """Player cannot cover a payment."""

    def __init__(self, player: str, required: int, available: int):
        super().__init__(f"{player} needs ${required} but only has ${available}")
        self.player = player
        self.required = required
        self.available = available


class PurchaseFailed(MonopolyError):
    """Purchase attempted on landing could not be completed."""

    def __init__(self, property_name: str, price: int):
        super().__init__(f"Could not purchase {property_name} for ${price}")
        self.property_name = property_name
        self.price = price


class NoOwner(MonopolyError):
    """Operation requires an owned tile but the tile is unowned."""


class InvalidUtilityCount(MonopolyError):
    """Number of utilities owned is not a valid count."""
