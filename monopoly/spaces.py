"""
Board space definitions and types.
"""

import logging
from enum import Enum
from typing import Optional, Protocol, Sequence, Tuple

from monopoly.announcer import Announcer, LoggingAnnouncer
from monopoly.dice import DiceSource
from monopoly.exceptions import (
    InsufficientFunds,
    InvalidUtilityCount,
    NoOwner,
    PurchaseFailed,
    ValidationError,
)
from monopoly.player import PlayerView

logger = logging.getLogger(__name__)


class ColorGroup(Enum):
    """Logical groups of board spaces."""

    BROWN = "Brown"
    LIGHT_BLUE = "Light Blue"
    PINK = "Pink"
    ORANGE = "Orange"
    RED = "Red"
    YELLOW = "Yellow"
    GREEN = "Green"
    DARK_BLUE = "Dark Blue"
    RAILROAD = "Railroad"
    UTILITY = "Utility"

    def __str__(self) -> str:
        return self.value


class LandingOutcome(Enum):
    """What the turn controller must do after a player lands on a space."""

    ALREADY_OWNED = "already_owned"
    PURCHASED = "purchased"
    RENT_DUE = "rent_due"
    AUCTION = "auction"


class LandingBehavior(Protocol):
    """Behaviour shared by every kind of space a player can land on."""

    name: str

    def land_on(self, player: Optional[PlayerView] = None) -> str:
        ...

    def execute_strategy(self, player: PlayerView) -> LandingOutcome:
        ...


def _validate_multipliers(rent_multipliers: Sequence[int]) -> Tuple[int, int]:
    multipliers = tuple(rent_multipliers)
    if len(multipliers) != 2:
        raise ValidationError(f"Utility needs exactly two rent multipliers, got {multipliers}")
    for multiplier in multipliers:
        if isinstance(multiplier, bool) or not isinstance(multiplier, int) or multiplier <= 0:
            raise ValidationError(f"Rent multipliers must be positive integers, got {multipliers}")
    return multipliers


class UtilitySpace:
    """
    A utility space (Electric Company or Water Works).

    Rent is the dice total times a multiplier that depends on how many
    utilities the owner holds. Messages for the players are routed through
    an injected announcer; dice are injected per rent computation.
    """

    def __init__(
        self,
        actions: str,
        price: int,
        rent_multipliers: Sequence[int],
        color_group: ColorGroup,
        mortgage_value: int,
        *,
        name: str = "Electric Company",
        announcer: Optional[Announcer] = None,
    ):
        if price < 0:
            raise ValidationError(f"Price cannot be negative: {price}")
        if mortgage_value < 0:
            raise ValidationError(f"Mortgage value cannot be negative: {mortgage_value}")
        if not isinstance(color_group, ColorGroup):
            raise ValidationError(f"Unknown color group: {color_group!r}")

        self.name = name
        self.actions = actions
        self.price = price
        self.rent_multipliers = _validate_multipliers(rent_multipliers)
        self.color_group = color_group
        self.mortgage_value = mortgage_value
        # Mortgage value plus 10% interest, truncated
        self.unmortgage_value = mortgage_value + mortgage_value // 10
        self.announcer: Announcer = announcer or LoggingAnnouncer()

        self._owner: Optional[str] = None
        self._is_mortgaged = False

    @property
    def owner(self) -> Optional[str]:
        return self._owner

    @property
    def is_mortgaged(self) -> bool:
        return self._is_mortgaged

    def is_owned(self) -> bool:
        """Check if the space is owned by any player."""
        return self._owner is not None

    def set_owner(self, owner_id: str) -> None:
        """Assign ownership to a player."""
        if not isinstance(owner_id, str):
            raise TypeError(f"Owner id must be a string, got {type(owner_id).__name__}")
        if self._owner != owner_id:
            logger.debug(f"{self.name} owner: {self._owner} -> {owner_id}")
        self._owner = owner_id

    def set_mortgaged(self, is_mortgaged: bool) -> None:
        """
        Set the mortgaged flag.

        Money changes hands elsewhere; this only records the state.
        """
        if is_mortgaged and self._owner is None:
            raise NoOwner(f"Cannot mortgage {self.name}: it has no owner")
        self._is_mortgaged = bool(is_mortgaged)

    def release(self) -> None:
        """Return the space to the bank, clearing owner and mortgage."""
        logger.debug(f"{self.name} released by {self._owner}")
        self._owner = None
        self._is_mortgaged = False

    def _owned_by(self, player: PlayerView) -> bool:
        # Either the deed or the recorded owner counts as ownership
        return player.has_property(self.name) or self._owner == player.name

    def multiplier_for(self, utilities_owned_by_owner: int) -> int:
        """Rent multiplier for an owner holding the given number of utilities."""
        if utilities_owned_by_owner < 0:
            raise InvalidUtilityCount(
                f"Utilities owned cannot be negative: {utilities_owned_by_owner}"
            )
        if utilities_owned_by_owner == 0:
            raise NoOwner(f"{self.name} is owned, so its owner holds at least one utility")
        if utilities_owned_by_owner == 1:
            return self.rent_multipliers[0]
        return self.rent_multipliers[1]

    def land_on(
        self,
        player: Optional[PlayerView] = None,
        utilities_owned_by_owner: Optional[int] = None,
    ) -> str:
        """
        Build the text shown to a player who lands here.

        Does not change any state, so repeated calls return the same text.
        The current rent line is only added for an owned space and a count of
        at least one.
        """
        text = self.actions + self._info()
        if player is not None and self._owned_by(player):
            text += "\nYou own this property."
        if self.is_owned() and (utilities_owned_by_owner or 0) >= 1:
            if self._is_mortgaged:
                text += "\nCurrent Rent: none, the property is mortgaged."
            else:
                multiplier = self.multiplier_for(utilities_owned_by_owner)
                text += f"\nCurrent Rent: {multiplier} times the amount rolled on the dice."
        return text

    def _info(self) -> str:
        single, double = self.rent_multipliers
        return (
            f"Property Name: {self.name}\n"
            f"Color Set: {self.color_group}\n"
            f"Purchase Price: ${self.price}\n"
            "Rent (without houses/hotels): Depends on dice roll\n"
            f"If you own 1 Utility: Rent is {single} times the amount rolled on the dice.\n"
            f"If you own 2 Utilities: Rent is {double} times the amount rolled on the dice.\n"
            f"Mortgage Value: ${self.mortgage_value}"
        )

    def rent_due(self, utilities_owned_by_owner: int, dice: DiceSource) -> int:
        """
        Calculate rent for this space.

        Args:
            utilities_owned_by_owner: Utilities held by the owner, this one included
            dice: Source of the roll the rent is based on

        Returns:
            Rent amount, 0 while mortgaged

        Raises:
            NoOwner: if the space is unowned, or unmortgaged with a count of zero
            InvalidUtilityCount: if the count is negative
        """
        if self._owner is None:
            raise NoOwner(f"Cannot charge rent on {self.name}: it has no owner")
        if utilities_owned_by_owner < 0:
            raise InvalidUtilityCount(
                f"Utilities owned cannot be negative: {utilities_owned_by_owner}"
            )
        if self._is_mortgaged:
            return 0

        multiplier = self.multiplier_for(utilities_owned_by_owner)
        die1, die2 = dice.roll()
        rent = (die1 + die2) * multiplier
        logger.debug(
            f"{self.name} rent: ({die1} + {die2}) x {multiplier} = {rent} "
            f"(owner holds {utilities_owned_by_owner})"
        )
        return rent

    def execute_strategy(self, player: PlayerView) -> LandingOutcome:
        """
        Run the landing behaviour for a player.

        Rent collection and auctions are left to the turn controller.

        Raises:
            PurchaseFailed: if the player cannot afford the unowned space.
        """
        if self._owned_by(player):
            self.announcer.say(f"You already own the {self.name}!")
            return LandingOutcome.ALREADY_OWNED

        if self._owner is not None:
            self.announcer.say(f"{self._owner} already owns the {self.name}!")
            return LandingOutcome.RENT_DUE

        self.announcer.say(f"You can buy the {self.name} for ${self.price}")
        self.announcer.say("Or property can be auctioned")
        try:
            player.purchase_property(self.name, self.price)
        except InsufficientFunds as e:
            raise PurchaseFailed(self.name, self.price) from e

        self.set_owner(player.name)
        self.announcer.say(f"{player.name} bought the {self.name}")
        return LandingOutcome.PURCHASED

    def __repr__(self) -> str:
        return (
            f"UtilitySpace(name='{self.name}', owner={self._owner!r}, "
            f"mortgaged={self._is_mortgaged})"
        )
