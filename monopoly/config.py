"""
Game configuration settings.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from monopoly.settings import MonopolySettings


@dataclass
class GameConfig:
    """Configuration for a Monopoly game."""

    starting_cash: int = 1500

    utility_rent_multipliers: Tuple[int, int] = (4, 10)

    seed: Optional[int] = None

    @classmethod
    def from_settings(cls, settings: "MonopolySettings") -> "GameConfig":
        """Build a config from environment-driven settings."""
        return cls(starting_cash=settings.starting_cash, seed=settings.dice_seed)


@dataclass
class UtilityData:
    """Data for a utility space."""

    name: str
    price: int = 150
    mortgage_value: int = 0
    actions: str = ""

    def __post_init__(self) -> None:
        if self.mortgage_value == 0:
            self.mortgage_value = self.price // 2
        if not self.actions:
            self.actions = f"You landed on {self.name}.\n"


ELECTRIC_COMPANY = UtilityData("Electric Company")
WATER_WORKS = UtilityData("Water Works")

STANDARD_UTILITIES = (ELECTRIC_COMPANY, WATER_WORKS)
