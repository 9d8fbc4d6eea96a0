"""
Dice sources for rent and movement rolls.
"""

import logging
import random
from itertools import cycle
from typing import TYPE_CHECKING, Optional, Protocol, Tuple

from monopoly.exceptions import ValidationError

if TYPE_CHECKING:
    from monopoly.config import GameConfig

logger = logging.getLogger(__name__)

DiceRoll = Tuple[int, int]


class DiceSource(Protocol):
    """Anything that can produce a pair of independent dice."""

    def roll(self) -> DiceRoll:
        ...


class Dice:
    """Two fair six-sided dice backed by a seedable RNG."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    @classmethod
    def from_config(cls, config: "GameConfig") -> "Dice":
        """Dice seeded from the game configuration."""
        return cls(seed=config.seed)

    def roll(self) -> DiceRoll:
        die1 = self.rng.randint(1, 6)
        die2 = self.rng.randint(1, 6)
        logger.debug(f"Rolled {die1} + {die2} = {die1 + die2}")
        return (die1, die2)


class FixedDice:
    """
    Deterministic dice that replay a fixed sequence of rolls.

    Rolls are reused from the start once the sequence is exhausted.
    """

    def __init__(self, *rolls: DiceRoll):
        if not rolls:
            raise ValidationError("FixedDice needs at least one roll")
        for die1, die2 in rolls:
            if not (1 <= die1 <= 6 and 1 <= die2 <= 6):
                raise ValidationError(f"Invalid dice faces: ({die1}, {die2})")
        self.rolls = list(rolls)
        self.calls = 0
        self._sequence = cycle(self.rolls)

    def roll(self) -> DiceRoll:
        self.calls += 1
        return next(self._sequence)
