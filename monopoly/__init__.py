"""
Monopoly Utility Tiles

Deterministic utility spaces (Electric Company, Water Works) with
injectable dice, players and announcers.
"""

from .announcer import Announcer, BufferAnnouncer, LoggingAnnouncer
from .config import GameConfig, UtilityData
from .dice import Dice, DiceSource, FixedDice
from .exceptions import (
    InsufficientFunds,
    InvalidActionError,
    InvalidUtilityCount,
    MonopolyError,
    NoOwner,
    PurchaseFailed,
    ValidationError,
)
from .money import EventLog, EventType
from .player import PlayerState, PlayerView
from .rules import (
    count_utilities_owned,
    create_players,
    create_utilities,
    mortgage_utility,
    pay_rent,
    resolve_landing,
    unmortgage_utility,
)
from .spaces import ColorGroup, LandingBehavior, LandingOutcome, UtilitySpace

__all__ = [
    "Announcer",
    "BufferAnnouncer",
    "LoggingAnnouncer",
    "GameConfig",
    "UtilityData",
    "Dice",
    "DiceSource",
    "FixedDice",
    "InsufficientFunds",
    "InvalidActionError",
    "InvalidUtilityCount",
    "MonopolyError",
    "NoOwner",
    "PurchaseFailed",
    "ValidationError",
    "EventLog",
    "EventType",
    "PlayerState",
    "PlayerView",
    "count_utilities_owned",
    "create_players",
    "create_utilities",
    "mortgage_utility",
    "pay_rent",
    "resolve_landing",
    "unmortgage_utility",
    "ColorGroup",
    "LandingBehavior",
    "LandingOutcome",
    "UtilitySpace",
]
