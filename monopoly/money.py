"""
Event logging for money-moving outcomes of a landing.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Types of game events."""

    LAND = "land"
    PURCHASE = "purchase"
    PURCHASE_DECLINED = "purchase_declined"
    RENT_PAYMENT = "rent_payment"
    MORTGAGE = "mortgage"
    UNMORTGAGE = "unmortgage"


@dataclass
class GameEvent:
    """A logged event in the game."""

    event_type: EventType
    player: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        player_str = self.player if self.player is not None else "System"
        return f"[{player_str}] {self.event_type.value}: {self.details}"


class EventLog:
    """Manages the game event log."""

    def __init__(self):
        self.events: List[GameEvent] = []

    def log(self, event_type: EventType, player: Optional[str] = None, **details: Any) -> None:
        """Log a game event."""
        event = GameEvent(event_type, player, details)
        self.events.append(event)
        logger.debug(repr(event))

    def get_events(self) -> List[GameEvent]:
        """Get all logged events."""
        return self.events.copy()

    def of_type(self, event_type: EventType) -> List[GameEvent]:
        return [event for event in self.events if event.event_type == event_type]

    def clear(self) -> None:
        """Clear the event log."""
        self.events.clear()
