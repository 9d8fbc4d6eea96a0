"""
Announcers route human-readable landing messages away from game logic.
"""

import logging
from typing import List, Protocol

logger = logging.getLogger(__name__)


class Announcer(Protocol):
    """Receives messages meant for the players."""

    def say(self, message: str) -> None:
        ...


class LoggingAnnouncer:
    """Default announcer: every message becomes an INFO log record."""

    def say(self, message: str) -> None:
        logger.info(message)


class BufferAnnouncer:
    """Collects messages in memory so they can be inspected later."""

    def __init__(self):
        self.messages: List[str] = []

    def say(self, message: str) -> None:
        self.messages.append(message)

    @property
    def text(self) -> str:
        """All messages joined by newlines."""
        return "\n".join(self.messages)

    def __contains__(self, fragment: str) -> bool:
        return fragment in self.text

    def clear(self) -> None:
        self.messages.clear()
