"""Shared test fixtures for utility tile tests."""

import pytest
from monopoly.announcer import BufferAnnouncer
from monopoly.exceptions import InsufficientFunds
from monopoly.money import EventLog
from monopoly.player import PlayerState
from monopoly.spaces import ColorGroup, UtilitySpace


class RecordingPlayer:
    """PlayerView stub that records purchase attempts."""

    def __init__(self, name, owned=(), can_afford=True):
        self.name = name
        self.owned = set(owned)
        self.can_afford = can_afford
        self.purchases = []

    def has_property(self, property_name):
        return property_name in self.owned

    def purchase_property(self, property_name, price):
        self.purchases.append((property_name, price))
        if not self.can_afford:
            raise InsufficientFunds(self.name, price, 0)
        self.owned.add(property_name)


@pytest.fixture
def make_player():
    """Factory for PlayerView stubs."""
    return RecordingPlayer


@pytest.fixture
def announcer():
    """Announcer that captures messages."""
    return BufferAnnouncer()


@pytest.fixture
def electric_company(announcer):
    """Electric Company with standard values: price 150, x4/x10, mortgage 75."""
    return UtilitySpace(
        "You landed on Electric Company.\n",
        150,
        [4, 10],
        ColorGroup.UTILITY,
        75,
        announcer=announcer,
    )


@pytest.fixture
def alice():
    return PlayerState("Alice", 1500)


@pytest.fixture
def bob():
    return PlayerState("Bob", 1500)


@pytest.fixture
def event_log():
    return EventLog()
