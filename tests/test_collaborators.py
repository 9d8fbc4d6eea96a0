"""
Tests for dice, players, announcers and settings.
"""

import logging

import pytest
from monopoly.announcer import BufferAnnouncer
from monopoly.config import GameConfig, UtilityData
from monopoly.dice import Dice, FixedDice
from monopoly.exceptions import InsufficientFunds, ValidationError
from monopoly.player import PlayerState
from monopoly.settings import MonopolySettings, configure_logging


class TestDice:
    def test_rolls_in_range(self):
        dice = Dice(seed=42)
        for _ in range(200):
            die1, die2 = dice.roll()
            assert 1 <= die1 <= 6
            assert 1 <= die2 <= 6

    def test_seed_is_reproducible(self):
        first = Dice(seed=7)
        second = Dice(seed=7)
        assert [first.roll() for _ in range(20)] == [second.roll() for _ in range(20)]

    def test_every_face_appears(self):
        dice = Dice(seed=1)
        faces = set()
        for _ in range(500):
            faces.update(dice.roll())
        assert faces == {1, 2, 3, 4, 5, 6}

    def test_fixed_dice_cycles(self):
        dice = FixedDice((1, 2), (3, 4))
        assert [dice.roll() for _ in range(3)] == [(1, 2), (3, 4), (1, 2)]
        assert dice.calls == 3

    @pytest.mark.parametrize("rolls", [(), ((0, 3),), ((3, 7),)])
    def test_fixed_dice_validation(self, rolls):
        with pytest.raises(ValidationError):
            FixedDice(*rolls)


class TestPlayerState:
    def test_purchase(self, alice):
        alice.purchase_property("Electric Company", 150)
        assert alice.cash == 1350
        assert alice.has_property("Electric Company")

    def test_purchase_without_funds(self):
        player = PlayerState("Carol", 100)
        with pytest.raises(InsufficientFunds) as excinfo:
            player.purchase_property("Electric Company", 150)
        assert excinfo.value.required == 150
        assert excinfo.value.available == 100
        assert player.cash == 100
        assert not player.has_property("Electric Company")

    def test_negative_amounts_rejected(self, alice):
        with pytest.raises(ValidationError):
            alice.pay(-1)
        with pytest.raises(ValidationError):
            alice.receive(-1)

    def test_negative_starting_cash(self):
        with pytest.raises(ValidationError):
            PlayerState("Carol", -5)

    def test_release_property(self, alice):
        alice.purchase_property("Water Works", 150)
        alice.release_property("Water Works")
        assert not alice.has_property("Water Works")


class TestBufferAnnouncer:
    def test_collects_messages(self):
        announcer = BufferAnnouncer()
        announcer.say("first")
        announcer.say("second")
        assert announcer.messages == ["first", "second"]
        assert announcer.text == "first\nsecond"
        assert "sec" in announcer
        announcer.clear()
        assert announcer.messages == []


class TestConfig:
    def test_utility_data_defaults_mortgage_to_half_price(self):
        data = UtilityData("Water Works")
        assert data.mortgage_value == 75
        assert "Water Works" in data.actions

    def test_from_settings(self):
        settings = MonopolySettings(starting_cash=2000, dice_seed=3)
        config = GameConfig.from_settings(settings)
        assert config.starting_cash == 2000
        assert config.seed == 3


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("MONOPOLY_LOG_LEVEL", raising=False)
        monkeypatch.delenv("MONOPOLY_DICE_SEED", raising=False)
        monkeypatch.delenv("MONOPOLY_STARTING_CASH", raising=False)
        settings = MonopolySettings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.dice_seed is None
        assert settings.starting_cash == 1500

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("MONOPOLY_LOG_LEVEL", "debug")
        monkeypatch.setenv("MONOPOLY_DICE_SEED", "99")
        settings = MonopolySettings(_env_file=None)
        assert settings.log_level == "DEBUG"
        assert settings.dice_seed == 99

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValueError):
            MonopolySettings(_env_file=None, log_level="chatty")

    def test_configure_logging(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
        configure_logging(MonopolySettings(_env_file=None, log_level="warning"))
        assert calls["level"] == "WARNING"
