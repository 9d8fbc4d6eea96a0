"""
Turn-controller helpers built on top of the utility spaces.

The spaces only announce and record ownership; this module moves the
money: rent between players, mortgages with the bank, and the event log.
"""

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from monopoly.announcer import Announcer
from monopoly.config import STANDARD_UTILITIES, GameConfig
from monopoly.dice import DiceSource
from monopoly.exceptions import InvalidActionError, PurchaseFailed
from monopoly.money import EventLog, EventType
from monopoly.player import PlayerState
from monopoly.spaces import ColorGroup, LandingOutcome, UtilitySpace

logger = logging.getLogger(__name__)


def create_utilities(
    config: Optional[GameConfig] = None, announcer: Optional[Announcer] = None
) -> List[UtilitySpace]:
    """Create Electric Company and Water Works with standard values."""
    config = config or GameConfig()
    return [
        UtilitySpace(
            data.actions,
            data.price,
            config.utility_rent_multipliers,
            ColorGroup.UTILITY,
            data.mortgage_value,
            name=data.name,
            announcer=announcer,
        )
        for data in STANDARD_UTILITIES
    ]


def create_players(
    names: Sequence[str], config: Optional[GameConfig] = None
) -> Dict[str, PlayerState]:
    """Create players keyed by name, each holding the configured starting cash."""
    config = config or GameConfig()
    return {name: PlayerState(name, config.starting_cash) for name in names}


def count_utilities_owned(utilities: Sequence[UtilitySpace], owner_id: str) -> int:
    """Count the utilities held by a player."""
    return sum(1 for utility in utilities if utility.owner == owner_id)


def pay_rent(
    payer: PlayerState, owner: PlayerState, amount: int, event_log: Optional[EventLog] = None
) -> None:
    """
    Transfer rent from payer to owner.

    Paying yourself moves no money.

    Raises:
        InsufficientFunds: if the payer cannot cover the rent.
    """
    if payer.name == owner.name:
        return

    payer.pay(amount)
    owner.receive(amount)
    logger.info(f"{payer.name} paid ${amount} rent to {owner.name}")

    if event_log is not None:
        event_log.log(
            EventType.RENT_PAYMENT,
            player=payer.name,
            owner=owner.name,
            amount=amount,
            new_balance=payer.cash,
        )


def resolve_landing(
    tile: UtilitySpace,
    player: PlayerState,
    players: Mapping[str, PlayerState],
    utilities: Sequence[UtilitySpace],
    dice: DiceSource,
    event_log: EventLog,
) -> Tuple[LandingOutcome, int]:
    """
    Resolve a player landing on a utility.

    Args:
        tile: The utility landed on
        player: The player who landed
        players: All players by name, used to find the owner
        utilities: Every utility on the board, used to count the owner's set
        dice: Source of the rent roll
        event_log: Log receiving the landing events

    Returns:
        The landing outcome and the rent paid (0 unless rent was due).
        ``LandingOutcome.AUCTION`` means the purchase failed and the
        caller should auction the space.
    """
    event_log.log(EventType.LAND, player=player.name, property=tile.name, owner=tile.owner)

    try:
        outcome = tile.execute_strategy(player)
    except PurchaseFailed as e:
        logger.info(f"{player.name} could not buy {tile.name}: {e.__cause__}")
        event_log.log(
            EventType.PURCHASE_DECLINED,
            player=player.name,
            property=tile.name,
            price=tile.price,
            cash=player.cash,
        )
        return LandingOutcome.AUCTION, 0

    if outcome == LandingOutcome.PURCHASED:
        event_log.log(
            EventType.PURCHASE,
            player=player.name,
            property=tile.name,
            price=tile.price,
            new_balance=player.cash,
        )
        return outcome, 0

    if outcome == LandingOutcome.ALREADY_OWNED:
        return outcome, 0

    owner = players[tile.owner]
    if owner.name == player.name:
        return outcome, 0

    rent = tile.rent_due(count_utilities_owned(utilities, owner.name), dice)
    if rent > 0:
        pay_rent(player, owner, rent, event_log)
    return outcome, rent


def _require_owner(tile: UtilitySpace, player: PlayerState) -> None:
    if tile.owner != player.name or not player.has_property(tile.name):
        raise InvalidActionError(f"{player.name} does not own {tile.name}")


def mortgage_utility(
    tile: UtilitySpace, player: PlayerState, event_log: Optional[EventLog] = None
) -> int:
    """
    Mortgage a utility to raise funds.

    Returns:
        The mortgage value paid to the player.
    """
    _require_owner(tile, player)
    if tile.is_mortgaged:
        raise InvalidActionError(f"{tile.name} is already mortgaged")

    tile.set_mortgaged(True)
    player.receive(tile.mortgage_value)
    logger.info(f"{player.name} mortgaged {tile.name} for ${tile.mortgage_value}")

    if event_log is not None:
        event_log.log(
            EventType.MORTGAGE,
            player=player.name,
            property=tile.name,
            value=tile.mortgage_value,
            new_balance=player.cash,
        )
    return tile.mortgage_value


def unmortgage_utility(
    tile: UtilitySpace, player: PlayerState, event_log: Optional[EventLog] = None
) -> int:
    """
    Lift the mortgage on a utility by paying mortgage value plus interest.

    Returns:
        The amount the player paid.

    Raises:
        InsufficientFunds: if the player cannot cover the cost; the
            mortgage then stays in place.
    """
    _require_owner(tile, player)
    if not tile.is_mortgaged:
        raise InvalidActionError(f"{tile.name} is not mortgaged")

    player.pay(tile.unmortgage_value)
    tile.set_mortgaged(False)
    logger.info(f"{player.name} unmortgaged {tile.name} for ${tile.unmortgage_value}")

    if event_log is not None:
        event_log.log(
            EventType.UNMORTGAGE,
            player=player.name,
            property=tile.name,
            cost=tile.unmortgage_value,
            new_balance=player.cash,
        )
    return tile.unmortgage_value
