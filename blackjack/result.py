"""Round outcome resolution and payout calculation."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Iterable

from blackjack.hand import Hand

if TYPE_CHECKING:
    from blackjack.participants import Dealer, Player

DEFAULT_BLACKJACK_PAYOUT = Decimal("1.5")


class ResultType(Enum):
    """Round result from the player's side of the table."""

    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Outcome:
    """A settled result for one player."""

    result: ResultType
    profit: int
    blackjack: bool = False


def resolve(player_hand: Hand, dealer_hand: Hand) -> ResultType:
    """
    Compare a finished player hand against the finished dealer hand.

    Rules are checked in order: player bust, dealer bust, blackjacks,
    then plain score.
    """
    # Player bust loses even against a bust dealer
    if player_hand.is_bust:
        return ResultType.LOSS
    if dealer_hand.is_bust:
        return ResultType.WIN

    player_bj = player_hand.is_blackjack
    dealer_bj = dealer_hand.is_blackjack

    if player_bj and dealer_bj:
        return ResultType.DRAW
    if player_bj:
        return ResultType.WIN
    if dealer_bj:
        return ResultType.LOSS

    if player_hand.score > dealer_hand.score:
        return ResultType.WIN
    if player_hand.score < dealer_hand.score:
        return ResultType.LOSS
    return ResultType.DRAW


def profit(
    result: ResultType,
    player_blackjack: bool,
    bet: int,
    multiplier: Decimal = DEFAULT_BLACKJACK_PAYOUT,
) -> int:
    """
    Signed amount the player gains (or loses) on ``bet``.

    A winning blackjack pays ``bet * multiplier`` truncated toward zero,
    any other win pays even money.
    """
    if result is ResultType.WIN:
        if player_blackjack:
            return int(Decimal(bet) * multiplier)
        return bet
    if result is ResultType.LOSS:
        return -bet
    return 0


def settle(player: "Player", dealer: "Dealer") -> Outcome:
    """Resolve a player against the dealer and price the result."""
    result = resolve(player.hand, dealer.hand)
    blackjack = player.is_blackjack
    amount = profit(result, blackjack, player.stake, player.rules.payout_multiplier)
    return Outcome(result=result, profit=amount, blackjack=blackjack)


def dealer_profit(outcomes: Iterable[Outcome]) -> int:
    """The dealer takes whatever the players lose, and pays what they win."""
    return -sum(outcome.profit for outcome in outcomes)
