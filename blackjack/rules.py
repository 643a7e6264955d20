"""Table rules that shape betting, payouts and dealer play."""

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from config import GameConfig


@dataclass(frozen=True)
class RuleSet:
    """
    Blackjack table rules configuration.

    Betting limits are inclusive on both ends.
    """

    # Betting limits
    min_bet: int = 1_000
    max_bet: int = 100_000_000

    # Blackjack payout (3:2 = 1.5, 6:5 = 1.2)
    blackjack_payout: float = 1.5

    # Dealer keeps drawing while its score is at or below this
    dealer_draw_threshold: int = 16

    initial_cards: int = 2

    # Seats at the table; keeps a round within one 52-card deck
    max_players: int = 7

    def __post_init__(self) -> None:
        """Validate rule combinations."""
        if self.min_bet < 1:
            raise ValueError("min_bet must be at least 1")
        if self.min_bet > self.max_bet:
            raise ValueError("min_bet cannot exceed max_bet")
        if self.blackjack_payout < 1.0:
            raise ValueError("blackjack_payout must be at least 1.0")
        if not 1 <= self.dealer_draw_threshold <= 21:
            raise ValueError("dealer_draw_threshold must be between 1 and 21")
        if self.initial_cards < 1:
            raise ValueError("initial_cards must be at least 1")
        if self.max_players < 1:
            raise ValueError("max_players must be at least 1")

    @property
    def payout_multiplier(self) -> Decimal:
        return Decimal(str(self.blackjack_payout))

    @classmethod
    def from_config(cls, game: "GameConfig") -> "RuleSet":
        """Build rules from the application's game configuration."""
        return cls(
            min_bet=game.min_bet,
            max_bet=game.max_bet,
            blackjack_payout=game.blackjack_payout,
            dealer_draw_threshold=game.dealer_draw_threshold,
            initial_cards=game.initial_cards,
            max_players=game.max_players,
        )
