"""Pydantic views of a finished round, used for display and export."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from blackjack.cards import Card
from blackjack.hand import Hand
from blackjack.participants import Player
from blackjack.result import Outcome


class CardView(BaseModel):
    """Card representation."""

    model_config = ConfigDict(frozen=True)

    suit: str
    rank: str
    value: int
    label: str

    @classmethod
    def from_card(cls, card: Card) -> "CardView":
        return cls(
            suit=card.suit.name,
            rank=card.rank.name,
            value=card.value,
            label=str(card),
        )


class HandView(BaseModel):
    """Hand representation."""

    model_config = ConfigDict(frozen=True)

    cards: list[CardView]
    score: int
    is_blackjack: bool
    is_bust: bool

    @classmethod
    def from_hand(cls, hand: Hand) -> "HandView":
        return cls(
            cards=[CardView.from_card(card) for card in hand.cards],
            score=hand.score,
            is_blackjack=hand.is_blackjack,
            is_bust=hand.is_bust,
        )

    @property
    def labels(self) -> str:
        return ", ".join(card.label for card in self.cards)


class PlayerResultView(BaseModel):
    """One player's settled round."""

    model_config = ConfigDict(frozen=True)

    name: str
    bet: int | None
    hand: HandView
    result: Literal["win", "loss", "draw"]
    profit: int

    @classmethod
    def from_outcome(cls, player: Player, outcome: Outcome) -> "PlayerResultView":
        return cls(
            name=player.name.value,
            bet=None if player.bet is None else player.bet.amount,
            hand=HandView.from_hand(player.hand),
            result=outcome.result.value,
            profit=outcome.profit,
        )


class RoundReport(BaseModel):
    """Everything the table needs to announce at round end."""

    model_config = ConfigDict(frozen=True)

    dealer: HandView
    players: list[PlayerResultView]
    dealer_profit: int

    def profits(self) -> dict[str, int]:
        """Profit per participant, dealer first."""
        table = {"Dealer": self.dealer_profit}
        table.update({player.name: player.profit for player in self.players})
        return table
