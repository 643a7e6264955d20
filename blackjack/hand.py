"""Hand scoring for blackjack."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from blackjack.cards import Card

BLACKJACK_SCORE = 21
BLACKJACK_CARD_COUNT = 2
ACE_DEMOTION = 10


@dataclass
class Hand:
    """The cards held by one participant, with derived score and status."""

    cards: list[Card] = field(default_factory=list)

    @classmethod
    def of(cls, cards: Iterable[Card]) -> "Hand":
        """Build a hand already holding ``cards``."""
        return cls(list(cards))

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    @property
    def score(self) -> int:
        """
        Calculate the hand score.

        Every ace starts at 11. While the total is over 21 and an ace is
        still counted high, one ace is demoted to 1. The result is the
        highest total that doesn't bust, or the lowest bust total.
        """
        total = 0
        aces = 0

        for card in self.cards:
            if card.is_ace:
                aces += 1
            total += card.value

        while total > BLACKJACK_SCORE and aces > 0:
            total -= ACE_DEMOTION
            aces -= 1

        return total

    @property
    def is_bust(self) -> bool:
        return self.score > BLACKJACK_SCORE

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural blackjack (21 with 2 cards)."""
        return len(self.cards) == BLACKJACK_CARD_COUNT and self.score == BLACKJACK_SCORE

    @property
    def can_draw_more(self) -> bool:
        """Report whether another card may be drawn (score not over 21)."""
        return self.score <= BLACKJACK_SCORE

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        if self.is_blackjack:
            return f"{cards_str} (BLACKJACK)"
        if self.is_bust:
            return f"{cards_str} (BUST {self.score})"
        return f"{cards_str} ({self.score})"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, score={self.score})"
