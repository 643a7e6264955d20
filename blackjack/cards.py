"""Card and Deck classes - immutable card representations."""

from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterator


class Suit(Enum):
    """Card suits."""

    CLUBS = "♣"
    DIAMONDS = "♦"
    HEARTS = "♥"
    SPADES = "♠"

    def __str__(self) -> str:
        return self.value


class Rank(Enum):
    """Card ranks, ordered ace to king."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        return _RANK_LABELS.get(self, str(self.value))

    @property
    def blackjack_value(self) -> int:
        """Return the base point value (Ace = 11, face cards = 10)."""
        if self is Rank.ACE:
            return 11
        return min(self.value, 10)

    @property
    def is_ace(self) -> bool:
        return self is Rank.ACE


_RANK_LABELS = {
    Rank.ACE: "A",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

_RANK_PARSE = {label: rank for rank, label in _RANK_LABELS.items()}
_RANK_PARSE.update({str(rank.value): rank for rank in Rank if rank.value <= 10})
_RANK_PARSE.update({"1": Rank.ACE, "T": Rank.TEN})

_SUIT_PARSE = {suit.name[0]: suit for suit in Suit}
_SUIT_PARSE.update({suit.value: suit for suit in Suit})


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    suit: Suit
    rank: Rank

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.suit.name}, {self.rank.name})"

    @property
    def value(self) -> int:
        """
        Return the card's contribution to a hand.

        An ace always reports 11 here; demotion to 1 happens at hand level.
        """
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like 'A♠', 'KH' or '10d'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str, suit_str = s[:-1], s[-1]
        if rank_str not in _RANK_PARSE:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in _SUIT_PARSE:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(_SUIT_PARSE[suit_str], _RANK_PARSE[rank_str])


class Deck:
    """A standard 52-card deck."""

    def __init__(self, rng: Random | None = None) -> None:
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Reset deck to all 52 cards in order."""
        self._cards = [Card(suit, rank) for suit in Suit for rank in Rank]

    def shuffle(self) -> None:
        self._rng.shuffle(self._cards)

    def draw(self) -> Card:
        """Draw a card from the top of the deck."""
        if not self._cards:
            raise IndexError("Cannot draw from empty deck")
        return self._cards.pop()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    @property
    def cards_remaining(self) -> int:
        return len(self._cards)
