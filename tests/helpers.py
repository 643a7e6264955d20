"""Card-building helpers shared by the test modules."""

from blackjack.cards import Card
from blackjack.hand import Hand

POBI = "pobi"
BETS = [1_000, 50_000, 12_345_678, 100_000_000]


def cards(*codes: str) -> list[Card]:
    """Build cards from short codes like 'AS', '10H', 'KD'."""
    return [Card.from_string(code) for code in codes]


def hand_of(*codes: str) -> Hand:
    return Hand.of(cards(*codes))


def deal(participant, *codes: str):
    """Give ``participant`` the cards named by ``codes`` and return it."""
    for card in cards(*codes):
        participant.draw(card)
    return participant


class StackedDeck:
    """Card source that deals a fixed sequence, first card first."""

    def __init__(self, codes: list[str]) -> None:
        self._cards = cards(*codes)

    def draw(self) -> Card:
        if not self._cards:
            raise IndexError("Cannot draw from empty deck")
        return self._cards.pop(0)

    def __len__(self) -> int:
        return len(self._cards)
