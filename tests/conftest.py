"""Pytest fixtures for blackjack tests."""

from random import Random

import pytest

from blackjack.cards import Deck
from blackjack.hand import Hand
from blackjack.participants import Dealer, Player
from blackjack.rules import RuleSet
from helpers import POBI, hand_of


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def rules():
    """Default ruleset."""
    return RuleSet()


@pytest.fixture
def empty_hand():
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return hand_of("AS", "KH")


@pytest.fixture
def dealer(rules):
    return Dealer(rules)


@pytest.fixture
def pobi():
    """A name-only player."""
    return Player(POBI)
