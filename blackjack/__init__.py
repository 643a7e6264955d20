"""Blackjack round scoring and settlement - UI-agnostic."""

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.decision import DrawDecision
from blackjack.errors import BlackjackError, InvalidArgumentError, MissingValueError
from blackjack.hand import Hand
from blackjack.participants import Bet, Dealer, Name, Participant, Player, Players
from blackjack.result import Outcome, ResultType, dealer_profit, profit, resolve, settle
from blackjack.rules import RuleSet

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "DrawDecision",
    "BlackjackError",
    "InvalidArgumentError",
    "MissingValueError",
    "Hand",
    "Bet",
    "Dealer",
    "Name",
    "Participant",
    "Player",
    "Players",
    "Outcome",
    "ResultType",
    "dealer_profit",
    "profit",
    "resolve",
    "settle",
    "RuleSet",
]
