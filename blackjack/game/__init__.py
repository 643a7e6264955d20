"""Single-round engine and its events."""

from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.state import GameState
from blackjack.game.engine import BlackjackRound, CardSource

__all__ = [
    "EventEmitter",
    "EventType",
    "GameEvent",
    "GameState",
    "BlackjackRound",
    "CardSource",
]
