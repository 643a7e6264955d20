"""Exceptions raised while building game participants."""


class BlackjackError(Exception):
    """Base class for all blackjack errors."""


class InvalidArgumentError(BlackjackError, ValueError):
    """A value was supplied but falls outside what the game accepts."""


class MissingValueError(BlackjackError, TypeError):
    """A required value was not supplied at all."""
