"""The continue/stop answer a player gives between draws."""

from enum import Enum

from blackjack.errors import InvalidArgumentError, MissingValueError


class DrawDecision(Enum):
    """Whether a player wants another card."""

    CONTINUE = "y"
    STOP = "n"

    @classmethod
    def parse(cls, text: str | None) -> "DrawDecision":
        """
        Parse a one-letter answer.

        ``y`` continues and ``n`` stops; case and surrounding whitespace are
        ignored. Anything else is rejected rather than read as a stop, so a
        mistyped answer never ends a turn by accident.
        """
        if text is None:
            raise MissingValueError("Draw decision must not be None")
        try:
            return cls(text.strip().lower())
        except ValueError:
            raise InvalidArgumentError(
                f"Draw decision must be 'y' or 'n', got {text!r}"
            ) from None

    @property
    def is_continue(self) -> bool:
        return self is DrawDecision.CONTINUE

    @property
    def is_stop(self) -> bool:
        return self is DrawDecision.STOP
