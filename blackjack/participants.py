"""Dealer and player roles wrapped around a shared Hand."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Union

from blackjack.cards import Card
from blackjack.decision import DrawDecision
from blackjack.errors import InvalidArgumentError, MissingValueError
from blackjack.hand import Hand
from blackjack.result import Outcome, ResultType, settle
from blackjack.rules import RuleSet

DEALER_NAME = "Dealer"
NAME_SEPARATOR = ","


@dataclass(frozen=True)
class Name:
    """A participant's display name. Surrounding whitespace is dropped."""

    value: str

    def __post_init__(self) -> None:
        # None is checked before blankness so the error kind stays stable
        if self.value is None:
            raise MissingValueError("Name must not be None")
        if not isinstance(self.value, str):
            raise InvalidArgumentError(f"Name must be a string, got {type(self.value).__name__}")
        stripped = self.value.strip()
        if not stripped:
            raise InvalidArgumentError("Name must not be empty or blank")
        object.__setattr__(self, "value", stripped)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Bet:
    """A player's stake, fixed once the player is created."""

    amount: int
    rules: RuleSet = field(default_factory=RuleSet, compare=False, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise InvalidArgumentError(f"Bet must be a whole number, got {self.amount!r}")
        if self.amount < self.rules.min_bet:
            raise InvalidArgumentError(
                f"Bet must be at least {self.rules.min_bet}, got {self.amount}"
            )
        if self.amount > self.rules.max_bet:
            raise InvalidArgumentError(
                f"Bet must be at most {self.rules.max_bet}, got {self.amount}"
            )


class Dealer:
    """The house. Draws by a fixed policy and never places a bet."""

    def __init__(self, rules: RuleSet | None = None) -> None:
        self.rules = rules or RuleSet()
        self.name = Name(DEALER_NAME)
        self.hand = Hand()

    def draw(self, card: Card) -> None:
        self.hand.add_card(card)

    @property
    def cards(self) -> list[Card]:
        return list(self.hand.cards)

    @property
    def score(self) -> int:
        return self.hand.score

    @property
    def is_bust(self) -> bool:
        return self.hand.is_bust

    @property
    def is_blackjack(self) -> bool:
        return self.hand.is_blackjack

    @property
    def is_can_draw(self) -> bool:
        return self.hand.can_draw_more

    @property
    def should_draw(self) -> bool:
        """The dealer must keep drawing while at or under the threshold."""
        return self.score <= self.rules.dealer_draw_threshold

    def __repr__(self) -> str:
        return f"Dealer({self.hand!r})"


class Player:
    """
    A betting participant.

    Created with a name and optionally a bet. Without a bet the player can
    still be scored and resolved, but every payout is zero.
    """

    def __init__(
        self,
        name: str,
        bet: int | None = None,
        rules: RuleSet | None = None,
    ) -> None:
        self.rules = rules or RuleSet()
        self.name = Name(name)
        self.bet = None if bet is None else Bet(bet, self.rules)
        self.hand = Hand()
        self._decision: DrawDecision | None = None

    @property
    def stake(self) -> int:
        """Amount at risk; zero for a name-only player."""
        return 0 if self.bet is None else self.bet.amount

    def draw(self, card: Card) -> None:
        self.hand.add_card(card)

    @property
    def cards(self) -> list[Card]:
        return list(self.hand.cards)

    @property
    def score(self) -> int:
        return self.hand.score

    @property
    def is_bust(self) -> bool:
        return self.hand.is_bust

    @property
    def is_blackjack(self) -> bool:
        return self.hand.is_blackjack

    @property
    def is_can_draw(self) -> bool:
        return self.hand.can_draw_more

    def is_draw_continue(self, decision: DrawDecision | str) -> bool:
        """Record the player's latest answer and report whether it asks for a card."""
        if not isinstance(decision, DrawDecision):
            decision = DrawDecision.parse(decision)
        self._decision = decision
        return decision.is_continue

    def is_draw_stop(self) -> bool:
        """True once the latest recorded answer was to stop."""
        return self._decision is not None and self._decision.is_stop

    def settle(self, dealer: Dealer) -> Outcome:
        return settle(self, dealer)

    def get_result(self, dealer: Dealer) -> ResultType:
        return self.settle(dealer).result

    def get_profit(self, dealer: Dealer) -> int:
        return self.settle(dealer).profit

    def __repr__(self) -> str:
        return f"Player({self.name.value!r}, bet={self.stake}, {self.hand!r})"


Participant = Union[Dealer, Player]


def parse_names(text: str | None) -> list[Name]:
    """Split comma-separated input into validated names."""
    if text is None:
        raise MissingValueError("Player names must not be None")
    return [Name(part) for part in text.split(NAME_SEPARATOR)]


class Players:
    """The players seated at the table, in turn order."""

    def __init__(self, players: Iterable[Player], rules: RuleSet | None = None) -> None:
        rules = rules or RuleSet()
        self._players = list(players)
        if not self._players:
            raise InvalidArgumentError("At least one player is required")
        if len(self._players) > rules.max_players:
            raise InvalidArgumentError(
                f"At most {rules.max_players} players can be seated, got {len(self._players)}"
            )

        seen: set[Name] = set()
        for player in self._players:
            if player.name.value == DEALER_NAME:
                raise InvalidArgumentError(f"{DEALER_NAME!r} is reserved for the house")
            if player.name in seen:
                raise InvalidArgumentError(f"Duplicate player name: {player.name}")
            seen.add(player.name)

    @classmethod
    def from_names(cls, text: str | None, rules: RuleSet | None = None) -> "Players":
        """Seat one name-only player per comma-separated name."""
        return cls((Player(name.value, rules=rules) for name in parse_names(text)), rules)

    @property
    def names(self) -> list[str]:
        return [player.name.value for player in self._players]

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def __getitem__(self, index: int) -> Player:
        return self._players[index]
