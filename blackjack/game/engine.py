"""Single-round blackjack engine with state machine."""

import logging
from typing import Iterable, Protocol

from transitions import Machine
from transitions.core import MachineError

from blackjack.cards import Card
from blackjack.decision import DrawDecision
from blackjack.game.events import EventEmitter, EventType
from blackjack.game.state import GameState
from blackjack.participants import Dealer, Participant, Player, Players
from blackjack.result import Outcome, ResultType, dealer_profit
from blackjack.rules import RuleSet
from blackjack.schemas import HandView, PlayerResultView, RoundReport

logger = logging.getLogger(__name__)


class CardSource(Protocol):
    """Anything that hands out cards one at a time, such as a Deck."""

    def draw(self) -> Card: ...


_RESULT_EVENTS = {
    ResultType.WIN: EventType.PLAYER_WINS,
    ResultType.LOSS: EventType.PLAYER_LOSES,
    ResultType.DRAW: EventType.PUSH,
}


class BlackjackRound:
    """
    Drives one round: deal, player turns, dealer turn, resolution.

    Cards come from an external ``CardSource``; the decision to draw comes
    from the caller through ``decide``. Calling a step out of order raises
    ``MachineError``, so a round can't be resolved while anyone is still
    drawing.
    """

    STATES = [s.name.lower() for s in GameState]

    TRANSITIONS = [
        {"trigger": "start_dealing", "source": "waiting", "dest": "dealing"},
        {"trigger": "open_turns", "source": "dealing", "dest": "player_turn"},
        {"trigger": "player_action", "source": "player_turn", "dest": "player_turn"},
        {"trigger": "close_turns", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "dealer_done", "source": "dealer_turn", "dest": "resolving"},
        {"trigger": "finish", "source": "resolving", "dest": "round_complete"},
    ]

    def __init__(
        self,
        dealer: Dealer,
        players: Players | Iterable[Player],
        deck: CardSource,
        rules: RuleSet | None = None,
    ) -> None:
        """
        Set up a round.

        Args:
            dealer: The house, holding an empty hand
            players: Seated players in turn order
            deck: Source of cards, already shuffled
            rules: Table rules (defaults to the dealer's)
        """
        self.rules = rules or dealer.rules
        self.dealer = dealer
        self.players = players if isinstance(players, Players) else Players(players, self.rules)
        self.deck = deck
        self.events = EventEmitter()
        self.outcomes: dict[str, Outcome] = {}
        self._turn_index = 0

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="waiting",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> GameState:
        """Get current round state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    @property
    def current_player(self) -> Player | None:
        """The player being asked to draw, or None outside player turns."""
        if self.state != GameState.PLAYER_TURN:
            return None
        return self.players[self._turn_index]

    def deal(self) -> None:
        """Give the opening cards, dealer first, then each player in order."""
        self.start_dealing()

        for participant in (self.dealer, *self.players):
            for _ in range(self.rules.initial_cards):
                self._deal_card(participant)

        self.events.emit_new(EventType.ROUND_STARTED, players=self.players.names)
        for player in self.players:
            if player.is_blackjack:
                self.events.emit_new(EventType.PLAYER_BLACKJACK, player=player.name.value)

        self.open_turns()
        self._skip_finished_players()

    def decide(self, decision: DrawDecision | str) -> Player:
        """
        Apply the current player's answer.

        A continue draws one card; the turn moves on after a stop or a bust.

        Returns:
            The player the decision applied to
        """
        self.player_action()
        player = self.players[self._turn_index]

        if player.is_draw_continue(decision):
            self._deal_card(player)
            self.events.emit_new(
                EventType.PLAYER_HIT,
                player=player.name.value,
                score=player.score,
            )
            if not player.is_can_draw:
                self.events.emit_new(EventType.PLAYER_BUSTS, player=player.name.value)
                self._advance()
        else:
            self.events.emit_new(
                EventType.PLAYER_STAND,
                player=player.name.value,
                score=player.score,
            )
            self._advance()

        return player

    def play_dealer(self) -> int:
        """
        Draw for the dealer until its policy says stop.

        Returns:
            Number of cards drawn beyond the opening hand
        """
        if self.state != GameState.DEALER_TURN:
            raise MachineError(f"Dealer cannot play in state {self.state}")

        drawn = 0
        while self.dealer.should_draw:
            self._deal_card(self.dealer)
            drawn += 1
            self.events.emit_new(EventType.DEALER_HITS, score=self.dealer.score)

        if self.dealer.is_bust:
            self.events.emit_new(EventType.DEALER_BUSTS, score=self.dealer.score)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, score=self.dealer.score)

        self.dealer_done()
        return drawn

    def resolve(self) -> RoundReport:
        """Settle every player against the dealer and close the round."""
        self.finish()

        results = []
        for player in self.players:
            outcome = player.settle(self.dealer)
            self.outcomes[player.name.value] = outcome
            self.events.emit_new(
                _RESULT_EVENTS[outcome.result],
                player=player.name.value,
                profit=outcome.profit,
            )
            results.append(PlayerResultView.from_outcome(player, outcome))

        house = dealer_profit(self.outcomes.values())
        self.events.emit_new(EventType.ROUND_ENDED, dealer_profit=house)
        logger.info("Round resolved: dealer profit %d over %d players", house, len(results))

        return RoundReport(
            dealer=HandView.from_hand(self.dealer.hand),
            players=results,
            dealer_profit=house,
        )

    def _deal_card(self, participant: Participant) -> Card:
        card = self.deck.draw()
        participant.draw(card)
        logger.debug("Dealt %s to %s (score %d)", card, participant.name, participant.score)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card),
            participant=participant.name.value,
            score=participant.score,
        )
        return card

    def _advance(self) -> None:
        self._turn_index += 1
        self._skip_finished_players()

    def _skip_finished_players(self) -> None:
        """Move past players who can't draw; close turns when none remain."""
        while self._turn_index < len(self.players) and not self.players[self._turn_index].is_can_draw:
            self._turn_index += 1

        if self._turn_index >= len(self.players):
            logger.debug("All players finished drawing")
            self.close_turns()
