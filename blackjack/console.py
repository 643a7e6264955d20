"""Console front end: plays a single round through injected input/output."""

import argparse
import logging
from random import Random
from typing import Callable, TypeVar

from blackjack.cards import Deck
from blackjack.decision import DrawDecision
from blackjack.errors import BlackjackError, InvalidArgumentError
from blackjack.game import BlackjackRound, CardSource
from blackjack.participants import Dealer, Player, Players
from blackjack.rules import RuleSet
from blackjack.schemas import RoundReport
from config import config

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]
T = TypeVar("T")


def _ask(read: Reader, write: Writer, prompt: str, parse: Callable[[str], T]) -> T:
    """Prompt until ``parse`` accepts the answer."""
    while True:
        answer = read(prompt + "\n")
        try:
            return parse(answer)
        except BlackjackError as exc:
            logger.debug("Rejected input %r: %s", answer, exc)
            write(f"[ERROR] {exc}")


def _parse_amount(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise InvalidArgumentError(f"Bet must be a whole number, got {text!r}") from None


def _seat_players(read: Reader, write: Writer, rules: RuleSet) -> Players:
    table = _ask(
        read,
        write,
        "Enter player names separated by commas.",
        lambda text: Players.from_names(text, rules),
    )
    seated = [
        _ask(
            read,
            write,
            f"Enter {name}'s bet.",
            lambda text, name=name: Player(name, _parse_amount(text), rules),
        )
        for name in table.names
    ]
    return Players(seated, rules)


def play(
    read: Reader | None = None,
    write: Writer | None = None,
    rng: Random | None = None,
    rules: RuleSet | None = None,
    deck: CardSource | None = None,
) -> RoundReport:
    """
    Play one round at the console.

    Args:
        read: Prompt function returning the user's answer (defaults to ``input``)
        write: Line output function (defaults to ``print``)
        rng: Random source used to shuffle a fresh deck
        rules: Table rules
        deck: Pre-arranged card source; replaces the shuffled deck

    Returns:
        The settled round
    """
    read = read or input
    write = write or print
    rules = rules or RuleSet()
    players = _seat_players(read, write, rules)

    if deck is None:
        deck = Deck(rng=rng)
        deck.shuffle()

    game = BlackjackRound(Dealer(rules), players, deck, rules)
    game.deal()

    write("")
    write(f"Dealt {rules.initial_cards} cards to Dealer and {', '.join(players.names)}.")
    write(f"Dealer: {game.dealer.cards[0]}")
    for player in players:
        write(f"{player.name}: {', '.join(str(card) for card in player.cards)}")
    write("")

    while game.current_player is not None:
        player = game.current_player
        decision = _ask(
            read,
            write,
            f"Does {player.name} want another card? (y for yes, n for no)",
            DrawDecision.parse,
        )
        game.decide(decision)
        write(f"{player.name}: {', '.join(str(card) for card in player.cards)}")

    drawn = game.play_dealer()
    if drawn:
        write(f"Dealer scored {rules.dealer_draw_threshold} or less and drew {drawn} more card(s).")

    report = game.resolve()
    _print_report(write, report)
    return report


def _print_report(write: Writer, report: RoundReport) -> None:
    write("")
    write(f"Dealer: {report.dealer.labels} - score: {report.dealer.score}")
    for player in report.players:
        write(f"{player.name}: {player.hand.labels} - score: {player.hand.score}")

    write("")
    write("## Final profit")
    for name, amount in report.profits().items():
        write(f"{name}: {amount}")


def main(argv: list[str] | None = None) -> int:
    """Entry point for ``python -m blackjack``."""
    parser = argparse.ArgumentParser(prog="blackjack", description="Play one round of blackjack")
    parser.add_argument("--seed", type=int, default=config.seed, help="Shuffle seed for a reproducible deck")
    parser.add_argument(
        "--log-level",
        default=config.logging.level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostic log level",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=config.logging.format)

    rng = Random(args.seed) if args.seed is not None else None
    play(rng=rng, rules=RuleSet.from_config(config.game))
    return 0
