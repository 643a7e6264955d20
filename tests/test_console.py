"""Tests for the console front end."""

from random import Random

import pytest

from blackjack.console import main, play
from blackjack.rules import RuleSet
from helpers import StackedDeck

# dealer 16, pobi blackjack, jason 14 -> hits 7 -> 21, dealer draws 2 -> 18
STANDARD = ["10S", "6S", "KH", "AC", "9D", "5C", "7H", "2H"]


class ScriptedConsole:
    """Feeds canned answers and collects everything written."""

    def __init__(self, *answers: str) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self._answers.pop(0)

    def write(self, line: str) -> None:
        self.lines.append(line)

    @property
    def errors(self) -> list[str]:
        return [line for line in self.lines if line.startswith("[ERROR]")]


def _play(console, codes=STANDARD, rules=None):
    return play(console.read, console.write, rules=rules, deck=StackedDeck(codes))


class TestPlay:
    """Tests for a full scripted round."""

    def test_standard_round(self):
        console = ScriptedConsole("pobi, jason", "10000", "20000", "n", "y", "n")
        report = _play(console)

        assert report.profits() == {"Dealer": -35_000, "pobi": 15_000, "jason": 20_000}
        assert "Dealer: 10♠" in console.lines
        assert "jason: 9♦, 5♣, 7♥" in console.lines
        assert "Dealer scored 16 or less and drew 1 more card(s)." in console.lines
        assert console.lines[-3:] == ["Dealer: -35000", "pobi: 15000", "jason: 20000"]
        assert not console.errors

    def test_prompts(self):
        console = ScriptedConsole("pobi", "10000", "n")
        _play(console, ["10S", "8S", "9H", "9C"])
        assert console.prompts == [
            "Enter player names separated by commas.\n",
            "Enter pobi's bet.\n",
            "Does pobi want another card? (y for yes, n for no)\n",
        ]

    def test_bad_bets_reprompt(self):
        console = ScriptedConsole("pobi", "lots", "999", "100000001", "1000", "n")
        report = _play(console, ["10S", "8S", "9H", "9C"])
        assert len(console.errors) == 3
        assert report.players[0].bet == 1000

    def test_bad_answer_reprompts(self):
        console = ScriptedConsole("pobi", "1000", "maybe", "n")
        _play(console, ["10S", "8S", "9H", "9C"])
        assert len(console.errors) == 1

    def test_bad_names_reprompt_before_bets(self):
        console = ScriptedConsole(" , ", "pobi,pobi", "Dealer", "pobi", "1000", "n")
        report = _play(console, ["10S", "8S", "9H", "9C"])
        assert len(console.errors) == 3
        assert console.prompts.count("Enter pobi's bet.\n") == 1
        assert [p.name for p in report.players] == ["pobi"]

    def test_bust_stops_asking(self):
        console = ScriptedConsole("pobi", "1000", "y")
        report = _play(console, ["10S", "7S", "KH", "6C", "QD"])
        assert report.players[0].result == "loss"
        assert report.dealer_profit == 1000

    def test_custom_rules(self):
        console = ScriptedConsole("pobi", "10", "n")
        report = _play(console, ["10S", "8S", "9H", "9C"], rules=RuleSet(min_bet=10, max_bet=100))
        assert report.players[0].result == "draw"

    def test_shuffled_deck_settles(self):
        # Standing on the deal never busts a player, so one answer each is enough
        console = ScriptedConsole("pobi, jason", "1000", "2000", "n", "n")
        report = play(console.read, console.write, rng=Random(3))
        assert report.dealer_profit == -sum(p.profit for p in report.players)


class TestMain:
    """Tests for the command line entry point."""

    def test_main_plays_a_round(self, monkeypatch, capsys):
        answers = iter(["pobi", "1000", "n"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
        assert main(["--seed", "5"]) == 0
        assert "## Final profit" in capsys.readouterr().out

    def test_rejects_unknown_log_level(self):
        with pytest.raises(SystemExit):
            main(["--log-level", "LOUD"])
