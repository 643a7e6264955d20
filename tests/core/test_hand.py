"""Tests for Hand scoring."""

from itertools import product

import pytest
from hypothesis import given
from hypothesis import strategies as st

from blackjack.cards import Card, Rank, Suit
from blackjack.hand import Hand
from helpers import hand_of

card_strategy = st.builds(Card, st.sampled_from(list(Suit)), st.sampled_from(list(Rank)))


class TestHand:
    """Tests for the Hand class."""

    def test_empty_hand(self, empty_hand):
        """An empty hand scores zero and is neither bust nor blackjack."""
        assert len(empty_hand) == 0
        assert empty_hand.score == 0
        assert not empty_hand.is_bust
        assert not empty_hand.is_blackjack
        assert empty_hand.can_draw_more

    def test_add_card(self, empty_hand):
        empty_hand.add_card(Card(Suit.SPADES, Rank.TEN))
        assert len(empty_hand) == 1
        assert empty_hand.score == 10

    def test_card_order_preserved(self):
        hand = hand_of("KH", "2C", "AS")
        assert [str(card) for card in hand] == ["K♥", "2♣", "A♠"]

    def test_score_recomputed_after_each_card(self):
        """Ace switches from 11 to 1 once the hand would bust."""
        hand = Hand()
        hand.add_card(Card(Suit.SPADES, Rank.ACE))
        assert hand.score == 11

        hand.add_card(Card(Suit.HEARTS, Rank.FIVE))
        assert hand.score == 16

        hand.add_card(Card(Suit.CLUBS, Rank.EIGHT))
        assert hand.score == 14

    def test_blackjack(self, blackjack_hand):
        assert blackjack_hand.is_blackjack
        assert blackjack_hand.score == 21

    def test_not_blackjack_three_cards(self):
        """21 with 3+ cards is not blackjack."""
        hand = hand_of("7D", "7D", "7D")
        assert hand.score == 21
        assert not hand.is_blackjack
        assert hand.can_draw_more

    def test_bust(self):
        hand = hand_of("7D", "7D", "8D")
        assert hand.score == 22
        assert hand.is_bust
        assert not hand.can_draw_more

    def test_multiple_aces(self):
        hand = hand_of("AS", "AH")
        assert hand.score == 12

        hand.add_card(Card(Suit.CLUBS, Rank.ACE))
        assert hand.score == 13

        hand.add_card(Card(Suit.DIAMONDS, Rank.NINE))
        assert hand.score == 12

    def test_five_card_twenty_one_with_three_aces(self):
        hand = hand_of("AH", "AD", "8C", "JC", "AC")
        assert hand.score == 21
        assert not hand.is_blackjack

    def test_all_aces_bust_only_past_21(self):
        hand = Hand.of([Card(suit, Rank.ACE) for suit in Suit] * 6)
        # 24 aces all demoted to 1
        assert hand.score == 24
        assert hand.is_bust

    @pytest.mark.parametrize(
        "codes, expected",
        [
            (["2H", "3H"], 5),
            (["KH", "QH"], 20),
            (["AH", "9H"], 20),
            (["AH", "AD", "9C"], 21),
            (["KH", "QH", "AH"], 21),
            (["KH", "QH", "2H"], 22),
        ],
    )
    def test_scores(self, codes, expected):
        assert hand_of(*codes).score == expected

    def test_str(self, blackjack_hand):
        assert str(blackjack_hand) == "A♠ K♥ (BLACKJACK)"
        assert str(hand_of("KH", "9C")) == "K♥ 9♣ (19)"


def _best_score(hand: Hand) -> int:
    """Exhaustively pick the highest non-bust ace assignment, else the lowest total."""
    base = sum(card.value for card in hand if not card.is_ace)
    aces = sum(1 for card in hand if card.is_ace)
    totals = {base + sum(choice) for choice in product((1, 11), repeat=aces)}
    safe = [total for total in totals if total <= 21]
    return max(safe) if safe else min(totals)


class TestHandProperties:
    """Property-based checks over arbitrary hands."""

    @given(st.lists(card_strategy, max_size=8))
    def test_score_matches_exhaustive_ace_search(self, drawn):
        assert Hand.of(drawn).score == _best_score(Hand.of(drawn))

    @given(st.lists(card_strategy, max_size=10))
    def test_bust_iff_over_21(self, drawn):
        hand = Hand.of(drawn)
        assert hand.is_bust == (hand.score > 21)
        assert hand.can_draw_more == (not hand.is_bust)

    @given(st.lists(card_strategy, min_size=2, max_size=6))
    def test_blackjack_needs_exactly_two_cards(self, drawn):
        hand = Hand.of(drawn)
        if hand.score == 21:
            assert hand.is_blackjack == (len(hand) == 2)
        else:
            assert not hand.is_blackjack

    @given(st.lists(card_strategy, max_size=8))
    def test_score_is_deterministic(self, drawn):
        hand = Hand.of(drawn)
        assert hand.score == hand.score == Hand.of(list(drawn)).score
