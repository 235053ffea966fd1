"""Tests for Hand evaluation."""

import pytest
from hypothesis import given, strategies as st

from blackjack.cards import Card, Rank, Suit
from blackjack.hand import (
    BUST_LIMIT,
    Hand,
    Outcome,
    SettlementReason,
    evaluate_hands,
    has_ace,
    is_busted,
    settle_hands,
    total_value,
)

NON_ACES = [rank for rank in Rank if rank is not Rank.ACE]


@st.composite
def card_strategy(draw, ranks=tuple(Rank)):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(ranks)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


cards_strategy = st.lists(card_strategy(), max_size=8)


class TestTotalValue:
    """Tests for the hand value functions."""

    def test_empty(self):
        """Test no cards total zero."""
        assert total_value([]) == 0
        assert not has_ace([])
        assert not is_busted([])

    def test_ace_five_is_sixteen(self, soft_16_hand):
        """Test A-5 counts the Ace as 11."""
        assert total_value(soft_16_hand.cards) == 16

    def test_ace_eight_three_is_twelve(self, hand_of):
        """Test A-8-3 counts the Ace as 1."""
        assert total_value(hand_of("AS", "8S", "3S").cards) == 12

    def test_two_aces_and_nine_is_eleven(self, hand_of):
        """Test the soft adjustment is skipped once the total reaches 11."""
        assert total_value(hand_of("AS", "AH", "9C").cards) == 11

    def test_two_aces_is_twelve(self, hand_of):
        """Test only one of two Aces is promoted."""
        assert total_value(hand_of("AS", "AH").cards) == 12

    def test_ace_with_ten_card_is_eleven(self, hand_of):
        """Test A-K totals 11: promotion needs a total below 11."""
        assert total_value(hand_of("AS", "KH").cards) == 11

    def test_hard_total(self, hard_16_hand):
        """Test hands without an Ace just sum."""
        assert total_value(hard_16_hand.cards) == 16

    def test_bust(self, bust_hand):
        """Test bust detection."""
        assert is_busted(bust_hand.cards)
        assert total_value(bust_hand.cards) == 26

    def test_twenty_one_is_not_bust(self, hand_of):
        """Test 21 exactly is still live."""
        assert not is_busted(hand_of("7S", "7H", "7C").cards)

    def test_accepts_any_iterable(self, hand_of):
        """Test the functions work on generators too."""
        hand = hand_of("AS", "5H")
        assert total_value(card for card in hand) == 16
        assert has_ace(card for card in hand)

    @given(
        ace=card_strategy(ranks=(Rank.ACE,)),
        others=st.lists(card_strategy(ranks=NON_ACES), max_size=6),
    )
    def test_single_ace_rule(self, ace, others):
        """Test one Ace adds 10 exactly when the hard total is under 11."""
        s = sum(card.rank_value for card in others)
        expected = s + 1 + 10 if s + 1 < 11 else s + 1
        assert total_value([ace, *others]) == expected

    @given(cards=cards_strategy)
    def test_busted_iff_over_21(self, cards):
        """Test bust is exactly a total over 21."""
        assert is_busted(cards) == (total_value(cards) > BUST_LIMIT)

    @given(cards=cards_strategy, data=st.data())
    def test_order_does_not_matter(self, cards, data):
        """Test card order only affects display."""
        shuffled = data.draw(st.permutations(cards))
        assert total_value(shuffled) == total_value(cards)

    @given(cards=st.lists(card_strategy(ranks=NON_ACES), max_size=8))
    def test_no_ace_is_plain_sum(self, cards):
        """Test hands without an Ace are never adjusted."""
        assert not has_ace(cards)
        assert total_value(cards) == sum(card.rank_value for card in cards)


class TestHand:
    """Tests for the Hand class."""

    def test_empty_hand(self, empty_hand):
        """Test empty hand properties."""
        assert len(empty_hand) == 0
        assert empty_hand.value == 0
        assert empty_hand.up_card is None
        assert not empty_hand.is_busted

    def test_add_card(self, empty_hand):
        """Test adding cards to hand."""
        empty_hand.add_card(Card(Rank.TEN, Suit.SPADES))
        assert len(empty_hand) == 1
        assert empty_hand.value == 10

    def test_soft_to_hard_transition(self, empty_hand):
        """Test the Ace drops back to 1 as the hand grows."""
        empty_hand.add_card(Card(Rank.ACE, Suit.SPADES))
        assert empty_hand.value == 11
        empty_hand.add_card(Card(Rank.FIVE, Suit.HEARTS))
        assert empty_hand.value == 16
        empty_hand.add_card(Card(Rank.EIGHT, Suit.CLUBS))
        assert empty_hand.value == 14

    def test_up_card_is_first_dealt(self, hand_of):
        """Test the up card is the first card."""
        hand = hand_of("9D", "KS")
        assert hand.up_card == Card(Rank.NINE, Suit.DIAMONDS)

    def test_order_is_kept(self, hand_of):
        """Test iteration follows deal order."""
        hand = hand_of("9D", "KS", "2C")
        assert [str(card) for card in hand] == ["9♦", "K♠", "2♣"]

    def test_has_ace(self, soft_16_hand, hard_16_hand):
        """Test ace detection on a hand."""
        assert soft_16_hand.has_ace
        assert not hard_16_hand.has_ace

    def test_str(self, soft_16_hand):
        """Test string representation."""
        assert str(soft_16_hand) == "A♠ 5♥ (16)"


class TestEvaluateHands:
    """Tests for hand comparison."""

    def test_player_wins_higher_value(self, hand_of):
        """Test 20 beats 19."""
        player = hand_of("10S", "QH")
        dealer = hand_of("10C", "9D")
        assert evaluate_hands(player, dealer) is Outcome.PLAYER_WINS
        assert settle_hands(player, dealer)[1] is SettlementReason.PLAYER_HIGHER

    def test_dealer_wins_higher_value(self, hand_of):
        """Test dealer wins with higher value."""
        player = hand_of("10S", "7H")
        dealer = hand_of("10C", "9D")
        assert settle_hands(player, dealer) == (
            Outcome.PLAYER_LOSES,
            SettlementReason.DEALER_HIGHER,
        )

    def test_push(self, hand_of):
        """Test 18 against 18 is a push."""
        player = hand_of("10S", "8H")
        dealer = hand_of("10C", "8D")
        assert settle_hands(player, dealer) == (Outcome.PUSH, SettlementReason.TIE)

    def test_player_bust_loses(self, bust_hand, hand_of):
        """Test player busting loses."""
        assert evaluate_hands(bust_hand, hand_of("10D", "7S")) is Outcome.PLAYER_LOSES

    def test_player_bust_24_loses_to_any_dealer(self, hand_of):
        """Test a busted player loses even when the dealer busts too."""
        player = hand_of("10S", "4H", "KC")
        assert player.value == 24
        for dealer in (hand_of("10D", "7S"), hand_of("10D", "6C", "QS")):
            assert settle_hands(player, dealer) == (
                Outcome.PLAYER_LOSES,
                SettlementReason.PLAYER_BUSTED,
            )

    def test_dealer_bust_player_wins(self, hand_of):
        """Test dealer at 23 loses to player at 19."""
        player = hand_of("10S", "9H")
        dealer = hand_of("10C", "6D", "7S")
        assert dealer.value == 23
        assert settle_hands(player, dealer) == (
            Outcome.PLAYER_WINS,
            SettlementReason.DEALER_BUSTED,
        )

    def test_outcome_text(self):
        """Test outcome wording."""
        assert str(Outcome.PLAYER_WINS) == "Player wins"
        assert str(Outcome.PUSH) == "Push"
        assert str(Outcome.PLAYER_LOSES) == "Player loses"

    @pytest.mark.parametrize(
        "player_cards, dealer_cards, expected",
        [
            (("10S", "QH"), ("10C", "9D"), Outcome.PLAYER_WINS),
            (("10S", "8H"), ("10C", "8D"), Outcome.PUSH),
            (("10S", "7H"), ("10C", "8D"), Outcome.PLAYER_LOSES),
        ],
    )
    def test_comparison_table(self, hand_of, player_cards, dealer_cards, expected):
        """Test plain total comparisons."""
        assert evaluate_hands(hand_of(*player_cards), hand_of(*dealer_cards)) is expected


def test_hand_default_is_independent():
    """Test hands do not share a card list."""
    first, second = Hand(), Hand()
    first.add_card(Card(Rank.TWO, Suit.CLUBS))
    assert len(second) == 0
