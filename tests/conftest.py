"""Pytest fixtures for terminal blackjack tests."""

import pytest
from random import Random

from blackjack.cards import Card, Deck
from blackjack.hand import Hand
from blackjack.game import RecordingDisplay


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    return Deck(rng=rng)


@pytest.fixture
def hand_of():
    """Factory building a hand from card strings like 'AS', '10h'."""
    def make(*cards: str) -> Hand:
        return Hand([Card.from_string(c) for c in cards])
    return make


@pytest.fixture
def deck_of():
    """Factory building a deck that deals the given cards in order."""
    def make(*cards: str) -> Deck:
        return Deck.from_cards(Card.from_string(c) for c in cards)
    return make


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def soft_16_hand(hand_of):
    """A soft 16 hand (A-5)."""
    return hand_of("AS", "5H")


@pytest.fixture
def hard_16_hand(hand_of):
    """A hard 16 hand (10-6)."""
    return hand_of("10S", "6H")


@pytest.fixture
def bust_hand(hand_of):
    """A busted hand."""
    return hand_of("10S", "6H", "KC")


@pytest.fixture
def display():
    """A display that records rendering requests."""
    return RecordingDisplay()
