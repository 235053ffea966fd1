"""Terminal blackjack - UI-agnostic game core."""

from blackjack.cards import Card, Deck, EmptyDeckError, Rank, Suit
from blackjack.hand import Hand, Outcome, evaluate_hands, has_ace, is_busted, total_value

__all__ = [
    "Card",
    "Deck",
    "EmptyDeckError",
    "Rank",
    "Suit",
    "Hand",
    "Outcome",
    "evaluate_hands",
    "has_ace",
    "is_busted",
    "total_value",
]
