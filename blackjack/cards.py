"""Card and Deck classes - immutable card representations."""

from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Iterable, Iterator


class EmptyDeckError(IndexError):
    """Raised when drawing from a deck with no cards left."""


class Suit(Enum):
    """Card suits."""

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        return _SUIT_SYMBOLS[self]

    @property
    def is_red(self) -> bool:
        """Check if this suit is printed in red."""
        return self in (Suit.DIAMONDS, Suit.HEARTS)


_SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}


class Rank(Enum):
    """Card ranks, valued by their face label."""

    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    def __str__(self) -> str:
        return self.value

    @property
    def rank_value(self) -> int:
        """
        Return the contribution toward a hand total.

        Number cards count their face value, J/Q/K count 10 and the Ace
        counts 1. Promoting an Ace to 11 is decided by the hand.
        """
        if self == Rank.ACE:
            return 1
        if self.value.isdigit():
            return int(self.value)
        return 10

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def rank_value(self) -> int:
        """Return the blackjack rank value (Ace = 1)."""
        return self.rank.rank_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh', '10d'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = "10" if s[:-1] == "T" else s[:-1]
        suit_str = s[-1]

        try:
            rank = Rank(rank_str)
        except ValueError:
            raise ValueError(f"Invalid rank: {rank_str}") from None

        suit_map = {
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
        }
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank, suit_map[suit_str])


def standard_cards() -> list[Card]:
    """Return the 52 (rank, suit) combinations in suit-major order."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


class Deck:
    """
    A shuffled 52-card deck dealt from the front.

    The deck is shuffled once on construction; pass a seeded ``Random`` to
    get a reproducible order.
    """

    def __init__(
        self,
        rng: Random | None = None,
        cards: Iterable[Card] | None = None,
    ) -> None:
        """
        Initialize a new deck.

        Args:
            rng: Random number generator used for the shuffle
            cards: Exact draw order to use instead of a shuffled full deck
        """
        self._rng = rng or Random()
        if cards is None:
            ordered = standard_cards()
            self._rng.shuffle(ordered)
        else:
            ordered = list(cards)
        self._cards: deque[Card] = deque(ordered)

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> "Deck":
        """Create a deck that deals exactly ``cards``, in order."""
        return cls(cards=cards)

    def draw(self) -> Card:
        """Remove and return the next card."""
        if not self._cards:
            raise EmptyDeckError("Cannot draw from empty deck")
        return self._cards.popleft()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)
