"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator

from blackjack.cards import Card

BUST_LIMIT = 21


def total_value(cards: Iterable[Card]) -> int:
    """
    Calculate the value of a run of cards.

    Every card counts its rank value (Ace = 1). If the cards include an Ace
    and the total is under 11, a single Ace is promoted to 11 by adding 10.
    Only one Ace is ever promoted: A-A-9 is 11, not 21.
    """
    cards = list(cards)
    total = sum(card.rank_value for card in cards)
    if has_ace(cards) and total < 11:
        total += 10
    return total


def has_ace(cards: Iterable[Card]) -> bool:
    """Check whether any of the cards is an Ace."""
    return any(card.is_ace for card in cards)


def is_busted(cards: Iterable[Card]) -> bool:
    """Check whether the cards total more than 21."""
    return total_value(cards) > BUST_LIMIT


@dataclass
class Hand:
    """An ordered run of cards held by the player or the dealer."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    @property
    def value(self) -> int:
        """Return the hand total."""
        return total_value(self.cards)

    @property
    def has_ace(self) -> bool:
        return has_ace(self.cards)

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return is_busted(self.cards)

    @property
    def up_card(self) -> Card | None:
        """Return the first card dealt, the one the dealer shows."""
        return self.cards[0] if self.cards else None

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        return f"{cards_str} ({self.value})"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"


class Outcome(Enum):
    """Result of a settled game, seen from the player's side."""

    PLAYER_WINS = "Player wins"
    PUSH = "Push"
    PLAYER_LOSES = "Player loses"

    def __str__(self) -> str:
        return self.value


class SettlementReason(Enum):
    """Which settlement rule decided the outcome."""

    PLAYER_BUSTED = "player_busted"
    DEALER_BUSTED = "dealer_busted"
    PLAYER_HIGHER = "player_higher"
    TIE = "tie"
    DEALER_HIGHER = "dealer_higher"


def settle_hands(player_hand: Hand, dealer_hand: Hand) -> tuple[Outcome, SettlementReason]:
    """
    Settle the game and report which rule matched.

    Rules are checked in order and the first match wins:
    player bust, dealer bust, dealer lower, tie, dealer higher.
    """
    if player_hand.is_busted:
        return Outcome.PLAYER_LOSES, SettlementReason.PLAYER_BUSTED

    if dealer_hand.is_busted:
        return Outcome.PLAYER_WINS, SettlementReason.DEALER_BUSTED

    player_value = player_hand.value
    dealer_value = dealer_hand.value

    if dealer_value < player_value:
        return Outcome.PLAYER_WINS, SettlementReason.PLAYER_HIGHER
    if dealer_value == player_value:
        return Outcome.PUSH, SettlementReason.TIE
    return Outcome.PLAYER_LOSES, SettlementReason.DEALER_HIGHER


def evaluate_hands(player_hand: Hand, dealer_hand: Hand) -> Outcome:
    """Compare player and dealer hands."""
    outcome, _ = settle_hands(player_hand, dealer_hand)
    return outcome
