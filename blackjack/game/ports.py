"""Boundaries between the engine and whatever reads input and draws output."""

from abc import ABC, abstractmethod
from typing import Any, Iterable

from blackjack.hand import Hand


class DecisionSource(ABC):
    """Supplies the player's raw answer each time the engine asks."""

    @abstractmethod
    def request_player_decision(self) -> str:
        """Return the player's raw text for one turn."""
        ...


class Display(ABC):
    """
    Receives rendering requests from the engine.

    The engine passes hands and values only; formatting, colour and cursor
    placement belong to the implementation.
    """

    @abstractmethod
    def render_dealer_up_card_only(self, dealer_hand: Hand) -> None:
        """Show the dealer's first card while the hole card stays hidden."""
        ...

    @abstractmethod
    def render_hidden_card_placeholder(self) -> None:
        """Show the back of a card in place of the dealer's hole card."""
        ...

    @abstractmethod
    def render_player_hand(self, player_hand: Hand, value: int) -> None:
        """Show every card in the player's hand with its value."""
        ...

    @abstractmethod
    def render_dealer_hand(self, dealer_hand: Hand, value: int) -> None:
        """Show the dealer's full hand, hole card included, with its value."""
        ...

    @abstractmethod
    def render_outcome_message(self, text: str) -> None:
        """Show the result of the game."""
        ...

    @abstractmethod
    def render_invalid_input_prompt(self) -> None:
        """Tell the player their input was not a hit or a stand."""
        ...


class ScriptedDecisions(DecisionSource):
    """Answers from a fixed list, in order."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.requests = 0

    def request_player_decision(self) -> str:
        if self.requests >= len(self._answers):
            raise RuntimeError(
                f"Scripted decisions exhausted after {len(self._answers)} answers"
            )
        answer = self._answers[self.requests]
        self.requests += 1
        return answer


class RecordingDisplay(Display):
    """Records every rendering request as a ``(name, args)`` tuple."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def render_dealer_up_card_only(self, dealer_hand: Hand) -> None:
        self.calls.append(("dealer_up_card", (dealer_hand.up_card,)))

    def render_hidden_card_placeholder(self) -> None:
        self.calls.append(("hidden_card", ()))

    def render_player_hand(self, player_hand: Hand, value: int) -> None:
        self.calls.append(("player_hand", (list(player_hand), value)))

    def render_dealer_hand(self, dealer_hand: Hand, value: int) -> None:
        self.calls.append(("dealer_hand", (list(dealer_hand), value)))

    def render_outcome_message(self, text: str) -> None:
        self.calls.append(("outcome", (text,)))

    def render_invalid_input_prompt(self) -> None:
        self.calls.append(("invalid_input", ()))

    @property
    def names(self) -> list[str]:
        """Return the names of the recorded calls, in order."""
        return [name for name, _ in self.calls]
