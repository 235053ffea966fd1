"""Terminal input and ANSI rendering for the game."""

import logging
import sys
from typing import TextIO

from blackjack.cards import Card
from blackjack.game.ports import DecisionSource, Display
from blackjack.hand import Hand

logger = logging.getLogger(__name__)

ESC = "\x1b["
RESET = f"{ESC}0m"
RED = f"{ESC}31m"
GREEN = f"{ESC}32m"
BLACK = f"{ESC}30m"
BRIGHT_WHITE_BG = f"{ESC}107m"
ERASE_SCREEN = f"{ESC}2J"

CARD_HEIGHT = 7
CARD_WIDTH = 11

BACK_OF_CARD = [
    "┌─────────┐",
    "│░░░░░░░░░│",
    "│░ B L A ░│",
    "│░ C K J ░│",
    "│░ A C K ░│",
    "│░░░░░░░░░│",
    "└─────────┘",
]


def cursor(row: int, column: int) -> str:
    return f"{ESC}{row};{column}H"


def cursor_up(n: int) -> str:
    return f"{ESC}{n}A"


def cursor_down(n: int) -> str:
    return f"{ESC}{n}B"


def cursor_right(n: int) -> str:
    return f"{ESC}{n}C"


def cursor_left(n: int) -> str:
    return f"{ESC}{n}D"


def card_lines(card: Card, color: bool = True) -> list[str]:
    """
    Draw a card as a box of text lines.

    Every line is CARD_WIDTH columns wide once colour codes are ignored.
    """
    rank = str(card.rank)
    pad = " " * (9 - len(rank))
    ink = RED if color and card.suit.is_red else ""
    off = RESET if ink else ""
    return [
        "┌─────────┐",
        f"│{ink}{rank}{pad}{off}│",
        "│         │",
        f"│    {ink}{card.suit}{off}    │",
        "│         │",
        f"│{ink}{pad}{rank}{off}│",
        "└─────────┘",
    ]


def hand_lines(cards: list[Card], color: bool = True) -> list[str]:
    """Lay cards out side by side, one space apart."""
    if not cards:
        return []
    drawn = [card_lines(card, color) for card in cards]
    return [" ".join(rows) for rows in zip(*drawn)]


class ConsoleDisplay(Display):
    """Draws the table on an ANSI terminal."""

    def __init__(self, stream: TextIO | None = None, color: bool = True) -> None:
        self.stream = stream or sys.stdout
        self.color = color

    def _write(self, text: str = "") -> None:
        self.stream.write(text + "\n")
        self.stream.flush()

    def _clear(self) -> None:
        self.stream.write(ERASE_SCREEN + cursor(1, 1))

    def render_welcome(self) -> None:
        """Print the welcome banner."""
        if self.color:
            self._write(
                BRIGHT_WHITE_BG + ERASE_SCREEN + cursor(1, 1)
                + GREEN + "Welcome to"
                + RED + " Terminal"
                + BLACK + " BlackJack"
            )
        else:
            self._write("Welcome to Terminal BlackJack")

    def render_dealer_up_card_only(self, dealer_hand: Hand) -> None:
        self._clear()
        self._write("Dealer has: ")
        up_card = dealer_hand.up_card
        if up_card is not None:
            for line in card_lines(up_card, self.color):
                self._write(line)

    def render_hidden_card_placeholder(self) -> None:
        # Drawn to the right of the up card, which was just printed
        moves = cursor_down(1) + cursor_left(CARD_WIDTH)
        self.stream.write(
            cursor_up(CARD_HEIGHT) + cursor_right(CARD_WIDTH + 1)
            + moves.join(BACK_OF_CARD)
        )
        self._write()

    def render_player_hand(self, player_hand: Hand, value: int) -> None:
        self._write()
        self._write("Player has: ")
        self._write_hand(player_hand, value)

    def render_dealer_hand(self, dealer_hand: Hand, value: int) -> None:
        self._clear()
        self._write("Dealer has: ")
        self._write_hand(dealer_hand, value)

    def _write_hand(self, hand: Hand, value: int) -> None:
        lines = hand_lines(list(hand), self.color)
        for line in lines[:-1]:
            self._write(line)
        last = lines[-1] if lines else ""
        self._write(f"{last} ({value})")

    def render_outcome_message(self, text: str) -> None:
        self._write(text)

    def render_invalid_input_prompt(self) -> None:
        self._write("You need to [H]it or [S]tand")

    def render_error(self, text: str) -> None:
        """Tell the player the game could not continue."""
        self._write(f"{RED}{text}{RESET}" if self.color else text)

    def reset(self) -> None:
        """Restore default terminal attributes."""
        if self.color:
            self._write(RESET)


class ConsoleDecisions(DecisionSource):
    """Asks the player on the terminal and reads one line per turn."""

    def __init__(
        self,
        stream_in: TextIO | None = None,
        stream_out: TextIO | None = None,
    ) -> None:
        self.stream_in = stream_in or sys.stdin
        self.stream_out = stream_out or sys.stdout

    def request_player_decision(self) -> str:
        self.stream_out.write("[H]it or [S]tand?\n")
        self.stream_out.flush()
        line = self.stream_in.readline()
        if not line:
            raise EOFError("Input closed while waiting for hit or stand")
        logger.debug("Read decision line %r", line)
        return line.rstrip("\r\n")
