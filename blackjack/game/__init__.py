"""Game engine and state management."""

from blackjack.game.decision import Decision, parse_decision
from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.ports import DecisionSource, Display, RecordingDisplay, ScriptedDecisions
from blackjack.game.state import GameState
from blackjack.game.engine import STAY_LIMIT, BlackjackGame, dealer_should_hit

__all__ = [
    "Decision",
    "parse_decision",
    "EventEmitter",
    "EventType",
    "GameEvent",
    "DecisionSource",
    "Display",
    "RecordingDisplay",
    "ScriptedDecisions",
    "GameState",
    "STAY_LIMIT",
    "dealer_should_hit",
    "BlackjackGame",
]
