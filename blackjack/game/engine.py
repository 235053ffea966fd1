"""Blackjack game engine with state machine."""

import logging
from random import Random
from typing import Callable

from transitions import Machine

from blackjack.cards import Card, Deck, EmptyDeckError
from blackjack.hand import Hand, Outcome, SettlementReason, settle_hands
from blackjack.game.decision import Decision, parse_decision
from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.ports import DecisionSource, Display
from blackjack.game.state import GameState

logger = logging.getLogger(__name__)

# Dealer hits at or below this total and stands above it
STAY_LIMIT = 16

RESULT_MESSAGES = {
    SettlementReason.PLAYER_BUSTED: "You Busted, so you lose.",
    SettlementReason.DEALER_BUSTED: "Dealer went BUST, Player wins! Yay for you!!",
    SettlementReason.PLAYER_HIGHER: "You beat the Dealer!",
    SettlementReason.TIE: "Push: You tie with the Dealer.",
    SettlementReason.DEALER_HIGHER: "You lost to the Dealer.",
}


def dealer_should_hit(hand: Hand) -> bool:
    """The dealer hits on 16 or less and stands on 17 or more, soft or hard."""
    return hand.value <= STAY_LIMIT


OUTCOME_EVENTS = {
    Outcome.PLAYER_WINS: EventType.PLAYER_WINS,
    Outcome.PUSH: EventType.PUSH,
    Outcome.PLAYER_LOSES: EventType.PLAYER_LOSES,
}


class BlackjackGame:
    """
    One game of blackjack between a player and an automated dealer.

    The engine owns the deck and both hands. It asks ``decisions`` for the
    player's choices and sends everything it wants shown to ``display``;
    it never touches the console itself.
    """

    STATES = [s.name.lower() for s in GameState]

    TRANSITIONS = [
        {"trigger": "deal", "source": "initial_deal", "dest": "player_turn",
         "before": "_deal_initial_cards"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_turn",
         "before": "_run_player_turn"},
        {"trigger": "dealer_done", "source": "dealer_turn", "dest": "settlement",
         "before": "_run_dealer_turn"},
        {"trigger": "finish", "source": "settlement", "dest": "done",
         "before": "_settle"},
        {"trigger": "abort", "source": "*", "dest": "done"},
    ]

    def __init__(
        self,
        decisions: DecisionSource,
        display: Display,
        deck: Deck | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a new game.

        Args:
            decisions: Where the player's hit/stand answers come from
            display: Where rendering requests go
            deck: Deck to deal from (a fresh shuffled deck if not provided)
            rng: Random number generator for the fresh deck's shuffle
        """
        self.decisions = decisions
        self.display = display
        self.deck = deck if deck is not None else Deck(rng=rng)

        self.player_hand = Hand()
        self.dealer_hand = Hand()
        self.player_busted = False
        self.outcome: Outcome | None = None
        self.events = EventEmitter()

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="initial_deal",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def play(self) -> Outcome:
        """Play a whole game from the deal to the result."""
        self.initial_deal()
        self.play_player_turn()
        self.play_dealer_turn()
        return self.settle()

    def initial_deal(self) -> None:
        """Deal two cards each, alternating, player first."""
        self._step(self.deal)

    def play_player_turn(self) -> bool:
        """
        Let the player hit until they stand or bust.

        Returns:
            True if the player busted
        """
        self._step(self.player_done)
        return self.player_busted

    def play_dealer_turn(self) -> None:
        """Draw for the dealer, unless the player already busted."""
        self._step(self.dealer_done)

    def settle(self) -> Outcome:
        """Reveal both hands and report who won."""
        self._step(self.finish)
        assert self.outcome is not None
        return self.outcome

    def _step(self, trigger: Callable[[], bool]) -> None:
        """Fire a transition, aborting the game if the deck runs out."""
        try:
            trigger()
        except EmptyDeckError as exc:
            from_state = self.state
            self.abort()
            self.events.emit_new(
                EventType.GAME_ABORTED,
                reason=str(exc),
                state=from_state.name,
            )
            logger.error("Game aborted during %s: %s", from_state, exc)
            raise

    def _deal_initial_cards(self) -> None:
        self.events.emit_new(EventType.GAME_STARTED, cards_in_deck=len(self.deck))

        # deal first round of cards, player first
        self._deal_card_to_hand(self.player_hand)
        self._deal_card_to_hand(self.dealer_hand)

        # second round; dealer's card is the hole card
        self._deal_card_to_hand(self.player_hand)
        self._deal_card_to_hand(self.dealer_hand, face_up=False)

        logger.debug("Initial deal: player %s, dealer shows %s",
                     self.player_hand, self.dealer_hand.up_card)

    def _deal_card_to_hand(self, hand: Hand, face_up: bool = True) -> Card:
        """Deal a card to a hand."""
        card = self.deck.draw()
        hand.add_card(card)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card) if face_up else "??",
            hand="dealer" if hand is self.dealer_hand else "player",
            hand_value=hand.value if face_up else None,
        )
        return card

    def _run_player_turn(self) -> None:
        while not self.player_busted:
            self._display_game_state()
            raw = self.decisions.request_player_decision()
            decision = parse_decision(raw)

            if decision is Decision.STAND:
                self.events.emit_new(EventType.PLAYER_STAND, hand_value=self.player_hand.value)
                logger.debug("Player stands on %d", self.player_hand.value)
                break

            if decision is Decision.HIT:
                self._deal_card_to_hand(self.player_hand)
                self.events.emit_new(EventType.PLAYER_HIT, hand_value=self.player_hand.value)
                logger.debug("Player hits: %s", self.player_hand)
                if self.player_hand.is_busted:
                    self.player_busted = True
                    self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=self.player_hand.value)
            else:
                self.events.emit_new(EventType.INVALID_INPUT, raw=raw)
                logger.debug("Ignoring invalid decision %r", raw)
                self.display.render_invalid_input_prompt()

    def _display_game_state(self) -> None:
        self.display.render_dealer_up_card_only(self.dealer_hand)
        self.display.render_hidden_card_placeholder()
        self.display.render_player_hand(self.player_hand, self.player_hand.value)

    def _run_dealer_turn(self) -> None:
        if self.player_busted:
            return

        if len(self.dealer_hand) >= 2:
            self.events.emit_new(
                EventType.DEALER_REVEALS,
                card=str(self.dealer_hand.cards[1]),
                hand_value=self.dealer_hand.value,
            )

        while dealer_should_hit(self.dealer_hand):
            self._deal_card_to_hand(self.dealer_hand)
            self.events.emit_new(EventType.DEALER_HITS, hand_value=self.dealer_hand.value)

        if self.dealer_hand.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=self.dealer_hand.value)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer_hand.value)
        logger.debug("Dealer finishes with %s", self.dealer_hand)

    def _settle(self) -> None:
        outcome, reason = settle_hands(self.player_hand, self.dealer_hand)
        self.outcome = outcome

        self.display.render_dealer_hand(self.dealer_hand, self.dealer_hand.value)
        self.display.render_player_hand(self.player_hand, self.player_hand.value)
        self.display.render_outcome_message(RESULT_MESSAGES[reason])

        self.events.emit_new(
            OUTCOME_EVENTS[outcome],
            reason=reason.value,
            player_value=self.player_hand.value,
            dealer_value=self.dealer_hand.value,
        )
        self.events.emit_new(EventType.GAME_ENDED, outcome=outcome.value)
        logger.info(
            "%s (%s): player %d, dealer %d",
            outcome, reason.value, self.player_hand.value, self.dealer_hand.value,
        )
