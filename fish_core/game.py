"""
Main Russian Fish game engine
"""

import logging
import random
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Union

from .card import Card, Suit, Rank
from .deck import DECK_SIZE, create_deck, shuffle, draw_cards
from .player import Player, PlayerType, Seat, PLAY_ORDER
from .policy import DecisionType, choose_suit, decide
from .rules import (
    ATTACK_INCREMENT,
    compute_effect,
    draw_count,
    get_valid_moves,
    is_valid_move,
    next_player,
)

logger = logging.getLogger(__name__)

HAND_SIZE = 8
NUM_PLAYERS = len(PLAY_ORDER)
MAX_LOG_ENTRIES = 50


def parse_suit(suit: Union[Suit, str]) -> Optional[Suit]:
    """Suit from a Suit or a suit name; None when it is neither"""
    if isinstance(suit, Suit):
        return suit
    if isinstance(suit, str):
        try:
            return Suit.from_string(suit)
        except ValueError:
            return None
    return None


class GamePhase(Enum):
    """Phases of a Russian Fish game"""
    DEALING = "dealing"
    AWAITING_HUMAN_MOVE = "awaiting_human_move"
    AWAITING_AI_MOVE = "awaiting_ai_move"
    AWAITING_SUIT_CHOICE = "awaiting_suit_choice"
    GAME_OVER = "game_over"


class GameState:
    """Everything on the table for one game"""

    def __init__(self, game_id: str, player_types: Dict[Seat, PlayerType]):
        self.game_id = game_id
        self.phase = GamePhase.DEALING
        self.players: Dict[Seat, Player] = {
            seat: Player(seat, player_types[seat]) for seat in PLAY_ORDER
        }
        self.deck: List[Card] = []
        self.discard_pile: List[Card] = []
        self.current_turn = Seat.SOUTH
        self.active_suit = Suit.SPADES
        self.winner: Optional[Seat] = None

        # Cards owed by the next player, always a multiple of 2
        self.attack_stack = 0
        self.suit_selection_pending = False

        self.log: List[str] = []
        self.announcement: Optional[str] = None

    @property
    def hands(self) -> Dict[Seat, List[Card]]:
        return {seat: player.hand for seat, player in self.players.items()}

    @property
    def top_card(self) -> Optional[Card]:
        return self.discard_pile[-1] if self.discard_pile else None

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    def get_player(self, seat: Seat) -> Player:
        """Get player at a specific seat"""
        return self.players[seat]

    def get_current_player(self) -> Player:
        """Get the player whose turn it is"""
        return self.players[self.current_turn]

    def add_log(self, message: str):
        """Append to the event log, keeping only the most recent entries"""
        self.log.append(message)
        if len(self.log) > MAX_LOG_ENTRIES:
            del self.log[: len(self.log) - MAX_LOG_ENTRIES]

    def all_cards(self) -> List[Card]:
        cards = list(self.deck) + list(self.discard_pile)
        for hand in self.hands.values():
            cards.extend(hand)
        return cards

    def card_count(self) -> int:
        return len(self.all_cards())

    def check_integrity(self) -> bool:
        """True when exactly one copy of each of the 52 cards is on the table"""
        cards = self.all_cards()
        return len(cards) == DECK_SIZE and len({c.id for c in cards}) == DECK_SIZE

    def to_dict(self, include_hands: bool = False, perspective: Optional[Seat] = None) -> Dict[str, Any]:
        """
        Convert game state to dictionary for JSON serialization.

        Args:
            include_hands: Whether to include all player hands
            perspective: If set, only show that seat's hand
        """
        top = self.top_card
        state = {
            "game_id": self.game_id,
            "phase": self.phase.value,
            "deck_size": len(self.deck),
            "discard_size": len(self.discard_pile),
            "top_card": top.to_dict() if top else None,
            "current_turn": self.current_turn.value,
            "active_suit": self.active_suit.value,
            "attack_stack": self.attack_stack,
            "winner": self.winner.value if self.winner else None,
            "suit_selection_pending": self.suit_selection_pending,
            "log": list(self.log),
            "announcement": self.announcement,
            "players": [],
        }

        for seat in PLAY_ORDER:
            player = self.players[seat]
            player_dict = player.to_dict()
            if include_hands or seat == perspective:
                player_dict["hand"] = [card.to_dict() for card in player.hand]
            state["players"].append(player_dict)

        return state


class RussianFishGame:
    """Turn and effect state machine for one table"""

    def __init__(
        self,
        game_id: str,
        human_seats: Iterable[Seat] = (Seat.SOUTH,),
        rng: Optional[random.Random] = None,
    ):
        human_seats = set(human_seats)
        for seat in human_seats:
            if not isinstance(seat, Seat):
                raise ValueError(f"Unknown seat: {seat!r}")

        self.game_id = game_id
        self.rng = rng or random.Random()
        self.player_types = {
            seat: PlayerType.HUMAN if seat in human_seats else PlayerType.HEURISTIC_AI
            for seat in PLAY_ORDER
        }
        self.state = GameState(game_id, self.player_types)

    def start_new_game(self):
        """Throw away the current table and deal a fresh game"""
        self.state = GameState(self.game_id, self.player_types)
        state = self.state

        state.deck = shuffle(create_deck(), self.rng)

        for _ in range(HAND_SIZE):
            for seat in PLAY_ORDER:
                state.players[seat].add_cards([state.deck.pop()])

        start_card = state.deck.pop()
        state.discard_pile = [start_card]
        state.active_suit = start_card.suit

        if start_card.rank == Rank.TWO:
            state.attack_stack = ATTACK_INCREMENT
            state.add_log("Game starts with a 2! First player must play 2 or draw 2.")
        else:
            state.add_log(f"Game Started. Top card: {start_card.describe()}")

        state.current_turn = Seat.SOUTH
        self._update_phase()
        logger.info("Game %s dealt, top card %s", self.game_id, start_card)

    # --- Queries ---

    def get_valid_moves(self, seat: Optional[Seat] = None) -> List[Card]:
        """Legal cards for a seat (default: the current one)"""
        if seat is None:
            seat = self.state.current_turn
        state = self.state
        return get_valid_moves(
            state.players[seat].hand, state.top_card, state.active_suit, state.attack_stack
        )

    def get_state(self, perspective: Optional[Seat] = None) -> Dict[str, Any]:
        """Get game state, optionally from a specific seat's perspective"""
        return self.state.to_dict(include_hands=False, perspective=perspective)

    # --- Intents ---

    def play_card(self, seat: Seat, card_id: str, suit: Union[Suit, str, None] = None) -> Optional[Dict[str, Any]]:
        """
        Play a card from seat's hand.

        A human playing a Jack without naming a suit leaves the game waiting
        for choose_suit. Returns None when the play is rejected.
        """
        if not self._can_act(seat, "play"):
            return None

        if suit is not None:
            suit = parse_suit(suit)
            if suit is None:
                logger.debug("Rejected play by %s: unknown suit", seat)
                return None

        state = self.state
        player = state.players[seat]
        card = player.find_card(card_id)
        if card is None:
            logger.debug("Rejected play by %s: %s not in hand", seat, card_id)
            return None
        if not is_valid_move(card, state.top_card, state.active_suit, state.attack_stack):
            logger.debug("Rejected play by %s: %s is not legal", seat, card)
            return None

        if suit is None and card.rank == Rank.JACK and not player.is_human:
            suit = choose_suit([c for c in player.hand if c.id != card.id])

        return self._apply_play(player, card, suit)

    def draw(self, seat: Seat) -> Optional[Dict[str, Any]]:
        """Draw the owed cards (attack stack, or one) and end the turn"""
        if not self._can_act(seat, "draw"):
            return None
        return self._apply_draw(self.state.players[seat])

    def choose_suit(self, seat: Seat, suit: Union[Suit, str]) -> Optional[Dict[str, Any]]:
        """Name the new active suit after a Jack. Accepts a Suit or its name."""
        state = self.state
        if state.is_over or not state.suit_selection_pending or seat != state.current_turn:
            logger.debug("Rejected suit choice by %s", seat)
            return None

        suit = parse_suit(suit)
        if suit is None:
            logger.debug("Rejected suit choice by %s: unknown suit", seat)
            return None

        player = state.players[seat]
        state.suit_selection_pending = False
        self._resolve_suit(player, suit)
        return {
            "seat": seat.value,
            "suit": suit.value,
            "next_turn": state.current_turn.value,
        }

    def step_ai(self) -> Optional[Dict[str, Any]]:
        """Let the current AI seat take exactly one action"""
        state = self.state
        if state.phase != GamePhase.AWAITING_AI_MOVE:
            return None

        player = state.get_current_player()
        decision = decide(player.hand, state.top_card, state.active_suit, state.attack_stack)

        if decision.action == DecisionType.PLAY:
            return self._apply_play(player, decision.card, decision.suit)
        return self._apply_draw(player, decision.draw_count)

    def run_ai_turns(self, max_iterations: int = 100) -> int:
        """
        Process AI turns until a human has to act or the game is over.
        Returns the number of AI actions taken.
        """
        iterations = 0
        while iterations < max_iterations and self.step_ai() is not None:
            iterations += 1
        return iterations

    # --- Transitions ---

    def _can_act(self, seat: Seat, action: str) -> bool:
        state = self.state
        if state.phase not in (GamePhase.AWAITING_HUMAN_MOVE, GamePhase.AWAITING_AI_MOVE):
            logger.debug("Rejected %s by %s during %s", action, seat, state.phase.value)
            return False
        if seat != state.current_turn:
            logger.debug("Rejected %s by %s: it is %s's turn", action, seat, state.current_turn)
            return False
        return True

    def _apply_play(self, player: Player, card: Card, suit: Optional[Suit]) -> Dict[str, Any]:
        state = self.state
        player.remove_card(card)
        state.discard_pile.append(card)

        result = {
            "card_played": card.to_dict(),
            "seat": player.seat.value,
            "skip": False,
            "attack_stack": state.attack_stack,
            "suit_selection_pending": False,
            "winner": None,
        }

        if self._check_winner():
            state.add_log(f"{player.name} played {card.describe()}.")
            self._announce_winner()
            result["winner"] = state.winner.value
            return result

        effect = compute_effect(card)

        if effect.suit_choice_required:
            if suit is None:
                state.suit_selection_pending = True
                state.announcement = f"{player.name} played Jack! Choose a suit."
                self._update_phase()
                result["suit_selection_pending"] = True
                logger.debug("%s played %s, waiting for suit choice", player.seat, card)
                return result
            self._resolve_suit(player, suit)
            result["suit"] = suit.value
            result["next_turn"] = state.current_turn.value
            return result

        state.active_suit = effect.new_suit
        state.add_log(f"{player.name} played {card.describe()}.")

        if effect.skip:
            state.add_log(f"{player.name} played Ace! Next player skipped.")
            state.announcement = f"{player.name} played Ace! Skipped."
        elif effect.attack_delta:
            state.attack_stack += effect.attack_delta
            state.announcement = f"{player.name} attacked with +{effect.attack_delta}!"
        else:
            state.announcement = None

        self._advance_turn(skip=effect.skip)
        logger.debug("%s played %s", player.seat, card)

        result["skip"] = effect.skip
        result["attack_stack"] = state.attack_stack
        result["next_turn"] = state.current_turn.value
        return result

    def _resolve_suit(self, player: Player, suit: Suit):
        state = self.state
        state.active_suit = suit
        if player.is_human:
            state.add_log(f"{player.name} changed suit to {suit}.")
        else:
            state.add_log(f"{player.name} played Jack and chose {suit}.")
        state.announcement = f"{player.name} chose {suit.symbol}"
        self._advance_turn()
        logger.debug("%s set the active suit to %s", player.seat, suit)

    def _apply_draw(self, player: Player, owed: Optional[int] = None) -> Dict[str, Any]:
        state = self.state
        if owed is None:
            owed = draw_count(state.attack_stack)
        batch = draw_cards(state.deck, state.discard_pile, owed, self.rng)

        state.deck = batch.deck
        state.discard_pile = batch.discard
        player.add_cards(batch.cards)

        if batch.reshuffled:
            state.add_log("Deck reshuffled from discard pile.")

        if state.attack_stack > 0:
            state.add_log(f"{player.name} drew {len(batch.cards)} cards (Attack Penalty).")
            state.attack_stack = 0
        elif batch.cards:
            state.add_log(f"{player.name} drew a card.")
        else:
            state.add_log(f"{player.name} could not draw, no cards left.")
            logger.warning("Game %s: deck and discard pile exhausted", self.game_id)

        logger.debug("%s drew %d of %d", player.seat, len(batch.cards), owed)

        state.announcement = None
        if not self._check_winner():
            self._advance_turn()

        return {
            "seat": player.seat.value,
            "cards_drawn": len(batch.cards),
            "owed": owed,
            "reshuffled": batch.reshuffled,
            "next_turn": state.current_turn.value,
        }

    def _advance_turn(self, skip: bool = False):
        self.state.current_turn = next_player(self.state.current_turn, skip)
        self._update_phase()

    def _check_winner(self) -> bool:
        """Declare the first empty hand the winner; True once the game is over"""
        state = self.state
        if state.winner is None:
            for seat in PLAY_ORDER:
                if not state.players[seat].hand:
                    state.winner = seat
                    break
        self._update_phase()
        return state.winner is not None

    def _announce_winner(self):
        state = self.state
        name = state.players[state.winner].name
        state.add_log(f"{name} won the game!")
        state.announcement = f"{name} won the game!"
        logger.info("Game %s won by %s", self.game_id, state.winner)

    def _update_phase(self):
        state = self.state
        if state.winner is not None:
            state.phase = GamePhase.GAME_OVER
        elif state.suit_selection_pending:
            state.phase = GamePhase.AWAITING_SUIT_CHOICE
        elif state.get_current_player().is_human:
            state.phase = GamePhase.AWAITING_HUMAN_MOVE
        else:
            state.phase = GamePhase.AWAITING_AI_MOVE
