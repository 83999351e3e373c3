"""
Russian Fish Core Game Engine
"""

from .card import Card, Suit, Rank
from .deck import create_deck, shuffle, draw_one, draw_cards, DrawResult, DrawBatch
from .player import Player, PlayerType, Seat, PLAY_ORDER
from .rules import is_valid_move, get_valid_moves, next_player, compute_effect, CardEffect
from .policy import Decision, DecisionType, choose_card, choose_suit, decide
from .game import RussianFishGame, GameState, GamePhase, HAND_SIZE

__version__ = "0.1.0"

__all__ = [
    "Card",
    "Suit",
    "Rank",
    "create_deck",
    "shuffle",
    "draw_one",
    "draw_cards",
    "DrawResult",
    "DrawBatch",
    "Player",
    "PlayerType",
    "Seat",
    "PLAY_ORDER",
    "is_valid_move",
    "get_valid_moves",
    "next_player",
    "compute_effect",
    "CardEffect",
    "Decision",
    "DecisionType",
    "choose_card",
    "choose_suit",
    "decide",
    "RussianFishGame",
    "GameState",
    "GamePhase",
    "HAND_SIZE",
]
