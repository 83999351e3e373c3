"""
Move legality, turn order and card effects.

Everything here is pure: no function touches game state, so the rules can
be checked on their own and the state machine only has to apply results.
"""

from dataclasses import dataclass
from typing import List, Optional

from .card import Card, Suit, Rank
from .player import Seat, PLAY_ORDER

ATTACK_INCREMENT = 2

ATTACK_RANK = Rank.TWO
SKIP_RANK = Rank.ACE
WILD_RANK = Rank.JACK


def is_valid_move(
    card: Card, top_card: Optional[Card], active_suit: Suit, attack_stack: int
) -> bool:
    """
    Decide whether card may be played.

    Under attack only a 2 may be played. Otherwise a Jack is always legal
    and any other card must match the active suit or the top card's rank.
    """
    if top_card is None:
        return False

    if attack_stack > 0:
        return card.rank == ATTACK_RANK

    if card.rank == WILD_RANK:
        return True

    # active_suit may differ from top_card.suit after a Jack
    return card.suit == active_suit or card.rank == top_card.rank


def get_valid_moves(
    hand: List[Card], top_card: Optional[Card], active_suit: Suit, attack_stack: int
) -> List[Card]:
    """Legal cards from hand, in hand order"""
    return [c for c in hand if is_valid_move(c, top_card, active_suit, attack_stack)]


def next_player(current: Seat, skip: bool = False) -> Seat:
    """Seat after current in play order; two steps on when skipping"""
    steps = 2 if skip else 1
    idx = PLAY_ORDER.index(current)
    return PLAY_ORDER[(idx + steps) % len(PLAY_ORDER)]


def draw_count(attack_stack: int) -> int:
    """Cards owed by a player who draws instead of playing"""
    return attack_stack if attack_stack > 0 else 1


@dataclass(frozen=True)
class CardEffect:
    """
    What playing a card does to the table.

    new_suit is None when the player must pick the suit (Jack).
    """
    new_suit: Optional[Suit]
    skip: bool = False
    attack_delta: int = 0
    suit_choice_required: bool = False


def compute_effect(card: Card) -> CardEffect:
    """Effect of playing card, independent of who played it"""
    if card.rank == WILD_RANK:
        return CardEffect(new_suit=None, suit_choice_required=True)
    if card.rank == SKIP_RANK:
        return CardEffect(new_suit=card.suit, skip=True)
    if card.rank == ATTACK_RANK:
        return CardEffect(new_suit=card.suit, attack_delta=ATTACK_INCREMENT)
    return CardEffect(new_suit=card.suit)
