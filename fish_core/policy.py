"""
Heuristic decision policy for AI seats.

The card choice is an ordered list of preferences tried in turn over the
non-Jack legal moves; Jacks are held back until nothing else is playable.
"""

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .card import Card, Suit
from .rules import WILD_RANK, get_valid_moves, draw_count

Preference = Callable[[Card, Card, Suit], bool]

PREFERENCES: Tuple[Tuple[str, Preference], ...] = (
    ("suit_match", lambda card, top, suit: card.suit == suit),
    ("rank_match", lambda card, top, suit: card.rank == top.rank),
    ("any", lambda card, top, suit: True),
)


class DecisionType(Enum):
    PLAY = "play"
    DRAW = "draw"


@dataclass(frozen=True)
class Decision:
    """A move chosen by the policy. suit is set only when playing a Jack."""
    action: DecisionType
    card: Optional[Card] = None
    suit: Optional[Suit] = None
    draw_count: int = 0


def choose_card(
    hand: List[Card], top_card: Optional[Card], active_suit: Suit, attack_stack: int
) -> Optional[Card]:
    """Pick the card to play, or None when there is no legal move"""
    valid = get_valid_moves(hand, top_card, active_suit, attack_stack)
    if not valid:
        return None

    if attack_stack > 0:
        # only 2s are legal here, any will do
        return valid[0]

    non_jacks = [c for c in valid if c.rank != WILD_RANK]
    for _name, prefer in PREFERENCES:
        preferred = [c for c in non_jacks if prefer(c, top_card, active_suit)]
        if preferred:
            return preferred[0]

    return valid[0]


def choose_suit(hand: List[Card]) -> Suit:
    """
    Most common suit in hand. Ties go to the suit listed first in Suit
    (hearts, diamonds, clubs, spades), which is also the answer for an empty hand.
    """
    counts = Counter(card.suit for card in hand)
    best_suit = Suit.HEARTS
    best_count = -1
    for suit in Suit:
        if counts[suit] > best_count:
            best_suit = suit
            best_count = counts[suit]
    return best_suit


def decide(
    hand: List[Card], top_card: Optional[Card], active_suit: Suit, attack_stack: int
) -> Decision:
    """Full decision for one AI turn"""
    card = choose_card(hand, top_card, active_suit, attack_stack)
    if card is None:
        return Decision(DecisionType.DRAW, draw_count=draw_count(attack_stack))

    suit = None
    if card.rank == WILD_RANK:
        suit = choose_suit([c for c in hand if c.id != card.id])
    return Decision(DecisionType.PLAY, card=card, suit=suit)
