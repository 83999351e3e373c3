"""
Deck construction, shuffling and the draw/reshuffle engine
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from .card import Card, Suit, Rank

logger = logging.getLogger(__name__)

DECK_SIZE = 52


def create_deck() -> List[Card]:
    """
    Build the ordered 52-card deck, one card per (suit, rank) pair.
    Ids run card-0 .. card-51 in suit then rank order.
    """
    cards = []
    for suit in Suit:
        for rank in Rank:
            cards.append(Card(f"card-{len(cards)}", suit, rank))
    return cards


def shuffle(cards: List[Card], rng: Optional[random.Random] = None) -> List[Card]:
    """
    Return a new list with the same cards in uniformly random order
    (Fisher-Yates, walking down from the end). The input is not modified.
    """
    rng = rng or random
    shuffled = list(cards)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


@dataclass
class DrawResult:
    """Outcome of drawing a single card. card is None when both piles are exhausted."""
    card: Optional[Card]
    deck: List[Card]
    discard: List[Card]
    reshuffled: bool = False


@dataclass
class DrawBatch:
    """Outcome of drawing several cards in sequence"""
    cards: List[Card] = field(default_factory=list)
    deck: List[Card] = field(default_factory=list)
    discard: List[Card] = field(default_factory=list)
    reshuffled: bool = False


def draw_one(
    deck: List[Card], discard: List[Card], rng: Optional[random.Random] = None
) -> DrawResult:
    """
    Take the top card of the deck (the end of the list).

    When the deck is empty, everything under the top discard is shuffled
    into a new deck and the discard pile is reduced to that top card.
    With an empty deck and at most one discard there is nothing to draw.
    """
    new_deck = list(deck)
    new_discard = list(discard)
    reshuffled = False

    if not new_deck:
        if len(new_discard) <= 1:
            return DrawResult(None, new_deck, new_discard, False)

        top_card = new_discard[-1]
        new_deck = shuffle(new_discard[:-1], rng)
        new_discard = [top_card]
        reshuffled = True
        logger.info("Reshuffled %d discards into a new deck", len(new_deck))

    card = new_deck.pop()
    return DrawResult(card, new_deck, new_discard, reshuffled)


def draw_cards(
    deck: List[Card],
    discard: List[Card],
    count: int,
    rng: Optional[random.Random] = None,
) -> DrawBatch:
    """
    Draw up to count cards, reshuffling as needed.
    Stops early without error once nothing more can be drawn.
    """
    batch = DrawBatch(deck=list(deck), discard=list(discard))

    for _ in range(count):
        result = draw_one(batch.deck, batch.discard, rng)
        batch.deck = result.deck
        batch.discard = result.discard
        batch.reshuffled = batch.reshuffled or result.reshuffled
        if result.card is None:
            logger.debug("Draw supply exhausted after %d cards", len(batch.cards))
            break
        batch.cards.append(result.card)

    return batch
