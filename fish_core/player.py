"""
Seats and players for Russian Fish
"""

from enum import Enum
from typing import List, Optional, Tuple
from .card import Card


class Seat(Enum):
    """Table positions. Play moves clockwise: south, west, north, east."""
    SOUTH = "south"
    WEST = "west"
    NORTH = "north"
    EAST = "east"

    def __str__(self):
        return self.value

    @property
    def display_name(self) -> str:
        names = {
            "south": "You",
            "west": "West AI",
            "north": "North AI",
            "east": "East AI",
        }
        return names[self.value]


PLAY_ORDER: Tuple[Seat, ...] = (Seat.SOUTH, Seat.WEST, Seat.NORTH, Seat.EAST)


class PlayerType(Enum):
    """Who makes the decisions for a seat"""
    HUMAN = "human"
    HEURISTIC_AI = "heuristic_ai"


class Player:
    """A seat at the table and the cards it holds"""

    def __init__(self, seat: Seat, player_type: PlayerType, name: Optional[str] = None):
        """
        Initialize a player.

        Args:
            seat: Table position
            player_type: Human or AI
            name: Display name, defaults to the seat's name
        """
        self.seat = seat
        self.player_type = player_type
        self.name = name or seat.display_name
        self.hand: List[Card] = []

    @property
    def is_human(self) -> bool:
        return self.player_type == PlayerType.HUMAN

    def add_cards(self, cards: List[Card]):
        """Add cards to player's hand"""
        self.hand.extend(cards)

    def find_card(self, card_id: str) -> Optional[Card]:
        """Look up a held card by id"""
        for card in self.hand:
            if card.id == card_id:
                return card
        return None

    def remove_card(self, card: Card) -> Card:
        """Remove and return a card from the player's hand"""
        if card not in self.hand:
            raise ValueError(f"Card {card} not in hand")
        self.hand.remove(card)
        return card

    def __str__(self):
        return f"{self.name} ({self.player_type.value})"

    def __repr__(self):
        return f"Player(seat={self.seat}, type={self.player_type}, cards={len(self.hand)})"

    def to_dict(self):
        """Convert player to dictionary for JSON serialization"""
        return {
            "seat": self.seat.value,
            "name": self.name,
            "type": self.player_type.value,
            "hand_size": len(self.hand),
        }
