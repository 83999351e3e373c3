"""
Card, Suit and Rank definitions for Russian Fish
"""

from dataclasses import dataclass
from enum import Enum


class Suit(Enum):
    """Card suits, listed in their fixed precedence order"""
    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"

    def __str__(self):
        return self.value

    @property
    def symbol(self) -> str:
        symbols = {
            "hearts": "♥",
            "diamonds": "♦",
            "clubs": "♣",
            "spades": "♠",
        }
        return symbols[self.value]

    @classmethod
    def from_string(cls, s: str) -> "Suit":
        """Create Suit from a name, initial letter or symbol"""
        mapping = {
            "H": cls.HEARTS,
            "D": cls.DIAMONDS,
            "C": cls.CLUBS,
            "S": cls.SPADES,
            "HEARTS": cls.HEARTS,
            "DIAMONDS": cls.DIAMONDS,
            "CLUBS": cls.CLUBS,
            "SPADES": cls.SPADES,
            "♥": cls.HEARTS,
            "♦": cls.DIAMONDS,
            "♣": cls.CLUBS,
            "♠": cls.SPADES,
        }
        key = s.strip().upper()
        if key not in mapping:
            raise ValueError(f"Invalid suit: {s}")
        return mapping[key]


class Rank(Enum):
    """Card ranks (2 through Ace)"""
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    def __str__(self):
        return self.value

    @classmethod
    def from_string(cls, s: str) -> "Rank":
        """Create Rank from string representation"""
        try:
            return cls(s.strip().upper())
        except ValueError:
            raise ValueError(f"Invalid rank: {s}") from None


@dataclass(frozen=True)
class Card:
    """A single playing card. The id is unique within a deck."""
    id: str
    suit: Suit
    rank: Rank

    def __str__(self):
        return f"{self.rank}{self.suit.symbol}"

    def describe(self) -> str:
        """Narrated form used in the event log, e.g. '2 of hearts'"""
        return f"{self.rank} of {self.suit}"

    def to_dict(self):
        return {"id": self.id, "suit": self.suit.value, "rank": self.rank.value}

    @classmethod
    def from_string(cls, s: str, card_id: str = "") -> "Card":
        """
        Create a Card from a string like '2H', '10S', 'JD', 'A♣'.
        The id defaults to the string itself.
        """
        s = s.strip()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank = Rank.from_string(s[:-1])
        suit = Suit.from_string(s[-1])

        return cls(card_id or s, suit, rank)
