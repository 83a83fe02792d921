"""Playing cards."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Number(Enum):
    """Face value of a card."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        return self.name.capitalize()


class Suit(Enum):
    """Suit of a card."""

    CLUBS = 1
    DIAMONDS = 2
    HEARTS = 3
    SPADES = 4

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Card:
    """A playing card of given number and suit."""

    number: Number
    suit: Suit

    def __str__(self) -> str:
        return f"{self.number} of {self.suit}"