from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, MutableSequence, Optional, Protocol, Sequence, Tuple

from .errors import DealError

RANKS = "AKQJT98765432"
SUITS = "hdcs"


class Shuffler(Protocol):
    # random.Random, random.SystemRandom and scripted test doubles all fit.
    def shuffle(self, x: MutableSequence) -> None:
        ...


@dataclass(frozen=True)
class Card:
    rank: str
    suit: str

    def __post_init__(self) -> None:
        if self.rank not in RANKS:
            raise ValueError(f"Invalid rank: {self.rank}")
        if self.suit not in SUITS:
            raise ValueError(f"Invalid suit: {self.suit}")

    @property
    def label(self) -> str:
        return f"{self.rank}{self.suit}"


def build_deck() -> List[Card]:
    return [Card(rank, suit) for rank in RANKS[::-1] for suit in SUITS]


class Deck:
    """A single 52-card deck owned by one game instance.

    Shuffling goes through the injected generator only, so a seeded
    ``random.Random`` reproduces a deal and ``random.SystemRandom`` gives an
    unpredictable one.
    """

    def __init__(self, rng: Optional[Shuffler] = None) -> None:
        self._rng: Shuffler = rng if rng is not None else random.SystemRandom()
        self._cards: List[Card] = build_deck()

    def __len__(self) -> int:
        return len(self._cards)

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    def shuffle(self) -> None:
        # Shuffle a copy so a failing generator leaves the order untouched.
        cards = list(self._cards)
        self._rng.shuffle(cards)
        self._cards = cards

    def deal(self, count: int) -> List[Card]:
        if count < 0:
            raise DealError(f"Cannot deal a negative number of cards ({count})")
        if len(self._cards) < count:
            raise DealError(f"Not enough cards left in deck: requested {count}, {len(self._cards)} remaining")
        cards = self._cards[:count]
        del self._cards[:count]
        return cards


def cards_to_labels(cards: Sequence[Card]) -> List[str]:
    return [card.label for card in cards]
