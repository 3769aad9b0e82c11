from __future__ import annotations

from typing import Dict, List, MutableSequence, Optional, Sequence

from wagering.cards import SUITS, Card, build_deck
from wagering.fts import FtsGame
from wagering.models import FtsConfig, Player, Wager

HOUSE = "house"


class ScriptedShuffler:
    """Stands in for random.Random: 'shuffles' the deck into a fixed order."""

    def __init__(self, order: Sequence[Card]) -> None:
        self.order = list(order)
        self.calls = 0

    def shuffle(self, x: MutableSequence) -> None:
        assert sorted(x, key=lambda c: c.label) == sorted(self.order, key=lambda c: c.label)
        self.calls += 1
        x[:] = self.order


def arrange_deck(flop_at: Optional[int]) -> List[Card]:
    """Order all 52 cards so the first single-suited flop sits at ``flop_at``.

    With ``flop_at=None`` none of the 17 dealt flops is single-suited.
    """
    pools: Dict[str, List[Card]] = {suit: [] for suit in SUITS}
    for card in build_deck():
        pools[card.suit].append(card)

    reserved: List[Card] = []
    if flop_at is not None:
        reserved = [pools["h"].pop() for _ in range(3)]

    order: List[Card] = []
    for idx in range(17):
        if idx == flop_at:
            order.extend(reserved)
            continue
        # Two different suits per group keeps every other flop mixed.
        first, second = sorted(SUITS, key=lambda s: len(pools[s]), reverse=True)[:2]
        group = [pools[first].pop(), pools[second].pop()]
        third = max(SUITS, key=lambda s: len(pools[s]))
        group.append(pools[third].pop())
        order.extend(group)

    for suit in SUITS:
        order.extend(pools[suit])
    assert len(order) == 52
    return order


def make_config(wagers: Dict[str, List[Wager]], house: str = HOUSE) -> FtsConfig:
    return FtsConfig(wagers={Player(pid): items for pid, items in wagers.items()}, house_id=house)


def play(wagers: Dict[str, List[Wager]], flop_at: Optional[int]) -> FtsGame:
    game = FtsGame(make_config(wagers), rng=ScriptedShuffler(arrange_deck(flop_at)))
    game.start()
    return game
