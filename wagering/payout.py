from __future__ import annotations

import logging
from typing import Dict, Optional

from .models import MAX_FLOPS, AtFlop, FlopRange, FullDeck, Wager, WagerBook

LOGGER = logging.getLogger("flop_wager.payout")

# Payouts are pure functions of the wager book and the flop index; nothing
# here touches a deck or a game instance.


def wager_payout(wager: Wager, flopped_at: Optional[int]) -> int:
    """Signed amount one wager wins (positive) or loses (negative)."""
    wager_type = wager.wager_type
    amount = wager.amount

    if isinstance(wager_type, FullDeck):
        if flopped_at is None:
            return -amount * MAX_FLOPS
        return amount * (MAX_FLOPS - flopped_at)

    if isinstance(wager_type, AtFlop):
        if flopped_at is not None and flopped_at == wager_type.position:
            return amount * MAX_FLOPS
        return -amount

    if isinstance(wager_type, FlopRange):
        width = wager_type.end - wager_type.start + 1
        if flopped_at is not None and wager_type.start <= flopped_at <= wager_type.end:
            return amount * (MAX_FLOPS - (flopped_at - wager_type.start))
        return -amount * width

    raise ValueError(f"Unsupported wager type {wager_type!r}")


def compute_payout(wagers: WagerBook, house_id: str, flopped_at: Optional[int]) -> Optional[Dict[str, int]]:
    """Net each player's wagers and balance them against the house.

    Players and the house are omitted when they net to zero; an empty result
    is reported as ``None``.
    """
    payouts: Dict[str, int] = {}
    house_total = 0

    for player, items in wagers.items():
        player_total = 0
        for wager in items:
            amount = wager_payout(wager, flopped_at)
            player_total += amount
            house_total -= amount
        if player_total != 0:
            payouts[player.id] = player_total

    if house_total != 0:
        payouts[house_id] = house_total

    LOGGER.debug("Payout for flop %s: %s", flopped_at, payouts)
    return payouts or None
