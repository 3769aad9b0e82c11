from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from .cards import Card, Deck, Shuffler, cards_to_labels
from .errors import ConfigError, StateError
from .lifecycle import Lifecycle
from .models import CARDS_PER_FLOP, FtsConfig, GameState, GameType, Transition, flop_scope
from .payout import compute_payout

LOGGER = logging.getLogger("flop_wager.fts")


def find_first_flop(cards: List[Card]) -> Optional[int]:
    """Index of the first three-card group whose suits all match."""
    for idx in range(len(cards) // CARDS_PER_FLOP):
        group = cards[idx * CARDS_PER_FLOP : (idx + 1) * CARDS_PER_FLOP]
        if len({card.suit for card in group}) == 1:
            return idx
    return None


class FtsGame:
    """Flop detection: deal flops until one is single-suited, then settle."""

    def __init__(self, config: FtsConfig, rng: Optional[Shuffler] = None) -> None:
        self.config = config
        self.deck = Deck(rng)
        self._lifecycle = Lifecycle()
        self.max_flop_count = self._derive_flop_count()
        self.flopped_at: Optional[int] = None
        self.dealt: Tuple[Card, ...] = ()

    def _derive_flop_count(self) -> int:
        possible = len(self.deck) // CARDS_PER_FLOP
        scope = max((flop_scope(wager.wager_type) for wager in self.config.all_wagers()), default=0)
        return min(scope, possible)

    @property
    def state(self) -> GameState:
        return self._lifecycle.state

    def variant_kind(self) -> GameType:
        return GameType.FTS

    def ready(self) -> None:
        self._lifecycle.require(GameState.SETUP, "start game")
        self.config.validate()
        if self.max_flop_count == 0:
            raise ConfigError("Game set to perform 0 flops")

    def start(self) -> None:
        self.ready()

        # State only moves once the deal has succeeded.
        self.deck.shuffle()
        cards = self.deck.deal(self.max_flop_count * CARDS_PER_FLOP)
        self.dealt = tuple(cards)
        self.flopped_at = find_first_flop(cards)
        LOGGER.info(
            "FTS dealt %s flops, flopped at %s",
            self.max_flop_count,
            self.flopped_at,
        )
        LOGGER.debug("FTS cards: %s", cards_to_labels(cards))

        # No intermediate play yet; settle immediately.
        self._lifecycle.advance(GameState.STARTED)
        self._lifecycle.advance(GameState.ENDED)

    def transition(self, transition: Transition) -> None:
        if transition not in self.valid_transitions():
            raise StateError(f"Transition {transition} not valid while {self.state.value}")
        if transition == Transition.START:
            self.start()

    def valid_transitions(self) -> List[Transition]:
        if self.state == GameState.SETUP:
            return [Transition.START]
        return []

    def flops(self) -> List[List[Card]]:
        return [
            list(self.dealt[idx : idx + CARDS_PER_FLOP])
            for idx in range(0, len(self.dealt), CARDS_PER_FLOP)
        ]

    def get_payout(self) -> Optional[Dict[str, int]]:
        if self.state != GameState.ENDED:
            return None
        return compute_payout(self.config.wagers, self.config.house_id, self.flopped_at)
