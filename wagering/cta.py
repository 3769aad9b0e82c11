from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .cards import Deck, Shuffler
from .errors import StateError
from .lifecycle import Lifecycle
from .models import CtaConfig, CtaWagerType, GameState, GameType, Transition

LOGGER = logging.getLogger("flop_wager.cta")


class CtaGame:
    """Reverse-wager game.

    Only the setup policy is settled: any REVERSE wager forces an optimal cut
    before dealing. The cut procedure and the reverse payout table are still
    undefined, so ``start`` validates and then refuses to deal.
    """

    def __init__(self, config: CtaConfig, rng: Optional[Shuffler] = None) -> None:
        self.config = config
        self.deck = Deck(rng)
        self._lifecycle = Lifecycle()
        self.enforce_optimal_cut = any(
            wager.wager_type == CtaWagerType.REVERSE for wager in config.all_wagers()
        )

    @property
    def state(self) -> GameState:
        return self._lifecycle.state

    def variant_kind(self) -> GameType:
        return GameType.CTA

    def ready(self) -> None:
        self._lifecycle.require(GameState.SETUP, "start game")
        self.config.validate()

    def start(self) -> None:
        self.ready()
        LOGGER.warning(
            "CTA start refused (enforce_optimal_cut=%s): cut procedure undefined",
            self.enforce_optimal_cut,
        )
        raise StateError("CTA cut procedure undefined")

    def transition(self, transition: Transition) -> None:
        if transition not in self.valid_transitions():
            raise StateError(f"Transition {transition} not valid while {self.state.value}")

    def valid_transitions(self) -> List[Transition]:
        # START is withheld until the cut procedure exists; start() would refuse it.
        return []

    def get_payout(self) -> Optional[Dict[str, int]]:
        # A CTA game never reaches ENDED until start() can deal.
        return None
