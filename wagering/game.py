from __future__ import annotations

from typing import Dict, List, Optional, Protocol, Union

from .cards import Shuffler
from .cta import CtaGame
from .errors import ConfigError
from .fts import FtsGame
from .models import CtaConfig, FtsConfig, GameState, GameType, Transition

# Games are driven by an outer orchestration layer through this interface
# only. Variants do not share a base class; each owns its outcome type and
# payout table.


class Game(Protocol):
    @property
    def state(self) -> GameState:
        ...

    def variant_kind(self) -> GameType:
        ...

    def start(self) -> None:
        ...

    def transition(self, transition: Transition) -> None:
        ...

    def valid_transitions(self) -> List[Transition]:
        ...

    def get_payout(self) -> Optional[Dict[str, int]]:
        ...


GameConfig = Union[FtsConfig, CtaConfig]


def create_game(config: GameConfig, rng: Optional[Shuffler] = None) -> Game:
    if isinstance(config, FtsConfig):
        return FtsGame(config, rng)
    if isinstance(config, CtaConfig):
        return CtaGame(config, rng)
    raise ConfigError(f"Unsupported game config {type(config).__name__}")
