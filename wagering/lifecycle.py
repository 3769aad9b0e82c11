from __future__ import annotations

from typing import Dict

from .errors import StateError
from .models import GameState

# Setup -> Started -> Ended, one step at a time and never back.
_NEXT_STATE: Dict[GameState, GameState] = {
    GameState.SETUP: GameState.STARTED,
    GameState.STARTED: GameState.ENDED,
}


class Lifecycle:
    def __init__(self) -> None:
        self._state = GameState.SETUP

    @property
    def state(self) -> GameState:
        return self._state

    def require(self, expected: GameState, action: str) -> None:
        if self._state != expected:
            raise StateError(f"Cannot {action}: game is {self._state.value}, expected {expected.value}")

    def advance(self, target: GameState) -> None:
        if _NEXT_STATE.get(self._state) != target:
            raise StateError(f"Invalid transition {self._state.value} -> {target.value}")
        self._state = target
