from __future__ import annotations


class GameError(Exception):
    """Base class for every failure raised by the wagering engine."""


class ConfigError(GameError, ValueError):
    pass


class StateError(GameError, RuntimeError):
    pass


class DealError(GameError, ValueError):
    pass
