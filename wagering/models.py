from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence, Tuple, Union

from .errors import ConfigError

DECK_SIZE = 52
CARDS_PER_FLOP = 3
# Number of complete flops a single deck can produce.
MAX_FLOPS = DECK_SIZE // CARDS_PER_FLOP


class GameType(str, Enum):
    FTS = "FTS"
    CTA = "CTA"


class GameState(str, Enum):
    SETUP = "SETUP"
    STARTED = "STARTED"
    ENDED = "ENDED"


class Transition(str, Enum):
    START = "START"


@dataclass(frozen=True)
class Player:
    id: str

    @classmethod
    def parse(cls, value: object) -> "Player":
        """Build a player from a bare string scalar such as ``"p1"``."""
        if not isinstance(value, str):
            raise ConfigError(f"Player id must be a string, got {type(value).__name__}")
        if not value.strip():
            raise ConfigError("Player id must not be empty")
        return cls(value)


# FTS wager types -----------------------------------------------------


@dataclass(frozen=True)
class FullDeck:
    pass


@dataclass(frozen=True)
class AtFlop:
    position: int


@dataclass(frozen=True)
class FlopRange:
    start: int
    end: int


WagerType = Union[FullDeck, AtFlop, FlopRange]


@dataclass(frozen=True)
class Wager:
    wager_type: WagerType
    amount: int


def flop_scope(wager_type: WagerType) -> int:
    """Number of leading flops that must be dealt to settle this wager type."""
    if isinstance(wager_type, FullDeck):
        return MAX_FLOPS
    if isinstance(wager_type, AtFlop) and isinstance(wager_type.position, int):
        return max(wager_type.position + 1, 0)
    if isinstance(wager_type, FlopRange) and isinstance(wager_type.end, int):
        return max(wager_type.end + 1, 0)
    # Malformed types are reported by validate(); they add no scope.
    return 0


def _check_index(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name} must be an integer, got {value!r}")


def _check_wager_type(wager_type: object) -> None:
    if isinstance(wager_type, FullDeck):
        return
    if isinstance(wager_type, AtFlop):
        _check_index("flop position", wager_type.position)
        if not 0 <= wager_type.position < MAX_FLOPS:
            raise ConfigError(f"flop position {wager_type.position} outside 0..{MAX_FLOPS - 1}")
        return
    if isinstance(wager_type, FlopRange):
        _check_index("range start", wager_type.start)
        _check_index("range end", wager_type.end)
        if wager_type.start > wager_type.end:
            raise ConfigError(f"range start {wager_type.start} is after end {wager_type.end}")
        if wager_type.start < 0 or wager_type.end >= MAX_FLOPS:
            raise ConfigError(
                f"range {wager_type.start}..{wager_type.end} outside 0..{MAX_FLOPS - 1}"
            )
        return
    raise ConfigError(f"unsupported wager type {wager_type!r}")


# CTA wager types -----------------------------------------------------


class CtaWagerType(str, Enum):
    FORWARD = "FORWARD"
    REVERSE = "REVERSE"


@dataclass(frozen=True)
class CtaWager:
    wager_type: CtaWagerType
    amount: int


# Configs -------------------------------------------------------------

AnyWager = Union[Wager, CtaWager]
WagerBook = Mapping[Player, Tuple[Wager, ...]]


def _freeze_book(wagers: Mapping[Player, Sequence[AnyWager]]) -> Mapping[Player, Tuple[AnyWager, ...]]:
    return MappingProxyType({player: tuple(items) for player, items in wagers.items()})


def _check_amount(amount: object) -> None:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ConfigError(f"amount must be an integer, got {amount!r}")
    if amount <= 0:
        raise ConfigError(f"amount must be positive, got {amount}")


def _check_book(house_id: str, wagers: Mapping[Player, Tuple[AnyWager, ...]], wager_cls: type) -> None:
    if not isinstance(house_id, str) or not house_id.strip():
        raise ConfigError("House id must not be empty")
    for player, items in wagers.items():
        if not isinstance(player, Player):
            raise ConfigError(f"Wager book key {player!r} is not a Player")
        if player.id == house_id:
            raise ConfigError(f"Player id {player.id!r} collides with the house id")
        for idx, wager in enumerate(items):
            try:
                if not isinstance(wager, wager_cls):
                    raise ConfigError(f"expected {wager_cls.__name__}, got {type(wager).__name__}")
                _check_amount(wager.amount)
                if wager_cls is Wager:
                    _check_wager_type(wager.wager_type)
                elif not isinstance(wager.wager_type, CtaWagerType):
                    raise ConfigError(f"unsupported wager type {wager.wager_type!r}")
            except ConfigError as exc:
                raise ConfigError(f"Invalid wager {player.id}[{idx}]: {exc}") from exc


@dataclass(frozen=True)
class FtsConfig:
    wagers: WagerBook
    house_id: str
    game_type: GameType = field(default=GameType.FTS, init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "wagers", _freeze_book(self.wagers))

    def all_wagers(self) -> Iterable[Wager]:
        for items in self.wagers.values():
            yield from items

    def validate(self) -> None:
        _check_book(self.house_id, self.wagers, Wager)


@dataclass(frozen=True)
class CtaConfig:
    wagers: Mapping[Player, Tuple[CtaWager, ...]]
    house_id: str
    game_type: GameType = field(default=GameType.CTA, init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "wagers", _freeze_book(self.wagers))

    def all_wagers(self) -> Iterable[CtaWager]:
        for items in self.wagers.values():
            yield from items

    def validate(self) -> None:
        _check_book(self.house_id, self.wagers, CtaWager)
