"""Single-round flop wager games: deck, lifecycle and zero-sum payouts."""

from .cards import Card, Deck, RANKS, SUITS, build_deck
from .cta import CtaGame
from .errors import ConfigError, DealError, GameError, StateError
from .fts import FtsGame
from .game import Game, create_game
from .models import (
    AtFlop,
    CtaConfig,
    CtaWager,
    CtaWagerType,
    FlopRange,
    FtsConfig,
    FullDeck,
    GameState,
    GameType,
    Player,
    Transition,
    Wager,
)
from .payout import compute_payout, wager_payout

__all__ = [
    "Card",
    "Deck",
    "RANKS",
    "SUITS",
    "build_deck",
    "CtaGame",
    "ConfigError",
    "DealError",
    "GameError",
    "StateError",
    "FtsGame",
    "Game",
    "create_game",
    "AtFlop",
    "CtaConfig",
    "CtaWager",
    "CtaWagerType",
    "FlopRange",
    "FtsConfig",
    "FullDeck",
    "GameState",
    "GameType",
    "Player",
    "Transition",
    "Wager",
    "compute_payout",
    "wager_payout",
]
