from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Union

from .errors import ConfigError
from .models import (
    AtFlop,
    CtaConfig,
    CtaWager,
    CtaWagerType,
    FlopRange,
    FtsConfig,
    FullDeck,
    GameType,
    Player,
    Wager,
)

# Reads the JSON wager document:
#   {"game": "FTS", "house": "house",
#    "wagers": {"p1": [{"type": "at_flop", "position": 3, "amount": 50}]}}


def _field(raw: Dict[str, Any], name: str) -> Any:
    if name not in raw:
        raise ConfigError(f"Wager missing '{name}'")
    return raw[name]


def _parse_fts_wager(raw: Dict[str, Any]) -> Wager:
    kind = _field(raw, "type")
    amount = _field(raw, "amount")
    if kind == "full_deck":
        return Wager(FullDeck(), amount)
    if kind == "at_flop":
        return Wager(AtFlop(_field(raw, "position")), amount)
    if kind == "flop_range":
        return Wager(FlopRange(_field(raw, "start"), _field(raw, "end")), amount)
    raise ConfigError(f"Unknown FTS wager type {kind!r}")


def _parse_cta_wager(raw: Dict[str, Any]) -> CtaWager:
    kind = _field(raw, "type")
    amount = _field(raw, "amount")
    try:
        wager_type = CtaWagerType(str(kind).upper())
    except ValueError:
        raise ConfigError(f"Unknown CTA wager type {kind!r}") from None
    return CtaWager(wager_type, amount)


def load_config(data: Dict[str, Any]) -> Union[FtsConfig, CtaConfig]:
    if not isinstance(data, dict):
        raise ConfigError("Config must be a JSON object")

    try:
        game_type = GameType(str(data.get("game", GameType.FTS.value)).upper())
    except ValueError:
        raise ConfigError(f"Unknown game {data.get('game')!r}") from None

    house = data.get("house")
    if not isinstance(house, str) or not house.strip():
        raise ConfigError("Config requires a 'house' id")

    raw_wagers = data.get("wagers")
    if not isinstance(raw_wagers, dict):
        raise ConfigError("Config requires a 'wagers' object keyed by player id")

    parse = _parse_fts_wager if game_type == GameType.FTS else _parse_cta_wager
    wagers: Dict[Player, List[Any]] = {}
    for player_id, items in raw_wagers.items():
        player = Player.parse(player_id)
        if not isinstance(items, list):
            raise ConfigError(f"Wagers for {player.id} must be a list")
        parsed = []
        for idx, raw in enumerate(items):
            if not isinstance(raw, dict):
                raise ConfigError(f"Invalid wager {player.id}[{idx}]: expected an object")
            try:
                parsed.append(parse(raw))
            except ConfigError as exc:
                raise ConfigError(f"Invalid wager {player.id}[{idx}]: {exc}") from exc
        wagers[player] = parsed

    if game_type == GameType.FTS:
        return FtsConfig(wagers=wagers, house_id=house)
    return CtaConfig(wagers=wagers, house_id=house)


def load_config_file(path: Union[str, Path]) -> Union[FtsConfig, CtaConfig]:
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config {path} is not valid JSON: {exc}") from exc
    return load_config(data)
