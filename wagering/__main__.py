import argparse
import json
import logging
import random
from typing import List, Optional

from .cards import cards_to_labels
from .errors import GameError
from .fts import FtsGame
from .game import create_game
from .loader import load_config_file

LOGGER = logging.getLogger("flop_wager")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play one round of a flop wager game")
    parser.add_argument("--config", required=True, help="JSON wager book (game, house, wagers)")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed a reproducible shuffle (omit for a system-random shuffle)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log dealt cards and payout details")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    rng = random.Random(args.seed) if args.seed is not None else random.SystemRandom()

    try:
        config = load_config_file(args.config)
        game = create_game(config, rng)
        game.start()
    except GameError as exc:
        LOGGER.error("Round failed: %s", exc)
        return 1

    result = {
        "game": game.variant_kind().value,
        "state": game.state.value,
        "payout": game.get_payout() or {},
    }
    if isinstance(game, FtsGame):
        result["flopped_at"] = game.flopped_at
        result["flops"] = [cards_to_labels(flop) for flop in game.flops()]
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
