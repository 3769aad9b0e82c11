import random

import pytest

from wagering.cta import CtaGame
from wagering.errors import ConfigError, GameError, StateError
from wagering.game import create_game
from wagering.models import CtaConfig, CtaWager, CtaWagerType, GameState, GameType, Player, Transition


def make_cta(*types: CtaWagerType, house: str = "house") -> CtaConfig:
    return CtaConfig(
        wagers={Player(f"p{idx}"): [CtaWager(wager_type, 10)] for idx, wager_type in enumerate(types)},
        house_id=house,
    )


def test_reverse_wager_enforces_optimal_cut():
    game = CtaGame(make_cta(CtaWagerType.FORWARD, CtaWagerType.REVERSE), random.Random(1))
    assert game.enforce_optimal_cut is True


def test_forward_only_book_skips_cut():
    game = CtaGame(make_cta(CtaWagerType.FORWARD, CtaWagerType.FORWARD), random.Random(1))
    assert game.enforce_optimal_cut is False


def test_factory_selects_variant_by_config():
    game = create_game(make_cta(CtaWagerType.REVERSE), random.Random(1))
    assert isinstance(game, CtaGame)
    assert game.variant_kind() == GameType.CTA
    assert game.valid_transitions() == []


def test_start_refuses_to_deal_until_cut_is_defined():
    game = CtaGame(make_cta(CtaWagerType.REVERSE), random.Random(1))
    before = game.deck.cards
    with pytest.raises(StateError, match="CTA cut procedure undefined"):
        game.start()
    assert game.state == GameState.SETUP
    assert game.deck.cards == before
    assert game.get_payout() is None


def test_start_token_fails_with_game_error():
    game = CtaGame(make_cta(CtaWagerType.REVERSE), random.Random(1))
    assert Transition.START not in game.valid_transitions()
    with pytest.raises(GameError, match="not valid"):
        game.transition(Transition.START)
    assert game.state == GameState.SETUP


def test_start_still_validates_config_first():
    game = CtaGame(make_cta(CtaWagerType.REVERSE, house=""), random.Random(1))
    with pytest.raises(ConfigError, match="House id"):
        game.start()
    assert game.state == GameState.SETUP


def test_unknown_transition_rejected():
    game = CtaGame(make_cta(CtaWagerType.FORWARD), random.Random(1))
    with pytest.raises(StateError, match="not valid"):
        game.transition("CUT")  # type: ignore[arg-type]
