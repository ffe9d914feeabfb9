"""Tests for the stat calculator."""

import pytest

from biscoito.engine.game_state import ActiveEffect, EffectKind, GameState
from biscoito.engine.stats import compute_stats, prestige_multiplier


def _effect(kind: EffectKind, mult: float) -> ActiveEffect:
    return ActiveEffect(kind=kind, label="test", multiplier=mult, end_time=100.0, duration=100.0)


def test_fresh_state_clicks_for_one():
    stats = compute_stats(GameState())
    assert stats.production_rate == 0
    assert stats.click_value == 1


def test_buildings_produce():
    state = GameState(buildings={"cursor": 10, "grandma": 2})
    assert compute_stats(state).production_rate == pytest.approx(3.0)


def test_building_upgrade_doubles_its_building_only():
    state = GameState(
        buildings={"cursor": 10, "grandma": 1},
        upgrades={"cursor_upgrade_0"},
    )
    assert compute_stats(state).production_rate == pytest.approx(2.0 + 1.0)


def test_global_upgrade():
    state = GameState(buildings={"grandma": 100}, upgrades={"global_upgrade_0"})
    assert compute_stats(state).production_rate == pytest.approx(125.0)


def test_heavenly_gates_and_omega():
    state = GameState(buildings={"grandma": 100}, purchased_skills={"heavenly_gates"})
    assert compute_stats(state).production_rate == pytest.approx(110.0)

    state.purchased_skills.add("omega")
    assert compute_stats(state).production_rate == pytest.approx(220.0)


def test_production_branch_sums_tiers():
    state = GameState(buildings={"grandma": 100}, purchased_skills={"prod_1", "prod_2"})
    # 1 + 0.03 + 0.06
    assert compute_stats(state).production_rate == pytest.approx(109.0)


def test_prestige_multiplier():
    state = GameState(prestige_level=10)
    assert prestige_multiplier(state) == pytest.approx(1.1)
    state.purchased_skills.add("cookie_galaxy")
    assert prestige_multiplier(state) == pytest.approx(1.2)


def test_prestige_boosts_production_and_click():
    state = GameState(buildings={"grandma": 100}, prestige_level=10)
    stats = compute_stats(state)
    assert stats.production_rate == pytest.approx(110.0)
    # (1 + 110 * 0.01) * 1.1
    assert stats.click_value == pytest.approx(2.1 * 1.1)


def test_click_value_takes_fraction_of_production():
    state = GameState(buildings={"grandma": 100})
    assert compute_stats(state).click_value == pytest.approx(2.0)

    state.purchased_skills.add("click_god")
    assert compute_stats(state).click_value == pytest.approx(6.0)


def test_click_upgrades_multiply_click():
    state = GameState(upgrades={"click_upgrade_0", "click_upgrade_1"})
    assert compute_stats(state).click_value == pytest.approx(4.0)


def test_production_boost_multiplies_both():
    state = GameState(buildings={"grandma": 100})
    stats = compute_stats(state, [_effect(EffectKind.PRODUCTION_BOOST, 7)])
    assert stats.production_rate == pytest.approx(700.0)
    assert stats.click_value == pytest.approx(14.0)


def test_click_boost_multiplies_click_only():
    state = GameState(buildings={"grandma": 100})
    stats = compute_stats(state, [_effect(EffectKind.CLICK_BOOST, 777)])
    assert stats.production_rate == pytest.approx(100.0)
    assert stats.click_value == pytest.approx(2.0 * 777)


def test_compute_stats_is_pure_and_deterministic():
    state = GameState(
        buildings={"cursor": 13, "farm": 7, "bank": 2},
        upgrades={"farm_upgrade_0", "click_upgrade_0"},
        purchased_skills={"heavenly_gates", "prod_1"},
        prestige_level=3,
    )
    before = (dict(state.buildings), set(state.upgrades))
    assert compute_stats(state) == compute_stats(state)
    assert (state.buildings, state.upgrades) == before
