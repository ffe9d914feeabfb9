"""Tests for the game session (the player-facing engine surface)."""

import random

import pytest

from biscoito.data.buildings import ALL_BUILDINGS
from biscoito.data.skills import ALL_SKILLS
from biscoito.data.upgrades import ALL_UPGRADES
from biscoito.engine.game_state import EffectKind, GameState, GoldenCookie, GoldenCookieKind
from biscoito.engine.save import MemoryBlobStore, serialize
from biscoito.engine.session import GameSession
from biscoito.engine.signals import EVENT_ASCENDED, EVENT_GAME_RESET


def _session(state: GameState | None = None) -> GameSession:
    return GameSession(state, MemoryBlobStore())


def test_manual_click():
    session = _session()
    assert session.manual_click() == 1
    assert session.state.manual_clicks == 1
    assert "ach_click_0" in session.state.achievements


def test_buy_building_through_session():
    session = _session(GameState(cookies=15))
    assert session.buy_building("cursor")
    assert session.stats().production_rate == pytest.approx(0.1)
    assert "ach_owned_0" in session.state.achievements


def test_golden_frenzy_through_session():
    session = _session(GameState(buildings={"grandma": 10}))
    session.golden.cookie = GoldenCookie(x=50, y=50, kind=GoldenCookieKind.PRODUCTION_FRENZY, life=13)
    reward = session.click_golden_cookie(now=0.0)
    assert reward.kind == GoldenCookieKind.PRODUCTION_FRENZY
    assert session.stats().production_rate == pytest.approx(70.0)
    assert session.click_golden_cookie(now=1.0) is None


def test_ascend_clears_transients_and_saves():
    state = GameState(cookies=10, total_cookies=4e6, lifetime_cookies=4e6, buildings={"cursor": 5})
    session = _session(state)
    gains = []
    session.bus.subscribe(EVENT_ASCENDED, lambda _s, gain: gains.append(gain))
    session.effects.apply(EffectKind.PRODUCTION_BOOST, "Frenzy", 7, 77, now=0.0)
    session.golden.cookie = GoldenCookie(x=50, y=50, kind=GoldenCookieKind.LUCKY, life=13)

    assert session.ascend(now=10.0) == 2

    assert gains == [2]
    assert len(session.effects) == 0
    assert not session.golden.active
    assert session.state.buildings == {}
    assert session.blob_store.blob is not None


def test_failed_ascend_keeps_effects():
    session = _session()
    session.effects.apply(EffectKind.CLICK_BOOST, "Click Frenzy", 777, 13, now=0.0)
    assert session.ascend(now=1.0) == 0
    assert len(session.effects) == 1


def test_reset_game_wipes_everything():
    state = GameState(cookies=1e6, prestige_level=50, purchased_skills={"heavenly_gates"})
    session = _session(state)
    session.save_game(now=0.0)
    resets = []
    session.bus.subscribe(EVENT_GAME_RESET, lambda _s: resets.append(True))

    session.reset_game(now=5.0)

    assert resets == [True]
    assert session.state.cookies == 0
    assert session.state.prestige_level == 0
    assert session.state.purchased_skills == set()
    assert session.blob_store.blob is None


def test_update_bakery_name():
    session = _session()
    assert not session.update_bakery_name("   ")
    assert session.update_bakery_name("  Crumbs  ")
    assert session.state.bakery_name == "Crumbs"
    session.update_bakery_name("x" * 100)
    assert len(session.state.bakery_name) == 32


def test_load_reports_offline_earnings():
    saved = GameState(buildings={"grandma": 10}, last_save_time=0.0)
    session = GameSession.load(MemoryBlobStore(serialize(saved)), now=3600.0)
    assert session.offline_earnings == pytest.approx(18_000)
    assert session.state.cookies == pytest.approx(18_000)


def test_random_play_keeps_invariants():
    rng = random.Random(7)
    session = _session(GameState(cookies=1e5))
    building_ids = list(ALL_BUILDINGS)
    upgrade_ids = list(ALL_UPGRADES)
    skill_ids = list(ALL_SKILLS)

    for step in range(500):
        action = rng.randrange(6)
        if action == 0:
            session.manual_click()
        elif action == 1:
            session.buy_building(rng.choice(building_ids), rng.choice([1, 10]))
        elif action == 2:
            session.buy_upgrade(rng.choice(upgrade_ids))
        elif action == 3:
            session.buy_skill(rng.choice(skill_ids))
        elif action == 4:
            session.progress.credit(rng.random() * 1e7)
        else:
            session.ascend(now=float(step))

        state = session.state
        assert state.cookies >= 0
        assert state.total_cookies <= state.lifetime_cookies
        assert state.prestige_level >= 0
        assert all(count > 0 for count in state.buildings.values())
        assert state.upgrades <= set(ALL_UPGRADES)
