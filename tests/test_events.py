"""Tests for the golden cookie and the active effects."""

from unittest.mock import patch

import pytest

from biscoito.engine.effects import ActiveEffects
from biscoito.engine.events import (
    GoldenCookieController,
    lucky_reward,
    roll_kind,
    spawn_interval_base,
)
from biscoito.engine.game_state import EffectKind, GameState, GoldenCookie, GoldenCookieKind
from biscoito.engine.signals import (
    EVENT_GOLDEN_CLICKED,
    EVENT_GOLDEN_EXPIRED,
    EVENT_GOLDEN_SPAWNED,
    EventBus,
)
from biscoito.engine.stats import Stats
from biscoito.engine.store import ProgressionStore


def _controller(bus: EventBus | None = None, roll: float = 0.0) -> GoldenCookieController:
    with patch("biscoito.engine.events.random") as mock_random:
        mock_random.random.return_value = roll
        return GoldenCookieController(bus or EventBus())


def _live(controller: GoldenCookieController, kind: GoldenCookieKind) -> None:
    controller.cookie = GoldenCookie(x=50, y=50, kind=kind, life=13.0)


# ── Rolls and rates ──────────────────────────────────────────────────────────

@pytest.mark.parametrize("roll, kind", [
    (0.0, GoldenCookieKind.LUCKY),
    (0.49, GoldenCookieKind.LUCKY),
    (0.5, GoldenCookieKind.PRODUCTION_FRENZY),
    (0.89, GoldenCookieKind.PRODUCTION_FRENZY),
    (0.95, GoldenCookieKind.CLICK_FRENZY),
])
def test_roll_kind(roll, kind):
    with patch("biscoito.engine.events.random") as mock_random:
        mock_random.random.return_value = roll
        assert roll_kind() == kind


def test_spawn_interval_base():
    assert spawn_interval_base(GameState()) == 120
    assert spawn_interval_base(GameState(purchased_skills={"lucky_stars"})) == 96
    state = GameState(purchased_skills={"luck_1", "luck_2"})
    assert spawn_interval_base(state) == pytest.approx(120 / 1.15)


def test_lucky_reward_is_capped_by_bank():
    state = GameState(cookies=1000)
    stats = Stats(production_rate=10, click_value=1)
    # min(150, 9000) + 13
    assert lucky_reward(state, stats) == pytest.approx(163)


def test_lucky_reward_never_below_thirteen_clicks():
    stats = Stats(production_rate=0, click_value=100)
    assert lucky_reward(GameState(), stats) == pytest.approx(1300)


# ── Spawn / expire ───────────────────────────────────────────────────────────

def test_spawns_once_threshold_reached():
    bus = EventBus()
    spawned = []
    bus.subscribe(EVENT_GOLDEN_SPAWNED, lambda _s, cookie: spawned.append(cookie))
    controller = _controller(bus, roll=0.0)
    state = GameState()

    with patch("biscoito.engine.events.random") as mock_random:
        mock_random.random.return_value = 0.0
        controller.advance(state, 119.0)
        assert not controller.active
        controller.advance(state, 1.0)

    assert controller.active
    assert spawned == [controller.cookie]
    assert controller.cookie.kind == GoldenCookieKind.LUCKY
    assert controller.cookie.x == 10
    assert controller.spawn_timer == 0


def test_never_spawns_before_base_interval():
    controller = _controller(roll=0.99)
    controller.advance(GameState(), 200.0)
    assert not controller.active


def test_unclicked_cookie_expires():
    bus = EventBus()
    expired = []
    bus.subscribe(EVENT_GOLDEN_EXPIRED, lambda _s, cookie: expired.append(cookie))
    controller = _controller(bus)
    _live(controller, GoldenCookieKind.LUCKY)

    controller.advance(GameState(), 12.0)
    assert controller.active
    controller.advance(GameState(), 1.0)
    assert not controller.active
    assert len(expired) == 1


def test_golden_longevity_extends_life():
    controller = _controller(roll=0.0)
    state = GameState(purchased_skills={"golden_longevity"})
    with patch("biscoito.engine.events.random") as mock_random:
        mock_random.random.return_value = 0.0
        cookie = controller.spawn(state)
    assert cookie.life == pytest.approx(13 * 1.3)


def test_dismiss_removes_cookie():
    controller = _controller()
    _live(controller, GoldenCookieKind.LUCKY)
    controller.dismiss()
    assert not controller.active


# ── Clicking ─────────────────────────────────────────────────────────────────

def test_click_without_cookie_does_nothing():
    controller = _controller()
    store = ProgressionStore(GameState(), EventBus())
    assert controller.click(store, ActiveEffects(), Stats(0, 1), now=0.0) is None


def test_lucky_click_credits_cookies():
    bus = EventBus()
    clicked = []
    bus.subscribe(EVENT_GOLDEN_CLICKED, lambda _s, reward: clicked.append(reward))
    controller = _controller(bus)
    store = ProgressionStore(GameState(cookies=1000), bus)
    _live(controller, GoldenCookieKind.LUCKY)

    reward = controller.click(store, ActiveEffects(), Stats(10, 1), now=0.0)

    assert reward.cookies == pytest.approx(163)
    assert store.state.cookies == pytest.approx(1163)
    assert store.state.lifetime_cookies == pytest.approx(163)
    assert clicked == [reward]
    assert not controller.active


def test_frenzy_installs_production_boost():
    controller = _controller()
    effects = ActiveEffects()
    store = ProgressionStore(GameState(), EventBus())
    _live(controller, GoldenCookieKind.PRODUCTION_FRENZY)

    reward = controller.click(store, effects, Stats(10, 1), now=100.0)

    effect = effects.get(EffectKind.PRODUCTION_BOOST)
    assert reward.effect is effect
    assert effect.multiplier == 7
    assert effect.end_time == pytest.approx(177.0)


def test_frenzy_refresh_resets_instead_of_stacking():
    controller = _controller()
    effects = ActiveEffects()
    store = ProgressionStore(GameState(), EventBus())

    _live(controller, GoldenCookieKind.PRODUCTION_FRENZY)
    controller.click(store, effects, Stats(10, 1), now=0.0)
    _live(controller, GoldenCookieKind.PRODUCTION_FRENZY)
    controller.click(store, effects, Stats(10, 1), now=10.0)

    assert len(effects) == 1
    effect = effects.get(EffectKind.PRODUCTION_BOOST)
    assert effect.multiplier == 7
    assert effect.end_time == pytest.approx(87.0)


def test_click_frenzy_with_longevity():
    controller = _controller()
    effects = ActiveEffects()
    store = ProgressionStore(GameState(purchased_skills={"golden_longevity"}), EventBus())
    _live(controller, GoldenCookieKind.CLICK_FRENZY)

    controller.click(store, effects, Stats(10, 1), now=0.0)

    effect = effects.get(EffectKind.CLICK_BOOST)
    assert effect.multiplier == 777
    assert effect.duration == pytest.approx(13 * 1.3)


# ── Effects container ────────────────────────────────────────────────────────

def test_effects_expire():
    effects = ActiveEffects()
    effects.apply(EffectKind.PRODUCTION_BOOST, "Frenzy", 7, 77, now=0.0)
    effects.apply(EffectKind.CLICK_BOOST, "Click Frenzy", 777, 13, now=0.0)

    dropped = effects.expire(13.0)
    assert [e.kind for e in dropped] == [EffectKind.CLICK_BOOST]
    assert [e.kind for e in effects] == [EffectKind.PRODUCTION_BOOST]

    effects.clear()
    assert len(effects) == 0


def test_bus_delivers_sender_and_payload_until_unsubscribed():
    bus = EventBus()
    received = []

    def on_spawn(sender, cookie):
        received.append((sender, cookie))

    bus.subscribe(EVENT_GOLDEN_SPAWNED, on_spawn)
    bus.emit(EVENT_GOLDEN_SPAWNED, cookie="c1")
    bus.unsubscribe(EVENT_GOLDEN_SPAWNED, on_spawn)
    bus.emit(EVENT_GOLDEN_SPAWNED, cookie="c2")
    bus.unsubscribe(EVENT_GOLDEN_EXPIRED, on_spawn)
    assert received == [(bus, "c1")]
