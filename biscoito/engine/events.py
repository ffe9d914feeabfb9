"""Events: the Golden Cookie.

Lifecycle: dormant → spawned → (clicked | expired) → dormant. At most one
golden cookie is alive at a time.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from biscoito.data.balance import BALANCE
from biscoito.data.skills import GOLDEN_LONGEVITY, LUCK_NODES, LUCKY_STARS
from biscoito.engine.effects import ActiveEffects
from biscoito.engine.game_state import (
    ActiveEffect,
    EffectKind,
    GameState,
    GoldenCookie,
    GoldenCookieKind,
)
from biscoito.engine.signals import (
    EVENT_GOLDEN_CLICKED,
    EVENT_GOLDEN_EXPIRED,
    EVENT_GOLDEN_SPAWNED,
    EventBus,
)
from biscoito.engine.stats import Stats
from biscoito.engine.store import ProgressionStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GoldenReward:
    """What clicking a golden cookie gave."""

    kind: GoldenCookieKind
    cookies: float = 0.0
    effect: ActiveEffect | None = None


def longevity_multiplier(state: GameState) -> float:
    if state.has_skill(GOLDEN_LONGEVITY):
        return BALANCE.skills.golden_longevity_mult
    return 1.0


def spawn_interval_base(state: GameState) -> float:
    """Shortest wait between spawns; the actual wait is up to twice this."""
    bal = BALANCE.events
    base = bal.golden_lucky_stars_interval_s if state.has_skill(LUCKY_STARS) else bal.golden_base_interval_s
    luck = 1.0 + sum(
        node.tier * BALANCE.skills.luck_bonus_per_tier
        for node in LUCK_NODES
        if state.has_skill(node.id)
    )
    return base / luck


def roll_kind() -> GoldenCookieKind:
    bal = BALANCE.events
    roll = random.random()
    if roll < bal.lucky_weight:
        return GoldenCookieKind.LUCKY
    if roll < bal.lucky_weight + bal.production_frenzy_weight:
        return GoldenCookieKind.PRODUCTION_FRENZY
    return GoldenCookieKind.CLICK_FRENZY


def lucky_reward(state: GameState, stats: Stats) -> float:
    """min(15% of bank, 900 s of production) + 13, never below 13 clicks."""
    bal = BALANCE.events
    gain = min(
        state.cookies * bal.lucky_bank_fraction,
        stats.production_rate * bal.lucky_production_seconds,
    ) + bal.lucky_flat_bonus
    return max(gain, stats.click_value * bal.lucky_click_floor)


class GoldenCookieController:
    """Spawns, decays and resolves golden cookies."""

    def __init__(self, bus: EventBus) -> None:
        self._bus = bus
        self.cookie: GoldenCookie | None = None
        self.spawn_timer: float = 0.0
        # Randomised part of the current spawn window, drawn once per cycle
        self._spawn_jitter: float = random.random()

    @property
    def active(self) -> bool:
        return self.cookie is not None

    def spawn_threshold(self, state: GameState) -> float:
        base = spawn_interval_base(state)
        return base + self._spawn_jitter * base

    def advance(self, state: GameState, elapsed: float) -> None:
        """Decay the live cookie and maybe spawn a new one."""
        if self.cookie is not None:
            self.cookie.life -= elapsed
            if self.cookie.life <= 0:
                expired, self.cookie = self.cookie, None
                logger.debug("Golden cookie expired unclicked")
                self._bus.emit(EVENT_GOLDEN_EXPIRED, cookie=expired)

        self.spawn_timer += elapsed
        if self.cookie is None and self.spawn_timer >= self.spawn_threshold(state):
            self.spawn(state)

    def spawn(self, state: GameState) -> GoldenCookie:
        bal = BALANCE.events
        span = bal.golden_max_position - bal.golden_min_position
        self.cookie = GoldenCookie(
            x=bal.golden_min_position + random.random() * span,
            y=bal.golden_min_position + random.random() * span,
            kind=roll_kind(),
            life=bal.golden_lifetime_s * longevity_multiplier(state),
        )
        self.spawn_timer = 0.0
        self._spawn_jitter = random.random()
        logger.debug("Golden cookie spawned: %s", self.cookie.kind.name)
        self._bus.emit(EVENT_GOLDEN_SPAWNED, cookie=self.cookie)
        return self.cookie

    def click(
        self,
        store: ProgressionStore,
        effects: ActiveEffects,
        stats: Stats,
        now: float,
    ) -> GoldenReward | None:
        """Resolve a click on the live cookie. None if there is none."""
        if self.cookie is None:
            return None

        cookie, self.cookie = self.cookie, None
        state = store.state
        bal = BALANCE.events
        longevity = longevity_multiplier(state)

        if cookie.kind == GoldenCookieKind.LUCKY:
            gain = lucky_reward(state, stats)
            store.credit(gain)
            reward = GoldenReward(kind=cookie.kind, cookies=gain)
        elif cookie.kind == GoldenCookieKind.PRODUCTION_FRENZY:
            effect = effects.apply(
                EffectKind.PRODUCTION_BOOST,
                f"Frenzy (x{bal.frenzy_multiplier:g})",
                bal.frenzy_multiplier,
                bal.frenzy_duration_s * longevity,
                now,
            )
            reward = GoldenReward(kind=cookie.kind, effect=effect)
        else:
            effect = effects.apply(
                EffectKind.CLICK_BOOST,
                f"Click Frenzy (x{bal.click_frenzy_multiplier:g})",
                bal.click_frenzy_multiplier,
                bal.click_frenzy_duration_s * longevity,
                now,
            )
            reward = GoldenReward(kind=cookie.kind, effect=effect)

        logger.debug("Golden cookie clicked: %s", cookie.kind.name)
        self._bus.emit(EVENT_GOLDEN_CLICKED, reward=reward)
        return reward

    def dismiss(self) -> None:
        """Remove any live cookie and restart the spawn cycle, without reward."""
        self.cookie = None
        self.spawn_timer = 0.0
        self._spawn_jitter = random.random()
