"""Progression store: owns the GameState and every mutation of it.

Each operation checks its preconditions first and leaves the state untouched
when they fail. Successful mutations end with an achievement scan.
"""

from __future__ import annotations

import logging
import time

from biscoito.data.balance import BALANCE
from biscoito.engine import economy, prestige
from biscoito.engine.achievements import scan_achievements
from biscoito.engine.game_state import GameState
from biscoito.engine.signals import (
    EVENT_ACHIEVEMENT_UNLOCKED,
    EVENT_ASCENDED,
    EVENT_GAME_RESET,
    EventBus,
)

logger = logging.getLogger(__name__)


class ProgressionStore:
    """Mutable game state behind a controlled interface."""

    def __init__(self, state: GameState, bus: EventBus) -> None:
        self._state = state
        self._bus = bus

    @property
    def state(self) -> GameState:
        return self._state

    # ── Purchases ────────────────────────────────────────

    def buy_building(self, building_id: str, quantity: int = 1) -> bool:
        if not economy.buy_building(self._state, building_id, quantity):
            return False
        self.check_achievements()
        return True

    def buy_upgrade(self, upgrade_id: str) -> bool:
        if not economy.buy_upgrade(self._state, upgrade_id):
            return False
        self.check_achievements()
        return True

    def buy_skill(self, skill_id: str) -> bool:
        if not prestige.buy_skill(self._state, skill_id):
            return False
        self.check_achievements()
        return True

    # ── Earning ──────────────────────────────────────────

    def manual_click(self, click_value: float) -> float:
        earned = economy.manual_click(self._state, click_value)
        self.check_achievements()
        return earned

    def credit(self, amount: float) -> None:
        """Add cookies from any source (production, golden cookies, offline)."""
        self._state.credit(amount)
        self.check_achievements()

    # ── Resets ───────────────────────────────────────────

    def ascend(self, now: float | None = None) -> int:
        gain = prestige.perform_ascension(self._state, now)
        if gain <= 0:
            return 0
        self.check_achievements()
        self._bus.emit(EVENT_ASCENDED, gain=gain)
        return gain

    def reset_game(self, now: float | None = None) -> None:
        """Wipe everything, crystals and skills included. Irreversible."""
        now = time.time() if now is None else now
        self._state = prestige.new_game_state(now)
        logger.info("Game reset to epoch zero")
        self._bus.emit(EVENT_GAME_RESET)

    # ── Cosmetic ─────────────────────────────────────────

    def update_bakery_name(self, name: str) -> bool:
        cleaned = name.strip()[: BALANCE.prestige.max_bakery_name_length].strip()
        if not cleaned:
            return False
        self._state.bakery_name = cleaned
        return True

    # ── Achievements ─────────────────────────────────────

    def check_achievements(self) -> list[str]:
        unlocked = scan_achievements(self._state)
        for aid in unlocked:
            logger.info("Achievement unlocked: %s", aid)
            self._bus.emit(EVENT_ACHIEVEMENT_UNLOCKED, achievement_id=aid)
        return unlocked
