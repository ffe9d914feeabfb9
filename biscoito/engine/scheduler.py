"""Tick scheduler: the fixed-interval loop that drives passive income.

Every tick: clamp elapsed time, expire effects, recompute stats, accrue
production, let the golden cookie decay/spawn, and autosave when due.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable

from biscoito.data.balance import BALANCE
from biscoito.engine.session import GameSession
from biscoito.engine.signals import EVENT_EFFECT_EXPIRED

logger = logging.getLogger(__name__)


class TickScheduler:
    """Advances a GameSession in wall-clock time."""

    def __init__(
        self,
        session: GameSession,
        clock: Callable[[], float] = time.time,
        interval: float = BALANCE.ticks.interval_s,
    ) -> None:
        self.session = session
        self.interval = interval
        self._clock = clock
        self._last_tick: float = clock()
        self.autosave_timer: float = 0.0
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def tick(self, now: float | None = None) -> float:
        """Run one simulation step. Returns cookies earned."""
        now = self._clock() if now is None else now
        bal = BALANCE.ticks
        session = self.session

        # Clock skew goes to 0, long suspensions to the cap
        elapsed = min(max(0.0, now - self._last_tick), bal.max_elapsed_s)
        self._last_tick = now

        for effect in session.effects.expire(now):
            session.bus.emit(EVENT_EFFECT_EXPIRED, effect=effect)

        stats = session.stats()
        earned = stats.production_rate * elapsed
        session.progress.credit(earned)

        session.golden.advance(session.state, elapsed)

        self.autosave_timer += elapsed
        if self.autosave_timer >= bal.autosave_interval_s:
            session.save_game(now)
            self.autosave_timer = 0.0

        return earned

    async def run(self) -> None:
        while True:
            try:
                self.tick()
            except Exception:
                logger.exception("Tick failed; scheduler stopping")
                raise
            await asyncio.sleep(self.interval)

    def start(self) -> None:
        """Start ticking on the running event loop."""
        if self.running:
            return
        self._last_tick = self._clock()
        self._task = asyncio.get_running_loop().create_task(self.run())
        logger.debug("Tick scheduler started (%.2fs)", self.interval)

    def stop(self) -> None:
        """Cancel the loop; no tick runs after this returns."""
        if self._task is not None:
            self._task.cancel()
            self._task = None
            logger.debug("Tick scheduler stopped")
