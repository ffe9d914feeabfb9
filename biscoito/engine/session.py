"""Game session: the player-facing surface of the engine.

Bundles the progression store, the active effects, the golden cookie and the
save slot, and coordinates the operations that touch more than one of them.
Hosts (the Textual app, tests) talk to this object only.
"""

from __future__ import annotations

import logging
import time

from biscoito.engine.effects import ActiveEffects
from biscoito.engine.events import GoldenCookieController, GoldenReward
from biscoito.engine.game_state import GameState
from biscoito.engine.prestige import new_game_state
from biscoito.engine.save import BlobStore, FileBlobStore, delete_save, load_game, save_game
from biscoito.engine.signals import EVENT_GAME_SAVED, EventBus
from biscoito.engine.stats import Stats, compute_stats
from biscoito.engine.store import ProgressionStore

logger = logging.getLogger(__name__)


class GameSession:
    """One running bakery."""

    def __init__(
        self,
        state: GameState | None = None,
        blob_store: BlobStore | None = None,
        bus: EventBus | None = None,
    ) -> None:
        self.bus = bus if bus is not None else EventBus()
        self.progress = ProgressionStore(state if state is not None else new_game_state(), self.bus)
        self.effects = ActiveEffects()
        self.golden = GoldenCookieController(self.bus)
        self.blob_store: BlobStore = blob_store if blob_store is not None else FileBlobStore()
        self.offline_earnings: float = 0.0

    @classmethod
    def load(
        cls,
        blob_store: BlobStore | None = None,
        bus: EventBus | None = None,
        now: float | None = None,
    ) -> GameSession:
        """Resume from the save slot, granting offline earnings."""
        blob_store = blob_store if blob_store is not None else FileBlobStore()
        state, earned = load_game(blob_store, now)
        session = cls(state, blob_store, bus)
        session.offline_earnings = earned
        session.progress.check_achievements()
        return session

    # ── Reads ────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self.progress.state

    def stats(self) -> Stats:
        return compute_stats(self.progress.state, self.effects)

    # ── Player actions ───────────────────────────────────

    def manual_click(self) -> float:
        """Click the big cookie. Returns cookies earned."""
        return self.progress.manual_click(self.stats().click_value)

    def buy_building(self, building_id: str, quantity: int = 1) -> bool:
        return self.progress.buy_building(building_id, quantity)

    def buy_upgrade(self, upgrade_id: str) -> bool:
        return self.progress.buy_upgrade(upgrade_id)

    def buy_skill(self, skill_id: str) -> bool:
        return self.progress.buy_skill(skill_id)

    def update_bakery_name(self, name: str) -> bool:
        return self.progress.update_bakery_name(name)

    def click_golden_cookie(self, now: float | None = None) -> GoldenReward | None:
        now = time.time() if now is None else now
        return self.golden.click(self.progress, self.effects, self.stats(), now)

    def ascend(self, now: float | None = None) -> int:
        """Ascend for crystals. Returns crystals gained (0 = not possible)."""
        gain = self.progress.ascend(now)
        if gain <= 0:
            return 0
        self.effects.clear()
        self.golden.dismiss()
        self.save_game(now)
        return gain

    def reset_game(self, now: float | None = None) -> None:
        """Erase all progress and the save slot. The caller confirms first."""
        self.progress.reset_game(now)
        self.effects.clear()
        self.golden.dismiss()
        delete_save(self.blob_store)

    def save_game(self, now: float | None = None) -> bool:
        ok = save_game(self.blob_store, self.progress.state, now)
        if ok:
            logger.debug("Game saved")
        self.bus.emit(EVENT_GAME_SAVED, ok=ok)
        return ok
