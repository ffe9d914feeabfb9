"""Biscoito: Main Textual Application.

Wires the game session and tick scheduler into a playable TUI bakery.
"""

from __future__ import annotations

from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Footer, Header

from biscoito.data.achievements import ALL_ACHIEVEMENTS
from biscoito.data.balance import BALANCE
from biscoito.data.buildings import ALL_BUILDINGS
from biscoito.data.upgrades import ALL_UPGRADES
from biscoito.engine.economy import available_upgrades, format_number, upgrade_cost
from biscoito.engine.game_state import GoldenCookieKind
from biscoito.engine.scheduler import TickScheduler
from biscoito.engine.session import GameSession
from biscoito.engine.signals import (
    EVENT_ACHIEVEMENT_UNLOCKED,
    EVENT_EFFECT_EXPIRED,
    EVENT_GAME_SAVED,
    EVENT_GOLDEN_EXPIRED,
    EVENT_GOLDEN_SPAWNED,
)
from biscoito.ui.building_store import BuildingStore
from biscoito.ui.confirm_screen import ConfirmResetScreen
from biscoito.ui.event_overlay import EventOverlay
from biscoito.ui.hud import HUD
from biscoito.ui.skill_tree_screen import SkillTreeScreen
from biscoito.ui.upgrade_panel import UpgradePanel


CSS_PATH = Path(__file__).parent / "ui" / "styles.tcss"


class BiscoitoApp(App):
    """The Biscoito TUI game application."""

    TITLE = "Biscoito"
    SUB_TITLE = "Bake. Build. Ascend."
    CSS_PATH = CSS_PATH

    BINDINGS = [
        Binding("space", "bake", "Bake", show=True, priority=True),
        Binding("g", "catch_golden", "Golden", show=True),
        Binding("up", "select(-1)", "Prev", show=False),
        Binding("down", "select(1)", "Next", show=False),
        Binding("b", "buy_building(1)", "Buy", show=True),
        Binding("m", "buy_building(10)", "Buy x10", show=False),
        Binding("u", "buy_upgrade", "Upgrade", show=True),
        Binding("a", "skills", "Skills/Ascend", show=True),
        Binding("s", "save", "Save", show=True),
        Binding("ctrl+r", "reset", "Reset", show=False),
        Binding("q", "quit_game", "Quit", show=True),
    ]

    def __init__(self, session: GameSession | None = None) -> None:
        super().__init__()
        self._session: GameSession = session if session is not None else GameSession.load()
        self._scheduler = TickScheduler(self._session)
        self._subscribe()

    def _subscribe(self) -> None:
        bus = self._session.bus
        bus.subscribe(EVENT_ACHIEVEMENT_UNLOCKED, self._on_achievement)
        bus.subscribe(EVENT_GOLDEN_SPAWNED, self._on_golden_spawned)
        bus.subscribe(EVENT_GOLDEN_EXPIRED, self._on_golden_expired)
        bus.subscribe(EVENT_EFFECT_EXPIRED, self._on_effect_expired)
        bus.subscribe(EVENT_GAME_SAVED, self._on_saved)

    def compose(self) -> ComposeResult:
        yield Header()

        # Event overlay (conditionally visible)
        yield EventOverlay(id="event-overlay")

        with Horizontal(id="game-container"):
            yield HUD(id="hud-panel")
            yield BuildingStore(id="building-store")
            yield UpgradePanel(id="upgrade-panel")

        yield Footer()

    def on_mount(self) -> None:
        """Start the simulation and the UI refresh timer."""
        self._scheduler.start()
        self.set_interval(1.0 / BALANCE.ui_refresh_hz, self._sync_ui)

        earned = self._session.offline_earnings
        if earned > 0:
            self.notify(
                f"Welcome back! Your bakery made {format_number(earned)} cookies while you were away.",
                severity="information", timeout=5,
            )

        self._sync_ui()

    def _sync_ui(self) -> None:
        """Push session state to all UI widgets."""
        session = self._session
        self.query_one("#hud-panel", HUD).update_from_session(session)
        self.query_one("#building-store", BuildingStore).update_from_session(session)
        self.query_one("#upgrade-panel", UpgradePanel).update_from_session(session)
        self.query_one("#event-overlay", EventOverlay).update_from_session(session)

    # ── Bus listeners ────────────────────────────────

    def _on_achievement(self, _sender, achievement_id: str) -> None:
        adef = ALL_ACHIEVEMENTS[achievement_id]
        self.notify(f"🏆 Achievement: {adef.name}", severity="information", timeout=3)

    def _on_golden_spawned(self, _sender, cookie) -> None:
        self.notify("✦ A Golden Cookie appears! Press [G]!", severity="warning", timeout=3)

    def _on_golden_expired(self, _sender, cookie) -> None:
        self.notify("The Golden Cookie crumbles away...", severity="information", timeout=2)

    def _on_effect_expired(self, _sender, effect) -> None:
        self.notify(f"{effect.label} is over.", severity="information", timeout=2)

    def _on_saved(self, _sender, ok: bool) -> None:
        if not ok:
            self.notify("Save failed! See ~/.biscoito/biscoito.log", severity="error", timeout=3)

    # ── Actions ──────────────────────────────────────

    def action_bake(self) -> None:
        self._session.manual_click()

    def action_catch_golden(self) -> None:
        reward = self._session.click_golden_cookie()
        if reward is None:
            self.notify("No golden cookie right now.", severity="error", timeout=1)
            return
        if reward.kind == GoldenCookieKind.LUCKY:
            self.notify(f"🍀 Lucky! +{format_number(reward.cookies)} cookies", severity="warning", timeout=3)
        elif reward.effect is not None:
            self.notify(f"🔥 {reward.effect.label}!", severity="warning", timeout=3)

    def action_select(self, delta: int) -> None:
        self.query_one("#building-store", BuildingStore).move(delta)

    def action_buy_building(self, quantity: int) -> None:
        store = self.query_one("#building-store", BuildingStore)
        bid = store.selected_id
        if self._session.buy_building(bid, quantity):
            self.notify(f"Bought {quantity} {ALL_BUILDINGS[bid].name}", severity="information", timeout=1)
        else:
            self.notify("Can't afford that.", severity="error", timeout=1)

    def action_buy_upgrade(self) -> None:
        """Buy the cheapest unlocked upgrade."""
        state = self._session.state
        offers = available_upgrades(state)
        if not offers:
            self.notify("No upgrades unlocked yet.", severity="error", timeout=1)
            return
        cheapest = min(offers, key=lambda u: upgrade_cost(state, u.id))
        if self._session.buy_upgrade(cheapest.id):
            self.notify(f"Upgraded: {ALL_UPGRADES[cheapest.id].name}", severity="information", timeout=1)
        else:
            self.notify("Can't afford that upgrade.", severity="error", timeout=1)

    def action_skills(self) -> None:
        """Open the skill tree (buy skills, optionally ascend)."""
        self.push_screen(SkillTreeScreen(self._session), self._on_ascension_confirmed)

    def _on_ascension_confirmed(self, confirmed: bool | None) -> None:
        if not confirmed:
            return
        gain = self._session.ascend()
        if gain > 0:
            self.notify(f"✦ ASCENDED! +{gain} crystals. The oven cools, then burns anew.",
                        severity="warning", timeout=6)
        self._sync_ui()

    def action_save(self) -> None:
        if self._session.save_game():
            self.notify("Game saved.", severity="information", timeout=1)

    def action_reset(self) -> None:
        self.push_screen(ConfirmResetScreen(), self._on_reset_confirmed)

    def _on_reset_confirmed(self, confirmed: bool | None) -> None:
        if not confirmed:
            return
        self._session.reset_game()
        self._sync_ui()
        self.notify("All progress erased.", severity="warning", timeout=3)

    def action_quit_game(self) -> None:
        """Save, stop the simulation, and quit."""
        self._scheduler.stop()
        self._session.save_game()
        self.exit()
