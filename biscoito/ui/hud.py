"""HUD widget: cookie counter, production, crystals."""

from __future__ import annotations

from rich.text import Text
from textual.reactive import reactive
from textual.widget import Widget

from biscoito.data.achievements import ALL_ACHIEVEMENTS
from biscoito.engine.economy import format_number
from biscoito.engine.prestige import compute_prestige_gain, lifetime_for_next_crystal
from biscoito.engine.session import GameSession


class HUD(Widget):
    """Heads-up display showing core game stats."""

    DEFAULT_CSS = """
    HUD {
        width: 100%;
        height: 100%;
        padding: 1;
    }
    """

    bakery_name: reactive[str] = reactive("")
    cookies: reactive[str] = reactive("0")
    per_second: reactive[str] = reactive("0/s")
    per_click: reactive[str] = reactive("1")
    total: reactive[str] = reactive("0")
    lifetime: reactive[str] = reactive("0")
    clicks: reactive[int] = reactive(0)
    crystals: reactive[int] = reactive(0)
    ascend_gain: reactive[int] = reactive(0)
    next_crystal: reactive[str] = reactive("")
    achievements: reactive[str] = reactive("")

    def render(self) -> Text:
        text = Text()

        text.append(f"  === {self.bakery_name} ===\n\n", style="bold cyan")

        text.append("  Cookies: ", style="dim")
        text.append(f"{self.cookies}\n", style="bold yellow")
        text.append("  Per Second: ", style="dim")
        text.append(f"{self.per_second}\n", style="green")
        text.append("  Per Click: ", style="dim")
        text.append(f"{self.per_click}\n", style="green")

        text.append("\n")

        text.append("  Baked (ascension): ", style="dim")
        text.append(f"{self.total}\n", style="white")
        text.append("  Baked (all time): ", style="dim")
        text.append(f"{self.lifetime}\n", style="white")
        text.append("  Clicks: ", style="dim")
        text.append(f"{self.clicks}\n", style="white")
        text.append("  Achievements: ", style="dim")
        text.append(f"{self.achievements}\n", style="white")

        text.append("\n")

        text.append("  Crystals: ", style="dim")
        text.append(f"{self.crystals}\n", style="bold magenta")
        if self.ascend_gain > 0:
            text.append(f"  Ascend now: +{self.ascend_gain} crystals [A]\n", style="bold bright_yellow")
        else:
            text.append("  No crystals to gain yet\n", style="dim italic")
            text.append(f"  Next at {self.next_crystal} baked\n", style="dim italic")

        text.append("\n")
        text.append("  [Space] Click  [G] Golden\n", style="dim italic")
        text.append("  [↑↓] Select  [B] Buy  [M] Buy 10\n", style="dim italic")
        text.append("  [U] Upgrade  [A] Ascend/Skills\n", style="dim italic")
        text.append("  [S] Save  [Ctrl+R] Reset  [Q] Quit\n", style="dim italic")

        return text

    def update_from_session(self, session: GameSession) -> None:
        """Sync HUD with game state."""
        state = session.state
        stats = session.stats()
        self.bakery_name = state.bakery_name
        self.cookies = format_number(state.cookies)
        self.per_second = f"{format_number(stats.production_rate)}/s"
        self.per_click = format_number(stats.click_value)
        self.total = format_number(state.total_cookies)
        self.lifetime = format_number(state.lifetime_cookies)
        self.clicks = state.manual_clicks
        self.crystals = state.prestige_level
        self.ascend_gain = compute_prestige_gain(state)
        self.next_crystal = format_number(lifetime_for_next_crystal(state))
        self.achievements = f"{len(state.achievements)}/{len(ALL_ACHIEVEMENTS)}"
