"""Skill Tree Screen: spend crystals on permanent skills, then ascend.

Skills persist across all future ascensions. Pressing [X] confirms the
ascension; the app performs the reset once the screen is dismissed.
"""

from __future__ import annotations

from rich.text import Text
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Static

from biscoito.data.skills import (
    ALL_SKILLS,
    ECONOMY_NODES,
    HEAVENLY_GATES,
    LUCK_NODES,
    PRODUCTION_NODES,
    SkillDef,
)
from biscoito.engine.economy import format_number
from biscoito.engine.prestige import can_buy_skill, compute_prestige_gain, lifetime_for_next_crystal
from biscoito.engine.session import GameSession


def _display_order() -> list[SkillDef]:
    """Root first, then each branch bottom-up, then the specials."""
    branches = ECONOMY_NODES + LUCK_NODES + PRODUCTION_NODES
    seen = {HEAVENLY_GATES} | {s.id for s in branches}
    specials = [s for s in ALL_SKILLS.values() if s.id not in seen]
    return [ALL_SKILLS[HEAVENLY_GATES], *branches, *specials]


class SkillTreeScreen(Screen[bool]):
    """Full-screen view for buying skills before ascending."""

    BINDINGS = [
        Binding("escape", "cancel", "Back (no ascend)"),
        Binding("x", "confirm_ascend", "ASCEND & RESET", show=True),
        Binding("up", "move(-1)", "Up", show=False),
        Binding("down", "move(1)", "Down", show=False),
        Binding("enter", "buy", "Buy skill", show=True),
    ]

    DEFAULT_CSS = """
    SkillTreeScreen {
        background: $surface;
        align: center top;
        padding: 1 4;
    }

    #skill-header {
        width: 100%;
        text-align: center;
        padding-bottom: 1;
    }

    #skill-list-box {
        width: 100%;
        height: 1fr;
        padding: 0 2;
    }

    #skill-footer-hint {
        width: 100%;
        text-align: center;
    }
    """

    def __init__(self, session: GameSession, **kwargs) -> None:
        super().__init__(**kwargs)
        self._session = session
        self._skills = _display_order()
        self._cursor = 0

    # ── Compose ───────────────────────────────────────────────────

    def compose(self):
        yield Static(id="skill-header")
        with VerticalScroll(id="skill-list-box"):
            yield Static(id="skill-list")
        yield Static(id="skill-footer-hint")
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_display()

    # ── Actions ──────────────────────────────────────────────────

    def action_cancel(self) -> None:
        self.dismiss(False)

    def action_confirm_ascend(self) -> None:
        if compute_prestige_gain(self._session.state) <= 0:
            target = format_number(lifetime_for_next_crystal(self._session.state))
            self.notify(f"No crystals to gain yet. Next one at {target} baked (all time).",
                        severity="error", timeout=3)
            return
        self.dismiss(True)

    def action_move(self, delta: int) -> None:
        self._cursor = (self._cursor + delta) % len(self._skills)
        self._refresh_display()

    def action_buy(self) -> None:
        sdef = self._skills[self._cursor]
        if self._session.buy_skill(sdef.id):
            self.notify(f"Learned {sdef.name}!", severity="information", timeout=1)
        else:
            self.notify("Can't learn that skill yet.", severity="error", timeout=1)
        self._refresh_display()

    # ── Rendering ────────────────────────────────────────────────

    def _refresh_display(self) -> None:
        state = self._session.state

        header = self.query_one("#skill-header", Static)
        h = Text()
        h.append("✦ HEAVENLY SKILLS ✦\n", style="bold bright_yellow")
        h.append("Crystals endure. Cookies do not.\n\n", style="dim italic")
        h.append("  Crystals available: ", style="dim")
        h.append(f"{state.prestige_level}\n", style="bold magenta")
        h.append("  Crystals from ascending now: ", style="dim")
        h.append(f"+{compute_prestige_gain(state)}\n", style="bold yellow")
        header.update(h)

        body = Text()
        for i, sdef in enumerate(self._skills):
            owned = sdef.id in state.purchased_skills
            buyable = can_buy_skill(state, sdef.id)

            marker = "▶ " if i == self._cursor else "  "
            body.append(f"  {marker}", style="bold")

            if owned:
                body.append(f"{sdef.name} ", style="bold bright_yellow")
                body.append("(OWNED) ", style="bold yellow")
            else:
                body.append(f"{sdef.name} ", style="bold white" if buyable else "dim")
                cost_style = "yellow" if buyable else "dim red"
                body.append(f"{format_number(sdef.cost)} crystals ", style=cost_style)

            body.append(f"({sdef.description})\n", style="dim italic")

            if i == self._cursor and sdef.parent and not owned:
                parent = ALL_SKILLS[sdef.parent]
                have = "✓" if sdef.parent in state.purchased_skills else "✗"
                body.append(f"      requires {parent.name} {have}\n", style="dim")

        self.query_one("#skill-list", Static).update(body)

        hint_widget = self.query_one("#skill-footer-hint", Static)
        ft = Text()
        ft.append("\n  [↑↓] Select  [Enter] Learn skill\n", style="dim")
        ft.append("  [X] ASCEND & RESET THIS RUN  ", style="bold bright_red")
        ft.append("  [Esc] Back\n", style="dim")
        hint_widget.update(ft)
