"""Upgrade panel: shows unlocked upgrades and their cost."""

from __future__ import annotations

from rich.text import Text
from textual.reactive import reactive
from textual.widget import Widget

from biscoito.data.buildings import ALL_BUILDINGS
from biscoito.data.upgrades import UpgradeDef, UpgradeKind
from biscoito.engine.economy import available_upgrades, format_number, upgrade_cost
from biscoito.engine.session import GameSession

# Rows shown before the list is truncated
_MAX_ROWS = 8


def _effect_summary(udef: UpgradeDef) -> str:
    """Human-readable target of an upgrade's multiplier."""
    if udef.kind == UpgradeKind.CLICK:
        return f"clicks x{udef.multiplier:g}"
    if udef.kind == UpgradeKind.BUILDING:
        building = ALL_BUILDINGS[udef.target_building_id]
        return f"{building.name} x{udef.multiplier:g}"
    return f"all production x{udef.multiplier:g}"


class UpgradePanel(Widget):
    """Displays unlocked upgrades, cheapest first."""

    DEFAULT_CSS = """
    UpgradePanel {
        width: 100%;
        height: 100%;
        padding: 1;
        overflow-y: auto;
    }
    """

    offerings_text: reactive[str] = reactive("")

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._session: GameSession | None = None

    def render(self) -> Text:
        text = Text()
        text.append("  ═══ Upgrades ═══\n\n", style="bold magenta")

        if self._session is None:
            return text

        state = self._session.state
        offers = sorted(available_upgrades(state), key=lambda u: upgrade_cost(state, u.id))
        if not offers:
            text.append("  Nothing unlocked yet...\n", style="dim italic")
            text.append("  Bake and build to\n", style="dim italic")
            text.append("  reveal upgrades.\n", style="dim italic")
            return text

        for i, udef in enumerate(offers[:_MAX_ROWS]):
            cost = upgrade_cost(state, udef.id)
            affordable = state.cookies >= cost

            key = "[U] " if i == 0 else "    "
            text.append(f"  {key}", style="bold")
            name_style = "bold green" if affordable else "bold red"
            text.append(f"{udef.name}\n", style=name_style)
            text.append(f"      {_effect_summary(udef)}\n", style="cyan")
            cost_style = "green" if affordable else "red"
            text.append(f"      Cost: {format_number(cost)}\n\n", style=cost_style)

        if len(offers) > _MAX_ROWS:
            text.append(f"  ... {len(offers) - _MAX_ROWS} more\n", style="dim")

        owned = len(state.upgrades)
        text.append(f"\n  Owned: {owned}\n", style="dim")
        return text

    def update_from_session(self, session: GameSession) -> None:
        """Sync panel with game state."""
        self._session = session
        state = session.state
        self.offerings_text = (
            ",".join(sorted(state.upgrades))
            + f"|t:{state.total_cookies:.0f}|c:{state.cookies:.0f}"
        )
