"""Building store: lists producers, their price, and what is owned."""

from __future__ import annotations

from rich.text import Text
from textual.reactive import reactive
from textual.widget import Widget

from biscoito.data.buildings import ALL_BUILDINGS
from biscoito.engine.economy import cumulative_building_price, format_number
from biscoito.engine.session import GameSession


class BuildingStore(Widget):
    """Selectable list of buildings with the price of the next unit."""

    DEFAULT_CSS = """
    BuildingStore {
        width: 100%;
        height: 100%;
        padding: 1;
        overflow-y: auto;
    }
    """

    selected: reactive[int] = reactive(0)
    # Serialized store data for reactivity
    store_text: reactive[str] = reactive("")

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._session: GameSession | None = None

    @property
    def selected_id(self) -> str:
        return list(ALL_BUILDINGS)[self.selected]

    def move(self, delta: int) -> None:
        self.selected = (self.selected + delta) % len(ALL_BUILDINGS)

    def render(self) -> Text:
        text = Text()
        text.append("  ═══ Buildings ═══\n\n", style="bold yellow")

        if self._session is None:
            return text

        state = self._session.state
        for i, (bid, bdef) in enumerate(ALL_BUILDINGS.items()):
            price = cumulative_building_price(state, bid, 1)
            affordable = state.cookies >= price
            owned = state.owned(bid)

            marker = "▶ " if i == self.selected else "  "
            text.append(f"  {marker}", style="bold")
            name_style = "bold green" if affordable else "bold red"
            text.append(f"{bdef.name} ", style=name_style)
            text.append(f"x{owned}\n", style="cyan")

            if i == self.selected:
                text.append(f"      {bdef.description}\n", style="dim italic")
                text.append(f"      {format_number(bdef.base_production)}/s each\n", style="dim")

            cost_style = "green" if affordable else "red"
            text.append(f"      Cost: {format_number(price)}\n", style=cost_style)

        return text

    def update_from_session(self, session: GameSession) -> None:
        """Sync store with game state."""
        self._session = session
        state = session.state
        self.store_text = "|".join(
            f"{bid}:{state.owned(bid)}" for bid in ALL_BUILDINGS
        ) + f"|c:{state.cookies:.0f}"
