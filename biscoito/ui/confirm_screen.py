"""Yes/no confirmation before wiping the save."""

from __future__ import annotations

from rich.text import Text
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Static


class ConfirmResetScreen(ModalScreen[bool]):
    """Asks before erasing cookies, crystals, and skills."""

    BINDINGS = [
        Binding("y", "answer(True)", "Yes, wipe everything"),
        Binding("n", "answer(False)", "No"),
        Binding("escape", "answer(False)", "Cancel", show=False),
    ]

    DEFAULT_CSS = """
    ConfirmResetScreen {
        align: center middle;
    }

    #confirm-box {
        width: 54;
        height: auto;
        border: thick $error;
        background: $surface;
        padding: 1 2;
    }
    """

    def compose(self):
        with Vertical(id="confirm-box"):
            yield Static(self._message())

    @staticmethod
    def _message() -> Text:
        t = Text()
        t.append("RESET THE GAME?\n\n", style="bold bright_red")
        t.append("Cookies, buildings, upgrades, crystals and skills\n", style="white")
        t.append("are all lost. The save file is deleted.\n\n", style="white")
        t.append("[Y] Wipe everything   [N] Keep playing", style="dim")
        return t

    def action_answer(self, answer: bool) -> None:
        self.dismiss(answer)
