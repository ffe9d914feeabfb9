"""Event overlay: golden cookie and active frenzy banners."""

from __future__ import annotations

import time

from rich.text import Text
from textual.reactive import reactive
from textual.widget import Widget

from biscoito.engine.economy import format_time
from biscoito.engine.session import GameSession


class EventOverlay(Widget):
    """Overlay widget for the live golden cookie and running effects."""

    DEFAULT_CSS = """
    EventOverlay {
        width: 100%;
        height: auto;
        min-height: 3;
        content-align: center middle;
        text-align: center;
        padding: 0 1;
    }
    """

    event_text: reactive[str] = reactive("")

    def render(self) -> Text:
        if not self.event_text:
            return Text("")

        text = Text()
        text.append(self.event_text, style="bold")
        return text

    def update_from_session(self, session: GameSession) -> None:
        """Update overlay based on the golden cookie and effects."""
        now = time.time()
        parts: list[str] = []

        cookie = session.golden.cookie
        if cookie is not None:
            parts.append(f"✦ GOLDEN COOKIE! ✦  Press [G]!  ({cookie.life:.1f}s)")

        for effect in session.effects:
            parts.append(f"{effect.label}  {format_time(effect.remaining(now))}")

        if not parts:
            self.event_text = ""
            self.styles.display = "none"
            return

        self.event_text = "   ·   ".join(parts)
        if cookie is not None:
            self.styles.background = "gold"
            self.styles.color = "black"
        else:
            self.styles.background = "darkorange"
            self.styles.color = "white"
        self.styles.display = "block"
