"""Achievement scan: unlock every milestone the state now satisfies."""

from __future__ import annotations

from biscoito.data.achievements import ALL_ACHIEVEMENTS
from biscoito.engine.conditions import is_met
from biscoito.engine.game_state import GameState


def scan_achievements(state: GameState) -> list[str]:
    """Unlock newly met achievements. Returns their ids in catalog order."""
    unlocked = [
        aid for aid, adef in ALL_ACHIEVEMENTS.items()
        if aid not in state.achievements and is_met(adef.condition, state)
    ]
    state.achievements.update(unlocked)
    return unlocked
