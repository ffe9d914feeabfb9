"""Observer bus: named blinker signals the engine emits and hosts subscribe to.

Receivers are called as ``fn(sender, **payload)``; the payload keys for each
event are listed next to its name below.
"""

from __future__ import annotations

from collections.abc import Callable

from blinker import Signal

Receiver = Callable[..., object]


class EventBus:
    """One blinker Signal per event name, created on first subscribe."""

    def __init__(self) -> None:
        self._signals: dict[str, Signal] = {}

    def subscribe(self, name: str, fn: Receiver) -> None:
        signal = self._signals.setdefault(name, Signal(name))
        # Strong reference: lambdas and bound methods of short-lived objects keep firing
        signal.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn: Receiver) -> None:
        signal = self._signals.get(name)
        if signal is not None:
            signal.disconnect(fn)

    def emit(self, name: str, **payload: object) -> None:
        signal = self._signals.get(name)
        if signal is not None:
            signal.send(self, **payload)


# ============================================================================
# PROGRESSION
# ============================================================================
EVENT_ACHIEVEMENT_UNLOCKED = "achievement_unlocked"  # payload: achievement_id=str
EVENT_ASCENDED = "ascended"                          # payload: gain=int
EVENT_GAME_RESET = "game_reset"                      # payload: (none)


# ============================================================================
# GOLDEN COOKIE & EFFECTS
# ============================================================================
EVENT_GOLDEN_SPAWNED = "golden_spawned"    # payload: cookie=GoldenCookie
EVENT_GOLDEN_EXPIRED = "golden_expired"    # payload: cookie=GoldenCookie
EVENT_GOLDEN_CLICKED = "golden_clicked"    # payload: reward=GoldenReward
EVENT_EFFECT_EXPIRED = "effect_expired"    # payload: effect=ActiveEffect


# ============================================================================
# PERSISTENCE
# ============================================================================
EVENT_GAME_SAVED = "game_saved"            # payload: ok=bool
