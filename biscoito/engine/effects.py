"""Active temporary effects: at most one per kind."""

from __future__ import annotations

from collections.abc import Iterator

from biscoito.engine.game_state import ActiveEffect, EffectKind


class ActiveEffects:
    """The live golden-cookie multipliers.

    Applying a kind that is already active replaces it: the multiplier goes
    back to its base value and the timer restarts. Multipliers never compound.
    """

    def __init__(self) -> None:
        self._effects: dict[EffectKind, ActiveEffect] = {}

    def apply(
        self,
        kind: EffectKind,
        label: str,
        multiplier: float,
        duration: float,
        now: float,
    ) -> ActiveEffect:
        effect = ActiveEffect(
            kind=kind,
            label=label,
            multiplier=multiplier,
            end_time=now + duration,
            duration=duration,
        )
        self._effects[kind] = effect
        return effect

    def expire(self, now: float) -> list[ActiveEffect]:
        """Drop effects whose end time has passed. Returns the dropped ones."""
        expired = [e for e in self._effects.values() if e.end_time <= now]
        for effect in expired:
            del self._effects[effect.kind]
        return expired

    def get(self, kind: EffectKind) -> ActiveEffect | None:
        return self._effects.get(kind)

    def clear(self) -> None:
        self._effects.clear()

    def __iter__(self) -> Iterator[ActiveEffect]:
        # Fixed kind order keeps the stat calculator deterministic
        return iter([self._effects[k] for k in EffectKind if k in self._effects])

    def __len__(self) -> int:
        return len(self._effects)
