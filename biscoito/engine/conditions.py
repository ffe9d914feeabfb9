"""Condition interpreter for catalog unlock descriptors."""

from __future__ import annotations

from biscoito.data.conditions import Condition, ConditionKind
from biscoito.engine.game_state import GameState


def is_met(condition: Condition, state: GameState) -> bool:
    """True if ``state`` satisfies ``condition``."""
    kind = condition.kind
    if kind == ConditionKind.TOTAL_COOKIES_AT_LEAST:
        return state.total_cookies >= condition.value
    if kind == ConditionKind.LIFETIME_COOKIES_AT_LEAST:
        return state.lifetime_cookies >= condition.value
    if kind == ConditionKind.BUILDING_COUNT_AT_LEAST:
        return state.owned(condition.building_id) >= condition.value
    if kind == ConditionKind.TOTAL_BUILDINGS_AT_LEAST:
        return state.total_buildings() >= condition.value
    if kind == ConditionKind.MANUAL_CLICKS_AT_LEAST:
        return state.manual_clicks >= condition.value
    raise ValueError(f"Unknown condition kind: {kind}")
