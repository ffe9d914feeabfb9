"""Unlock conditions: declarative threshold descriptors.

Catalog entries describe *when* they unlock with plain data instead of
closures; ``biscoito.engine.conditions.is_met`` interprets them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ConditionKind(Enum):
    """Which piece of state a condition compares against its value."""

    TOTAL_COOKIES_AT_LEAST = auto()      # cookies baked this epoch
    LIFETIME_COOKIES_AT_LEAST = auto()   # cookies baked ever
    BUILDING_COUNT_AT_LEAST = auto()     # owned count of one building
    TOTAL_BUILDINGS_AT_LEAST = auto()    # owned count of all buildings
    MANUAL_CLICKS_AT_LEAST = auto()      # manual clicks ever


@dataclass(frozen=True)
class Condition:
    kind: ConditionKind
    value: float
    building_id: str = ""   # only for BUILDING_COUNT_AT_LEAST


def total_cookies_at_least(value: float) -> Condition:
    return Condition(ConditionKind.TOTAL_COOKIES_AT_LEAST, value)


def lifetime_cookies_at_least(value: float) -> Condition:
    return Condition(ConditionKind.LIFETIME_COOKIES_AT_LEAST, value)


def building_count_at_least(building_id: str, value: int) -> Condition:
    return Condition(ConditionKind.BUILDING_COUNT_AT_LEAST, value, building_id)


def total_buildings_at_least(value: int) -> Condition:
    return Condition(ConditionKind.TOTAL_BUILDINGS_AT_LEAST, value)


def manual_clicks_at_least(value: int) -> Condition:
    return Condition(ConditionKind.MANUAL_CLICKS_AT_LEAST, value)
