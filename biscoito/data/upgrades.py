"""Upgrade definitions: one-time purchases generated from tier rules.

Every track expands a fixed tier table into concrete upgrades, so ids, costs
and unlock thresholds are identical from one launch to the next (save files
refer to upgrades by id).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto

from biscoito.data.buildings import ALL_BUILDINGS, BuildingDef
from biscoito.data.conditions import (
    Condition,
    building_count_at_least,
    total_buildings_at_least,
    total_cookies_at_least,
)


class UpgradeKind(Enum):
    """What an upgrade multiplies."""

    CLICK = auto()      # click value
    BUILDING = auto()   # production of one building type
    GLOBAL = auto()     # total production


@dataclass(frozen=True)
class UpgradeDef:
    """Definition of a single upgrade."""

    id: str
    name: str
    description: str
    kind: UpgradeKind
    cost: float
    multiplier: float
    unlock: Condition
    # Only for BUILDING upgrades
    target_building_id: str = ""


# ── Tier tables ──────────────────────────────────────────────────

# Click track: cost = 500 * 15^i, unlocks at 100 * 10^i cookies baked
CLICK_TIER_COUNT = 9
CLICK_BASE_COST = 500
CLICK_COST_GROWTH = 15
CLICK_BASE_UNLOCK = 100
CLICK_UNLOCK_GROWTH = 10
CLICK_MULTIPLIER = 2.0

# Building track: (owned count to unlock, multiplier, tier name)
# cost = floor(base_cost * 10 * 8^i)
BUILDING_TIERS: tuple[tuple[int, float, str], ...] = (
    (1, 2.0, "Basic"),
    (10, 2.0, "Sturdy"),
    (25, 2.0, "Powerful"),
    (50, 2.0, "Mythic"),
    (100, 2.0, "Legendary"),
    (150, 2.0, "Divine"),
    (200, 5.0, "Cosmic"),
    (300, 10.0, "Absolute"),
)
BUILDING_COST_FACTOR = 10
BUILDING_COST_GROWTH = 8

# Global track: (total buildings owned to unlock, multiplier)
# cost = 1e6 * 50^i
GLOBAL_TIERS: tuple[tuple[int, float], ...] = (
    (50, 1.25),
    (100, 1.25),
    (200, 1.25),
    (400, 1.25),
    (800, 1.25),
    (1600, 1.25),
)
GLOBAL_BASE_COST = 1_000_000
GLOBAL_COST_GROWTH = 50


def _click_upgrades() -> list[UpgradeDef]:
    return [
        UpgradeDef(
            id=f"click_upgrade_{i}",
            name=f"Reinforced Click {i + 1}",
            description="Manual clicks are twice as effective.",
            kind=UpgradeKind.CLICK,
            cost=CLICK_BASE_COST * CLICK_COST_GROWTH ** i,
            multiplier=CLICK_MULTIPLIER,
            unlock=total_cookies_at_least(CLICK_BASE_UNLOCK * CLICK_UNLOCK_GROWTH ** i),
        )
        for i in range(CLICK_TIER_COUNT)
    ]


def _building_upgrades(building: BuildingDef) -> list[UpgradeDef]:
    return [
        UpgradeDef(
            id=f"{building.id}_upgrade_{i}",
            name=f"{tier_name} {building.name}",
            description=f"{building.name}s are {mult:g}x as efficient.",
            kind=UpgradeKind.BUILDING,
            cost=math.floor(building.base_cost * BUILDING_COST_FACTOR * BUILDING_COST_GROWTH ** i),
            multiplier=mult,
            unlock=building_count_at_least(building.id, count),
            target_building_id=building.id,
        )
        for i, (count, mult, tier_name) in enumerate(BUILDING_TIERS)
    ]


def _global_upgrades() -> list[UpgradeDef]:
    return [
        UpgradeDef(
            id=f"global_upgrade_{i}",
            name=f"Bakery Synergy {i + 1}",
            description=f"All production x{mult:g}.",
            kind=UpgradeKind.GLOBAL,
            cost=GLOBAL_BASE_COST * GLOBAL_COST_GROWTH ** i,
            multiplier=mult,
            unlock=total_buildings_at_least(count),
        )
        for i, (count, mult) in enumerate(GLOBAL_TIERS)
    ]


def _generate() -> list[UpgradeDef]:
    upgrades = _click_upgrades()
    for building in ALL_BUILDINGS.values():
        upgrades.extend(_building_upgrades(building))
    upgrades.extend(_global_upgrades())
    return upgrades


# ── All upgrades registry ────────────────────────────────────────

ALL_UPGRADES: dict[str, UpgradeDef] = {u.id: u for u in _generate()}

CLICK_UPGRADES: list[UpgradeDef] = [
    u for u in ALL_UPGRADES.values() if u.kind == UpgradeKind.CLICK
]
GLOBAL_UPGRADES: list[UpgradeDef] = [
    u for u in ALL_UPGRADES.values() if u.kind == UpgradeKind.GLOBAL
]
# building id -> its upgrades, in tier order
BUILDING_UPGRADES: dict[str, list[UpgradeDef]] = {
    bid: [
        u for u in ALL_UPGRADES.values()
        if u.kind == UpgradeKind.BUILDING and u.target_building_id == bid
    ]
    for bid in ALL_BUILDINGS
}
