"""Skill tree: permanent meta-progression bought with crystals.

Skills survive every ascension. The tree grows from Heavenly Gates into three
12-node branches (economy, luck, production) plus a handful of specials that
hang off specific branch nodes. x/y place each node on a 0-100 canvas
(y = 98 is the bottom); they are presentation metadata only.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class SkillDef:
    id: str
    name: str
    description: str
    cost: int            # crystals
    parent: str = ""     # "" = no prerequisite
    branch: str = ""     # "eco" | "luck" | "prod" for branch nodes
    tier: int = 0        # 1-based position within the branch
    x: float = 50.0
    y: float = 50.0


# ── Skill ids consulted by the engine ────────────────────────────

HEAVENLY_GATES = "heavenly_gates"
DIVINE_DISCOUNT = "divine_discount"
LUCKY_STARS = "lucky_stars"
PURE_MAGIC = "pure_magic"
TIME_WARP = "time_warp"
LEGACY_STARTER = "legacy_starter"
CLICK_GOD = "click_god"
GOLDEN_LONGEVITY = "golden_longevity"
ANGEL_INVESTOR = "angel_investor"
COOKIE_GALAXY = "cookie_galaxy"
OMEGA = "omega"

ECONOMY_BRANCH = "eco"
LUCK_BRANCH = "luck"
PRODUCTION_BRANCH = "prod"

BRANCH_LENGTH = 12

# Layout
_START_Y = 88.0
_GAP_Y = 5.5
_CURVE_WIDTH = 30.0


def _branch_nodes(i: int) -> list[SkillDef]:
    progress = i / BRANCH_LENGTH
    spread = math.sin(progress * math.pi * 0.8) * _CURVE_WIDTH
    y = _START_Y - (i - 1) * _GAP_Y

    def parent(branch: str) -> str:
        return HEAVENLY_GATES if i == 1 else f"{branch}_{i - 1}"

    return [
        SkillDef(
            id=f"eco_{i}",
            name=f"Economic Power {i}",
            description=f"Buildings cost {i * 2}% less.",
            cost=i * 5,
            parent=parent(ECONOMY_BRANCH),
            branch=ECONOMY_BRANCH,
            tier=i,
            x=50 - 10 - spread,
            y=y,
        ),
        SkillDef(
            id=f"luck_{i}",
            name=f"Path of Luck {i}",
            description=f"Golden cookies spawn {i * 5}% more often.",
            cost=i * 5,
            parent=parent(LUCK_BRANCH),
            branch=LUCK_BRANCH,
            tier=i,
            x=50 + 10 + spread,
            y=y,
        ),
        SkillDef(
            id=f"prod_{i}",
            name=f"Vital Flow {i}",
            description=f"Global production +{i * 3}%.",
            cost=i * 8,
            parent=parent(PRODUCTION_BRANCH),
            branch=PRODUCTION_BRANCH,
            tier=i,
            x=50,
            y=y - 2,
        ),
    ]


def _generate() -> list[SkillDef]:
    skills = [
        SkillDef(HEAVENLY_GATES, "Heavenly Gates",
                 "Unlocks the power of crystals. +10% global production.",
                 cost=1, x=50, y=95),
    ]
    for i in range(1, BRANCH_LENGTH + 1):
        skills.extend(_branch_nodes(i))

    skills.extend([
        # Low specials, between the first branch nodes
        SkillDef(DIVINE_DISCOUNT, "Divine Discount", "Buildings cost 10% less.",
                 cost=3, parent=HEAVENLY_GATES, x=38, y=82),
        SkillDef(LUCKY_STARS, "Heavenly Luck", "Golden cookies appear 20% more often.",
                 cost=3, parent=HEAVENLY_GATES, x=62, y=82),
        # Mid specials
        SkillDef(PURE_MAGIC, "Pure Magic", "Upgrades cost 20% less.",
                 cost=10, parent="eco_4", x=30, y=60),
        SkillDef(TIME_WARP, "Time Warp", "Start each ascension with 50K cookies.",
                 cost=15, parent="luck_4", x=70, y=60),
        SkillDef(LEGACY_STARTER, "Legacy Starter",
                 "Start each ascension with 10 cursors and 5 grandmas.",
                 cost=25, parent=TIME_WARP, x=76, y=52),
        # High specials
        SkillDef(CLICK_GOD, "Midas Touch", "Clicks gain 5% of production.",
                 cost=10, parent="eco_8", x=35, y=40),
        SkillDef(GOLDEN_LONGEVITY, "Golden Age", "Golden effects last 30% longer.",
                 cost=15, parent="luck_8", x=65, y=40),
        # Endgame, top of the tree
        SkillDef(ANGEL_INVESTOR, "Angel Investor", "Offline production 90% efficient for 48h.",
                 cost=50, parent="prod_12", x=50, y=23),
        SkillDef(COOKIE_GALAXY, "Sweet Galaxy", "Crystal bonus rises from 1% to 2%.",
                 cost=100, parent=ANGEL_INVESTOR, x=50, y=15),
        SkillDef(OMEGA, "Omega Point", "Global production x2.",
                 cost=500, parent=COOKIE_GALAXY, x=50, y=5),
    ])
    return skills


ALL_SKILLS: dict[str, SkillDef] = {s.id: s for s in _generate()}


def branch_nodes(branch: str) -> list[SkillDef]:
    """Nodes of one branch, in tier order."""
    return [s for s in ALL_SKILLS.values() if s.branch == branch]


ECONOMY_NODES: list[SkillDef] = branch_nodes(ECONOMY_BRANCH)
LUCK_NODES: list[SkillDef] = branch_nodes(LUCK_BRANCH)
PRODUCTION_NODES: list[SkillDef] = branch_nodes(PRODUCTION_BRANCH)
