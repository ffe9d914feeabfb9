"""Achievement definitions: permanent milestones that survive ascension."""

from __future__ import annotations

from dataclasses import dataclass

from biscoito.data.conditions import (
    Condition,
    lifetime_cookies_at_least,
    manual_clicks_at_least,
    total_buildings_at_least,
    total_cookies_at_least,
)


@dataclass(frozen=True)
class AchievementDef:
    id: str
    name: str
    description: str
    condition: Condition


COOKIE_MILESTONES: tuple[float, ...] = (1, 1e3, 1e6, 1e9, 1e12, 1e15, 1e18, 1e21)
CLICK_MILESTONES: tuple[int, ...] = (1, 100, 1_000, 10_000, 100_000)
OWNED_MILESTONES: tuple[int, ...] = (1, 100, 500, 1_000)
LIFETIME_MILESTONES: tuple[float, ...] = (1e6, 1e9, 1e12, 1e15)


def _generate() -> list[AchievementDef]:
    achievements: list[AchievementDef] = []
    for i, amount in enumerate(COOKIE_MILESTONES):
        achievements.append(AchievementDef(
            id=f"ach_cookie_{i}",
            name=f"Milestone {i + 1}",
            description=f"Bake {amount:,.0f} cookies in one ascension.",
            condition=total_cookies_at_least(amount),
        ))
    for i, clicks in enumerate(CLICK_MILESTONES):
        achievements.append(AchievementDef(
            id=f"ach_click_{i}",
            name=f"Clicker {i + 1}",
            description=f"Click the big cookie {clicks:,} times.",
            condition=manual_clicks_at_least(clicks),
        ))
    for i, owned in enumerate(OWNED_MILESTONES):
        achievements.append(AchievementDef(
            id=f"ach_owned_{i}",
            name=f"Builder {i + 1}",
            description=f"Own {owned:,} buildings at once.",
            condition=total_buildings_at_least(owned),
        ))
    for i, amount in enumerate(LIFETIME_MILESTONES):
        achievements.append(AchievementDef(
            id=f"ach_lifetime_{i}",
            name=f"Eternal Baker {i + 1}",
            description=f"Bake {amount:,.0f} cookies across all ascensions.",
            condition=lifetime_cookies_at_least(amount),
        ))
    return achievements


ALL_ACHIEVEMENTS: dict[str, AchievementDef] = {a.id: a for a in _generate()}
