"""Game state: single source of truth for the bakery."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum, auto

from biscoito.data.balance import BALANCE


class EffectKind(Enum):
    """What a temporary effect multiplies."""

    PRODUCTION_BOOST = auto()   # production (and the click value derived from it)
    CLICK_BOOST = auto()        # click value only


class GoldenCookieKind(Enum):
    LUCKY = auto()               # instant cookie grant
    PRODUCTION_FRENZY = auto()   # PRODUCTION_BOOST effect
    CLICK_FRENZY = auto()        # CLICK_BOOST effect


@dataclass
class ActiveEffect:
    """A timed multiplier installed by a golden cookie."""

    kind: EffectKind
    label: str
    multiplier: float
    end_time: float
    duration: float

    def remaining(self, now: float) -> float:
        return max(0.0, self.end_time - now)


@dataclass
class GoldenCookie:
    """A live golden cookie waiting to be clicked."""

    x: float        # percent of play area width
    y: float        # percent of play area height
    kind: GoldenCookieKind
    life: float     # seconds left before it fades


@dataclass
class GameState:
    """Complete mutable state for one bakery, across all ascensions."""

    # ── Epoch resources (reset on ascension) ─────────────
    cookies: float = 0.0
    total_cookies: float = 0.0      # baked since the last ascension
    buildings: dict[str, int] = field(default_factory=dict)
    upgrades: set[str] = field(default_factory=set)

    # ── Meta progress (kept across ascensions) ───────────
    lifetime_cookies: float = 0.0   # baked ever
    manual_clicks: int = 0
    achievements: set[str] = field(default_factory=set)
    purchased_skills: set[str] = field(default_factory=set)
    prestige_level: int = 0         # spendable crystals
    bakery_name: str = BALANCE.prestige.default_bakery_name

    # ── Timestamps ───────────────────────────────────────
    last_save_time: float = field(default_factory=time.time)
    start_time: float = field(default_factory=time.time)

    def owned(self, building_id: str) -> int:
        return self.buildings.get(building_id, 0)

    def total_buildings(self) -> int:
        return sum(self.buildings.values())

    def has_skill(self, skill_id: str) -> bool:
        return skill_id in self.purchased_skills

    def credit(self, amount: float) -> None:
        """Add baked cookies to the balance and both running totals."""
        if amount <= 0:
            return
        self.cookies += amount
        self.total_cookies += amount
        self.lifetime_cookies += amount
