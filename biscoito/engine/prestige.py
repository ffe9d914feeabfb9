"""Prestige systems: Ascension (soft reset for crystals) and the skill tree."""

from __future__ import annotations

import logging
import math
import time

from biscoito.data.balance import BALANCE
from biscoito.data.skills import ALL_SKILLS, LEGACY_STARTER, TIME_WARP
from biscoito.engine.game_state import GameState

logger = logging.getLogger(__name__)


def potential_prestige_level(lifetime_cookies: float) -> int:
    """Crystals a bakery is entitled to for its lifetime bake, in total."""
    divisor = BALANCE.prestige.prestige_divisor
    if lifetime_cookies < divisor:
        return 0
    return math.floor(math.sqrt(lifetime_cookies / divisor))


def crystals_spent(state: GameState) -> int:
    """Crystals already converted into skills."""
    return sum(
        ALL_SKILLS[sid].cost for sid in state.purchased_skills if sid in ALL_SKILLS
    )


def compute_prestige_gain(state: GameState) -> int:
    """Crystals an ascension right now would add."""
    owned = state.prestige_level + crystals_spent(state)
    return max(0, potential_prestige_level(state.lifetime_cookies) - owned)


def lifetime_for_next_crystal(state: GameState) -> float:
    """Lifetime cookies at which ascending would first gain a crystal."""
    owned = state.prestige_level + crystals_spent(state)
    return BALANCE.prestige.prestige_divisor * (owned + 1) ** 2


def starting_cookies(purchased_skills: set[str]) -> float:
    if TIME_WARP in purchased_skills:
        return BALANCE.prestige.time_warp_starting_cookies
    return 0.0


def starting_buildings(purchased_skills: set[str]) -> dict[str, int]:
    if LEGACY_STARTER in purchased_skills:
        return dict(BALANCE.prestige.legacy_starting_buildings)
    return {}


def perform_ascension(state: GameState, now: float | None = None) -> int:
    """Soft reset: crystals gained, skills/achievements/lifetime kept.

    Returns crystals gained; 0 means nothing happened.
    """
    gain = compute_prestige_gain(state)
    if gain <= 0:
        return 0

    skills = state.purchased_skills

    # Epoch reset
    state.cookies = starting_cookies(skills)
    state.total_cookies = 0.0
    state.buildings = starting_buildings(skills)
    state.upgrades = set()
    state.start_time = time.time() if now is None else now

    # Meta carry-over
    state.prestige_level += gain

    logger.info("Ascended: +%d crystals (now %d)", gain, state.prestige_level)
    return gain


def can_buy_skill(state: GameState, skill_id: str) -> bool:
    sdef = ALL_SKILLS.get(skill_id)
    if sdef is None or skill_id in state.purchased_skills:
        return False
    if state.prestige_level < sdef.cost:
        return False
    if sdef.parent and sdef.parent not in state.purchased_skills:
        return False
    return True


def buy_skill(state: GameState, skill_id: str) -> bool:
    """Spend crystals on a skill. Returns True if successful."""
    if not can_buy_skill(state, skill_id):
        return False
    state.prestige_level -= ALL_SKILLS[skill_id].cost
    state.purchased_skills.add(skill_id)
    logger.debug("Bought skill %s", skill_id)
    return True


def new_game_state(now: float | None = None) -> GameState:
    """Epoch-zero state: no cookies, no crystals, nothing owned."""
    now = time.time() if now is None else now
    return GameState(last_save_time=now, start_time=now)
