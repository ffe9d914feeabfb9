"""Stat calculator: production rate and click value from state + effects.

Pure: nothing here mutates its inputs, and iteration always follows catalog
order, so the same inputs give bit-identical results.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from biscoito.data.balance import BALANCE
from biscoito.data.buildings import ALL_BUILDINGS
from biscoito.data.skills import (
    CLICK_GOD,
    COOKIE_GALAXY,
    HEAVENLY_GATES,
    OMEGA,
    PRODUCTION_NODES,
)
from biscoito.data.upgrades import BUILDING_UPGRADES, CLICK_UPGRADES, GLOBAL_UPGRADES
from biscoito.engine.game_state import ActiveEffect, EffectKind, GameState


@dataclass(frozen=True)
class Stats:
    production_rate: float   # cookies per second
    click_value: float       # cookies per manual click


def prestige_multiplier(state: GameState) -> float:
    """1 + crystals × per-level bonus (doubled by Sweet Galaxy)."""
    bal = BALANCE.prestige
    per_level = (
        bal.boosted_per_level_bonus if state.has_skill(COOKIE_GALAXY)
        else bal.per_level_bonus
    )
    return 1.0 + state.prestige_level * per_level


def skill_production_multiplier(state: GameState) -> float:
    """Combined multiplier of every production skill owned."""
    bal = BALANCE.skills
    mult = 1.0
    if state.has_skill(HEAVENLY_GATES):
        mult *= bal.heavenly_gates_mult

    branch_bonus = sum(
        node.tier * bal.production_per_tier
        for node in PRODUCTION_NODES
        if state.has_skill(node.id)
    )
    mult *= 1.0 + branch_bonus

    if state.has_skill(OMEGA):
        mult *= bal.omega_mult
    return mult


def base_production(state: GameState) -> float:
    """Production from buildings and their upgrades, before any bonus."""
    production = 0.0
    for bid, bdef in ALL_BUILDINGS.items():
        count = state.owned(bid)
        if count <= 0:
            continue
        rate = bdef.base_production
        for udef in BUILDING_UPGRADES[bid]:
            if udef.id in state.upgrades:
                rate *= udef.multiplier
        production += rate * count
    return production


def compute_stats(
    state: GameState,
    effects: Iterable[ActiveEffect] = (),
) -> Stats:
    """Compute production rate and click value.

    Temporary effects are applied last, to both numbers at once, after the
    permanent click value has been derived from permanent production.
    """
    econ = BALANCE.economy

    production = base_production(state)
    for udef in GLOBAL_UPGRADES:
        if udef.id in state.upgrades:
            production *= udef.multiplier
    production *= skill_production_multiplier(state)

    prestige = prestige_multiplier(state)
    production *= prestige

    fraction = (
        econ.boosted_click_production_fraction if state.has_skill(CLICK_GOD)
        else econ.click_production_fraction
    )
    click = econ.base_click_value + production * fraction
    for udef in CLICK_UPGRADES:
        if udef.id in state.upgrades:
            click *= udef.multiplier
    click *= prestige

    for effect in effects:
        if effect.kind == EffectKind.PRODUCTION_BOOST:
            production *= effect.multiplier
            click *= effect.multiplier
        elif effect.kind == EffectKind.CLICK_BOOST:
            click *= effect.multiplier

    return Stats(production_rate=production, click_value=click)
