"""Economy engine: prices, purchases, clicks, and number formatting."""

from __future__ import annotations

import logging
import math

from biscoito.data.balance import BALANCE
from biscoito.data.buildings import ALL_BUILDINGS
from biscoito.data.skills import DIVINE_DISCOUNT, ECONOMY_NODES, PURE_MAGIC
from biscoito.data.upgrades import ALL_UPGRADES, UpgradeDef
from biscoito.engine.conditions import is_met
from biscoito.engine.game_state import GameState

logger = logging.getLogger(__name__)


def building_price(state: GameState, building_id: str, owned: int) -> float:
    """Price of one unit of a building when ``owned`` are already owned.

    floor(base * growth^owned), then the skill discounts, floored again.
    """
    bdef = ALL_BUILDINGS[building_id]
    try:
        cost = math.floor(bdef.base_cost * BALANCE.economy.building_cost_growth ** owned)
    except OverflowError:
        return math.inf

    if state.has_skill(DIVINE_DISCOUNT):
        cost = math.floor(cost * (1.0 - BALANCE.skills.divine_discount))
    per_tier = BALANCE.skills.economy_discount_per_tier
    for node in ECONOMY_NODES:
        if state.has_skill(node.id):
            cost *= 1.0 - node.tier * per_tier
    return float(math.floor(cost))


def cumulative_building_price(state: GameState, building_id: str, quantity: int = 1) -> float:
    """Total price of the next ``quantity`` units of a building."""
    owned = state.owned(building_id)
    return sum(building_price(state, building_id, owned + i) for i in range(quantity))


def buy_building(state: GameState, building_id: str, quantity: int = 1) -> bool:
    """Attempt to buy ``quantity`` units of a building. Returns True if successful."""
    if building_id not in ALL_BUILDINGS or quantity < 1:
        return False

    price = cumulative_building_price(state, building_id, quantity)
    if state.cookies < price:
        return False

    state.cookies -= price
    state.buildings[building_id] = state.owned(building_id) + quantity
    logger.debug("Bought %d x %s for %.0f", quantity, building_id, price)
    return True


def upgrade_cost(state: GameState, upgrade_id: str) -> float:
    """Current cost of an upgrade, after Pure Magic."""
    cost = ALL_UPGRADES[upgrade_id].cost
    if state.has_skill(PURE_MAGIC):
        cost = math.floor(cost * (1.0 - BALANCE.skills.pure_magic_discount))
    return cost


def buy_upgrade(state: GameState, upgrade_id: str) -> bool:
    """Attempt to buy an upgrade. Returns True if successful."""
    if upgrade_id not in ALL_UPGRADES or upgrade_id in state.upgrades:
        return False

    cost = upgrade_cost(state, upgrade_id)
    if state.cookies < cost:
        return False

    state.cookies -= cost
    state.upgrades.add(upgrade_id)
    logger.debug("Bought upgrade %s for %.0f", upgrade_id, cost)
    return True


def available_upgrades(state: GameState) -> list[UpgradeDef]:
    """Unlocked upgrades not yet owned, in catalog order."""
    return [
        udef for uid, udef in ALL_UPGRADES.items()
        if uid not in state.upgrades and is_met(udef.unlock, state)
    ]


def manual_click(state: GameState, click_value: float) -> float:
    """Credit one manual click. Returns cookies earned."""
    state.credit(click_value)
    state.manual_clicks += 1
    return click_value


def format_number(n: float) -> str:
    """Format a number with suffixes for readability."""
    if n < 0:
        return f"-{format_number(-n)}"
    if math.isinf(n):
        return "∞"

    for threshold, suffix in reversed(BALANCE.economy.suffixes):
        if n >= threshold:
            value = n / threshold
            if value >= 100:
                return f"{value:.0f}{suffix}"
            elif value >= 10:
                return f"{value:.1f}{suffix}"
            else:
                return f"{value:.2f}{suffix}"

    if n >= 100:
        return f"{n:.0f}"
    elif n >= 10:
        return f"{n:.1f}"
    elif n == int(n):
        return str(int(n))
    else:
        return f"{n:.1f}"


def format_time(seconds: float) -> str:
    """Format a duration as ``42s`` or ``3m 07s``."""
    total = max(0, math.ceil(seconds))
    if total < 60:
        return f"{total}s"
    minutes, secs = divmod(total, 60)
    return f"{minutes}m {secs:02d}s"
