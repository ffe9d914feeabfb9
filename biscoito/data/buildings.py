"""Building definitions: the automated cookie producers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuildingDef:
    """Definition of a single building type."""

    id: str
    name: str
    base_cost: float
    # Cookies per second produced by one unit, before multipliers
    base_production: float
    description: str


# ── All buildings registry (catalog order = store order) ──────────

ALL_BUILDINGS: dict[str, BuildingDef] = {
    b.id: b
    for b in [
        BuildingDef("cursor", "Cursor", 15, 0.1, "Autoclicks once every 10 seconds."),
        BuildingDef("grandma", "Grandma", 100, 1, "A nice grandma to bake more cookies."),
        BuildingDef("farm", "Farm", 1_100, 8, "Grows cookie plants from cookie seeds."),
        BuildingDef("mine", "Mine", 12_000, 47, "Mines out cookie dough."),
        BuildingDef("factory", "Factory", 130_000, 260, "Mass-produces cookies."),
        BuildingDef("bank", "Bank", 1_400_000, 1_400, "Generates cookies from interest."),
        BuildingDef("temple", "Temple", 20_000_000, 7_800, "Blessed cookies."),
        BuildingDef("wizard", "Wizard Tower", 330_000_000, 44_000, "Summons cookies with magic."),
        BuildingDef("shipment", "Shipment", 5.1e9, 260_000, "Brings cookies from the cookie planet."),
        BuildingDef("alchemy", "Alchemy Lab", 7.5e10, 1.6e6, "Turns gold into cookies."),
        BuildingDef("portal", "Portal", 1e12, 1e7, "Opens doors to the Cookieverse."),
        BuildingDef("time_machine", "Time Machine", 1.4e13, 6.5e7, "Brings cookies from the past."),
        BuildingDef("prism", "Prism", 1.7e14, 4.3e8, "Converts light into cookies."),
        BuildingDef("antimatter", "Antimatter Condenser", 2.1e15, 3.1e9, "Condenses nothing into cookies."),
        BuildingDef("javascript", "Javascript Console", 2.6e16, 2.1e10, "Creates cookies from pure code."),
        BuildingDef("fractal", "Fractal Engine", 3.1e17, 1.5e11, "Cookies that make cookies."),
        BuildingDef("chance", "Chancemaker", 3.8e18, 1.1e12, "Bends probability toward sweetness."),
        BuildingDef("idleverse", "Idleverse", 4.6e19, 8.3e12, "Whole universes of cookies."),
        BuildingDef("cortex", "Cortex Baker", 5.4e20, 6.4e13, "Dreams of endless cookies."),
        BuildingDef("you", "You", 6.5e21, 5.1e14, "Literally you, baking cookies."),
    ]
}
