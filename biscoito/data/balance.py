"""Balance constants: all tuning knobs in one place.

Tweak these to adjust pacing, prestige curve, and golden cookie frequency.
Building costs follow: floor(base_cost * (growth ^ owned))
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class EconomyBalance:
    """Tuning for cookie generation and spending."""

    # Building price growth per unit already owned
    building_cost_growth: float = 1.15

    # Click value before upgrades: base + production * fraction
    base_click_value: float = 1.0
    click_production_fraction: float = 0.01
    # Fraction with the Midas Touch skill (click_god)
    boosted_click_production_fraction: float = 0.05

    # Large number formatting thresholds
    suffixes: tuple[tuple[float, str], ...] = (
        (1e3, "K"),
        (1e6, "M"),
        (1e9, "B"),
        (1e12, "T"),
        (1e15, "Qa"),
        (1e18, "Qi"),
        (1e21, "Sx"),
        (1e24, "Sp"),
        (1e27, "Oc"),
        (1e30, "No"),
        (1e33, "Dc"),
    )


@dataclass(frozen=True)
class PrestigeBalance:
    """Tuning for Ascension and crystals."""

    # Crystals entitled = floor(sqrt(lifetime_cookies / prestige_divisor))
    prestige_divisor: float = 1_000_000.0
    # Production/click bonus per crystal held: 1 + level * per_level_bonus
    per_level_bonus: float = 0.01
    # Per-crystal bonus with Sweet Galaxy (cookie_galaxy)
    boosted_per_level_bonus: float = 0.02

    # Time Warp: cookies at the start of each epoch
    time_warp_starting_cookies: float = 50_000.0
    # Legacy Starter: buildings at the start of each epoch
    legacy_starting_buildings: tuple[tuple[str, int], ...] = (
        ("cursor", 10),
        ("grandma", 5),
    )

    default_bakery_name: str = "Player's Bakery"
    max_bakery_name_length: int = 32


@dataclass(frozen=True)
class SkillBalance:
    """Magnitudes of skill-tree effects."""

    heavenly_gates_mult: float = 1.10      # production ×1.10
    production_per_tier: float = 0.03      # prod_i: +3% × i
    omega_mult: float = 2.0                # production ×2

    divine_discount: float = 0.10          # buildings 10% cheaper
    economy_discount_per_tier: float = 0.02  # eco_i: cost × (1 - 2% × i)
    pure_magic_discount: float = 0.20      # upgrades 20% cheaper

    luck_bonus_per_tier: float = 0.05      # luck_i: spawn rate +5% × i
    golden_longevity_mult: float = 1.3     # golden durations +30%


@dataclass(frozen=True)
class EventBalance:
    """Tuning for the Golden Cookie."""

    # Spawn window: base + random * base, base shortened by luck skills
    golden_base_interval_s: float = 120.0
    golden_lucky_stars_interval_s: float = 96.0
    golden_lifetime_s: float = 13.0

    # Spawn position range, percent of the play area
    golden_min_position: float = 10.0
    golden_max_position: float = 90.0

    # Kind weights (must sum to 1.0)
    lucky_weight: float = 0.5
    production_frenzy_weight: float = 0.4
    click_frenzy_weight: float = 0.1

    # Lucky: min(15% of bank, 900 s of production) + 13, floored at 13 clicks
    lucky_bank_fraction: float = 0.15
    lucky_production_seconds: float = 900.0
    lucky_flat_bonus: float = 13.0
    lucky_click_floor: float = 13.0

    # Frenzy: production ×7 for 77 s (click value follows production)
    frenzy_multiplier: float = 7.0
    frenzy_duration_s: float = 77.0
    # Click Frenzy: click ×777 for 13 s
    click_frenzy_multiplier: float = 777.0
    click_frenzy_duration_s: float = 13.0


@dataclass(frozen=True)
class TickBalance:
    """Tuning for the tick scheduler."""

    interval_s: float = 0.1
    # Longest elapsed time a single tick may account for
    max_elapsed_s: float = 5.0
    autosave_interval_s: float = 30.0


@dataclass(frozen=True)
class OfflineBalance:
    """Tuning for offline-progress reconciliation on load."""

    min_offline_s: float = 60.0
    efficiency: float = 0.5
    max_offline_s: float = 86_400.0          # 24 h
    # With Angel Investor
    angel_efficiency: float = 0.9
    angel_max_offline_s: float = 172_800.0   # 48 h


@dataclass(frozen=True)
class GameBalance:
    """Top-level container for all balance constants."""

    economy: EconomyBalance = field(default_factory=EconomyBalance)
    prestige: PrestigeBalance = field(default_factory=PrestigeBalance)
    skills: SkillBalance = field(default_factory=SkillBalance)
    events: EventBalance = field(default_factory=EventBalance)
    ticks: TickBalance = field(default_factory=TickBalance)
    offline: OfflineBalance = field(default_factory=OfflineBalance)

    # UI refresh rate (independent of the simulation tick)
    ui_refresh_hz: float = 10.0


# Singleton: import this everywhere
BALANCE = GameBalance()
