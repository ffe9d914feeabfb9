"""Save/load: serialises the bakery to a blob store and reconciles offline time."""

from __future__ import annotations

import json
import logging
import math
import time
from pathlib import Path
from typing import Protocol

from biscoito.data.achievements import ALL_ACHIEVEMENTS
from biscoito.data.balance import BALANCE
from biscoito.data.buildings import ALL_BUILDINGS
from biscoito.data.skills import ALL_SKILLS, ANGEL_INVESTOR
from biscoito.data.upgrades import ALL_UPGRADES
from biscoito.engine.game_state import GameState
from biscoito.engine.prestige import new_game_state
from biscoito.engine.stats import compute_stats

logger = logging.getLogger(__name__)

SAVE_DIR = Path.home() / ".biscoito"
SAVE_FILE = SAVE_DIR / "save.json"
SAVE_VERSION = 1


# ── Blob stores ──────────────────────────────────────────────────


class BlobStore(Protocol):
    """Opaque key-value home for one serialised save."""

    def load(self) -> str | None: ...

    def save(self, blob: str) -> None: ...

    def delete(self) -> None: ...


class FileBlobStore:
    """Keeps the save as a JSON file on disk."""

    def __init__(self, path: Path = SAVE_FILE) -> None:
        self.path = path

    def load(self) -> str | None:
        if not self.path.exists():
            return None
        return self.path.read_text(encoding="utf-8")

    def save(self, blob: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(blob, encoding="utf-8")

    def delete(self) -> None:
        self.path.unlink(missing_ok=True)


class MemoryBlobStore:
    """Keeps the save in memory (tests, embedding)."""

    def __init__(self, blob: str | None = None) -> None:
        self.blob = blob

    def load(self) -> str | None:
        return self.blob

    def save(self, blob: str) -> None:
        self.blob = blob

    def delete(self) -> None:
        self.blob = None


# ── Serialisation helpers ────────────────────────────────────────


def _state_to_dict(state: GameState) -> dict:
    s = state
    return {
        "version": SAVE_VERSION,
        "cookies": s.cookies,
        "total_cookies": s.total_cookies,
        "lifetime_cookies": s.lifetime_cookies,
        "manual_clicks": s.manual_clicks,
        "buildings": dict(s.buildings),
        "upgrades": sorted(s.upgrades),
        "achievements": sorted(s.achievements),
        "purchased_skills": sorted(s.purchased_skills),
        "prestige_level": s.prestige_level,
        "bakery_name": s.bakery_name,
        "last_save_time": s.last_save_time,
        "start_time": s.start_time,
    }


def _number(value, default: float) -> float:
    """A finite float, or ``default`` for a missing, null or unusable value."""
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def _count(value, default: int = 0) -> int:
    return max(0, int(_number(value, default)))


def _known(ids, catalog: dict) -> set[str]:
    if not isinstance(ids, list):
        return set()
    return {i for i in ids if isinstance(i, str) and i in catalog}


def _name(value, default: str) -> str:
    if not isinstance(value, str) or not value.strip():
        return default
    return value.strip()[: BALANCE.prestige.max_bakery_name_length]


def _dict_to_state(d: dict, now: float) -> GameState:
    """Build a state from a save dict, default-filling each bad or missing field."""
    fresh = new_game_state(now)

    raw_buildings = d.get("buildings")
    if not isinstance(raw_buildings, dict):
        raw_buildings = {}
    buildings = {
        bid: _count(count)
        for bid, count in raw_buildings.items()
        if bid in ALL_BUILDINGS and _count(count) > 0
    }
    cookies = max(0.0, _number(d.get("cookies"), fresh.cookies))
    total = max(0.0, _number(d.get("total_cookies"), fresh.total_cookies))
    lifetime = max(total, _number(d.get("lifetime_cookies"), total))

    return GameState(
        cookies=cookies,
        total_cookies=total,
        lifetime_cookies=lifetime,
        manual_clicks=_count(d.get("manual_clicks"), fresh.manual_clicks),
        buildings=buildings,
        upgrades=_known(d.get("upgrades"), ALL_UPGRADES),
        achievements=_known(d.get("achievements"), ALL_ACHIEVEMENTS),
        purchased_skills=_known(d.get("purchased_skills"), ALL_SKILLS),
        prestige_level=_count(d.get("prestige_level"), fresh.prestige_level),
        bakery_name=_name(d.get("bakery_name"), fresh.bakery_name),
        last_save_time=_number(d.get("last_save_time"), now),
        start_time=_number(d.get("start_time"), now),
    )


def serialize(state: GameState) -> str:
    return json.dumps(_state_to_dict(state), indent=2)


def deserialize(blob: str, now: float | None = None) -> GameState | None:
    """Parse a save blob. Returns None if it is corrupt."""
    now = time.time() if now is None else now
    try:
        # NaN and Infinity literals load as missing values
        data = json.loads(blob, parse_constant=lambda _literal: None)
        if not isinstance(data, dict):
            raise ValueError("save root is not an object")
        return _dict_to_state(data, now)
    except (json.JSONDecodeError, TypeError, ValueError, AttributeError) as exc:
        logger.warning("Ignoring corrupt save: %s", exc)
        return None


# ── Offline progress ─────────────────────────────────────────────


def compute_offline_earnings(state: GameState, now: float) -> float:
    """Cookies earned while the game was closed (0 below the threshold)."""
    bal = BALANCE.offline
    offline_s = max(0.0, now - state.last_save_time)
    if offline_s <= bal.min_offline_s:
        return 0.0

    if state.has_skill(ANGEL_INVESTOR):
        cap, efficiency = bal.angel_max_offline_s, bal.angel_efficiency
    else:
        cap, efficiency = bal.max_offline_s, bal.efficiency

    # Temporary effects never survive a save
    production = compute_stats(state).production_rate
    return production * min(offline_s, cap) * efficiency


def apply_offline_progress(state: GameState, now: float) -> float:
    """Grant offline earnings and restamp the save time. Returns the grant."""
    earned = compute_offline_earnings(state, now)
    state.credit(earned)
    state.last_save_time = now
    if earned > 0:
        logger.info("Offline earnings: %.0f cookies", earned)
    return earned


# ── Public API ───────────────────────────────────────────────────


def save_game(store: BlobStore, state: GameState, now: float | None = None) -> bool:
    """Persist the bakery. Returns False if the write failed."""
    state.last_save_time = time.time() if now is None else now
    try:
        store.save(serialize(state))
    except OSError as exc:
        logger.warning("Save failed: %s", exc)
        return False
    return True


def load_game(store: BlobStore, now: float | None = None) -> tuple[GameState, float]:
    """Load the bakery, or a fresh one if there is no usable save.

    Returns (state, offline cookies granted).
    """
    now = time.time() if now is None else now
    try:
        blob = store.load()
    except UnicodeDecodeError as exc:
        logger.warning("Ignoring corrupt save: %s", exc)
        blob = None
    except OSError as exc:
        logger.warning("Could not read save: %s", exc)
        blob = None

    state = deserialize(blob, now) if blob is not None else None
    if state is None:
        return new_game_state(now), 0.0

    logger.info("Loaded save for %s", state.bakery_name)
    return state, apply_offline_progress(state, now)


def delete_save(store: BlobStore) -> None:
    """Remove the save (after a full reset)."""
    try:
        store.delete()
    except OSError as exc:
        logger.warning("Could not delete save: %s", exc)
