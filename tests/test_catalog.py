"""Tests for the static catalogs and the condition interpreter."""

import pytest

from biscoito.data.achievements import ALL_ACHIEVEMENTS
from biscoito.data.buildings import ALL_BUILDINGS
from biscoito.data.conditions import Condition, building_count_at_least, manual_clicks_at_least
from biscoito.data.skills import ALL_SKILLS, ECONOMY_NODES, PRODUCTION_NODES
from biscoito.data.upgrades import ALL_UPGRADES, CLICK_UPGRADES, GLOBAL_UPGRADES, UpgradeKind
from biscoito.engine.achievements import scan_achievements
from biscoito.engine.conditions import is_met
from biscoito.engine.game_state import GameState


def test_building_catalog_order():
    ids = list(ALL_BUILDINGS)
    assert len(ids) == 20
    assert ids[0] == "cursor"
    assert ids[-1] == "you"


def test_click_track():
    assert len(CLICK_UPGRADES) == 9
    second = ALL_UPGRADES["click_upgrade_1"]
    assert second.cost == 7500
    assert second.unlock.value == 1000
    assert second.multiplier == 2


def test_building_track():
    first = ALL_UPGRADES["cursor_upgrade_0"]
    assert first.kind == UpgradeKind.BUILDING
    assert first.cost == 150
    assert first.unlock == building_count_at_least("cursor", 1)

    last = ALL_UPGRADES["cursor_upgrade_7"]
    assert last.multiplier == 10
    assert last.unlock.value == 300


def test_upgrade_count():
    assert len(GLOBAL_UPGRADES) == 6
    assert len(ALL_UPGRADES) == 9 + 20 * 8 + 6


def test_skill_tree_shape():
    assert len(ALL_SKILLS) == 1 + 3 * 12 + 10
    for sdef in ALL_SKILLS.values():
        if sdef.parent:
            assert sdef.parent in ALL_SKILLS
    assert ECONOMY_NODES[2].cost == 15
    assert PRODUCTION_NODES[2].cost == 24


def test_is_met():
    state = GameState(manual_clicks=5, buildings={"farm": 3})
    assert is_met(manual_clicks_at_least(5), state)
    assert not is_met(manual_clicks_at_least(6), state)
    assert is_met(building_count_at_least("farm", 3), state)
    assert not is_met(building_count_at_least("mine", 1), state)


def test_is_met_rejects_unknown_kind():
    with pytest.raises(ValueError):
        is_met(Condition("bogus", 1), GameState())


def test_scan_achievements_unlocks_once():
    state = GameState(total_cookies=1000, lifetime_cookies=1000)
    assert scan_achievements(state) == ["ach_cookie_0", "ach_cookie_1"]
    assert scan_achievements(state) == []
    assert state.achievements == {"ach_cookie_0", "ach_cookie_1"}


def test_every_achievement_has_a_name():
    for adef in ALL_ACHIEVEMENTS.values():
        assert adef.name and adef.description
