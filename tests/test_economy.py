"""Tests for the economy engine."""

import math

from biscoito.engine.game_state import GameState
from biscoito.engine.economy import (
    available_upgrades,
    building_price,
    buy_building,
    buy_upgrade,
    cumulative_building_price,
    format_number,
    format_time,
    manual_click,
    upgrade_cost,
)


def test_format_number_small():
    assert format_number(0) == "0"
    assert format_number(5) == "5"
    assert format_number(99.5) == "99.5"


def test_format_number_thousands():
    assert format_number(1500) == "1.50K"


def test_format_number_millions():
    result = format_number(2_300_000)
    assert "M" in result


def test_format_number_negative_and_infinite():
    assert format_number(-1500) == "-1.50K"
    assert format_number(math.inf) == "∞"


def test_format_time():
    assert format_time(42) == "42s"
    assert format_time(187) == "3m 07s"
    assert format_time(-3) == "0s"


# ── Building prices ──────────────────────────────────────────────────────────

def test_first_cursor_costs_base_price():
    state = GameState()
    assert building_price(state, "cursor", 0) == 15


def test_price_grows_and_floors():
    state = GameState()
    # floor(15 * 1.15) = 17
    assert building_price(state, "cursor", 1) == 17


def test_cumulative_price_sums_units():
    state = GameState()
    assert cumulative_building_price(state, "cursor", 2) == 15 + 17


def test_divine_discount():
    state = GameState(purchased_skills={"divine_discount"})
    # floor(15 * 0.9) = 13
    assert building_price(state, "cursor", 0) == 13


def test_economy_branch_discount():
    state = GameState(purchased_skills={"eco_1"})
    # floor(15 * 0.98) = 14
    assert building_price(state, "cursor", 0) == 14


def test_huge_owned_count_prices_as_infinite():
    state = GameState()
    assert building_price(state, "cursor", 1_000_000) == math.inf


# ── Buying ───────────────────────────────────────────────────────────────────

def test_buy_building_succeeds():
    state = GameState(cookies=15)
    assert buy_building(state, "cursor")
    assert state.cookies == 0
    assert state.owned("cursor") == 1


def test_buy_building_insufficient_funds():
    state = GameState(cookies=14)
    assert not buy_building(state, "cursor")
    assert state.cookies == 14
    assert state.owned("cursor") == 0


def test_buy_building_in_bulk():
    state = GameState(cookies=100)
    assert buy_building(state, "cursor", 2)
    assert state.cookies == 100 - 32
    assert state.owned("cursor") == 2


def test_buy_building_rejects_bad_requests():
    state = GameState(cookies=1e9)
    assert not buy_building(state, "nope")
    assert not buy_building(state, "cursor", 0)
    assert state.cookies == 1e9


def test_upgrade_cost_with_pure_magic():
    assert upgrade_cost(GameState(), "click_upgrade_0") == 500
    assert upgrade_cost(GameState(purchased_skills={"pure_magic"}), "click_upgrade_0") == 400


def test_buy_upgrade_once_only():
    state = GameState(cookies=1000)
    assert buy_upgrade(state, "click_upgrade_0")
    assert state.cookies == 500
    assert "click_upgrade_0" in state.upgrades
    assert not buy_upgrade(state, "click_upgrade_0")
    assert state.cookies == 500


def test_buy_upgrade_unknown_id():
    state = GameState(cookies=1e9)
    assert not buy_upgrade(state, "nope")


def test_available_upgrades_follow_unlocks():
    state = GameState()
    assert available_upgrades(state) == []

    state.total_cookies = 100
    assert [u.id for u in available_upgrades(state)] == ["click_upgrade_0"]

    state.buildings["cursor"] = 1
    ids = [u.id for u in available_upgrades(state)]
    assert "cursor_upgrade_0" in ids
    assert "cursor_upgrade_1" not in ids


def test_owned_upgrades_are_not_offered():
    state = GameState(total_cookies=100, upgrades={"click_upgrade_0"})
    assert available_upgrades(state) == []


def test_manual_click_credits_all_counters():
    state = GameState()
    earned = manual_click(state, 3.0)
    assert earned == 3.0
    assert state.cookies == 3.0
    assert state.total_cookies == 3.0
    assert state.lifetime_cookies == 3.0
    assert state.manual_clicks == 1
