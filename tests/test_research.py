"""Tests for ship research and stat derivation."""

import pytest

from src.engine.research import calculate_price, derive_ship, research_ship
from src.models.game_state import GameState
from src.models.ship import Ship


class TestDeriveShip:
    """Test class-specific stat bonuses."""

    def test_enforcer_damage_and_price(self):
        """100 coins and 1 development point give damage 10 at price 50."""
        ship = derive_ship("Enforcer", "Cutter", 100, 1)

        assert ship.damage == 10
        assert ship.price == 50
        assert ship.fuel_capacity == 100
        assert ship.fuel_efficiency == 1.0
        assert ship.personnel_limit == 0

    def test_explorer_fuel_bonuses(self):
        ship = derive_ship("Explorer", "Scout", 250, 0)

        assert ship.fuel_capacity == 125
        assert ship.fuel_efficiency == pytest.approx(3.5)
        assert ship.damage == 0
        assert ship.price == 100

    def test_pioneer_reduced_rates(self):
        ship = derive_ship("Pioneer", "Settler", 100, 0)

        assert ship.personnel_limit == 10
        assert ship.fuel_capacity == 105
        assert ship.fuel_efficiency == pytest.approx(1.5)
        assert ship.damage == 0

    def test_integer_bonuses_round_down(self):
        """Partial tens of coins do not count towards integer stats."""
        ship = derive_ship("Pioneer", "Settler", 39, 0)

        assert ship.personnel_limit == 3
        assert ship.fuel_capacity == 101
        assert ship.fuel_efficiency == pytest.approx(1.195)

    def test_base_stats(self):
        """Test that every design starts from the base hull."""
        ship = derive_ship("Enforcer", "Cutter", 0, 0)

        assert ship.health == 50
        assert ship.level == 1
        assert ship.price == 100
        assert ship.amount == 0
        assert ship.name == "Cutter"
        assert ship.ship_class == "Enforcer"

    def test_negative_inputs_count_as_zero(self):
        ship = derive_ship("Enforcer", "Cutter", -500, -3)

        assert ship.damage == 0
        assert ship.price == 100

    def test_legacy_class_spelling(self):
        ship = derive_ship("Explorite", "Scout", 100, 0)
        assert ship.ship_class == "Explorer"
        assert ship.fuel_capacity == 110

    def test_unknown_class(self):
        with pytest.raises(ValueError, match="Unknown ship class: Battlestar"):
            derive_ship("Battlestar", "Galactica", 100, 1)


class TestCalculatePrice:
    """Test development point pricing."""

    def test_no_development(self):
        assert calculate_price(0) == 100

    def test_price_never_below_minimum(self):
        assert calculate_price(1) == 50
        assert calculate_price(2) == 50
        assert calculate_price(40) == 50


class TestResearchShip:
    """Test adding researched designs to the state."""

    def test_appends_design(self):
        state = GameState()
        ship = research_ship(state, "Enforcer", "Cutter", 100, 1)

        assert state.ships == {"Enforcer": [ship]}

    def test_designs_keep_research_order(self):
        state = GameState()
        research_ship(state, "Explorer", "Scout", 10, 0)
        research_ship(state, "Explorer", "Surveyor", 20, 0)

        assert [s.name for s in state.ships["Explorer"]] == ["Scout", "Surveyor"]

    def test_research_does_not_spend_coins(self):
        state = GameState(star_coins=75)
        research_ship(state, "Enforcer", "Cutter", 100, 1)
        assert state.star_coins == 75

    def test_unknown_class_leaves_ships_unchanged(self):
        """Test that a rejected class does not touch the collections."""
        existing = Ship(name="Cutter", ship_class="Enforcer")
        state = GameState(ships={"Enforcer": [existing]})

        with pytest.raises(ValueError, match="Unknown ship class"):
            research_ship(state, "Battlestar", "Galactica", 100, 1)

        assert state.ships == {"Enforcer": [existing]}
        assert "Battlestar" not in state.ships
