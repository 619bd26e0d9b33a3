"""World state display for the local CLI.

This module prints the resource summary, infrastructure and ship designs
shown by the ``show`` command, and the reports that follow each action.
"""

from ..models.game_state import GameState
from ..models.ship import Ship


def format_error_message(message: str, hint: str = "") -> str:
    """Format an error line with the optional help hint appended."""
    formatted = f"❌ {message}"
    if hint:
        formatted += f"\n\n{hint}"
    return formatted


class DisplayManager:
    """Manages world state display."""

    def show_state(self, state: GameState) -> None:
        """Display the complete world state.

        Shows:
        - Food, water and minerals
        - Population and happiness
        - Research points, StarCoins and tax rate
        - Ticks passed
        - Infrastructure counts
        - Ship designs grouped by class

        Args:
            state: World state to show
        """
        print(f"Food: {state.food}, Water: {state.water}, Minerals: {state.minerals}")
        print(f"Population: {state.population}, Happiness: {state.happiness:.2f}%")
        print(f"Research Points: {state.research_points}")
        print(f"StarCoins: {state.star_coins}, TaxRate: {state.tax_rate:.2f}")
        print(f"Ticks Passed: {state.ticks_passed}")

        self._show_infrastructure(state)
        self._show_ships(state)

    def _show_infrastructure(self, state: GameState) -> None:
        print("Infrastructure:")
        if not state.infrastructure:
            print("  None")
            return
        for kind in sorted(state.infrastructure):
            print(f"  {kind}: {state.infrastructure[kind]}")

    def _show_ships(self, state: GameState) -> None:
        print("Ships:")
        if not any(state.ships.values()):
            print("  None")
            return
        for ship_class in sorted(state.ships):
            ships = state.ships[ship_class]
            if not ships:
                continue
            print(f"Class {ship_class}:")
            for ship in ships:
                print(f"  {ship.name} (Level: {ship.level}, Amount: {ship.amount})")

    def show_ship_details(self, ship: Ship) -> None:
        """Display the stats of a single design."""
        print("Ship Details:")
        print(
            f"  Class: {ship.ship_class}, Health: {ship.health}, "
            f"Fuel Capacity: {ship.fuel_capacity}, Fuel Efficiency: {ship.fuel_efficiency:.2f}, "
            f"Damage: {ship.damage}, Personnel Limit: {ship.personnel_limit}, Price: {ship.price}"
        )

    def show_research_result(self, ship: Ship) -> None:
        """Display the outcome of a research project."""
        print(f"Research complete! Developed new ship: {ship.name}")
        self.show_ship_details(ship)

    def show_build_result(self, kind: str, count: int, cost: dict[str, int], state: GameState) -> None:
        """Display the outcome of a build action."""
        spent = ", ".join(f"{amount} {resource}" for resource, amount in sorted(cost.items()))
        print(f"✓ Built {count} {kind} (spent {spent})")
        print(f"  {kind}: {state.infrastructure.get(kind, 0)} total")

    def show_destroy_result(self, kind: str, count: int, refund: int, state: GameState) -> None:
        """Display the outcome of a destroy action."""
        print(f"✓ Destroyed {count} {kind} (refunded {refund} minerals)")
        print(f"  {kind}: {state.infrastructure.get(kind, 0)} remaining")

    def show_construct_result(self, ship: Ship, count: int, state: GameState) -> None:
        """Display the outcome of a construction order."""
        print(f"✓ Constructed {count} x {ship.name} ({ship.ship_class})")
        print(f"  Fleet size: {ship.amount}, StarCoins remaining: {state.star_coins}")
