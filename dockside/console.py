"""
Interactive vessel management console.

Reads menu choices and field values from the user and drives a
FleetManager. Domain failures are printed and the session continues.
"""

from __future__ import annotations

from typing import Callable

from dockside.config.constants import EXIT_COMMAND, MENU_OPTIONS, UNIT_KIND_CHOICES
from dockside.models.transport_unit import UnitKind, unit_type_label
from dockside.services.fleet_manager import FleetManager
from dockside.utils.logger import get_logger

logger = get_logger(__name__)


def parse_bool(text: str) -> bool:
    """Parse 'true'/'false' (any case)."""
    value = text.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError(f"Expected true or false, got '{text.strip()}'")


class VesselConsole:
    """
    Menu loop over a FleetManager.

    Args:
        manager: fleet to operate on (a new one by default)
        input_fn: prompt reader, same signature as input()
        output: line writer, same signature as print()
    """

    def __init__(
        self,
        manager: FleetManager | None = None,
        input_fn: Callable[[str], str] = input,
        output: Callable[..., None] = print,
    ):
        self.manager = manager or FleetManager()
        self._input = input_fn
        self._print = output
        self.actions = {
            "1": self.register_vessel,
            "2": self.create_cargo_unit,
            "3": self.assign_cargo,
            "4": self.remove_cargo,
            "5": self.display_fleet,
            "6": self.fill_cargo,
            "7": self.clear_cargo,
            "8": self.show_hazard_alerts,
        }

    # -- prompts --------------------------------------------------------------

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _ask_float(self, prompt: str) -> float:
        return float(self._ask(prompt))

    def _ask_int(self, prompt: str) -> int:
        return int(self._ask(prompt))

    def _ask_index(self, prompt: str) -> int:
        """Read a 1-based choice and return it zero-based."""
        return self._ask_int(prompt) - 1

    def _print_menu(self):
        self._print("\nVessel Management Console")
        for key, label in MENU_OPTIONS.items():
            self._print(f"{key}. {label}")
        self._print(f"Type '{EXIT_COMMAND}' to close the application")

    def _list_ships(self, suffix: str = ""):
        for i, vessel in enumerate(self.manager.fleet, start=1):
            self._print(f"{i}. ship with speed limit {vessel.speed_limit} "
                        f"and capacity {vessel.capacity}{suffix}")

    def _list_units(self):
        for i, unit in enumerate(self.manager.cargo_units, start=1):
            self._print(f"{i}. Cargo unit with ID {unit.unit_id}")

    # -- loop -----------------------------------------------------------------

    def run(self) -> int:
        """Run until 'exit' or end of input. Returns the exit status."""
        while True:
            self._print_menu()
            try:
                action = self._ask("Choose an operation: ")
            except EOFError:
                break
            if action.lower() == EXIT_COMMAND:
                break

            handler = self.actions.get(action)
            if handler is None:
                self._print("Unknown command, please try again.")
                continue

            try:
                handler()
            except ValueError as e:
                logger.debug("Invalid input for command %s: %s", action, e)
                self._print(f"Invalid input: {e}")
            except EOFError:
                break
        return 0

    # -- actions --------------------------------------------------------------

    def register_vessel(self):
        speed = self._ask_float("Enter ship's maximum speed: ")
        capacity = self._ask_int("Enter ship's cargo capacity: ")
        limit = self._ask_float("Enter ship's weight limit (tons): ")
        self.manager.register_vessel(speed, capacity, limit)
        self._print("ship registered successfully.")

    def create_cargo_unit(self):
        choice = self._ask("Choose the type of cargo unit (1. Fluid, 2. Gas, 3. Cool): ")
        kind = UNIT_KIND_CHOICES.get(choice)
        if kind is None:
            self._print("Invalid choice of cargo unit.")
            return

        height = self._ask_int("Enter unit height: ")
        base_weight = self._ask_float("Enter unit base weight: ")
        depth = self._ask_int("Enter unit depth: ")
        unit_id = self._ask("Enter unit ID: ")
        max_load = self._ask_float("Enter unit's maximum load: ")

        details = {}
        if kind == UnitKind.FLUID.value:
            details["hazardous"] = parse_bool(self._ask("Is the material hazardous? (true/false): "))
        elif kind == UnitKind.GAS.value:
            details["pressure"] = self._ask_float("Enter unit pressure: ")
        else:
            details["stored_product"] = self._ask("Enter stored product type: ")
            details["set_temperature"] = self._ask_float("Enter temperature setting: ")

        self.manager.create_unit(kind, unit_id, height, base_weight, depth, max_load, **details)
        self._print("Cargo unit created successfully.")

    def assign_cargo(self):
        if not self.manager.fleet or not self.manager.cargo_units:
            self._print("Operation not possible. Either no ships or no cargo units available.")
            return

        self._print("Choose a ship by index:")
        self._list_ships()
        vessel_index = self._ask_index("")
        self._print("Select a cargo unit by index:")
        self._list_units()
        unit_index = self._ask_index("")

        result = self.manager.assign_unit(vessel_index, unit_index)
        if result:
            self._print("Cargo unit assigned to the ship successfully.")
        else:
            self._print(f"Failed to assign cargo unit to the ship: {result.message}")

    def remove_cargo(self):
        if not self.manager.fleet:
            self._print("There are no ships registered in the system.")
            return

        self._print("Choose a ship by index to remove cargo from:")
        self._list_ships(suffix=" units")
        vessel_index = self._ask_index("")
        if not 0 <= vessel_index < len(self.manager.fleet):
            self._print(f"Failed to remove cargo unit from the ship: No ship at position {vessel_index + 1}.")
            return
        if not self.manager.fleet[vessel_index].units:
            self._print("This ship has no cargo units loaded.")
            return

        unit_id = self._ask("Enter the ID of the cargo unit to remove: ")
        result = self.manager.remove_unit(vessel_index, unit_id)
        if result:
            self._print("Cargo unit removed from the ship successfully.")
        else:
            self._print(f"Failed to remove cargo unit from the ship: {result.message}")

    def display_fleet(self):
        if not self.manager.fleet:
            self._print("No ships are currently registered.")
            return

        for vessel in self.manager.fleet:
            self._print(f"\nship Details: Maximum Speed: {vessel.speed_limit} knots, "
                        f"Capacity: {vessel.capacity} units, Weight Limit: {vessel.weight_limit} tons")
            if vessel.units:
                self._print("Loaded Cargo Units:")
                for unit in vessel.units:
                    self._print(f"- ID: {unit.unit_id}, Load Weight: {unit.load_weight} kg, "
                                f"Type: {unit_type_label(unit)}")
            else:
                self._print("No cargo units are currently loaded on this vessel.")

    def fill_cargo(self):
        if not self.manager.cargo_units:
            self._print("There are no cargo units available.")
            return

        self._print("Select a cargo unit by index:")
        self._list_units()
        unit_index = self._ask_index("")
        weight = self._ask_float("Enter load weight (kg): ")

        result = self.manager.fill_unit(unit_index, weight)
        if result:
            self._print("Cargo unit filled successfully.")
        else:
            self._print(f"Failed to fill cargo unit: {result.message}")

    def clear_cargo(self):
        if not self.manager.cargo_units:
            self._print("There are no cargo units available.")
            return

        self._print("Select a cargo unit by index:")
        self._list_units()
        result = self.manager.clear_unit(self._ask_index(""))
        if result:
            self._print(result.message)
        else:
            self._print(f"Failed to clear cargo unit: {result.message}")

    def show_hazard_alerts(self):
        alerts = self.manager.hazard_alerts()
        if not alerts:
            self._print("No hazard alerts.")
            return
        for alert in alerts:
            self._print(alert)


def run_console(manager: FleetManager | None = None) -> int:
    """Run the interactive console on stdin/stdout."""
    return VesselConsole(manager).run()
