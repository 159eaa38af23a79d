"""
Fleet manager - the in-memory fleet and cargo pool behind the console.

Holds the registered vessels and every created cargo unit, and routes
console actions (by list index or unit ID) to the domain model.
"""

from __future__ import annotations

from dockside.models.results import CargoError, OperationResult
from dockside.models.transport_unit import (
    UNIT_FACTORIES,
    TransportUnit,
    UnitKind,
    clear_load,
    fill,
    hazard_alert,
)
from dockside.models.vessel import Vessel
from dockside.utils.logger import get_logger

logger = get_logger(__name__)


def _invalid_selection(what: str, index: int) -> OperationResult:
    return OperationResult.failure(CargoError.INVALID_SELECTION, f"No {what} at position {index + 1}.")


class FleetManager:
    """
    Owns the fleet and the cargo pool for one session.

    Vessels and units are addressed by zero-based position in
    `fleet` and `cargo_units`.
    """

    def __init__(self):
        self.fleet: list[Vessel] = []
        self.cargo_units: list[TransportUnit] = []

    def register_vessel(self, speed_limit: float, capacity: int, weight_limit: float) -> Vessel:
        vessel = Vessel(speed_limit=speed_limit, capacity=capacity, weight_limit=weight_limit)
        self.fleet.append(vessel)
        logger.info("Vessel #%d registered (speed %.1f kn, %d units, %.1f t)",
                    len(self.fleet), speed_limit, capacity, weight_limit)
        return vessel

    def create_unit(self, kind: UnitKind | str, unit_id: str, height: int, base_weight: float,
                    depth: int, maximum_load: float, **details) -> TransportUnit:
        """
        Create a cargo unit and add it to the pool.

        `details` carries the kind-specific fields: hazardous (fluid),
        pressure (gas), stored_product / set_temperature (cool).

        Raises:
            ValueError: unknown kind, invalid dimensions or duplicate ID
        """
        kind = UnitKind(kind)
        if self.find_unit(unit_id) is not None:
            raise ValueError(f"A cargo unit with ID {unit_id} already exists")
        unit = UNIT_FACTORIES[kind](unit_id, height, base_weight, depth, maximum_load, **details)
        self.cargo_units.append(unit)
        logger.info("%s unit %s created", kind.value.capitalize(), unit_id)
        return unit

    def find_unit(self, unit_id: str) -> TransportUnit | None:
        for unit in self.cargo_units:
            if unit.unit_id == unit_id:
                return unit
        return None

    def vessel_of(self, unit: TransportUnit) -> Vessel | None:
        """The vessel carrying `unit`, if any."""
        for vessel in self.fleet:
            if any(u is unit for u in vessel.units):
                return vessel
        return None

    def assign_unit(self, vessel_index: int, unit_index: int) -> OperationResult:
        if not 0 <= vessel_index < len(self.fleet):
            return _invalid_selection("ship", vessel_index)
        if not 0 <= unit_index < len(self.cargo_units):
            return _invalid_selection("cargo unit", unit_index)

        unit = self.cargo_units[unit_index]
        if self.vessel_of(unit) is not None:
            return OperationResult.failure(
                CargoError.UNIT_ALREADY_ASSIGNED,
                f"Cargo unit {unit.unit_id} is already aboard a ship.",
            )
        return self.fleet[vessel_index].add_unit(unit)

    def remove_unit(self, vessel_index: int, unit_id: str) -> OperationResult:
        if not 0 <= vessel_index < len(self.fleet):
            return _invalid_selection("ship", vessel_index)
        return self.fleet[vessel_index].remove_unit(unit_id)

    def fill_unit(self, unit_index: int, weight: float) -> OperationResult:
        """Fill a pooled unit; units aboard a vessel must also respect its weight limit."""
        if not 0 <= unit_index < len(self.cargo_units):
            return _invalid_selection("cargo unit", unit_index)

        unit = self.cargo_units[unit_index]
        vessel = self.vessel_of(unit)
        if vessel is not None:
            return vessel.fill_unit(unit.unit_id, weight)
        return fill(unit, weight)

    def clear_unit(self, unit_index: int) -> OperationResult:
        if not 0 <= unit_index < len(self.cargo_units):
            return _invalid_selection("cargo unit", unit_index)
        unit = self.cargo_units[unit_index]
        clear_load(unit)
        return OperationResult.success(
            f"Cargo unit {unit.unit_id} cleared, {unit.load_weight} kg remaining."
        )

    def hazard_alerts(self) -> list[str]:
        """Warnings for every pooled unit that raises one."""
        alerts = []
        for unit in self.cargo_units:
            message = hazard_alert(unit)
            if message:
                alerts.append(message)
        if alerts:
            logger.warning("%d hazard alert(s) active", len(alerts))
        return alerts
