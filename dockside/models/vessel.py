"""
Vessel model - a ship carrying transport units.

A vessel is bounded by the number of units it can carry (capacity)
and by the total weight of those units (weight_limit, in tons).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from dockside.config.constants import KG_PER_TON
from dockside.models.results import CargoError, OperationResult
from dockside.models.transport_unit import TransportUnit, check_fill
from dockside.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class Vessel:
    speed_limit: float          # knots
    capacity: int               # max number of units
    weight_limit: float         # tons
    units: list[TransportUnit] = field(default_factory=list)

    def __post_init__(self):
        if not math.isfinite(self.speed_limit) or self.speed_limit < 0:
            raise ValueError(f"Invalid speed limit: {self.speed_limit}")
        if self.capacity < 0:
            raise ValueError(f"Invalid capacity: {self.capacity}")
        if not math.isfinite(self.weight_limit) or self.weight_limit < 0:
            raise ValueError(f"Invalid weight limit: {self.weight_limit}")

    def total_weight_kg(self) -> float:
        """Sum of load and base weight over all units aboard."""
        return sum(u.load_weight + u.base_weight for u in self.units)

    def total_weight_tons(self) -> float:
        return self.total_weight_kg() / KG_PER_TON

    def find_unit(self, unit_id: str) -> TransportUnit | None:
        """First unit aboard with the given ID, or None."""
        for unit in self.units:
            if unit.unit_id == unit_id:
                return unit
        return None

    def add_unit(self, unit: TransportUnit) -> OperationResult:
        """
        Take a unit aboard.

        Returns:
            Failure with VESSEL_FULL when the unit count is at capacity,
            VESSEL_OVERWEIGHT when the unit would push the total past
            the weight limit, success otherwise.
        """
        if len(self.units) >= self.capacity:
            logger.info("Unit %s rejected: vessel at capacity (%d)", unit.unit_id, self.capacity)
            return OperationResult.failure(CargoError.VESSEL_FULL, "ship at full capacity.")

        if not math.isfinite(unit.gross_weight):
            logger.info("Unit %s rejected: weight is not a finite number", unit.unit_id)
            return OperationResult.failure(
                CargoError.INVALID_WEIGHT, f"Unit {unit.unit_id} has no finite weight."
            )

        projected = self.total_weight_kg() / KG_PER_TON + unit.gross_weight / KG_PER_TON
        if projected > self.weight_limit:
            logger.info("Unit %s rejected: %.3f t exceeds limit of %.3f t",
                        unit.unit_id, projected, self.weight_limit)
            return OperationResult.failure(CargoError.VESSEL_OVERWEIGHT, "Exceeds vessel's weight limit.")

        self.units.append(unit)
        logger.debug("Unit %s loaded (%d/%d units, %.3f t)",
                     unit.unit_id, len(self.units), self.capacity, projected)
        return OperationResult.success(f"Unit {unit.unit_id} loaded.")

    def remove_unit(self, unit_id: str) -> OperationResult:
        """
        Unload the first unit with the given ID.

        An unknown ID leaves the vessel unchanged and is reported as a
        UNIT_NOT_FOUND failure; nothing is raised.
        """
        unit = self.find_unit(unit_id)
        if unit is None:
            logger.info("Remove of unit %s: not aboard", unit_id)
            return OperationResult.failure(CargoError.UNIT_NOT_FOUND, f"No unit with ID {unit_id} aboard.")
        self.units.remove(unit)
        logger.debug("Unit %s unloaded", unit_id)
        return OperationResult.success(f"Unit {unit_id} removed.")

    def fill_unit(self, unit_id: str, weight: float) -> OperationResult:
        """Fill a unit aboard without breaking the vessel's weight limit."""
        unit = self.find_unit(unit_id)
        if unit is None:
            return OperationResult.failure(CargoError.UNIT_NOT_FOUND, f"No unit with ID {unit_id} aboard.")

        result = check_fill(unit, weight)
        if not result:
            return result

        projected = (self.total_weight_kg() - unit.load_weight + weight) / KG_PER_TON
        if projected > self.weight_limit:
            logger.info("Fill of unit %s rejected: %.3f t exceeds limit of %.3f t",
                        unit_id, projected, self.weight_limit)
            return OperationResult.failure(CargoError.VESSEL_OVERWEIGHT, "Exceeds vessel's weight limit.")

        unit.load_weight = weight
        return OperationResult.success(f"Unit {unit_id} filled with {weight} kg.")
