"""
Transport unit model - cargo containers carried aboard a vessel.

A unit is one of three fixed kinds (fluid, gas, cool). All kinds share
one record type whose `details` holds the kind's own fields;
kind-specific behaviour (permissible load, residual load after
clearing, hazard alerts) is looked up by the unit's kind.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from dockside.config.constants import (
    FLUID_PERMISSIBLE_RATIO,
    FLUID_HAZARDOUS_PERMISSIBLE_RATIO,
    GAS_RESIDUAL_FRACTION,
)
from dockside.models.results import CargoError, OperationResult
from dockside.utils.logger import get_logger

logger = get_logger(__name__)


class UnitKind(str, Enum):
    FLUID = "fluid"
    GAS = "gas"
    COOL = "cool"


@dataclass(frozen=True)
class FluidDetails:
    hazardous: bool = False


@dataclass(frozen=True)
class GasDetails:
    pressure: float = 0.0  # informational only


@dataclass(frozen=True)
class CoolDetails:
    stored_product: str = ""
    set_temperature: float = 0.0


DETAIL_TYPES = {
    UnitKind.FLUID: FluidDetails,
    UnitKind.GAS: GasDetails,
    UnitKind.COOL: CoolDetails,
}


@dataclass
class TransportUnit:
    """
    A cargo unit. Weights are in kilograms.

    `details` must be the detail type of the unit's kind
    (FluidDetails, GasDetails or CoolDetails).
    """
    kind: UnitKind
    unit_id: str
    height: int
    base_weight: float
    depth: int
    maximum_load: float
    details: FluidDetails | GasDetails | CoolDetails
    load_weight: float = 0.0

    def __post_init__(self):
        expected = DETAIL_TYPES[self.kind]
        if not isinstance(self.details, expected):
            raise ValueError(
                f"{self.kind.value} unit {self.unit_id} needs {expected.__name__}, "
                f"got {type(self.details).__name__}"
            )

    @property
    def gross_weight(self) -> float:
        """Load plus base weight in kg."""
        return self.load_weight + self.base_weight


def _require_finite(unit_id, label, value):
    if not math.isfinite(value):
        raise ValueError(f"Invalid {label} for unit {unit_id}: {value}")


def _validate_common(unit_id, height, base_weight, depth, maximum_load):
    if not unit_id or not str(unit_id).strip():
        raise ValueError("Unit ID must not be empty")
    if height <= 0 or depth <= 0:
        raise ValueError(f"Invalid dimensions for unit {unit_id}: height and depth must be positive")
    _require_finite(unit_id, "base weight", base_weight)
    if base_weight < 0:
        raise ValueError(f"Invalid base weight for unit {unit_id}: {base_weight}")
    _require_finite(unit_id, "maximum load", maximum_load)
    if maximum_load < 0:
        raise ValueError(f"Invalid maximum load for unit {unit_id}: {maximum_load}")


def fluid_unit(unit_id: str, height: int, base_weight: float, depth: int,
               maximum_load: float, hazardous: bool = False) -> TransportUnit:
    """Create a fluid unit."""
    _validate_common(unit_id, height, base_weight, depth, maximum_load)
    return TransportUnit(
        kind=UnitKind.FLUID, unit_id=unit_id, height=height, base_weight=base_weight,
        depth=depth, maximum_load=maximum_load, details=FluidDetails(hazardous=hazardous),
    )


def gas_unit(unit_id: str, height: int, base_weight: float, depth: int,
             maximum_load: float, pressure: float = 0.0) -> TransportUnit:
    """Create a gas unit."""
    _validate_common(unit_id, height, base_weight, depth, maximum_load)
    _require_finite(unit_id, "pressure", pressure)
    return TransportUnit(
        kind=UnitKind.GAS, unit_id=unit_id, height=height, base_weight=base_weight,
        depth=depth, maximum_load=maximum_load, details=GasDetails(pressure=pressure),
    )


def cool_unit(unit_id: str, height: int, base_weight: float, depth: int,
              maximum_load: float, stored_product: str = "",
              set_temperature: float = 0.0) -> TransportUnit:
    """Create a refrigerated unit."""
    _validate_common(unit_id, height, base_weight, depth, maximum_load)
    _require_finite(unit_id, "temperature", set_temperature)
    return TransportUnit(
        kind=UnitKind.COOL, unit_id=unit_id, height=height, base_weight=base_weight,
        depth=depth, maximum_load=maximum_load,
        details=CoolDetails(stored_product=stored_product, set_temperature=set_temperature),
    )


UNIT_FACTORIES: dict[UnitKind, Callable[..., TransportUnit]] = {
    UnitKind.FLUID: fluid_unit,
    UnitKind.GAS: gas_unit,
    UnitKind.COOL: cool_unit,
}


# ---------------------------------------------------------------------------
# Per-kind behaviour
# ---------------------------------------------------------------------------
def _fluid_permissible(unit: TransportUnit) -> float:
    ratio = FLUID_HAZARDOUS_PERMISSIBLE_RATIO if unit.details.hazardous else FLUID_PERMISSIBLE_RATIO
    return unit.maximum_load * ratio


def _full_permissible(unit: TransportUnit) -> float:
    return unit.maximum_load


PERMISSIBLE_LOAD: dict[UnitKind, Callable[[TransportUnit], float]] = {
    UnitKind.FLUID: _fluid_permissible,
    UnitKind.GAS: _full_permissible,
    UnitKind.COOL: _full_permissible,
}

OVERFILL_MESSAGES = {
    UnitKind.FLUID: "Exceeds permissible load.",
    UnitKind.GAS: "Exceeds maximum load.",
    UnitKind.COOL: "Exceeds maximum load.",
}

# Fraction of the load left behind by clear_load
RESIDUAL_FRACTION = {
    UnitKind.FLUID: 0.0,
    UnitKind.GAS: GAS_RESIDUAL_FRACTION,
    UnitKind.COOL: 0.0,
}


def _fluid_alert(unit: TransportUnit) -> str | None:
    if unit.details.hazardous:
        return f"Warning: Hazardous material in unit {unit.unit_id}"
    return None


def _gas_alert(unit: TransportUnit) -> str | None:
    return f"Warning: Gas unit {unit.unit_id} is under hazardous conditions."


# Cool units carry no hazard signalling and have no entry here
HAZARD_ALERTS: dict[UnitKind, Callable[[TransportUnit], str | None]] = {
    UnitKind.FLUID: _fluid_alert,
    UnitKind.GAS: _gas_alert,
}


def permissible_load(unit: TransportUnit) -> float:
    """Maximum weight (kg) the unit may be filled with."""
    return PERMISSIBLE_LOAD[unit.kind](unit)


def check_fill(unit: TransportUnit, weight: float) -> OperationResult:
    """Validate a fill without changing the unit."""
    if not math.isfinite(weight):
        return OperationResult.failure(
            CargoError.INVALID_WEIGHT, f"Load weight must be a finite number: {weight}",
        )
    if weight < 0:
        return OperationResult.failure(
            CargoError.INVALID_WEIGHT, f"Load weight cannot be negative: {weight}",
        )
    if weight > permissible_load(unit):
        return OperationResult.failure(CargoError.CAPACITY_EXCEEDED, OVERFILL_MESSAGES[unit.kind])
    return OperationResult.success()


def fill(unit: TransportUnit, weight: float) -> OperationResult:
    """
    Replace the unit's load with `weight` kg.

    Rejected fills leave the load unchanged; nothing is clamped.
    """
    result = check_fill(unit, weight)
    if not result:
        logger.info("Fill of unit %s with %.1f kg rejected: %s",
                    unit.unit_id, weight, result.message)
        return result
    unit.load_weight = weight
    logger.debug("Unit %s filled to %.1f kg", unit.unit_id, weight)
    return OperationResult.success(f"Unit {unit.unit_id} filled with {weight} kg.")


def clear_load(unit: TransportUnit) -> None:
    """Empty the unit; gas units keep a residual share of their load."""
    unit.load_weight *= RESIDUAL_FRACTION[unit.kind]
    logger.debug("Unit %s cleared, %.1f kg remaining", unit.unit_id, unit.load_weight)


def hazard_alert(unit: TransportUnit) -> str | None:
    """Return the unit's hazard warning, or None when it has nothing to report."""
    alert = HAZARD_ALERTS.get(unit.kind)
    if alert is None:
        return None
    return alert(unit)


def unit_type_label(unit: TransportUnit) -> str:
    return unit.kind.value.capitalize()
