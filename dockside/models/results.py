"""
Outcome values for cargo operations.

Rule violations (overfilling, full or overweight vessels, unknown units)
are returned to the caller as an OperationResult instead of being raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CargoError(str, Enum):
    """Why a cargo operation was rejected."""
    CAPACITY_EXCEEDED = "capacity_exceeded"
    INVALID_WEIGHT = "invalid_weight"
    VESSEL_FULL = "vessel_full"
    VESSEL_OVERWEIGHT = "vessel_overweight"
    UNIT_NOT_FOUND = "unit_not_found"
    UNIT_ALREADY_ASSIGNED = "unit_already_assigned"
    INVALID_SELECTION = "invalid_selection"


@dataclass(frozen=True)
class OperationResult:
    ok: bool
    error: CargoError | None = None
    message: str = ""

    @classmethod
    def success(cls, message: str = "") -> OperationResult:
        return cls(ok=True, message=message)

    @classmethod
    def failure(cls, error: CargoError, message: str) -> OperationResult:
        return cls(ok=False, error=error, message=message)

    def __bool__(self) -> bool:
        return self.ok
