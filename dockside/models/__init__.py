"""
Models package - cargo units, vessels and registry records.
"""

from .results import CargoError, OperationResult
from .transport_unit import TransportUnit, UnitKind
from .vessel import Vessel
from .animal import Animal, AnimalUpdate, Visit

__all__ = [
    "CargoError", "OperationResult",
    "TransportUnit", "UnitKind",
    "Vessel",
    "Animal", "AnimalUpdate", "Visit",
]
