"""Core value objects for recipe domain.

Immutable value objects that form the building blocks of domain entities.
All value objects are frozen dataclasses with value-based equality.
"""

from .amount_made import AmountMade
from .measure import Duration, ScalarMeasure, TemperatureInterval
from .quantity import Quantity, QuantityKind, add
from .step_type import StepType

__all__ = [
    "AmountMade",
    "Duration",
    "Quantity",
    "QuantityKind",
    "ScalarMeasure",
    "StepType",
    "TemperatureInterval",
    "add",
]
