"""Persisted record models and their mapping to the domain."""

from .mapper import RecipeMapper
from .models import EquipmentRecord, IngredientRecord, QuantityRecord, RecipeRecord, StepRecord

__all__ = [
    "EquipmentRecord",
    "IngredientRecord",
    "QuantityRecord",
    "RecipeMapper",
    "RecipeRecord",
    "StepRecord",
]
