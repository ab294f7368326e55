"""Core entities for recipe domain."""

from .equipment import Equipment
from .ingredient import Ingredient
from .recipe import Recipe
from .step import Step

__all__ = [
    "Equipment",
    "Ingredient",
    "Recipe",
    "Step",
]
