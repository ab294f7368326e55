"""Step entity - a discrete step within a recipe."""

from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID

from ..value_objects.measure import Duration, TemperatureInterval
from ..value_objects.step_type import StepType
from .equipment import Equipment
from .ingredient import Ingredient


@dataclass
class Step:
    """
    Entity: one step of a recipe with what it needs.

    Example:
        Step "Cream butter and sugar" (Prep, 5 min)
        ├─ Ingredient = butter (113 g)
        ├─ Ingredient = sugar (200 g)
        └─ Equipment = stand mixer

    Duration and temperature are optional: informational steps have
    neither, and steps without heat have no temperature.
    """

    instructions: str = ""
    time_needed: Optional[Duration] = None
    temperature: Optional[TemperatureInterval] = None
    ingredients: List[Ingredient] = field(default_factory=list)
    equipment: List[Equipment] = field(default_factory=list)
    step_type: StepType = StepType.OTHER
    id: Optional[UUID] = None

    def __post_init__(self) -> None:
        """Normalize step type given as plain text."""
        self.step_type = StepType(self.step_type)

    def add_ingredient(self, ingredient: Ingredient) -> None:
        """Append an ingredient to the step."""
        self.ingredients.append(ingredient)

    def add_equipment(self, equipment: Equipment) -> None:
        """Append a piece of equipment to the step."""
        self.equipment.append(equipment)
