"""Recipe aggregate root - one recipe from start to finish."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
from uuid import UUID, uuid4

from cookbook.domain.recipe.aggregation.recipe_aggregator import RecipeAggregator

from ..value_objects.amount_made import AmountMade
from ..value_objects.measure import Duration
from ..value_objects.step_type import StepType
from .equipment import Equipment
from .ingredient import Ingredient
from .step import Step


@dataclass
class Recipe:
    """
    Aggregate Root: a recipe and its ordered steps.

    Example:
        Recipe = "Shortbread"
        ├─ Step 1 = "Cream butter and sugar" (Prep, 5 min)
        ├─ Step 2 = "Bake" (Cook, 20 min, 160 °C)
        └─ Step 3 = "Cool" (Wait, 30 min)

    The recipe owns its steps, and the steps own their ingredients and
    equipment; nothing is shared between recipes.

    Identity: Defined by unique ID (UUID)
    Mutability: Steps can be added; summaries are computed on demand
    """

    name: str = ""
    id: UUID = field(default_factory=uuid4)
    description: Optional[str] = None
    comments: Optional[str] = None
    source: str = ""
    author: str = ""
    amount_made: AmountMade = field(default_factory=AmountMade)
    steps: List[Step] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)

    def add_step(self, step: Step) -> None:
        """Append a step to the end of the recipe."""
        self.steps.append(step)

    def step_time_totals(self) -> Dict[StepType, Optional[Duration]]:
        """Time needed per step type. See :meth:`RecipeAggregator.step_time_totals`."""
        return RecipeAggregator.step_time_totals(self)

    def total_time(self) -> Duration:
        """Total time needed. See :meth:`RecipeAggregator.total_time`."""
        return RecipeAggregator.total_time(self)

    def ingredient_list(self) -> Dict[str, Ingredient]:
        """Merged ingredients. See :meth:`RecipeAggregator.ingredient_list`."""
        return RecipeAggregator.ingredient_list(self)

    def equipment_list(self) -> List[Equipment]:
        """Distinct equipment. See :meth:`RecipeAggregator.equipment_list`."""
        return RecipeAggregator.equipment_list(self)

    def all_equipment_owned(self) -> bool:
        """Whether every piece of equipment is owned."""
        return RecipeAggregator.all_equipment_owned(self)

    def missing_equipment(self) -> List[Equipment]:
        """Distinct equipment that is not owned."""
        return RecipeAggregator.missing_equipment(self)
