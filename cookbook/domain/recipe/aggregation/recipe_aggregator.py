"""RecipeAggregator - derived summaries over a recipe's steps.

All operations are pure reads of one recipe: nothing is mutated, results are
fresh values, and calling an operation twice on an unchanged recipe gives
equal results.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterable, List, Optional

import structlog

from cookbook.domain.shared.errors import UnitError
from cookbook.domain.recipe.core.value_objects.measure import Duration
from cookbook.domain.recipe.core.value_objects.step_type import StepType

if TYPE_CHECKING:
    from cookbook.domain.recipe.core.entities.equipment import Equipment
    from cookbook.domain.recipe.core.entities.ingredient import Ingredient
    from cookbook.domain.recipe.core.entities.recipe import Recipe

logger = structlog.get_logger(__name__)


class RecipeAggregator:
    """Compute recipe summaries for renderers.

    Summaries:
        - step_time_totals: time per StepType
        - total_time: time for the whole recipe
        - ingredient_list: ingredients merged by name
        - equipment_list: distinct equipment, first-seen order
        - all_equipment_owned / missing_equipment: ownership coverage
    """

    @staticmethod
    def step_time_totals(recipe: Recipe) -> Dict[StepType, Optional[Duration]]:
        """Time needed for each type of step.

        Steps are grouped by ``step_type``. Within a group a missing
        duration does not erase a known one, and a group whose steps have
        no durations at all maps to None. Step types with no steps are not
        in the result.

        Args:
            recipe: Recipe to summarise

        Returns:
            Mapping StepType -> total Duration (or None)

        Example:
            >>> totals = RecipeAggregator.step_time_totals(recipe)
            >>> totals[StepType.PREP]
            Duration(value=Fraction(300, 1), unit='min')
        """
        totals: Dict[StepType, Optional[Duration]] = {}
        for step in recipe.steps:
            if step.step_type in totals:
                totals[step.step_type] = _add_optional(totals[step.step_type], step.time_needed)
            else:
                totals[step.step_type] = step.time_needed

        logger.debug(
            "Computed step time totals",
            recipe_id=str(recipe.id),
            step_types=[str(step_type) for step_type in totals],
        )
        return totals

    @staticmethod
    def total_time(recipe: Recipe) -> Duration:
        """Total time required for a recipe.

        Steps without a duration count as zero; an empty recipe takes zero
        seconds.
        """
        total = Duration.zero()
        for step in recipe.steps:
            if step.time_needed is not None:
                total = total + step.time_needed
        return total

    @staticmethod
    def ingredient_list(recipe: Recipe) -> Dict[str, Ingredient]:
        """Total amount of each ingredient needed to make the recipe.

        Ingredients are visited in step order. The first entry of a name is
        kept as is; later entries of the same name are added to it, keeping
        the first entry's id and description.

        Args:
            recipe: Recipe to summarise

        Returns:
            Mapping name -> merged Ingredient, in first-seen order

        Raises:
            UnitKindMismatchError: Same name used with different kinds
            UnitScaleMismatchError: Same name used with different units
        """
        merged: Dict[str, Ingredient] = {}
        for step in recipe.steps:
            for ingredient in step.ingredients:
                existing = merged.get(ingredient.name)
                if existing is None:
                    merged[ingredient.name] = ingredient
                    continue
                try:
                    merged[ingredient.name] = existing.merge(ingredient)
                except UnitError as e:
                    logger.warning(
                        "Ingredient merge failed",
                        recipe_id=str(recipe.id),
                        ingredient=ingredient.name,
                        error=str(e),
                    )
                    raise

        logger.debug(
            "Computed ingredient list",
            recipe_id=str(recipe.id),
            ingredients=len(merged),
        )
        return merged

    @staticmethod
    def equipment_list(recipe: Recipe) -> List[Equipment]:
        """Overall list of equipment needed to make the recipe.

        An item is kept only if no structurally equal item was kept before
        it. This is a linear scan, O(n·m) for n equipment entries and m
        distinct items; fine at recipe scale.
        """
        distinct: List[Equipment] = []
        for step in recipe.steps:
            for equipment in step.equipment:
                if not any(kept == equipment for kept in distinct):
                    distinct.append(equipment)
        return distinct

    @staticmethod
    def all_equipment_owned(recipe: Recipe) -> bool:
        """True iff every equipment item of every step is owned.

        Vacuously true for a recipe that uses no equipment.
        """
        return all(equipment.is_owned for step in recipe.steps for equipment in step.equipment)

    @staticmethod
    def missing_equipment(recipe: Recipe) -> List[Equipment]:
        """Distinct equipment the recipe needs that is not owned."""
        return [equipment for equipment in RecipeAggregator.equipment_list(recipe) if not equipment.is_owned]

    @staticmethod
    def compile_tag_list(recipes: Iterable[Recipe]) -> List[str]:
        """All tags used across recipes, sorted and de-duplicated."""
        tags = {tag for recipe in recipes for tag in recipe.tags}
        return sorted(tags)


def _add_optional(lhs: Optional[Duration], rhs: Optional[Duration]) -> Optional[Duration]:
    """Add two optional durations; None only when both are None."""
    if lhs is None:
        return rhs
    if rhs is None:
        return lhs
    return lhs + rhs


step_time_totals = RecipeAggregator.step_time_totals
total_time = RecipeAggregator.total_time
ingredient_list = RecipeAggregator.ingredient_list
equipment_list = RecipeAggregator.equipment_list
all_equipment_owned = RecipeAggregator.all_equipment_owned
missing_equipment = RecipeAggregator.missing_equipment
compile_tag_list = RecipeAggregator.compile_tag_list
