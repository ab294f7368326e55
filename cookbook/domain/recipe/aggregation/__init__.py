"""Recipe-level aggregation."""

from .recipe_aggregator import (
    RecipeAggregator,
    all_equipment_owned,
    compile_tag_list,
    equipment_list,
    ingredient_list,
    missing_equipment,
    step_time_totals,
    total_time,
)

__all__ = [
    "RecipeAggregator",
    "all_equipment_owned",
    "compile_tag_list",
    "equipment_list",
    "ingredient_list",
    "missing_equipment",
    "step_time_totals",
    "total_time",
]
