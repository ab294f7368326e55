"""
Recipe record mapper.

Transforms persisted records to domain objects and back. This is the
boundary where unit abbreviations are checked: anything outside the
registry is rejected here, never deep inside aggregation.
"""

from typing import Any, Mapping, Optional
from uuid import uuid4

import structlog

from cookbook.domain.recipe.core.entities.equipment import Equipment
from cookbook.domain.recipe.core.entities.ingredient import Ingredient
from cookbook.domain.recipe.core.entities.recipe import Recipe
from cookbook.domain.recipe.core.entities.step import Step
from cookbook.domain.recipe.core.factories.measurement_factory import MeasurementFactory
from cookbook.domain.recipe.core.value_objects.amount_made import AmountMade
from cookbook.domain.recipe.core.value_objects.measure import ScalarMeasure
from cookbook.domain.recipe.core.value_objects.quantity import Quantity, QuantityKind
from cookbook.domain.recipe.records.models import (
    EquipmentRecord,
    IngredientRecord,
    QuantityRecord,
    RecipeRecord,
    StepRecord,
)
from cookbook.domain.shared.errors import DomainError, InvalidRecordError
from cookbook.domain.units.conversion import format_magnitude
from cookbook.domain.units.kinds import UnitKind

logger = structlog.get_logger(__name__)


class RecipeMapper:
    """Maps recipe records to domain objects and back."""

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> Recipe:
        """Validate a plain mapping and convert it to a Recipe.

        Raises:
            pydantic.ValidationError: If the mapping does not have the record shape
            DomainError: If a magnitude or unit is rejected
        """
        return RecipeMapper.to_domain(RecipeRecord.model_validate(data))

    @staticmethod
    def to_domain(record: RecipeRecord) -> Recipe:
        """Convert a recipe record to a Recipe aggregate.

        Records without an id get a fresh one.

        Args:
            record: Validated recipe record

        Returns:
            Domain Recipe with canonical, exact measurements

        Raises:
            UnitNotSpecifiedError: A magnitude has no unit
            UnrecognizedUnitError: A unit is not in the registry
            MalformedMagnitudeError: A magnitude is not an exact number
            NegativeMagnitudeError: A quantity or duration is below zero
            InvalidRecordError: A count carries a unit, or a value breaks an
                entity invariant (negative yield, blank name)
        """
        try:
            recipe = Recipe(
                id=record.id or uuid4(),
                name=record.name,
                description=record.description,
                comments=record.comments,
                source=record.source,
                author=record.author,
                amount_made=AmountMade(record.amount_made, record.amount_made_units),
                steps=[RecipeMapper.step_to_domain(step) for step in record.steps],
                tags=list(record.tags),
            )
        except DomainError as e:
            logger.warning(
                "Recipe record rejected",
                recipe=record.name,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise
        except ValueError as e:
            logger.warning(
                "Recipe record rejected",
                recipe=record.name,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise InvalidRecordError(str(e)) from e

        logger.debug(
            "Mapped recipe record",
            recipe_id=str(recipe.id),
            steps=len(recipe.steps),
        )
        return recipe

    @staticmethod
    def step_to_domain(record: StepRecord) -> Step:
        """Convert a step record, parsing its duration and temperature."""
        time_needed = None
        if record.time_needed is not None:
            time_needed = MeasurementFactory.parse(UnitKind.TIME, record.time_needed, record.time_needed_unit)

        temperature = None
        if record.temperature is not None:
            temperature = MeasurementFactory.parse(
                UnitKind.TEMPERATURE_INTERVAL, record.temperature, record.temperature_unit
            )

        return Step(
            id=record.id,
            instructions=record.instructions,
            time_needed=time_needed,
            temperature=temperature,
            ingredients=[RecipeMapper.ingredient_to_domain(i) for i in record.ingredients],
            equipment=[RecipeMapper.equipment_to_domain(e) for e in record.equipment],
            step_type=record.step_type,
        )

    @staticmethod
    def ingredient_to_domain(record: IngredientRecord) -> Ingredient:
        """Convert an ingredient record."""
        return Ingredient(
            id=record.id or uuid4(),
            name=record.name,
            description=record.description,
            quantity=RecipeMapper.quantity_to_domain(record.quantity),
        )

    @staticmethod
    def quantity_to_domain(record: QuantityRecord) -> Quantity:
        """Convert an amount record to a Quantity."""
        unit_kind = record.kind.unit_kind()
        if unit_kind is None:
            if record.unit is not None:
                raise InvalidRecordError(f"Count quantities cannot carry a unit: {record.unit!r}")
            return MeasurementFactory.parse_count(record.value)
        return MeasurementFactory.parse(unit_kind, record.value, record.unit)

    @staticmethod
    def equipment_to_domain(record: EquipmentRecord) -> Equipment:
        """Convert an equipment record."""
        return Equipment(
            id=record.id or uuid4(),
            name=record.name,
            description=record.description,
            is_owned=record.is_owned,
        )

    @staticmethod
    def to_record(recipe: Recipe) -> RecipeRecord:
        """Convert a Recipe back to its record.

        Every magnitude is written in the unit it was loaded with, so a
        loaded recipe saves back unchanged.
        """
        return RecipeRecord(
            id=recipe.id,
            name=recipe.name,
            description=recipe.description,
            comments=recipe.comments,
            source=recipe.source,
            author=recipe.author,
            amount_made=recipe.amount_made.quantity,
            amount_made_units=recipe.amount_made.units,
            steps=[RecipeMapper.step_to_record(step) for step in recipe.steps],
            tags=list(recipe.tags),
        )

    @staticmethod
    def step_to_record(step: Step) -> StepRecord:
        """Convert a step back to its record."""
        return StepRecord(
            id=step.id,
            time_needed=_magnitude_or_none(step.time_needed),
            time_needed_unit=step.time_needed.display_unit() if step.time_needed else None,
            temperature=_magnitude_or_none(step.temperature),
            temperature_unit=step.temperature.display_unit() if step.temperature else None,
            instructions=step.instructions,
            ingredients=[
                IngredientRecord(
                    id=ingredient.id,
                    name=ingredient.name,
                    description=ingredient.description,
                    quantity=RecipeMapper.quantity_to_record(ingredient.quantity),
                )
                for ingredient in step.ingredients
            ],
            equipment=[
                EquipmentRecord(
                    id=equipment.id,
                    name=equipment.name,
                    description=equipment.description,
                    is_owned=equipment.is_owned,
                )
                for equipment in step.equipment
            ],
            step_type=step.step_type,
        )

    @staticmethod
    def quantity_to_record(quantity: Quantity) -> QuantityRecord:
        """Convert a Quantity back to its record, in its file unit."""
        if quantity.kind is QuantityKind.COUNT:
            return QuantityRecord(kind=quantity.kind, value=format_magnitude(quantity.value))
        return QuantityRecord(
            kind=quantity.kind,
            value=format_magnitude(quantity.magnitude()),
            unit=quantity.unit,
        )


def _magnitude_or_none(measure: Optional[ScalarMeasure]) -> Optional[str]:
    """Magnitude text of an optional measure in its display unit."""
    if measure is None:
        return None
    return format_magnitude(measure.magnitude())
