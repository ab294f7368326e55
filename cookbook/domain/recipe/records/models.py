"""
Record models for persisted recipes.

These mirror the outer persistence format: plain fields with magnitudes as
text next to their unit abbreviation. Loading the file itself is the job
of an external collaborator; it hands the parsed mapping to these models.
"""

from __future__ import annotations

from typing import Any, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cookbook.domain.recipe.core.value_objects.quantity import QuantityKind
from cookbook.domain.recipe.core.value_objects.step_type import StepType


def _magnitude_text(value: Any) -> Any:
    """Accept plain numbers for magnitude fields, keep text as is."""
    if isinstance(value, bool):
        raise ValueError("Magnitude must be a number, not a boolean")
    if isinstance(value, (int, float)):
        return repr(value)
    return value


class QuantityRecord(BaseModel):
    """
    Persisted ingredient amount.

    Example:
        >>> QuantityRecord(kind="mass", value="200", unit="g")
        QuantityRecord(kind=<QuantityKind.MASS: 'mass'>, value='200', unit='g')
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: QuantityKind = Field(QuantityKind.COUNT, description="count | mass | volume")
    value: str = Field(..., min_length=1, description="Exact magnitude text")
    unit: Optional[str] = Field(None, description="Unit abbreviation (mass/volume only)")

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, v: Any) -> Any:
        """Accept numeric magnitudes."""
        return _magnitude_text(v)


class IngredientRecord(BaseModel):
    """Persisted ingredient line."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: Optional[UUID] = Field(None, description="Ingredient identifier")
    name: str = Field(..., min_length=1, description="Ingredient name")
    description: Optional[str] = Field(None, description="Longer description")
    quantity: QuantityRecord = Field(..., description="Amount used")


class EquipmentRecord(BaseModel):
    """Persisted equipment item."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: Optional[UUID] = Field(None, description="Equipment identifier")
    name: str = Field(..., min_length=1, description="Short name")
    description: Optional[str] = Field(None, description="Longer description")
    is_owned: bool = Field(False, description="Whether the cook owns it")


class StepRecord(BaseModel):
    """Persisted step; time and temperature are magnitude text plus unit."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: Optional[UUID] = Field(None, description="Step identifier")
    time_needed: Optional[str] = Field(None, description="Duration magnitude")
    time_needed_unit: Optional[str] = Field(None, description="Duration unit")
    temperature: Optional[str] = Field(None, description="Temperature interval magnitude")
    temperature_unit: Optional[str] = Field(None, description="Temperature interval unit")
    instructions: str = Field("", description="What to do")
    ingredients: List[IngredientRecord] = Field(default_factory=list)
    equipment: List[EquipmentRecord] = Field(default_factory=list)
    step_type: StepType = Field(StepType.OTHER, description="Prep | Cook | Wait | Other")

    @field_validator("time_needed", "temperature", mode="before")
    @classmethod
    def coerce_magnitudes(cls, v: Any) -> Any:
        """Accept numeric magnitudes."""
        if v is None:
            return None
        return _magnitude_text(v)


class RecipeRecord(BaseModel):
    """
    Persisted recipe.

    Example:
        >>> record = RecipeRecord.model_validate(
        ...     {
        ...         "name": "Shortbread",
        ...         "steps": [
        ...             {"instructions": "Bake", "time_needed": "20",
        ...              "time_needed_unit": "min", "step_type": "Cook"},
        ...         ],
        ...     }
        ... )
        >>> record.steps[0].step_type
        <StepType.COOK: 'Cook'>
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: Optional[UUID] = Field(None, description="Recipe identifier")
    name: str = Field(..., min_length=1, description="Short name of recipe")
    description: Optional[str] = Field(None, description="Optional description")
    comments: Optional[str] = Field(None, description="Recipe comments")
    source: str = Field("", description="Where the recipe comes from")
    author: str = Field("", description="Recipe author")
    amount_made: int = Field(0, ge=0, description="Amount made")
    amount_made_units: str = Field("", description="Units for amount made (free text)")
    steps: List[StepRecord] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
