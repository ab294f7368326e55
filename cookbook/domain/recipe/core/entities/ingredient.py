"""Ingredient entity - named amount of something used by a step."""

from dataclasses import dataclass, field, replace
from typing import Optional
from uuid import UUID, uuid4

from ..value_objects.quantity import Quantity


@dataclass(frozen=True)
class Ingredient:
    """
    Entity: one ingredient line of a step.

    Example:
        Ingredient(name="flour", quantity=Quantity.mass(200, "g"))

    Invariants:
    - Name is not blank (it is the merge key across steps)

    Identity: Defined by unique ID (UUID)
    Mutability: Immutable; merging across steps returns a new Ingredient
    """

    name: str
    quantity: Quantity
    description: Optional[str] = None
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        """Validate invariants after initialization."""
        if not self.name or not self.name.strip():
            raise ValueError("Ingredient name cannot be empty")

    def merge(self, other: "Ingredient") -> "Ingredient":
        """
        Combine the quantity of another entry for the same ingredient.

        Keeps this ingredient's id and description.

        Args:
            other: Ingredient with the same name

        Returns:
            New Ingredient with the summed quantity

        Raises:
            ValueError: If names differ
            UnitKindMismatchError: If quantities are of different kinds
            UnitScaleMismatchError: If quantities use different units
        """
        if other.name != self.name:
            raise ValueError(f"Cannot merge ingredient {other.name!r} into {self.name!r}")
        return replace(self, quantity=self.quantity + other.quantity)
