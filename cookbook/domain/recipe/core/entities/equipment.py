"""Equipment entity - any implement needed to prepare a recipe."""

from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID, uuid4


@dataclass(frozen=True)
class Equipment:
    """
    Entity: a stove, a stand mixer, a potato peeler.

    ``is_owned`` lets callers filter out recipes that need something
    specialised (a melon baller, a pineapple corer) before starting them.

    Equality is structural over name, description and ownership; the id
    does not take part in it.
    """

    name: str
    description: Optional[str] = None
    is_owned: bool = False
    id: UUID = field(default_factory=uuid4, compare=False)

    def __post_init__(self) -> None:
        """Validate invariants after initialization."""
        if not self.name or not self.name.strip():
            raise ValueError("Equipment name cannot be empty")
