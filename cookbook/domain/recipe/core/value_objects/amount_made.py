"""AmountMade value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AmountMade:
    """Total finished quantity a recipe makes (24 cookies, 6 portions).

    The units are free text and are not checked against the unit
    registry; they are only shown to the reader.

    Example:
        >>> str(AmountMade(24, "cookies"))
        'Makes: 24 cookies'
    """

    quantity: int = 0
    units: str = ""

    def __post_init__(self) -> None:
        """Validate amount invariants."""
        if self.quantity < 0:
            raise ValueError(f"Amount made cannot be negative, got {self.quantity}")

    def __str__(self) -> str:
        return f"Makes: {self.quantity} {self.units}"
