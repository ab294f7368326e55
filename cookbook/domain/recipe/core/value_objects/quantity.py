"""Quantity value object.

Immutable amount of an ingredient: a bare count, a mass or a volume.
Magnitudes are exact rationals stored in the canonical unit of their kind;
mass and volume also remember the unit they were written in.
"""

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Optional

from cookbook.domain.shared.errors import (
    NegativeMagnitudeError,
    UnitKindMismatchError,
    UnitScaleMismatchError,
)
from cookbook.domain.units.conversion import (
    MagnitudeInput,
    format_magnitude,
    from_canonical,
    parse_magnitude,
    render,
    to_canonical,
)
from cookbook.domain.units.kinds import DisplayStyle, UnitKind
from cookbook.domain.units.registry import UnitRegistry


class QuantityKind(str, Enum):
    """Variant tag of a Quantity."""

    COUNT = "count"
    MASS = "mass"
    VOLUME = "volume"

    def unit_kind(self) -> Optional[UnitKind]:
        """Registry kind backing this quantity kind (None for counts)."""
        unit_kinds = {
            QuantityKind.COUNT: None,
            QuantityKind.MASS: UnitKind.MASS,
            QuantityKind.VOLUME: UnitKind.VOLUME,
        }
        return unit_kinds[self]


@dataclass(frozen=True)
class Quantity:
    """Value object for an ingredient amount.

    Closed tagged variant over count, mass and volume. ``value`` is always in
    the canonical unit (items, grams, cubic metres). ``unit`` is the file
    unit the amount was originally written in; it drives display and
    round-trip output and is never applied as a scale factor afterwards.

    Attributes:
        kind: Variant tag
        value: Canonical magnitude (exact, non-negative)
        unit: File unit for mass/volume, None for counts

    Examples:
        >>> flour = Quantity.mass(200, "g")
        >>> flour + Quantity.mass(100, "g")
        Quantity(kind='mass', value=300, unit='g')

        >>> Quantity.mass("1.5", "kg").value
        Fraction(1500, 1)

        >>> Quantity.count(3).format()
        '3'

    Raises:
        NegativeMagnitudeError: If value is negative.
        ValueError: If a count carries a unit.
        UnitNotSpecifiedError: If a mass/volume has no unit.
        UnrecognizedUnitError: If the unit is not registered for the kind.
    """

    kind: QuantityKind
    value: Fraction
    unit: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate quantity invariants."""
        object.__setattr__(self, "kind", QuantityKind(self.kind))
        object.__setattr__(self, "value", parse_magnitude(self.value))

        if self.value < 0:
            raise NegativeMagnitudeError(self.kind, self.value)

        unit_kind = self.kind.unit_kind()
        if unit_kind is None:
            if self.unit is not None:
                raise ValueError(f"Count quantities cannot carry a unit, got {self.unit!r}")
            return

        # Store the registry spelling so aliases stay scale-compatible
        entry = UnitRegistry.lookup(unit_kind, self.unit)
        object.__setattr__(self, "unit", entry.abbreviation)

    @classmethod
    def count(cls, amount: MagnitudeInput) -> "Quantity":
        """Create a plain count (5 bananas, 30 chocolate chips)."""
        return cls(QuantityKind.COUNT, parse_magnitude(amount))

    @classmethod
    def mass(cls, amount: MagnitudeInput, unit: Optional[str]) -> "Quantity":
        """Create a mass from an amount expressed in ``unit``."""
        return cls(QuantityKind.MASS, to_canonical(UnitKind.MASS, amount, unit), unit)

    @classmethod
    def volume(cls, amount: MagnitudeInput, unit: Optional[str]) -> "Quantity":
        """Create a volume from an amount expressed in ``unit``."""
        return cls(QuantityKind.VOLUME, to_canonical(UnitKind.VOLUME, amount, unit), unit)

    def is_kind_compatible(self, other: "Quantity") -> bool:
        """Same variant tag."""
        return self.kind is other.kind

    def is_scale_compatible(self, other: "Quantity") -> bool:
        """Same variant tag and, for mass/volume, same file unit."""
        return self.is_kind_compatible(other) and self.unit == other.unit

    def add(self, other: "Quantity") -> "Quantity":
        """Sum two quantities without converting between units.

        Args:
            other: Quantity of the same kind and file unit

        Returns:
            New Quantity; operands are left untouched.

        Raises:
            UnitKindMismatchError: Kinds differ (count + mass, mass + volume)
            UnitScaleMismatchError: Same kind, different file units
        """
        if not self.is_kind_compatible(other):
            raise UnitKindMismatchError(self.kind, other.kind)
        if not self.is_scale_compatible(other):
            raise UnitScaleMismatchError(self.unit, other.unit)
        return Quantity(self.kind, self.value + other.value, self.unit)

    def __add__(self, other: object) -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.add(other)

    def magnitude(self, unit: Optional[str] = None) -> Fraction:
        """Amount expressed in ``unit`` (default: the file unit).

        Example:
            >>> Quantity.mass(250, "g").magnitude("kg")
            Fraction(1, 4)
        """
        unit_kind = self.kind.unit_kind()
        if unit_kind is None:
            if unit is not None:
                raise UnitKindMismatchError(self.kind, _describe_unit(unit))
            return self.value
        return from_canonical(unit_kind, self.value, unit or self.unit)

    def in_unit(self, unit: str) -> "Quantity":
        """Re-tag the quantity with another unit of the same kind.

        The canonical value is unchanged, so this is exact. Use it to bring
        two quantities to a common unit before adding them.

        Example:
            >>> Quantity.mass(1, "kg").in_unit("g") + Quantity.mass(100, "g")
            Quantity(kind='mass', value=1100, unit='g')
        """
        unit_kind = self.kind.unit_kind()
        if unit_kind is None:
            raise UnitKindMismatchError(self.kind, _describe_unit(unit))
        return Quantity(self.kind, self.value, unit)

    def format(
        self,
        unit: Optional[str] = None,
        style: DisplayStyle = DisplayStyle.ABBREVIATED,
    ) -> str:
        """Render the amount in ``unit`` (default: the file unit).

        Counts render as the bare number.
        """
        unit_kind = self.kind.unit_kind()
        if unit_kind is None:
            if unit is not None:
                raise UnitKindMismatchError(self.kind, _describe_unit(unit))
            return format_magnitude(self.value)
        return render(unit_kind, self.value, unit or self.unit, style)

    def __str__(self) -> str:
        """Human-readable representation."""
        return self.format()

    def __repr__(self) -> str:
        """Developer representation."""
        value = format_magnitude(self.value)
        if self.unit is None:
            return f"Quantity(kind='{self.kind.value}', value={value})"
        return f"Quantity(kind='{self.kind.value}', value={value}, unit='{self.unit}')"


def add(a: Quantity, b: Quantity) -> Quantity:
    """Functional form of :meth:`Quantity.add`."""
    return a.add(b)


def _describe_unit(abbreviation: str) -> str:
    """Name the registry kind an abbreviation belongs to, for error messages."""
    for kind in (UnitKind.MASS, UnitKind.VOLUME, UnitKind.TIME, UnitKind.TEMPERATURE_INTERVAL):
        if UnitRegistry.is_valid(kind, abbreviation):
            return kind.value
    return abbreviation
