"""Scalar measure value objects: step durations and temperature intervals.

Unlike :class:`Quantity`, these always add up: the canonical value is what
is summed and the display unit is only a rendering hint, so it takes no
part in equality.
"""

from dataclasses import dataclass, field
from fractions import Fraction
from typing import ClassVar, Optional, TypeVar

from cookbook.domain.shared.errors import NegativeMagnitudeError
from cookbook.domain.units.conversion import (
    MagnitudeInput,
    from_canonical,
    parse_magnitude,
    render,
    to_canonical,
)
from cookbook.domain.units.kinds import DisplayStyle, UnitKind
from cookbook.domain.units.registry import UnitRegistry

M = TypeVar("M", bound="ScalarMeasure")


@dataclass(frozen=True)
class ScalarMeasure:
    """Canonical exact value of one unit kind plus an optional display unit.

    Attributes:
        value: Magnitude in the kind's canonical unit
        unit: Unit the value was written in (display only)
    """

    KIND: ClassVar[UnitKind]

    value: Fraction
    unit: Optional[str] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Validate measure invariants."""
        object.__setattr__(self, "value", parse_magnitude(self.value))
        if self.unit is not None:
            entry = UnitRegistry.lookup(self.KIND, self.unit)
            object.__setattr__(self, "unit", entry.abbreviation)

    @classmethod
    def of(cls: type[M], amount: MagnitudeInput, unit: Optional[str]) -> M:
        """Create from an amount expressed in ``unit``."""
        return cls(to_canonical(cls.KIND, amount, unit), unit)

    @classmethod
    def zero(cls: type[M]) -> M:
        """Zero in the canonical unit."""
        return cls(Fraction(0))

    def __add__(self: M, other: object) -> M:
        if not isinstance(other, type(self)):
            return NotImplemented
        return type(self)(self.value + other.value, self.unit or other.unit)

    def __radd__(self: M, other: object) -> M:
        # Lets sum() start from its integer 0
        if other == 0:
            return self
        return NotImplemented

    def display_unit(self) -> str:
        """Unit used for rendering when none is requested."""
        return self.unit or self.KIND.canonical_unit()

    def magnitude(self, unit: Optional[str] = None) -> Fraction:
        """Value expressed in ``unit`` (default: the display unit)."""
        return from_canonical(self.KIND, self.value, unit or self.display_unit())

    def in_unit(self: M, unit: str) -> M:
        """Same value with another display unit."""
        return type(self)(self.value, unit)

    def format(
        self,
        unit: Optional[str] = None,
        style: DisplayStyle = DisplayStyle.ABBREVIATED,
    ) -> str:
        """Render the value in ``unit`` (default: the display unit)."""
        return render(self.KIND, self.value, unit or self.display_unit(), style)

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class Duration(ScalarMeasure):
    """Time needed for a step, stored in seconds.

    Examples:
        >>> Duration.of(5, "min") + Duration.of(10, "min")
        Duration(value=Fraction(900, 1), unit='min')
        >>> str(Duration.of(15, "min"))
        '15 min'
        >>> Duration.of(90, "s") == Duration.of("1.5", "min")
        True
    """

    KIND: ClassVar[UnitKind] = UnitKind.TIME

    def __post_init__(self) -> None:
        """Validate duration invariants."""
        super().__post_init__()
        if self.value < 0:
            raise NegativeMagnitudeError(self.KIND, self.value)


@dataclass(frozen=True)
class TemperatureInterval(ScalarMeasure):
    """Step temperature, stored as a kelvin interval.

    Conversions are linear only: 180 °C renders as 180 K and 324 °F,
    with no zero-point offsets.

    Example:
        >>> TemperatureInterval.of(9, "°F").magnitude("K")
        Fraction(5, 1)
    """

    KIND: ClassVar[UnitKind] = UnitKind.TEMPERATURE_INTERVAL
