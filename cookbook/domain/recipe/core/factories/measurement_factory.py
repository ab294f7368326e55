"""Factory for turning (magnitude, unit) pairs into domain measurements.

This is the parser/formatter seam between persisted text and the exact
value objects: every magnitude read from a record passes through here.
"""

from typing import Optional, Union

from cookbook.config import get_display_style
from cookbook.domain.units.conversion import MagnitudeInput
from cookbook.domain.units.kinds import DisplayStyle, UnitKind

from ..value_objects.measure import Duration, TemperatureInterval
from ..value_objects.quantity import Quantity

Measurement = Union[Quantity, Duration, TemperatureInterval]


class MeasurementFactory:
    """Create measurements from magnitudes and unit abbreviations."""

    @staticmethod
    def parse(kind: UnitKind, magnitude: MagnitudeInput, abbreviation: Optional[str]) -> Measurement:
        """
        Parse a magnitude written in a unit of the given kind.

        The magnitude is converted exactly to the kind's canonical unit and
        the abbreviation is kept as the value's unit tag, so formatting it
        again in that unit reproduces the input.

        Args:
            kind: Unit kind of the field being read
            magnitude: Number or number text (e.g. "200", "1 1/2")
            abbreviation: Unit abbreviation (e.g. "g", "min", "°C")

        Returns:
            Quantity for mass/volume, Duration for time,
            TemperatureInterval for temperature

        Raises:
            UnitNotSpecifiedError: Unit missing or left as the placeholder
            UnrecognizedUnitError: Unit not registered for the kind
            MalformedMagnitudeError: Magnitude is not an exact number
            NegativeMagnitudeError: Mass, volume or time is below zero

        Example:
            >>> MeasurementFactory.parse(UnitKind.MASS, "200", "g")
            Quantity(kind='mass', value=200, unit='g')
            >>> MeasurementFactory.parse(UnitKind.TIME, 5, "min")
            Duration(value=Fraction(300, 1), unit='min')
        """
        kind = UnitKind(kind)
        if kind is UnitKind.MASS:
            return Quantity.mass(magnitude, abbreviation)
        if kind is UnitKind.VOLUME:
            return Quantity.volume(magnitude, abbreviation)
        if kind is UnitKind.TIME:
            return Duration.of(magnitude, abbreviation)
        return TemperatureInterval.of(magnitude, abbreviation)

    @staticmethod
    def parse_count(magnitude: MagnitudeInput) -> Quantity:
        """Parse a plain count (no unit)."""
        return Quantity.count(magnitude)


def parse_measurement(kind: UnitKind, magnitude: MagnitudeInput, abbreviation: Optional[str]) -> Measurement:
    """Functional form of :meth:`MeasurementFactory.parse`."""
    return MeasurementFactory.parse(kind, magnitude, abbreviation)


def format_measurement(
    value: Measurement,
    abbreviation: Optional[str] = None,
    style: Optional[DisplayStyle] = None,
) -> str:
    """Render a measurement for people in ``abbreviation`` (default: its own unit).

    Without an explicit ``style`` the COOKBOOK_DISPLAY_STYLE setting is used.
    File output goes through the record mapper, which always writes
    abbreviations, so this setting never changes persisted text.

    Example:
        >>> format_measurement(Quantity.mass(300, "g"))
        '300 g'
        >>> format_measurement(Duration.of(15, "min"), "h", DisplayStyle.DESCRIPTIVE)
        '0.25 hours'
    """
    if style is None:
        style = get_display_style()
    return value.format(abbreviation, style)
