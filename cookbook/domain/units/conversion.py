"""Exact magnitude parsing, unit conversion and rendering.

All arithmetic is done on :class:`fractions.Fraction`, so converting a value
from grams to kilograms and back any number of times is lossless.
"""

from decimal import Decimal
from fractions import Fraction
import math
import re
from typing import Optional, Union

from cookbook.domain.shared.errors import MalformedMagnitudeError
from cookbook.domain.units.kinds import DisplayStyle, UnitKind
from cookbook.domain.units.registry import UnitRegistry

MagnitudeInput = Union[int, float, Decimal, Fraction, str]

# Largest power of ten accepted in scientific notation
MAX_EXPONENT = 100

_EXPONENT = re.compile(r"[eE]([+-]?\d+)$")

# Unicode vulgar fractions accepted in magnitude text
VULGAR_FRACTIONS: dict[str, Fraction] = {
    "½": Fraction(1, 2),
    "⅓": Fraction(1, 3),
    "⅔": Fraction(2, 3),
    "¼": Fraction(1, 4),
    "¾": Fraction(3, 4),
    "⅕": Fraction(1, 5),
    "⅖": Fraction(2, 5),
    "⅗": Fraction(3, 5),
    "⅘": Fraction(4, 5),
    "⅙": Fraction(1, 6),
    "⅚": Fraction(5, 6),
    "⅛": Fraction(1, 8),
    "⅜": Fraction(3, 8),
    "⅝": Fraction(5, 8),
    "⅞": Fraction(7, 8),
}


def parse_magnitude(value: MagnitudeInput) -> Fraction:
    """Read a magnitude as an exact rational.

    Accepts integers, fractions, decimals, floats (through their shortest
    decimal representation) and text such as ``"200"``, ``"0.25"``,
    ``"1e3"``, ``"3/4"``, ``"1 1/2"``, ``"½"`` or ``"1½"``.

    Args:
        value: Magnitude to read

    Returns:
        Exact rational value

    Raises:
        MalformedMagnitudeError: If the value is not a finite exact number

    Example:
        >>> parse_magnitude("1 1/2")
        Fraction(3, 2)
        >>> parse_magnitude(0.1)
        Fraction(1, 10)
    """
    if isinstance(value, bool):
        raise MalformedMagnitudeError(value)
    if isinstance(value, (int, Fraction)):
        return Fraction(value)
    if isinstance(value, Decimal):
        if not value.is_finite() or abs(value.adjusted()) > MAX_EXPONENT:
            raise MalformedMagnitudeError(value)
        return Fraction(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise MalformedMagnitudeError(value)
        return Fraction(repr(value))
    if isinstance(value, str):
        return _parse_text(value)
    raise MalformedMagnitudeError(value)


def _parse_text(text: str) -> Fraction:
    """Parse magnitude text, including mixed numbers and vulgar fractions."""
    stripped = text.strip()
    if not stripped:
        raise MalformedMagnitudeError(text)

    negative = stripped.startswith("-")
    body = stripped[1:].strip() if stripped[0] in "+-" else stripped

    try:
        if body and body[-1] in VULGAR_FRACTIONS:
            whole_text = body[:-1].strip()
            whole = _fraction(whole_text, text) if whole_text else Fraction(0)
            if whole.denominator != 1 or whole < 0:
                raise MalformedMagnitudeError(text)
            result = whole + VULGAR_FRACTIONS[body[-1]]
        else:
            parts = body.split()
            if len(parts) == 2 and "/" in parts[1]:
                whole = _fraction(parts[0], text)
                fraction = _fraction(parts[1], text)
                if whole.denominator != 1 or whole < 0 or not 0 <= fraction < 1:
                    raise MalformedMagnitudeError(text)
                result = whole + fraction
            elif len(parts) == 1:
                result = _fraction(parts[0], text)
                if parts[0].startswith(("+", "-")):
                    raise MalformedMagnitudeError(text)
            else:
                raise MalformedMagnitudeError(text)
    except (ValueError, ZeroDivisionError) as e:
        raise MalformedMagnitudeError(text) from e

    return -result if negative else result


def _fraction(token: str, text: str) -> Fraction:
    """Read one numeric token, refusing exponents beyond MAX_EXPONENT."""
    match = _EXPONENT.search(token)
    if match and abs(int(match.group(1))) > MAX_EXPONENT:
        raise MalformedMagnitudeError(text)
    return Fraction(token)


def format_magnitude(value: Fraction) -> str:
    """Render a rational so that :func:`parse_magnitude` reads it back exactly.

    Integers render plainly, terminating decimals as decimals, everything
    else as ``numerator/denominator``.

    Example:
        >>> format_magnitude(Fraction(300))
        '300'
        >>> format_magnitude(Fraction(1, 4))
        '0.25'
        >>> format_magnitude(Fraction(1, 3))
        '1/3'
    """
    value = Fraction(value)
    if value.denominator == 1:
        return str(value.numerator)

    places = _decimal_places(value.denominator)
    if places is None:
        return f"{value.numerator}/{value.denominator}"

    scaled = abs(value.numerator) * (10**places // value.denominator)
    whole, remainder = divmod(scaled, 10**places)
    sign = "-" if value < 0 else ""
    return f"{sign}{whole}.{remainder:0{places}d}"


def _decimal_places(denominator: int) -> Optional[int]:
    """Digits needed to write 1/denominator exactly, None if it never terminates."""
    twos = fives = 0
    while denominator % 2 == 0:
        denominator //= 2
        twos += 1
    while denominator % 5 == 0:
        denominator //= 5
        fives += 1
    if denominator != 1:
        return None
    return max(twos, fives)


def to_canonical(kind: UnitKind, magnitude: MagnitudeInput, abbreviation: Optional[str]) -> Fraction:
    """Convert a magnitude in the given unit to the kind's canonical unit.

    Example:
        >>> to_canonical(UnitKind.MASS, "1.5", "kg")
        Fraction(1500, 1)
    """
    entry = UnitRegistry.lookup(kind, abbreviation)
    return parse_magnitude(magnitude) * entry.multiplier


def from_canonical(kind: UnitKind, canonical: Fraction, abbreviation: Optional[str]) -> Fraction:
    """Express a canonical value in the given unit.

    Example:
        >>> from_canonical(UnitKind.TIME, Fraction(900), "min")
        Fraction(15, 1)
    """
    entry = UnitRegistry.lookup(kind, abbreviation)
    return Fraction(canonical) / entry.multiplier


def render(
    kind: UnitKind,
    canonical: Fraction,
    abbreviation: Optional[str],
    style: DisplayStyle = DisplayStyle.ABBREVIATED,
) -> str:
    """Render a canonical value in a unit as ``"<magnitude> <unit>"``.

    Temperature intervals are scaled linearly: no zero-point offset is ever
    applied.

    Example:
        >>> render(UnitKind.MASS, Fraction(300), "g")
        '300 g'
        >>> render(UnitKind.MASS, Fraction(1000), "kg", DisplayStyle.DESCRIPTIVE)
        '1 kilogram'
    """
    entry = UnitRegistry.lookup(kind, abbreviation)
    magnitude = Fraction(canonical) / entry.multiplier
    if DisplayStyle(style) is DisplayStyle.DESCRIPTIVE:
        label = entry.display_name(magnitude)
    else:
        label = entry.display_abbreviation
    return f"{format_magnitude(magnitude)} {label}"
