"""
Domain exceptions.

Typed exceptions for explicit error handling.
Every unit, quantity and recipe failure is reported to the caller as one of
these; the domain never aborts the process.
"""

from __future__ import annotations

from typing import Any, Optional


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain-specific exceptions inherit from this.
    Allows catching all domain errors with single except clause.
    """

    pass


# ═══════════════════════════════════════════════════════════
# UNIT / QUANTITY EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class UnitError(DomainError):
    """Base exception for unit registry and quantity arithmetic."""

    pass


class UnrecognizedUnitError(UnitError):
    """
    Abbreviation is not part of the registry for its kind.

    Example:
        >>> raise UnrecognizedUnitError("mass", "stone")
    """

    def __init__(self, kind: Any, abbreviation: str) -> None:
        self.kind = kind
        self.abbreviation = abbreviation
        super().__init__(
            f"{abbreviation!r} not recognized as a supported {_kind_label(kind)} unit abbreviation"
        )


class UnitNotSpecifiedError(UnitError):
    """
    Caller did not set a unit.

    Raised when:
    - The unit is missing (None)
    - The unit is the reserved "placeholder" value

    Example:
        >>> raise UnitNotSpecifiedError("time")
    """

    def __init__(self, kind: Any) -> None:
        self.kind = kind
        super().__init__(f"Unit not specified for {_kind_label(kind)} value")


class UnitKindMismatchError(UnitError):
    """
    Arithmetic between quantities of different kinds.

    Raised when:
    - A count is combined with a mass or volume
    - A mass is combined with a volume

    Example:
        >>> raise UnitKindMismatchError("count", "mass")
    """

    def __init__(self, left: Any, right: Any) -> None:
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot combine {_kind_label(left)} with {_kind_label(right)}"
        )


class UnitScaleMismatchError(UnitError):
    """
    Arithmetic between two masses (or two volumes) in different units.

    No implicit conversion is performed: normalise both operands to a
    common unit first.

    Example:
        >>> raise UnitScaleMismatchError("g", "kg")
    """

    def __init__(self, left: Optional[str], right: Optional[str]) -> None:
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot add quantities expressed in {left!r} and {right!r}; "
            "convert them to a common unit first"
        )


class MalformedMagnitudeError(UnitError):
    """
    Numeric text could not be read as an exact rational.

    Example:
        >>> raise MalformedMagnitudeError("two and a bit")
    """

    def __init__(self, text: Any) -> None:
        self.text = text
        super().__init__(f"Cannot parse {text!r} as an exact number")


class NegativeMagnitudeError(UnitError):
    """
    Magnitude is below zero where only amounts are allowed.

    Raised when:
    - An ingredient quantity is negative
    - A step duration is negative

    Example:
        >>> raise NegativeMagnitudeError("mass", -2)
    """

    def __init__(self, kind: Any, value: Any) -> None:
        self.kind = kind
        self.value = value
        super().__init__(f"{_kind_label(kind).capitalize()} cannot be negative, got {value}")


# ═══════════════════════════════════════════════════════════
# RECIPE EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class RecipeDomainError(DomainError):
    """Base exception for recipe domain."""

    pass


class InvalidRecordError(RecipeDomainError):
    """
    A persisted record cannot be turned into a domain object.

    Raised when:
    - A magnitude is given without its unit kind making sense
    - Record fields contradict each other

    Example:
        >>> raise InvalidRecordError("count quantities cannot carry a unit: 'g'")
    """

    pass


def _kind_label(kind: Any) -> str:
    """Readable label for a unit or quantity kind (enum or plain string)."""
    return str(getattr(kind, "value", kind)).replace("_", " ")
