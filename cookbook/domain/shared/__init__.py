"""Shared domain building blocks."""

from cookbook.domain.shared.errors import (
    DomainError,
    InvalidRecordError,
    MalformedMagnitudeError,
    NegativeMagnitudeError,
    RecipeDomainError,
    UnitError,
    UnitKindMismatchError,
    UnitNotSpecifiedError,
    UnitScaleMismatchError,
    UnrecognizedUnitError,
)

__all__ = [
    "DomainError",
    "UnitError",
    "UnrecognizedUnitError",
    "UnitNotSpecifiedError",
    "UnitKindMismatchError",
    "UnitScaleMismatchError",
    "MalformedMagnitudeError",
    "NegativeMagnitudeError",
    "RecipeDomainError",
    "InvalidRecordError",
]
