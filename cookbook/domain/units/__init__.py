"""Unit registry and exact conversions."""

from cookbook.domain.units.conversion import (
    format_magnitude,
    from_canonical,
    parse_magnitude,
    render,
    to_canonical,
)
from cookbook.domain.units.kinds import PLACEHOLDER_UNIT, DisplayStyle, UnitKind
from cookbook.domain.units.registry import RegistryEntry, UnitRegistry

__all__ = [
    "DisplayStyle",
    "PLACEHOLDER_UNIT",
    "RegistryEntry",
    "UnitKind",
    "UnitRegistry",
    "format_magnitude",
    "from_canonical",
    "parse_magnitude",
    "render",
    "to_canonical",
]
