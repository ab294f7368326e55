"""Unit registry.

Process-wide, read-only lookup of unit abbreviations per kind. Built once at
import from the static tables in :mod:`cookbook.domain.units.tables` and never
mutated afterwards, so it needs no synchronisation.
"""

from dataclasses import dataclass
from fractions import Fraction
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from cookbook.domain.shared.errors import UnitNotSpecifiedError, UnrecognizedUnitError
from cookbook.domain.units.kinds import PLACEHOLDER_UNIT, UnitKind
from cookbook.domain.units.tables import MICRO_ALIASES, MICRO_SIGN, UNIT_TABLES


@dataclass(frozen=True)
class RegistryEntry:
    """One unit of one kind.

    Attributes:
        kind: Unit kind the abbreviation belongs to
        abbreviation: Lookup key, unique within its kind
        multiplier: Exact factor from this unit to the canonical unit
        name: Singular descriptive name ("gram")
        plural: Plural descriptive name ("grams")

    Example:
        >>> entry = UnitRegistry.lookup(UnitKind.MASS, "kg")
        >>> entry.multiplier
        Fraction(1000, 1)
        >>> entry.name
        'kilogram'
    """

    kind: UnitKind
    abbreviation: str
    multiplier: Fraction
    name: str
    plural: str

    def __post_init__(self) -> None:
        """Validate entry invariants."""
        if self.multiplier <= 0:
            raise ValueError(f"Unit multiplier must be positive: {self.abbreviation}")

    @property
    def display_abbreviation(self) -> str:
        """Abbreviation as shown to people (same as the lookup key)."""
        return self.abbreviation

    def display_name(self, magnitude: Fraction) -> str:
        """Singular name for exactly one unit, plural otherwise."""
        return self.name if magnitude == 1 else self.plural


def _build_entries() -> Mapping[UnitKind, Mapping[str, RegistryEntry]]:
    """Turn the static rows into immutable per-kind lookup maps."""
    tables: dict[UnitKind, Mapping[str, RegistryEntry]] = {}
    for kind, rows in UNIT_TABLES.items():
        entries: dict[str, RegistryEntry] = {}
        for abbreviation, multiplier, name, plural in rows:
            if abbreviation in entries:
                raise ValueError(f"Duplicate {kind.value} unit abbreviation: {abbreviation}")
            entries[abbreviation] = RegistryEntry(
                kind=kind,
                abbreviation=abbreviation,
                multiplier=multiplier,
                name=name,
                plural=plural,
            )
        tables[kind] = MappingProxyType(entries)
    return MappingProxyType(tables)


_ENTRIES = _build_entries()


class UnitRegistry:
    """Lookup and enumeration over the unit tables.

    All methods are static: there is exactly one registry per process.
    """

    @staticmethod
    def lookup(kind: UnitKind, abbreviation: Optional[str]) -> RegistryEntry:
        """Find the registry entry for an abbreviation.

        Args:
            kind: Unit kind to search
            abbreviation: Unit abbreviation as written in a recipe

        Returns:
            Matching registry entry

        Raises:
            UnitNotSpecifiedError: abbreviation is None or the placeholder
            UnrecognizedUnitError: abbreviation is not in the kind's table

        Example:
            >>> UnitRegistry.lookup(UnitKind.VOLUME, "tbsp").name
            'tablespoon'
        """
        if abbreviation is None or abbreviation == PLACEHOLDER_UNIT:
            raise UnitNotSpecifiedError(kind)

        table = _ENTRIES[UnitKind(kind)]
        entry = table.get(abbreviation)
        if entry is None:
            entry = table.get(_normalize_micro(abbreviation))
        if entry is None:
            raise UnrecognizedUnitError(kind, abbreviation)
        return entry

    @staticmethod
    def enumerate(kind: UnitKind) -> Iterator[RegistryEntry]:
        """Iterate the entries of a kind in table order.

        Each call returns a fresh iterator. Meant for help and
        documentation output only.
        """
        return iter(tuple(_ENTRIES[UnitKind(kind)].values()))

    @staticmethod
    def abbreviations(kind: UnitKind) -> list[str]:
        """All valid abbreviations for a kind, in table order."""
        return [entry.abbreviation for entry in UnitRegistry.enumerate(kind)]

    @staticmethod
    def is_valid(kind: UnitKind, abbreviation: Optional[str]) -> bool:
        """Check whether an abbreviation resolves without raising."""
        if abbreviation is None or abbreviation == PLACEHOLDER_UNIT:
            return False
        table = _ENTRIES[UnitKind(kind)]
        return abbreviation in table or _normalize_micro(abbreviation) in table

    @staticmethod
    def describe(kind: UnitKind) -> str:
        """Human-readable listing of a kind's vocabulary.

        Example:
            >>> print(UnitRegistry.describe(UnitKind.MASS).splitlines()[0])
            Mass units:
        """
        kind = UnitKind(kind)
        title = kind.value.replace("_", " ").capitalize()
        lines = [f"{title} units:"]
        for entry in UnitRegistry.enumerate(kind):
            lines.append(f"  {entry.abbreviation:<12} {entry.name}")
        return "\n".join(lines)


def _normalize_micro(abbreviation: str) -> str:
    """Rewrite an ASCII/Greek micro prefix to the micro sign used in the tables."""
    for alias in MICRO_ALIASES:
        if abbreviation.startswith(alias) and len(abbreviation) > len(alias):
            return MICRO_SIGN + abbreviation[len(alias) :]
    return abbreviation
