"""Unit kinds and display styles."""

from enum import Enum

# Reserved abbreviation meaning "the unit was never set".
PLACEHOLDER_UNIT = "placeholder"


class UnitKind(str, Enum):
    """Physical kind a unit abbreviation belongs to.

    Each kind has its own abbreviation table and canonical unit:
    - TIME: second
    - TEMPERATURE_INTERVAL: kelvin (differences only, never absolute)
    - MASS: gram
    - VOLUME: cubic metre
    """

    TIME = "time"
    TEMPERATURE_INTERVAL = "temperature_interval"
    MASS = "mass"
    VOLUME = "volume"

    def canonical_unit(self) -> str:
        """Abbreviation of the unit values of this kind are stored in.

        Example:
            >>> UnitKind.MASS.canonical_unit()
            'g'
        """
        canonical = {
            UnitKind.TIME: "s",
            UnitKind.TEMPERATURE_INTERVAL: "K",
            UnitKind.MASS: "g",
            UnitKind.VOLUME: "m³",
        }
        return canonical[self]


class DisplayStyle(str, Enum):
    """How a unit is rendered next to its magnitude.

    - ABBREVIATED: "300 g"
    - DESCRIPTIVE: "300 grams"
    """

    ABBREVIATED = "abbreviated"
    DESCRIPTIVE = "descriptive"
