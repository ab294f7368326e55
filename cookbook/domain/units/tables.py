"""
Unit Constants and Conversion Tables

Static abbreviation tables for every unit kind. Each row is
(abbreviation, exact multiplier to the canonical unit, singular name, plural name).

The abbreviations are part of the persisted recipe format: renaming or
removing one breaks recipes already written with it. Add new units by
adding rows; lookup code never branches on individual units.
"""

from fractions import Fraction

from cookbook.domain.units.kinds import UnitKind

UnitRow = tuple[str, Fraction, str, str]

# SI decimal prefixes (symbol, name, power of ten), tera down to pico
SI_PREFIXES: tuple[tuple[str, str, int], ...] = (
    ("T", "tera", 12),
    ("G", "giga", 9),
    ("M", "mega", 6),
    ("k", "kilo", 3),
    ("h", "hecto", 2),
    ("da", "deca", 1),
    ("", "", 0),
    ("d", "deci", -1),
    ("c", "centi", -2),
    ("m", "milli", -3),
    ("µ", "micro", -6),  # µ (micro sign)
    ("n", "nano", -9),
    ("p", "pico", -12),
)


def _si_ladder(
    symbol: str,
    name: str,
    plural: str,
    base: Fraction = Fraction(1),
    power: int = 1,
) -> tuple[UnitRow, ...]:
    """Expand one unit over the SI prefix ladder.

    Args:
        symbol: Unit symbol without prefix (e.g. "g", "m³")
        name: Singular unit name without prefix (e.g. "gram")
        plural: Plural unit name without prefix (e.g. "grams")
        base: Multiplier of the unprefixed unit to the canonical unit
        power: Dimension exponent applied to the prefix (3 for cubic units)
    """
    rows = []
    for prefix_symbol, prefix_name, exponent in SI_PREFIXES:
        factor = base * Fraction(10) ** (exponent * power)
        rows.append((prefix_symbol + symbol, factor, prefix_name + name, prefix_name + plural))
    return tuple(rows)


def _cubic_ladder() -> tuple[UnitRow, ...]:
    """Cubic metre ladder; prefix names go after "cubic" (cubic kilometer)."""
    rows = []
    for prefix_symbol, prefix_name, exponent in SI_PREFIXES:
        factor = Fraction(10) ** (exponent * 3)
        rows.append(
            (
                f"{prefix_symbol}m³",
                factor,
                f"cubic {prefix_name}meter",
                f"cubic {prefix_name}meters",
            )
        )
    return tuple(rows)


# ═══════════════════════════════════════════════════════════
# EXACT DEFINITIONS
# ═══════════════════════════════════════════════════════════

# Length (metres), international yard and pound agreement
INCH = Fraction("0.0254")
FOOT = 12 * INCH
YARD = 3 * FOOT
MILE = 5280 * FOOT

# US customary liquid measures (cubic metres)
CUBIC_INCH = INCH**3
CUBIC_FOOT = FOOT**3
GALLON = 231 * CUBIC_INCH
LIQUID_QUART = GALLON / 4
LIQUID_PINT = GALLON / 8
CUP = GALLON / 16
GILL = GALLON / 32
FLUID_OUNCE = GALLON / 128
TABLESPOON = FLUID_OUNCE / 2
TEASPOON = TABLESPOON / 3
BARREL = 42 * GALLON  # petroleum barrel

# US customary dry measures (cubic metres)
BUSHEL = Fraction("2150.42") * CUBIC_INCH
PECK = BUSHEL / 4
DRY_GALLON = BUSHEL / 8
DRY_QUART = DRY_GALLON / 4
DRY_PINT = DRY_GALLON / 8

# Other volumes (cubic metres)
CORD = 128 * CUBIC_FOOT
ACRE_FOOT = 43560 * CUBIC_FOOT

# Imperial measures (cubic metres)
IMPERIAL_GALLON = Fraction("4.54609") / 1000
IMPERIAL_FLUID_OUNCE = IMPERIAL_GALLON / 160
IMPERIAL_GILL = IMPERIAL_GALLON / 32

# Avoirdupois mass (grams)
POUND = Fraction("453.59237")
OUNCE = POUND / 16

# Time (seconds)
MINUTE = Fraction(60)
HOUR = 60 * MINUTE
DAY = 24 * HOUR
YEAR = 365 * DAY

# Temperature intervals (kelvin); no zero offsets, these are differences
DEGREE_CELSIUS = Fraction(1)
DEGREE_FAHRENHEIT = Fraction(5, 9)
DEGREE_RANKINE = Fraction(5, 9)


# ═══════════════════════════════════════════════════════════
# TABLES PER KIND
# ═══════════════════════════════════════════════════════════

TIME_UNITS: tuple[UnitRow, ...] = _si_ladder("s", "second", "seconds") + (
    ("d", DAY, "day", "days"),
    ("h", HOUR, "hour", "hours"),
    ("min", MINUTE, "minute", "minutes"),
    ("a", YEAR, "year", "years"),
)

TEMPERATURE_INTERVAL_UNITS: tuple[UnitRow, ...] = _si_ladder("K", "kelvin", "kelvins") + (
    ("°C", DEGREE_CELSIUS, "degree Celsius", "degrees Celsius"),
    ("°F", DEGREE_FAHRENHEIT, "degree Fahrenheit", "degrees Fahrenheit"),
    ("°R", DEGREE_RANKINE, "degree Rankine", "degrees Rankine"),
)

MASS_UNITS: tuple[UnitRow, ...] = _si_ladder("g", "gram", "grams") + (
    ("oz", OUNCE, "ounce", "ounces"),
    ("lb", POUND, "pound", "pounds"),
)

VOLUME_UNITS: tuple[UnitRow, ...] = (
    _cubic_ladder()
    + (
        ("ac · ft", ACRE_FOOT, "acre-foot", "acre-feet"),
        ("bbl", BARREL, "barrel", "barrels"),
        ("bu", BUSHEL, "bushel", "bushels"),
        ("cords", CORD, "cord", "cords"),
        ("ft³", CUBIC_FOOT, "cubic foot", "cubic feet"),
        ("in³", CUBIC_INCH, "cubic inch", "cubic inches"),
        ("mi³", MILE**3, "cubic mile", "cubic miles"),
        ("yd³", YARD**3, "cubic yard", "cubic yards"),
        ("cup", CUP, "cup", "cups"),
        ("fl oz", FLUID_OUNCE, "fluid ounce", "fluid ounces"),
        ("fl oz (UK)", IMPERIAL_FLUID_OUNCE, "Imperial fluid ounce", "Imperial fluid ounces"),
        ("gal (UK)", IMPERIAL_GALLON, "Imperial gallon", "Imperial gallons"),
        ("gal", GALLON, "gallon", "gallons"),
        ("gi (UK)", IMPERIAL_GILL, "Imperial gill", "Imperial gills"),
        ("gi", GILL, "gill", "gills"),
    )
    + _si_ladder("L", "liter", "liters", base=Fraction(1, 1000))
    + (
        ("pk", PECK, "peck", "pecks"),
        ("dry pt", DRY_PINT, "dry pint", "dry pints"),
        ("liq pt", LIQUID_PINT, "liquid pint", "liquid pints"),
        ("dry qt", DRY_QUART, "dry quart", "dry quarts"),
        ("liq qt", LIQUID_QUART, "liquid quart", "liquid quarts"),
        ("tbsp", TABLESPOON, "tablespoon", "tablespoons"),
        ("tsp", TEASPOON, "teaspoon", "teaspoons"),
    )
)

UNIT_TABLES: dict[UnitKind, tuple[UnitRow, ...]] = {
    UnitKind.TIME: TIME_UNITS,
    UnitKind.TEMPERATURE_INTERVAL: TEMPERATURE_INTERVAL_UNITS,
    UnitKind.MASS: MASS_UNITS,
    UnitKind.VOLUME: VOLUME_UNITS,
}

# Alternative spellings of the micro prefix accepted on input
MICRO_ALIASES = ("u", "μ")  # ASCII u, Greek small letter mu
MICRO_SIGN = "µ"
