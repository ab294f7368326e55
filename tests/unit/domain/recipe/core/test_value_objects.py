"""
Unit tests for recipe value objects.

Testing exact arithmetic, validation, equality and rendering.
"""

from fractions import Fraction

import pytest

from cookbook.domain.recipe.core.value_objects import (
    AmountMade,
    Duration,
    Quantity,
    QuantityKind,
    StepType,
    TemperatureInterval,
    add,
)
from cookbook.domain.shared.errors import (
    MalformedMagnitudeError,
    NegativeMagnitudeError,
    UnitKindMismatchError,
    UnitNotSpecifiedError,
    UnitScaleMismatchError,
    UnrecognizedUnitError,
)
from cookbook.domain.units import PLACEHOLDER_UNIT, DisplayStyle


class TestQuantity:
    """Test Quantity value object."""

    def test_create_mass(self) -> None:
        """Should store mass in grams and keep the file unit."""
        flour = Quantity.mass("1.5", "kg")
        assert flour.kind is QuantityKind.MASS
        assert flour.value == Fraction(1500)
        assert flour.unit == "kg"
        assert str(flour) == "1.5 kg"

    def test_create_volume(self) -> None:
        """Should store volume in cubic metres."""
        milk = Quantity.volume(250, "mL")
        assert milk.value == Fraction(1, 4000)
        assert str(milk) == "250 mL"

    def test_create_count(self) -> None:
        """Should create a bare count without unit."""
        eggs = Quantity.count(3)
        assert eggs.kind is QuantityKind.COUNT
        assert eggs.unit is None
        assert str(eggs) == "3"

    def test_kind_from_string(self) -> None:
        """Should accept the kind as plain text."""
        assert Quantity("mass", "200", "g") == Quantity.mass(200, "g")

    def test_reject_negative(self) -> None:
        """Should reject negative amounts with a unit error."""
        with pytest.raises(NegativeMagnitudeError) as exc_info:
            Quantity.mass(-1, "g")
        assert exc_info.value.kind is QuantityKind.MASS
        with pytest.raises(NegativeMagnitudeError):
            Quantity.count("-2")

    def test_reject_count_with_unit(self) -> None:
        """Should reject a count carrying a unit."""
        with pytest.raises(ValueError):
            Quantity(QuantityKind.COUNT, Fraction(3), "g")

    @pytest.mark.parametrize("unit", [None, PLACEHOLDER_UNIT])
    def test_reject_missing_unit(self, unit) -> None:
        """Should report masses without a unit."""
        with pytest.raises(UnitNotSpecifiedError):
            Quantity.mass(200, unit)

    def test_reject_unknown_unit(self) -> None:
        """Should reject units outside the registry."""
        with pytest.raises(UnrecognizedUnitError):
            Quantity.volume(1, "g")

    def test_reject_malformed_magnitude(self) -> None:
        """Should reject magnitude text that is not a number."""
        with pytest.raises(MalformedMagnitudeError):
            Quantity.mass("a pinch", "g")

    def test_micro_alias_normalised(self) -> None:
        """Should store the registry spelling of aliased units."""
        saffron = Quantity.mass(5, "ug")
        assert saffron.unit == "µg"
        assert saffron + Quantity.mass(5, "µg") == Quantity.mass(10, "µg")

    def test_immutable(self) -> None:
        """Should be immutable."""
        flour = Quantity.mass(200, "g")
        with pytest.raises(AttributeError):
            flour.value = Fraction(1)  # noqa: SLF001

    def test_hashable(self) -> None:
        """Should be usable as a dict key."""
        d = {Quantity.mass(200, "g"): "flour"}
        assert d[Quantity.mass("200", "g")] == "flour"

    def test_repr(self) -> None:
        """Should show kind, canonical value and unit."""
        assert repr(Quantity.mass(200, "g")) == "Quantity(kind='mass', value=200, unit='g')"
        assert repr(Quantity.count(2)) == "Quantity(kind='count', value=2)"


class TestQuantityAddition:
    """Test strict Quantity addition."""

    def test_add_same_unit(self) -> None:
        """Should add masses expressed in the same unit."""
        total = Quantity.mass(200, "g") + Quantity.mass(100, "g")
        assert total == Quantity.mass(300, "g")
        assert str(total) == "300 g"

    def test_add_counts(self) -> None:
        """Should add bare counts."""
        assert Quantity.count(2) + Quantity.count("1/2") == Quantity.count("2.5")

    def test_operands_unchanged(self) -> None:
        """Should return a new value and leave the operands alone."""
        a = Quantity.mass(200, "g")
        b = Quantity.mass(100, "g")
        a + b
        assert a == Quantity.mass(200, "g")
        assert b == Quantity.mass(100, "g")

    def test_commutative(self) -> None:
        """Should not depend on operand order."""
        a = Quantity.volume("1/3", "cup")
        b = Quantity.volume(2, "cup")
        assert a + b == b + a

    def test_associative(self) -> None:
        """Should not depend on grouping."""
        a = Quantity.volume("1/3", "tsp")
        b = Quantity.volume("0.25", "tsp")
        c = Quantity.volume(7, "tsp")
        assert (a + b) + c == a + (b + c)

    def test_scale_mismatch(self) -> None:
        """Should refuse to add grams and kilograms."""
        with pytest.raises(UnitScaleMismatchError) as exc_info:
            Quantity.mass(200, "g") + Quantity.mass(100, "kg")
        assert exc_info.value.left == "g"
        assert exc_info.value.right == "kg"

    def test_kind_mismatch_count_mass(self) -> None:
        """Should refuse to add a count and a mass."""
        with pytest.raises(UnitKindMismatchError):
            Quantity.count(2) + Quantity.mass(100, "g")

    def test_kind_mismatch_mass_volume(self) -> None:
        """Should refuse to add a mass and a volume."""
        with pytest.raises(UnitKindMismatchError) as exc_info:
            Quantity.mass(100, "g") + Quantity.volume(100, "mL")
        assert str(exc_info.value) == "Cannot combine mass with volume"

    def test_add_non_quantity(self) -> None:
        """Should not add plain numbers."""
        with pytest.raises(TypeError):
            Quantity.count(2) + 1

    def test_functional_add(self) -> None:
        """Should match the operator."""
        assert add(Quantity.count(1), Quantity.count(2)) == Quantity.count(3)

    def test_compatibility_checks(self) -> None:
        """Should distinguish kind and scale compatibility."""
        grams = Quantity.mass(1, "g")
        kilos = Quantity.mass(1, "kg")
        assert grams.is_kind_compatible(kilos)
        assert not grams.is_scale_compatible(kilos)
        assert not grams.is_kind_compatible(Quantity.count(1))

    def test_normalise_before_adding(self) -> None:
        """Should add once both sides are in a common unit."""
        total = Quantity.mass(1, "kg").in_unit("g") + Quantity.mass(100, "g")
        assert total == Quantity.mass(1100, "g")


class TestQuantityConversion:
    """Test Quantity unit views."""

    def test_magnitude_default_unit(self) -> None:
        """Should express the amount in its file unit."""
        assert Quantity.mass(250, "g").magnitude() == Fraction(250)

    def test_magnitude_other_unit(self) -> None:
        """Should express the amount exactly in another unit."""
        assert Quantity.mass(250, "g").magnitude("kg") == Fraction(1, 4)
        assert Quantity.volume(1, "tbsp").magnitude("tsp") == Fraction(3)

    def test_in_unit(self) -> None:
        """Should re-tag without changing the canonical value."""
        sugar = Quantity.mass(1500, "g").in_unit("kg")
        assert sugar.unit == "kg"
        assert sugar.value == Fraction(1500)
        assert str(sugar) == "1.5 kg"

    def test_in_unit_exact_customary(self) -> None:
        """Should convert customary units exactly."""
        assert Quantity.volume(3, "tsp").in_unit("tbsp") == Quantity.volume(1, "tbsp")
        assert Quantity.mass(16, "oz").in_unit("lb") == Quantity.mass(1, "lb")

    def test_count_has_no_unit_view(self) -> None:
        """Should refuse unit views of a count."""
        eggs = Quantity.count(3)
        with pytest.raises(UnitKindMismatchError):
            eggs.magnitude("g")
        with pytest.raises(UnitKindMismatchError):
            eggs.in_unit("g")
        with pytest.raises(UnitKindMismatchError):
            eggs.format("g")

    def test_format_descriptive(self) -> None:
        """Should use singular names for exactly one."""
        assert Quantity.volume(2, "cup").format(style=DisplayStyle.DESCRIPTIVE) == "2 cups"
        assert Quantity.volume(1, "cup").format(style=DisplayStyle.DESCRIPTIVE) == "1 cup"

    def test_format_other_unit(self) -> None:
        """Should render in a requested unit."""
        assert Quantity.mass(300, "g").format("kg") == "0.3 kg"


class TestDuration:
    """Test Duration value object."""

    def test_create(self) -> None:
        """Should store seconds and keep the display unit."""
        rest = Duration.of(15, "min")
        assert rest.value == Fraction(900)
        assert rest.unit == "min"
        assert str(rest) == "15 min"

    def test_equality_ignores_unit(self) -> None:
        """Should compare canonical values only."""
        assert Duration.of(90, "s") == Duration.of("1.5", "min")
        assert hash(Duration.of(1, "h")) == hash(Duration.of(60, "min"))

    def test_add_mixed_units(self) -> None:
        """Should add across units, keeping the left display unit."""
        total = Duration.of(1, "h") + Duration.of(30, "min")
        assert total.value == Fraction(5400)
        assert str(total) == "1.5 h"

    def test_sum(self) -> None:
        """Should work with the builtin sum."""
        total = sum([Duration.of(5, "min"), Duration.of(10, "min")])
        assert total == Duration.of(15, "min")

    def test_zero(self) -> None:
        """Should render zero in seconds."""
        assert str(Duration.zero()) == "0 s"
        assert Duration.zero().display_unit() == "s"

    def test_zero_takes_unit_of_addend(self) -> None:
        """Should adopt the other operand's unit when it has none."""
        assert str(Duration.zero() + Duration.of(5, "min")) == "5 min"

    def test_reject_negative(self) -> None:
        """Should reject negative durations with a unit error."""
        with pytest.raises(NegativeMagnitudeError):
            Duration.of(-1, "s")

    def test_reject_missing_unit(self) -> None:
        """Should report a missing unit."""
        with pytest.raises(UnitNotSpecifiedError):
            Duration.of(5, None)

    def test_reject_unknown_unit(self) -> None:
        """Should reject units outside the time table."""
        with pytest.raises(UnrecognizedUnitError):
            Duration.of(1, "g")

    def test_format_descriptive(self) -> None:
        """Should render in another unit and style."""
        assert Duration.of(15, "min").format("h", DisplayStyle.DESCRIPTIVE) == "0.25 hours"
        assert Duration.of(1, "h").format(style=DisplayStyle.DESCRIPTIVE) == "1 hour"

    def test_not_addable_to_temperature(self) -> None:
        """Should not mix durations and temperatures."""
        with pytest.raises(TypeError):
            Duration.of(1, "s") + TemperatureInterval.of(1, "K")


class TestTemperatureInterval:
    """Test TemperatureInterval value object."""

    def test_linear_conversion(self) -> None:
        """Should convert without zero-point offsets."""
        oven = TemperatureInterval.of(180, "°C")
        assert oven.magnitude("K") == Fraction(180)
        assert oven.magnitude("°F") == Fraction(324)
        assert TemperatureInterval.of(9, "°F").magnitude("K") == Fraction(5)

    def test_render(self) -> None:
        """Should render in its own unit by default."""
        assert str(TemperatureInterval.of(180, "°C")) == "180 °C"
        assert TemperatureInterval.of(180, "°C").format("°F") == "324 °F"

    def test_in_unit(self) -> None:
        """Should re-tag without changing the value."""
        oven = TemperatureInterval.of(180, "°C").in_unit("°F")
        assert oven == TemperatureInterval.of(180, "°C")
        assert str(oven) == "324 °F"


class TestStepType:
    """Test StepType enum."""

    def test_values(self) -> None:
        """Should use the persisted spellings."""
        assert [step_type.value for step_type in StepType] == ["Prep", "Cook", "Wait", "Other"]

    def test_from_string(self) -> None:
        """Should parse from its value."""
        assert StepType("Cook") is StepType.COOK
        assert str(StepType.WAIT) == "Wait"

    def test_default(self) -> None:
        """Should default to OTHER."""
        assert StepType.default() is StepType.OTHER

    def test_reject_unknown(self) -> None:
        """Should reject unknown spellings."""
        with pytest.raises(ValueError):
            StepType("Bake")


class TestAmountMade:
    """Test AmountMade value object."""

    def test_str(self) -> None:
        """Should render the yield line."""
        assert str(AmountMade(24, "cookies")) == "Makes: 24 cookies"

    def test_default(self) -> None:
        """Should default to zero with no units."""
        assert AmountMade() == AmountMade(0, "")

    def test_reject_negative(self) -> None:
        """Should reject negative yields."""
        with pytest.raises(ValueError):
            AmountMade(-1, "loaves")
