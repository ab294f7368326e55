"""
Shared fixtures for cookbook tests.

Recipes here are built directly from domain objects; record-level
fixtures live next to the mapper tests.
"""

import pytest
import structlog

from cookbook.domain.recipe.core.entities import Equipment, Ingredient, Recipe, Step
from cookbook.domain.recipe.core.value_objects import Duration, Quantity, StepType


# ═══════════════════════════════════════════════════════════
# EQUIPMENT FIXTURES
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def whisk() -> Equipment:
    """Owned whisk."""
    return Equipment(name="whisk", description="balloon whisk", is_owned=True)


@pytest.fixture
def bowl() -> Equipment:
    """Owned mixing bowl."""
    return Equipment(name="bowl", is_owned=True)


@pytest.fixture
def pineapple_corer() -> Equipment:
    """Equipment nobody owns."""
    return Equipment(name="pineapple corer", is_owned=False)


# ═══════════════════════════════════════════════════════════
# RECIPE FIXTURES
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def flour_recipe() -> Recipe:
    """Prep 5 min with 200 g flour, then Cook 10 min with 100 g flour."""
    return Recipe(
        name="Flatbread",
        steps=[
            Step(
                instructions="Mix the dough",
                step_type=StepType.PREP,
                time_needed=Duration.of(5, "min"),
                ingredients=[Ingredient(name="flour", quantity=Quantity.mass(200, "g"))],
            ),
            Step(
                instructions="Cook in a dry pan",
                step_type=StepType.COOK,
                time_needed=Duration.of(10, "min"),
                ingredients=[Ingredient(name="flour", quantity=Quantity.mass(100, "g"))],
            ),
        ],
    )


@pytest.fixture(autouse=True)
def reset_structlog():
    """Keep structlog configuration from leaking between tests."""
    yield
    structlog.reset_defaults()
