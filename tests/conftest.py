import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest  # noqa: E402  # pyright: ignore[reportMissingImports]

from catalog import IngredientCatalog  # noqa: E402
from models.ingredient import Ingredient  # noqa: E402
from models.target import NormalizedTarget  # noqa: E402


def make_ingredient(
    name,
    g=100,
    kcal=100,
    carb=0,
    fat=0,
    protein=0,
) -> Ingredient:
    """Ingredient with handy defaults (100 g, 100 kcal, no macros)."""
    return Ingredient(
        name=name,
        g=g,
        kcal=kcal,
        carb=carb,
        fat=fat,
        protein=protein,
    )


def scenario_catalog() -> IngredientCatalog:
    """Two ingredients at 1 kcal each, so their macros are per-kcal as given."""
    return IngredientCatalog(
        [
            make_ingredient("apple", kcal=1, carb=20, fat=30, protein=50),
            make_ingredient("banana", kcal=1, carb=40, fat=50, protein=60),
        ]
    )


APPLE_TARGET = NormalizedTarget(carb=0.20, fat=0.30, protein=0.50)
BANANA_TARGET = NormalizedTarget(carb=0.26, fat=0.33, protein=0.40)
BETWEEN_TARGET = NormalizedTarget(carb=0.23, fat=0.315, protein=0.45)


@pytest.fixture
def catalog():
    return scenario_catalog()


@pytest.fixture
def kitchen_catalog():
    """Raw ingredients with gram data, for constraint and gram tests."""
    return IngredientCatalog(
        [
            make_ingredient("rice", g=100, kcal=400, carb=80, fat=2, protein=8),
            make_ingredient("oil", g=100, kcal=900, fat=100),
            make_ingredient("whey", g=100, kcal=390, carb=7, fat=6, protein=78),
        ]
    )
