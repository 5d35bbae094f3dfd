from pathlib import Path

import pytest

from dishnames.config import Settings
from dishnames.core.database import DishNameDatabase
from dishnames.core.engine import DishNameEngine
from dishnames.core.resolver import DishResolver
from dishnames.data import get_DEFAULT_DISH_DOCUMENT
from dishnames.rules.categorizer import IngredientCategorizer
from dishnames.rules.selector import GeneratorSelector


@pytest.fixture
def categorizer() -> IngredientCategorizer:
    return IngredientCategorizer()


@pytest.fixture
def default_database() -> DishNameDatabase:
    return DishNameDatabase.from_document(get_DEFAULT_DISH_DOCUMENT())


@pytest.fixture
def resolver(categorizer, default_database) -> DishResolver:
    # sans variation par ticks : résolution reproductible
    return DishResolver(
        default_database,
        GeneratorSelector(categorizer),
        seed_variation_probability=0.0,
        tick_source=lambda: 0,
    )


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(data_dir=tmp_path / "Database", seed_variation_probability=0.0)


@pytest.fixture
def engine(settings: Settings) -> DishNameEngine:
    return DishNameEngine.initialize(settings, tick_source=lambda: 0)
