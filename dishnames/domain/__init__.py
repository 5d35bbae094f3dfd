"""
Domain objects for DishNames.

The domain layer holds the value objects shared by every other layer:
ingredients and their categories, meal qualities, authored dish entries,
resolution results and batch jobs. They carry no I/O and no global state
to ease unit testing.
"""

from .ingredients import Ingredient, IngredientCategory
from .types import MealQuality, meal_quality_from_type
from .dish import DishEntry, DishInfo, MYSTERY_DISH
from .batch import BatchJob, BatchJobState, MealItem

__all__ = [
    "Ingredient",
    "IngredientCategory",
    "MealQuality",
    "meal_quality_from_type",
    "DishEntry",
    "DishInfo",
    "MYSTERY_DISH",
    "BatchJob",
    "BatchJobState",
    "MealItem",
]
