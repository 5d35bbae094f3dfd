import pytest

from dishnames.domain.ingredients import Ingredient, IngredientCategory
from dishnames.rules.categorizer import IngredientCategorizer


def _ing(*def_names):
    return [Ingredient.of(name) for name in def_names]


@pytest.mark.parametrize(
    "def_name, expected",
    [
        ("RawRice", IngredientCategory.SPECIAL),
        ("Milk", IngredientCategory.SPECIAL),
        ("InsectJelly", IngredientCategory.SPECIAL),
        ("Meat_Cow", IngredientCategory.MEAT),
        ("Meat_Twisted", IngredientCategory.MEAT),
        ("TwistedMeat", IngredientCategory.MEAT),
        ("EggChickenUnfertilized", IngredientCategory.EGG),
        ("RawCorn", IngredientCategory.GRAIN),
        ("RawBerries", IngredientCategory.FRUIT),
        ("RawAgave", IngredientCategory.FRUIT),
        ("RawFungus", IngredientCategory.FUNGUS),
        ("Glowstool", IngredientCategory.FUNGUS),
        ("RawPotatoes", IngredientCategory.VEGETABLE),
        ("Steel", IngredientCategory.OTHER),
    ],
)
def test_categorize_rules(categorizer, def_name, expected):
    assert categorizer.categorize(Ingredient.of(def_name)) == expected


def test_special_set_is_configurable():
    categorizer = IngredientCategorizer(special_ingredients=[])
    assert categorizer.categorize(Ingredient.of("Milk")) == IngredientCategory.DAIRY
    assert categorizer.categorize(Ingredient.of("RawRice")) == IngredientCategory.GRAIN


@pytest.mark.parametrize("def_name", ["x", "???", "Raw", "Meat_", "123", "égout", "Chocolate"])
def test_categorize_is_total(categorizer, def_name):
    assert categorizer.categorize(Ingredient.of(def_name)) in set(IngredientCategory)


def test_categorize_none_is_other(categorizer):
    assert categorizer.categorize(None) == IngredientCategory.OTHER


def test_categorize_is_memoized(categorizer):
    first = categorizer.categorize(Ingredient.of("RawCorn"))
    assert categorizer._cache["RawCorn"] == first
    assert categorizer.categorize(Ingredient.of("RawCorn")) is first


def test_dominant_category_tie_uses_declaration_order(categorizer):
    # Meat est déclaré avant Vegetable
    assert categorizer.dominant_category(_ing("RawPotatoes", "Meat_Cow")) == IngredientCategory.MEAT


def test_dominant_category_majority(categorizer):
    ingredients = _ing("RawPotatoes", "RawCabbage", "Meat_Cow")
    assert categorizer.dominant_category(ingredients) == IngredientCategory.VEGETABLE


def test_dominant_category_ignores_other_when_possible(categorizer):
    ingredients = _ing("Steel", "Steel", "RawPotatoes")
    assert categorizer.dominant_category(ingredients) == IngredientCategory.VEGETABLE
    assert categorizer.dominant_category(_ing("Steel")) == IngredientCategory.OTHER


@pytest.mark.parametrize("empty", [None, []])
def test_dominant_category_empty(categorizer, empty):
    assert categorizer.dominant_category(empty) == IngredientCategory.OTHER


def test_representative_ingredient_most_frequent(categorizer):
    ingredients = _ing("RawPotatoes", "RawCabbage", "RawCabbage", "Meat_Cow")
    chosen = categorizer.representative_ingredient(ingredients, IngredientCategory.VEGETABLE)
    assert chosen.def_name == "RawCabbage"


def test_representative_ingredient_tie_keeps_input_order(categorizer):
    ingredients = _ing("RawCabbage", "RawPotatoes")
    chosen = categorizer.representative_ingredient(ingredients, IngredientCategory.VEGETABLE)
    assert chosen.def_name == "RawCabbage"


def test_representative_ingredient_absent(categorizer):
    assert categorizer.representative_ingredient(_ing("Meat_Cow"), IngredientCategory.FRUIT) is None
    assert categorizer.representative_ingredient(None, IngredientCategory.MEAT) is None


def test_categories_in_first_appearance_order(categorizer):
    ingredients = _ing("RawCorn", "Meat_Cow", "RawCorn", "RawPotatoes")
    assert categorizer.categories(ingredients) == [
        IngredientCategory.GRAIN,
        IngredientCategory.MEAT,
        IngredientCategory.VEGETABLE,
    ]
