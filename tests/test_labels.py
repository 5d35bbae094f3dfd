import re

import pytest

from dishnames.domain.ingredients import Ingredient, as_ingredients
from dishnames.rules.labels import (
    capitalized_label,
    clean_label,
    fix_twisted_meat_name,
    format_ingredients_list,
)

BARE_TWISTED = re.compile(r"\bTwisted\b(?! Meat)")


def test_ingredient_label_is_derived_from_def_name():
    assert Ingredient.of("RawPotatoes").label == "raw potatoes"
    assert Ingredient.of("Meat_Cow").label == "cow meat"
    assert Ingredient.of("Meat_Cow", label="beef").label == "beef"


def test_as_ingredients_accepts_strings_and_skips_empty():
    result = as_ingredients(["RawRice", None, "", Ingredient.of("Milk")])
    assert [i.def_name for i in result] == ["RawRice", "Milk"]
    assert as_ingredients(None) == []


def test_clean_and_capitalized_labels():
    assert clean_label("Raw agave") == "agave"
    assert clean_label("Insect jelly") == "insect jelly"
    assert capitalized_label("raw potatoes") == "Potatoes"
    assert capitalized_label("Twisted meat") == "Twisted Meat"
    assert capitalized_label("") == "Unknown ingredient"


def test_format_list_single_and_counts():
    rice = Ingredient.of("RawRice")
    assert format_ingredients_list([rice]) == "rice"
    assert format_ingredients_list([rice, rice, rice]) == "rice (x3)"


def test_format_list_oxford_comma():
    ingredients = as_ingredients(["RawRice", "RawCorn", "Milk", "RawBerries", "RawCorn"])
    assert format_ingredients_list(ingredients) == "corn (x2), rice, milk, and berries"


def test_format_list_empty():
    assert format_ingredients_list(None) == "unknown ingredients"


@pytest.mark.parametrize(
    "name",
    [
        "Twisted Stew",
        "Seared Twisted Roast",
        "Exquisite Twisted",
        "Twisted Twisted Pot",
        "Eldritch Twisted Meat Stew",
        "Twisted Meatloaf",
        "Cow Stew",
    ],
)
def test_twisted_fixup_never_leaves_bare_twisted(name):
    fixed = fix_twisted_meat_name(name)
    assert BARE_TWISTED.search(fixed) is None
    if "Twisted" in name:
        assert "Twisted Meat" in fixed
    assert fix_twisted_meat_name(fixed) == fixed


def test_twisted_fixup_is_case_sensitive_and_whole_word():
    assert fix_twisted_meat_name("Twisted Meaty Roast") == "Twisted Meaty Roast"
    assert fix_twisted_meat_name("twisted stew") == "twisted stew"
    assert fix_twisted_meat_name("Untwisted Stew") == "Untwisted Stew"
