import json
import logging
import threading
from itertools import permutations
from random import Random

import pytest

from dishnames.core.database import DishNameDatabase
from dishnames.domain.dish import DishInfo
from dishnames.domain.ingredients import as_ingredients
from dishnames.domain.types import MealQuality

PAIR_NAMES = {"Potato and Mushroom Casserole", "Earthy Tuber Stew"}


def _db(document):
    return DishNameDatabase.from_document(document)


def test_single_match():
    db = _db({"ingredients": [{"def_name": "RawPotatoes", "dish_names": ["Kettle Porridge"]}]})
    info = db.lookup(as_ingredients(["RawPotatoes"]), MealQuality.SIMPLE, Random(1))
    assert info == DishInfo("Kettle Porridge", "A delicious meal.")


def test_quality_scoped_takes_precedence():
    db = _db(
        {
            "ingredients": [
                {"def_name": "RawRice", "dish_names": ["Rice Porridge"]},
                {"def_name": "RawRice", "meal_quality": "Lavish", "dish_names": ["Saffron Rice"]},
            ]
        }
    )
    rice = as_ingredients(["RawRice"])
    assert db.lookup(rice, MealQuality.LAVISH).name == "Saffron Rice"
    assert db.lookup(rice, MealQuality.FINE).name == "Rice Porridge"
    assert db.lookup(rice, None).name == "Rice Porridge"


def test_case_insensitive_identifier_is_last_resort():
    db = _db({"ingredients": [{"def_name": "RawRice", "dish_names": ["Rice Porridge"]}]})
    assert db.lookup(as_ingredients(["RAWRICE"])).name == "Rice Porridge"


@pytest.mark.parametrize("seed", range(20))
def test_pair_lookup_is_symmetric(default_database, seed):
    forward = default_database.lookup(as_ingredients(["RawPotatoes", "RawFungus"]), rng=Random(seed))
    backward = default_database.lookup(as_ingredients(["RawFungus", "RawPotatoes"]), rng=Random(seed))
    assert forward.name in PAIR_NAMES
    assert forward == backward


def test_triple_lookup_under_every_ordering():
    db = _db({"combos": [{"ingredients": ["Meat_Cow", "RawCorn", "RawPotatoes"], "dish_names": ["Ranch Supper"]}]})
    for order in permutations(["Meat_Cow", "RawCorn", "RawPotatoes"]):
        assert db.lookup(as_ingredients(order)).name == "Ranch Supper"


def test_two_ingredients_degrade_to_first_single():
    db = _db({"ingredients": [{"def_name": "RawPotatoes", "dish_names": ["Kettle Porridge"]}]})

    info = db.lookup(as_ingredients(["RawPotatoes", "RawFungus"]), MealQuality.SIMPLE, Random(3))

    assert info.name == "Kettle Porridge with Fungus"
    assert info.description == "A delicious meal. Fungus adds a complementary flavor."


def test_two_ingredients_without_first_single_is_a_miss():
    db = _db({"ingredients": [{"def_name": "RawFungus", "dish_names": ["Fungal Medley"]}]})
    assert db.lookup(as_ingredients(["RawPotatoes", "RawFungus"])) is None


def test_three_ingredients_never_degrade(default_database):
    assert default_database.lookup(as_ingredients(["RawPotatoes", "RawFungus", "RawRice"])) is None


@pytest.mark.parametrize("count", [0, 4, 6])
def test_other_counts_are_misses(default_database, count):
    ingredients = as_ingredients(["RawPotatoes"] * count)
    assert default_database.lookup(ingredients) is None


def test_missing_ingredient_is_logged_once(caplog):
    db = DishNameDatabase.from_document({}, log_missing_ingredients=True)
    steel = as_ingredients(["Steel"])

    with caplog.at_level(logging.INFO, logger="dishnames.core.database"):
        db.lookup(steel)
        db.lookup(steel)

    messages = [r.getMessage() for r in caplog.records if "Missing dish name" in r.getMessage()]
    assert messages == ["Missing dish name for ingredient: Steel (label: steel)"]


def test_reload_without_source_is_rejected():
    with pytest.raises(ValueError):
        DishNameDatabase().reload()


def test_reload_swaps_tables_atomically(tmp_path):
    path = tmp_path / "DishNames.json"
    old = {
        "ingredients": [{"def_name": "A", "dish_names": ["Old A"]}],
        "combos": [{"ingredients": ["A", "B"], "dish_names": ["Old Pair"]}],
    }
    new = {"ingredients": [{"def_name": "A", "dish_names": ["New A"]}]}
    path.write_text(json.dumps(old), encoding="utf-8")
    db = DishNameDatabase.load(path)

    # un mélange (paires de l'un, simples de l'autre) donnerait "Old A with B"
    allowed = {"Old Pair", "New A with B"}
    seen = set()
    stop = threading.Event()

    def reader():
        pair = as_ingredients(["A", "B"])
        while not stop.is_set():
            seen.add(db.lookup(pair).name)

    readers = [threading.Thread(target=reader) for _ in range(4)]
    for thread in readers:
        thread.start()
    for i in range(30):
        path.write_text(json.dumps(new if i % 2 == 0 else old), encoding="utf-8")
        db.reload()
    stop.set()
    for thread in readers:
        thread.join()

    assert seen <= allowed
    assert db.last_report.source == str(path)
