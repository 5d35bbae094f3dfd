import json
import logging

from dishnames.core.loader import build_tables, load_tables
from dishnames.data import get_DEFAULT_DISH_DOCUMENT
from dishnames.domain.dish import DEFAULT_DISH_DESCRIPTION
from dishnames.domain.types import MealQuality


def _write(path, payload):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), encoding="utf-8")


def test_missing_document_writes_and_loads_default(tmp_path):
    path = tmp_path / "Database" / "DishNames.json"

    tables, report = load_tables(path)

    assert path.exists()
    assert json.loads(path.read_text(encoding="utf-8")) == get_DEFAULT_DISH_DOCUMENT()
    assert report.created_default is True
    assert report.single_count == 3
    assert report.pair_count == 1
    assert report.triple_count == 0
    assert report.warnings == []
    assert [e.name for e in tables.single["RawFungus"]] == ["Fungal Medley", "Mushroom Ragout"]


def test_existing_document_is_not_overwritten(tmp_path):
    path = tmp_path / "DishNames.json"
    _write(path, {"ingredients": [{"def_name": "Milk", "dish_names": ["Warm Milk"]}]})

    tables, report = load_tables(path)

    assert report.created_default is False
    assert list(tables.single) == ["Milk"]


def test_unreadable_document_gives_empty_tables(tmp_path, caplog):
    path = tmp_path / "DishNames.json"
    path.write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="dishnames.core.loader"):
        tables, report = load_tables(path)

    assert tables.single == {} and tables.pairs == {}
    assert len(report.warnings) == 1
    assert any(r.levelno == logging.ERROR for r in caplog.records)


def test_invalid_entries_are_skipped_and_reported():
    document = {
        "ingredients": [
            {"dish_names": ["No Identifier"]},
            {"def_name": "RawRice", "meal_quality": "Legendary", "dish_names": ["Golden Rice"]},
            {"def_name": "RawCorn", "dish_names": ["", "   "]},
            {"def_name": "RawCorn", "dishes": [{"name": "Corn Chowder", "description": ""}]},
        ],
        "combos": [
            {"ingredients": ["A", "B", "C", "D"], "dish_names": ["Too Many"]},
            {"ingredients": ["A"], "dish_names": ["Too Few"]},
            {"ingredients": ["A", "B"], "dish_names": []},
            {"ingredients": ["A", "B", "C"], "dish_names": ["Trio"]},
        ],
    }

    tables, warnings = build_tables(document)

    assert list(tables.single) == ["RawCorn"]
    assert tables.single["RawCorn"][0].description == DEFAULT_DISH_DESCRIPTION
    assert tables.quality_scoped == {}
    assert tables.pairs == {}
    assert tables.count_triples() == 1
    assert len(warnings) == 6


def test_quality_scoped_entries_are_case_insensitive():
    document = {
        "ingredients": [
            {"def_name": "RawRice", "meal_quality": "lavish", "dishes": [{"name": "Saffron Rice"}]},
            {"def_name": "RawRice", "meal_quality": "Lavish", "dish_names": ["Golden Pilaf"]},
        ]
    }

    tables, _ = build_tables(document)

    names = [e.name for e in tables.quality_scoped["RawRice"][MealQuality.LAVISH]]
    assert names == ["Saffron Rice", "Golden Pilaf"]
    assert "RawRice" not in tables.single


def test_triple_is_stored_under_all_permutations():
    tables, _ = build_tables(
        {"combos": [{"ingredients": ["Meat_Cow", "RawCorn", "RawPotatoes"], "dish_names": ["Ranch Supper"]}]}
    )

    assert len(tables.triples) == 6
    assert len({id(entries) for entries in tables.triples.values()}) == 1


def test_repeated_combo_merges_into_one_list():
    tables, _ = build_tables(
        {
            "combos": [
                {"ingredients": ["A", "B"], "dish_names": ["First"]},
                {"ingredients": ["B", "A"], "dish_names": ["Second"]},
            ]
        }
    )

    assert [e.name for e in tables.pairs[("A", "B")]] == ["First", "Second"]
    assert tables.count_pairs() == 1


def test_non_object_root_is_a_warning():
    tables, warnings = build_tables([1, 2, 3])
    assert tables.single == {}
    assert warnings == ["document root must be an object"]


def test_section_of_wrong_type_is_ignored():
    tables, warnings = build_tables({"ingredients": {"def_name": "Milk"}, "combos": None})
    assert tables.single == {}
    assert warnings == ["'ingredients' must be a list, section ignored"]
