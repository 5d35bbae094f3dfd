"""
Chargement du document de noms de plats et construction des tables de recherche.

Chaque entrée du document est validée séparément : une entrée invalide est
journalisée puis ignorée, les autres sont chargées. Un document absent est
remplacé par le document par défaut, écrit sur disque puis relu.
"""

import logging
from dataclasses import dataclass, field
from itertools import permutations
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError, field_validator

from dishnames.data import get_DEFAULT_DISH_DOCUMENT
from dishnames.domain.dish import DishEntry
from dishnames.domain.types import MealQuality
from dishnames.utils import DocumentError, read_json, write_json

logger = logging.getLogger(__name__)

Entries = Tuple[DishEntry, ...]


# --------- Modèles du document ---------


class DishList(BaseModel):
    """Liste de plats : forme complète ``dishes`` ou raccourci ``dish_names``."""

    dishes: List[DishEntry] = Field(default_factory=list)
    dish_names: List[str] = Field(default_factory=list)

    @field_validator("dishes", mode="before")
    @classmethod
    def _drop_unnamed_dishes(cls, value):
        if not isinstance(value, list):
            return value
        return [
            d for d in value if not isinstance(d, dict) or str(d.get("name") or "").strip()
        ]

    @field_validator("dish_names", mode="before")
    @classmethod
    def _drop_blank_names(cls, value):
        if not isinstance(value, list):
            return value
        return [n for n in value if not isinstance(n, str) or n.strip()]

    def entries(self) -> List[DishEntry]:
        return list(self.dishes) + [DishEntry(name=n) for n in self.dish_names]


class IngredientDishes(DishList):
    def_name: str = Field(min_length=1)
    meal_quality: Optional[MealQuality] = None

    @field_validator("meal_quality", mode="before")
    @classmethod
    def _parse_quality(cls, value):
        if value is None or value == "":
            return None
        quality = MealQuality.parse(str(value))
        if quality is None:
            raise ValueError(f"unknown meal quality: {value}")
        return quality


class ComboDishes(DishList):
    ingredients: List[str] = Field(min_length=1)

    @field_validator("ingredients")
    @classmethod
    def _strip_ids(cls, value: List[str]) -> List[str]:
        ids = [v.strip() for v in value]
        if any(not v for v in ids):
            raise ValueError("combo ingredient identifiers must not be blank")
        return ids


class LoadReport(BaseModel):
    """Bilan d'un chargement, renvoyé à l'hôte par ``initialize`` et ``reload``."""

    source: str
    created_default: bool = False
    single_count: int = 0
    quality_count: int = 0
    pair_count: int = 0
    triple_count: int = 0
    warnings: List[str] = Field(default_factory=list)


# --------- Tables ---------


@dataclass(frozen=True)
class DishTables:
    """
    Jeu complet de tables, jamais modifié après construction.
    - single         : identifiant -> plats
    - quality_scoped : identifiant -> qualité -> plats
    - pairs / triples: clés stockées sous toutes leurs permutations,
      toutes pointant vers le même tuple
    - lowercase      : identifiant en minuscules -> identifiant de ``single``
    """

    single: Dict[str, Entries] = field(default_factory=dict)
    quality_scoped: Dict[str, Dict[MealQuality, Entries]] = field(default_factory=dict)
    pairs: Dict[Tuple[str, str], Entries] = field(default_factory=dict)
    triples: Dict[Tuple[str, str, str], Entries] = field(default_factory=dict)
    lowercase: Dict[str, str] = field(default_factory=dict)

    def count_pairs(self) -> int:
        return len({frozenset(k) for k in self.pairs})

    def count_triples(self) -> int:
        return len({tuple(sorted(k)) for k in self.triples})


def _add_combo(target: Dict[Tuple[str, ...], List[DishEntry]], ids: List[str], entries: List[DishEntry]) -> None:
    # une seule liste partagée par toutes les permutations
    canonical = tuple(sorted(ids))
    shared = target.get(canonical)
    if shared is None:
        shared = []
        for key in permutations(canonical):
            target[key] = shared
    shared.extend(entries)


def build_tables(document: Any) -> Tuple[DishTables, List[str]]:
    """Construit les tables à partir du document brut (déjà décodé).

    Paramètres
    ----------
    document : Any
        Contenu JSON décodé, attendu sous la forme
        ``{"ingredients": [...], "combos": [...]}``.

    Retour
    ------
    Tuple[DishTables, List[str]]
        Les tables gelées et les avertissements collectés pour chaque
        entrée ignorée.

    Notes
    -----
    Une clé n'est insérée que si sa liste de plats est non vide. Les combos
    de 2 ingrédients vont dans ``pairs``, ceux de 3 dans ``triples`` ;
    les autres tailles sont ignorées avec un avertissement.

    Exemple
    -------
    >>> tables, warnings = build_tables({"combos": [{"ingredients": ["A", "B"], "dish_names": ["AB"]}]})
    >>> tables.pairs[("B", "A")] is tables.pairs[("A", "B")]
    True
    >>> warnings
    []
    """
    warnings: List[str] = []
    if not isinstance(document, dict):
        return DishTables(), ["document root must be an object"]

    single: Dict[str, List[DishEntry]] = {}
    quality_scoped: Dict[str, Dict[MealQuality, List[DishEntry]]] = {}
    combos: Dict[int, Dict[Tuple[str, ...], List[DishEntry]]] = {2: {}, 3: {}}

    for index, raw in enumerate(_as_list(document.get("ingredients"), "ingredients", warnings)):
        try:
            item = IngredientDishes.model_validate(raw)
        except ValidationError as e:
            warnings.append(f"ingredients[{index}] skipped: {_short_error(e)}")
            continue
        entries = item.entries()
        if not entries:
            warnings.append(f"ingredients[{index}] ({item.def_name}) has no dish names")
            continue
        if item.meal_quality is None:
            single.setdefault(item.def_name, []).extend(entries)
        else:
            by_quality = quality_scoped.setdefault(item.def_name, {})
            by_quality.setdefault(item.meal_quality, []).extend(entries)

    for index, raw in enumerate(_as_list(document.get("combos"), "combos", warnings)):
        try:
            combo = ComboDishes.model_validate(raw)
        except ValidationError as e:
            warnings.append(f"combos[{index}] skipped: {_short_error(e)}")
            continue
        size = len(combo.ingredients)
        if size not in combos:
            warnings.append(f"combos[{index}] skipped: {size} ingredients (expected 2 or 3)")
            continue
        entries = combo.entries()
        if not entries:
            warnings.append(f"combos[{index}] {combo.ingredients} has no dish names")
            continue
        _add_combo(combos[size], combo.ingredients, entries)

    tables = DishTables(
        single={k: tuple(v) for k, v in single.items()},
        quality_scoped={
            k: {q: tuple(v) for q, v in by_quality.items()} for k, by_quality in quality_scoped.items()
        },
        pairs=_freeze_combos(combos[2]),
        triples=_freeze_combos(combos[3]),
        lowercase={k.lower(): k for k in single},
    )
    return tables, warnings


def _freeze_combos(table: Dict[Tuple[str, ...], List[DishEntry]]) -> Dict[Tuple[str, ...], Entries]:
    frozen: Dict[int, Entries] = {}
    result: Dict[Tuple[str, ...], Entries] = {}
    for key, entries in table.items():
        # id() regroupe les permutations qui partagent la même liste
        result[key] = frozen.setdefault(id(entries), tuple(entries))
    return result


def _as_list(value: Any, name: str, warnings: List[str]) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        warnings.append(f"'{name}' must be a list, section ignored")
        return []
    return value


def _short_error(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"{location}: {first['msg']}" if location else first["msg"]


# --------- Chargement ---------


def ensure_default_document(path: Path) -> bool:
    """Écrit le document par défaut si ``path`` n'existe pas. Renvoie True s'il a été créé."""
    if path.exists():
        return False
    write_json(path, get_DEFAULT_DISH_DOCUMENT())
    logger.info("Created default dish-name document at %s", path)
    return True


def load_tables(path: Path) -> Tuple[DishTables, LoadReport]:
    """Charge ``path`` (en créant le document par défaut si besoin).

    Ne lève jamais : un document illisible donne des tables vides et un
    avertissement dans le rapport.
    """
    report = LoadReport(source=str(path))
    document: Any = None
    try:
        report.created_default = ensure_default_document(path)
    except OSError:
        logger.exception("Could not write default dish-name document to %s", path)
        report.warnings.append(f"{path}: default document could not be written, using it in memory")
        document = get_DEFAULT_DISH_DOCUMENT()

    if document is None:
        try:
            document = read_json(path)
        except DocumentError as e:
            logger.exception("Could not read dish-name document %s", path)
            report.warnings.append(str(e))
            return DishTables(), report

    tables, warnings = build_tables(document)
    for warning in warnings:
        logger.warning("%s: %s", path, warning)
    report.warnings.extend(warnings)
    report.single_count = len(tables.single)
    report.quality_count = len(tables.quality_scoped)
    report.pair_count = tables.count_pairs()
    report.triple_count = tables.count_triples()
    logger.info(
        "Loaded %s: %d single, %d quality-scoped, %d pair and %d triple entries",
        path,
        report.single_count,
        report.quality_count,
        report.pair_count,
        report.triple_count,
    )
    return tables, report
