"""Base de noms de plats rédigés, interrogée par nombre d'ingrédients."""

import logging
from pathlib import Path
from random import Random
from threading import Lock
from typing import Any, Optional, Sequence, Set

from dishnames.core.loader import DishTables, Entries, LoadReport, build_tables, load_tables
from dishnames.domain.dish import DishInfo
from dishnames.domain.ingredients import Ingredient
from dishnames.domain.types import MealQuality
from dishnames.rules.labels import display_label

logger = logging.getLogger(__name__)


class DishNameDatabase:
    """Tables de recherche remplacées d'un bloc à chaque rechargement.

    Une recherche lit ``self._tables`` une seule fois : elle voit donc soit
    l'ancien jeu complet, soit le nouveau, jamais un mélange. La base ne
    garde aucun état aléatoire, le tirage utilise le ``Random`` fourni.
    """

    def __init__(
        self,
        path: Optional[Path] = None,
        tables: Optional[DishTables] = None,
        log_missing_ingredients: bool = False,
    ):
        self.path = path
        self.log_missing_ingredients = log_missing_ingredients
        self.last_report: Optional[LoadReport] = None
        self._tables = tables if tables is not None else DishTables()
        self._reload_lock = Lock()
        self._missing_lock = Lock()
        self._reported_missing: Set[str] = set()

    @classmethod
    def load(cls, path: Path, log_missing_ingredients: bool = False) -> "DishNameDatabase":
        database = cls(path, log_missing_ingredients=log_missing_ingredients)
        database.reload()
        return database

    @classmethod
    def from_document(cls, document: Any, log_missing_ingredients: bool = False) -> "DishNameDatabase":
        """Base construite en mémoire, sans fichier (tests, hôtes embarqués).

        >>> db = DishNameDatabase.from_document({"ingredients": [{"def_name": "RawRice", "dish_names": ["Rice Porridge"]}]})
        >>> db.lookup([Ingredient.of("rawrice")]).name
        'Rice Porridge'
        """
        tables, warnings = build_tables(document)
        for warning in warnings:
            logger.warning("in-memory document: %s", warning)
        return cls(tables=tables, log_missing_ingredients=log_missing_ingredients)

    @property
    def tables(self) -> DishTables:
        return self._tables

    def reload(self) -> LoadReport:
        """Relit le document et remplace toutes les tables en une affectation."""
        if self.path is None:
            raise ValueError("database has no source document to reload from")
        with self._reload_lock:
            tables, report = load_tables(self.path)
            self._tables = tables
            self.last_report = report
        return report

    def lookup(
        self,
        ingredients: Sequence[Ingredient],
        quality: Optional[MealQuality] = None,
        rng: Optional[Random] = None,
    ) -> Optional[DishInfo]:
        """Cherche un plat rédigé pour ces ingrédients.

        Paramètres
        ----------
        ingredients : Sequence[Ingredient]
            Ingrédients du repas, dans l'ordre fourni par l'hôte.
        quality : MealQuality | None
            Qualité du repas ; ne sert qu'aux recherches à un ingrédient.
        rng : Random | None
            Générateur amorcé par l'appelant pour choisir parmi plusieurs plats.

        Retour
        ------
        DishInfo | None
            ``None`` quand rien ne correspond (0 ou plus de 3 ingrédients,
            combo absent...). Pour 2 ingrédients sans combo, le plat du
            premier est complété par le libellé du second (« X with Y »).
        """
        if not ingredients:
            return None
        tables = self._tables
        rng = rng or Random()
        count = len(ingredients)

        if count == 1:
            return self._lookup_single(tables, ingredients[0], quality, rng)

        if count == 2:
            first, second = ingredients
            entries = tables.pairs.get((first.def_name, second.def_name))
            if entries:
                return _pick(entries, rng)
            base = self._lookup_single(tables, first, quality, rng)
            if base is None:
                return None
            label = display_label(second.label)
            return DishInfo(
                f"{base.name} with {label}",
                f"{base.description} {label} adds a complementary flavor.",
            )

        if count == 3:
            key = tuple(i.def_name for i in ingredients)
            entries = tables.triples.get(key)
            return _pick(entries, rng) if entries else None

        return None

    def _lookup_single(
        self,
        tables: DishTables,
        ingredient: Ingredient,
        quality: Optional[MealQuality],
        rng: Random,
    ) -> Optional[DishInfo]:
        def_name = ingredient.def_name
        if quality is not None:
            entries = tables.quality_scoped.get(def_name, {}).get(quality)
            if entries:
                return _pick(entries, rng)

        entries = tables.single.get(def_name)
        if entries:
            return _pick(entries, rng)

        matching = tables.lowercase.get(def_name.lower())
        if matching is not None:
            return _pick(tables.single[matching], rng)

        self._report_missing(ingredient)
        return None

    def _report_missing(self, ingredient: Ingredient) -> None:
        if not self.log_missing_ingredients:
            return
        with self._missing_lock:
            if ingredient.def_name in self._reported_missing:
                return
            self._reported_missing.add(ingredient.def_name)
        logger.info("Missing dish name for ingredient: %s (label: %s)", ingredient.def_name, ingredient.label)


def _pick(entries: Entries, rng: Random) -> DishInfo:
    return DishInfo.from_entry(rng.choice(entries))
