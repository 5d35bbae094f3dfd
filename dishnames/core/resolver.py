"""
Façade de résolution : base de noms d'abord, générateur de repli ensuite.

Chaque appel construit son propre ``random.Random`` amorcé à partir des
ingrédients, d'un compteur de ticks (avec une probabilité configurable) et
de la qualité. Deux résolutions concurrentes ne partagent donc aucun état
aléatoire.
"""

import logging
import time
import zlib
from random import Random
from typing import Callable, Iterable, Optional, Sequence

from dishnames.core.database import DishNameDatabase
from dishnames.domain.dish import MYSTERY_DISH, MYSTERY_PASTE, DishInfo
from dishnames.domain.ingredients import Ingredient, IngredientLike, as_ingredients
from dishnames.domain.types import MealQuality, is_nutrient_paste, meal_quality_from_type
from dishnames.rules.selector import GeneratorSelector

logger = logging.getLogger(__name__)

TickSource = Callable[[], int]


def stable_hash(text: str) -> int:
    """Hachage stable d'un processus à l'autre (contrairement à ``hash``).

    >>> stable_hash("RawRice") == stable_hash("RawRice")
    True
    """
    return zlib.crc32(text.encode("utf-8"))


def monotonic_ticks(ticks_per_second: int = 60) -> TickSource:
    """Compteur croissant dérivé de ``time.monotonic``."""

    def ticks() -> int:
        return int(time.monotonic() * ticks_per_second)

    return ticks


class DishResolver:
    def __init__(
        self,
        database: DishNameDatabase,
        selector: GeneratorSelector,
        seed_variation_probability: float = 0.8,
        tick_source: Optional[TickSource] = None,
        variation_rng: Optional[Random] = None,
    ):
        self.database = database
        self.selector = selector
        self.seed_variation_probability = seed_variation_probability
        self.tick_source = tick_source or monotonic_ticks()
        # ne sert qu'à décider d'ajouter ou non les ticks à la graine
        self._variation_rng = variation_rng or Random()

    def seed_for(self, ingredients: Sequence[Ingredient], quality: Optional[MealQuality]) -> int:
        """Graine d'une résolution.

        Paramètres
        ----------
        ingredients : Sequence[Ingredient]
            Ingrédients du repas ; l'ordre n'a pas d'influence (somme).
        quality : MealQuality | None
            Qualité ajoutée à la graine quand elle est connue.

        Retour
        ------
        int
            Somme des hachages stables des identifiants, plus le tick courant
            avec la probabilité ``seed_variation_probability``, plus le
            hachage de la qualité.

        Notes
        -----
        Avec une probabilité de 0, la graine ne dépend que des ingrédients et
        de la qualité : deux appels identiques donnent le même plat.
        """
        seed = sum(stable_hash(i.def_name) for i in ingredients)
        if self._variation_rng.random() < self.seed_variation_probability:
            seed += self.tick_source()
        if quality is not None:
            seed += stable_hash(quality.value)
        return seed

    def resolve(
        self,
        ingredients: Optional[Iterable[Optional[IngredientLike]]],
        quality: Optional[MealQuality] = None,
        meal_type_id: Optional[str] = None,
    ) -> DishInfo:
        """Nom et description d'un repas ; ne lève jamais pour des données absentes.

        ``meal_type_id`` sert à choisir le générateur de repli et, à défaut
        de ``quality``, à en déduire la qualité.
        """
        items = as_ingredients(ingredients)
        if not items:
            return MYSTERY_PASTE if is_nutrient_paste(meal_type_id) else MYSTERY_DISH
        if quality is None and meal_type_id:
            quality = meal_quality_from_type(meal_type_id)

        rng = Random(self.seed_for(items, quality))

        found = self.database.lookup(items, quality, rng)
        if found is not None:
            logger.debug("Database name for %s: %s", [i.def_name for i in items], found.name)
            return found

        generator = self.selector.select(meal_type_id)
        effective_quality = quality or MealQuality.SIMPLE
        info = DishInfo(
            generator.generate_name(items, effective_quality, rng),
            generator.generate_description(items, effective_quality, rng),
        )
        logger.debug(
            "Generated name for %s with %s: %s",
            [i.def_name for i in items],
            type(generator).__name__,
            info.name,
        )
        return info

    def resolve_for_meal(
        self, ingredients: Optional[Iterable[Optional[IngredientLike]]], meal_type_id: str
    ) -> DishInfo:
        return self.resolve(ingredients, meal_quality_from_type(meal_type_id), meal_type_id)
