"""Génération procédurale de noms et descriptions de plats.

Ce module fournit des utilitaires pour:
- choisir un ou deux ingrédients « dominants » (spéciaux et viande altérée d'abord),
- choisir un réservoir de gabarits selon la catégorie dominante du repas,
- ajouter une méthode de cuisson ou une sauce aux plats de viande,
- préfixer le nom selon la qualité du repas,
- rédiger une description adaptée à la qualité.

Toutes les fonctions aléatoires reçoivent un ``random.Random`` explicite,
ce qui les rend reproductibles en test.
"""

from random import Random
from typing import Dict, List, Optional, Sequence

from dishnames.data.naming_words import (
    COOKING_METHODS,
    DEFAULT_FILLER_WORDS,
    FILLER_WORDS,
    FINE_MEAL_PREFIXES,
    GRAIN_DISH_TEMPLATES,
    LAVISH_MEAL_PREFIXES,
    MEAT_DISH_TEMPLATES,
    MIXED_DISH_TEMPLATES,
    SAUCE_TYPES,
    TWISTED_MEAT_TEMPLATES,
    VEGETABLE_DISH_TEMPLATES,
)
from dishnames.domain.dish import MYSTERY_DISH
from dishnames.domain.ingredients import Ingredient, IngredientCategory, has_twisted_meat, is_twisted_meat
from dishnames.domain.types import MealQuality
from dishnames.rules.generator import NameGenerator
from dishnames.rules.labels import capitalized_label, fix_twisted_meat_name, format_ingredients_list

COOKING_METHOD_PROBABILITY = 0.4
SAUCE_PROBABILITY = 0.3
FINE_PREFIX_PROBABILITY = 0.5

_TEMPLATES_BY_CATEGORY = {
    IngredientCategory.MEAT: MEAT_DISH_TEMPLATES,
    IngredientCategory.VEGETABLE: VEGETABLE_DISH_TEMPLATES,
    IngredientCategory.FRUIT: VEGETABLE_DISH_TEMPLATES,
    IngredientCategory.GRAIN: GRAIN_DISH_TEMPLATES,
}

QUALITY_DESCRIPTIONS = {
    MealQuality.LAVISH: (
        "A lavishly prepared dish containing {0}. "
        "It has been expertly crafted to be both nutritious and delicious."
    ),
    MealQuality.FINE: (
        "A well-prepared dish containing {0}. "
        "It has been skillfully made to balance nutrition and taste."
    ),
    MealQuality.SIMPLE: (
        "A basic dish containing {0}. "
        "It offers good nutrition although the taste is simple."
    ),
}

TWISTED_MEAT_NAME = "Twisted Meat"
TWISTED_MEAT_SENTENCE = (
    " The twisted meat gives this dish a strange, otherworldly quality"
    " that's both fascinating and slightly disturbing."
)


def describe_meal(ingredients: Sequence[Ingredient], quality: MealQuality) -> str:
    """Phrase de description selon la qualité, avec la liste des ingrédients."""
    return QUALITY_DESCRIPTIONS[quality].format(format_ingredients_list(ingredients))


def apply_quality_prefix(name: str, quality: MealQuality, rng: Random) -> str:
    """Préfixe qualité : toujours en Lavish, une fois sur deux en Fine, jamais en Simple.

    >>> apply_quality_prefix("Cow Stew", MealQuality.SIMPLE, Random(0))
    'Cow Stew'
    >>> apply_quality_prefix("Cow Stew", MealQuality.LAVISH, Random(0)).endswith(" Cow Stew")
    True
    """
    if quality == MealQuality.LAVISH:
        return f"{rng.choice(LAVISH_MEAL_PREFIXES)} {name}"
    if quality == MealQuality.FINE and rng.random() < FINE_PREFIX_PROBABILITY:
        return f"{rng.choice(FINE_MEAL_PREFIXES)} {name}"
    return name


class ProceduralDishNameGenerator(NameGenerator):
    """Générateur par défaut des repas cuisinés."""

    def dominant_ingredients(
        self, ingredients: Sequence[Ingredient], rng: Random, limit: int = 2
    ) -> List[Ingredient]:
        """Choisit jusqu'à ``limit`` ingrédients distincts pour nommer le plat.

        Paramètres
        ----------
        ingredients : Sequence[Ingredient]
            Ingrédients du repas (doublons comptés).
        rng : Random
            Générateur amorcé par l'appelant.
        limit : int
            Nombre maximal d'ingrédients retenus.

        Retour
        ------
        List[Ingredient]
            Identifiants distincts, par ordre de priorité :
            viande altérée, puis ingrédients spéciaux, puis un représentant
            tiré au sort dans chaque catégorie (la plus fournie d'abord,
            ``OTHER`` exclue), puis le reste dans un ordre aléatoire.
        """
        chosen: Dict[str, Ingredient] = {}

        def take(candidate: Optional[Ingredient]) -> None:
            if candidate is not None and len(chosen) < limit:
                chosen.setdefault(candidate.def_name, candidate)

        for ingredient in ingredients:
            if is_twisted_meat(ingredient):
                take(ingredient)
        for ingredient in ingredients:
            if self.categorizer.is_special(ingredient):
                take(ingredient)

        by_category: Dict[IngredientCategory, List[Ingredient]] = {}
        for ingredient in ingredients:
            category = self.categorizer.categorize(ingredient)
            if category != IngredientCategory.OTHER:
                by_category.setdefault(category, []).append(ingredient)
        order = list(IngredientCategory)
        for category in sorted(by_category, key=lambda c: (-len(by_category[c]), order.index(c))):
            candidates = [i for i in by_category[category] if i.def_name not in chosen]
            if candidates:
                take(rng.choice(candidates))

        remaining = [i for i in ingredients if i.def_name not in chosen]
        rng.shuffle(remaining)
        for ingredient in remaining:
            take(ingredient)
        return list(chosen.values())

    def generate_name(
        self, ingredients: Sequence[Ingredient], quality: MealQuality, rng: Random
    ) -> str:
        if not ingredients:
            return MYSTERY_DISH.name

        dominant = self.dominant_ingredients(ingredients, rng)
        main = capitalized_label(dominant[0].label)
        category = self.categorizer.dominant_category(ingredients)
        twisted = has_twisted_meat(ingredients)

        filler = len(dominant) < 2
        if filler:
            secondary = rng.choice(FILLER_WORDS.get(category, DEFAULT_FILLER_WORDS))
        else:
            secondary = capitalized_label(dominant[1].label)

        if twisted:
            name = rng.choice(TWISTED_MEAT_TEMPLATES).format(TWISTED_MEAT_NAME, secondary)
        elif category == IngredientCategory.MEAT:
            name = self._meat_name(main, secondary, filler, rng)
        else:
            templates = _TEMPLATES_BY_CATEGORY.get(category, MIXED_DISH_TEMPLATES)
            name = rng.choice(templates).format(main, secondary)

        name = apply_quality_prefix(name, quality, rng)
        if twisted:
            name = fix_twisted_meat_name(name)
        return name

    def _meat_name(self, main: str, secondary: str, filler: bool, rng: Random) -> str:
        if filler and rng.random() < SAUCE_PROBABILITY:
            secondary = f"{rng.choice(SAUCE_TYPES)} Sauce"
        name = rng.choice(MEAT_DISH_TEMPLATES).format(main, secondary)
        # une méthode de cuisson seulement devant un gabarit qui commence par l'ingrédient
        if name.startswith(main) and rng.random() < COOKING_METHOD_PROBABILITY:
            name = f"{rng.choice(COOKING_METHODS)} {name}"
        return name

    def generate_description(
        self, ingredients: Sequence[Ingredient], quality: MealQuality, rng: Random
    ) -> str:
        if not ingredients:
            return MYSTERY_DISH.description
        description = describe_meal(ingredients, quality)
        if has_twisted_meat(ingredients):
            description += TWISTED_MEAT_SENTENCE
        return description
