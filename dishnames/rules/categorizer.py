"""Classement des ingrédients par catégorie culinaire.

Ce module fournit :
- une table de règles ordonnée (motif -> catégorie), la première qui
  correspond l'emporte, l'ordre est donc visible et testable,
- un ``IngredientCategorizer`` qui mémorise les résultats par identifiant,
- les votes « catégorie dominante » et « ingrédient représentatif ».

Le cache n'est jamais invalidé : les définitions d'ingrédients sont
statiques pour la durée du processus.
"""

from collections import Counter
from typing import Callable, Dict, Iterable, List, NamedTuple, Optional, Sequence

from dishnames.domain.ingredients import Ingredient, IngredientCategory, is_twisted_meat


DEFAULT_SPECIAL_INGREDIENTS = frozenset({"RawRice", "Milk", "InsectJelly", "Chocolate"})

_FRUIT_NAMES = frozenset({"RawBerries", "RawAgave"})
_FUNGUS_NAMES = frozenset({"RawFungus", "Glowstool"})
_GRAIN_NAMES = frozenset({"RawRice", "RawCorn"})


class CategoryRule(NamedTuple):
    name: str
    matches: Callable[[Ingredient], bool]
    category: IngredientCategory


def build_category_rules(special_ingredients: Iterable[str]) -> List[CategoryRule]:
    """Construit la table de règles, dans l'ordre de priorité.

    Paramètres
    ----------
    special_ingredients : Iterable[str]
        Identifiants forcés en ``SPECIAL`` (prioritaires sur tout le reste).

    Retour
    ------
    List[CategoryRule]
        Règles à évaluer dans l'ordre ; la dernière attrape tout (``OTHER``).
    """
    special = frozenset(special_ingredients)
    return [
        CategoryRule("special", lambda i: i.def_name in special, IngredientCategory.SPECIAL),
        CategoryRule("meat", lambda i: i.def_name.startswith("Meat_"), IngredientCategory.MEAT),
        CategoryRule("twisted_meat", is_twisted_meat, IngredientCategory.MEAT),
        CategoryRule("egg", lambda i: i.def_name.startswith("Egg"), IngredientCategory.EGG),
        CategoryRule("dairy", lambda i: i.def_name == "Milk", IngredientCategory.DAIRY),
        CategoryRule("grain", lambda i: i.def_name in _GRAIN_NAMES, IngredientCategory.GRAIN),
        CategoryRule(
            "fruit",
            lambda i: i.def_name in _FRUIT_NAMES or "Fruit" in i.def_name or "Berry" in i.def_name,
            IngredientCategory.FRUIT,
        ),
        CategoryRule(
            "fungus",
            lambda i: i.def_name in _FUNGUS_NAMES
            or "Mushroom" in i.def_name
            or "Fungus" in i.def_name,
            IngredientCategory.FUNGUS,
        ),
        CategoryRule("raw_vegetable", lambda i: i.def_name.startswith("Raw"), IngredientCategory.VEGETABLE),
        CategoryRule("other", lambda i: True, IngredientCategory.OTHER),
    ]


class IngredientCategorizer:
    """Catégorise les ingrédients et mémorise le résultat par identifiant.

    Exemple
    -------
    >>> categorizer = IngredientCategorizer()
    >>> categorizer.categorize(Ingredient.of("Meat_Cow"))
    <IngredientCategory.MEAT: 'Meat'>
    >>> categorizer.categorize(Ingredient.of("RawBerries"))
    <IngredientCategory.FRUIT: 'Fruit'>
    >>> categorizer.categorize(Ingredient.of("Steel"))
    <IngredientCategory.OTHER: 'Other'>
    """

    def __init__(self, special_ingredients: Optional[Iterable[str]] = None):
        if special_ingredients is None:
            special_ingredients = DEFAULT_SPECIAL_INGREDIENTS
        self.special_ingredients = frozenset(special_ingredients)
        self.rules = build_category_rules(self.special_ingredients)
        self._cache: Dict[str, IngredientCategory] = {}

    def categorize(self, ingredient: Optional[Ingredient]) -> IngredientCategory:
        if ingredient is None:
            return IngredientCategory.OTHER
        cached = self._cache.get(ingredient.def_name)
        if cached is not None:
            return cached
        category = self._apply_rules(ingredient)
        # ajout seulement : deux threads calculent au pire la même valeur
        self._cache[ingredient.def_name] = category
        return category

    def _apply_rules(self, ingredient: Ingredient) -> IngredientCategory:
        for rule in self.rules:
            if rule.matches(ingredient):
                return rule.category
        return IngredientCategory.OTHER

    def is_special(self, ingredient: Ingredient) -> bool:
        return ingredient.def_name in self.special_ingredients

    def of_category(
        self, ingredients: Iterable[Ingredient], category: IngredientCategory
    ) -> List[Ingredient]:
        return [i for i in ingredients if self.categorize(i) == category]

    def categories(self, ingredients: Optional[Iterable[Ingredient]]) -> List[IngredientCategory]:
        """Catégories distinctes présentes, dans l'ordre de première apparition."""
        seen: List[IngredientCategory] = []
        for ingredient in ingredients or ():
            category = self.categorize(ingredient)
            if category not in seen:
                seen.append(category)
        return seen

    def dominant_category(self, ingredients: Optional[Sequence[Ingredient]]) -> IngredientCategory:
        """Vote majoritaire sur les catégories des ingrédients.

        Paramètres
        ----------
        ingredients : Sequence[Ingredient] | None
            Ingrédients du repas (doublons comptés).

        Retour
        ------
        IngredientCategory
            Catégorie la plus fréquente. Les égalités sont départagées par
            l'ordre de déclaration de l'Enum. ``OTHER`` ne vote que si aucun
            ingrédient n'a d'autre catégorie (ou si la liste est vide).

        Exemple
        -------
        >>> c = IngredientCategorizer()
        >>> c.dominant_category([Ingredient.of("RawCorn"), Ingredient.of("Meat_Cow")])
        <IngredientCategory.MEAT: 'Meat'>
        >>> c.dominant_category([])
        <IngredientCategory.OTHER: 'Other'>
        """
        if not ingredients:
            return IngredientCategory.OTHER
        votes = Counter(self.categorize(i) for i in ingredients)
        if any(category != IngredientCategory.OTHER for category in votes):
            votes.pop(IngredientCategory.OTHER, None)
        order = list(IngredientCategory)
        return max(votes, key=lambda category: (votes[category], -order.index(category)))

    def representative_ingredient(
        self, ingredients: Optional[Sequence[Ingredient]], category: IngredientCategory
    ) -> Optional[Ingredient]:
        """Ingrédient le plus fréquent de la catégorie (égalité : ordre d'entrée)."""
        members = self.of_category(ingredients or (), category)
        if not members:
            return None
        counts = Counter(i.def_name for i in members)
        best = max(counts.values())
        return next(i for i in members if counts[i.def_name] == best)
