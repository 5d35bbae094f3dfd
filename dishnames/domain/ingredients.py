# dishnames/domain/ingredients.py
"""
Définitions de base (Enum de catégories + modèle Ingredient).

Un ingrédient est un identifiant opaque (``def_name``) accompagné d'un libellé
lisible. Ils appartiennent au système hôte : le moteur ne fait que les lire.
"""

import re
from enum import Enum
from typing import Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class IngredientCategory(Enum):
    # L'ordre de déclaration sert à départager les égalités de vote
    MEAT = "Meat"
    VEGETABLE = "Vegetable"
    GRAIN = "Grain"
    EGG = "Egg"
    DAIRY = "Dairy"
    FRUIT = "Fruit"
    FUNGUS = "Fungus"
    SPECIAL = "Special"
    OTHER = "Other"


_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])")


def humanize_def_name(def_name: str) -> str:
    """Construit un libellé lisible à partir d'un identifiant d'ingrédient.

    Exemple
    -------
    >>> humanize_def_name("RawFungus")
    'raw fungus'
    >>> humanize_def_name("Meat_Cow")
    'cow meat'
    >>> humanize_def_name("TwistedMeat")
    'twisted meat'
    """
    name = def_name.strip()
    suffix = ""
    if name.startswith("Meat_"):
        name = name[len("Meat_"):]
        suffix = " meat"
    words = _CAMEL_BOUNDARY.sub(" ", name).replace("_", " ")
    return (" ".join(words.split()) + suffix).lower()


class Ingredient(BaseModel):
    model_config = ConfigDict(frozen=True)

    def_name: str = Field(min_length=1)
    label: str = ""

    @model_validator(mode="before")
    @classmethod
    def _derive_label(cls, data):
        if isinstance(data, dict) and data.get("def_name") and not data.get("label"):
            data = {**data, "label": humanize_def_name(data["def_name"])}
        return data

    @classmethod
    def of(cls, def_name: str, label: Optional[str] = None) -> "Ingredient":
        """Raccourci : ``Ingredient.of("RawRice")``.

        >>> Ingredient.of("RawFungus").label
        'raw fungus'
        """
        return cls(def_name=def_name, label=label or "")


IngredientLike = Union[Ingredient, str]


def as_ingredient(value: IngredientLike) -> Ingredient:
    if isinstance(value, Ingredient):
        return value
    return Ingredient.of(str(value))


def as_ingredients(values: Optional[Iterable[Optional[IngredientLike]]]) -> List[Ingredient]:
    """Normalise une liste hôte (objets, chaînes, ``None``) en liste d'``Ingredient``.

    Les entrées ``None`` ou vides sont ignorées ; une liste ``None`` donne ``[]``.
    """
    if not values:
        return []
    return [as_ingredient(v) for v in values if v is not None and v != ""]


def is_twisted_meat(ingredient: Ingredient) -> bool:
    """Variante « viande altérée » : reste de la viande mais garde un nommage dédié.

    >>> is_twisted_meat(Ingredient.of("Meat_Twisted"))
    True
    >>> is_twisted_meat(Ingredient.of("Meat_Cow"))
    False
    """
    return (
        "TwistedMeat" in ingredient.def_name
        or "Meat_Twisted" in ingredient.def_name
        or "twisted meat" in ingredient.label.lower()
    )


def has_twisted_meat(ingredients: Iterable[Ingredient]) -> bool:
    return any(is_twisted_meat(i) for i in ingredients)
