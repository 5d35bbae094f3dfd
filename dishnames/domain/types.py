# dishnames/domain/types.py
from enum import Enum
from typing import Optional, Tuple


class MealQuality(str, Enum):
    # Values aligned with the JSON documents and the meal type identifiers
    SIMPLE = "Simple"
    FINE = "Fine"
    LAVISH = "Lavish"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["MealQuality"]:
        """Convertit une chaîne (casse indifférente) en qualité, ``None`` sinon.

        >>> MealQuality.parse("lavish")
        <MealQuality.LAVISH: 'Lavish'>
        >>> MealQuality.parse("Gourmet") is None
        True
        """
        if not value:
            return None
        for quality in cls:
            if quality.value.lower() == value.strip().lower():
                return quality
        return None


# Règles ordonnées (sous-chaîne -> qualité). La première qui correspond gagne.
MEAL_QUALITY_RULES: Tuple[Tuple[str, MealQuality], ...] = (
    ("Lavish", MealQuality.LAVISH),
    ("Fine", MealQuality.FINE),
)


def meal_quality_from_type(meal_type_id: Optional[str]) -> MealQuality:
    """Déduit la qualité d'un repas à partir de son identifiant de type.

    Paramètres
    ----------
    meal_type_id : str | None
        Identifiant du type de repas produit (ex. ``"MealFine"``).

    Retour
    ------
    MealQuality
        ``LAVISH`` si l'identifiant contient « Lavish », sinon ``FINE`` s'il
        contient « Fine », sinon ``SIMPLE``.

    Exemple
    -------
    >>> meal_quality_from_type("MealLavish_Veg")
    <MealQuality.LAVISH: 'Lavish'>
    >>> meal_quality_from_type("MealFine")
    <MealQuality.FINE: 'Fine'>
    >>> meal_quality_from_type(None)
    <MealQuality.SIMPLE: 'Simple'>
    """
    if not meal_type_id:
        return MealQuality.SIMPLE
    for marker, quality in MEAL_QUALITY_RULES:
        if marker in meal_type_id:
            return quality
    return MealQuality.SIMPLE


def is_nutrient_paste(meal_type_id: Optional[str]) -> bool:
    return bool(meal_type_id) and "NutrientPaste" in meal_type_id


class TemplateType(str, Enum):
    """Groupes de gabarits selon la diversité des catégories d'un repas."""

    SINGLE_CATEGORY = "SingleCategory"
    DUAL_CATEGORY = "DualCategory"
    MULTI_CATEGORY = "MultiCategory"
    GENERIC = "Generic"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["TemplateType"]:
        if not value:
            return None
        for template_type in cls:
            if template_type.value.lower() == value.strip().lower():
                return template_type
        return None
