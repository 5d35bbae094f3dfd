"""Nettoyage des libellés d'ingrédients et mise en forme des listes.

Utilitaires partagés par les générateurs et les descriptions de lots.
"""

import re
from collections import Counter
from typing import Dict, List, Optional, Sequence

from dishnames.domain.ingredients import Ingredient

_RAW_PREFIX = re.compile(r"^raw\s+", re.IGNORECASE)
_TWISTED_MARKERS = ("twisted meat", "Twisted meat", "twisted flesh", "TwistedMeat")


def _is_twisted_label(label: str) -> bool:
    return any(marker in label for marker in _TWISTED_MARKERS)


def clean_label(label: Optional[str]) -> str:
    """Libellé prêt à être inséré dans une phrase (minuscule initiale).

    Exemple
    -------
    >>> clean_label("Raw potatoes")
    'potatoes'
    >>> clean_label("Chicken egg (unfert.)")
    'chicken egg'
    >>> clean_label("cow meat")
    'cow'
    >>> clean_label("Twisted meat")
    'twisted meat'
    >>> clean_label(None)
    'unknown ingredient'
    """
    if not label:
        return "unknown ingredient"
    if _is_twisted_label(label):
        return "twisted meat"
    cleaned = _RAW_PREFIX.sub("", label)
    cleaned = cleaned.replace(" (unfert.)", "").replace(" (fert.)", "").replace(" meat", "")
    cleaned = cleaned.strip()
    if cleaned:
        cleaned = cleaned[0].lower() + cleaned[1:]
    return cleaned


def capitalized_label(label: Optional[str]) -> str:
    """Libellé pour un nom de plat (majuscule initiale).

    >>> capitalized_label("raw fungus")
    'Fungus'
    >>> capitalized_label("twisted meat")
    'Twisted Meat'
    """
    if label and _is_twisted_label(label):
        return "Twisted Meat"
    return capitalize_first(clean_label(label))


def display_label(label: Optional[str]) -> str:
    """Libellé ajouté à un nom rédigé (« X with Y ») : seul le préfixe « raw » saute.

    >>> display_label("raw fungus")
    'Fungus'
    >>> display_label("human meat")
    'Human meat'
    """
    return capitalize_first(_RAW_PREFIX.sub("", label or "").strip())


def capitalize_first(text: str) -> str:
    if not text:
        return text
    return text[0].upper() + text[1:]


def format_ingredients_list(ingredients: Optional[Sequence[Ingredient]]) -> str:
    """Liste lisible des ingrédients, regroupés par identifiant.

    Paramètres
    ----------
    ingredients : Sequence[Ingredient] | None
        Ingrédients consommés, doublons compris.

    Retour
    ------
    str
        ``"a"``, ``"a and b"`` ou ``"a, b, and c"`` (virgule d'Oxford), chaque
        groupe étant suffixé par ``" (xN)"`` quand N > 1. Les groupes les plus
        nombreux viennent en premier, à égalité dans l'ordre d'apparition.

    Exemple
    -------
    >>> rice, corn = Ingredient.of("RawRice"), Ingredient.of("RawCorn")
    >>> format_ingredients_list([rice, corn, rice])
    'rice (x2) and corn'
    >>> format_ingredients_list([rice, corn, Ingredient.of("Milk")])
    'rice, corn, and milk'
    >>> format_ingredients_list([])
    'unknown ingredients'
    """
    if not ingredients:
        return "unknown ingredients"

    counts = Counter(i.def_name for i in ingredients)
    first_seen: Dict[str, Ingredient] = {}
    for ingredient in ingredients:
        first_seen.setdefault(ingredient.def_name, ingredient)
    # sorted() est stable : l'ordre d'apparition départage les égalités
    groups = sorted(first_seen.values(), key=lambda i: -counts[i.def_name])

    parts: List[str] = []
    for ingredient in groups:
        label = clean_label(ingredient.label)
        count = counts[ingredient.def_name]
        parts.append(f"{label} (x{count})" if count > 1 else label)

    if len(parts) == 1:
        return parts[0]
    if len(parts) == 2:
        return f"{parts[0]} and {parts[1]}"
    return ", ".join(parts[:-1]) + ", and " + parts[-1]


_BARE_TWISTED = re.compile(r"\bTwisted\b(?! Meat)")


def fix_twisted_meat_name(name: str) -> str:
    """Rétablit « Twisted Meat » quand un gabarit n'a gardé que « Twisted ».

    >>> fix_twisted_meat_name("Seared Twisted Stew")
    'Seared Twisted Meat Stew'
    >>> fix_twisted_meat_name("Eldritch Twisted Meat Stew")
    'Eldritch Twisted Meat Stew'
    >>> fix_twisted_meat_name("Twisted")
    'Twisted Meat'
    >>> fix_twisted_meat_name("Twisted Meaty Roast")
    'Twisted Meaty Roast'
    """
    return _BARE_TWISTED.sub("Twisted Meat", name)
