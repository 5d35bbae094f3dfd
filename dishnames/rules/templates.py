"""Générateur par gabarits à jetons (``[meat] stew``, ``[grain] with [vegetable]``).

Les gabarits intégrés peuvent être remplacés groupe par groupe par un document
JSON optionnel ; tout groupe absent ou invalide garde sa version intégrée.
"""

import logging
import re
from pathlib import Path
from random import Random
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from pydantic import RootModel, TypeAdapter, ValidationError

from dishnames.data import get_DEFAULT_TEMPLATES
from dishnames.data.default_templates import CATEGORY_ADJECTIVES, GENERIC_CATEGORY_NAMES
from dishnames.domain.dish import MYSTERY_DISH
from dishnames.domain.ingredients import Ingredient, IngredientCategory
from dishnames.domain.types import MealQuality, TemplateType
from dishnames.rules.categorizer import IngredientCategorizer
from dishnames.rules.generator import NameGenerator
from dishnames.rules.labels import capitalize_first, capitalized_label
from dishnames.rules.procedural import describe_meal
from dishnames.utils import DocumentError, load_and_validate

logger = logging.getLogger(__name__)

FALLBACK_TEMPLATE = "Meal"
ADJECTIVE_PROBABILITY = 0.5

TemplateGroups = Dict[MealQuality, Dict[TemplateType, Tuple[str, ...]]]

_PROTEIN_ALIAS = re.compile(re.escape("[protein]"), re.IGNORECASE)
_TEMPLATE_LIST = TypeAdapter(List[str])


class TemplateDocument(RootModel[Dict[str, Any]]):
    """``{"Simple": {"SingleCategory": ["[meat] stew", ...]}, ...}``

    Seule la racine est validée ici ; chaque groupe l'est dans
    :func:`parse_template_groups`.
    """


class TemplateSet:
    """Gabarits par qualité puis par groupe, immuables après construction."""

    def __init__(self, groups: Optional[TemplateGroups] = None, warnings: Optional[List[str]] = None):
        defaults = get_DEFAULT_TEMPLATES()
        self.groups: TemplateGroups = {
            quality: dict(by_type) for quality, by_type in defaults.items()
        }
        for quality, by_type in (groups or {}).items():
            self.groups.setdefault(quality, {}).update(by_type)
        self.warnings = list(warnings or [])

    @classmethod
    def load(cls, path: Path) -> "TemplateSet":
        """Charge le document de surcharge ; les gabarits intégrés restent la base.

        Un fichier absent n'est pas une erreur. Un document illisible est
        journalisé et ignoré en entier.
        """
        if not path.exists():
            logger.info("No template override at %s, using built-in templates", path)
            return cls()
        try:
            document = load_and_validate(path, TemplateDocument)
        except DocumentError:
            logger.exception("Could not read template document %s", path)
            return cls(warnings=[f"{path}: unreadable template document"])
        groups, warnings = parse_template_groups(document.root)
        for warning in warnings:
            logger.warning("%s: %s", path, warning)
        logger.info(
            "Loaded %d template group override(s) from %s",
            sum(len(by_type) for by_type in groups.values()),
            path,
        )
        return cls(groups, warnings)

    def templates(self, quality: MealQuality, template_type: TemplateType) -> Tuple[str, ...]:
        return self.groups.get(quality, {}).get(template_type, ())

    def select(self, quality: MealQuality, template_type: TemplateType, rng: Random) -> str:
        """Tire un gabarit ; groupe vide -> ``Generic`` -> ``"Meal"``."""
        candidates = self.templates(quality, template_type)
        if not candidates:
            candidates = self.templates(quality, TemplateType.GENERIC)
        if not candidates:
            return FALLBACK_TEMPLATE
        return rng.choice(candidates)


def parse_template_groups(raw: Mapping[str, Any]) -> Tuple[TemplateGroups, List[str]]:
    """Convertit le document brut en groupes typés et liste d'avertissements.

    >>> groups, warnings = parse_template_groups({"fine": {"generic": [" fine meal ", ""]}, "Epic": {}})
    >>> groups[MealQuality.FINE][TemplateType.GENERIC]
    ('fine meal',)
    >>> warnings
    ["unknown meal quality 'Epic'"]
    >>> parse_template_groups({"Simple": {"Generic": "[meat] pie"}})[1]
    ['invalid template group Generic for Simple: expected a list of strings']
    """
    groups: TemplateGroups = {}
    warnings: List[str] = []
    for quality_name, by_type in raw.items():
        quality = MealQuality.parse(quality_name)
        if quality is None:
            warnings.append(f"unknown meal quality {quality_name!r}")
            continue
        if not isinstance(by_type, Mapping):
            warnings.append(f"invalid template groups for {quality.value}: expected an object")
            continue
        for type_name, templates in by_type.items():
            template_type = TemplateType.parse(type_name)
            if template_type is None:
                warnings.append(f"unknown template group {type_name!r} for {quality.value}")
                continue
            try:
                templates = _TEMPLATE_LIST.validate_python(templates)
            except ValidationError:
                warnings.append(
                    f"invalid template group {template_type.value} for {quality.value}: expected a list of strings"
                )
                continue
            cleaned = tuple(t.strip() for t in templates if t.strip())
            if not cleaned:
                warnings.append(f"empty template group {template_type.value} for {quality.value}")
                continue
            groups.setdefault(quality, {})[template_type] = cleaned
    return groups, warnings


def template_type_for(categories: Sequence[IngredientCategory]) -> TemplateType:
    """
    >>> template_type_for([IngredientCategory.MEAT, IngredientCategory.GRAIN])
    <TemplateType.DUAL_CATEGORY: 'DualCategory'>
    >>> template_type_for([])
    <TemplateType.GENERIC: 'Generic'>
    """
    if not categories:
        return TemplateType.GENERIC
    if len(categories) == 1:
        return TemplateType.SINGLE_CATEGORY
    if len(categories) == 2:
        return TemplateType.DUAL_CATEGORY
    return TemplateType.MULTI_CATEGORY


class TemplateDishGenerator(NameGenerator):
    def __init__(self, categorizer: IngredientCategorizer, template_set: Optional[TemplateSet] = None):
        super().__init__(categorizer)
        self.template_set = template_set or TemplateSet()

    def generate_name(
        self, ingredients: Sequence[Ingredient], quality: MealQuality, rng: Random
    ) -> str:
        if not ingredients:
            return MYSTERY_DISH.name
        categories = self.categorizer.categories(ingredients)
        template = self.template_set.select(quality, template_type_for(categories), rng)
        return capitalize_first(self.fill_template(template, ingredients, rng))

    def fill_template(self, template: str, ingredients: Sequence[Ingredient], rng: Random) -> str:
        """Remplace chaque jeton ``[categorie]`` par un ingrédient de cette catégorie.

        Sans ingrédient de la catégorie, un mot générique (« Protein », « Grains »...)
        prend sa place.
        """
        result = _PROTEIN_ALIAS.sub("[meat]", template)
        for category in IngredientCategory:
            placeholder = f"[{category.value.lower()}]"
            if placeholder not in result:
                continue
            members = self.categorizer.of_category(ingredients, category)
            if members:
                word = capitalized_label(rng.choice(members).label)
                if rng.random() < ADJECTIVE_PROBABILITY:
                    word = f"{rng.choice(CATEGORY_ADJECTIVES[category])} {word}"
            else:
                word = GENERIC_CATEGORY_NAMES[category]
            result = result.replace(placeholder, word)
        return result

    def generate_description(
        self, ingredients: Sequence[Ingredient], quality: MealQuality, rng: Random
    ) -> str:
        if not ingredients:
            return MYSTERY_DISH.description
        return describe_meal(ingredients, quality)
