# dishnames/data/default_templates.py
"""
Gabarits intégrés du générateur par gabarits, par qualité puis par groupe.

Jetons : ``[meat]`` (alias ``[protein]``), ``[grain]``, ``[vegetable]``,
``[dairy]``, ``[egg]``, ``[fruit]``, ``[fungus]``, ``[special]``, ``[other]``.
Un document ``DishTemplates.json`` peut remplacer n'importe quel groupe.
"""

from typing import Dict, Tuple

from dishnames.domain.ingredients import IngredientCategory
from dishnames.domain.types import MealQuality, TemplateType

DEFAULT_TEMPLATES: Dict[MealQuality, Dict[TemplateType, Tuple[str, ...]]] = {
    MealQuality.SIMPLE: {
        TemplateType.SINGLE_CATEGORY: (
            "[protein] stew",
            "basic [protein] dish",
            "simple [protein] meal",
            "[grain] bowl",
            "plain [grain] dish",
            "simple [grain] meal",
            "[vegetable] medley",
            "simple [vegetable] plate",
            "mixed [vegetable] dish",
        ),
        TemplateType.DUAL_CATEGORY: (
            "[protein] with [grain]",
            "[protein] and [vegetable] plate",
            "[grain] with [vegetable]",
            "[vegetable] and [protein] dish",
            "simple [protein] [grain] meal",
            "basic [grain] and [vegetable] dish",
        ),
        TemplateType.MULTI_CATEGORY: (
            "mixed meal with [protein]",
            "simple stew with [vegetable]",
            "basic [protein] dish with sides",
            "plain meal with [grain]",
            "hodgepodge with [protein]",
        ),
        TemplateType.GENERIC: (
            "simple meal",
            "basic dish",
            "plain food",
            "rustic platter",
            "settler's ration",
            "field meal",
            "modest serving",
        ),
    },
    MealQuality.FINE: {
        TemplateType.SINGLE_CATEGORY: (
            "sautéed [protein]",
            "seasoned [protein] plate",
            "[grain] pilaf",
            "aromatic [grain] dish",
            "garden [vegetable] medley",
            "herbed [vegetable] plate",
        ),
        TemplateType.DUAL_CATEGORY: (
            "[protein] with [grain] side",
            "seared [protein] with [vegetable]",
            "[grain] pilaf with [protein]",
            "[vegetable] medley with [protein]",
            "[grain] and [vegetable] plate",
        ),
        TemplateType.MULTI_CATEGORY: (
            "[protein] dinner with accompaniments",
            "chef's [grain] with mixed sides",
            "savory [protein] plate with variety",
            "colonial [protein] feast",
            "[grain] mixed plate",
        ),
        TemplateType.GENERIC: (
            "fine meal",
            "quality platter",
            "chef's selection",
            "diner's choice",
            "table special",
            "homestead favorite",
        ),
    },
    MealQuality.LAVISH: {
        TemplateType.SINGLE_CATEGORY: (
            "gourmet [protein] entrée",
            "chef's [protein] special",
            "luxury [grain] feast",
            "deluxe [grain] creation",
            "premium [vegetable] platter",
            "gourmet [vegetable] arrangement",
        ),
        TemplateType.DUAL_CATEGORY: (
            "prime [protein] with [grain] accompaniment",
            "gourmet [protein] atop [vegetable] medley",
            "luxury [grain] garnished with [protein]",
            "chef's [vegetable] with [protein] crown",
            "exquisite [protein] and [grain] dish",
        ),
        TemplateType.MULTI_CATEGORY: (
            "[protein] feast with all the trimmings",
            "gourmet [protein] dinner with sides",
            "deluxe [grain] platter with assortments",
            "luxury sampler featuring [protein]",
            "chef's masterpiece with [protein]",
        ),
        TemplateType.GENERIC: (
            "lavish feast",
            "gourmet meal",
            "luxury platter",
            "exquisite dining experience",
            "chef's masterpiece",
            "rimworld delicacy",
            "premium selection",
        ),
    },
}

CATEGORY_ADJECTIVES: Dict[IngredientCategory, Tuple[str, ...]] = {
    IngredientCategory.MEAT: ("tender", "juicy", "roasted", "grilled", "seared", "braised", "slow-cooked", "smoked"),
    IngredientCategory.GRAIN: ("fluffy", "hearty", "steamed", "seasoned", "toasted", "filling", "starchy"),
    IngredientCategory.VEGETABLE: ("fresh", "crisp", "garden", "sautéed", "roasted", "steamed", "grilled", "seasonal"),
    IngredientCategory.DAIRY: ("creamy", "rich", "buttery", "whipped", "smooth", "velvety", "milky"),
    IngredientCategory.EGG: ("fluffy", "light", "airy", "golden", "delicate", "rich", "savory"),
    IngredientCategory.FRUIT: ("sweet", "tangy", "ripe", "juicy", "fresh", "zesty", "vibrant"),
    IngredientCategory.FUNGUS: ("earthy", "aromatic", "hearty", "wild", "rustic", "umami", "rich"),
    IngredientCategory.SPECIAL: ("special", "exotic", "unique", "choice", "premium", "rare", "selected"),
    IngredientCategory.OTHER: ("mixed", "assorted", "varied", "miscellaneous", "diverse"),
}

# Mot générique quand le repas n'a aucun ingrédient de la catégorie demandée
GENERIC_CATEGORY_NAMES: Dict[IngredientCategory, str] = {
    IngredientCategory.MEAT: "Protein",
    IngredientCategory.GRAIN: "Grains",
    IngredientCategory.VEGETABLE: "Vegetables",
    IngredientCategory.DAIRY: "Dairy",
    IngredientCategory.EGG: "Eggs",
    IngredientCategory.FRUIT: "Fruits",
    IngredientCategory.FUNGUS: "Fungi",
    IngredientCategory.SPECIAL: "Special",
    IngredientCategory.OTHER: "Ingredients",
}
