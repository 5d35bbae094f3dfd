# dishnames/data/naming_words.py
"""Réservoirs de gabarits et de mots pour la génération procédurale."""

from typing import Dict, Tuple

from dishnames.domain.ingredients import IngredientCategory

# {0} = ingrédient principal, {1} = ingrédient secondaire (ou mot de remplissage)
MEAT_DISH_TEMPLATES = (
    "{0} Stew",
    "Braised {0}",
    "{0} Roast",
    "{0} with {1}",
    "Seared {0}",
    "{0} {1} Pot",
    "{0} in {1} Sauce",
    "Slow-cooked {0}",
    "{0} Stir-fry",
    "Spiced {0}",
    "{0} Casserole",
)

TWISTED_MEAT_TEMPLATES = (
    "Eldritch {0} Stew",
    "Anomalous {0} Dish",
    "Warped {0} Roast",
    "Strange {0} Medley",
    "Unsettling {0} Delicacy",
    "Peculiar {0} Creation",
    "Distorted {0} Recipe",
    "Uncanny {0} Platter",
)

VEGETABLE_DISH_TEMPLATES = (
    "{0} Medley",
    "Seasoned {0}",
    "{0} and {1} Mix",
    "{0} Stir-fry",
    "Roasted {0}",
    "{0} Soup",
    "Steamed {0}",
    "{0} with {1} Garnish",
    "Garden {0} Plate",
    "{0} Salad",
)

GRAIN_DISH_TEMPLATES = (
    "{0} Pilaf",
    "{0} with {1}",
    "{0} Porridge",
    "Seasoned {0}",
    "{0} Bowl",
    "{0} and {1} Mix",
    "{0} Risotto",
)

MIXED_DISH_TEMPLATES = (
    "{0} and {1} Plate",
    "{0} with {1} Side",
    "Colony {0} Special",
    "{0} {1} Medley",
    "Frontier {0} with {1}",
    "Settler's {0} and {1}",
    "Homestead {0} Dish",
    "Rimworld {0} Platter",
)

FINE_MEAL_PREFIXES = (
    "Delicious",
    "Fine",
    "Quality",
    "Refined",
    "Fancy",
    "Gourmet",
    "Artisanal",
    "Select",
)

LAVISH_MEAL_PREFIXES = (
    "Exquisite",
    "Lavish",
    "Luxurious",
    "Gourmet",
    "Sumptuous",
    "Decadent",
    "Opulent",
    "Extravagant",
    "Magnificent",
)

COOKING_METHODS = (
    "Roasted",
    "Seared",
    "Grilled",
    "Sautéed",
    "Braised",
    "Pan-fried",
    "Steamed",
    "Stewed",
    "Baked",
    "Fire-roasted",
)

SAUCE_TYPES = (
    "Rich",
    "Herb",
    "Savory",
    "Spiced",
    "Creamy",
    "Tangy",
    "Sweet",
    "Peppery",
    "Red Wine",
    "Umami",
)

# Mots de remplissage pour l'emplacement secondaire
FILLER_WORDS: Dict[IngredientCategory, Tuple[str, ...]] = {
    IngredientCategory.MEAT: ("Herbs", "Spices", "Sauce", "Vegetables"),
    IngredientCategory.VEGETABLE: ("Herbs", "Spices", "Garnish", "Seasoning"),
    IngredientCategory.GRAIN: ("Vegetables", "Herbs", "Broth"),
    IngredientCategory.FRUIT: ("Cream", "Honey", "Syrup"),
}
DEFAULT_FILLER_WORDS = ("Seasoning", "Sides", "Garnish", "Spices")

# Pâte nutritive
PASTE_TERMS = (
    "Paste",
    "Sludge",
    "Slop",
    "Goo",
    "Muck",
    "Glop",
    "Mash",
    "Pulp",
    "Muckpile",
    "Gruel",
    "Slurry",
    "Mush",
    "Ooze",
    "Glue",
    "Slog",
    "Mulch",
)

PASTE_DESCRIPTORS: Dict[IngredientCategory, Tuple[str, ...]] = {
    IngredientCategory.MEAT: ("Protein", "Meat", "Flesh"),
    IngredientCategory.VEGETABLE: ("Vegetable", "Plant", "Greens"),
    IngredientCategory.GRAIN: ("Starch", "Carb", "Grain"),
    IngredientCategory.DAIRY: ("Dairy", "Milk", "Cream"),
    IngredientCategory.EGG: ("Egg", "Yolk", "Albumin"),
    IngredientCategory.FRUIT: ("Fruit", "Berry", "Sweet"),
    IngredientCategory.FUNGUS: ("Fungal", "Mushroom", "Spore"),
    IngredientCategory.SPECIAL: ("Mystery", "Exotic", "Strange"),
    IngredientCategory.OTHER: ("Unidentified", "Unknown", "Mysterious"),
}
