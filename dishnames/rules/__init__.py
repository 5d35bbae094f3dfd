"""
Règles de nommage pures : classement des ingrédients, nettoyage des
libellés, générateurs de repli (procédural, par gabarits, pâte nutritive)
et choix du générateur selon le type de repas.
"""

from .categorizer import IngredientCategorizer
from .generator import NameGenerator
from .labels import fix_twisted_meat_name, format_ingredients_list
from .nutrient_paste import NutrientPasteNameGenerator
from .procedural import ProceduralDishNameGenerator
from .selector import GeneratorSelector, select_generator
from .templates import TemplateDishGenerator, TemplateSet

__all__ = [
    "IngredientCategorizer",
    "NameGenerator",
    "fix_twisted_meat_name",
    "format_ingredients_list",
    "NutrientPasteNameGenerator",
    "ProceduralDishNameGenerator",
    "GeneratorSelector",
    "select_generator",
    "TemplateDishGenerator",
    "TemplateSet",
]
