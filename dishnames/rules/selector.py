from typing import Optional

from dishnames.domain.types import is_nutrient_paste
from dishnames.rules.categorizer import IngredientCategorizer
from dishnames.rules.generator import NameGenerator
from dishnames.rules.nutrient_paste import NutrientPasteNameGenerator
from dishnames.rules.procedural import ProceduralDishNameGenerator
from dishnames.rules.templates import TemplateDishGenerator, TemplateSet

NAME_STYLES = ("procedural", "template")


class GeneratorSelector:
    """Instancie une fois chaque générateur et choisit selon le type de repas.

    >>> selector = GeneratorSelector(IngredientCategorizer())
    >>> type(selector.select("MealNutrientPaste")).__name__
    'NutrientPasteNameGenerator'
    >>> type(selector.select("MealFine")).__name__
    'ProceduralDishNameGenerator'
    """

    def __init__(
        self,
        categorizer: IngredientCategorizer,
        template_set: Optional[TemplateSet] = None,
        name_style: str = "procedural",
    ):
        if name_style not in NAME_STYLES:
            raise ValueError(f"unknown name style: {name_style}")
        self.name_style = name_style
        self.procedural = ProceduralDishNameGenerator(categorizer)
        self.template = TemplateDishGenerator(categorizer, template_set)
        self.nutrient_paste = NutrientPasteNameGenerator(categorizer)

    def select(self, meal_type_id: Optional[str] = None) -> NameGenerator:
        return select_generator(self, meal_type_id, self.name_style)


def select_generator(
    selector: GeneratorSelector, meal_type_id: Optional[str], name_style: str = "procedural"
) -> NameGenerator:
    """Pâte nutritive d'abord, puis le style configuré (procédural par défaut)."""
    if is_nutrient_paste(meal_type_id):
        return selector.nutrient_paste
    if name_style == "template":
        return selector.template
    return selector.procedural
