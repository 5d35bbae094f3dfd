from random import Random
from typing import Sequence

from dishnames.data.naming_words import PASTE_DESCRIPTORS, PASTE_TERMS
from dishnames.domain.dish import MYSTERY_PASTE
from dishnames.domain.ingredients import Ingredient
from dishnames.domain.types import MealQuality
from dishnames.rules.generator import NameGenerator
from dishnames.rules.labels import capitalized_label, format_ingredients_list

PASTE_DESCRIPTION = (
    "This is a nutrient paste meal made from processed {0}. "
    "The nutritional value is adequate, but the taste leaves much to be desired."
)


class NutrientPasteNameGenerator(NameGenerator):
    """Noms peu flatteurs pour la pâte nutritive : « <ingrédient> <terme> ».

    La qualité est ignorée, la pâte n'en a qu'une.
    """

    def generate_name(
        self, ingredients: Sequence[Ingredient], quality: MealQuality, rng: Random
    ) -> str:
        if not ingredients:
            return MYSTERY_PASTE.name
        category = self.categorizer.dominant_category(ingredients)
        representative = self.categorizer.representative_ingredient(ingredients, category)
        if representative is not None:
            label = capitalized_label(representative.label)
        else:
            label = rng.choice(PASTE_DESCRIPTORS[category])
        return f"{label} {rng.choice(PASTE_TERMS)}"

    def generate_description(
        self, ingredients: Sequence[Ingredient], quality: MealQuality, rng: Random
    ) -> str:
        if not ingredients:
            return MYSTERY_PASTE.description
        return PASTE_DESCRIPTION.format(format_ingredients_list(ingredients))
