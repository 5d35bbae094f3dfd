"""Interface commune des générateurs de noms de repli.

Un générateur n'est appelé que lorsque la base de noms n'a rien trouvé. Il
reçoit un ``random.Random`` déjà amorcé par la résolution : il ne touche
jamais au générateur global du module ``random``.
"""

from abc import ABC, abstractmethod
from random import Random
from typing import Sequence

from dishnames.domain.ingredients import Ingredient
from dishnames.domain.types import MealQuality
from dishnames.rules.categorizer import IngredientCategorizer


class NameGenerator(ABC):
    """Contrat : ne lève jamais, renvoie un nom « mystère » pour une liste vide."""

    def __init__(self, categorizer: IngredientCategorizer):
        self.categorizer = categorizer

    @abstractmethod
    def generate_name(
        self, ingredients: Sequence[Ingredient], quality: MealQuality, rng: Random
    ) -> str:
        ...

    @abstractmethod
    def generate_description(
        self, ingredients: Sequence[Ingredient], quality: MealQuality, rng: Random
    ) -> str:
        ...
