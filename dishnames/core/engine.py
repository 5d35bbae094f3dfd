"""Point d'entrée de l'hôte : construit et relie tous les composants."""

import logging
from typing import Any, Iterable, List, Optional, Union

from dishnames.config import Settings
from dishnames.core.batch import BatchTracker
from dishnames.core.database import DishNameDatabase
from dishnames.core.loader import LoadReport
from dishnames.core.resolver import DishResolver, TickSource, monotonic_ticks
from dishnames.domain.batch import MealItem
from dishnames.domain.dish import DishInfo
from dishnames.domain.ingredients import Ingredient, IngredientLike
from dishnames.domain.types import MealQuality
from dishnames.rules.categorizer import IngredientCategorizer
from dishnames.rules.selector import GeneratorSelector
from dishnames.rules.templates import TemplateSet

logger = logging.getLogger(__name__)


class DishNameEngine:
    """
    Moteur de noms de plats.
    - initialize(settings) : charge les documents et construit les composants
    - register_job / process_output / get_name / get_ingredients / release_job :
      cycle de vie d'un lot de production
    - resolve_ad_hoc : nom d'un repas hors de tout lot
    - reload : relit les documents sans interrompre les recherches en cours
    """

    def __init__(
        self,
        settings: Settings,
        categorizer: IngredientCategorizer,
        database: DishNameDatabase,
        selector: GeneratorSelector,
        resolver: DishResolver,
        tracker: BatchTracker,
    ):
        self.settings = settings
        self.categorizer = categorizer
        self.database = database
        self.selector = selector
        self.resolver = resolver
        self.tracker = tracker

    @classmethod
    def initialize(
        cls, settings: Optional[Settings] = None, tick_source: Optional[TickSource] = None
    ) -> "DishNameEngine":
        """Construit un moteur prêt à l'emploi.

        Paramètres
        ----------
        settings : Settings | None
            Réglages ; ``Settings()`` (variables ``DISHNAMES_*``) par défaut.
        tick_source : Callable[[], int] | None
            Compteur utilisé dans la graine ; horloge monotone par défaut.

        Retour
        ------
        DishNameEngine
            Un moteur utilisable même si les documents sont absents ou
            illisibles (le rapport de chargement dit ce qui a été ignoré).
        """
        settings = settings or Settings()
        categorizer = IngredientCategorizer(settings.special_ingredients)
        database = DishNameDatabase.load(
            settings.dish_names_path, log_missing_ingredients=settings.log_missing_ingredients
        )
        selector = GeneratorSelector(
            categorizer, TemplateSet.load(settings.templates_path), settings.name_style
        )
        resolver = DishResolver(
            database,
            selector,
            seed_variation_probability=settings.seed_variation_probability,
            tick_source=tick_source or monotonic_ticks(settings.ticks_per_second),
        )
        tracker = BatchTracker(
            resolver,
            fallback_ingredients=settings.fallback_ingredients,
            default_cook_name=settings.default_cook_name,
            skipped_meal_markers=settings.skipped_meal_markers,
        )
        logger.info("Dish name engine ready (%s names)", settings.name_style)
        return cls(settings, categorizer, database, selector, resolver, tracker)

    @property
    def load_report(self) -> Optional[LoadReport]:
        return self.database.last_report

    def reload(self) -> LoadReport:
        """Relit le document de noms et les gabarits ; chaque jeu est remplacé d'un bloc."""
        report = self.database.reload()
        self.selector.template.template_set = TemplateSet.load(self.settings.templates_path)
        return report

    # --------- API hôte ---------

    def register_job(self, job_id: int, meal_type_id: str, producer: Optional[Any] = None) -> None:
        self.tracker.register_job(job_id, meal_type_id, producer)

    def process_output(
        self,
        item: Optional[MealItem],
        job_id: int,
        consumed_ingredients: Optional[Iterable[Optional[IngredientLike]]] = None,
    ) -> Optional[str]:
        return self.tracker.process_output(item, job_id, consumed_ingredients)

    def get_name(self, job_id: int) -> Optional[str]:
        return self.tracker.get_name(job_id)

    def get_ingredients(self, job_id: int) -> Optional[List[Ingredient]]:
        return self.tracker.get_ingredients(job_id)

    def release_job(self, job_id: int) -> None:
        self.tracker.release_job(job_id)

    def resolve_ad_hoc(
        self,
        ingredients: Optional[Iterable[Optional[IngredientLike]]],
        quality: Union[MealQuality, str, None] = None,
    ) -> DishInfo:
        """Résolution sans lot. ``quality`` accepte aussi ``"Fine"``, ``"lavish"``..."""
        if isinstance(quality, str):
            quality = MealQuality.parse(quality)
        return self.resolver.resolve(ingredients, quality)
