"""
Suivi des lots de production : un seul nom par lot, partagé par tous ses repas.

Cycle de vie d'un lot : ``register_job`` -> ``process_output`` (N fois) ->
``release_job``. Le premier ``process_output`` résout le nom ; les suivants
ne font que le recopier.
"""

import logging
from threading import Lock
from typing import Any, Dict, Iterable, List, Optional, Sequence

from dishnames.core.resolver import DishResolver
from dishnames.domain.batch import BatchJob, BatchJobState, MealItem
from dishnames.domain.ingredients import Ingredient, IngredientLike, as_ingredients, has_twisted_meat
from dishnames.domain.types import meal_quality_from_type
from dishnames.rules.labels import fix_twisted_meat_name

logger = logging.getLogger(__name__)


class BatchTracker:
    """Table des lots en cours.

    Le verrou global ne protège que la table elle-même (ajout, lecture,
    suppression). La première résolution d'un lot se fait sous le verrou
    propre à ce lot : deux lots différents ne se bloquent pas.
    """

    def __init__(
        self,
        resolver: DishResolver,
        fallback_ingredients: Sequence[str] = ("RawPotatoes", "Meat_Cow"),
        default_cook_name: str = "unknown chef",
        skipped_meal_markers: Sequence[str] = ("Survival",),
    ):
        self.resolver = resolver
        self.fallback_ingredients = as_ingredients(fallback_ingredients)
        self.default_cook_name = default_cook_name
        self.skipped_meal_markers = tuple(skipped_meal_markers)
        self._jobs: Dict[int, BatchJob] = {}
        self._lock = Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._jobs)

    def register_job(self, job_id: int, meal_type_id: str, producer: Optional[Any] = None) -> None:
        """Enregistre un lot ; sans effet s'il est déjà connu."""
        with self._lock:
            if job_id in self._jobs:
                return
            self._jobs[job_id] = BatchJob(job_id=job_id, meal_type_id=meal_type_id, producer=producer)
        logger.info("Registered job %s (%s)", job_id, meal_type_id)

    def is_skipped(self, meal_type_id: Optional[str]) -> bool:
        return bool(meal_type_id) and any(m in meal_type_id for m in self.skipped_meal_markers)

    def process_output(
        self,
        item: Optional[MealItem],
        job_id: int,
        consumed_ingredients: Optional[Iterable[Optional[IngredientLike]]] = None,
    ) -> Optional[str]:
        """Nomme un repas sorti du lot ``job_id``.

        Paramètres
        ----------
        item : MealItem | None
            Repas à renseigner (nom, description, cuisinier). ``None`` :
            seul le nom du lot est calculé et renvoyé.
        job_id : int
            Identifiant du lot.
        consumed_ingredients : Iterable | None
            Ingrédients réellement consommés ; seulement lus au premier repas.

        Retour
        ------
        str | None
            Nom du lot, ou ``None`` si le lot est inconnu ou d'un type
            de repas qui n'est jamais renommé.
        """
        with self._lock:
            job = self._jobs.get(job_id)
        if job is None:
            logger.warning("Output for unknown job %s ignored", job_id)
            return None
        if self.is_skipped(job.meal_type_id):
            return None

        with job.lock:
            if not job.has_produced_output:
                self._name_job(job, item, consumed_ingredients)
            name, description = job.dish_name, job.description

        if item is not None:
            item.dish_name = name
            item.description = description
            item.cook_name = self.cook_name(job)
        return name

    def _name_job(
        self,
        job: BatchJob,
        item: Optional[MealItem],
        consumed_ingredients: Optional[Iterable[Optional[IngredientLike]]],
    ) -> None:
        ingredients = self.actual_ingredients(job, item, consumed_ingredients)
        info = self.resolver.resolve(
            ingredients, meal_quality_from_type(job.meal_type_id), job.meal_type_id
        )
        name = info.name
        if has_twisted_meat(ingredients):
            fixed = fix_twisted_meat_name(name)
            if fixed != name:
                logger.debug("Job %s: restored twisted meat in %r", job.job_id, name)
            name = fixed
        job.ingredients = ingredients
        job.dish_name = name
        job.description = info.description
        job.has_produced_output = True
        logger.info("Job %s named %r", job.job_id, name)

    def actual_ingredients(
        self,
        job: BatchJob,
        item: Optional[MealItem],
        consumed_ingredients: Optional[Iterable[Optional[IngredientLike]]],
    ) -> List[Ingredient]:
        """Ingrédients consommés, sinon ceux du repas, sinon la liste de secours."""
        consumed = as_ingredients(consumed_ingredients)
        if consumed:
            return consumed
        if item is not None and item.ingredients:
            logger.debug("Job %s: using the meal's own ingredients", job.job_id)
            return list(item.ingredients)
        logger.debug("Job %s: no ingredients known, using fallback set", job.job_id)
        return list(self.fallback_ingredients)

    def cook_name(self, job: BatchJob) -> str:
        producer = job.producer
        if producer is None:
            return self.default_cook_name
        if isinstance(producer, str):
            return producer or self.default_cook_name
        return str(getattr(producer, "name", None) or producer)

    def _named_job(self, job_id: int) -> Optional[BatchJob]:
        with self._lock:
            job = self._jobs.get(job_id)
        if job is None or not job.has_produced_output:
            return None
        return job

    def get_name(self, job_id: int) -> Optional[str]:
        job = self._named_job(job_id)
        return job.dish_name if job else None

    def get_ingredients(self, job_id: int) -> Optional[List[Ingredient]]:
        job = self._named_job(job_id)
        return list(job.ingredients) if job else None

    def job_state(self, job_id: int) -> BatchJobState:
        with self._lock:
            job = self._jobs.get(job_id)
        return job.state if job else BatchJobState.UNREGISTERED

    def release_job(self, job_id: int) -> None:
        """Oublie le lot, quel que soit son état ; sans effet s'il est inconnu."""
        with self._lock:
            job = self._jobs.pop(job_id, None)
        if job is not None:
            logger.info("Released job %s", job_id)
