from dataclasses import dataclass, field
from enum import Enum
from threading import Lock
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from dishnames.domain.ingredients import Ingredient


class BatchJobState(Enum):
    UNREGISTERED = "Unregistered"
    REGISTERED = "Registered"
    NAMED = "Named"


@dataclass
class BatchJob:
    """
    Un lot de production (une commande de cuisine qui sort N repas).
    - dish_name : attribué une seule fois, à la première sortie, puis figé.
    - producer  : référence opaque du cuisinier, éventuellement absente.
    """

    job_id: int
    meal_type_id: str
    producer: Optional[Any] = None
    ingredients: List[Ingredient] = field(default_factory=list)
    dish_name: Optional[str] = None
    description: Optional[str] = None
    has_produced_output: bool = False
    # sérialise la première résolution de ce lot uniquement
    lock: Lock = field(default_factory=Lock, repr=False, compare=False)

    @property
    def state(self) -> BatchJobState:
        if self.has_produced_output:
            return BatchJobState.NAMED
        return BatchJobState.REGISTERED


class MealItem(BaseModel):
    """Repas produit côté hôte, tel que vu par le moteur.

    Seuls ces champs sont lus ou écrits ; l'hôte garde la persistance.
    """

    meal_type_id: str = "MealSimple"
    ingredients: List[Ingredient] = Field(default_factory=list)
    dish_name: Optional[str] = None
    description: Optional[str] = None
    cook_name: Optional[str] = None
