# dishnames/domain/dish.py
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_DISH_DESCRIPTION = "A delicious meal."


class DishEntry(BaseModel):
    """Entrée rédigée de la base : un nom et sa description (immuable une fois chargée)."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    description: str = DEFAULT_DISH_DESCRIPTION

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("dish name must not be blank")
        return value

    @field_validator("description", mode="before")
    @classmethod
    def _default_description(cls, value):
        if value is None or not str(value).strip():
            return DEFAULT_DISH_DESCRIPTION
        return str(value).strip()


class DishInfo(NamedTuple):
    """Résultat d'une résolution : ``name, description = resolver.resolve(...)``."""

    name: str
    description: str

    @classmethod
    def from_entry(cls, entry: DishEntry) -> "DishInfo":
        return cls(entry.name, entry.description)


MYSTERY_DISH = DishInfo("Mystery Dish", "A mysterious meal with unknown ingredients.")
MYSTERY_PASTE = DishInfo(
    "Mystery Nutrient Paste", "A mysterious meal with unknown ingredients."
)
