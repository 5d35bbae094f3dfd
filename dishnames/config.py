import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Réglages du moteur, surchargeables par variables d'environnement ``DISHNAMES_*``."""

    model_config = SettingsConfigDict(env_prefix="DISHNAMES_", extra="ignore")

    # Documents
    data_dir: Path = Field(default=Path("Database"))
    dish_names_file: str = Field(default="DishNames.json")
    templates_file: str = Field(default="DishTemplates.json")

    # Logs
    log_level: str = Field(default="INFO")
    log_missing_ingredients: bool = Field(default=False)

    # Nommage
    seed_variation_probability: float = Field(default=0.8, ge=0.0, le=1.0)
    ticks_per_second: int = Field(default=60, ge=1)
    name_style: Literal["procedural", "template"] = Field(default="procedural")
    special_ingredients: List[str] = Field(
        default_factory=lambda: ["RawRice", "Milk", "InsectJelly", "Chocolate"]
    )

    # Lots
    fallback_ingredients: List[str] = Field(
        default_factory=lambda: ["RawPotatoes", "Meat_Cow"], min_length=1
    )
    default_cook_name: str = Field(default="unknown chef")
    skipped_meal_markers: List[str] = Field(default_factory=lambda: ["Survival"])

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def dish_names_path(self) -> Path:
        return Path(self.data_dir) / self.dish_names_file

    @property
    def templates_path(self) -> Path:
        return Path(self.data_dir) / self.templates_file


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Installe un handler console basique pour les hôtes sans configuration de logs."""
    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)
