"""
DishNames package

Ce package attribue un nom de plat lisible (et une description) à un repas
cuisiné à partir de ses ingrédients, de sa qualité et de son contexte de
production. Il sépare les objets du domaine, les données d'amorçage, les
règles de nommage et les composants avec état (base de noms, résolution,
suivi des lots) en sous-packages distincts.
"""

from dishnames.core.engine import DishNameEngine
from dishnames.config import Settings, configure_logging

__all__ = ["core", "domain", "data", "rules", "DishNameEngine", "Settings", "configure_logging"]
