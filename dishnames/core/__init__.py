"""
Composants avec état : chargement des documents, base de noms, façade de
résolution, suivi des lots et moteur qui les assemble.
"""

from .batch import BatchTracker
from .database import DishNameDatabase
from .engine import DishNameEngine
from .loader import DishTables, LoadReport, build_tables, load_tables
from .resolver import DishResolver, stable_hash

__all__ = [
    "BatchTracker",
    "DishNameDatabase",
    "DishNameEngine",
    "DishTables",
    "LoadReport",
    "build_tables",
    "load_tables",
    "DishResolver",
    "stable_hash",
]
