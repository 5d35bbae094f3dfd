import json
from pathlib import Path
from typing import Any, Type, TypeVar, Union

from pydantic import BaseModel, RootModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class DishNamesError(Exception):
    """Erreur de base du moteur de noms de plats."""


class DocumentError(DishNamesError):
    """Document de données illisible ou mal formé."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def read_json(data_path: Path) -> Any:
    """
    Read a JSON document from data_path.
    Raises DocumentError when the file is missing, unreadable or not valid JSON.
    """
    if not data_path.exists():
        raise DocumentError(data_path, "file not found")
    try:
        with data_path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DocumentError(data_path, str(e)) from e


def write_json(data_path: Path, payload: Any) -> None:
    data_path.parent.mkdir(parents=True, exist_ok=True)
    with data_path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)
        f.write("\n")


def load_and_validate(
    data_path: Path, model: Union[Type[RootModel], Type[ModelT]]
) -> ModelT:
    """
    Read data_path and validate its content against model.
    Validation failures are raised as DocumentError, like read errors.
    """
    raw_data = read_json(data_path)
    try:
        return model.model_validate(raw_data)
    except ValidationError as e:
        raise DocumentError(data_path, str(e)) from e
