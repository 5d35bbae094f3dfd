import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from dishnames.config import Settings, configure_logging


def test_defaults(monkeypatch):
    for key in ("DISHNAMES_NAME_STYLE", "DISHNAMES_DATA_DIR"):
        monkeypatch.delenv(key, raising=False)
    settings = Settings()
    assert settings.name_style == "procedural"
    assert settings.seed_variation_probability == 0.8
    assert settings.fallback_ingredients == ["RawPotatoes", "Meat_Cow"]
    assert settings.dish_names_path == Path("Database") / "DishNames.json"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DISHNAMES_NAME_STYLE", "template")
    monkeypatch.setenv("DISHNAMES_SEED_VARIATION_PROBABILITY", "0.25")
    monkeypatch.setenv("DISHNAMES_SPECIAL_INGREDIENTS", '["Milk"]')
    settings = Settings()
    assert settings.name_style == "template"
    assert settings.seed_variation_probability == 0.25
    assert settings.special_ingredients == ["Milk"]


@pytest.mark.parametrize(
    "overrides",
    [
        {"seed_variation_probability": 1.5},
        {"name_style": "poetic"},
        {"log_level": "LOUD"},
        {"fallback_ingredients": []},
        {"ticks_per_second": 0},
    ],
)
def test_invalid_settings_are_rejected(overrides):
    with pytest.raises(ValidationError):
        Settings(**overrides)


def test_log_level_is_normalized():
    assert Settings(log_level="debug").log_level == "DEBUG"


def test_configure_logging_uses_given_level(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    configure_logging("warning")
    assert calls[0]["level"] == logging.WARNING
