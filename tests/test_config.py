"""Tests for settings loaded from the environment."""

import pytest
from pydantic import ValidationError

from cafeteria.config import Settings, get_settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("CAFETERIA_SHOP_NAME", "CAFETERIA_DISCOUNT_CHAIN_FORWARDING", "CAFETERIA_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = get_settings()
    assert settings.shop_name == "Cafeteria"
    assert settings.discount_chain_forwarding is False
    assert settings.log_level == "WARNING"


def test_reads_environment(clean_env):
    clean_env.setenv("CAFETERIA_SHOP_NAME", "Kavova")
    clean_env.setenv("CAFETERIA_DISCOUNT_CHAIN_FORWARDING", "true")
    clean_env.setenv("CAFETERIA_LOG_LEVEL", "debug")

    settings = get_settings()
    assert settings.shop_name == "Kavova"
    assert settings.discount_chain_forwarding is True
    assert settings.log_level == "DEBUG"


def test_invalid_flag_raises(clean_env):
    clean_env.setenv("CAFETERIA_DISCOUNT_CHAIN_FORWARDING", "sometimes")
    with pytest.raises(ValidationError):
        get_settings()


def test_invalid_log_level_raises(clean_env):
    clean_env.setenv("CAFETERIA_LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        get_settings()


def test_log_level_normalized_by_model():
    assert Settings(log_level=" info ").log_level == "INFO"


def test_settings_model_defaults():
    assert Settings().discount_chain_forwarding is False
