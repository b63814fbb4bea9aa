import logging

import pytest

from unitalgebra import __version__
from unitalgebra.config import DEFAULT_SYSTEMS, load_settings
from unitalgebra.observability import configure_logging
from unitalgebra.units.catalogue import default_catalogue


@pytest.fixture()
def clean_catalogue():
    default_catalogue.cache_clear()
    yield
    default_catalogue.cache_clear()


def test_defaults(monkeypatch):
    monkeypatch.delenv("UNITALGEBRA_LOG_LEVEL", raising=False)
    monkeypatch.delenv("UNITALGEBRA_SYSTEMS", raising=False)
    monkeypatch.delenv("UNITALGEBRA_ENGINE_VERSION", raising=False)
    settings = load_settings()
    assert settings.log_level == "WARNING"
    assert settings.systems == DEFAULT_SYSTEMS
    assert settings.engine_version == __version__


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("UNITALGEBRA_LOG_LEVEL", "debug")
    monkeypatch.setenv("UNITALGEBRA_SYSTEMS", " si , temperature ,")
    monkeypatch.setenv("UNITALGEBRA_ENGINE_VERSION", "9.9.9")
    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.systems == ("si", "temperature")
    assert settings.engine_version == "9.9.9"


def test_configured_systems_drive_default_catalogue(monkeypatch, clean_catalogue):
    monkeypatch.setenv("UNITALGEBRA_SYSTEMS", "temperature")
    catalogue = default_catalogue()
    assert "celsius" in catalogue
    assert "foot" not in catalogue


def test_configure_logging_sets_root_level():
    previous = logging.getLogger().level
    try:
        configure_logging("debug")
        assert logging.getLogger().level == logging.DEBUG
    finally:
        logging.getLogger().setLevel(previous)


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        configure_logging("chatty")
