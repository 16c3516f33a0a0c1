"""Tests for environment-specific configuration."""

import pytest

from config import DevelopmentConfig, ProductionConfig, UnitTestConfig, get_config


@pytest.mark.parametrize(
    "env, expected",
    [
        ("development", DevelopmentConfig),
        ("testing", UnitTestConfig),
        ("production", ProductionConfig),
        ("PRODUCTION", ProductionConfig),
        ("staging", DevelopmentConfig),
    ],
)
def test_get_config_by_name(env, expected):
    assert type(get_config(env)) is expected


def test_get_config_reads_flask_env(monkeypatch):
    monkeypatch.setenv("FLASK_ENV", "production")

    assert isinstance(get_config(), ProductionConfig)


def test_testing_config_uses_memory_database():
    config = UnitTestConfig()

    assert config.TESTING is True
    assert config.SQLALCHEMY_DATABASE_URI == "sqlite:///:memory:"
    assert config.SQLALCHEMY_ENGINE_OPTIONS == {}


def test_database_url_postgres_scheme_is_normalised(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgres://user:secret@db:5432/restaurants")

    config = ProductionConfig()

    assert config.SQLALCHEMY_DATABASE_URI == "postgresql://user:secret@db:5432/restaurants"


def test_default_database_is_sqlite_file(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("FLASK_ENV", "development")

    config = DevelopmentConfig()

    assert config.SQLALCHEMY_DATABASE_URI.startswith("sqlite:///")
    assert config.SQLALCHEMY_DATABASE_URI.endswith("crudyrestaurants-development.db")


def test_routes_served_from_root_by_default():
    assert UnitTestConfig().RESTAURANTS_URL_PREFIX == ""
