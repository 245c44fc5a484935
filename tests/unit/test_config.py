"""Unit tests for configuration helpers."""

import pytest

from qaudit import config


def test_get_db_url_reads_environment(monkeypatch):
    monkeypatch.setenv(config.DB_URL_ENV_VAR, "sqlite:///qaudit.db")
    assert config.get_db_url() == "sqlite:///qaudit.db"


@pytest.mark.parametrize("value", [None, ""])
def test_get_db_url_requires_value(monkeypatch, value):
    if value is None:
        monkeypatch.delenv(config.DB_URL_ENV_VAR, raising=False)
    else:
        monkeypatch.setenv(config.DB_URL_ENV_VAR, value)
    with pytest.raises(config.DatabaseUrlNotSetError):
        config.get_db_url()


def test_build_alembic_config_points_at_packaged_scripts():
    cfg = config.build_alembic_config("sqlite:///:memory:")
    assert cfg.get_main_option(config.ALEMBIC_URL_KEY) == "sqlite:///:memory:"
    location = cfg.get_main_option(config.ALEMBIC_SCRIPT_LOCATION_KEY)
    assert location.replace("\\", "/").endswith("qaudit/adapters/db/alembic")


def test_build_alembic_config_without_url():
    cfg = config.build_alembic_config()
    assert cfg.get_main_option(config.ALEMBIC_URL_KEY) is None
