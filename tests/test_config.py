"""Tests for settings loaded from the environment."""

import pydantic
import pytest

from bookcatalog.config import Settings
from bookcatalog.domain.constants import DEFAULT_CATALOG_CAPACITY


def test_defaults(monkeypatch):
    monkeypatch.delenv("BOOKCATALOG_CATALOG_CAPACITY", raising=False)
    monkeypatch.delenv("BOOKCATALOG_DEBUG", raising=False)
    monkeypatch.delenv("BOOKCATALOG_LOG_LEVEL", raising=False)

    settings = Settings(_env_file=None)

    assert settings.app_name == "Book Catalog"
    assert settings.debug is False
    assert settings.catalog_capacity == DEFAULT_CATALOG_CAPACITY
    assert settings.log_level == "WARNING"
    assert settings.log_to_file is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BOOKCATALOG_CATALOG_CAPACITY", "5")
    monkeypatch.setenv("BOOKCATALOG_DEBUG", "true")
    monkeypatch.setenv("BOOKCATALOG_LOG_LEVEL", "info")

    settings = Settings(_env_file=None)

    assert settings.catalog_capacity == 5
    assert settings.effective_capacity == 5
    assert settings.debug is True
    assert settings.log_level == "INFO"


@pytest.mark.parametrize("capacity", [0, -1])
def test_non_positive_capacity_uses_default(capacity: int):
    settings = Settings(_env_file=None, catalog_capacity=capacity)
    assert settings.effective_capacity == DEFAULT_CATALOG_CAPACITY


def test_unknown_log_level_is_rejected():
    with pytest.raises(pydantic.ValidationError):
        Settings(_env_file=None, log_level="LOUD")


def test_env_file_is_read(tmp_path, monkeypatch):
    monkeypatch.delenv("BOOKCATALOG_CATALOG_CAPACITY", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("BOOKCATALOG_CATALOG_CAPACITY=7\n", encoding="utf-8")

    settings = Settings(_env_file=env_file)

    assert settings.catalog_capacity == 7
