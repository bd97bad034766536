"""Tests for environment-driven configuration."""

import pytest

from habitweek.config import BaseConfig


def test_defaults_live_in_data_dir(tmp_path):
    config = BaseConfig(data_dir=tmp_path)

    assert config.DATA_DIR == tmp_path.resolve()
    assert config.DATABASE_URL == f"sqlite:///{tmp_path.resolve() / 'habitweek.db'}"
    assert config.STORAGE_KEY == "habitTrackerState"
    assert config.EXPORT_DIR == tmp_path.resolve() / "exports"


def test_data_dir_from_environment(isolated_env):
    config = BaseConfig()

    assert config.DATA_DIR == (isolated_env / "data").resolve()
    assert config.DATA_DIR.is_dir()


def test_environment_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("HABITWEEK_STORAGE_KEY", "otherKey")
    monkeypatch.setenv("HABITWEEK_DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("HABITWEEK_EXPORT_DIR", str(tmp_path / "exports-here"))
    monkeypatch.setenv("HABITWEEK_DEV_MODE", "yes")

    config = BaseConfig(data_dir=tmp_path)

    assert config.STORAGE_KEY == "otherKey"
    assert config.DATABASE_URL == "sqlite:///:memory:"
    assert config.EXPORT_DIR == (tmp_path / "exports-here").resolve()
    assert config.DEV_MODE is True


def test_dev_mode_can_be_disabled(tmp_path):
    assert BaseConfig(data_dir=tmp_path).DEV_MODE is False


def test_blank_storage_key_is_rejected(tmp_path, monkeypatch):
    monkeypatch.setenv("HABITWEEK_STORAGE_KEY", "   ")

    with pytest.raises(ValueError):
        BaseConfig(data_dir=tmp_path)


def test_sqlite_engine_options(tmp_path):
    options = BaseConfig(data_dir=tmp_path).sqlalchemy_engine_options()

    assert options["connect_args"] == {"check_same_thread": False}
