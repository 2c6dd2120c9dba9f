from __future__ import annotations

import pytest

from caddie_server.config import reset_settings_cache
from caddie_server.startup_validation import validate_startup


def test_development_defaults_pass() -> None:
    validate_startup()


def test_heygen_enabled_requires_keys(monkeypatch) -> None:
    monkeypatch.setenv("HEYGEN_ENABLED", "1")
    reset_settings_cache()
    with pytest.raises(RuntimeError, match="HEYGEN_API_KEY"):
        validate_startup()


def test_production_requires_openai_key(monkeypatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    reset_settings_cache()
    with pytest.raises(RuntimeError, match="OPENAI_API_KEY"):
        validate_startup()


def test_staging_flag_is_strict(monkeypatch) -> None:
    monkeypatch.setenv("STAGING", "1")
    reset_settings_cache()
    with pytest.raises(RuntimeError, match="Startup validation failed"):
        validate_startup()


def test_production_with_mock_provider_passes(monkeypatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("CADDIE_PROVIDER", "mock")
    reset_settings_cache()
    validate_startup()


def test_production_requires_course_document(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("COURSE_DATA_PATH", str(tmp_path / "missing.txt"))
    reset_settings_cache()
    with pytest.raises(RuntimeError, match="COURSE_DATA_PATH"):
        validate_startup()


def test_development_tolerates_missing_course_document(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("COURSE_DATA_PATH", str(tmp_path / "missing.txt"))
    reset_settings_cache()
    validate_startup()
