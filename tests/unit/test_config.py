"""Tests for settings and pipeline configuration."""

import pytest
from pydantic import ValidationError

from blindspot_scout.config import PipelineConfig, Settings, get_settings


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("EXTRACTION_STRATEGY", raising=False)
    settings = Settings(_env_file=None)

    assert settings.extraction_strategy == "keyword"
    assert settings.llm_backend == "mock"
    assert settings.top_blind_spots == 5


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("EXTRACTION_STRATEGY", "llm")
    monkeypatch.setenv("LLM_BACKEND", "anthropic")
    monkeypatch.setenv("LLM_MAX_CONCURRENCY", "8")
    settings = Settings(_env_file=None)

    assert settings.extraction_strategy == "llm"
    assert settings.llm_backend == "anthropic"
    assert settings.llm_max_concurrency == 8


def test_settings_reject_unknown_strategy(monkeypatch):
    monkeypatch.setenv("EXTRACTION_STRATEGY", "regex")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached():
    get_settings.cache_clear()
    assert get_settings() is get_settings()


def test_pipeline_config_from_settings_ignores_none_overrides():
    settings = Settings(_env_file=None, extraction_strategy="llm", top_blind_spots=7)
    config = PipelineConfig.from_settings(
        settings, extraction_strategy=None, top_blind_spots=None, current_year=2020
    )

    assert config.extraction_strategy == "llm"
    assert config.top_blind_spots == 7
    assert config.current_year == 2020


def test_pipeline_config_overrides_win():
    settings = Settings(_env_file=None, extraction_strategy="llm")
    config = PipelineConfig.from_settings(settings, extraction_strategy="keyword")
    assert config.extraction_strategy == "keyword"


def test_pipeline_config_is_frozen():
    config = PipelineConfig()
    assert PipelineConfig.model_config["frozen"] is True
    with pytest.raises(ValidationError):
        config.top_blind_spots = 3


@pytest.mark.parametrize(
    "field, value",
    [("llm_max_concurrency", 0), ("top_blind_spots", 0), ("max_recommendations", -1)],
)
def test_pipeline_config_bounds(field, value):
    with pytest.raises(ValidationError):
        PipelineConfig(**{field: value})
