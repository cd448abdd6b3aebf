"""Application configuration."""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from blindspot_scout.constants import (
    DEFAULT_LLM_MAX_CONCURRENCY,
    DEFAULT_TOP_BLIND_SPOTS,
    MAX_RECOMMENDATIONS,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Keys
    anthropic_api_key: str = ""

    # LLM Settings
    llm_model: str = "claude-sonnet-4-6"

    # Pipeline Settings
    extraction_strategy: Literal["keyword", "llm"] = "keyword"
    llm_backend: Literal["mock", "anthropic"] = "mock"
    llm_max_concurrency: int = DEFAULT_LLM_MAX_CONCURRENCY
    top_blind_spots: int = DEFAULT_TOP_BLIND_SPOTS

    # App Settings
    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


class PipelineConfig(BaseModel):
    """Explicit configuration handed to the orchestrator.

    The pipeline never reads the environment itself; callers build this from
    ``Settings`` (or directly in tests) and pass it in.
    """

    model_config = ConfigDict(frozen=True)

    current_year: int | None = None  # None -> today's year
    extraction_strategy: Literal["keyword", "llm"] = "keyword"
    llm_backend: Literal["mock", "anthropic"] = "mock"
    llm_model: str = "claude-sonnet-4-6"
    anthropic_api_key: str = ""
    llm_max_concurrency: int = Field(default=DEFAULT_LLM_MAX_CONCURRENCY, ge=1)
    top_blind_spots: int = Field(default=DEFAULT_TOP_BLIND_SPOTS, ge=1)
    max_recommendations: int = Field(default=MAX_RECOMMENDATIONS, ge=0)

    @classmethod
    def from_settings(cls, settings: Settings, **overrides) -> "PipelineConfig":
        """Build a pipeline config from application settings."""
        values = {
            "extraction_strategy": settings.extraction_strategy,
            "llm_backend": settings.llm_backend,
            "llm_model": settings.llm_model,
            "anthropic_api_key": settings.anthropic_api_key,
            "llm_max_concurrency": settings.llm_max_concurrency,
            "top_blind_spots": settings.top_blind_spots,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
