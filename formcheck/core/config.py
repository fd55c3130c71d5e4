"""Application configuration and feature flags."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # API
    app_name: str = "Form Rules Service"
    debug: bool = False
    log_level: str = "INFO"

    # Paths
    rules_dir: str = "formcheck/rules/data"

    # Presentation markers applied by the default notification sink
    invalid_field_class: str = "fieldErrorBorder"
    invalid_label_class: str = "fieldErrorText"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
