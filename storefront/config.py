from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class AppConfig(BaseSettings):
    """Application configuration using Pydantic BaseSettings.

    Loads configuration from environment variables and .env file (if present).
    Fields are type-checked and validated. Defaults are provided where appropriate.
    """
    # Application
    app_env: str = "local"
    app_title: str = "Storefront Dashboard"
    log_level: str = "DEBUG"

    # Data source
    data_source: Literal["file", "http"] = "file"
    data_dir: str = "data"
    data_base_url: Optional[str] = None
    http_timeout: float = 15.0

    # UI settings
    default_page: str = "dashboard"

    # Seed data settings
    default_seed_scale: str = "small"
    default_seed_days: int = 60
    default_seed_value: int = 42

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

_config: Optional[AppConfig] = None

def get_config() -> AppConfig:
    """Return the AppConfig instance (singleton pattern)."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config

def set_config_for_test(**kwargs):
    """For testing only: override the AppConfig instance with new values."""
    global _config
    _config = AppConfig(**kwargs)
