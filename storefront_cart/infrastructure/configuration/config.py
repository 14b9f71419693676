"""
Configuration management for the storefront cart
"""


import threading

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_prefix="CART_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application settings
    log_level: str = Field("INFO")
    log_dir: str = Field("logs")
    environment: str = Field("development")

    # Storage
    storage_path: str = Field("data/cart_storage.json")
    cart_storage_key: str = Field("@RocketShoes:cart")

    # Local catalog/stock document
    catalog_path: str = Field("data/catalog.json")

    # Notifications
    locale: str = Field("pt_BR")


_settings_instance: Settings | None = None
_settings_lock = threading.Lock()


def get_config() -> Settings:
    """Get the global settings instance, ensuring thread safety."""
    global _settings_instance
    if _settings_instance is None:
        with _settings_lock:
            if _settings_instance is None:
                _settings_instance = Settings()
    return _settings_instance


def reset_config() -> None:
    """Drop the cached settings so the next get_config() re-reads the environment"""
    global _settings_instance
    with _settings_lock:
        _settings_instance = None
