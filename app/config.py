"""
Todo Service Configuration

This file contains all server-side configurable settings.
Values can be overridden through environment variables where noted.
"""

from dataclasses import dataclass
from typing import Optional
import os


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ServerConfig:
    """Server networking configuration."""
    HOST: str = os.environ.get("HOST", "0.0.0.0")
    PORT: int = int(os.environ.get("PORT", "3333"))


@dataclass
class CorsConfig:
    """Cross-origin settings. Every origin is accepted."""
    ALLOW_ORIGINS: tuple = ("*",)
    ALLOW_METHODS: tuple = ("*",)
    ALLOW_HEADERS: tuple = ("*",)


@dataclass
class LoggingConfig:
    """Logging configuration."""
    LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")
    FORMAT: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass
class Settings:
    """Main settings container."""
    server: Optional[ServerConfig] = None
    cors: Optional[CorsConfig] = None
    logging: Optional[LoggingConfig] = None

    # Application info
    APP_NAME: str = "Todo Service"
    VERSION: str = "0.1.0"
    DEBUG: bool = _env_bool("DEBUG", False)

    def __post_init__(self):
        self.server = self.server or ServerConfig()
        self.cors = self.cors or CorsConfig()
        self.logging = self.logging or LoggingConfig()


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings
