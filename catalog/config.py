"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from urllib.parse import quote


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def resolve_redis_url() -> str:
    """Resolve the Redis connection string.

    Priority:
      1) REDIS_URL (explicit)
      2) Build from REDIS_HOST / REDIS_PORT / REDIS_DB / REDIS_PASSWORD
    """

    explicit = os.getenv("REDIS_URL")
    if explicit:
        return explicit

    host = os.getenv("REDIS_HOST", "localhost")
    port_raw = os.getenv("REDIS_PORT")
    db_raw = os.getenv("REDIS_DB")
    password = os.getenv("REDIS_PASSWORD")

    try:
        port = int(port_raw) if port_raw else 6379
    except ValueError:
        port = 6379

    try:
        db = int(db_raw) if db_raw else 0
    except ValueError:
        db = 0

    auth = f":{quote(password, safe='')}@" if password else ""
    return f"redis://{auth}{host}:{port}/{db}"


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret")

    REDIS_URL: str = resolve_redis_url()
    REDIS_SOCKET_TIMEOUT: float = _float_env("REDIS_SOCKET_TIMEOUT", 5.0)
    REDIS_CONNECT_TIMEOUT: float = _float_env("REDIS_CONNECT_TIMEOUT", 5.0)

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class TestingConfig(BaseConfig):
    """Test configuration."""

    DEBUG: bool = False
    TESTING: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    if env == "testing":
        return TestingConfig
    return DevelopmentConfig
