"""
Configuration management using Pydantic Settings.
Design: Single source of truth for environment variables; the signing secret and
hashing cost are read here once and handed to the security objects explicitly.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment. Validates at startup."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Inventory API"
    debug: bool = False
    log_level: str = "INFO"

    # Database (SQLite by default; any SQLAlchemy async URL works)
    database_url: str = "sqlite+aiosqlite:///./inventory.db"

    # Comma separated list, "*" allows any origin
    cors_origins: str = "*"

    # JWT
    jwt_secret_key: str = "change-me-in-production"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60

    # Password hashing work factor
    bcrypt_rounds: int = 10

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance. Avoids re-reading env on every request."""
    return Settings()
