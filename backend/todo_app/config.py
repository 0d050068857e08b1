"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - jwt_secret has no default: a missing or blank secret fails startup
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Every setting except jwt_secret has a default; DATABASE_URL targets a Postgres host named "db"
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def normalize_database_url(v: str) -> str:
    """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
    if isinstance(v, str) and v.startswith("postgresql://"):
        return v.replace("postgresql://", "postgresql+asyncpg://", 1)
    return v


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://todo:todo@db:5432/todo"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        return normalize_database_url(v)

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Auth
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    token_ttl_days: int = 7
    password_min_length: int = 6

    @field_validator("jwt_secret")
    @classmethod
    def require_secret(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("JWT_SECRET must be set to a non-empty value")
        return v

    # Categories
    default_category_color: str = "#667eea"

    # API
    cors_origins: list[str] = ["http://localhost:5000", "http://127.0.0.1:5000"]
    static_dir: str = "static"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
