"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process
    - Commission settings are integers (permille rates, minimums in minor units)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://cards:cards@db:5432/cards"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Bank
    bank_name: str = "Tinkoff"
    issuer_prefix: str = "510621"
    strict_ownership: bool = True

    # Commissions: max(amount * permille // 1000, minimum), minor units
    from_inner_permille: int = 5
    from_inner_minimum: int = 10_00
    to_inner_permille: int = 0
    to_inner_minimum: int = 0
    outer_permille: int = 15
    outer_minimum: int = 30_00

    @field_validator(
        "from_inner_permille", "from_inner_minimum",
        "to_inner_permille", "to_inner_minimum",
        "outer_permille", "outer_minimum",
    )
    @classmethod
    def non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("commission settings must be non-negative")
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
