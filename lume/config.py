"""Environment configuration for the LUME API.

Values are read from environment variables or a `.env` file with
pydantic-settings and consumed by `lume.settings`.
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    SECRET_KEY: str = "lume-insecure-development-key"
    ENVIRONMENT: str = Field(
        default="development",
        validation_alias=AliasChoices("ENVIRONMENT", "NODE_ENV"),
    )
    PORT: int = 5000
    ALLOWED_HOSTS: str = "localhost,127.0.0.1"
    API_BASE_URL: str = "http://localhost:5000/api"
    LOG_LEVEL: str = "INFO"

    # PostgreSQL is used when POSTGRES_DB is set, SQLite otherwise
    POSTGRES_DB: str | None = None
    POSTGRES_USER: str = "lume"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    SQLITE_PATH: str = "db.sqlite3"

    ADMIN_EMAIL: str = "admin@lume.events"
    EMAIL_HOST: str = "smtp.gmail.com"
    EMAIL_PORT: int = 587
    EMAIL_SECURE: bool = False
    EMAIL_USER: str = ""
    EMAIL_PASSWORD: str = ""

    CACHE_TTL_SECONDS: int = Field(default=300, ge=0)
    CHECK_IN_WINDOW_HOURS: int = Field(default=2, ge=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("ENVIRONMENT")
    @classmethod
    def normalize_environment(cls, v: str) -> str:
        return v.strip().lower()

    @property
    def debug(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    def get_allowed_hosts(self) -> list[str]:
        return [host.strip() for host in self.ALLOWED_HOSTS.split(",") if host.strip()]

    def get_databases(self) -> dict:
        """Build the Django DATABASES mapping."""
        if self.POSTGRES_DB:
            default = {
                "ENGINE": "django.db.backends.postgresql",
                "NAME": self.POSTGRES_DB,
                "USER": self.POSTGRES_USER,
                "PASSWORD": self.POSTGRES_PASSWORD,
                "HOST": self.POSTGRES_HOST,
                "PORT": self.POSTGRES_PORT,
            }
        else:
            default = {
                "ENGINE": "django.db.backends.sqlite3",
                "NAME": self.SQLITE_PATH,
            }
        return {"default": default}


@lru_cache()
def get_settings() -> Settings:
    """Return the cached Settings instance."""
    return Settings()
