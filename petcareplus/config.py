"""
PetCarePlus Backend: Application Configuration
================================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time.

Every value has a development fallback, so the server starts with no
environment at all. Production deployments override at least the database
credentials and SESSION_SECRET.
"""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern.
    """

    # ── Database ──────────────────────────────────────────────────────────
    # Individual connection parts; assembled into a SQLAlchemy URL below.
    db_driver: str = Field(default="postgresql+asyncpg")
    db_host: str = Field(default="localhost")
    db_port: int = Field(default=5432, ge=1, le=65535)
    db_user: str = Field(default="root")
    db_password: str = Field(default="")
    db_name: str = Field(default="project_db")

    # Full URL override (e.g. sqlite+aiosqlite:///./test.db); wins over the parts
    database_url: Optional[str] = Field(default=None)

    db_pool_pre_ping: bool = Field(default=True)

    # ── Sessions ──────────────────────────────────────────────────────────
    session_secret: str = Field(default="petcareplus-secret-key")
    session_cookie: str = Field(default="petcareplus_session")

    # None keeps the cookie for the browser session only
    session_max_age: Optional[int] = Field(default=None, ge=60)

    # ── Weather provider ──────────────────────────────────────────────────
    weather_api_url: str = Field(default="https://api.open-meteo.com/v1/forecast")

    # ── CORS ──────────────────────────────────────────────────────────────
    # Comma-separated list; "*" reflects any origin (credentials allowed)
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)

    # Directory of the static frontend; served at "/" when it exists
    frontend_dir: str = Field(default="frontend")

    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @property
    def sqlalchemy_url(self) -> str:
        """The async SQLAlchemy URL, built from the DB_* parts unless DATABASE_URL is set."""
        if self.database_url:
            return self.database_url
        url = URL.create(
            drivername=self.db_driver,
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }

    def warn_on_development_defaults(self) -> List[str]:
        """
        What:  Lists settings still running on insecure development fallbacks.
        When:  Called during app startup (lifespan); each entry is logged.
        """
        warnings = []
        if self.session_secret == "petcareplus-secret-key":
            warnings.append("SESSION_SECRET is using the development default")
        if not self.database_url and not self.db_password:
            warnings.append("DB_PASSWORD is empty")
        return warnings


settings = Settings()
