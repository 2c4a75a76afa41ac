# invoicing/config.py
"""
Environment-driven settings (pydantic-settings).

Values come from the process environment or a local ``.env`` file;
``get_settings()`` returns one cached instance per process.
"""

from functools import lru_cache
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore"
    )

    # Database
    database_url: str = "sqlite:///db.sqlite"  # file in project root
    database_echo: bool = False

    @field_validator("database_url", mode="before")
    @classmethod
    def use_psycopg_driver(cls, v: str) -> str:
        """Hosted Postgres hands out postgres:// URLs; SQLAlchemy wants a driver."""
        if isinstance(v, str):
            for prefix in ("postgres://", "postgresql://"):
                if v.startswith(prefix):
                    return v.replace(prefix, "postgresql+psycopg://", 1)
        return v

    # Where callers are sent after a successful invoice mutation
    invoices_path: str = "/dashboard/invoices"

    # API
    cors_origins: List[str] = ["http://localhost:3000"]

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"  # text | json


@lru_cache
def get_settings() -> Settings:
    return Settings()
