"""Runtime configuration.

Values come from ``SOMS_*`` environment variables or a ``.env`` file.
Optional collaborators (Redis, RabbitMQ) fall back to in-process
implementations when their URL is not set.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="SOMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    data_dir: Path = Field(
        default=_DEFAULT_DATA_DIR,
        description="Directory holding the JSON store files",
    )
    redis_url: Optional[str] = Field(
        default=None,
        description="Redis URL for the shared cache; in-process cache when unset",
    )
    rabbitmq_url: Optional[str] = Field(
        default=None,
        description="AMQP URL for lifecycle events; events are logged when unset",
    )
    event_exchange: str = Field(
        default="soms.events",
        description="Topic exchange lifecycle events are published to",
    )
    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()
