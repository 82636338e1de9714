"""Application configuration and settings management."""

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="ADDRESSBOOK_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "addressbook"
    address_file: Path = Field(
        default=Path("data/addresses.json"),
        description="JSON document holding the address records.",
    )
    not_available_label: str = Field(
        default="Not available",
        description="Placeholder rendered for empty fields when displaying addresses.",
    )
    log_level: str = Field(default="INFO", description="Root log level for the CLI.")

    @field_validator("address_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> str:
        level = str(value).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level '{value}'")
        return level


settings = Settings()
