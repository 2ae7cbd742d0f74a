"""Configuration management - settings and per-client session configuration."""

from collections.abc import Mapping
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Provider(str, Enum):
    """Which authentication header the endpoint expects."""

    OPENAI = "openai"
    AZURE = "azure"


class Settings(BaseSettings):
    """Library settings from environment and .env."""

    model_config = SettingsConfigDict(
        env_prefix="OPENAI_KIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Endpoint
    api_key: str = Field(default="", description="API key for the LLM endpoint")
    provider: Provider = Field(default=Provider.OPENAI, description="openai (Bearer) or azure (api-key)")
    scheme: str = Field(default="https", description="URL scheme")
    host: str = Field(default="api.openai.com", description="API host, optionally with port")
    timeout: float = Field(default=60.0, description="Network timeout in seconds")

    # Requests
    model: str = Field(default="gpt-3.5-turbo", description="Default model id")

    # Logging
    log_requests: bool = Field(default=True, description="Emit request lifecycle log lines")

    config_file: Path | None = Field(default=None, description="Optional YAML file overlaying these values")


class SessionConfiguration(BaseModel):
    """Connection parameters shared by every request of one client. Immutable."""

    model_config = ConfigDict(frozen=True)

    scheme: str = Field(default="https")
    host: str = Field(default="api.openai.com")
    default_headers: dict[str, str] = Field(default_factory=dict)
    timeout: float = Field(default=60.0, gt=0)

    @field_validator("default_headers", mode="before")
    @classmethod
    def _copy_headers(cls, value: Mapping[str, str] | None) -> dict[str, str]:
        # Own copy so the caller's mapping cannot change headers later
        return dict(value or {})

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.host}"


def build_default_headers(api_key: str, provider: Provider | str = Provider.OPENAI) -> dict[str, str]:
    """Auth and content-type headers for the given provider."""
    provider = Provider(provider)
    headers: dict[str, str] = {}
    if provider is Provider.AZURE:
        headers["api-key"] = api_key
    else:
        headers["Authorization"] = f"Bearer {api_key}"
    headers["Content-Type"] = "application/json"
    return headers


def load_yaml_config(config_path: Path) -> dict[str, Any]:
    """Load YAML config file."""
    if not config_path.exists():
        return {}
    with config_path.open() as f:
        return yaml.safe_load(f) or {}


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance. YAML values from config_file override env."""
    settings = Settings()
    if settings.config_file is None:
        return settings
    overlay = load_yaml_config(Path(settings.config_file))
    if not overlay:
        return settings
    return Settings.model_validate({**settings.model_dump(), **overlay})
