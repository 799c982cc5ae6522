"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    record_store: str = "file"
    record_store_path: str = "studio_records.json"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    timezone: str = "America/Sao_Paulo"
    studio_name: str = "ALCHYMIST"
    log_level: str = "INFO"
    default_photographers: str = "Ramon,Anne,Gabriel,Fabricio"
    default_sellers: str = "Ingrid,Wiliam"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_names(raw: str | None) -> list[str]:
    """Parse a comma-separated roster from env, keeping order and dropping repeats."""
    if raw is None:
        return []
    names: list[str] = []
    for chunk in raw.split(","):
        value = chunk.strip()
        if value and value not in names:
            names.append(value)
    return names
