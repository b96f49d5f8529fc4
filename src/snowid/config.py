"""Configuration management using pydantic-settings."""

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from snowid.clock import Clock
from snowid.errors import InvalidConfiguration
from snowid.generator import IdGenerator
from snowid.layout import MAX_DATACENTER_ID, MAX_MACHINE_ID


class GeneratorSettings(BaseSettings):
    """Identity of this node, read from SNOWID_* variables or .env."""

    model_config = SettingsConfigDict(
        env_prefix="SNOWID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    datacenter_id: int = Field(default=0, ge=0, le=MAX_DATACENTER_ID)
    machine_id: int = Field(default=0, ge=0, le=MAX_MACHINE_ID)


def load_settings() -> GeneratorSettings:
    """Load settings from environment and .env file."""
    try:
        return GeneratorSettings()
    except ValidationError as e:
        raise InvalidConfiguration(f"Invalid generator settings: {e}") from e


def generator_from_settings(
    settings: GeneratorSettings | None = None, clock: Clock | None = None
) -> IdGenerator:
    """Build an IdGenerator for the configured datacenter and machine."""
    settings = settings or load_settings()
    return IdGenerator(settings.datacenter_id, settings.machine_id, clock=clock)
