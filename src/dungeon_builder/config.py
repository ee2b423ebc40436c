"""Runtime configuration for the dungeon builder CLI."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="DUNGEON_BUILDER_", env_file=".env", extra="ignore")

    app_name: str = "dungeon-builder"
    log_level: str = "WARNING"
    rich_logging: bool = Field(
        default=True,
        description="Render log records with Rich instead of a plain stream handler.",
    )


settings = Settings()
