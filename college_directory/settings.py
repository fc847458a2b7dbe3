"""Application settings and configuration (Pydantic v2)."""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""

    # HTTP server
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=3000, description="HTTP port")

    # Database (SQLite file next to the working directory by default)
    database_url: str = Field(
        default="sqlite:///./college.db",
        description="SQLAlchemy database URL",
    )

    log_level: str = Field(default="INFO", description="Root logging level")

    # Pydantic v2 settings
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="",                 # no prefix
    )


# Global settings instance
settings = Settings()
