"""Application settings using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Service
    app_name: str = "HR Dashboard API"
    app_version: str = "1.0.0"

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"

    # Timezone
    timezone: str = "UTC"

    # CORS
    cors_origins: list[str] = ["*"]

    # Storage
    seed_sample_data: bool = True


settings = Settings()
