"""Service configuration settings."""

from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Service configuration
    service_name: str = "flora-fauna-process-service"
    environment: str = "development"
    port: int = 8004

    # Storage configuration
    storage_type: Literal["inmemory", "sql"] = "inmemory"
    database_url: str = "sqlite+aiosqlite:///./processes.db"
    store_timeout_seconds: float = Field(default=5.0, gt=0)

    # Demo mode: fixed demo identity, seeded store
    demo_mode: bool = True
    seed_demo_data: bool = True

    # Pagination defaults
    default_page_size: int = 50
    max_page_size: int = 100

    # CORS configuration
    cors_origins: str = "*"

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        if self.cors_origins == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",")]


# Global settings instance
settings = Settings()
