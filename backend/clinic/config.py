"""
Configuration settings for the Clinic Records API.
"""
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # SQLite file next to the working directory
    database_url: str = "sqlite:///./clinic.db"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Environment
    debug: bool = False
    log_level: str = "INFO"

    # Demo data is wiped and re-inserted on every start
    seed_on_startup: bool = True

    project_name: str = "Clinic Records API"

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
