"""Configuration settings for the application."""

from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url

from smart_parking import __version__


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./data/parking.sqlite"
    DATABASE_ECHO: bool = False

    # Application
    APP_NAME: str = "Smart Parking API"
    APP_VERSION: str = __version__
    DEBUG: bool = False
    API_PREFIX: str = "/api"
    SEED_ON_STARTUP: bool = True
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    @property
    def database_path(self) -> Optional[Path]:
        """Filesystem path of a file-backed SQLite database, if any."""
        url = make_url(self.DATABASE_URL)
        if url.get_backend_name() != "sqlite":
            return None
        if not url.database or url.database == ":memory:":
            return None
        return Path(url.database)


settings = Settings()
