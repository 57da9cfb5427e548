from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Jokes Web App"

    # Database
    database_url: str = "sqlite:///./jokes.db"
    sql_echo: bool = False

    # Logging
    log_level: str = "INFO"

    # Server (used when running `python -m jokes_app.main`)
    host: str = "0.0.0.0"
    port: int = 8000

    @property
    def is_sqlite(self) -> bool:
        """True when the configured database is a SQLite file or memory db."""
        return self.database_url.startswith("sqlite")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
