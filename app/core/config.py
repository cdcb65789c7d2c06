"""Application configuration settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        # System environment wins over .env
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    PROJECT_NAME: str = "Teams API"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "API de times de futebol com paginação, filtros e ordenação"
    API_PREFIX: str = "/api"
    DOCS_URL: str = "/api-docs"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    DEBUG: bool = False

    # CORS
    ALLOWED_ORIGINS: str = "*"

    # Database
    DATABASE_URL: str = ""
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = ""
    DB_NAME: str = "football_db"
    DB_POOL_SIZE: int = 20
    DB_IDLE_TIMEOUT_MS: int = 30000
    DB_CONNECTION_TIMEOUT_MS: int = 2000

    # football-data.org
    FOOTBALL_API_URL: str = "https://api.football-data.org/v4"
    FOOTBALL_API_KEY: str = ""

    # Importer
    BATCH_SIZE: int = 50
    DELAY_BETWEEN_REQUESTS: int = 2000
    PAGE_RETRY_BACKOFF: int = 3
    MAX_PAGE_RETRIES: int | None = None

    @property
    def database_url(self) -> str:
        """Get the SQLAlchemy async URL, built from DB_* unless DATABASE_URL is set."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def allowed_origins_list(self) -> list[str]:
        """Get ALLOWED_ORIGINS as a list."""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
