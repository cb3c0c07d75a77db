# app/core/config.py
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List, Optional

class Settings(BaseSettings):
    PROJECT_NAME: str = "Personal Finance Tracker"
    API_V1_STR: str = "/api/v1"

    # Database
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DB: str = "personal_finance_tracker"

    DATABASE_URL: Optional[str] = None # Overrides the Postgres URL when set (e.g. sqlite+aiosqlite:///./finance.db)
    CREATE_TABLES_ON_STARTUP: bool = False # Without Alembic: create tables when the app starts

    # HTTP
    BACKEND_CORS_ORIGINS: List[str] = ["*"]

    # Dashboard
    CURRENCY_SYMBOL: str = "₹"
    RECENT_TRANSACTIONS_LIMIT: int = 4

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # Credentials
    PASSWORD_HASH_ITERATIONS: int = 390_000

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True

    @property
    def ASYNC_DATABASE_URL(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"


@lru_cache() # Read settings once per process
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
