from typing import Optional
from pydantic_settings import BaseSettings
import os
from dotenv import load_dotenv

env = os.getenv("ENV", "dev")
if env == "dev":
    dotenv_path = ".env"
else:
    dotenv_path = f".env.{env}"
load_dotenv(dotenv_path=dotenv_path, override=True)


class Settings(BaseSettings):
    PROJECT_NAME: str = "BridgeScan API"
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        "postgresql+asyncpg://postgres:postgres@db:5432/bridgescan_dev",
    )
    DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "5"))
    DB_MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "10"))
    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://127.0.0.1:5173")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    ENV: str = env

    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    # None waits forever
    QUERY_TIMEOUT_SECONDS: Optional[float] = 10.0
    # e.g. "REPEATABLE READ" to count and page on one snapshot
    LIST_ISOLATION_LEVEL: Optional[str] = os.getenv("LIST_ISOLATION_LEVEL") or None


settings = Settings()
