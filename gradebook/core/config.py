# gradebook/core/config.py
from datetime import date
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./gradebook.db"

    # First day of the school year; Oct 1 of the current school year when unset
    ACADEMIC_YEAR_START: Optional[date] = None

    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: List[str] = [
        "http://localhost",
        "http://127.0.0.1",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    class Config:
        env_file = ".env"

# Created once per process
settings = Settings()
