from typing import Generator, List
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# =====================================================================
# SETTINGS
# =====================================================================


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Digital Diary API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./diary.db"

    # Local day (fixed offset, no DST). 330 = UTC+5:30
    LOCAL_UTC_OFFSET_MINUTES: int = 330

    # Streaks
    ACTIVE_DAYS_WINDOW: int = 30
    STREAK_UPDATE_MAX_RETRIES: int = 3

    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:3000",
    ]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("LOCAL_UTC_OFFSET_MINUTES")
    @classmethod
    def validate_offset(cls, v: int) -> int:
        if not -1440 < v < 1440:
            raise ValueError("LOCAL_UTC_OFFSET_MINUTES must be within one day")
        return v


settings = Settings()


# =====================================================================
# DATABASE
# =====================================================================

engine = create_engine(
    settings.DATABASE_URL,
    connect_args=(
        {"check_same_thread": False} if "sqlite" in settings.DATABASE_URL else {}
    ),
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Database session dependency."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
