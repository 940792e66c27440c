# backend/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    # Store is considered unavailable while this is unset
    DATABASE_URL: Optional[str] = None

    SECRET_KEY: str = "dev-secret-change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 365

    # Identity token that always logs in as admin
    OWNER_OPEN_ID: Optional[str] = None
    COOKIE_NAME: str = "app_session_id"

    FRONTEND_URL: Optional[str] = None
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(env_path),
        extra="ignore",
    )

settings = Settings()
