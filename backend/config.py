# backend/config.py
from pydantic_settings import BaseSettings
from typing import ClassVar, Literal, Optional
from pathlib import Path

# .env sits next to the backend folder
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./database_inventory.db"
    FRONTEND_URL: Optional[str] = None

    LOG_LEVEL: str = "INFO"

    # Initial appearance for the settings page, changed at runtime via /settings
    DEFAULT_THEME: Literal["light", "dark", "system"] = "light"

    # How many of the newest products the dashboard shows
    RECENT_PRODUCTS_LIMIT: int = 5

    class Config:
        env_file: ClassVar[str] = str(env_path)
        extra: ClassVar[str] = "ignore"

settings = Settings()
