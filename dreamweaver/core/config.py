"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "DreamWeaver AI"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Unlock your best sleep with personalized AI insights"
    AUTHORS: List[str] = ["DreamWeaver Team"]

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Development server
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Local persistence (durable medium behind the key-value store)
    PERSISTENCE_ENABLED: bool = True
    STORAGE_URL: str = "sqlite:///./dreamweaver.db"

    # Initial database backend: "local", "supabase" or "firebase"
    DATABASE_PROVIDER: str = "local"
    REMOTE_API_URL: Optional[str] = None
    REMOTE_API_KEY: Optional[str] = None
    REMOTE_PROJECT_ID: Optional[str] = None
    ONLINE_CHECK_TIMEOUT_SECONDS: float = 3.0

    # Insight generator (OpenRouter-compatible chat completions)
    INSIGHT_API_URL: str = "https://openrouter.ai/api/v1"
    INSIGHT_API_KEY: Optional[str] = None
    INSIGHT_MODEL: str = "google/gemini-2.0-flash-001"
    INSIGHT_MAX_TOKENS: int = 200
    INSIGHT_TEMPERATURE: float = 0.7
    INSIGHT_TIMEOUT_SECONDS: float = 30.0

    # Snapshot backups written by scripts/export_backup.py
    BACKUP_DIR: str = "backups"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
