from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Gemini (the key may be empty; translations then use the keyword fallback)
    GEMINI_API_KEY: str | None = None
    GEMINI_MODELS: List[str] = [
        "gemini-2.5-flash-lite",
        "gemini-2.5-flash",
        "gemini-2.0-flash",
        "gemini-2.5-pro",
    ]
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    GEMINI_TIMEOUT: float = 30.0

    # Database
    DATABASE_URL: str = "sqlite:///./unsaid.db"
    HISTORY_LIMIT: int = 50

    # HTTP
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:3000"]
    RATE_LIMIT_REQUESTS: int = 10
    RATE_LIMIT_WINDOW_SECONDS: float = 60.0
    PORT: int = 5000

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="allow")  # tolerate unrelated variables in .env

# Global instance
settings = Settings()
