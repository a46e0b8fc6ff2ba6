from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import List

class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"

    # Generation knobs
    KEYWORD_LIMIT: int = 15
    SENTENCE_LIMIT: int = 10
    DEFAULT_NUM_QUESTIONS: int = 5
    MAX_QUESTIONS: int = 20

    # Safety/abuse knobs
    MAX_TEXT_CHARS: int = 50_000
    MAX_UPLOAD_KB: int = 256
    RATE_LIMIT: str = "30/minute"

    # CORS
    ALLOW_ORIGINS: List[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"]
    )

    # Optional extra frontend
    FRONTEND_ORIGIN: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
if settings.FRONTEND_ORIGIN:
    settings.ALLOW_ORIGINS.append(settings.FRONTEND_ORIGIN)
