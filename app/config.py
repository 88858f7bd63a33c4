"""
Configuration settings for the keyword detection backend.
Loads environment variables and provides application settings.
"""
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    PYTHON_BACKEND_PORT: int = 8000
    LOG_LEVEL: str = "info"

    # CORS (comma separated)
    CORS_ALLOWED_ORIGINS: str = "*"

    # OpenAI (explanations only; keyword detection works without a key)
    OPENAI_API_KEY: str = ""
    EXPLANATION_MODEL: str = "gpt-4o-mini"
    EXPLANATION_MAX_TOKENS: int = 1500

    # Keyword detection
    KEYWORD_DEFAULT_MIN_CONFIDENCE: float = Field(0.7, ge=0.0, le=1.0)
    KEYWORD_MAX_PHRASE_LENGTH: int = Field(4, ge=1)
    KEYWORD_INDEX_CACHE_SIZE: int = Field(32, ge=0)

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def allowed_origins_list(self) -> List[str]:
        """Convert CORS allowed origins string to list."""
        return [origin.strip() for origin in self.CORS_ALLOWED_ORIGINS.split(',')]


# Global settings instance
settings = Settings()
