from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    app_name: str = "ai-assistant-parsers"
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]
    max_input_chars: int = 100_000

    model_config = {
        "env_file": ".env",
        "env_prefix": "",
        "extra": "ignore",
    }

@lru_cache()
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()
