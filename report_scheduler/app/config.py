"""
Application configuration module.
Loads environment variables and provides library-wide settings.
"""
from pathlib import Path

from pydantic import ConfigDict
from pydantic_settings import BaseSettings

# Get project root (two levels up from this file)
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Bundled code-set document (endpoint -> {code: label})
DEFAULT_CODE_SETS_FILE = Path(__file__).parent / "data" / "code_sets.json"


class Settings(BaseSettings):
    """
    Settings loaded from environment variables or .env file.
    (Note: Environment variables take precedence over .env file)
    """
    PROJECT_NAME: str = "ReportScheduler"
    VERSION: str = "0.1.0"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False

    # Code sets (enum source)
    CODE_SETS_FILE: str = str(DEFAULT_CODE_SETS_FILE)
    CODE_SETS_CACHE_TTL: int = 3600  # Seconds the parsed document stays in the shared cache

    model_config = ConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),
        case_sensitive=True,
        env_file_encoding='utf-8'
        )


def get_settings() -> Settings:
    """
    Get settings instance.

    Returns:
        Settings: Library settings
    """
    return Settings()
