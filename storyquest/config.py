"""Application configuration loaded from environment variables and .env file."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    DEBUG: bool = False
    LOG_LEVEL: str = "WARNING"

    # Game settings
    SCENARIO: str = "castle"
    SAVE_FILE: str = "savegame.json"
    CASE_SENSITIVE_DIRECTIONS: bool = False


settings = Settings()
