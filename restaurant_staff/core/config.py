"""
Configuration settings for the application.
"""
from typing import List, Literal, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings with default values.
    Values can be overridden by environment variables or a .env file.
    """
    # API settings
    PROJECT_NAME: str = "Restaurant Staff Manager"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # CORS settings
    BACKEND_CORS_ORIGINS: List[str] = ["*"]

    # MongoDB settings (no default for the URL: the server refuses to start without it)
    MONGODB_URL: Optional[str] = None
    MONGODB_DB: str = "restaurant_staff"

    # Routing settings
    ENABLE_LEGACY_ROUTES: bool = True
    RESPONSE_ENVELOPE: Literal["legacy", "standard"] = "legacy"

    # Logging settings
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Create settings instance
settings = Settings()


def log_config_info(logger):
    """Log configuration information at startup."""
    logger.info(f"Project Name: {settings.PROJECT_NAME}")
    logger.info(f"MongoDB Database: {settings.MONGODB_DB}")
    logger.info(f"Legacy /persons routes: {'enabled' if settings.ENABLE_LEGACY_ROUTES else 'disabled'}")
    logger.info(f"Response envelope: {settings.RESPONSE_ENVELOPE}")
    logger.info(f"CORS Origins: {settings.BACKEND_CORS_ORIGINS}")
    logger.info(f"Log Level: {settings.LOG_LEVEL}")
