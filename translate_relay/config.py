"""
Configuration settings for the Translate Relay service
"""
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "Translate Relay"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = Field(default=False)

    # Server
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8000)
    UVICORN_WORKERS: int = Field(default=1)  # Number of worker processes

    # Upstream translation backend (LibreTranslate-compatible)
    TRANSLATE_URL: str = Field(default="https://libretranslate.de/translate")
    REQUEST_TIMEOUT: float = Field(default=20.0)  # Seconds, per item

    # Batching
    MAX_BATCH_SIZE: int = Field(default=100)

    class Config:
        env_file = ".env"
        case_sensitive = True


# Global settings instance
settings = Settings()
