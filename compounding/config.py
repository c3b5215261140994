"""Application configuration loaded from environment variables."""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings read from COMPOUNDING_* environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="COMPOUNDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Front-end origins allowed to call /api/*
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ]
    )

    # Server
    host: str = "127.0.0.1"
    port: int = 5000
    debug: bool = False

    log_level: str = "INFO"


settings = Settings()
