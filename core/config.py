from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    # -------------------------------------------------
    # General
    # -------------------------------------------------
    PROJECT_NAME: str = "PropertyHub Demo API"
    ENV: str = "development"
    LOG_LEVEL: str = Field("INFO", description="Level of the propertyhub logger")

    # -------------------------------------------------
    # Frontend Domains (CORS)
    # -------------------------------------------------
    FRONTEND_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    BACKEND_CORS_ORIGINS: List[str] = []

    # -------------------------------------------------
    # Session / Auth
    # -------------------------------------------------
    # Simulated network latency applied to every login attempt
    LOGIN_DELAY_SECONDS: float = Field(
        1.0,
        ge=0,
        description="Artificial delay before a login resolves (default: 1s)",
    )

    # -------------------------------------------------
    # Durable session storage
    # -------------------------------------------------
    SESSION_STORAGE_BACKEND: str = Field(
        "memory",
        description="Where the current session snapshot lives: 'memory' or 'file'",
    )
    SESSION_STORAGE_PATH: str = ".propertyhub_session.json"

    # -------------------------------------------------
    # Model Config
    # -------------------------------------------------
    class Config:
        case_sensitive = True


# Instantiate settings
settings = Settings()

# -------------------------------------------------
# Build CORS list after loading settings
# -------------------------------------------------
settings.BACKEND_CORS_ORIGINS = sorted(
    {origin.rstrip("/") for origin in settings.FRONTEND_ORIGINS}
)
