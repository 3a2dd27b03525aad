# app/core/config.py
"""
Application configuration using Pydantic Settings
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
import json
from pydantic import field_validator


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables
    """

    # Application
    APP_NAME: str = "CaseMadad"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str

    # JWT Authentication
    JWT_SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"

    # CORS
    CORS_ORIGINS: str = '["http://localhost:3000", "https://casemadad.netlify.app"]'

    # Scheduling
    # Leave blank to use the policy.yaml bundled with app/services/scheduling
    SCHEDULING_POLICY_PATH: str = ""
    SCHEDULE_DEFAULT_DAYS: int = 7
    # Upper guard only; zero or negative horizons yield an empty proposal
    SCHEDULE_MAX_DAYS: int = 366
    MY_SCHEDULE_DEFAULT_WINDOW_DAYS: int = 30

    @field_validator("SCHEDULING_POLICY_PATH", mode="before")
    @classmethod
    def strip_policy_path(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from string to list"""
        try:
            if isinstance(self.CORS_ORIGINS, str):
                return json.loads(self.CORS_ORIGINS)
            return self.CORS_ORIGINS
        except json.JSONDecodeError:
            return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


# Create settings instance
settings = Settings()
