"""
Centralized application configuration

Values come from the environment (or a .env file) and fall back to the
defaults below.

Author: TM3
Date: 2026-10-16
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # API Settings
    API_TITLE: str = "Cake Shop API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Ordering API for the Cake Shop"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_DEBUG: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"

    # Persistence - JSON file with saved orders (in-memory only when unset)
    ORDERS_FILE: Optional[str] = None

    # CORS - comma or whitespace separated, "*" allows any origin
    # Example: "http://localhost:3000, https://shop.example.com"
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:3001"

    @field_validator('LOG_LEVEL')
    @classmethod
    def log_level_upper(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator('ORDERS_FILE')
    @classmethod
    def blank_orders_file_is_unset(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value

    def get_allowed_origins(self) -> List[str]:
        """
        Origins for the CORS middleware

        Empty entries and duplicates are dropped. A "*" anywhere in the list
        allows every origin.
        """
        origins: List[str] = []
        for origin in self.ALLOWED_ORIGINS.replace(",", " ").split():
            origin = origin.rstrip("/")
            if origin == "*":
                return ["*"]
            if origin and origin not in origins:
                origins.append(origin)
        return origins


settings = Settings()
