"""Dashboard Configuration"""

import os
from functools import lru_cache
from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Project root .env, independent of the working directory
ENV_FILE = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", ".env"))

# Load environment variables before settings are read
load_dotenv(ENV_FILE)


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Inventory Dashboard"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    # Dashboard
    today_sales: str = "$1,240"  # Placeholder until a sales feed exists

    # Sessions
    session_cookie: str = "dashboard_session"
    session_max_age_hours: int = 24

    class Config:
        env_file = ENV_FILE
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
