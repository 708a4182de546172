"""Application configuration using pydantic-settings"""
from functools import lru_cache
from typing import Optional, List
from pydantic_settings import BaseSettings
from pydantic import field_validator
import logging

logger = logging.getLogger(__name__)

# Persistent development secret key - stable across restarts so issued sessions survive a reload
# In production, this MUST be overridden via SECRET_KEY environment variable
_DEV_SECRET_KEY = "dev-secret-key-for-local-development-only-change-in-production"


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "Estate Listings"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # API
    API_PREFIX: str = "/api"
    ALLOWED_ORIGINS: str = "http://localhost:5173,http://localhost:3000"

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./estate_listings.db"
    DATABASE_ECHO: bool = False

    # Admin sessions (JWT)
    SECRET_KEY: str = _DEV_SECRET_KEY
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # Password Requirements (admin provisioning)
    PASSWORD_MIN_LENGTH: int = 12
    PASSWORD_REQUIRE_UPPERCASE: bool = True
    PASSWORD_REQUIRE_LOWERCASE: bool = True
    PASSWORD_REQUIRE_DIGIT: bool = True
    PASSWORD_REQUIRE_SPECIAL: bool = True

    # Listing pagination
    DEFAULT_PAGE_SIZE: int = 50
    MAX_PAGE_SIZE: int = 100

    # Admin
    ADMIN_EMAIL: Optional[str] = None
    ADMIN_PASSWORD: Optional[str] = None
    ADMIN_NAME: str = "Administrator"

    @field_validator("SECRET_KEY")
    @classmethod
    def validate_secret_key(cls, v: str, info) -> str:
        environment = info.data.get("ENVIRONMENT", "development")
        if environment == "production":
            if v == _DEV_SECRET_KEY:
                raise ValueError(
                    "SECRET_KEY must be set via environment variable in production. "
                    "Do not use the default development key."
                )
            if len(v) < 32:
                raise ValueError("SECRET_KEY must be at least 32 characters in production")
        elif v == _DEV_SECRET_KEY:
            logger.warning(
                "Using default development SECRET_KEY. This is fine for development, "
                "but MUST be overridden in production via the SECRET_KEY environment variable."
            )
        return v

    @field_validator("MAX_PAGE_SIZE")
    @classmethod
    def validate_max_page_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError("MAX_PAGE_SIZE must be at least 1")
        return v

    @property
    def allowed_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
