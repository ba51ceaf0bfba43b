# settings.py
"""
Recetario API Settings.

Pydantic settings management with environment variable support.
"""

from pydantic import Field
from pydantic_settings import BaseSettings
from typing import List, Optional


DEV_SECRET_KEY = "dev-only-change-in-production"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Relational database (PostgreSQL in production, SQLite locally)
    DATABASE_URL: str = Field(
        default="sqlite:///./recetario.db",
        description="SQLAlchemy database URL"
    )

    # JWT
    SECRET_KEY: str = Field(default=DEV_SECRET_KEY, description="JWT signing secret")
    ALGORITHM: str = Field(default="HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=60 * 24)
    BCRYPT_ROUNDS: int = Field(default=12, ge=4, le=31)

    # Accept the legacy X-User-Id header when no bearer token is sent
    ALLOW_USER_ID_HEADER: bool = Field(default=True)

    # Environment
    ENV: str = Field(default="development")
    DEBUG: bool = Field(default=True)

    # CORS
    CORS_ORIGINS: str = "https://recetario-s1gx.onrender.com,http://localhost:5173,http://localhost:3000"

    # Recommendations
    DEFAULT_RECOMMENDATION_TAKE: int = 3
    MAX_RECOMMENDATION_TAKE: int = 50

    # Sentry Error Tracking
    SENTRY_DSN: Optional[str] = None
    SENTRY_ENVIRONMENT: str = "production"
    SENTRY_TRACES_SAMPLE_RATE: float = 0.1

    @property
    def is_sqlite(self) -> bool:
        """Check if using SQLite (vs PostgreSQL)."""
        return self.DATABASE_URL.startswith("sqlite")

    def get_cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    def validate_required_settings(self) -> None:
        """Validate that required settings are configured."""
        if not self.DATABASE_URL:
            raise ValueError("DATABASE_URL must be set")
        if not self.SECRET_KEY or self.SECRET_KEY == DEV_SECRET_KEY:
            raise ValueError("SECRET_KEY must be changed from default in production")

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()

# Validate in production
if settings.ENV == "production":
    settings.validate_required_settings()
