"""
Application settings loaded from environment variables.
Uses pydantic-settings for type-safe configuration.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with defaults for development."""

    # Database
    database_url: str = "sqlite:///./reservations.db"
    database_pool_timeout: int = 30
    database_connect_timeout: int = 10

    # JWT configuration. The secret key is base64 encoded; all three values
    # must be present for login and for protected routes to work.
    secret_key: str | None = None
    issuer: str | None = None
    audience: str | None = None
    jwt_expire_minutes: int = 60

    # Comma-separated list of allowed origins (empty uses default localhost list)
    allowed_origins: str = ""

    # Server
    rest_api_port: int = 8000

    # Environment
    environment: str = "development"
    debug: bool = True

    # Rate limiting for the login endpoint, in slowapi notation
    login_rate_limit: str = "5/minute"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @property
    def jwt_configured(self) -> bool:
        return bool(self.secret_key and self.issuer and self.audience)

    def validate_production_secrets(self) -> list[str]:
        """
        Validate that secrets are properly configured.
        Returns a list of validation errors. Empty list means all checks pass.
        """
        errors = []

        if not self.jwt_configured:
            errors.append("SECRET_KEY, ISSUER and AUDIENCE must all be set")
        elif len(self.secret_key) < 44:
            # 44 base64 characters encode 32 bytes
            errors.append("SECRET_KEY must encode at least 32 bytes")

        if self.environment == "production":
            if self.debug:
                errors.append("DEBUG must be False in production")

            if not self.allowed_origins:
                errors.append(
                    "ALLOWED_ORIGINS must be set in production (comma-separated list of allowed domains)"
                )

            if self.database_url.startswith("sqlite"):
                errors.append("DATABASE_URL must point to a server database in production")

        return errors


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience exports
settings = get_settings()

DATABASE_URL = settings.database_url
