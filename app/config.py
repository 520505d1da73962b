"""
Application configuration using Pydantic Settings.
Loads environment variables and provides type-safe configuration.
"""

from typing import List, Optional
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from pathlib import Path

# Get the base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    environment: str = Field(default="development", description="Current environment")
    debug: bool = Field(default=False, description="Debug mode")

    # Service
    service_name: str = Field(default="Luna Massage Email Service")
    api_version: str = Field(default="1.0.0")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)

    # Outbound mail (Gmail App Password by default)
    email_user: Optional[str] = Field(default=None, description="Sender mailbox and SMTP login")
    email_app_password: Optional[str] = Field(default=None, description="SMTP app password")
    smtp_host: str = Field(default="smtp.gmail.com")
    smtp_port: int = Field(default=587)
    smtp_timeout: float = Field(default=30.0, description="Socket timeout handed to the SMTP client")
    email_from_name: str = Field(default="Luna Massage")
    support_email: str = Field(default="info@lunamassage.com")
    test_email: Optional[str] = Field(default=None, description="Recipient for the /test endpoint")
    verify_transport_on_startup: bool = Field(default=True)

    # CORS
    cors_origins: str | List[str] = Field(default="*")
    cors_allow_credentials: bool = Field(default=True)

    # Rate Limiting
    rate_limit_enabled: bool = Field(default=True)
    rate_limit_requests: int = Field(default=50)
    rate_limit_period: int = Field(default=15 * 60)  # seconds
    rate_limit_paths: str | List[str] = Field(default="/send-confirmation")
    redis_url: Optional[str] = Field(default=None)

    @field_validator("cors_origins", "rate_limit_paths", mode="before")
    @classmethod
    def parse_comma_separated(cls, v):
        """Parse comma-separated strings into lists."""
        if v is None:
            return []
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment.lower() == "testing"

    @property
    def default_test_recipient(self) -> Optional[str]:
        """Recipient used by the synthetic test booking."""
        return self.test_email or self.email_user

    def validate_environment(self) -> None:
        """Validate that all required environment variables are set."""
        required_vars = [
            "email_user",
            "email_app_password",
        ]

        missing_vars = []
        for var in required_vars:
            if not getattr(self, var, None):
                missing_vars.append(var.upper())

        if missing_vars:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing_vars)}"
            )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Use this function to get settings throughout the application.
    """
    settings = Settings()

    # Validate environment in production
    if settings.is_production:
        settings.validate_environment()

    return settings


# Create a global settings instance
settings = get_settings()
