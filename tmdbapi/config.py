"""Configuration management using pydantic-settings.

All environment variables are loaded and validated here.
The API key is stored as SecretStr to prevent logging.
"""

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    Nothing is required at import time: the API key may also be passed
    directly to TMDBClient.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # TMDB API
    tmdb_api_key: SecretStr | None = Field(
        default=None,
        description="The Movie Database API key (v3 auth)",
    )

    tmdb_base_url: str = Field(
        default="https://api.themoviedb.org/3/",
        description="Versioned base URL of the TMDB REST API",
    )

    default_language: str | None = Field(
        default=None,
        description="ISO 639-1 language code sent when a call does not set one",
    )

    # Transport
    request_timeout: float = Field(
        default=15.0,
        description="HTTP timeout in seconds for the built-in transport",
        gt=0,
    )

    proxy_url: str | None = Field(
        default=None,
        description="Optional proxy URL for the built-in transport",
    )

    # Application Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    environment: str = Field(
        default="production",
        description="Environment name (development, production)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return v_upper

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is development or production."""
        allowed = {"development", "production"}
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"environment must be one of {allowed}")
        return v_lower

    @field_validator("tmdb_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensure the base URL ends with a slash so paths join cleanly."""
        return v if v.endswith("/") else f"{v}/"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    @property
    def has_api_key(self) -> bool:
        """Check if a TMDB API key is configured."""
        return self.tmdb_api_key is not None and bool(self.tmdb_api_key.get_secret_value())

    def get_safe_dict(self) -> dict[str, str | int | float | None]:
        """Get configuration as dict with sensitive values masked.

        Returns:
            Dictionary with SecretStr values shown as '***'
        """
        result = {}
        for field_name in type(self).model_fields:
            value = getattr(self, field_name)

            if isinstance(value, SecretStr):
                result[field_name] = "***"
            elif value is None:
                result[field_name] = None
            else:
                result[field_name] = value

        return result


# Global settings instance
settings = Settings()
