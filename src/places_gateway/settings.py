"""Central application settings using Pydantic."""

from fastapi import Request
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Core application
    log_level: str = Field("INFO")
    host: str = Field("0.0.0.0")
    port: int = Field(5000)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Clerk (identity provider)
    clerk_secret_key: str | None = Field(
        None,
        validation_alias=AliasChoices(
            "clerk_secret_key", "CLERK_SECRET_KEY", "VITE_CLERK_SECRET_KEY"
        ),
    )
    clerk_api_url: str = Field("https://api.clerk.dev/v1")

    # Google Places
    google_places_api_key: str | None = Field(None)
    places_api_url: str = Field("https://places.googleapis.com/v1")

    # Outbound HTTP
    upstream_timeout: float = Field(10.0, gt=0)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("clerk_secret_key", "google_places_api_key", mode="before")
    @classmethod
    def blank_as_missing(cls, v: str | None) -> str | None:
        if v is None or not str(v).strip():
            return None
        return v

    @field_validator("clerk_api_url", "places_api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    return Settings()


def get_app_settings(request: Request) -> Settings:
    """Dependency returning the settings the running app was built with."""
    return request.app.state.settings
