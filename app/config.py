"""
Central application configuration.

Every tunable value lives here as a typed, documented field.
Any field can be overridden at runtime via an environment variable of the
same name (case-insensitive), e.g.:

    ROBOTS_CACHE_MAX_AGE_SEC=3600 uvicorn app.main:app
    export NEXT_PUBLIC_APP_URL=https://resume.crackbase.in

A `.env` file at the project root is loaded automatically.
"""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_APP_URL = "http://localhost:3000"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,   # APP_URL == app_url
        extra="ignore",         # silently drop unknown env vars
    )

    # ------------------------------------------------------------------ #
    # Public site                                                         #
    # ------------------------------------------------------------------ #
    app_url: str = Field(
        DEFAULT_APP_URL,
        validation_alias=AliasChoices("NEXT_PUBLIC_APP_URL", "APP_URL", "app_url"),
        description="Public base URL used in the sitemap reference",
    )

    # ------------------------------------------------------------------ #
    # robots.txt                                                          #
    # ------------------------------------------------------------------ #
    robots_cache_max_age_sec: int = Field(
        86_400, ge=0, description="24 h, client and shared-cache lifetime"
    )
    robots_crawl_delay_sec: int = Field(
        1, ge=0, description="Crawl-delay directive value (seconds)"
    )

    # ------------------------------------------------------------------ #
    # Firestore collections                                               #
    # ------------------------------------------------------------------ #
    analytics_collection: str = Field(
        "analytics_events", description="One document per analytics event"
    )
    email_capture_collection: str = Field(
        "email_captures", description="One document per (email, capture type)"
    )
    email_capture_source: str = Field(
        "chatbot", description="Source tag stored with every email capture"
    )

    # ------------------------------------------------------------------ #
    # Runtime                                                             #
    # ------------------------------------------------------------------ #
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"], description="Origins allowed by CORS"
    )
    log_level: str = Field("INFO", description="Root logging level")
    testing: bool = Field(
        False, description="Skip external integrations during startup (pytest)"
    )

    @field_validator("app_url", mode="before")
    @classmethod
    def _blank_app_url_uses_default(cls, value):
        # An empty NEXT_PUBLIC_APP_URL counts as unset.
        if value is None or not str(value).strip():
            return DEFAULT_APP_URL
        return str(value).strip()

    @property
    def robots_cache_control(self) -> str:
        age = self.robots_cache_max_age_sec
        return f"public, max-age={age}, s-maxage={age}"


# Single shared instance: import this everywhere.
settings = Settings()


def get_app_url() -> str:
    """Resolve the public base URL from the current environment.

    Read on every call so a changed NEXT_PUBLIC_APP_URL takes effect
    without restarting the process.
    """
    return Settings().app_url
