"""12-factor configuration adapter using environment variables and a .env file."""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the relay server to")
    port: int = Field(default=8000, description="Port to bind the relay server to")
    log_level: str = Field(default="INFO", description="Root logging level")

    # Relay configuration
    upstream_origin: str = Field(
        default="https://rtddenver.justride.tickets",
        description="Origin of the ticketing service the relay forwards to",
    )
    proxy_prefix: str = Field(
        default="/api/justride",
        description="Path prefix the relay is mounted at",
    )

    # JustRide API configuration
    agency_id: str = Field(
        default="RTDDENVER", description="Agency namespace in the ticketing API"
    )
    api_base_url: str = Field(
        default="http://localhost:8000/api/justride",
        description="Base URL of the relay mount used by the API client",
    )
    history_page_size: int = Field(
        default=10, description="Number of taps fetched for the recent history list"
    )
    range_page_size: int = Field(
        default=1000, description="Number of taps fetched for a month or day range"
    )

    # Display configuration
    timezone: str = Field(
        default="America/Denver",
        description="Viewer timezone for calendar days (IANA timezone name)",
    )
    title: str = Field(default="MyRide Explorer", description="Application title")
    theme: str = Field(
        default="light",
        description="UI theme: 'light', 'dark', or 'auto' (follows system preference)",
    )

    @field_validator("proxy_prefix")
    @classmethod
    def validate_proxy_prefix(cls, v: str) -> str:
        """Validate the prefix is an absolute path without a trailing slash."""
        if not v.startswith("/") or v == "/" or v.endswith("/"):
            raise ValueError("proxy_prefix must start with '/' and must not end with '/'")
        return v

    @field_validator("upstream_origin", "api_base_url")
    @classmethod
    def validate_http_url(cls, v: str) -> str:
        """Validate URLs are http(s) and strip a trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be a valid IANA timezone name, got '{v}'") from e
        return v

    @field_validator("theme")
    @classmethod
    def validate_theme(cls, v: str) -> str:
        """Validate theme is either 'light', 'dark', or 'auto'."""
        if v.lower() not in ("light", "dark", "auto"):
            raise ValueError("theme must be either 'light', 'dark', or 'auto'")
        return v.lower()

    @field_validator("history_page_size", "range_page_size")
    @classmethod
    def validate_page_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError("page size must be at least 1")
        return v

    @property
    def tz(self) -> ZoneInfo:
        """The configured viewer timezone."""
        return ZoneInfo(self.timezone)
