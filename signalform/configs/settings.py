"""
SignalFx API settings.

Environment-driven defaults for the provider (token, API URL, HTTP policy).
Pulumi stack config takes precedence, see configs.environment.

Dependencies: pydantic_settings
System role: Environment configuration for the SignalFx API client
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from signalform.configs.constants import DEFAULT_API_URL, HTTP_DEFAULTS


class SignalFxSettings(BaseSettings):
    """Settings for SignalFx API access."""

    model_config = SettingsConfigDict(
        env_prefix="SFX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    auth_token: str | None = Field(
        default=None,
        description="SignalFx organization or session token",
    )
    api_url: str = Field(
        default=DEFAULT_API_URL,
        description="SignalFx API base URL",
    )
    request_timeout: int = Field(
        default=HTTP_DEFAULTS["timeout_seconds"],
        gt=0,
        description="HTTP request timeout in seconds",
    )
    retry_attempts: int = Field(
        default=HTTP_DEFAULTS["retry_attempts"],
        ge=1,
        description="Attempts per request on connection errors and timeouts",
    )
    retry_wait_seconds: int = Field(
        default=HTTP_DEFAULTS["retry_wait_seconds"],
        ge=0,
        description="Wait between retry attempts in seconds",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )


@lru_cache
def get_settings() -> SignalFxSettings:
    """
    Get SignalFx settings singleton.

    Environment variables are loaded once per process.

    Returns:
        SignalFxSettings: Settings instance
    """
    return SignalFxSettings()
