"""
Provider configuration loader.

Loads configuration from the `signalfx` Pulumi stack config namespace,
falling back to SFX_* environment settings.
"""

import pulumi

from signalform.configs.base import ProviderConfig
from signalform.configs.settings import SignalFxSettings, get_settings
from signalform.errors import ConfigurationError


def get_config(settings: SignalFxSettings | None = None) -> ProviderConfig:
    """
    Load provider configuration.

    Args:
        settings: Environment settings (defaults to get_settings())

    Returns:
        ProviderConfig: Validated configuration object

    Raises:
        ConfigurationError: If no auth token is configured
    """
    settings = settings or get_settings()
    config = pulumi.Config("signalfx")

    auth_token = config.get("authToken") or settings.auth_token
    if not auth_token:
        raise ConfigurationError(
            "SignalFx auth token is missing; set 'signalfx:authToken' or SFX_AUTH_TOKEN"
        )

    return ProviderConfig(
        auth_token=auth_token,
        api_url=config.get("apiUrl") or settings.api_url,
        request_timeout=config.get_int("requestTimeout") or settings.request_timeout,
        retry_attempts=config.get_int("retryAttempts") or settings.retry_attempts,
        retry_wait_seconds=settings.retry_wait_seconds,
    )
