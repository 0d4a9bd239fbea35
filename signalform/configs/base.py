"""
Provider configuration dataclass.

Immutable, picklable configuration handed to every dynamic provider.
"""

from dataclasses import dataclass

from signalform.configs.constants import API_PATHS, HTTP_DEFAULTS


@dataclass(frozen=True)
class ProviderConfig:
    """
    Connection settings for the SignalFx API.

    Attributes:
        auth_token: Token sent with every request
        api_url: API base URL without trailing slash
        request_timeout: HTTP timeout in seconds
        retry_attempts: Attempts per request on connection errors
        retry_wait_seconds: Wait between attempts in seconds
    """
    auth_token: str
    api_url: str
    request_timeout: int = HTTP_DEFAULTS["timeout_seconds"]
    retry_attempts: int = HTTP_DEFAULTS["retry_attempts"]
    retry_wait_seconds: int = HTTP_DEFAULTS["retry_wait_seconds"]

    def collection_url(self, resource_type: str) -> str:
        """Get the collection URL for a resource type ('dashboard', 'org_token')."""
        return f"{self.api_url.rstrip('/')}{API_PATHS[resource_type]}"

    @property
    def dashboard_url(self) -> str:
        """Get the dashboard collection URL."""
        return self.collection_url("dashboard")

    @property
    def org_token_url(self) -> str:
        """Get the organization token collection URL."""
        return self.collection_url("org_token")

    def __repr__(self) -> str:
        return f"ProviderConfig(api_url={self.api_url!r}, auth_token='***')"
