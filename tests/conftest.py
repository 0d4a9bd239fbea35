"""
Shared test fixtures and configuration for entire test suite.

Provides: provider configuration, mocked HTTP session and resource client
Dependencies: pytest, unittest.mock
System role: Test infrastructure and fixture management
"""

from unittest.mock import MagicMock, patch

import pytest

from signalform.configs.base import ProviderConfig


@pytest.fixture
def provider_config() -> ProviderConfig:
    """Provider configuration pointing at a fake API without retry waits."""
    return ProviderConfig(
        auth_token="test-token",
        api_url="https://api.example.com",
        request_timeout=5,
        retry_attempts=3,
        retry_wait_seconds=0,
    )


def _make_response(status_code: int = 200, body: dict | None = None, text: str = "") -> MagicMock:
    """
    Build a fake requests.Response.

    Args:
        status_code: HTTP status
        body: JSON body (None for an empty response)
        text: Raw text when body is None
    """
    response = MagicMock()
    response.status_code = status_code
    if body is None:
        response.content = text.encode("utf-8")
        response.text = text
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.content = b"{...}"
        response.text = str(body)
        response.json.return_value = body
    return response


@pytest.fixture
def mock_session() -> MagicMock:
    """Mock requests.Session with real header storage."""
    session = MagicMock()
    session.headers = {}
    session.request.return_value = _make_response(200, {})
    return session


@pytest.fixture
def mock_client():
    """
    Patch the resource client used by providers.

    Yields:
        MagicMock: The client instance every provider call receives
    """
    with patch("signalform.resources.base.SignalFxResourceClient") as client_cls:
        client = MagicMock()
        client.__enter__.return_value = client
        client.__exit__.return_value = False
        client_cls.return_value = client
        yield client


@pytest.fixture
def make_response():
    """Factory for fake requests.Response objects."""
    return _make_response
