"""
SignalFx REST resource client.

Performs the HTTP side of every resource operation: POST to a collection,
GET/PUT/DELETE on `{collection}/{id}`. Connection errors and timeouts are
retried; HTTP error statuses are not.

Dependencies: requests, tenacity
System role: Shared CRUD transport for all dynamic providers
"""

from typing import Any

import requests
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from signalform.configs.base import ProviderConfig
from signalform.errors import ResourceNotFoundError, ResourceRequestError
from signalform.observability import get_logger

logger = get_logger(__name__)

RETRYABLE_EXCEPTIONS = (requests.ConnectionError, requests.Timeout)


class SignalFxResourceClient:
    """HTTP client for SignalFx resource collections."""

    def __init__(
        self,
        config: ProviderConfig,
        session: requests.Session | None = None,
    ) -> None:
        """
        Initialize client for the configured API.

        Args:
            config: Provider configuration (token, timeout, retry policy)
            session: Optional pre-built session (tests inject a mock)
        """
        self._config = config
        self._session = session or requests.Session()
        self._session.headers.update({
            "X-SF-Token": config.auth_token,
            "Authorization": f"Bearer {config.auth_token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        })

    def close(self) -> None:
        """Release pooled connections."""
        self._session.close()

    def __enter__(self) -> "SignalFxResourceClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def create(self, url: str, payload: bytes) -> dict[str, Any] | None:
        """POST a payload to a collection URL and return the created resource."""
        return self._request("create", "POST", url, payload)

    def read(self, url: str) -> dict[str, Any] | None:
        """GET a resource URL."""
        return self._request("read", "GET", url)

    def update(self, url: str, payload: bytes) -> dict[str, Any] | None:
        """PUT a full payload to a resource URL."""
        return self._request("update", "PUT", url, payload)

    def delete(self, url: str) -> None:
        """DELETE a resource URL."""
        self._request("delete", "DELETE", url)

    def _request(
        self,
        operation: str,
        method: str,
        url: str,
        payload: bytes | None = None,
    ) -> dict[str, Any] | None:
        """
        Send one request, retrying transport failures.

        Args:
            operation: Operation name used in logs and errors
            method: HTTP method
            url: Target URL
            payload: Encoded JSON body

        Returns:
            Decoded JSON body, or None when the response has no body

        Raises:
            ResourceNotFoundError: On HTTP 404
            ResourceRequestError: On transport failure or any other non-2xx status
        """
        logger.info(f"{operation} {method} {url}")
        if payload is not None:
            logger.debug(f"{operation} payload: {payload.decode('utf-8', errors='replace')}")

        retrying = Retrying(
            retry=retry_if_exception_type(RETRYABLE_EXCEPTIONS),
            stop=stop_after_attempt(self._config.retry_attempts),
            wait=wait_fixed(self._config.retry_wait_seconds),
            before_sleep=lambda retry_state: logger.warning(
                f"{operation} {url} - Retry {retry_state.attempt_number}/"
                f"{self._config.retry_attempts} after {retry_state.outcome.exception()!r}"
            ),
            reraise=True,
        )

        try:
            response = retrying(
                self._session.request,
                method,
                url,
                data=payload,
                timeout=self._config.request_timeout,
            )
        except requests.RequestException as e:
            raise ResourceRequestError(
                f"Failed to {operation} {url}: {e}",
                operation=operation,
                url=url,
            ) from e

        if response.status_code == 404:
            raise ResourceNotFoundError(
                f"Failed to {operation} {url}: resource not found",
                operation=operation,
                url=url,
                status_code=404,
                body=response.text,
            )
        if not 200 <= response.status_code < 300:
            raise ResourceRequestError(
                f"Failed to {operation} {url}: HTTP {response.status_code}: {response.text}",
                operation=operation,
                url=url,
                status_code=response.status_code,
                body=response.text,
            )

        logger.debug(f"{operation} {url} -> HTTP {response.status_code}")

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ResourceRequestError(
                f"Failed to {operation} {url}: response is not valid JSON",
                operation=operation,
                url=url,
                status_code=response.status_code,
                body=response.text,
            ) from e
