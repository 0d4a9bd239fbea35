"""
Error taxonomy for signalform.

Every failure aborts the current operation and propagates to the Pulumi
engine, which decides whether to retry or halt.

Dependencies: pydantic
System role: Shared exception hierarchy for providers and the HTTP client
"""

from typing import Any

from pydantic import ValidationError


class SignalformError(Exception):
    """Base class for signalform errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ConfigurationError(SignalformError):
    """Raised when the provider configuration is missing or invalid."""
    pass


class ResourceValidationError(SignalformError):
    """Raised when resource inputs fail validation (before any network call)."""

    def __init__(self, message: str, errors: list[str] | None = None):
        self.errors = errors or []
        super().__init__(message)

    @classmethod
    def from_pydantic(cls, resource: str, exc: ValidationError) -> "ResourceValidationError":
        """
        Build from a pydantic ValidationError.

        Args:
            resource: Resource type name used in the message
            exc: Original pydantic error

        Returns:
            ResourceValidationError listing one message per failed field
        """
        errors = [
            f"{'.'.join(str(part) for part in error['loc']) or resource}: {error['msg']}"
            for error in exc.errors()
        ]
        return cls(f"Invalid {resource} configuration: " + "; ".join(errors), errors)


class PayloadEncodingError(SignalformError):
    """Raised when a JSON payload cannot be constructed."""
    pass


class ResourceRequestError(SignalformError):
    """Raised when a request to the SignalFx API fails."""

    def __init__(
        self,
        message: str,
        operation: str,
        url: str,
        status_code: int | None = None,
        body: Any = None,
    ):
        self.operation = operation
        self.url = url
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class ResourceNotFoundError(ResourceRequestError):
    """Raised when the remote resource does not exist (HTTP 404)."""
    pass
