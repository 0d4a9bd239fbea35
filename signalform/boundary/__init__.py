"""
External service boundaries.

Components:
- SignalFxResourceClient: CRUD transport for the SignalFx REST API
"""

from signalform.boundary.resource_client import SignalFxResourceClient

__all__ = [
    "SignalFxResourceClient",
]
