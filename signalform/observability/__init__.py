"""
Observability helpers for signalform.

Components:
- configure_logging / get_logger: stdlib logging setup
"""

from signalform.observability.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
