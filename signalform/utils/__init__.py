"""
Utility functions for signalform providers.

Provides input normalization shared by the resource schemas.
"""

from signalform.utils.inputs import drop_none, public_props, unique

__all__ = [
    "drop_none",
    "public_props",
    "unique",
]
