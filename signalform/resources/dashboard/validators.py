"""
Dashboard field validators.

Pure functions of (value, key) returning a list of error messages; an empty
list means the value is accepted.

Dependencies: re (stdlib)
System role: Allow-list and grammar checks run before any network call
"""

import re

from signalform.configs.constants import (
    CHARTS_RESOLUTIONS,
    RELATIVE_TIME_PATTERN,
    TIME_SPAN_TYPES,
)

_RELATIVE_TIME_RE = re.compile(RELATIVE_TIME_PATTERN)


def _validate_allowed(value: str, key: str, allowed: list[str]) -> list[str]:
    if value in allowed:
        return []
    return [f"{key}: {value} not allowed; must be one of: {', '.join(allowed)}"]


def validate_charts_resolution(value: str, key: str) -> list[str]:
    """
    Validate chart resolution against the allowed words.

    Args:
        value: Resolution value ("default", "low", "high", "highest")
        key: Field name for the error message

    Returns:
        Empty list when allowed, otherwise exactly one error naming the allowed set
    """
    return _validate_allowed(value, key, CHARTS_RESOLUTIONS)


def validate_time_span_type(value: str, key: str) -> list[str]:
    """Validate time span type is "relative" or "absolute"."""
    return _validate_allowed(value, key, TIME_SPAN_TYPES)


def validate_relative_time(value: str, key: str) -> list[str]:
    """
    Validate a SignalFx relative time string.

    Args:
        value: Time string such as "-5m" or "-1h"
        key: Field name for the error message

    Returns:
        Empty list when the string matches the relative time syntax
    """
    if _RELATIVE_TIME_RE.match(value):
        return []
    return [f"{key}: {value} not allowed; use SignalFx relative time syntax (e.g. -5m, -1h)"]
