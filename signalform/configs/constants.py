"""
Provider constants for signalform.

Contains API paths, allowed enumerations and dashboard grid bounds.
"""

from typing import Final

# API endpoints (appended to the configured API base URL)
API_PATHS: Final[dict[str, str]] = {
    "dashboard": "/v2/dashboard",
    "org_token": "/v2/organization/token",
}

DEFAULT_API_URL: Final[str] = "https://api.signalfx.com"

# Dashboard enumerations
CHARTS_RESOLUTIONS: Final[list[str]] = ["default", "low", "high", "highest"]
TIME_SPAN_TYPES: Final[list[str]] = ["relative", "absolute"]

# SignalFx relative time syntax, e.g. -15m, -1h, -7d
RELATIVE_TIME_PATTERN: Final[str] = r"^-\d+(ms|s|m|h|d|w|y)$"

# End of a relative time window
RELATIVE_TIME_END: Final[str] = "Now"

# Chart grid (12 columns wide, unbounded rows)
CHART_GRID: Final[dict[str, int]] = {
    "max_column": 11,
    "max_width": 12,
    "default_width": 12,
    "default_height": 1,
}

# Notification types and the number of comma-separated fields after the type
NOTIFICATION_FIELDS: Final[dict[str, list[str]]] = {
    "Email": ["email"],
    "PagerDuty": ["credentialId"],
    "Slack": ["credentialId", "channel"],
    "Webhook": ["credentialId", "secret", "url"],
    "Team": ["team"],
    "TeamEmail": ["team"],
    "VictorOps": ["credentialId", "routingKey"],
    "XMatters": ["credentialId"],
    "Opsgenie": ["credentialId", "credentialName", "responderName", "responderId", "responderType"],
}

# HTTP client defaults
HTTP_DEFAULTS: Final[dict[str, int]] = {
    "timeout_seconds": 30,
    "retry_attempts": 3,
    "retry_wait_seconds": 2,
}
