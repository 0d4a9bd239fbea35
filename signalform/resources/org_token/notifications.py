"""
Notification target parsing.

Org token notifications are declared as comma-separated strings,
"<Type>,<field>,...", e.g. "Email,ops@example.com" or
"Slack,<credentialId>,<channel>".
"""

from typing import Any

from signalform.configs.constants import NOTIFICATION_FIELDS


def validate_notification(value: str, key: str) -> list[str]:
    """
    Validate a notification string.

    Args:
        value: Notification string
        key: Field name for the error message

    Returns:
        Empty list when the type is known and the field count matches
    """
    parts = value.split(",")
    notification_type = parts[0]
    if notification_type not in NOTIFICATION_FIELDS:
        return [
            f"{key}: {notification_type} is not a valid notification type; "
            f"must be one of: {', '.join(NOTIFICATION_FIELDS)}"
        ]
    fields = NOTIFICATION_FIELDS[notification_type]
    if len(parts) - 1 != len(fields) or not all(parts[1:]):
        return [
            f"{key}: {value} not allowed; {notification_type} notifications "
            f"are '{','.join([notification_type, *fields])}'"
        ]
    return []


def parse_notification(value: str) -> dict[str, Any]:
    """
    Convert a validated notification string into its API object.

    Args:
        value: Notification string, e.g. "Email,ops@example.com"

    Returns:
        Notification object, e.g. {"type": "Email", "email": "ops@example.com"}
    """
    notification_type, *values = value.split(",")
    notification = {"type": notification_type}
    notification.update(zip(NOTIFICATION_FIELDS[notification_type], values))
    return notification


def format_notification(notification: dict[str, Any]) -> str:
    """Inverse of parse_notification: {"type": "Email", "email": ...} -> "Email,..."."""
    notification_type = notification["type"]
    fields = NOTIFICATION_FIELDS.get(notification_type, [])
    return ",".join([notification_type, *(str(notification.get(field, "")) for field in fields)])
