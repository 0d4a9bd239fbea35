"""
Org token payload builder.

Maps OrgTokenArgs onto the /v2/organization/token request body, and a
remote token back onto OrgTokenArgs inputs for imports.
"""

from typing import Any

from signalform.resources.org_token.notifications import format_notification, parse_notification
from signalform.resources.org_token.schema import OrgTokenArgs, UsageLimits

# UsageLimits field prefix -> API category key
USAGE_CATEGORIES: dict[str, str] = {
    "host": "hostThreshold",
    "container": "containerThreshold",
    "custom_metrics": "customMetricThreshold",
    "high_res_metrics": "highResMetricThreshold",
}


def build_org_token_payload(args: OrgTokenArgs) -> dict[str, Any]:
    """
    Build the JSON payload used to create or update an org token.

    Args:
        args: Validated org token inputs

    Returns:
        Payload dict; "limits" only appears when a limits block is set
    """
    payload: dict[str, Any] = {
        "name": args.name,
        "description": args.description,
        "disabled": args.disabled,
        "notifications": [parse_notification(n) for n in args.notifications],
    }
    if limits := get_token_limits(args):
        payload["limits"] = limits
    return payload


def get_token_limits(args: OrgTokenArgs) -> dict[str, Any]:
    if args.dpm_limits is not None:
        limits: dict[str, Any] = {"dpmQuota": args.dpm_limits.dpm_limit}
        if args.dpm_limits.dpm_notification_threshold is not None:
            limits["dpmNotificationThreshold"] = args.dpm_limits.dpm_notification_threshold
        return limits
    if args.host_or_usage_limits is not None:
        return get_usage_limits(args.host_or_usage_limits)
    return {}


def get_usage_limits(usage: UsageLimits) -> dict[str, Any]:
    quota = {}
    notification_threshold = {}
    for prefix, category in USAGE_CATEGORIES.items():
        limit = getattr(usage, f"{prefix}_limit")
        threshold = getattr(usage, f"{prefix}_notification_threshold")
        if limit is not None:
            quota[category] = limit
        if threshold is not None:
            notification_threshold[category] = threshold

    limits: dict[str, Any] = {}
    if quota:
        limits["categoryQuota"] = quota
    if notification_threshold:
        limits["categoryNotificationThreshold"] = notification_threshold
    return limits


def get_org_token_inputs(response: dict[str, Any]) -> dict[str, Any]:
    """
    Rebuild org token inputs from a /v2/organization/token response.

    Args:
        response: Decoded token object

    Returns:
        Dict shaped like OrgTokenArgs.model_dump()
    """
    limits = response.get("limits") or {}
    return {
        "name": response.get("name"),
        "description": response.get("description") or "",
        "disabled": bool(response.get("disabled", False)),
        "notifications": [
            format_notification(notification)
            for notification in response.get("notifications") or []
        ],
        "host_or_usage_limits": get_usage_limit_inputs(limits),
        "dpm_limits": get_dpm_limit_inputs(limits),
    }


def get_dpm_limit_inputs(limits: dict[str, Any]) -> dict[str, Any] | None:
    if limits.get("dpmQuota") is None:
        return None
    return {
        "dpm_limit": limits["dpmQuota"],
        "dpm_notification_threshold": limits.get("dpmNotificationThreshold"),
    }


def get_usage_limit_inputs(limits: dict[str, Any]) -> dict[str, Any] | None:
    quota = limits.get("categoryQuota") or {}
    notification_threshold = limits.get("categoryNotificationThreshold") or {}
    if not quota and not notification_threshold:
        return None

    usage: dict[str, Any] = {}
    for prefix, category in USAGE_CATEGORIES.items():
        usage[f"{prefix}_limit"] = quota.get(category)
        usage[f"{prefix}_notification_threshold"] = notification_threshold.get(category)
    return usage
