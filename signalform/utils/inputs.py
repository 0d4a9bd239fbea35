"""
Input normalization helpers.

Pulumi hands unset optional inputs to providers as None; these helpers let
schemas treat them as absent.
"""

from typing import Any


def drop_none(data: Any) -> Any:
    """
    Remove None-valued keys from a mapping.

    Args:
        data: Raw input; non-mappings are returned unchanged

    Returns:
        Mapping without None values
    """
    if not isinstance(data, dict):
        return data
    return {key: value for key, value in data.items() if value is not None}


def unique(values: list[str]) -> list[str]:
    """
    De-duplicate a list of strings, keeping first occurrences in order.

    Args:
        values: Values of a set-typed input

    Returns:
        List without duplicates
    """
    return list(dict.fromkeys(values))


def public_props(props: dict[str, Any]) -> dict[str, Any]:
    """Drop Pulumi-internal keys ("__provider", ...) from a property bag."""
    return {key: value for key, value in props.items() if not key.startswith("__")}
