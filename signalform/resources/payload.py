"""
Payload encoding shared by all resource types.

Dependencies: json (stdlib)
System role: JSON encoding of request bodies
"""

import json
from typing import Any

from signalform.errors import PayloadEncodingError


def encode_payload(payload: dict[str, Any]) -> bytes:
    """
    Encode a payload as a JSON request body.

    Args:
        payload: Fully built payload

    Returns:
        UTF-8 encoded JSON

    Raises:
        PayloadEncodingError: If the payload is not JSON serializable
    """
    try:
        return json.dumps(payload, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise PayloadEncodingError(f"Failed creating json payload: {e}") from e


def decode_payload(body: bytes) -> dict[str, Any]:
    """Decode a JSON request body produced by encode_payload."""
    return json.loads(body.decode("utf-8"))
