"""
Organization token resource.

Components:
- OrgTokenArgs, UsageLimits, DpmLimits: input schemas
- build_org_token_payload: /v2/organization/token request body
- get_org_token_inputs: inputs rebuilt from a remote token
- OrgTokenProvider: dynamic provider
- OrgToken: Pulumi resource
"""

from signalform.resources.org_token.payload import build_org_token_payload, get_org_token_inputs
from signalform.resources.org_token.provider import OrgTokenProvider
from signalform.resources.org_token.resource import OrgToken
from signalform.resources.org_token.schema import DpmLimits, OrgTokenArgs, UsageLimits

__all__ = [
    "DpmLimits",
    "OrgToken",
    "OrgTokenArgs",
    "OrgTokenProvider",
    "UsageLimits",
    "build_org_token_payload",
    "get_org_token_inputs",
]
