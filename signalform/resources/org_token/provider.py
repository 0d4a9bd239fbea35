"""
Org token dynamic provider.

Org tokens are addressed by name, so a rename replaces the token.

Dependencies: pulumi
System role: CRUD adapter between OrgTokenArgs and /v2/organization/token
"""

from typing import Any

from signalform.resources.base import RestResourceProvider
from signalform.resources.org_token.payload import build_org_token_payload, get_org_token_inputs
from signalform.resources.org_token.schema import OrgTokenArgs


class OrgTokenProvider(RestResourceProvider):
    """Create/read/update/delete SignalFx organization tokens."""

    resource_type = "org_token"
    args_model = OrgTokenArgs
    replace_on = ("name",)

    def build_payload(self, args: OrgTokenArgs) -> dict[str, Any]:
        return build_org_token_payload(args)

    def resource_id(self, args: OrgTokenArgs, response: dict[str, Any] | None) -> str:
        return args.name

    def response_outputs(self, response: dict[str, Any] | None) -> dict[str, Any]:
        outputs = super().response_outputs(response)
        outputs["secret"] = (response or {}).get("secret")
        return outputs

    def response_inputs(self, response: dict[str, Any]) -> dict[str, Any]:
        return get_org_token_inputs(response)
