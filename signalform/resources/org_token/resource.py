"""
Org token Pulumi resource.

The token secret is exported as a Pulumi secret output.
"""

from typing import Any

import pulumi
from pulumi.dynamic import Resource

from signalform.configs.base import ProviderConfig
from signalform.resources.org_token.provider import OrgTokenProvider
from signalform.resources.org_token.schema import OrgTokenArgs


class OrgToken(Resource):
    """SignalFx organization access token."""

    name: pulumi.Output[str]
    secret: pulumi.Output[str]
    last_updated: pulumi.Output[Any]
    synced: pulumi.Output[bool]

    def __init__(
        self,
        resource_name: str,
        args: OrgTokenArgs | dict[str, Any],
        config: ProviderConfig,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        props = args.model_dump() if isinstance(args, OrgTokenArgs) else dict(args)
        props.setdefault("synced", True)
        props["last_updated"] = None
        props["secret"] = None
        opts = pulumi.ResourceOptions.merge(
            opts,
            pulumi.ResourceOptions(additional_secret_outputs=["secret"]),
        )
        super().__init__(OrgTokenProvider(config), resource_name, props, opts)
