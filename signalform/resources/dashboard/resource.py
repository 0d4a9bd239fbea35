"""
Dashboard Pulumi resource.

Declares a SignalFx dashboard in a Pulumi program; the Pulumi engine drives
DashboardProvider to converge the remote dashboard.
"""

from typing import Any

import pulumi
from pulumi.dynamic import Resource

from signalform.configs.base import ProviderConfig
from signalform.resources.dashboard.provider import DashboardProvider
from signalform.resources.dashboard.schema import DashboardArgs


class Dashboard(Resource):
    """
    SignalFx dashboard.

    Inputs mirror DashboardArgs; plain dicts may carry pulumi.Output values
    (e.g. a dashboard group ID from another resource).
    """

    name: pulumi.Output[str]
    dashboard_group: pulumi.Output[str]
    last_updated: pulumi.Output[Any]
    synced: pulumi.Output[bool]

    def __init__(
        self,
        resource_name: str,
        args: DashboardArgs | dict[str, Any],
        config: ProviderConfig,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        props = args.model_dump() if isinstance(args, DashboardArgs) else dict(args)
        props.setdefault("synced", True)
        props["last_updated"] = None
        super().__init__(DashboardProvider(config), resource_name, props, opts)
