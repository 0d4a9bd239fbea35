"""
Dashboard dynamic provider.

Dependencies: pulumi
System role: CRUD adapter between DashboardArgs and /v2/dashboard
"""

from typing import Any

from signalform.resources.base import RestResourceProvider
from signalform.resources.dashboard.payload import build_dashboard_payload
from signalform.resources.dashboard.schema import DashboardArgs


class DashboardProvider(RestResourceProvider):
    """Create/read/update/delete SignalFx dashboards."""

    resource_type = "dashboard"
    args_model = DashboardArgs

    def build_payload(self, args: DashboardArgs) -> dict[str, Any]:
        return build_dashboard_payload(args)
