"""
Dashboard resource.

Components:
- DashboardArgs, ChartPlacement, DashboardVariable, DashboardFilter: input schemas
- build_dashboard_payload: /v2/dashboard request body
- DashboardProvider: dynamic provider
- Dashboard: Pulumi resource
"""

from signalform.resources.dashboard.payload import build_dashboard_payload
from signalform.resources.dashboard.provider import DashboardProvider
from signalform.resources.dashboard.resource import Dashboard
from signalform.resources.dashboard.schema import (
    ChartPlacement,
    DashboardArgs,
    DashboardFilter,
    DashboardVariable,
)

__all__ = [
    "ChartPlacement",
    "Dashboard",
    "DashboardArgs",
    "DashboardFilter",
    "DashboardProvider",
    "DashboardVariable",
    "build_dashboard_payload",
]
