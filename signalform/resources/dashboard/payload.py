"""
Dashboard payload builder.

Maps DashboardArgs onto the /v2/dashboard request body.

Dependencies: signalform.resources.dashboard.schema
System role: Dashboard configuration marshaling
"""

from typing import Any

from signalform.configs.constants import RELATIVE_TIME_END
from signalform.resources.dashboard.schema import DashboardArgs


def build_dashboard_payload(args: DashboardArgs) -> dict[str, Any]:
    """
    Build the JSON payload used to create or update a dashboard.

    Args:
        args: Validated dashboard inputs

    Returns:
        Payload dict; "filters" and "charts" only appear when non-empty
    """
    payload: dict[str, Any] = {
        "name": args.name,
        "description": args.description,
        "groupId": args.dashboard_group,
    }

    all_filters: dict[str, Any] = {}
    if sources := get_dashboard_filters(args):
        all_filters["sources"] = sources
    if variables := get_dashboard_variables(args):
        all_filters["variables"] = variables
    if time := get_dashboard_time(args):
        all_filters["time"] = time
    if all_filters:
        payload["filters"] = all_filters

    if charts := get_dashboard_charts(args):
        payload["charts"] = charts

    if args.charts_resolution:
        payload["chartDensity"] = args.charts_resolution.upper()

    return payload


def get_dashboard_time(args: DashboardArgs) -> dict[str, Any]:
    """Time window: relative start with "Now" end, or absolute bounds in milliseconds."""
    time: dict[str, Any] = {}
    if args.effective_time_span_type == "relative":
        if args.time_range:
            time["start"] = args.time_range
            time["end"] = RELATIVE_TIME_END
    elif args.effective_time_span_type == "absolute":
        if args.start_time is not None:
            time["start"] = args.start_time * 1000
        if args.end_time is not None:
            time["end"] = args.end_time * 1000
    return time


def get_dashboard_charts(args: DashboardArgs) -> list[dict[str, Any]]:
    return [
        {
            "chartId": chart.chart_id,
            "row": chart.row,
            "column": chart.column,
            "width": chart.width,
            "height": chart.height,
        }
        for chart in args.chart
    ]


def get_dashboard_variables(args: DashboardArgs) -> list[dict[str, Any]]:
    return [
        {
            "property": variable.property,
            "alias": variable.alias,
            "value": list(variable.values),
            "required": variable.value_required,
            "preferredSuggestions": list(variable.values_suggested),
            "restricted": variable.restricted_suggestions,
        }
        for variable in args.variable
    ]


def get_dashboard_filters(args: DashboardArgs) -> list[dict[str, Any]]:
    return [
        {
            "property": source.property,
            "NOT": source.negated,
            "value": list(source.values),
        }
        for source in args.filter
    ]
