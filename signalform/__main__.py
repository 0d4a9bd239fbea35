"""
Pulumi program entry point for signalform.

Declares SignalFx resources from the `signalform` stack config:

    signalform:dashboards:
      service-overview:
        name: Service overview
        dashboard_group: ABC123
        charts_resolution: high
        time_range: -1h
        chart:
          - chart_id: CHART1
            width: 6
    signalform:orgTokens:
      ingest:
        name: ingest-token
        notifications: ["Email,ops@example.com"]
        host_or_usage_limits:
          host_limit: 100
"""

from typing import Any

import pulumi
from pydantic import BaseModel, ValidationError

from signalform.configs import get_config, get_settings
from signalform.errors import ResourceValidationError
from signalform.observability import configure_logging
from signalform.resources.dashboard import Dashboard, DashboardArgs
from signalform.resources.org_token import OrgToken, OrgTokenArgs


def _load_args(model: type[BaseModel], resource: str, name: str, raw: dict[str, Any]) -> Any:
    """Validate one declared resource before Pulumi schedules any call."""
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise ResourceValidationError.from_pydantic(f"{resource} '{name}'", e) from e


def main() -> None:
    configure_logging(get_settings().log_level)
    provider_config = get_config()
    stack_config = pulumi.Config("signalform")

    dashboards = {}
    for name, raw in (stack_config.get_object("dashboards") or {}).items():
        args = _load_args(DashboardArgs, "dashboard", name, raw)
        dashboards[name] = Dashboard(name, args, provider_config)

    org_tokens = {}
    for name, raw in (stack_config.get_object("orgTokens") or {}).items():
        args = _load_args(OrgTokenArgs, "org token", name, raw)
        org_tokens[name] = OrgToken(name, args, provider_config)

    pulumi.export("dashboard_ids", {name: dashboard.id for name, dashboard in dashboards.items()})
    pulumi.export("org_token_ids", {name: token.id for name, token in org_tokens.items()})


main()
