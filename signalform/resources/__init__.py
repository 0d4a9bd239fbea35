"""
Pulumi dynamic resources for SignalFx.

Each subpackage provides schema, payload builder, provider and resource:
- dashboard: /v2/dashboard
- org_token: /v2/organization/token
"""
