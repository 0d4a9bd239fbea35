"""
signalform: SignalFx resources as Pulumi dynamic providers.

This package converges SignalFx state to declared configuration:
- Dashboards (charts, variables, filters, time window)
- Organization tokens (notifications, usage and DPM limits)

Pulumi decides when to check, diff, create, read, update or delete; the
providers marshal inputs into API payloads and call the SignalFx REST API.
"""
