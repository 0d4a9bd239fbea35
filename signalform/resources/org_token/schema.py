"""
Organization token input schemas.

Dependencies: pydantic
System role: Org token configuration contract
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from signalform.resources.org_token.notifications import validate_notification
from signalform.utils.inputs import drop_none, unique


class _OrgTokenModel(BaseModel):
    @model_validator(mode="before")
    @classmethod
    def drop_unset_inputs(cls, data: Any) -> Any:
        return drop_none(data)


class UsageLimits(_OrgTokenModel):
    """Host-based usage limits and the thresholds that trigger notifications."""

    host_limit: int | None = Field(default=None, ge=0)
    host_notification_threshold: int | None = Field(default=None, ge=0)
    container_limit: int | None = Field(default=None, ge=0)
    container_notification_threshold: int | None = Field(default=None, ge=0)
    custom_metrics_limit: int | None = Field(default=None, ge=0)
    custom_metrics_notification_threshold: int | None = Field(default=None, ge=0)
    high_res_metrics_limit: int | None = Field(default=None, ge=0)
    high_res_metrics_notification_threshold: int | None = Field(default=None, ge=0)


class DpmLimits(_OrgTokenModel):
    """Datapoints-per-minute limit."""

    dpm_limit: int = Field(..., ge=0, description="Datapoints per minute allowed")
    dpm_notification_threshold: int | None = Field(
        default=None,
        ge=0,
        description="DPM level that triggers a notification",
    )


class OrgTokenArgs(_OrgTokenModel):
    """Inputs of a SignalFx organization access token."""

    name: str = Field(..., min_length=1, description="Name of the token; also its ID")
    description: str = Field(default="", description="Description of the token")
    disabled: bool = Field(default=False, description="Whether the token is disabled")
    notifications: list[str] = Field(
        default_factory=list,
        description='Notification targets, e.g. "Email,ops@example.com"',
    )
    host_or_usage_limits: UsageLimits | None = None
    dpm_limits: DpmLimits | None = None

    @field_validator("notifications")
    @classmethod
    def check_notifications(cls, value: list[str]) -> list[str]:
        errors = [
            error
            for notification in value
            for error in validate_notification(notification, "notifications")
        ]
        if errors:
            raise ValueError("; ".join(errors))
        return unique(value)

    @model_validator(mode="after")
    def check_limits(self) -> "OrgTokenArgs":
        if self.host_or_usage_limits is not None and self.dpm_limits is not None:
            raise ValueError("host_or_usage_limits conflicts with dpm_limits")
        return self
