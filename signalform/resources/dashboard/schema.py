"""
Dashboard input schemas.

Declares accepted dashboard fields, their types, defaults and constraints.

Dependencies: pydantic
System role: Dashboard configuration contract
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from signalform.configs.constants import CHART_GRID
from signalform.utils.inputs import drop_none, unique
from signalform.resources.dashboard.validators import (
    validate_charts_resolution,
    validate_relative_time,
    validate_time_span_type,
)


class _DashboardModel(BaseModel):
    """Base for dashboard schemas: unset (None) inputs fall back to defaults."""

    @model_validator(mode="before")
    @classmethod
    def drop_unset_inputs(cls, data: Any) -> Any:
        return drop_none(data)


class ChartPlacement(_DashboardModel):
    """Chart ID and grid position of one chart in the dashboard."""

    chart_id: str = Field(..., min_length=1, description="ID of the chart to display")
    row: int = Field(
        default=0,
        ge=0,
        description="Zero-based row; the topmost row when height > 1",
    )
    column: int = Field(
        default=0,
        ge=0,
        le=CHART_GRID["max_column"],
        description="Zero-based leftmost column (0-11)",
    )
    width: int = Field(
        default=CHART_GRID["default_width"],
        ge=1,
        le=CHART_GRID["max_width"],
        description="Columns (out of 12) the chart takes up",
    )
    height: int = Field(
        default=CHART_GRID["default_height"],
        ge=1,
        description="Rows the chart takes up",
    )


class DashboardVariable(_DashboardModel):
    """Dashboard variable applied to each chart in the dashboard."""

    property: str = Field(..., min_length=1, description="Dimension or property name")
    alias: str = Field(..., min_length=1, description="Label of the variable dropdown")
    values: list[str] = Field(..., description="Values, treated as an OR filter")
    value_required: bool = Field(default=False, description="Whether a value is required")
    values_suggested: list[str] = Field(default_factory=list, description="Suggested values")
    restricted_suggestions: bool = Field(
        default=False,
        description="Only the suggested values may be selected",
    )

    @field_validator("values", "values_suggested")
    @classmethod
    def unique_values(cls, value: list[str]) -> list[str]:
        return unique(value)


class DashboardFilter(_DashboardModel):
    """Filter applied to each chart in the dashboard."""

    property: str = Field(..., min_length=1, description="Dimension or property name")
    negated: bool = Field(default=False, description="Whether this is a NOT filter")
    values: list[str] = Field(..., description="Values, treated as an OR filter")

    @field_validator("values")
    @classmethod
    def unique_values(cls, value: list[str]) -> list[str]:
        return unique(value)


class DashboardArgs(_DashboardModel):
    """Inputs of a SignalFx dashboard."""

    name: str = Field(..., min_length=1, description="Name of the dashboard")
    description: str = Field(default="", description="Description of the dashboard")
    dashboard_group: str = Field(
        ...,
        min_length=1,
        description="ID of the dashboard group that contains the dashboard",
    )
    charts_resolution: str | None = Field(
        default=None,
        description='Chart data display resolution: "default", "low", "high" or "highest"',
    )
    time_span_type: str | None = Field(
        default=None,
        description='"relative" or "absolute"; inferred from the time fields when unset',
    )
    time_range: str | None = Field(
        default=None,
        description="Relative start of the time window, SignalFx syntax (e.g. -5m, -1h)",
    )
    start_time: int | None = Field(
        default=None,
        ge=0,
        description="Absolute window start, seconds since epoch",
    )
    end_time: int | None = Field(
        default=None,
        ge=0,
        description="Absolute window end, seconds since epoch",
    )
    chart: list[ChartPlacement] = Field(default_factory=list)
    variable: list[DashboardVariable] = Field(default_factory=list)
    filter: list[DashboardFilter] = Field(default_factory=list)
    synced: bool = Field(
        default=True,
        description="False when the remote dashboard drifted; never sent to the API",
    )

    @field_validator("charts_resolution")
    @classmethod
    def check_charts_resolution(cls, value: str | None) -> str | None:
        if value is not None and (errors := validate_charts_resolution(value, "charts_resolution")):
            raise ValueError(errors[0])
        return value

    @field_validator("time_span_type")
    @classmethod
    def check_time_span_type(cls, value: str | None) -> str | None:
        if value is not None and (errors := validate_time_span_type(value, "time_span_type")):
            raise ValueError(errors[0])
        return value

    @field_validator("time_range")
    @classmethod
    def check_time_range(cls, value: str | None) -> str | None:
        if value is not None and (errors := validate_relative_time(value, "time_range")):
            raise ValueError(errors[0])
        return value

    @model_validator(mode="after")
    def check_time_window(self) -> "DashboardArgs":
        if self.time_range is not None and (
            self.start_time is not None or self.end_time is not None
        ):
            raise ValueError("time_range conflicts with start_time and end_time")
        return self

    @property
    def effective_time_span_type(self) -> str | None:
        """Time span type, inferred from the time fields when not given."""
        if self.time_span_type is not None:
            return self.time_span_type
        if self.time_range is not None:
            return "relative"
        if self.start_time is not None or self.end_time is not None:
            return "absolute"
        return None
