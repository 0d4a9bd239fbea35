"""
Unit tests for org token schema, notifications and payload builder.

Dependencies: pytest, pydantic, signalform.resources.org_token
System role: Org token marshaling validation
"""

import pytest
from pydantic import ValidationError

from signalform.resources.org_token import (
    OrgTokenArgs,
    build_org_token_payload,
    get_org_token_inputs,
)
from signalform.resources.org_token.notifications import (
    format_notification,
    parse_notification,
    validate_notification,
)


FULL_USAGE_LIMITS = {
    "host_limit": 100,
    "host_notification_threshold": 90,
    "container_limit": 200,
    "container_notification_threshold": 180,
    "custom_metrics_limit": 1000,
    "custom_metrics_notification_threshold": 900,
    "high_res_metrics_limit": 1000,
    "high_res_metrics_notification_threshold": 900,
}


class TestNotifications:
    """Tests for notification string validation and parsing."""

    def test_valid_email(self) -> None:
        assert validate_notification("Email,foo-alerts@example.com", "notifications") == []

    def test_unknown_type(self) -> None:
        errors = validate_notification("Carrier,pigeon", "notifications")

        assert len(errors) == 1
        assert "not a valid notification type" in errors[0]

    @pytest.mark.parametrize("value", ["Email", "Email,", "Slack,CRED", "Email,a@b.c,extra"])
    def test_wrong_arity(self, value: str) -> None:
        assert len(validate_notification(value, "notifications")) == 1

    def test_parse_email(self) -> None:
        assert parse_notification("Email,foo-alerts@example.com") == {
            "type": "Email",
            "email": "foo-alerts@example.com",
        }

    def test_parse_slack(self) -> None:
        assert parse_notification("Slack,CRED1,#ops") == {
            "type": "Slack",
            "credentialId": "CRED1",
            "channel": "#ops",
        }

    def test_format_slack(self) -> None:
        notification = {"type": "Slack", "credentialId": "CRED1", "channel": "#ops"}

        assert format_notification(notification) == "Slack,CRED1,#ops"


class TestOrgTokenArgs:
    """Tests for OrgTokenArgs schema."""

    def test_minimal_args(self) -> None:
        args = OrgTokenArgs(name="FarToken")

        assert args.description == ""
        assert args.disabled is False
        assert args.notifications == []
        assert args.host_or_usage_limits is None
        assert args.dpm_limits is None

    def test_invalid_notification(self) -> None:
        with pytest.raises(ValidationError, match="not a valid notification type"):
            OrgTokenArgs(name="FarToken", notifications=["Carrier,pigeon"])

    def test_limits_are_mutually_exclusive(self) -> None:
        with pytest.raises(ValidationError, match="conflicts"):
            OrgTokenArgs(
                name="FarToken",
                host_or_usage_limits={"host_limit": 1},
                dpm_limits={"dpm_limit": 1},
            )

    def test_negative_limit_rejected(self) -> None:
        with pytest.raises(ValidationError):
            OrgTokenArgs(name="FarToken", host_or_usage_limits={"host_limit": -1})


class TestBuildOrgTokenPayload:
    """Tests for build_org_token_payload."""

    def test_usage_limits(self) -> None:
        args = OrgTokenArgs(
            name="FarToken",
            description="Farts",
            notifications=["Email,foo-alerts@example.com"],
            host_or_usage_limits=FULL_USAGE_LIMITS,
        )

        assert build_org_token_payload(args) == {
            "name": "FarToken",
            "description": "Farts",
            "disabled": False,
            "notifications": [{"type": "Email", "email": "foo-alerts@example.com"}],
            "limits": {
                "categoryQuota": {
                    "hostThreshold": 100,
                    "containerThreshold": 200,
                    "customMetricThreshold": 1000,
                    "highResMetricThreshold": 1000,
                },
                "categoryNotificationThreshold": {
                    "hostThreshold": 90,
                    "containerThreshold": 180,
                    "customMetricThreshold": 900,
                    "highResMetricThreshold": 900,
                },
            },
        }

    def test_partial_usage_limits(self) -> None:
        """Unset limits are omitted, empty sub-objects too."""
        args = OrgTokenArgs(name="T", host_or_usage_limits={"container_limit": 5})

        assert build_org_token_payload(args)["limits"] == {
            "categoryQuota": {"containerThreshold": 5},
        }

    def test_empty_usage_limits_block(self) -> None:
        args = OrgTokenArgs(name="T", host_or_usage_limits={})

        assert "limits" not in build_org_token_payload(args)

    def test_dpm_limits(self) -> None:
        args = OrgTokenArgs(
            name="T",
            dpm_limits={"dpm_limit": 5000, "dpm_notification_threshold": 4000},
        )

        assert build_org_token_payload(args)["limits"] == {
            "dpmQuota": 5000,
            "dpmNotificationThreshold": 4000,
        }

    def test_no_limits(self) -> None:
        payload = build_org_token_payload(OrgTokenArgs(name="T", disabled=True))

        assert payload == {
            "name": "T",
            "description": "",
            "disabled": True,
            "notifications": [],
        }


class TestGetOrgTokenInputs:
    """Tests for rebuilding inputs from a remote token."""

    def test_usage_limits_token(self) -> None:
        args = OrgTokenArgs(
            name="FarToken",
            description="Farts",
            notifications=["Email,foo-alerts@example.com", "Team,TEAM1"],
            host_or_usage_limits=FULL_USAGE_LIMITS,
        )
        remote = {**build_org_token_payload(args), "secret": "s3cr3t", "lastUpdated": 5}

        assert get_org_token_inputs(remote) == args.model_dump()

    def test_dpm_limits_token(self) -> None:
        remote = {
            "name": "T",
            "disabled": True,
            "limits": {"dpmQuota": 5000},
        }

        inputs = get_org_token_inputs(remote)

        assert inputs["dpm_limits"] == {"dpm_limit": 5000, "dpm_notification_threshold": None}
        assert inputs["host_or_usage_limits"] is None
        assert inputs["description"] == ""
        assert inputs["notifications"] == []
        assert OrgTokenArgs.model_validate(inputs).disabled is True

    def test_partial_usage_limits_token(self) -> None:
        inputs = get_org_token_inputs(
            {"name": "T", "limits": {"categoryQuota": {"containerThreshold": 5}}}
        )

        assert inputs["host_or_usage_limits"]["container_limit"] == 5
        assert inputs["host_or_usage_limits"]["host_limit"] is None
        assert inputs["dpm_limits"] is None
