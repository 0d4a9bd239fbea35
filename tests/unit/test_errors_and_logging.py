"""Tests for the error taxonomy and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from signalform.errors import (
    ResourceNotFoundError,
    ResourceRequestError,
    ResourceValidationError,
    SignalformError,
)
from signalform.observability import configure_logging, get_logger
from signalform.resources.dashboard import DashboardArgs


class TestErrors:
    """Tests for signalform.errors."""

    def test_hierarchy(self) -> None:
        assert issubclass(ResourceNotFoundError, ResourceRequestError)
        assert issubclass(ResourceRequestError, SignalformError)
        assert issubclass(ResourceValidationError, SignalformError)

    def test_from_pydantic_lists_each_field(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            DashboardArgs(name="", dashboard_group="G1", charts_resolution="medium")

        error = ResourceValidationError.from_pydantic("dashboard", exc_info.value)

        assert len(error.errors) == 2
        assert error.message.startswith("Invalid dashboard configuration")
        assert any(e.startswith("name:") for e in error.errors)
        assert any(e.startswith("charts_resolution:") for e in error.errors)

    def test_request_error_context(self) -> None:
        error = ResourceRequestError(
            "boom", operation="update", url="https://api.example.com/v2/dashboard/D1", status_code=500
        )

        assert error.operation == "update"
        assert error.status_code == 500
        assert str(error) == "boom"


class TestLogging:
    """Tests for configure_logging."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_configure_logging_sets_level_and_single_handler(self) -> None:
        configure_logging("DEBUG")
        configure_logging("DEBUG")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert logging.getLogger("urllib3").level == logging.WARNING

    def test_unknown_level_defaults_to_info(self) -> None:
        configure_logging("chatty")

        assert logging.getLogger().level == logging.INFO

    def test_get_logger(self) -> None:
        assert get_logger("signalform.test").name == "signalform.test"

    def test_module_loggers_follow_package_names(self) -> None:
        from signalform.boundary import resource_client
        from signalform.resources import base

        assert base.logger.name == "signalform.resources.base"
        assert resource_client.logger.name == "signalform.boundary.resource_client"
