"""
Test suite for signalform package syntax and structure validation.

Validates:
1. All Python modules have valid syntax
2. Providers inherit from pulumi.dynamic.ResourceProvider
3. Resources inherit from pulumi.dynamic.Resource
4. Every provider implements the full CRUD surface
"""

import ast
from pathlib import Path

import pytest
from pulumi.dynamic import Resource, ResourceProvider

PACKAGE_DIR = Path(__file__).parent.parent.parent / "signalform"


class TestPackageSyntaxValidation:
    """Validate Python syntax in all signalform modules."""

    def test_all_package_files_have_valid_syntax(self):
        """All Python files in the package should parse without syntax errors."""
        errors = []

        for py_file in PACKAGE_DIR.rglob("*.py"):
            if "__pycache__" in str(py_file):
                continue

            try:
                with open(py_file, "r") as f:
                    ast.parse(f.read())
            except SyntaxError as e:
                errors.append(f"{py_file}: {e.msg} (line {e.lineno})")

        assert not errors, "Syntax errors found:\n" + "\n".join(errors)

    def test_every_subpackage_has_init(self):
        """Each directory holding modules is a package."""
        for directory in {f.parent for f in PACKAGE_DIR.rglob("*.py")}:
            if "__pycache__" in str(directory):
                continue
            assert (directory / "__init__.py").exists(), f"{directory} is missing __init__.py"


class TestProviders:
    """Validate dynamic provider classes."""

    @pytest.fixture(params=["dashboard", "org_token"])
    def provider_cls(self, request):
        if request.param == "dashboard":
            from signalform.resources.dashboard import DashboardProvider
            return DashboardProvider
        from signalform.resources.org_token import OrgTokenProvider
        return OrgTokenProvider

    def test_provider_inherits_resource_provider(self, provider_cls):
        assert issubclass(provider_cls, ResourceProvider)

    def test_provider_implements_crud(self, provider_cls):
        for method in ("check", "diff", "create", "read", "update", "delete"):
            assert callable(getattr(provider_cls, method)), f"{provider_cls.__name__}.{method}"

    def test_provider_declares_collection(self, provider_cls):
        from signalform.configs.constants import API_PATHS

        assert provider_cls.resource_type in API_PATHS
        assert provider_cls.args_model is not None


class TestResources:
    """Validate Pulumi resource classes."""

    def test_dashboard_is_dynamic_resource(self):
        from signalform.resources.dashboard import Dashboard

        assert issubclass(Dashboard, Resource)

    def test_org_token_is_dynamic_resource(self):
        from signalform.resources.org_token import OrgToken

        assert issubclass(OrgToken, Resource)
