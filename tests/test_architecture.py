"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or application
- Application services depend on domain protocols only
- Adapters never depend on application services
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should only import the standard library and the domain itself."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("zbiorkom_departures.domain.models*")
        .should_not_import("zbiorkom_departures.adapters*")
        .should_not_import("zbiorkom_departures.application*")
        .should_not_import("zbiorkom_departures.domain.contracts*")
        .may_import("zbiorkom_departures.domain.models*")
        .may_import("zbiorkom_departures.domain.errors")
        .check("zbiorkom_departures")
    )


def test_domain_has_no_outward_dependencies() -> None:
    """Domain layer should not import adapters or application."""
    (
        archrule("domain layer", comment="Domain should not depend on outer layers")
        .match("zbiorkom_departures.domain*")
        .should_not_import("zbiorkom_departures.adapters*")
        .should_not_import("zbiorkom_departures.application*")
        .may_import("zbiorkom_departures.domain*")
        .check("zbiorkom_departures", only_direct_imports=True)
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("zbiorkom_departures.application*")
        .should_not_import("zbiorkom_departures.adapters*")
        .may_import("zbiorkom_departures.domain*")
        .may_import("zbiorkom_departures.application*")
        .check("zbiorkom_departures")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("zbiorkom_departures.adapters*")
        .should_not_import("zbiorkom_departures.application*")
        .may_import("zbiorkom_departures.domain*")
        .may_import("zbiorkom_departures.adapters*")
        .check("zbiorkom_departures", only_direct_imports=True)
    )
