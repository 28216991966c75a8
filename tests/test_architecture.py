"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters
- Application services don't depend on adapters
- Adapters can depend on domain
- No circular dependencies
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import any other modules except standard library and domain itself."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("njt_departures.domain.models*")
        .should_not_import("njt_departures.adapters*")
        .should_not_import("njt_departures.application*")
        .should_not_import("njt_departures.domain.ports*")
        .should_not_import("njt_departures.domain.errors")
        .may_import("njt_departures.domain.models*")
        .check("njt_departures")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("njt_departures.domain.ports*")
        .should_not_import("njt_departures.adapters*")
        .should_not_import("njt_departures.application*")
        .may_import("njt_departures.domain.ports*")
        .may_import("njt_departures.domain.models*")
        .check("njt_departures")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("njt_departures.application*")
        .should_not_import("njt_departures.adapters*")
        .should_not_import("njt_departures.cli")
        .may_import("njt_departures.domain*")
        .may_import("njt_departures.application*")
        .check("njt_departures")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("njt_departures.adapters*")
        .should_not_import("njt_departures.application*")
        .should_not_import("njt_departures.cli")
        .may_import("njt_departures.domain*")
        .may_import("njt_departures.adapters*")
        .check("njt_departures", only_direct_imports=True)
    )


def test_no_circular_dependencies_in_domain() -> None:
    """Domain layer should not have circular dependencies."""
    (
        archrule("domain no cycles", comment="Domain layer should not have circular dependencies")
        .match("njt_departures.domain*")
        .should_not_import("njt_departures.adapters*")
        .should_not_import("njt_departures.application*")
        .may_import("njt_departures.domain*")
        .check("njt_departures", only_direct_imports=True)
    )


def test_html_decoding_stays_out_of_the_console_adapter() -> None:
    """Console formatting works on domain objects and never parses pages itself."""
    (
        archrule("console independence", comment="Console output should not parse HTML")
        .match("njt_departures.adapters.console*")
        .should_not_import("njt_departures.adapters.njt_html*")
        .may_import("njt_departures.domain*")
        .check("njt_departures")
    )
