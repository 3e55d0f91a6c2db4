from __future__ import annotations

from apidocs.context import DocumentationContext, PathSelectors
from apidocs.models import EndpointDescriptor, ListingReference
from apidocs.scanners.references import ListingReferenceScanner, ScanResult


def _endpoints() -> list[EndpointDescriptor]:
    return [
        EndpointDescriptor("/pets", "GET", group="pets", position=2, summary="List pets"),
        EndpointDescriptor("/pets", "POST", group="pets", position=1),
        EndpointDescriptor("/pets/{id}", "GET", group="pets", description="One pet"),
        EndpointDescriptor("/stores", "GET"),
        EndpointDescriptor("/internal/health", "GET", group="ops"),
    ]


def test_references_are_grouped_and_deduplicated_by_path() -> None:
    context = DocumentationContext(source=_endpoints())

    result = ListingReferenceScanner().scan(context)

    assert result.groups == ("pets", "stores", "ops")
    assert result.references["pets"] == (
        ListingReference(group_name="pets", path="/pets", position=2, description="List pets"),
        ListingReference(group_name="pets", path="/pets/{id}", position=0, description="One pet"),
    )
    assert [ref.path for ref in result.references["stores"]] == ["/stores"]
    assert len(result.resource_groups.get("pets")) == 3


def test_selector_excludes_groups_entirely() -> None:
    context = DocumentationContext(
        source=_endpoints(), path_selector=PathSelectors.regex("/(pets|stores).*")
    )

    result = ListingReferenceScanner().scan(context)

    assert "ops" not in result.references
    assert "ops" not in result.resource_groups


def test_scan_is_a_pure_function_of_the_context() -> None:
    context = DocumentationContext(source=_endpoints())
    scanner = ListingReferenceScanner()

    assert scanner.scan(context) == scanner.scan(context)


def test_empty_result() -> None:
    result = ScanResult.empty()

    assert result.groups == ()
    assert dict(result.references) == {}
    assert ScanResult(references=None, resource_groups=None).groups == ()  # type: ignore[arg-type]
