from __future__ import annotations

from apidocs.paths import AbsolutePathProvider, RelativePathProvider, join_path


def test_join_path_collapses_separators() -> None:
    assert join_path("/", "groupName", "test") == "/groupName/test"
    assert join_path("//docs/", "/a//b/") == "/docs/a/b"
    assert join_path("") == "/"


def test_relative_provider_listing_path(monkeypatch) -> None:
    monkeypatch.delenv("APIDOCS_DOCUMENTATION_PATH", raising=False)
    provider = RelativePathProvider()

    assert provider.application_base_path == "/"
    assert provider.documentation_path == "/"
    assert provider.resource_listing_path("groupName", "test") == "/groupName/test"


def test_documentation_path_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("APIDOCS_DOCUMENTATION_PATH", "/api-docs")

    assert RelativePathProvider().resource_listing_path("g", "pets") == "/api-docs/g/pets"
    explicit = RelativePathProvider(documentation_path="/docs")
    assert explicit.resource_listing_path("g", "pets") == "/docs/g/pets"


def test_operation_path_strips_application_base() -> None:
    provider = AbsolutePathProvider("/service/")

    assert provider.application_base_path == "/service"
    assert provider.operation_path("/service/pets") == "/pets"
    assert provider.operation_path("/serviceable") == "/serviceable"
    assert RelativePathProvider("ctx").operation_path("pets//{id}") == "/pets/{id}"
