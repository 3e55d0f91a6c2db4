from __future__ import annotations

import pytest

from apidocs.context import DocumentationContext, PathSelectors, build_context
from apidocs.models import ApiInfo, ApiKey, BasicAuth, Contact, EndpointDescriptor, OAuth
from apidocs.ordering import PositionPolicy, by_position_and_path
from apidocs.paths import AbsolutePathProvider, RelativePathProvider
from apidocs.sources import StaticEndpointSource


def test_context_defaults() -> None:
    context = DocumentationContext()

    assert context.group_name == "default"
    assert context.api_info.version == "1.0"
    assert context.security_schemes == ()
    assert context.endpoints() == ()
    assert isinstance(context.path_provider, RelativePathProvider)


def test_none_fields_fall_back_to_defaults() -> None:
    context = DocumentationContext(
        group_name=None,  # type: ignore[arg-type]
        source=None,  # type: ignore[arg-type]
        api_info=None,  # type: ignore[arg-type]
        security_schemes=None,  # type: ignore[arg-type]
        path_provider=None,  # type: ignore[arg-type]
    )

    assert context.group_name == "default"
    assert context.api_info == ApiInfo()
    assert context.security_schemes == ()
    assert isinstance(context.source, StaticEndpointSource)


def test_position_policy_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("APIDOCS_POSITION_POLICY", "first")
    assert DocumentationContext().position_policy is PositionPolicy.FIRST

    monkeypatch.setenv("APIDOCS_POSITION_POLICY", "bogus")
    assert DocumentationContext().position_policy is PositionPolicy.MIN


def test_selectors_filter_endpoints() -> None:
    endpoints = [
        EndpointDescriptor("/pets"),
        EndpointDescriptor("/pets/{id}/photos"),
        EndpointDescriptor("/admin/users"),
    ]

    regex = DocumentationContext(source=endpoints, path_selector=PathSelectors.regex("/pets.*"))
    ant = DocumentationContext(source=endpoints, path_selector=PathSelectors.ant("/*/users"))
    deep = DocumentationContext(source=endpoints, path_selector=PathSelectors.ant("/pets/**"))
    nothing = DocumentationContext(source=endpoints, path_selector=PathSelectors.none())

    assert [e.path for e in regex.endpoints()] == ["/pets", "/pets/{id}/photos"]
    assert [e.path for e in ant.endpoints()] == ["/admin/users"]
    assert [e.path for e in deep.endpoints()] == ["/pets/{id}/photos"]
    assert nothing.endpoints() == ()


def test_string_source_is_rejected() -> None:
    with pytest.raises(TypeError):
        DocumentationContext(source="/pets")  # type: ignore[arg-type]


def test_build_context_reads_configuration() -> None:
    context = build_context(
        {
            "groupName": "groupName",
            "apiInfo": {
                "title": "title",
                "description": "description",
                "version": "2.1",
                "termsOfServiceUrl": "terms",
                "contact": {"name": "Ops", "email": "ops@example.com"},
                "license": "license",
                "licenseUrl": "licenseUrl",
            },
            "securitySchemes": [
                {"type": "apiKey", "name": "mykey", "keyName": "api_key", "passAs": "header"},
                {"type": "basicAuth", "name": "basic"},
                {
                    "type": "oauth2",
                    "name": "oauth",
                    "scopes": [{"scope": "read", "description": "Read access"}],
                    "grantTypes": ["implicit"],
                },
            ],
            "paths": {"regex": "/pets.*"},
            "basePath": "/service",
            "positionPolicy": "first",
            "produces": ["application/json"],
            "protocols": ["https"],
        },
        source=[EndpointDescriptor("/pets"), EndpointDescriptor("/other")],
    )

    assert context.group_name == "groupName"
    assert context.api_info.version == "2.1"
    assert context.api_info.contact == Contact(name="Ops", email="ops@example.com")
    assert context.security_schemes[0] == ApiKey("mykey", key_name="api_key", pass_as="header")
    assert isinstance(context.security_schemes[1], BasicAuth)
    oauth = context.security_schemes[2]
    assert isinstance(oauth, OAuth)
    assert oauth.type == "oauth2"
    assert oauth.scopes[0].scope == "read"
    assert [e.path for e in context.endpoints()] == ["/pets"]
    assert isinstance(context.path_provider, AbsolutePathProvider)
    assert context.path_provider.application_base_path == "/service"
    assert context.position_policy is PositionPolicy.FIRST
    assert context.produces == ("application/json",)
    assert context.protocols == ("https",)


def test_build_context_overrides_win() -> None:
    context = build_context(
        {"groupName": "configured"},
        group_name="override",
        api_listing_ordering=by_position_and_path,
    )

    assert context.group_name == "override"
    assert context.api_listing_ordering is by_position_and_path


@pytest.mark.parametrize(
    "config",
    [
        {"groupName": ""},
        {"unknown": True},
        {"securitySchemes": [{"type": "apiKey", "name": "k"}]},
        {"securitySchemes": [{"type": "digest", "name": "k"}]},
        {"paths": {"regex": ".*", "ant": "/**"}},
        {"contextPath": "/a", "basePath": "/b"},
        {"positionPolicy": "last"},
    ],
)
def test_build_context_rejects_invalid_configuration(config) -> None:
    with pytest.raises(ValueError):
        build_context(config)


def test_build_context_without_configuration_uses_defaults() -> None:
    context = build_context()

    assert context.group_name == "default"
    assert context.api_info == ApiInfo()
