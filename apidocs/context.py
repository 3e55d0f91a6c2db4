"""Scan configuration: which endpoints to document and how to order them."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from .grouping import GroupResolver, resolve_group
from .models import (
    DEFAULT_API_INFO,
    ApiInfo,
    ApiKey,
    AuthorizationScope,
    BasicAuth,
    Contact,
    EndpointDescriptor,
    OAuth,
    SecurityScheme,
)
from .ordering import Defaults, Ordering, PositionPolicy
from .paths import AbsolutePathProvider, PathProvider, RelativePathProvider
from .sources import EndpointSource, SourceLike, StaticEndpointSource, as_source
from .utils.config import DEFAULT_GROUP_NAME, position_policy_name
from .validators import validate_config

PathSelector = Callable[[str], bool]


def _ant_pattern(pattern: str) -> re.Pattern[str]:
    parts: list[str] = []
    index = 0
    while index < len(pattern):
        char = pattern[index]
        if pattern.startswith("**", index):
            parts.append(".*")
            index += 2
            continue
        if char == "*":
            parts.append("[^/]*")
        elif char == "?":
            parts.append("[^/]")
        else:
            parts.append(re.escape(char))
        index += 1
    return re.compile("".join(parts))


class PathSelectors:
    """Factories for predicates over endpoint paths."""

    @staticmethod
    def any() -> PathSelector:
        return lambda path: True

    @staticmethod
    def none() -> PathSelector:
        return lambda path: False

    @staticmethod
    def regex(pattern: str) -> PathSelector:
        compiled = re.compile(pattern)
        return lambda path: compiled.fullmatch(path) is not None

    @staticmethod
    def ant(pattern: str) -> PathSelector:
        compiled = _ant_pattern(pattern)
        return lambda path: compiled.fullmatch(path) is not None


_ANY_PATH = PathSelectors.any()


@dataclass(frozen=True, slots=True)
class DocumentationContext:
    """Everything a single documentation scan needs.

    ``None`` for any optional field falls back to its default, so partially
    populated contexts never fail a scan.
    """

    group_name: str = DEFAULT_GROUP_NAME
    source: EndpointSource = field(default_factory=StaticEndpointSource)
    path_selector: PathSelector = _ANY_PATH
    api_info: ApiInfo = DEFAULT_API_INFO
    security_schemes: Tuple[SecurityScheme, ...] = ()
    listing_reference_ordering: Ordering[Any] = field(
        default_factory=Defaults.listing_reference_ordering
    )
    api_listing_ordering: Ordering[Any] = field(default_factory=Defaults.api_listing_ordering)
    api_description_ordering: Ordering[Any] = field(
        default_factory=Defaults.api_description_ordering
    )
    operation_ordering: Ordering[Any] = field(default_factory=Defaults.operation_ordering)
    path_provider: PathProvider = field(default_factory=RelativePathProvider)
    position_policy: PositionPolicy = field(
        default_factory=lambda: PositionPolicy(position_policy_name())
    )
    group_resolver: GroupResolver = resolve_group
    produces: Tuple[str, ...] = ()
    consumes: Tuple[str, ...] = ()
    host: str = ""
    protocols: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        defaults: Dict[str, Any] = {
            "group_name": self.group_name or DEFAULT_GROUP_NAME,
            "source": as_source(self.source),
            "path_selector": self.path_selector or _ANY_PATH,
            "api_info": self.api_info or DEFAULT_API_INFO,
            "security_schemes": tuple(self.security_schemes or ()),
            "listing_reference_ordering": self.listing_reference_ordering
            or Defaults.listing_reference_ordering(),
            "api_listing_ordering": self.api_listing_ordering or Defaults.api_listing_ordering(),
            "api_description_ordering": self.api_description_ordering
            or Defaults.api_description_ordering(),
            "operation_ordering": self.operation_ordering or Defaults.operation_ordering(),
            "path_provider": self.path_provider or RelativePathProvider(),
            "position_policy": PositionPolicy(self.position_policy or position_policy_name()),
            "group_resolver": self.group_resolver or resolve_group,
            "produces": tuple(self.produces or ()),
            "consumes": tuple(self.consumes or ()),
            "host": self.host or "",
            "protocols": tuple(self.protocols or ()),
        }
        for name, value in defaults.items():
            object.__setattr__(self, name, value)

    def endpoints(self) -> Tuple[EndpointDescriptor, ...]:
        """Endpoints from the source whose path passes the selector."""

        return tuple(
            descriptor
            for descriptor in self.source.endpoints()
            if self.path_selector(descriptor.path)
        )


def _contact(raw: Any) -> Contact | str:
    if isinstance(raw, Mapping):
        return Contact(
            name=raw.get("name", ""), url=raw.get("url", ""), email=raw.get("email", "")
        )
    return raw


def _api_info(raw: Mapping[str, Any]) -> ApiInfo:
    return ApiInfo(
        title=raw.get("title", DEFAULT_API_INFO.title),
        description=raw.get("description", DEFAULT_API_INFO.description),
        version=raw.get("version", DEFAULT_API_INFO.version),
        terms_of_service_url=raw.get(
            "termsOfServiceUrl", DEFAULT_API_INFO.terms_of_service_url
        ),
        contact=_contact(raw.get("contact", DEFAULT_API_INFO.contact)),
        license=raw.get("license", DEFAULT_API_INFO.license),
        license_url=raw.get("licenseUrl", DEFAULT_API_INFO.license_url),
    )


def _security_scheme(raw: Mapping[str, Any]) -> SecurityScheme:
    kind = raw["type"]
    if kind == "apiKey":
        return ApiKey(raw["name"], key_name=raw["keyName"], pass_as=raw.get("passAs", "header"))
    if kind == "basicAuth":
        return BasicAuth(raw["name"])
    return OAuth(
        raw["name"],
        scopes=tuple(
            AuthorizationScope(scope["scope"], scope.get("description", ""))
            for scope in raw.get("scopes", ())
        ),
        grant_types=tuple(raw.get("grantTypes", ())),
    )


def _path_selector(raw: Mapping[str, Any]) -> PathSelector:
    if "regex" in raw:
        return PathSelectors.regex(raw["regex"])
    if "ant" in raw:
        return PathSelectors.ant(raw["ant"])
    if raw.get("none"):
        return PathSelectors.none()
    return PathSelectors.any()


def _path_provider(raw: Mapping[str, Any]) -> PathProvider:
    documentation_path = raw.get("documentationPath")
    if "basePath" in raw:
        return AbsolutePathProvider(raw["basePath"], documentation_path=documentation_path)
    return RelativePathProvider(
        raw.get("contextPath", ""), documentation_path=documentation_path
    )


def build_context(
    config: Optional[Mapping[str, Any]] = None,
    *,
    source: SourceLike = None,
    **overrides: Any,
) -> DocumentationContext:
    """Build a context from a plain configuration mapping.

    The mapping is validated against ``docket.v1.json``; failures raise
    ``ValueError`` listing every schema violation. Keyword *overrides* are
    passed straight to :class:`DocumentationContext` and win over the mapping
    (for example custom orderings, which have no mapping representation).
    """

    data = validate_config(config or {})

    kwargs: Dict[str, Any] = {
        "group_name": data.get("groupName", DEFAULT_GROUP_NAME),
        "source": source,
        "path_selector": _path_selector(data.get("paths", {})),
        "api_info": _api_info(data["apiInfo"]) if "apiInfo" in data else DEFAULT_API_INFO,
        "security_schemes": tuple(
            _security_scheme(raw) for raw in data.get("securitySchemes", ())
        ),
        "path_provider": _path_provider(data),
        "produces": tuple(data.get("produces", ())),
        "consumes": tuple(data.get("consumes", ())),
        "host": data.get("host", ""),
        "protocols": tuple(data.get("protocols", ())),
    }
    if "positionPolicy" in data:
        kwargs["position_policy"] = PositionPolicy(data["positionPolicy"])
    kwargs.update(overrides)
    return DocumentationContext(**kwargs)


__all__ = ["DocumentationContext", "PathSelector", "PathSelectors", "build_context"]
