"""Immutable documentation records produced by the scanners."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple


def _frozen_mapping(value: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    if isinstance(value, MappingProxyType):
        return value
    return MappingProxyType(dict(value or {}))


def _frozen_tuple(value: Any) -> Tuple[Any, ...]:
    if value is None:
        return ()
    if isinstance(value, (str, bytes)):
        return (value,)
    return tuple(value)


@dataclass(frozen=True, slots=True)
class EndpointDescriptor:
    """One discoverable operation as reported by an endpoint source."""

    path: str
    method: str = "GET"
    group: Optional[str] = None
    position: int = 0
    resource: Optional[str] = None
    summary: str = ""
    description: str = ""
    metadata: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(self, "position", int(self.position or 0))
        object.__setattr__(self, "metadata", _frozen_mapping(self.metadata))


@dataclass(frozen=True, slots=True)
class Parameter:
    name: str
    location: str = "query"
    required: bool = False
    type: str = "string"
    description: str = ""


@dataclass(frozen=True, slots=True)
class Operation:
    """Expanded documentation for one verb on one path."""

    method: str
    path: str
    summary: str = ""
    notes: str = ""
    unique_id: str = ""
    position: int = 0
    tags: Tuple[str, ...] = ()
    parameters: Tuple[Parameter, ...] = ()
    response_model: Optional[str] = None
    deprecated: bool = False
    produces: Tuple[str, ...] = ()
    consumes: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ApiDescription:
    """The operations documented under a single path."""

    path: str
    description: str = ""
    operations: Tuple[Operation, ...] = ()


@dataclass(frozen=True, slots=True)
class ModelProperty:
    name: str
    type: str = "string"
    required: bool = False
    description: str = ""


@dataclass(frozen=True, slots=True)
class Model:
    id: str
    name: str = ""
    description: str = ""
    properties: Tuple[ModelProperty, ...] = ()


@dataclass(frozen=True, slots=True)
class Listing:
    """The full documentation payload produced for one resource of a group."""

    group_name: str
    position: int = 0
    description: str = ""
    apis: Tuple[ApiDescription, ...] = ()
    models: Mapping[str, Model] = field(default_factory=dict, hash=False)
    resource: Optional[str] = None
    base_path: str = "/"
    resource_path: str = ""
    produces: Tuple[str, ...] = ()
    consumes: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "apis", _frozen_tuple(self.apis))
        object.__setattr__(self, "models", _frozen_mapping(self.models))
        object.__setattr__(self, "produces", _frozen_tuple(self.produces))
        object.__setattr__(self, "consumes", _frozen_tuple(self.consumes))
        object.__setattr__(self, "tags", _frozen_tuple(self.tags))

    @property
    def path(self) -> str:
        """Path of the first api description, else the group's resource path."""

        if self.apis:
            return self.apis[0].path
        return self.resource_path

    @property
    def operations(self) -> Tuple[Operation, ...]:
        return tuple(operation for api in self.apis for operation in api.operations)


@dataclass(frozen=True, slots=True)
class ListingReference:
    """A lightweight pointer to a listing: where it lives and where it sorts.

    Merged per-group entries of a :class:`ResourceListing` are references too;
    they additionally carry the flattened api descriptions and models of every
    listing merged into them.
    """

    group_name: str
    path: str
    position: int = 0
    description: str = ""
    apis: Tuple[ApiDescription, ...] = ()
    models: Mapping[str, Model] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "apis", _frozen_tuple(self.apis))
        object.__setattr__(self, "models", _frozen_mapping(self.models))

    @property
    def operations(self) -> Tuple[Operation, ...]:
        return tuple(operation for api in self.apis for operation in api.operations)


@dataclass(frozen=True, slots=True)
class Contact:
    name: str = ""
    url: str = ""
    email: str = ""


@dataclass(frozen=True, slots=True)
class ApiInfo:
    """Static metadata describing the documented API."""

    title: str = "Api Documentation"
    description: str = "Api Documentation"
    version: str = "1.0"
    terms_of_service_url: str = "urn:tos"
    contact: Contact | str = field(default_factory=Contact)
    license: str = "Apache 2.0"
    license_url: str = "http://www.apache.org/licenses/LICENSE-2.0"


DEFAULT_API_INFO = ApiInfo()


@dataclass(frozen=True, slots=True)
class SecurityScheme:
    name: str

    @property
    def type(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class ApiKey(SecurityScheme):
    key_name: str = ""
    pass_as: str = "header"

    @property
    def type(self) -> str:
        return "apiKey"


@dataclass(frozen=True, slots=True)
class BasicAuth(SecurityScheme):
    @property
    def type(self) -> str:
        return "basicAuth"


@dataclass(frozen=True, slots=True)
class AuthorizationScope:
    scope: str
    description: str = ""


@dataclass(frozen=True, slots=True)
class OAuth(SecurityScheme):
    scopes: Tuple[AuthorizationScope, ...] = ()
    grant_types: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "scopes", _frozen_tuple(self.scopes))
        object.__setattr__(self, "grant_types", _frozen_tuple(self.grant_types))

    @property
    def type(self) -> str:
        return "oauth2"


@dataclass(frozen=True, slots=True)
class ResourceListing:
    """Top-level index over every merged group of a documentation scan."""

    api_version: str = DEFAULT_API_INFO.version
    apis: Tuple[ListingReference, ...] = ()
    security_schemes: Tuple[SecurityScheme, ...] = ()
    info: ApiInfo = DEFAULT_API_INFO

    def __post_init__(self) -> None:
        object.__setattr__(self, "apis", _frozen_tuple(self.apis))
        object.__setattr__(self, "security_schemes", _frozen_tuple(self.security_schemes))
        if self.info is None:
            object.__setattr__(self, "info", DEFAULT_API_INFO)


@dataclass(frozen=True, slots=True)
class Documentation:
    """The catalog returned by a documentation scan."""

    group_name: str
    resource_listing: ResourceListing = field(default_factory=ResourceListing)
    listings_by_group: Mapping[str, Tuple[Listing, ...]] = field(
        default_factory=dict, hash=False
    )
    base_path: str = "/"
    produces: Tuple[str, ...] = ()
    consumes: Tuple[str, ...] = ()
    host: str = ""
    schemes: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        listings = {
            group: _frozen_tuple(values)
            for group, values in (self.listings_by_group or {}).items()
        }
        object.__setattr__(self, "listings_by_group", MappingProxyType(listings))
        object.__setattr__(self, "produces", _frozen_tuple(self.produces))
        object.__setattr__(self, "consumes", _frozen_tuple(self.consumes))
        object.__setattr__(self, "schemes", _frozen_tuple(self.schemes))
        object.__setattr__(self, "tags", _frozen_tuple(self.tags))

    @property
    def info(self) -> ApiInfo:
        return self.resource_listing.info

    @property
    def security_schemes(self) -> Tuple[SecurityScheme, ...]:
        return self.resource_listing.security_schemes


__all__ = [
    "ApiDescription",
    "ApiInfo",
    "ApiKey",
    "AuthorizationScope",
    "BasicAuth",
    "Contact",
    "DEFAULT_API_INFO",
    "Documentation",
    "EndpointDescriptor",
    "Listing",
    "ListingReference",
    "Model",
    "ModelProperty",
    "OAuth",
    "Operation",
    "Parameter",
    "ResourceListing",
    "SecurityScheme",
]
