"""Readers expanding endpoint descriptors into operations and models."""
from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Iterable, List, Mapping, Protocol, Tuple

from .models import EndpointDescriptor, Model, ModelProperty, Operation, Parameter

if TYPE_CHECKING:  # pragma: no cover - import only used for typing
    from .context import DocumentationContext

_NON_IDENTIFIER = re.compile(r"[^0-9A-Za-z]+")


class OperationReader(Protocol):
    def read(self, descriptor: EndpointDescriptor, context: "DocumentationContext") -> Operation:
        ...


class ModelReader(Protocol):
    def read(
        self, descriptor: EndpointDescriptor, context: "DocumentationContext"
    ) -> Iterable[Model]:
        ...


def _strings(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(item) for item in value)


def default_operation_id(descriptor: EndpointDescriptor) -> str:
    slug = _NON_IDENTIFIER.sub("_", descriptor.path).strip("_")
    return f"{descriptor.method.lower()}_{slug}" if slug else descriptor.method.lower()


def _parameter(raw: Any) -> Parameter:
    if isinstance(raw, Parameter):
        return raw
    if isinstance(raw, str):
        return Parameter(name=raw)
    if isinstance(raw, Mapping):
        return Parameter(
            name=str(raw["name"]),
            location=str(raw.get("in", raw.get("location", "query"))),
            required=bool(raw.get("required", False)),
            type=str(raw.get("type", "string")),
            description=str(raw.get("description", "")),
        )
    raise ValueError(f"Unsupported parameter declaration: {raw!r}")


def _model_property(name: str, raw: Any, required: Iterable[str]) -> ModelProperty:
    if isinstance(raw, ModelProperty):
        return raw
    if isinstance(raw, Mapping):
        return ModelProperty(
            name=name,
            type=str(raw.get("type", "string")),
            required=bool(raw.get("required", name in required)),
            description=str(raw.get("description", "")),
        )
    return ModelProperty(name=name, type=str(raw), required=name in required)


def _model(raw: Any) -> Model:
    if isinstance(raw, Model):
        return raw
    if not isinstance(raw, Mapping) or "id" not in raw:
        raise ValueError(f"Unsupported model declaration: {raw!r}")
    required = set(_strings(raw.get("required")))
    properties = raw.get("properties") or {}
    return Model(
        id=str(raw["id"]),
        name=str(raw.get("name", raw["id"])),
        description=str(raw.get("description", "")),
        properties=tuple(
            _model_property(name, value, required) for name, value in properties.items()
        ),
    )


class DefaultOperationReader:
    """Build an :class:`Operation` from a descriptor and its metadata."""

    def read(self, descriptor: EndpointDescriptor, context: "DocumentationContext") -> Operation:
        metadata = descriptor.metadata
        return Operation(
            method=descriptor.method,
            path=context.path_provider.operation_path(descriptor.path),
            summary=descriptor.summary,
            notes=str(metadata.get("notes", descriptor.description)),
            unique_id=str(metadata.get("operation_id") or default_operation_id(descriptor)),
            position=descriptor.position,
            tags=_strings(metadata.get("tags")),
            parameters=tuple(_parameter(raw) for raw in metadata.get("parameters") or ()),
            response_model=metadata.get("response_model"),
            deprecated=bool(metadata.get("deprecated", False)),
            produces=_strings(metadata.get("produces")) or context.produces,
            consumes=_strings(metadata.get("consumes")) or context.consumes,
        )


class DefaultModelReader:
    """Collect models declared under ``metadata["models"]``."""

    def read(self, descriptor: EndpointDescriptor, context: "DocumentationContext") -> List[Model]:
        return [_model(raw) for raw in descriptor.metadata.get("models") or ()]


__all__ = [
    "DefaultModelReader",
    "DefaultOperationReader",
    "ModelReader",
    "OperationReader",
    "default_operation_id",
]
