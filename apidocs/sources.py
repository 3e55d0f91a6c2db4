"""Endpoint source interfaces."""
from __future__ import annotations

from typing import Iterable, Protocol, Tuple, Union

from .models import EndpointDescriptor


class EndpointSource(Protocol):
    """Yields the endpoint descriptors a scan documents."""

    def endpoints(self) -> Iterable[EndpointDescriptor]:
        ...


class StaticEndpointSource:
    """An endpoint source backed by a fixed sequence of descriptors."""

    def __init__(self, endpoints: Iterable[EndpointDescriptor] = ()) -> None:
        self._endpoints: Tuple[EndpointDescriptor, ...] = tuple(endpoints)

    def endpoints(self) -> Tuple[EndpointDescriptor, ...]:
        return self._endpoints

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StaticEndpointSource):
            return NotImplemented
        return self._endpoints == other._endpoints

    def __hash__(self) -> int:
        return hash(self._endpoints)

    def __repr__(self) -> str:
        return f"StaticEndpointSource({len(self._endpoints)} endpoints)"


SourceLike = Union[EndpointSource, Iterable[EndpointDescriptor], None]


def as_source(source: SourceLike) -> EndpointSource:
    """Accept an endpoint source, a plain iterable of descriptors, or ``None``."""

    if source is None:
        return StaticEndpointSource()
    if callable(getattr(source, "endpoints", None)):
        return source  # type: ignore[return-value]
    if isinstance(source, (str, bytes)):
        raise TypeError("Endpoint source must not be a string.")
    try:
        return StaticEndpointSource(source)  # type: ignore[arg-type]
    except TypeError:
        raise TypeError(
            f"Expected an endpoint source or iterable of descriptors, got {type(source).__name__}."
        ) from None


__all__ = ["EndpointSource", "SourceLike", "StaticEndpointSource", "as_source"]
