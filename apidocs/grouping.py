"""Insertion-ordered multimap and endpoint grouping."""
from __future__ import annotations

from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    List,
    Mapping,
    Sequence,
    Tuple,
    TypeVar,
)

from .models import EndpointDescriptor

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

GroupKey = str
GroupResolver = Callable[[EndpointDescriptor], GroupKey]


class ListMultimap(Generic[K, V]):
    """A multimap that remembers key order and per-key value order.

    Keys appear in the order they were first inserted; values under a key keep
    their insertion order until :meth:`sorted_by` produces a reordered copy.
    Duplicate values are kept.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[Tuple[K, V]] = ()) -> None:
        self._entries: Dict[K, List[V]] = {}
        for key, value in entries:
            self.put(key, value)

    @classmethod
    def from_mapping(cls, mapping: Mapping[K, Iterable[V]]) -> "ListMultimap[K, V]":
        multimap: ListMultimap[K, V] = cls()
        for key, values in mapping.items():
            multimap.put_all(key, values)
        return multimap

    def put(self, key: K, value: V) -> None:
        self._entries.setdefault(key, []).append(value)

    def put_all(self, key: K, values: Iterable[V]) -> None:
        for value in values:
            self.put(key, value)

    def get(self, key: K) -> Tuple[V, ...]:
        return tuple(self._entries.get(key, ()))

    def keys(self) -> Tuple[K, ...]:
        return tuple(self._entries)

    def values(self) -> Tuple[V, ...]:
        return tuple(value for values in self._entries.values() for value in values)

    def items(self) -> Iterator[Tuple[K, Tuple[V, ...]]]:
        for key, values in self._entries.items():
            yield key, tuple(values)

    def entries(self) -> Iterator[Tuple[K, V]]:
        for key, values in self._entries.items():
            for value in values:
                yield key, value

    def as_dict(self) -> Dict[K, Tuple[V, ...]]:
        return {key: tuple(values) for key, values in self._entries.items()}

    def sorted_by(self, key: Callable[[V], Any]) -> "ListMultimap[K, V]":
        """Return a copy whose values are stably sorted per key."""

        result: ListMultimap[K, V] = ListMultimap()
        for group, values in self._entries.items():
            result.put_all(group, sorted(values, key=key))
        return result

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return sum(len(values) for values in self._entries.values())

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListMultimap):
            return NotImplemented
        return list(self._entries.items()) == list(other._entries.items())

    def __repr__(self) -> str:
        return f"ListMultimap({self.as_dict()!r})"


Grouping = ListMultimap[GroupKey, EndpointDescriptor]


def path_group_name(path: str) -> GroupKey:
    """Derive a group name from the first literal segment of *path*."""

    for segment in path.split("/"):
        segment = segment.strip()
        if not segment or segment.startswith("{"):
            continue
        return segment.lower()
    return "root"


def resolve_group(descriptor: EndpointDescriptor) -> GroupKey:
    if descriptor.group:
        return descriptor.group
    return path_group_name(descriptor.path)


def group_endpoints(
    endpoints: Sequence[EndpointDescriptor],
    resolver: GroupResolver = resolve_group,
) -> Grouping:
    grouping: Grouping = ListMultimap()
    for descriptor in endpoints:
        grouping.put(resolver(descriptor), descriptor)
    return grouping


__all__ = [
    "GroupKey",
    "GroupResolver",
    "Grouping",
    "ListMultimap",
    "group_endpoints",
    "path_group_name",
    "resolve_group",
]
