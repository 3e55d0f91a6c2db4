"""Sort keys used to order listings, references, descriptions and operations.

Orderings are plain key functions handed to :func:`sorted`, so ties always
keep encounter order. Callers holding a two-argument comparator can adapt it
with :func:`comparator`.
"""
from __future__ import annotations

from enum import Enum
from functools import cmp_to_key
from typing import Any, Callable, Sequence, TypeVar

from .models import ApiDescription, Listing, ListingReference, Operation

T = TypeVar("T")

Ordering = Callable[[T], Any]


def by_position(item: Any) -> int:
    return item.position


def by_position_and_path(item: Any) -> tuple[int, str]:
    return item.position, item.path


def by_path(item: Any) -> str:
    return item.path


def by_position_and_method(operation: Operation) -> tuple[int, str]:
    return operation.position, operation.method


def comparator(cmp: Callable[[T, T], int]) -> Ordering[T]:
    """Adapt a ``cmp(a, b) -> int`` function into a sort key."""

    return cmp_to_key(cmp)


class Defaults:
    """Orderings applied when a context does not override them."""

    @staticmethod
    def listing_reference_ordering() -> Ordering[ListingReference]:
        return by_position

    @staticmethod
    def api_listing_ordering() -> Ordering[Listing]:
        return by_position

    @staticmethod
    def api_description_ordering() -> Ordering[ApiDescription]:
        return by_path

    @staticmethod
    def operation_ordering() -> Ordering[Operation]:
        return by_position_and_method


class PositionPolicy(str, Enum):
    """How a merged group entry picks its own position."""

    MIN = "min"
    FIRST = "first"

    def pick(self, ordered: Sequence[Any]) -> int:
        """Return the position for *ordered* items, already sorted."""

        if not ordered:
            return 0
        if self is PositionPolicy.FIRST:
            return ordered[0].position
        return min(item.position for item in ordered)


__all__ = [
    "Defaults",
    "Ordering",
    "PositionPolicy",
    "by_path",
    "by_position",
    "by_position_and_method",
    "by_position_and_path",
    "comparator",
]
