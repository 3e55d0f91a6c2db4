"""Group endpoints and index them with lightweight listing references."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from ..context import DocumentationContext
from ..grouping import Grouping, ListMultimap, group_endpoints
from ..models import ListingReference
from ..utils.logging import scan_scope

logger = logging.getLogger("apidocs.scanners.references")


@dataclass(frozen=True, slots=True)
class ScanResult:
    """References per group plus the endpoints each group was built from."""

    references: Mapping[str, Tuple[ListingReference, ...]] = field(
        default_factory=dict, hash=False
    )
    resource_groups: Grouping = field(default_factory=ListMultimap, hash=False)

    def __post_init__(self) -> None:
        references = {
            group: tuple(values) for group, values in (self.references or {}).items()
        }
        object.__setattr__(self, "references", MappingProxyType(references))
        if self.resource_groups is None:
            object.__setattr__(self, "resource_groups", ListMultimap())

    @classmethod
    def empty(cls) -> "ScanResult":
        return cls()

    @property
    def groups(self) -> Tuple[str, ...]:
        ordered = dict.fromkeys(self.references)
        ordered.update(dict.fromkeys(self.resource_groups.keys()))
        return tuple(ordered)


class ListingReferenceScanner:
    """Produce one reference per distinct endpoint path within each group."""

    def scan(self, context: DocumentationContext) -> ScanResult:
        with scan_scope("listing_references", extra={"group": context.group_name}) as scope:
            endpoints = context.endpoints()
            scope.increment("endpoints", len(endpoints))
            grouping = group_endpoints(endpoints, context.group_resolver)

            references: Dict[str, Tuple[ListingReference, ...]] = {}
            for group, descriptors in grouping.items():
                by_path: Dict[str, ListingReference] = {}
                for descriptor in descriptors:
                    if descriptor.path in by_path:
                        continue
                    by_path[descriptor.path] = ListingReference(
                        group_name=group,
                        path=descriptor.path,
                        position=descriptor.position,
                        description=descriptor.description or descriptor.summary,
                    )
                references[group] = tuple(by_path.values())
                scope.increment("references", len(by_path))
                logger.debug(
                    "references.group",
                    extra=scope.extra(group=group, references=len(by_path)),
                )
            return ScanResult(references=references, resource_groups=grouping)


__all__ = ["ListingReferenceScanner", "ScanResult"]
