"""Build full listings for every resource of every group."""
from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence, Tuple

from ..context import DocumentationContext
from ..grouping import ListMultimap, group_endpoints
from ..models import ApiDescription, EndpointDescriptor, Listing, Model, Operation
from ..readers import DefaultModelReader, DefaultOperationReader, ModelReader, OperationReader
from ..utils.logging import scan_scope

logger = logging.getLogger("apidocs.scanners.listings")


def _ordered_union(values: Sequence[Tuple[str, ...]]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(item for group in values for item in group))


def _listing_description(resource: Optional[str], group: str, descriptors: Sequence[EndpointDescriptor]) -> str:
    for descriptor in descriptors:
        text = descriptor.metadata.get("resource_description")
        if text:
            return str(text)
    return resource or group


class ListingScanner:
    """Expand each resource of a group into a :class:`Listing`.

    Endpoints declaring the same ``resource`` share a listing; endpoints
    without one share a single listing per group. Listings of one group are
    returned unmerged, in the order their resources were first seen.
    """

    def __init__(
        self,
        operation_reader: Optional[OperationReader] = None,
        model_reader: Optional[ModelReader] = None,
    ) -> None:
        self.operation_reader = operation_reader or DefaultOperationReader()
        self.model_reader = model_reader or DefaultModelReader()

    def scan(self, context: DocumentationContext) -> ListMultimap[str, Listing]:
        listings: ListMultimap[str, Listing] = ListMultimap()
        with scan_scope("listings", extra={"group": context.group_name}) as scope:
            grouping = group_endpoints(context.endpoints(), context.group_resolver)
            for group, descriptors in grouping.items():
                resources: ListMultimap[Optional[str], EndpointDescriptor] = ListMultimap(
                    (descriptor.resource, descriptor) for descriptor in descriptors
                )
                for resource, members in resources.items():
                    listings.put(group, self._listing(context, group, resource, members))
                scope.increment("listings", len(resources.keys()))
                logger.debug(
                    "listings.group",
                    extra=scope.extra(group=group, listings=len(resources.keys())),
                )
        return listings

    def _listing(
        self,
        context: DocumentationContext,
        group: str,
        resource: Optional[str],
        descriptors: Sequence[EndpointDescriptor],
    ) -> Listing:
        by_path: ListMultimap[str, EndpointDescriptor] = ListMultimap(
            (descriptor.path, descriptor) for descriptor in descriptors
        )
        models: Dict[str, Model] = {}
        apis = []
        for path, members in by_path.items():
            operations: list[Operation] = []
            for descriptor in members:
                operations.append(self.operation_reader.read(descriptor, context))
                for model in self.model_reader.read(descriptor, context):
                    models.setdefault(model.id, model)
            apis.append(
                ApiDescription(
                    path=context.path_provider.operation_path(path),
                    description=members[0].description,
                    operations=tuple(sorted(operations, key=context.operation_ordering)),
                )
            )
        apis.sort(key=context.api_description_ordering)

        all_operations = [operation for api in apis for operation in api.operations]
        tags = _ordered_union([operation.tags for operation in all_operations]) or (group,)
        return Listing(
            group_name=group,
            position=min(descriptor.position for descriptor in descriptors),
            description=_listing_description(resource, group, descriptors),
            apis=tuple(apis),
            models=models,
            resource=resource,
            base_path=context.path_provider.application_base_path,
            resource_path=context.path_provider.resource_listing_path(context.group_name, group),
            produces=_ordered_union([operation.produces for operation in all_operations]),
            consumes=_ordered_union([operation.consumes for operation in all_operations]),
            tags=tags,
        )


__all__ = ["ListingScanner"]
