"""Merge scanner output into a single documentation catalog."""
from __future__ import annotations

import contextvars
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

from ..context import DocumentationContext
from ..grouping import ListMultimap
from ..models import Documentation, Listing, ListingReference, Model, ResourceListing
from ..utils.config import concurrent_scans
from ..utils.logging import scan_scope
from .listings import ListingScanner
from .references import ListingReferenceScanner, ScanResult

logger = logging.getLogger("apidocs.scanners.documentation")

ListingsLike = Union[ListMultimap[str, Listing], Mapping[str, Iterable[Listing]], None]


def _as_multimap(listings: ListingsLike) -> ListMultimap[str, Listing]:
    if listings is None:
        return ListMultimap()
    if isinstance(listings, ListMultimap):
        return listings
    return ListMultimap.from_mapping(listings)


def _merged_models(listings: Iterable[Listing]) -> Dict[str, Model]:
    models: Dict[str, Model] = {}
    for listing in listings:
        for model_id, model in listing.models.items():
            models.setdefault(model_id, model)
    return models


def merge_listings(
    context: DocumentationContext, group: str, listings: Iterable[Listing]
) -> ListingReference:
    """Collapse every listing of *group* into one resource listing entry.

    Listings are stably sorted with the context's listing ordering; the entry's
    description is their descriptions joined one per line, and its api
    descriptions are theirs concatenated in the same order.
    """

    ordered = sorted(listings, key=context.api_listing_ordering)
    return ListingReference(
        group_name=group,
        path=context.path_provider.resource_listing_path(context.group_name, group),
        position=context.position_policy.pick(ordered),
        description="\n".join(listing.description for listing in ordered),
        apis=tuple(api for listing in ordered for api in listing.apis),
        models=_merged_models(ordered),
    )


class DocumentationScanner:
    """Run both scanners against one context and assemble the result.

    The scanners are explicit collaborators; pass stubs to control their
    output. With ``concurrent=True`` the two scans run on separate threads and
    are joined before merging.
    """

    def __init__(
        self,
        reference_scanner: Optional[ListingReferenceScanner] = None,
        listing_scanner: Optional[ListingScanner] = None,
        *,
        concurrent: Optional[bool] = None,
    ) -> None:
        self.reference_scanner = reference_scanner or ListingReferenceScanner()
        self.listing_scanner = listing_scanner or ListingScanner()
        self.concurrent = concurrent_scans() if concurrent is None else concurrent

    def _run_scanners(
        self, context: DocumentationContext
    ) -> Tuple[Optional[ScanResult], ListingsLike]:
        if not self.concurrent:
            return self.reference_scanner.scan(context), self.listing_scanner.scan(context)
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="apidocs-scan") as pool:
            references = pool.submit(
                contextvars.copy_context().run, self.reference_scanner.scan, context
            )
            listings = pool.submit(
                contextvars.copy_context().run, self.listing_scanner.scan, context
            )
            return references.result(), listings.result()

    def scan(self, context: DocumentationContext) -> Documentation:
        with scan_scope("documentation", extra={"group": context.group_name}) as scope:
            raw_references, raw_listings = self._run_scanners(context)
            result = raw_references or ScanResult.empty()
            listings = _as_multimap(raw_listings)

            listings_by_group: Dict[str, Tuple[Listing, ...]] = {}
            for group in result.groups:
                listings_by_group[group] = ()
            for group, values in listings.items():
                listings_by_group[group] = tuple(
                    sorted(values, key=context.api_listing_ordering)
                )

            entries: List[ListingReference] = [
                merge_listings(context, group, values) for group, values in listings.items()
            ]
            entries.sort(key=context.listing_reference_ordering)
            scope.increment("groups", len(entries))

            empty_groups = [group for group, values in listings_by_group.items() if not values]
            if empty_groups:
                logger.debug(
                    "documentation.groups_without_listings",
                    extra=scope.extra(groups=empty_groups),
                )

            info = context.api_info
            resource_listing = ResourceListing(
                api_version=info.version,
                apis=tuple(entries),
                security_schemes=context.security_schemes,
                info=info,
            )
            tags = tuple(
                dict.fromkeys(
                    tag
                    for values in listings_by_group.values()
                    for listing in values
                    for tag in listing.tags
                )
            )
            return Documentation(
                group_name=context.group_name,
                resource_listing=resource_listing,
                listings_by_group=listings_by_group,
                base_path=context.path_provider.application_base_path,
                produces=context.produces,
                consumes=context.consumes,
                host=context.host,
                schemes=context.protocols,
                tags=tags,
            )


__all__ = ["DocumentationScanner", "merge_listings"]
