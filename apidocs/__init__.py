"""Aggregate scanned endpoints into grouped, ordered API documentation."""

from .utils.env import load_env

# Ensure environment defaults from `.env` are available to all modules on import.
load_env()

from .context import DocumentationContext, PathSelectors, build_context  # noqa: E402
from .models import (  # noqa: E402
    ApiInfo,
    ApiKey,
    Documentation,
    EndpointDescriptor,
    Listing,
    ListingReference,
    ResourceListing,
)
from .scanners import (  # noqa: E402
    DocumentationScanner,
    ListingReferenceScanner,
    ListingScanner,
)

__all__ = [
    "ApiInfo",
    "ApiKey",
    "Documentation",
    "DocumentationContext",
    "DocumentationScanner",
    "EndpointDescriptor",
    "Listing",
    "ListingReference",
    "ListingReferenceScanner",
    "ListingScanner",
    "PathSelectors",
    "ResourceListing",
    "build_context",
]
